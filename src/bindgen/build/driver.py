"""Incremental build orchestration.

Each HTML source maps to ``<name>.ts`` in the mirrored output tree, plus the
optional ``<name>.css.ts`` class constants and ``<name>.css`` embedded
stylesheet. The first line of ``<name>.ts`` records the source modification
time; an identical marker means the source is skipped without being read.
Sources are processed in batches of ``workers`` concurrent tasks, and once all
batches finish every output the run did not keep is removed.
"""

from __future__ import annotations

import asyncio
import uuid
from datetime import UTC, datetime
from pathlib import Path

from bindgen.build.discovery import HTML_EXTENSION, discover_inputs, pair_stylesheets
from bindgen.build.models import BuildFailure, BuildReport, InputFile, OutputPaths
from bindgen.build.reconcile import remove_stale
from bindgen.codegen import CLASS_MODULE_SUFFIX, compile_source, read_marker
from bindgen.config import BindgenConfig
from bindgen.logging import BuildEvent, JsonlBuildLogger, utc_timestamp

MODULE_SUFFIX = ".ts"
STYLESHEET_SUFFIX = ".css"


def source_marker(source: InputFile, stylesheet: InputFile | None = None) -> str:
    """Return the cache marker for a source and its paired stylesheet."""
    mtime_ns = source.path.stat().st_mtime_ns
    if stylesheet is not None:
        mtime_ns = max(mtime_ns, stylesheet.path.stat().st_mtime_ns)
    moment = datetime.fromtimestamp(mtime_ns // 1_000_000 / 1000, tz=UTC)
    return utc_timestamp(moment)


def read_existing_marker(path: Path) -> str | None:
    """Read only the first line of a generated module and return its marker."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            first_line = handle.readline()
    except (FileNotFoundError, UnicodeDecodeError):
        return None
    return read_marker(first_line)


def write_artifact(path: Path, text: str) -> None:
    """Write a whole artifact through a temporary file and an atomic rename."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    tmp.replace(path)


class BuildDriver:
    """Runs one incremental build for a merged configuration."""

    def __init__(self, config: BindgenConfig, logger: JsonlBuildLogger | None = None) -> None:
        self._config = config
        self._input_dir = config.input_dir.resolve()
        self._output_dir = config.output_dir.resolve()
        self._logger = logger
        self._run_id = uuid.uuid4().hex
        self._ensured: set[Path] = set()
        self._keep: set[Path] = set()
        self._written: list[str] = []
        self._cached: list[str] = []
        self._failures: list[BuildFailure] = []
        self._events: list[BuildEvent] = []

    async def run(self) -> BuildReport:
        """Compile stale sources, then remove outputs with no current source."""
        if not self._input_dir.is_dir():
            raise FileNotFoundError(f"Input directory does not exist: {self._input_dir}")
        await asyncio.to_thread(self._output_dir.mkdir, parents=True, exist_ok=True)
        if self._logger is not None:
            self._keep.add(self._logger.path.resolve())

        inputs = await asyncio.to_thread(discover_inputs, self._input_dir, (self._output_dir,))
        stylesheets = pair_stylesheets(inputs)
        pending = [source for source in inputs if source.extension == HTML_EXTENSION]
        batch_size = max(1, self._config.workers)
        while pending:
            batch = pending[-batch_size:]
            del pending[-batch_size:]
            await asyncio.gather(
                *(self._process(source, stylesheets.get(source.path)) for source in batch)
            )

        removed = await asyncio.to_thread(remove_stale, self._output_dir, frozenset(self._keep))
        removed_paths = [self._relative_output(path) for path in removed]
        for path in removed_paths:
            self._log(path, "removed")
        if self._logger is not None:
            await asyncio.to_thread(self._logger.extend, self._events)
        return BuildReport(
            run_id=self._run_id,
            written=tuple(sorted(self._written)),
            cached=tuple(sorted(self._cached)),
            removed=tuple(removed_paths),
            failures=tuple(sorted(self._failures, key=lambda item: item.path)),
        )

    def output_paths(self, source: InputFile) -> OutputPaths:
        """Mirror a source path into the output tree."""
        relative_dir = source.directory.relative_to(self._input_dir)
        base = self._output_dir / relative_dir
        return OutputPaths(
            module=base / f"{source.name}{MODULE_SUFFIX}",
            class_module=base / f"{source.name}{CLASS_MODULE_SUFFIX}",
            stylesheet=base / f"{source.name}{STYLESHEET_SUFFIX}",
        )

    async def _process(self, source: InputFile, stylesheet: InputFile | None) -> None:
        outputs = self.output_paths(source)
        relative = source.path.relative_to(self._input_dir).as_posix()
        try:
            await self._compile(source, stylesheet, outputs, relative)
        except Exception as error:
            # Recorded per source, RecursionError on deep markup included. Previous
            # artifacts stay in place; the marker mismatch retries next run.
            self._keep.update(outputs.all())
            message = f"{type(error).__name__}: {error}"
            self._failures.append(BuildFailure(path=relative, error=message))
            self._log(relative, "failed", error=message)

    async def _compile(
        self,
        source: InputFile,
        stylesheet: InputFile | None,
        outputs: OutputPaths,
        relative: str,
    ) -> None:
        marker = await asyncio.to_thread(source_marker, source, stylesheet)
        existing = await asyncio.to_thread(read_existing_marker, outputs.module)
        if existing == marker:
            self._keep.update(outputs.all())
            self._cached.append(relative)
            self._log(relative, "cached")
            return

        directory = outputs.module.parent
        if directory not in self._ensured:
            self._ensured.add(directory)
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)

        html = await asyncio.to_thread(source.path.read_text, encoding="utf-8")
        css = None
        if stylesheet is not None:
            css = await asyncio.to_thread(stylesheet.path.read_text, encoding="utf-8")
        compiled = compile_source(html, marker, source.name, css)

        artifacts: list[tuple[Path, str]] = []
        if compiled.class_module is not None:
            artifacts.append((outputs.class_module, compiled.class_module))
        if compiled.stylesheet is not None:
            artifacts.append((outputs.stylesheet, compiled.stylesheet))
        # The module goes last so its marker only lands once companions exist.
        artifacts.append((outputs.module, compiled.module))
        for path, text in artifacts:
            await asyncio.to_thread(write_artifact, path, text)
            self._keep.add(path)

        self._written.append(relative)
        outputs_written = [self._relative_output(path) for path, _ in artifacts]
        self._log(relative, "written", outputs=outputs_written)

    def _relative_output(self, path: Path) -> str:
        if path == self._output_dir:
            return "."
        return path.relative_to(self._output_dir).as_posix()

    def _log(
        self,
        path: str,
        action: str,
        outputs: list[str] | None = None,
        error: str | None = None,
    ) -> None:
        if self._logger is None:
            return
        self._events.append(
            BuildEvent(
                timestamp=utc_timestamp(),
                run_id=self._run_id,
                path=path,
                action=action,
                outputs=tuple(sorted(outputs or ())),
                error=error,
            )
        )


async def build(config: BindgenConfig) -> BuildReport:
    """Run one incremental build, logging to the configured audit log if any."""
    logger = None
    if config.audit_log is not None:
        logger = await asyncio.to_thread(JsonlBuildLogger, config.audit_log)
    return await BuildDriver(config, logger=logger).run()


def run_build(config: BindgenConfig) -> BuildReport:
    """Synchronous wrapper around ``build`` for scripts and the CLI."""
    return asyncio.run(build(config))
