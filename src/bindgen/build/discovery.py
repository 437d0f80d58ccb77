"""Deterministic discovery of HTML templates and their stylesheets."""

from __future__ import annotations

import os
from pathlib import Path

from bindgen.build.models import InputFile

HTML_EXTENSION = ".html"
CSS_EXTENSION = ".css"
SOURCE_EXTENSIONS = (HTML_EXTENSION, CSS_EXTENSION)


def discover_inputs(input_dir: Path, excluded_dirs: tuple[Path, ...] = ()) -> list[InputFile]:
    """Walk input_dir recursively and return sources sorted by relative path."""
    root = input_dir.resolve()
    excluded = {path.resolve() for path in excluded_dirs}
    found: list[tuple[str, InputFile]] = []
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        with os.scandir(current) as entries:
            ordered_entries = sorted(entries, key=lambda item: item.name)
        for entry in reversed(ordered_entries):
            full_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                if full_path in excluded:
                    continue
                stack.append(full_path)
                continue
            if not entry.is_file():
                continue
            suffix = full_path.suffix
            if suffix not in SOURCE_EXTENSIONS:
                continue
            source = InputFile(directory=full_path.parent, name=full_path.stem, extension=suffix)
            found.append((full_path.relative_to(root).as_posix(), source))
    found.sort(key=lambda item: item[0])
    return [source for _, source in found]


def pair_stylesheets(inputs: list[InputFile]) -> dict[Path, InputFile]:
    """Map each HTML source path to its same-directory, same-name CSS file."""
    stylesheets = {
        (source.directory, source.name): source
        for source in inputs
        if source.extension == CSS_EXTENSION
    }
    pairs: dict[Path, InputFile] = {}
    for source in inputs:
        if source.extension != HTML_EXTENSION:
            continue
        stylesheet = stylesheets.get((source.directory, source.name))
        if stylesheet is not None:
            pairs[source.path] = stylesheet
    return pairs
