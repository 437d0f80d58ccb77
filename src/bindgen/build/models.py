"""Typed models for build state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class InputFile:
    """One discovered source file."""

    directory: Path
    name: str
    extension: str

    @property
    def path(self) -> Path:
        """Return the absolute source path."""
        return self.directory / f"{self.name}{self.extension}"


@dataclass(slots=True, frozen=True)
class OutputPaths:
    """Artifact locations generated for one HTML source."""

    module: Path
    class_module: Path
    stylesheet: Path

    def all(self) -> tuple[Path, ...]:
        """Return every candidate artifact path."""
        return (self.module, self.class_module, self.stylesheet)


@dataclass(slots=True, frozen=True)
class BuildFailure:
    """Error recorded for one source file without aborting the run."""

    path: str
    error: str


@dataclass(slots=True, frozen=True)
class BuildReport:
    """Deterministic summary of one build run."""

    run_id: str
    written: tuple[str, ...]
    cached: tuple[str, ...]
    removed: tuple[str, ...]
    failures: tuple[BuildFailure, ...]

    @property
    def ok(self) -> bool:
        """Return True when every source compiled."""
        return not self.failures

    def summary(self) -> str:
        """Return a one-line count summary."""
        return (
            f"written={len(self.written)} cached={len(self.cached)} "
            f"removed={len(self.removed)} failed={len(self.failures)}"
        )
