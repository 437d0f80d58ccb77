"""Removal of generated files that the current run did not produce."""

from __future__ import annotations

import os
from collections.abc import Set
from pathlib import Path


def remove_stale(output_dir: Path, keep: Set[Path]) -> list[Path]:
    """Delete files under output_dir missing from keep, then empty directories.

    Subdirectories are handled before the directory itself, so a directory
    emptied by the pass is removed too, the output root included. Returns the
    removed paths in traversal order.
    """
    removed: list[Path] = []
    if output_dir.is_dir():
        _remove_stale_in(output_dir, keep, removed)
    return removed


def _remove_stale_in(directory: Path, keep: Set[Path], removed: list[Path]) -> None:
    with os.scandir(directory) as entries:
        ordered_entries = sorted(entries, key=lambda item: item.name)
    for entry in ordered_entries:
        entry_path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            _remove_stale_in(entry_path, keep, removed)
        elif entry_path not in keep:
            entry_path.unlink(missing_ok=True)
            removed.append(entry_path)
    if not any(directory.iterdir()):
        directory.rmdir()
        removed.append(directory)
