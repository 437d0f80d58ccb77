"""Structured JSONL build log utilities."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

BUILD_ACTIONS = ("written", "cached", "failed", "removed")


@dataclass(slots=True, frozen=True)
class BuildEvent:
    """Outcome of one source file or one removed output during a build run."""

    timestamp: str
    run_id: str
    path: str
    action: str
    outputs: tuple[str, ...] = ()
    error: str | None = None


def utc_timestamp(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision."""
    value = moment if moment is not None else datetime.now(tz=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonlBuildLogger:
    """Append-only JSONL build logger and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: BuildEvent) -> None:
        """Append an event as one JSON object per line."""
        self.extend([event])

    def extend(self, events: list[BuildEvent]) -> None:
        """Append several events with a single open of the log file."""
        for event in events:
            if event.action not in BUILD_ACTIONS:
                raise ValueError(f"Unknown build action '{event.action}'.")
        if not events:
            return
        # Reconciliation may remove an empty output root holding the log.
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            for event in events:
                handle.write(json.dumps(asdict(event), sort_keys=True))
                handle.write("\n")

    def read(self, since: str | None = None, limit: int = 50) -> list[dict[str, object]]:
        """Read recent events, optionally filtered by timestamp lower bound."""
        if limit < 1:
            return []
        entries: list[dict[str, object]] = []
        if not self._path.exists():
            return entries
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    continue
                if since is not None:
                    ts = record.get("timestamp")
                    if not isinstance(ts, str) or ts < since:
                        continue
                entries.append(record)
        if len(entries) <= limit:
            return entries
        return entries[-limit:]
