"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "bindgen.toml"
MAX_WORKERS_CAP = 256
DEFAULT_OUTPUT_DIR_NAME = "generated"

_BUILD_KEYS = frozenset({"input_dir", "output_dir", "workers", "audit_log"})


@dataclass(slots=True, frozen=True)
class BindgenConfig:
    """Fully merged build configuration."""

    input_dir: Path
    output_dir: Path
    workers: int
    audit_log: Path | None = None

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot for diagnostics."""
        return {
            "input_dir": str(self.input_dir),
            "output_dir": str(self.output_dir),
            "workers": self.workers,
            "audit_log": str(self.audit_log) if self.audit_log is not None else None,
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    input_dir: Path | None = None
    output_dir: Path | None = None
    workers: int | None = None
    audit_log: Path | None = None


def default_workers() -> int:
    """Return detected parallelism, falling back to one worker."""
    return os.cpu_count() or 1


def default_config(project_root: Path) -> BindgenConfig:
    """Build default config for a given project root."""
    resolved_root = project_root.resolve()
    return BindgenConfig(
        input_dir=resolved_root,
        output_dir=resolved_root / DEFAULT_OUTPUT_DIR_NAME,
        workers=min(default_workers(), MAX_WORKERS_CAP),
    )


def load_project_config_file(project_root: Path) -> dict[str, object]:
    """Load optional bindgen.toml from the project root."""
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_path(value: object, name: str, project_root: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config field '{name}' must be a non-empty string.")
    path = Path(value)
    if not path.is_absolute():
        path = project_root / path
    return path.resolve()


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value


def merge_config(
    base: BindgenConfig,
    payload: dict[str, object],
    overrides: CliOverrides,
    project_root: Path,
) -> BindgenConfig:
    """Merge defaults, project config, then CLI/startup overrides."""
    build_payload = _get_table(payload, "build")
    unknown = sorted(set(build_payload) - _BUILD_KEYS)
    if unknown:
        raise ValueError(f"Config field 'build.{unknown[0]}' is not supported.")

    input_dir = _optional_path(build_payload.get("input_dir"), "build.input_dir", project_root)
    output_dir = _optional_path(build_payload.get("output_dir"), "build.output_dir", project_root)
    audit_log = _optional_path(build_payload.get("audit_log"), "build.audit_log", project_root)
    workers = _optional_positive_int_with_cap(
        build_payload.get("workers"),
        "build.workers",
        base.workers,
        MAX_WORKERS_CAP,
    )
    merged = BindgenConfig(
        input_dir=input_dir or base.input_dir,
        output_dir=output_dir or base.output_dir,
        workers=workers,
        audit_log=audit_log or base.audit_log,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: BindgenConfig, overrides: CliOverrides) -> BindgenConfig:
    """Apply startup overrides at highest precedence and validate the result."""
    workers = _optional_positive_int_with_cap(
        overrides.workers,
        "overrides.workers",
        config.workers,
        MAX_WORKERS_CAP,
    )
    input_dir = (overrides.input_dir or config.input_dir).resolve()
    output_dir = (overrides.output_dir or config.output_dir).resolve()
    audit_log = overrides.audit_log or config.audit_log
    if input_dir == output_dir or input_dir.is_relative_to(output_dir):
        raise ValueError(
            "Config field 'output_dir' must not contain input_dir; "
            "stale output removal would delete sources."
        )
    return BindgenConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        workers=workers,
        audit_log=audit_log.resolve() if audit_log is not None else None,
    )


def load_effective_config(
    project_root: Path, overrides: CliOverrides | None = None
) -> BindgenConfig:
    """Load effective config using merge order defaults -> project config -> overrides."""
    resolved_root = project_root.resolve()
    base = default_config(resolved_root)
    payload = load_project_config_file(resolved_root)
    return merge_config(base, payload, overrides or CliOverrides(), resolved_root)
