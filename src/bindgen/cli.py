"""Command line entrypoint."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bindgen.build import run_build
from bindgen.config import CliOverrides, load_effective_config


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for build configuration."""
    parser = argparse.ArgumentParser(
        prog="bindgen",
        description="Generate typed TypeScript bindings for HTML templates and CSS classes.",
    )
    parser.add_argument("--project-root", required=False, default=".")
    parser.add_argument("--input-dir", required=False, default=None)
    parser.add_argument("--output-dir", required=False, default=None)
    parser.add_argument("--workers", type=int, required=False, default=None)
    parser.add_argument("--audit-log", required=False, default=None)
    return parser


def _optional_path(value: str | None) -> Path | None:
    return Path(value).resolve() if value is not None else None


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for one build run."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    overrides = CliOverrides(
        input_dir=_optional_path(args.input_dir),
        output_dir=_optional_path(args.output_dir),
        workers=args.workers,
        audit_log=_optional_path(args.audit_log),
    )
    try:
        config = load_effective_config(Path(args.project_root), overrides)
    except ValueError as error:
        print(f"Invalid configuration: {error}", file=sys.stderr)
        return 2
    try:
        report = run_build(config)
    except FileNotFoundError as error:
        print(str(error), file=sys.stderr)
        return 2
    for failure in report.failures:
        print(f"{failure.path}: {failure.error}", file=sys.stderr)
    print(report.summary())
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
