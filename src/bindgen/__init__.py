"""Typed TypeScript bindings for HTML templates and CSS class names."""

from .build import BuildReport, build, run_build
from .codegen import TemplateError
from .config import BindgenConfig, CliOverrides, load_effective_config

__all__ = [
    "BindgenConfig",
    "BuildReport",
    "CliOverrides",
    "TemplateError",
    "build",
    "load_effective_config",
    "run_build",
]
