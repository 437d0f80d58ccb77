"""Incremental build driver, discovery and stale output removal."""

from .discovery import CSS_EXTENSION, HTML_EXTENSION, discover_inputs, pair_stylesheets
from .driver import (
    MODULE_SUFFIX,
    STYLESHEET_SUFFIX,
    BuildDriver,
    build,
    read_existing_marker,
    run_build,
    source_marker,
    write_artifact,
)
from .models import BuildFailure, BuildReport, InputFile, OutputPaths
from .reconcile import remove_stale

__all__ = [
    "BuildDriver",
    "BuildFailure",
    "BuildReport",
    "CSS_EXTENSION",
    "HTML_EXTENSION",
    "InputFile",
    "MODULE_SUFFIX",
    "OutputPaths",
    "STYLESHEET_SUFFIX",
    "build",
    "discover_inputs",
    "pair_stylesheets",
    "read_existing_marker",
    "remove_stale",
    "run_build",
    "source_marker",
    "write_artifact",
]
