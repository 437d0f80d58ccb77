"""Identifier synthesis for generated bindings."""

from __future__ import annotations

import re
from typing import Final

_IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def to_camel(identifier: str) -> str:
    """Convert a hyphen-delimited identifier to camelCase."""
    segments = identifier.split("-")
    output = [segments[0].lower()]
    for segment in segments[1:]:
        output.append(segment[:1].upper() + segment[1:].lower())
    return "".join(output)


def is_identifier(name: str) -> bool:
    """Return True when name can be used verbatim as a TypeScript binding."""
    return _IDENTIFIER_PATTERN.fullmatch(name) is not None
