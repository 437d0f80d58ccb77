"""Class literal extraction from CSS text without a CSS parser.

The scan walks rules from the end of the text towards the start. For each
rule it takes the selector region between the previous ``}`` and the rule's
``{`` and reads every ``.``-prefixed run of ``[A-Za-z0-9_-]`` characters,
again from last to first. The resulting order is part of the output contract.
"""

from __future__ import annotations

import re
from typing import Final

from bindgen.codegen.models import ClassBinding
from bindgen.codegen.naming import to_camel

_CLASS_RUN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]*")
_LEADING_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]")


def scan_css_classes(text: str) -> list[str]:
    """Return distinct class literals referenced by selectors, in scan order."""
    classes: dict[str, None] = {}
    offset = len(text)
    while True:
        open_pos = text.rfind("{", 0, offset)
        if open_pos == -1:
            break
        close_pos = text.rfind("}", 0, open_pos)
        selector_start = 0 if close_pos == -1 else close_pos + 1
        selector_offset = open_pos
        while True:
            dot_pos = text.rfind(".", selector_start, selector_offset)
            if dot_pos == -1:
                break
            match = _CLASS_RUN.match(text, dot_pos + 1)
            ident = match.group(0) if match is not None else ""
            # Decimal points in media queries look like classes.
            selector_offset = dot_pos
            if not ident or is_pixel_decoy(ident):
                continue
            classes.setdefault(ident, None)
        offset = selector_start
    return list(classes)


def is_pixel_decoy(ident: str) -> bool:
    """Return True for runs like ``5px`` that come from ``40.5px`` values."""
    return ident.endswith("px") and _LEADING_INTEGER.match(ident) is not None


def class_bindings(text: str) -> list[ClassBinding]:
    """Scan CSS text and pair every class literal with its constant name."""
    bindings = [
        ClassBinding(source=ident, generated=to_camel(ident)) for ident in scan_css_classes(text)
    ]
    return merge_bindings(bindings)


def merge_bindings(*groups: list[ClassBinding]) -> list[ClassBinding]:
    """Concatenate binding groups, first binding wins per literal and per constant name."""
    merged: list[ClassBinding] = []
    seen_sources: set[str] = set()
    seen_names: set[str] = set()
    for group in groups:
        for binding in group:
            if binding.source in seen_sources or binding.generated in seen_names:
                continue
            seen_sources.add(binding.source)
            seen_names.add(binding.generated)
            merged.append(binding)
    return merged


def render_class_constants(bindings: list[ClassBinding]) -> str:
    """Render one exported string constant per class binding."""
    return "\n".join(
        f'export const {binding.generated} = "{binding.source}";' for binding in bindings
    )
