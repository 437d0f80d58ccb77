"""Live element lookups for full HTML documents.

Documents are scanned as text, not parsed: every ``id="..."`` attribute is
located left to right and typed by the nearest preceding ``<tag``.
"""

from __future__ import annotations

import re
from typing import Final

from bindgen.codegen.elements import resolve_element_type
from bindgen.codegen.models import DocumentBinding
from bindgen.codegen.naming import is_identifier, to_camel

_DOCTYPE_PREFIX: Final[re.Pattern[str]] = re.compile(r"<!DOCTYPE", re.IGNORECASE)
_ID_NEEDLE: Final[str] = 'id="'
_TAG_NAME_END: Final[re.Pattern[str]] = re.compile(r"[\s/>]")


def is_document(html: str) -> bool:
    """Return True when the text starts with a doctype declaration."""
    return _DOCTYPE_PREFIX.match(html) is not None


def scan_document_ids(html: str) -> list[DocumentBinding]:
    """Find every id attribute and type it by its enclosing tag name."""
    bindings: dict[str, DocumentBinding] = {}
    owners: dict[str, str] = {}
    offset = 0
    while True:
        start = html.find(_ID_NEEDLE, offset)
        if start == -1:
            break
        value_start = start + len(_ID_NEEDLE)
        end = html.find('"', value_start)
        if end == -1:
            break
        offset = end + 1
        if start > 0 and not html[start - 1].isspace():
            # data-id="..." and similar attributes.
            continue
        element_id = html[value_start:end]
        if not element_id:
            continue
        tag_start = html.rfind("<", 0, start)
        if tag_start == -1:
            continue
        tag_match = _TAG_NAME_END.search(html, tag_start + 1)
        tag_end = tag_match.start() if tag_match is not None else start
        tag = html[tag_start + 1 : tag_end]
        name = element_id if is_identifier(element_id) else to_camel(element_id)
        if owners.setdefault(name, element_id) != element_id:
            # Another id already owns this constant name; first wins.
            continue
        # Repeated ids keep their first position; the last tag decides the type.
        bindings[element_id] = DocumentBinding(
            name=name,
            element_id=element_id,
            type=resolve_element_type(tag.upper()),
        )
    return list(bindings.values())


def render_document_bindings(bindings: list[DocumentBinding]) -> str:
    """Render one exported live lookup constant per binding."""
    return "\n".join(
        f'export const {binding.name} = document.getElementById("{binding.element_id}")'
        f" as {binding.type};"
        for binding in bindings
    )
