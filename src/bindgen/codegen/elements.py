"""Tag name to element handle type lookup."""

from __future__ import annotations

from typing import Final

DEFAULT_ELEMENT_TYPE: Final[str] = "HTMLElement"

_ELEMENT_TYPES: Final[dict[str, str]] = {
    "INPUT": "HTMLInputElement",
    "SELECT": "HTMLSelectElement",
    "FORM": "HTMLFormElement",
    "TEXTAREA": "HTMLTextAreaElement",
    "CANVAS": "HTMLCanvasElement",
    "AUDIO": "HTMLAudioElement",
    "BUTTON": "HTMLButtonElement",
    "A": "HTMLAnchorElement",
    "DIALOG": "HTMLDialogElement",
}


def resolve_element_type(tag_name: str) -> str:
    """Return the narrowest known handle type for an upper-cased tag name."""
    return _ELEMENT_TYPES.get(tag_name, DEFAULT_ELEMENT_TYPE)
