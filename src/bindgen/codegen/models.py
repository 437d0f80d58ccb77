"""Typed models produced by the template compilers."""

from __future__ import annotations

from dataclasses import dataclass

RESERVED_FIELD = "base"


class TemplateError(ValueError):
    """Raised when a template violates the naming contract."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"{template or '<unnamed>'}: {reason}")
        self.template = template
        self.reason = reason


@dataclass(slots=True, frozen=True)
class ClassBinding:
    """CSS class literal and the constant name generated for it."""

    source: str
    generated: str


@dataclass(slots=True, frozen=True)
class TemplateRef:
    """Named element inside a template, addressed by element-child indexes."""

    name: str
    type: str
    path: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class ParsedTemplate:
    """Compiled unit for one fragment template root."""

    name: str
    type: str
    refs: tuple[TemplateRef, ...]
    html: str


@dataclass(slots=True, frozen=True)
class DocumentBinding:
    """Live element lookup emitted for an id found in a full document."""

    name: str
    element_id: str
    type: str


@dataclass(slots=True, frozen=True)
class CompiledModule:
    """Text of every artifact generated from one HTML source."""

    module: str
    class_module: str | None
    stylesheet: str | None


@dataclass(slots=True, frozen=True)
class ParsedFragment:
    """Templates and embedded stylesheets found at the top level of a fragment file."""

    templates: tuple[ParsedTemplate, ...]
    styles: tuple[str, ...]
