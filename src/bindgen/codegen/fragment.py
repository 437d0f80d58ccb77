"""Fragment template compilation into cloneable TypeScript classes.

A fragment file holds one or more top-level template elements. Each root's
``id`` names the generated class; descendants carrying ``id`` become typed
fields resolved by replaying their element-child index path against a deep
clone of a cached, detached copy of the markup. ``id_`` is rewritten to a
literal ``id`` and never produces a field.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from bindgen.codegen.elements import resolve_element_type
from bindgen.codegen.models import (
    RESERVED_FIELD,
    ParsedFragment,
    ParsedTemplate,
    TemplateError,
    TemplateRef,
)
from bindgen.codegen.naming import is_identifier

NAME_ATTRIBUTE: Final[str] = "id"
LITERAL_ATTRIBUTE: Final[str] = "id_"
FRAGMENT_REGISTRY: Final[str] = "_fragments"

_PRESERVE_WHITESPACE: Final[frozenset[str]] = frozenset({"pre", "textarea", "script", "style"})


def parse_markup(html: str) -> BeautifulSoup:
    """Parse markup into a tree without document normalization."""
    return BeautifulSoup(html, "html.parser")


def element_children(node: Tag) -> list[Tag]:
    """Return element children, skipping text, comments and other strings."""
    return [child for child in node.children if isinstance(child, Tag)]


def walk_path(root: Tag, path: Sequence[int]) -> Tag:
    """Resolve an element-child index path starting at root."""
    node = root
    for index in path:
        node = element_children(node)[index]
    return node


def parse_fragment(html: str) -> ParsedFragment:
    """Compile every top-level template of a fragment file.

    Top-level ``<style>`` elements are collected as embedded CSS instead of
    being compiled.
    """
    templates: list[ParsedTemplate] = []
    styles: list[str] = []
    names: set[str] = set()
    for child in element_children(parse_markup(html)):
        if child.name == "style":
            styles.append(child.get_text())
            continue
        template = parse_template(child)
        if template.name in names:
            raise TemplateError(template.name, "template name is declared more than once.")
        names.add(template.name)
        templates.append(template)
    return ParsedFragment(templates=tuple(templates), styles=tuple(styles))


def parse_template(node: Tag) -> ParsedTemplate:
    """Build a ParsedTemplate from a root element, mutating it in place."""
    name = _attribute(node, NAME_ATTRIBUTE)
    if not name:
        raise TemplateError(
            "", f"<{node.name}> template root requires a non-empty '{NAME_ATTRIBUTE}' attribute."
        )
    if not is_identifier(name):
        raise TemplateError(name, "template name is not a valid identifier.")
    del node[NAME_ATTRIBUTE]
    if LITERAL_ATTRIBUTE in node.attrs:
        _restore_literal_id(node)

    refs = collect_refs(node)
    _validate_ref_names(name, refs)
    strip_whitespace(node)
    return ParsedTemplate(
        name=name,
        type=resolve_element_type(node.name.upper()),
        refs=tuple(refs),
        html=str(node),
    )


def strip_whitespace(node: Tag) -> None:
    """Drop comments and whitespace-only text nodes below node."""
    for descendant in list(node.descendants):
        if isinstance(descendant, Comment):
            descendant.extract()
            continue
        if type(descendant) is not NavigableString or descendant.strip():
            continue
        if any(parent.name in _PRESERVE_WHITESPACE for parent in descendant.parents):
            continue
        descendant.extract()


def render_template(template: ParsedTemplate) -> str:
    """Render one exported class for a parsed template."""
    lines = [
        f"export class {template.name} {{",
        f"  {RESERVED_FIELD}: {template.type};",
    ]
    lines.extend(f"  {ref.name}: {ref.type};" for ref in template.refs)
    lines.extend(
        [
            "",
            "  constructor() {",
            f'    let fragment = {FRAGMENT_REGISTRY}.get("{template.name}");',
            "    if (!fragment) {",
            '      const tmp = document.createElement("div");',
            f"      tmp.innerHTML = `{escape_template_literal(template.html)}`;",
            "      fragment = tmp.children[0]! as HTMLElement;",
            f'      {FRAGMENT_REGISTRY}.set("{template.name}", fragment);',
            "    }",
            f"    this.{RESERVED_FIELD} = fragment.cloneNode(true) as {template.type};",
        ]
    )
    lines.extend(
        f"    this.{ref.name} = {ref_accessor(ref.path)} as {ref.type};" for ref in template.refs
    )
    lines.extend(["  }", "}"])
    return "\n".join(lines)


def render_registry() -> str:
    """Render the module-scope cache of parsed template roots."""
    return f"const {FRAGMENT_REGISTRY} = new Map<string, HTMLElement>();"


def ref_accessor(path: Sequence[int]) -> str:
    """Render the structural accessor replaying path from the cloned root."""
    return f"this.{RESERVED_FIELD}" + "".join(f".children[{index}]!" for index in path)


def escape_template_literal(text: str) -> str:
    """Escape text for embedding in a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def collect_refs(root: Tag) -> list[TemplateRef]:
    """Collect named descendants depth-first, left to right, stripping naming attributes."""
    refs: list[TemplateRef] = []
    stack: list[tuple[Tag, tuple[int, ...]]] = [
        (child, (index,)) for index, child in enumerate(element_children(root))
    ]
    stack.reverse()
    while stack:
        node, path = stack.pop()
        ref_name = _attribute(node, NAME_ATTRIBUTE)
        if ref_name:
            del node[NAME_ATTRIBUTE]
            refs.append(
                TemplateRef(
                    name=ref_name,
                    type=resolve_element_type(node.name.upper()),
                    path=path,
                )
            )
        if LITERAL_ATTRIBUTE in node.attrs:
            _restore_literal_id(node)
        children = element_children(node)
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], (*path, index)))
    return refs


def _validate_ref_names(template: str, refs: list[TemplateRef]) -> None:
    seen: set[str] = set()
    for ref in refs:
        if ref.name == RESERVED_FIELD:
            raise TemplateError(template, f"'{RESERVED_FIELD}' is reserved for the template root.")
        if not is_identifier(ref.name):
            raise TemplateError(template, f"ref '{ref.name}' is not a valid identifier.")
        if ref.name in seen:
            raise TemplateError(template, f"ref '{ref.name}' is declared more than once.")
        seen.add(ref.name)


def _restore_literal_id(node: Tag) -> None:
    value = _attribute(node, LITERAL_ATTRIBUTE) or ""
    del node[LITERAL_ATTRIBUTE]
    node[NAME_ATTRIBUTE] = value


def _attribute(node: Tag, name: str) -> str | None:
    value = node.get(name)
    if value is None or isinstance(value, str):
        return value
    return " ".join(value)
