"""Mode selection and module assembly for one HTML source."""

from __future__ import annotations

from bindgen.codegen.css import class_bindings, merge_bindings, render_class_constants
from bindgen.codegen.document import is_document, render_document_bindings, scan_document_ids
from bindgen.codegen.fragment import parse_fragment, render_registry, render_template
from bindgen.codegen.models import ClassBinding, CompiledModule

CLASS_MODULE_SUFFIX = ".css.ts"
CLASS_NAMESPACE = "css"


def marker_line(marker: str) -> str:
    """Render the cache marker comment placed on the first line of a module."""
    return f"// {marker}"


def read_marker(text: str) -> str | None:
    """Return the cache marker of an existing module, if it has one."""
    first_line, newline, _ = text.partition("\n")
    if not newline or not first_line.startswith("// "):
        return None
    return first_line[3:]


def compile_source(
    html: str,
    marker: str,
    module_name: str,
    sibling_css: str | None = None,
) -> CompiledModule:
    """Compile one HTML source plus its optional same-named CSS file.

    ``module_name`` is the base name shared by the generated artifacts and is
    used for the class namespace re-export.
    """
    if is_document(html):
        return compile_document(html, marker, module_name, sibling_css)
    return compile_fragment(html, marker, module_name, sibling_css)


def compile_document(
    html: str,
    marker: str,
    module_name: str,
    sibling_css: str | None = None,
) -> CompiledModule:
    """Compile a full document into live id lookups."""
    bindings = class_bindings(sibling_css) if sibling_css is not None else []
    blocks: list[str] = []
    if bindings:
        blocks.append(_class_reexport(module_name))
    lookups = render_document_bindings(scan_document_ids(html))
    if lookups:
        blocks.append(lookups)
    return CompiledModule(
        module=_assemble(marker, blocks, separator="\n"),
        class_module=_class_module(bindings),
        stylesheet=None,
    )


def compile_fragment(
    html: str,
    marker: str,
    module_name: str,
    sibling_css: str | None = None,
) -> CompiledModule:
    """Compile a fragment file into one cloneable class per template."""
    fragment = parse_fragment(html)
    groups = [class_bindings(style) for style in fragment.styles]
    if sibling_css is not None:
        groups.append(class_bindings(sibling_css))
    bindings = merge_bindings(*groups)

    blocks: list[str] = []
    if bindings:
        blocks.append(_class_reexport(module_name))
    if fragment.templates:
        blocks.append(render_registry())
        blocks.extend(render_template(template) for template in fragment.templates)
    stylesheet = "".join(fragment.styles)
    return CompiledModule(
        module=_assemble(marker, blocks, separator="\n\n"),
        class_module=_class_module(bindings),
        stylesheet=stylesheet or None,
    )


def _class_reexport(module_name: str) -> str:
    return f'export * as {CLASS_NAMESPACE} from "./{module_name}{CLASS_MODULE_SUFFIX}";'


def _class_module(bindings: list[ClassBinding]) -> str | None:
    if not bindings:
        return None
    return render_class_constants(bindings) + "\n"


def _assemble(marker: str, blocks: list[str], separator: str) -> str:
    body = separator.join(blocks)
    if not body:
        return marker_line(marker) + "\n"
    return f"{marker_line(marker)}\n{body}\n"
