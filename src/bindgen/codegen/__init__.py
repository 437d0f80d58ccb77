"""HTML and CSS scanning plus TypeScript binding synthesis."""

from .css import (
    class_bindings,
    is_pixel_decoy,
    merge_bindings,
    render_class_constants,
    scan_css_classes,
)
from .dispatch import (
    CLASS_MODULE_SUFFIX,
    CLASS_NAMESPACE,
    compile_document,
    compile_fragment,
    compile_source,
    marker_line,
    read_marker,
)
from .document import is_document, render_document_bindings, scan_document_ids
from .elements import DEFAULT_ELEMENT_TYPE, resolve_element_type
from .fragment import (
    LITERAL_ATTRIBUTE,
    NAME_ATTRIBUTE,
    collect_refs,
    element_children,
    parse_fragment,
    parse_markup,
    parse_template,
    ref_accessor,
    render_template,
    walk_path,
)
from .models import (
    RESERVED_FIELD,
    ClassBinding,
    CompiledModule,
    DocumentBinding,
    ParsedFragment,
    ParsedTemplate,
    TemplateError,
    TemplateRef,
)
from .naming import is_identifier, to_camel

__all__ = [
    "CLASS_MODULE_SUFFIX",
    "CLASS_NAMESPACE",
    "ClassBinding",
    "CompiledModule",
    "DEFAULT_ELEMENT_TYPE",
    "DocumentBinding",
    "LITERAL_ATTRIBUTE",
    "NAME_ATTRIBUTE",
    "ParsedFragment",
    "ParsedTemplate",
    "RESERVED_FIELD",
    "TemplateError",
    "TemplateRef",
    "class_bindings",
    "compile_document",
    "compile_fragment",
    "collect_refs",
    "compile_source",
    "element_children",
    "is_document",
    "is_identifier",
    "is_pixel_decoy",
    "marker_line",
    "merge_bindings",
    "parse_fragment",
    "parse_markup",
    "parse_template",
    "read_marker",
    "ref_accessor",
    "render_class_constants",
    "render_document_bindings",
    "render_template",
    "resolve_element_type",
    "scan_css_classes",
    "scan_document_ids",
    "to_camel",
    "walk_path",
]
