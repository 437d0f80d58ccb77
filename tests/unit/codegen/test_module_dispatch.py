from __future__ import annotations

import pytest

from bindgen.codegen import (
    TemplateError,
    compile_document,
    compile_source,
    marker_line,
    read_marker,
)

MARKER = "2024-01-02T03:04:05.678Z"


def test_marker_line_round_trips_through_first_line() -> None:
    text = marker_line(MARKER) + "\nexport const a = 1;\n"

    assert read_marker(text) == MARKER


def test_read_marker_requires_comment_line() -> None:
    assert read_marker("// 2024-01-02T03:04:05.678Z") is None
    assert read_marker("export const a = 1;\n") is None
    assert read_marker("") is None


def test_fragment_module_is_assembled_with_marker_first() -> None:
    compiled = compile_source(
        '<div id="card"><input id_="email"/><button id="submit"></button></div>',
        MARKER,
        "card",
    )

    assert compiled.class_module is None
    assert compiled.stylesheet is None
    assert compiled.module == "\n".join(
        [
            f"// {MARKER}",
            "const _fragments = new Map<string, HTMLElement>();",
            "",
            "export class card {",
            "  base: HTMLElement;",
            "  submit: HTMLButtonElement;",
            "",
            "  constructor() {",
            '    let fragment = _fragments.get("card");',
            "    if (!fragment) {",
            '      const tmp = document.createElement("div");',
            '      tmp.innerHTML = `<div><input id="email"/><button></button></div>`;',
            "      fragment = tmp.children[0]! as HTMLElement;",
            '      _fragments.set("card", fragment);',
            "    }",
            "    this.base = fragment.cloneNode(true) as HTMLElement;",
            "    this.submit = this.base.children[1]! as HTMLButtonElement;",
            "  }",
            "}",
            "",
        ]
    )


def test_fragment_style_produces_companions_and_reexport() -> None:
    compiled = compile_source(
        "<style>.card-title { font-weight: bold; }</style>\n"
        '<div id="card"><h1 class="card-title">Hi</h1></div>\n',
        MARKER,
        "card",
        sibling_css=".card-body { padding: 0; } .card-title { margin: 0; }",
    )

    assert compiled.class_module == (
        'export const cardTitle = "card-title";\nexport const cardBody = "card-body";\n'
    )
    assert compiled.stylesheet == ".card-title { font-weight: bold; }"
    lines = compiled.module.splitlines()
    assert lines[0] == f"// {MARKER}"
    assert lines[1] == 'export * as css from "./card.css.ts";'
    assert "export class card {" in lines


def test_document_module_reexports_sibling_classes() -> None:
    compiled = compile_document(
        '<!DOCTYPE html><html><body><button id="save">Save</button></body></html>',
        MARKER,
        "index",
        sibling_css=".toolbar-item { display: flex; }",
    )

    assert compiled.module == (
        f"// {MARKER}\n"
        'export * as css from "./index.css.ts";\n'
        'export const save = document.getElementById("save") as HTMLButtonElement;\n'
    )
    assert compiled.class_module == 'export const toolbarItem = "toolbar-item";\n'
    assert compiled.stylesheet is None


def test_document_without_classes_has_no_companion() -> None:
    compiled = compile_source(
        "<!DOCTYPE html><html></html>", MARKER, "empty", sibling_css="body { margin: 0; }"
    )

    assert compiled.module == f"// {MARKER}\n"
    assert compiled.class_module is None


def test_fragment_precondition_errors_propagate() -> None:
    with pytest.raises(TemplateError):
        compile_source("<div><span id='x'></span></div>", MARKER, "broken")
