from __future__ import annotations

import pytest

from bindgen.codegen import DEFAULT_ELEMENT_TYPE, is_identifier, resolve_element_type, to_camel


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("btn-primary-large", "btnPrimaryLarge"),
        ("a", "a"),
        ("a-b", "aB"),
        ("BTN-PRIMARY", "btnPrimary"),
        ("trailing-", "trailing"),
        ("double--dash", "doubleDash"),
        ("", ""),
    ],
)
def test_to_camel(source: str, expected: str) -> None:
    assert to_camel(source) == expected


def test_to_camel_is_stable_across_calls() -> None:
    assert to_camel("nav-item-link") == to_camel("nav-item-link") == "navItemLink"


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("INPUT", "HTMLInputElement"),
        ("SELECT", "HTMLSelectElement"),
        ("FORM", "HTMLFormElement"),
        ("TEXTAREA", "HTMLTextAreaElement"),
        ("CANVAS", "HTMLCanvasElement"),
        ("AUDIO", "HTMLAudioElement"),
        ("BUTTON", "HTMLButtonElement"),
        ("A", "HTMLAnchorElement"),
        ("DIALOG", "HTMLDialogElement"),
        ("DIV", DEFAULT_ELEMENT_TYPE),
        ("input", DEFAULT_ELEMENT_TYPE),
        ("", DEFAULT_ELEMENT_TYPE),
    ],
)
def test_resolve_element_type(tag: str, expected: str) -> None:
    assert resolve_element_type(tag) == expected


def test_is_identifier() -> None:
    assert is_identifier("submit") is True
    assert is_identifier("_private$") is True
    assert is_identifier("search-box") is False
    assert is_identifier("1st") is False
    assert is_identifier("") is False
