"""Tests for rendering token trees as VS Code snippet lines."""

import pytest

from yas_to_vscode.parsing import parse_body
from yas_to_vscode.rendering import render
from yas_to_vscode.tokens import Choice, Inline, Lines, Raw, Tabstop


def test_raw():
    assert render(Raw("hello")) == ["hello"]


def test_lines_flatten():
    tree = Lines((Raw("a"), Lines((Raw("b"), Raw("c")))))
    assert render(tree) == ["a", "b", "c"]


def test_inline_keeps_newlines_inside_one_line():
    tree = Inline((Tabstop(1, Lines((Raw("a"), Raw("b")))), Raw(" end")))
    assert render(tree) == ["${1:a\nb} end"]


def test_empty_inline_is_an_empty_line():
    assert render(Inline(())) == [""]


def test_bare_field():
    assert render(Tabstop(3)) == ["$3"]


def test_empty_default_renders_as_bare_field():
    assert render(Tabstop(3, Inline(()))) == render(Tabstop(3))
    assert render(Tabstop(3, Raw(""))) == ["$3"]


def test_field_with_default():
    assert render(Tabstop(1, Raw("name"))) == ["${1:name}"]


def test_nested_mirror_default():
    assert render(Tabstop(7, Tabstop(3))) == ["${7:$3}"]


def test_mirrors_render_identically():
    lines = render(Inline((Tabstop(1), Raw(" and "), Tabstop(1))))
    assert lines == ["$1 and $1"]


def test_choice():
    assert render(Choice(7, ("x", "y", "z"))) == ["${7|x,y,z|}"]


def test_empty_choice():
    assert render(Choice(2, ())) == ["${2||}"]


def test_choice_escapes_reserved_characters():
    assert render(Choice(1, ("a,b", "c|d", "e\\f"))) == ["${1|a\\,b,c\\|d,e\\\\f|}"]


def test_rendering_does_not_change_the_tree():
    tree = Lines((Raw("a"), Tabstop(1, Raw("b"))))
    before = Lines((Raw("a"), Tabstop(1, Raw("b"))))
    render(tree)
    render(tree)
    assert tree == before


def test_rejects_non_tokens():
    with pytest.raises(TypeError):
        render("not a token")


@pytest.mark.parametrize(
    "src",
    [
        "plain text",
        "cost: $5",
        "$1 and $1",
        "${1:a\nb} end",
        "fn ${1:name}(${2:args}) {\n    $0\n}",
        "impl${1:<${2:T}>} ${3:Type$1} {\n    ${4:body}\n}",
        "${3:}",
        "a\n",
        "}",
    ],
)
def test_rendered_text_parses_back_to_the_same_rendering(src):
    lines = render(parse_body(src))
    again = render(parse_body("\n".join(lines)))
    assert "\n".join(again) == "\n".join(lines)
