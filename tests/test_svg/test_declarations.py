"""Tests for the CSS declaration-list parser."""

import pytest

from svgrecolor.svg.declarations import parse_declarations, rewrite_color_declarations


def test_parse_declarations():
    decls = parse_declarations("fill:#fff; stroke : red ;opacity:.5")
    assert [d.prop for d in decls] == ["fill", "stroke", "opacity"]
    assert [d.value for d in decls] == ["#fff", "red", ".5"]
    assert [d.terminated for d in decls] == [True, True, False]
    assert decls[1].lead == " "
    assert decls[1].trail == " "


def test_parse_reproduces_source():
    text = "a:b;;  junk ; fill: url('x;y') ;c: d"
    decls = parse_declarations(text)
    rebuilt = "".join(d.raw + (";" if d.terminated else "") for d in decls)
    assert rebuilt == text
    assert decls[1].prop is None


def test_semicolon_inside_url_does_not_split():
    result, count = rewrite_color_declarations('background: url("a;b"); fill: blue;')
    assert result == 'background: url("a;b"); fill: currentColor;'
    assert count == 1


def test_rewrite_normalizes_colon_spacing():
    assert rewrite_color_declarations("fill:#112233;") == ("fill: currentColor;", 1)


def test_rewrite_keeps_surrounding_whitespace():
    assert rewrite_color_declarations(" stroke : red ;") == (" stroke: currentColor ;", 1)


def test_unterminated_declaration_left_alone():
    assert rewrite_color_declarations("fill:#fff") == ("fill:#fff", 0)
    assert rewrite_color_declarations("stroke:#000;fill:#fff") == ("stroke: currentColor;fill:#fff", 1)


def test_unterminated_declaration_rewritten_when_loose():
    assert rewrite_color_declarations("fill:#fff", require_semicolon=False) == ("fill: currentColor", 1)


@pytest.mark.parametrize(
    "text",
    ["fill: none;", "stroke-width: 2;", "fill: url(#g);", "color: red;", "FILL: inherit;", ""],
)
def test_non_color_declarations_untouched(text):
    assert rewrite_color_declarations(text) == (text, 0)


def test_property_name_case_preserved():
    assert rewrite_color_declarations("Fill: #abc;") == ("Fill: currentColor;", 1)


def test_important_flag_kept():
    assert rewrite_color_declarations("fill: red !important;") == ("fill: currentColor !important;", 1)
