"""Tests for the recolorer."""

import pytest

from svgrecolor.svg.document import parse_document
from svgrecolor.svg.recolor import recolor_style_blocks, recolor_tree
from tests.conftest import MIXED_COLORS_SVG, STYLE_BLOCK_SVG


def _by_name(root, name):
    return [n for n in root.walk() if n.name == name]


def test_recolor_mixed_document():
    root = parse_document(MIXED_COLORS_SVG)
    stats = recolor_tree(root)

    rect = _by_name(root, "rect")[0]
    assert rect.attributes["fill"] == "currentColor"
    assert rect.attributes["stroke"] == "currentColor"
    assert _by_name(root, "circle")[0].attributes["fill"] == "currentColor"

    group = _by_name(root, "g")[0]
    assert group.attributes["fill"] == "none"
    assert group.attributes["stroke"] == "currentColor"

    path = _by_name(root, "path")[0]
    assert path.attributes["style"] == "stroke: currentColor;stroke-width:2;"
    assert _by_name(root, "ellipse")[0].attributes["fill"] == "url(#grad1)"

    assert stats.attributes == 4
    assert stats.style_attributes == 1
    assert stats.total == 5


@pytest.mark.parametrize("value", ["none", "inherit", "currentColor", "transparent", "url(#g1)"])
def test_non_colors_untouched(value):
    root = parse_document(f'<svg><rect fill="{value}" stroke="{value}"/></svg>')
    stats = recolor_tree(root)
    assert root.children[0].attributes == {"fill": value, "stroke": value}
    assert stats.total == 0


def test_nested_subtrees_all_rewritten():
    root = parse_document('<svg fill="red"><g fill="blue"><g><path stroke="#000"/></g></g></svg>')
    recolor_tree(root)
    assert [n.attributes.get("fill", n.attributes.get("stroke")) for n in root.walk() if n.attributes] == [
        "currentColor",
        "currentColor",
        "currentColor",
    ]


def test_attribute_order_kept():
    root = parse_document('<svg><rect stroke="red" x="1" fill="#fff"/></svg>')
    recolor_tree(root)
    assert list(root.children[0].attributes) == ["stroke", "x", "fill"]


def test_style_blocks_rewritten():
    result, count = recolor_style_blocks(STYLE_BLOCK_SVG)
    assert "<style>.a{fill: currentColor;}.b{stroke: currentColor; stroke-width: 2;}</style>" in result
    assert count == 2


def test_style_block_without_semicolon_left_alone():
    svg = "<svg><style>.a{fill:red}</style></svg>"
    assert recolor_style_blocks(svg) == (svg, 0)
    assert recolor_style_blocks(svg, require_semicolon=False) == ("<svg><style>.a{fill: currentColor}</style></svg>", 1)


def test_style_block_nested_at_rule():
    svg = "<svg><style>@media (prefers-color-scheme: dark) { .a { fill: #fff; } }</style></svg>"
    result, count = recolor_style_blocks(svg)
    assert ".a { fill: currentColor; }" in result
    assert count == 1


def test_text_outside_style_blocks_untouched():
    svg = '<svg><text>{fill: red;}</text><rect style="fill:red;"/></svg>'
    assert recolor_style_blocks(svg) == (svg, 0)
