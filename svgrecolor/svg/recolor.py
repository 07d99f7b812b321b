"""Recolorer — rewrite hard-coded colors to currentColor.

Color-bearing locations, in order:
1. ``fill`` attribute
2. ``stroke`` attribute
3. ``fill:``/``stroke:`` declarations in a ``style`` attribute
4. the same declarations inside embedded ``<style>`` blocks (raw text, before parsing)

Values that do not classify as a color are left exactly as written.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from svgrecolor.svg.colors import CURRENT_COLOR, is_replaceable_color
from svgrecolor.svg.declarations import rewrite_color_declarations
from svgrecolor.svg.document import Node

logger = logging.getLogger(__name__)

COLOR_ATTRIBUTES = ("fill", "stroke")

_STYLE_BLOCK_RE = re.compile(
    r"(?P<open><(?P<tag>(?:[\w.-]+:)?style)\b[^>]*(?<!/)>)(?P<body>.*?)(?P<close></(?P=tag)\s*>)",
    re.IGNORECASE | re.DOTALL,
)
# Innermost rule body; nested at-rule blocks are reached through their inner rules
_RULE_BODY_RE = re.compile(r"\{(?P<decls>[^{}]*)\}")


@dataclass
class RecolorStats:
    attributes: int = 0
    style_attributes: int = 0
    style_blocks: int = 0

    @property
    def total(self) -> int:
        return self.attributes + self.style_attributes + self.style_blocks


def recolor_node(node: Node, require_semicolon: bool = True) -> tuple[int, int]:
    """Rewrite one node's color-bearing attributes. Returns (attributes, declarations) rewritten."""
    attrs_rewritten = 0
    for name in COLOR_ATTRIBUTES:
        value = node.attributes.get(name)
        if value is not None and is_replaceable_color(value):
            node.attributes[name] = CURRENT_COLOR
            attrs_rewritten += 1

    decls_rewritten = 0
    style = node.attributes.get("style")
    if style:
        node.attributes["style"], decls_rewritten = rewrite_color_declarations(
            style, require_semicolon=require_semicolon
        )
    return attrs_rewritten, decls_rewritten


def recolor_tree(root: Node, require_semicolon: bool = True, stats: RecolorStats | None = None) -> RecolorStats:
    """Rewrite every node in the tree in place."""
    stats = stats or RecolorStats()
    for node in root.walk():
        attrs, decls = recolor_node(node, require_semicolon)
        stats.attributes += attrs
        stats.style_attributes += decls
    logger.debug(
        "Recolored tree: %d attributes, %d style declarations",
        stats.attributes,
        stats.style_attributes,
    )
    return stats


def recolor_style_blocks(markup: str, require_semicolon: bool = True) -> tuple[str, int]:
    """Rewrite color declarations inside ``<style>`` elements of raw markup text."""
    rewritten = 0

    def _rule(match: re.Match[str]) -> str:
        nonlocal rewritten
        decls, count = rewrite_color_declarations(match.group("decls"), require_semicolon=require_semicolon)
        rewritten += count
        return "{" + decls + "}"

    def _block(match: re.Match[str]) -> str:
        body = _RULE_BODY_RE.sub(_rule, match.group("body"))
        return match.group("open") + body + match.group("close")

    result = _STYLE_BLOCK_RE.sub(_block, markup)
    if rewritten:
        logger.debug("Recolored %d style block declarations", rewritten)
    return result, rewritten
