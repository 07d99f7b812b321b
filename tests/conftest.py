"""Shared test fixtures."""

from __future__ import annotations

import base64

import pytest


# Sample SVGs

RED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100"><rect x="10" y="10" width="30" height="20" fill="#ff0000"/></svg>'''

LUCIDE_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

MIXED_COLORS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4" stroke="navy"/>
  <circle cx="50" cy="50" r="20" fill="rgb(255, 107, 107)"/>
  <g fill="none" stroke="hsl(200, 50%, 40%)">
    <path d="M20 80 L80 80" style="stroke:#333;stroke-width:2;"/>
    <ellipse cx="50" cy="30" rx="10" ry="5" fill="url(#grad1)"/>
  </g>
</svg>'''

STYLE_BLOCK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><style>.a{fill:#112233;}.b{stroke: red; stroke-width: 2;}</style><path class="a" d="M0 0 L10 0 L10 10 Z"/></svg>'''

XLINK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10"><defs><path id="p" d="M0 0 L5 5"/></defs><use xlink:href="#p" fill="#abc"/></svg>'''

CURVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M2 2 C 30 30 40 40 4 4 L 6 2"/></svg>'''

RED_RECT_DATA_URI = "data:image/svg+xml;charset=utf-8;base64," + base64.b64encode(RED_RECT_SVG.encode()).decode("ascii")


@pytest.fixture
def red_rect_svg() -> str:
    return RED_RECT_SVG


@pytest.fixture
def mixed_colors_svg() -> str:
    return MIXED_COLORS_SVG


@pytest.fixture
def style_block_svg() -> str:
    return STYLE_BLOCK_SVG
