"""CSS declaration-list parsing for ``style`` attributes and ``<style>`` rule bodies.

A declaration list is ``property: value`` pairs separated by ``;``. Semicolons
inside quotes or parentheses (``url("a;b")``) do not split. Text that is not
rewritten is reproduced byte for byte.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from svgrecolor.svg.colors import CURRENT_COLOR, is_replaceable_color

COLOR_PROPERTIES = frozenset({"fill", "stroke"})

_DECLARATION_RE = re.compile(r"(?P<lead>\s*)(?P<prop>[-\w]+)\s*:(?P<value>.*?)(?P<trail>\s*)", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Declaration:
    # Source text, without the terminating semicolon
    raw: str
    # Property name as written; None when the text is not ``name: value``
    prop: str | None
    value: str
    terminated: bool
    lead: str = ""
    trail: str = ""

    @property
    def important(self) -> bool:
        return _IMPORTANT_RE.search(self.value) is not None

    @property
    def base_value(self) -> str:
        """Value with any ``!important`` flag removed."""
        return _IMPORTANT_RE.sub("", self.value).strip()


def parse_declarations(text: str) -> list[Declaration]:
    """Split a declaration list into Declarations, in order.

    ``"".join`` of each ``raw`` plus ``";"`` where terminated reproduces ``text``.
    """
    declarations: list[Declaration] = []
    for chunk, terminated in _split(text):
        m = _DECLARATION_RE.fullmatch(chunk)
        if m is None:
            declarations.append(Declaration(raw=chunk, prop=None, value="", terminated=terminated))
            continue
        declarations.append(
            Declaration(
                raw=chunk,
                prop=m.group("prop"),
                value=m.group("value").strip(),
                terminated=terminated,
                lead=m.group("lead"),
                trail=m.group("trail"),
            )
        )
    return declarations


def _split(text: str) -> list[tuple[str, bool]]:
    chunks: list[tuple[str, bool]] = []
    start = 0
    depth = 0
    quote = ""
    for i, ch in enumerate(text):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        elif ch == ";" and depth == 0:
            chunks.append((text[start:i], True))
            start = i + 1
    if start < len(text):
        chunks.append((text[start:], False))
    return chunks


def rewrite_color_declarations(
    text: str,
    require_semicolon: bool = True,
    properties: frozenset[str] = COLOR_PROPERTIES,
) -> tuple[str, int]:
    """Rewrite ``fill``/``stroke`` color values in a declaration list to currentColor.

    With ``require_semicolon`` a trailing declaration that lacks its ``;`` is
    left as written. Returns (new text, number of declarations rewritten).
    """
    parts: list[str] = []
    rewritten = 0
    for decl in parse_declarations(text):
        out = decl.raw
        if (
            decl.prop is not None
            and decl.prop.lower() in properties
            and (decl.terminated or not require_semicolon)
            and is_replaceable_color(decl.base_value)
        ):
            flag = " !important" if decl.important else ""
            out = f"{decl.lead}{decl.prop}: {CURRENT_COLOR}{flag}{decl.trail}"
            rewritten += 1
        parts.append(out + (";" if decl.terminated else ""))
    return "".join(parts), rewritten
