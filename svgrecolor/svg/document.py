"""Document model adapter — SVG text ⇄ Node tree.

Facade over the standard library ElementTree pull parser. Namespace
declarations are kept as ``xmlns`` attributes on the node that declared them,
and qualified names are rendered with the author's prefixes, so a parse →
serialize round trip does not invent ``ns0:`` prefixes.

Not carried through a round trip: comments, processing instructions, the XML
declaration, DOCTYPE and CDATA markers (CDATA content is kept as text).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from svgrecolor.errors import ParseError, SerializationError

logger = logging.getLogger(__name__)

_XML_NS = "http://www.w3.org/XML/1998/namespace"

_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


@dataclass
class Node:
    """One element of the markup tree."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    # Character data before the first child
    text: str = ""
    # Character data after this node's end tag, owned by the parent
    tail: str = ""

    @property
    def local_name(self) -> str:
        return local_name(self.name)

    def walk(self) -> Iterator[Node]:
        """Depth-first pre-order traversal, visiting every node exactly once."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def local_name(name: str) -> str:
    """``svg:rect`` → ``rect``."""
    return name.rsplit(":", 1)[-1]


def parse_document(text: str, source: str = "<string>") -> Node:
    """Parse SVG markup into a Node tree. Raises ParseError on malformed input."""
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    try:
        parser.feed(text)
        parser.close()
    except ET.ParseError as e:
        raise ParseError(str(e), source) from e

    pending_ns: list[tuple[str, str]] = []
    # Parents always precede their children in document order
    opened: list[tuple[ET.Element, Node]] = []
    # prefix → uri bindings in scope for each element
    scopes: dict[int, dict[str, str]] = {}
    parent_of: dict[int, ET.Element] = {}

    try:
        for event, data in parser.read_events():
            if event == "start-ns":
                pending_ns.append(data)
                continue

            elem: ET.Element = data
            for child in elem:
                parent_of[id(child)] = elem
            parent = parent_of.get(id(elem))
            scope = dict(scopes[id(parent)]) if parent is not None else {"xml": _XML_NS}

            attributes: dict[str, str] = {}
            for prefix, uri in pending_ns:
                attributes[f"xmlns:{prefix}" if prefix else "xmlns"] = uri
                scope[prefix] = uri
            pending_ns = []
            scopes[id(elem)] = scope

            for key, value in elem.attrib.items():
                attributes[_qualify(key, scope, attribute=True)] = value

            opened.append((elem, Node(name=_qualify(elem.tag, scope), attributes=attributes)))
    except ValueError as e:
        raise ParseError(str(e), source) from e

    if not opened:
        raise ParseError("no element found", source)

    nodes = {id(elem): node for elem, node in opened}
    for elem, node in opened:
        node.text = elem.text or ""
        node.tail = elem.tail or ""
        node.children = [nodes[id(child)] for child in elem]

    root = opened[0][1]
    root.tail = ""
    logger.debug("Parsed %s: root <%s>, %d nodes", source, root.name, len(opened))
    return root


def _qualify(name: str, scope: dict[str, str], attribute: bool = False) -> str:
    """``{uri}local`` → ``prefix:local`` using the in-scope bindings."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    # Elements prefer the default namespace; attributes never use it
    if not attribute and scope.get("") == uri:
        return local
    for prefix, bound in reversed(scope.items()):
        if prefix and bound == uri:
            return f"{prefix}:{local}"
    raise ValueError(f"no prefix bound to namespace {uri!r}")


def serialize_document(root: Node, source: str = "<string>") -> str:
    """Render a Node tree back to markup text."""
    parts: list[str] = []
    try:
        _write(root, parts)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e), source) from e
    return "".join(parts)


def _write(root: Node, parts: list[str]) -> None:
    # Explicit stack of (node, closing) frames; nesting depth is unbounded
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, closing = stack.pop()
        if closing:
            parts.append(f"</{node.name}>")
            if node.tail:
                parts.append(escape(node.tail))
            continue

        if not node.name or any(c.isspace() or c in "<>&\"'/=" for c in node.name):
            raise ValueError(f"invalid element name {node.name!r}")

        parts.append(f"<{node.name}")
        for key, value in node.attributes.items():
            if not isinstance(value, str):
                raise TypeError(f"attribute {key!r} on <{node.name}> is {type(value).__name__}, not str")
            parts.append(f' {key}="{escape(value, _ATTR_ENTITIES)}"')

        if not node.text and not node.children:
            parts.append("/>")
            if node.tail:
                parts.append(escape(node.tail))
            continue

        parts.append(">")
        parts.append(escape(node.text))
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))
