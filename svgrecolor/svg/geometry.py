"""Geometry bounding-box calculator — tighten the root canvas to the visible artwork.

Measured elements: rect, circle, ellipse, line, polygon, polyline and path.
Path data is interpreted for straight-line commands only (M, L, H, V, Z and
their relative forms). Curve and arc commands are recognized but not measured,
so a path built from curves is undercounted; that is an approximation, not an
error. Transforms are not applied.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from svgrecolor.svg.document import Node
from svgrecolor.utils.geometry import NUMBER_RE, bbox, format_number, is_plain_length, parse_number, parse_points

logger = logging.getLogger(__name__)

_EMPTY = np.empty((0, 2), dtype=np.float64)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in user-space units. Only ever grows."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: NDArray[np.float64]) -> BoundingBox | None:
        if len(points) == 0:
            return None
        return cls(*bbox(points))

    def grow(self, other: BoundingBox | None) -> BoundingBox:
        if other is None:
            return self
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def viewbox(self) -> str:
        return " ".join(format_number(v) for v in (self.min_x, self.min_y, self.width, self.height))


# ── Path interpreter ──────────────────────────────────────────────────────


class PathCommand(enum.Enum):
    MOVE_ABS = "M"
    MOVE_REL = "m"
    LINE_ABS = "L"
    LINE_REL = "l"
    HORIZONTAL_ABS = "H"
    HORIZONTAL_REL = "h"
    VERTICAL_ABS = "V"
    VERTICAL_REL = "v"
    CLOSE_ABS = "Z"
    CLOSE_REL = "z"
    # Not measured
    CUBIC_ABS = "C"
    CUBIC_REL = "c"
    SMOOTH_CUBIC_ABS = "S"
    SMOOTH_CUBIC_REL = "s"
    QUADRATIC_ABS = "Q"
    QUADRATIC_REL = "q"
    SMOOTH_QUADRATIC_ABS = "T"
    SMOOTH_QUADRATIC_REL = "t"
    ARC_ABS = "A"
    ARC_REL = "a"

    @property
    def relative(self) -> bool:
        return self.value.islower()


UNMEASURED_COMMANDS = frozenset({
    PathCommand.CUBIC_ABS, PathCommand.CUBIC_REL,
    PathCommand.SMOOTH_CUBIC_ABS, PathCommand.SMOOTH_CUBIC_REL,
    PathCommand.QUADRATIC_ABS, PathCommand.QUADRATIC_REL,
    PathCommand.SMOOTH_QUADRATIC_ABS, PathCommand.SMOOTH_QUADRATIC_REL,
    PathCommand.ARC_ABS, PathCommand.ARC_REL,
})

_COMMAND_LETTERS = "".join(c.value for c in PathCommand)
_PATH_TOKEN_RE = re.compile(rf"(?P<cmd>[{_COMMAND_LETTERS}])|(?P<num>{NUMBER_RE.pattern})")


@dataclass
class PathCursor:
    """Current point and subpath start while interpreting one ``d`` string."""

    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0


def tokenize_path(d: str) -> list[tuple[PathCommand, list[float]]]:
    """Split path data into (command, operands) runs. Numbers before the first command are dropped."""
    runs: list[tuple[PathCommand, list[float]]] = []
    for m in _PATH_TOKEN_RE.finditer(d):
        if m.group("cmd"):
            runs.append((PathCommand(m.group("cmd")), []))
        elif runs:
            runs[-1][1].append(float(m.group("num")))
    return runs


def _pairs(nums: list[float]) -> list[tuple[float, float]]:
    return [(nums[i], nums[i + 1]) for i in range(0, len(nums) - 1, 2)]


def _move(cursor: PathCursor, cmd: PathCommand, nums: list[float], out: list[tuple[float, float]]) -> None:
    for i, (x, y) in enumerate(_pairs(nums)):
        _line_to(cursor, cmd.relative, x, y, out)
        if i == 0:
            cursor.start_x, cursor.start_y = cursor.x, cursor.y


def _line(cursor: PathCursor, cmd: PathCommand, nums: list[float], out: list[tuple[float, float]]) -> None:
    for x, y in _pairs(nums):
        _line_to(cursor, cmd.relative, x, y, out)


def _line_to(cursor: PathCursor, relative: bool, x: float, y: float, out: list[tuple[float, float]]) -> None:
    if relative:
        cursor.x += x
        cursor.y += y
    else:
        cursor.x, cursor.y = x, y
    out.append((cursor.x, cursor.y))


def _horizontal(cursor: PathCursor, cmd: PathCommand, nums: list[float], out: list[tuple[float, float]]) -> None:
    for x in nums:
        cursor.x = cursor.x + x if cmd.relative else x
        out.append((cursor.x, cursor.y))


def _vertical(cursor: PathCursor, cmd: PathCommand, nums: list[float], out: list[tuple[float, float]]) -> None:
    for y in nums:
        cursor.y = cursor.y + y if cmd.relative else y
        out.append((cursor.x, cursor.y))


def _close(cursor: PathCursor, cmd: PathCommand, nums: list[float], out: list[tuple[float, float]]) -> None:
    cursor.x, cursor.y = cursor.start_x, cursor.start_y
    out.append((cursor.x, cursor.y))


_CommandHandler = Callable[[PathCursor, PathCommand, list[float], list[tuple[float, float]]], None]

_PATH_HANDLERS: dict[PathCommand, _CommandHandler] = {
    PathCommand.MOVE_ABS: _move,
    PathCommand.MOVE_REL: _move,
    PathCommand.LINE_ABS: _line,
    PathCommand.LINE_REL: _line,
    PathCommand.HORIZONTAL_ABS: _horizontal,
    PathCommand.HORIZONTAL_REL: _horizontal,
    PathCommand.VERTICAL_ABS: _vertical,
    PathCommand.VERTICAL_REL: _vertical,
    PathCommand.CLOSE_ABS: _close,
    PathCommand.CLOSE_REL: _close,
}


def path_points(d: str | None) -> NDArray[np.float64]:
    """Points visited by the measured commands of a path → Nx2 array."""
    cursor = PathCursor()
    out: list[tuple[float, float]] = []
    for cmd, nums in tokenize_path(d or ""):
        handler = _PATH_HANDLERS.get(cmd)
        if handler is not None:
            handler(cursor, cmd, nums, out)
    if not out:
        return _EMPTY
    return np.array(out, dtype=np.float64)


# ── Element folding ───────────────────────────────────────────────────────


def _numbers(attrs: dict[str, str], *names: str) -> list[float] | None:
    values = [parse_number(attrs.get(name)) for name in names]
    if any(v is None for v in values):
        return None
    return values  # type: ignore[return-value]


def _rect_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    nums = _numbers(attrs, "x", "y", "width", "height")
    if nums is None:
        return _EMPTY
    x, y, w, h = nums
    if w <= 0 or h <= 0:
        return _EMPTY
    return np.array([[x, y], [x + w, y + h]])


def _circle_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    nums = _numbers(attrs, "cx", "cy", "r")
    if nums is None:
        return _EMPTY
    cx, cy, r = nums
    if r <= 0:
        return _EMPTY
    return np.array([[cx - r, cy - r], [cx + r, cy + r]])


def _ellipse_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    nums = _numbers(attrs, "cx", "cy", "rx", "ry")
    if nums is None:
        return _EMPTY
    cx, cy, rx, ry = nums
    if rx <= 0 or ry <= 0:
        return _EMPTY
    return np.array([[cx - rx, cy - ry], [cx + rx, cy + ry]])


def _line_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    nums = _numbers(attrs, "x1", "y1", "x2", "y2")
    if nums is None:
        return _EMPTY
    x1, y1, x2, y2 = nums
    return np.array([[x1, y1], [x2, y2]])


def _poly_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    return parse_points(attrs.get("points"))


def _path_element_points(attrs: dict[str, str]) -> NDArray[np.float64]:
    return path_points(attrs.get("d"))


SHAPE_MEASURES: dict[str, Callable[[dict[str, str]], NDArray[np.float64]]] = {
    "rect": _rect_points,
    "circle": _circle_points,
    "ellipse": _ellipse_points,
    "line": _line_points,
    "polygon": _poly_points,
    "polyline": _poly_points,
    "path": _path_element_points,
}


def element_bbox(node: Node) -> BoundingBox | None:
    """Box of a single element, or None when it is not a measured shape or is degenerate."""
    measure = SHAPE_MEASURES.get(node.local_name)
    if measure is None:
        return None
    return BoundingBox.from_points(measure(node.attributes))


def compute_bbox(root: Node) -> BoundingBox | None:
    """Fold every measured element of the tree into one box. None when nothing was measured."""
    box: BoundingBox | None = None
    for node in root.walk():
        found = element_bbox(node)
        if found is None:
            continue
        box = found if box is None else box.grow(found)
    return box


def crop_to_bbox(root: Node) -> BoundingBox | None:
    """Rewrite the root's viewBox (and plain width/height) to the artwork's box.

    Returns the applied box, or None when the root was left unmodified: the
    root is not ``<svg>``, no geometry was found, or the box has no area.
    """
    if root.local_name != "svg":
        logger.debug("Crop skipped: root is <%s>, not <svg>", root.name)
        return None

    box = compute_bbox(root)
    if box is None:
        logger.debug("Crop skipped: no measurable geometry")
        return None
    if box.width <= 0 or box.height <= 0:
        logger.debug("Crop skipped: degenerate box %s", box)
        return None

    root.attributes["viewBox"] = box.viewbox
    for name, size in (("width", box.width), ("height", box.height)):
        if is_plain_length(root.attributes.get(name)):
            root.attributes[name] = format_number(size)
    return box
