"""Leaf-node numeric helpers. No engine imports."""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

# Leading SVG number, same lenience as a browser's parseFloat: "10px" → 10
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_LEADING_NUMBER_RE = re.compile(r"\s*(" + NUMBER_RE.pattern + r")")
_PLAIN_LENGTH_RE = re.compile(r"\s*" + NUMBER_RE.pattern + r"\s*(?:px)?\s*")


def parse_number(value: str | None, default: float | None = 0.0) -> float | None:
    """Parse the leading number of an attribute value.

    A missing attribute yields ``default``; a present but unparseable one
    yields None so callers can skip the element.
    """
    if value is None or value.strip() == "":
        return default
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return None
    number = float(m.group(1))
    return number if math.isfinite(number) else None


def is_plain_length(value: str | None) -> bool:
    """True for unitless or ``px`` lengths such as ``"24"`` or ``"24px"``."""
    return value is not None and _PLAIN_LENGTH_RE.fullmatch(value) is not None


def parse_points(points: str | None) -> NDArray[np.float64]:
    """Parse a polygon/polyline ``points`` list of ``"x,y"`` pairs → Nx2 array.

    Pairs are whitespace-separated; a pair that is not two finite numbers is
    skipped.
    """
    pairs: list[tuple[float, float]] = []
    for token in (points or "").split():
        parts = token.split(",")
        if len(parts) != 2:
            continue
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            continue
        if math.isfinite(x) and math.isfinite(y):
            pairs.append((x, y))
    return np.array(pairs, dtype=np.float64).reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate: 10.0 → "10", 0.5 → "0.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
