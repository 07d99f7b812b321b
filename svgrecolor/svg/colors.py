"""Color value classification.

Every string falls into exactly one ColorKind. Only hex, named and functional
colors are rewritten; keywords such as ``none``, ``inherit``, ``transparent``
and ``currentColor`` classify as NOT_A_COLOR and are never touched.

Hex matching is limited to 3- and 6-digit forms. The 4- and 8-digit alpha
forms (``#rgba``, ``#rrggbbaa``) are left alone on purpose.
"""

from __future__ import annotations

import enum
import re

_HEX_RE = re.compile(r"#(?:[0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)
_FUNCTIONAL_RE = re.compile(r"(?:rgba?|hsla?)\([^()]+\)", re.IGNORECASE | re.DOTALL)

# CSS Color Module Level 4 named colors (lower-case)
CSS_NAMED_COLORS: frozenset[str] = frozenset({
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure",
    "beige", "bisque", "black", "blanchedalmond", "blue",
    "blueviolet", "brown", "burlywood", "cadetblue", "chartreuse",
    "chocolate", "coral", "cornflowerblue", "cornsilk", "crimson",
    "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
    "darkgreen", "darkgrey", "darkkhaki", "darkmagenta", "darkolivegreen",
    "darkorange", "darkorchid", "darkred", "darksalmon", "darkseagreen",
    "darkslateblue", "darkslategray", "darkslategrey", "darkturquoise", "darkviolet",
    "deeppink", "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
    "firebrick", "floralwhite", "forestgreen", "fuchsia", "gainsboro",
    "ghostwhite", "gold", "goldenrod", "gray", "green",
    "greenyellow", "grey", "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki", "lavender", "lavenderblush",
    "lawngreen", "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue", "lightslategray", "lightslategrey",
    "lightsteelblue", "lightyellow", "lime", "limegreen", "linen",
    "magenta", "maroon", "mediumaquamarine", "mediumblue", "mediumorchid",
    "mediumpurple", "mediumseagreen", "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab",
    "orange", "orangered", "orchid", "palegoldenrod", "palegreen",
    "paleturquoise", "palevioletred", "papayawhip", "peachpuff", "peru",
    "pink", "plum", "powderblue", "purple", "rebeccapurple",
    "red", "rosybrown", "royalblue", "saddlebrown", "salmon",
    "sandybrown", "seagreen", "seashell", "sienna", "silver",
    "skyblue", "slateblue", "slategray", "slategrey", "snow",
    "springgreen", "steelblue", "tan", "teal", "thistle",
    "tomato", "turquoise", "violet", "wheat", "white",
    "whitesmoke", "yellow", "yellowgreen",
})

CURRENT_COLOR = "currentColor"


class ColorKind(enum.Enum):
    HEX = "hex"
    NAMED = "named"
    FUNCTIONAL = "functional"
    NOT_A_COLOR = "not_a_color"


def classify_color(value: str) -> ColorKind:
    """Classify a fill/stroke value. Pure and total over all strings."""
    text = value.strip()
    if _HEX_RE.fullmatch(text):
        return ColorKind.HEX
    if text.lower() in CSS_NAMED_COLORS:
        return ColorKind.NAMED
    if _FUNCTIONAL_RE.fullmatch(text):
        return ColorKind.FUNCTIONAL
    return ColorKind.NOT_A_COLOR


def is_replaceable_color(value: str) -> bool:
    return classify_color(value) is not ColorKind.NOT_A_COLOR
