"""ConversionContext — the mutable state of one conversion call.

Created fresh per call and discarded afterwards; nothing is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgrecolor.engine.config import ConversionOptions
from svgrecolor.svg.document import Node
from svgrecolor.svg.envelope import Envelope
from svgrecolor.svg.geometry import BoundingBox
from svgrecolor.svg.recolor import RecolorStats


@dataclass
class ConversionContext:
    """State flowing through the conversion steps."""

    # Input exactly as received
    source_text: str
    # Label for log lines and errors (file name, upload name)
    source: str = "<string>"
    options: ConversionOptions = field(default_factory=ConversionOptions)

    # Set by the envelope step when the input was a base64 data URI
    envelope: Envelope | None = None
    # Markup text being processed (unwrapped, then style blocks rewritten)
    markup: str = ""
    root: Node | None = None
    recolor: RecolorStats = field(default_factory=RecolorStats)
    # Box applied to the root, when cropping ran and changed the frame
    bbox: BoundingBox | None = None
    # Final output text
    output: str = ""
    step_times_ms: dict[str, float] = field(default_factory=dict)

    @property
    def colors_replaced(self) -> int:
        return self.recolor.total

    @property
    def cropped(self) -> bool:
        return self.bbox is not None
