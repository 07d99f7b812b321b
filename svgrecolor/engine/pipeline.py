"""Conversion pipeline — runs the steps of one document conversion in order.

unwrap envelope → rewrite style blocks → parse → recolor tree → (crop) → serialize → re-wrap

Parse and serialize failures propagate to the caller; every other step is
fail-open and never raises on unrecognized colors or geometry.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from svgrecolor.engine.config import ConversionOptions
from svgrecolor.engine.context import ConversionContext
from svgrecolor.svg.document import parse_document, serialize_document
from svgrecolor.svg.envelope import unwrap, wrap
from svgrecolor.svg.geometry import crop_to_bbox
from svgrecolor.svg.recolor import recolor_style_blocks, recolor_tree

logger = logging.getLogger(__name__)

Step = Callable[[ConversionContext], None]


def unwrap_envelope(ctx: ConversionContext) -> None:
    ctx.envelope, ctx.markup = unwrap(ctx.source_text)


def rewrite_style_blocks(ctx: ConversionContext) -> None:
    ctx.markup, ctx.recolor.style_blocks = recolor_style_blocks(
        ctx.markup, require_semicolon=ctx.options.require_semicolon
    )


def parse(ctx: ConversionContext) -> None:
    ctx.root = parse_document(ctx.markup, ctx.source)


def recolor(ctx: ConversionContext) -> None:
    recolor_tree(ctx.root, require_semicolon=ctx.options.require_semicolon, stats=ctx.recolor)


def crop(ctx: ConversionContext) -> None:
    if ctx.options.crop:
        ctx.bbox = crop_to_bbox(ctx.root)


def serialize(ctx: ConversionContext) -> None:
    ctx.output = wrap(ctx.envelope, serialize_document(ctx.root, ctx.source))


DEFAULT_STEPS: tuple[tuple[str, Step], ...] = (
    ("unwrap_envelope", unwrap_envelope),
    ("style_blocks", rewrite_style_blocks),
    ("parse", parse),
    ("recolor", recolor),
    ("crop", crop),
    ("serialize", serialize),
)


class Pipeline:
    """Orchestrates the conversion steps."""

    def __init__(self, steps: tuple[tuple[str, Step], ...] = DEFAULT_STEPS) -> None:
        self.steps = steps

    def run(self, ctx: ConversionContext) -> ConversionContext:
        start = time.perf_counter()
        for name, step in self.steps:
            t0 = time.perf_counter()
            step(ctx)
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.step_times_ms[name] = elapsed
            logger.debug("  %s completed in %.1fms", name, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Converted %s: %d colors replaced, %s, %s in %.0fms",
            ctx.source,
            ctx.colors_replaced,
            f"viewBox {ctx.bbox.viewbox}" if ctx.bbox else "canvas unchanged",
            "base64 envelope" if ctx.envelope else "plain text",
            total,
        )
        return ctx


def run_conversion(
    markup: str,
    options: ConversionOptions | None = None,
    source: str = "<string>",
) -> ConversionContext:
    """Convert one document, returning the full context (output plus counters)."""
    ctx = ConversionContext(source_text=markup, source=source, options=options or ConversionOptions())
    return Pipeline().run(ctx)


def convert(markup: str, crop: bool = False, *, source: str = "<string>") -> str:
    """Rewrite hard-coded colors to currentColor, optionally cropping the canvas.

    Raises ParseError for malformed markup and SerializationError if the tree
    cannot be rendered.
    """
    return run_conversion(markup, ConversionOptions(crop=crop), source).output
