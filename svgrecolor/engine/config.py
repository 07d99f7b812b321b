"""Conversion options — per-call switches for the engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Controls which optional steps run for one conversion."""

    # Tighten the root viewBox (and plain width/height) to the artwork
    crop: bool = False
    # Leave a trailing declaration without ';' untouched
    require_semicolon: bool = True
