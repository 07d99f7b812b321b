"""Conversion error taxonomy.

Only structural failures are errors. An unrecognized color or an unmeasurable
shape is a normal no-op and never raises.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for a failed conversion of one document."""

    def __init__(self, detail: str, source: str = "<string>") -> None:
        self.detail = detail
        self.source = source
        super().__init__(f"{source}: {detail}")


class ParseError(ConversionError):
    """Input text is not well-formed markup."""


class SerializationError(ConversionError):
    """A document tree could not be rendered back to text."""
