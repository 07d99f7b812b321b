"""svgrecolor — themeable SVG icons via currentColor, with optional canvas cropping."""

from svgrecolor.engine.pipeline import convert
from svgrecolor.errors import ConversionError, ParseError, SerializationError

__version__ = "0.1.0"

__all__ = ["convert", "ConversionError", "ParseError", "SerializationError"]
