"""svgrecolor conversion engine."""

from svgrecolor.engine.config import ConversionOptions
from svgrecolor.engine.context import ConversionContext
from svgrecolor.engine.pipeline import Pipeline, convert, run_conversion

__all__ = [
    "ConversionOptions",
    "ConversionContext",
    "Pipeline",
    "convert",
    "run_conversion",
]
