"""Draw multi-line, aligned text blocks onto images."""

__version__ = "0.1.0"

# High-level Python API
from imagetext.api import ImageWithText, Text, TextImage
from imagetext.config import RenderJob, load_job, render_job
from imagetext.errors import (
    ConfigurationError,
    ErrorKind,
    ImageTextError,
    MeasurementError,
    TextOverflowError,
)
from imagetext.fonts import register_fonts, resolve_font
from imagetext.fonts.metrics import FontMeasurer
from imagetext.layout import (
    Align,
    DrawInstruction,
    LayoutEngine,
    LayoutStyle,
    LineAllocator,
    LineSlot,
    TextExtent,
    make_slots,
    uniform_slots,
)

__all__ = [
    "Align",
    "ConfigurationError",
    "DrawInstruction",
    "ErrorKind",
    "FontMeasurer",
    "ImageTextError",
    "ImageWithText",
    "LayoutEngine",
    "LayoutStyle",
    "LineAllocator",
    "LineSlot",
    "MeasurementError",
    "RenderJob",
    "Text",
    "TextExtent",
    "TextImage",
    "TextOverflowError",
    "load_job",
    "make_slots",
    "register_fonts",
    "render_job",
    "resolve_font",
    "uniform_slots",
]
