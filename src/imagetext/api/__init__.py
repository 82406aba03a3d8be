"""High-level API for drawing text on images."""

from imagetext.api.image import ImageWithText, TextImage
from imagetext.api.text import Text

__all__ = [
    "ImageWithText",
    "Text",
    "TextImage",
]
