"""Image I/O and glyph painting."""

from imagetext.render.glyphs import GlyphRenderer
from imagetext.render.image import (
    load_image,
    load_image_from_bytes,
    load_image_from_url,
    save_image,
    save_image_to_bytes,
)

__all__ = [
    "GlyphRenderer",
    "load_image",
    "load_image_from_bytes",
    "load_image_from_url",
    "save_image",
    "save_image_to_bytes",
]
