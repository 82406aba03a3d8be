"""Paint draw instructions onto a Pillow image."""

import logging
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont

from imagetext.fonts import load_font
from imagetext.layout.engine import DrawInstruction, LayoutStyle
from imagetext.utils.colors import parse_color

logger = logging.getLogger(__name__)


class GlyphRenderer:
    """
    Draws text onto a single image.

    Not thread-safe: the image is mutated in place, so blocks sharing an
    image must be painted one after another.
    """

    def __init__(self, image: Image.Image) -> None:
        self.image = image
        self._draw = ImageDraw.Draw(image)

    def draw(self, instructions: Iterable[DrawInstruction], style: LayoutStyle) -> int:
        """
        Paint each instruction with the style's font, size and color.

        Instruction coordinates are the left end of the text baseline.

        Returns:
            Number of lines painted.

        Raises:
            MeasurementError: If the font cannot be opened.
        """
        font = load_font(style.font, style.size)
        fill = parse_color(style.color)
        # Bitmap fallback fonts have no baseline anchor support
        anchor = "ls" if isinstance(font, ImageFont.FreeTypeFont) else None

        count = 0
        for instruction in instructions:
            self._draw.text((instruction.x, instruction.y), instruction.text, font=font, fill=fill, anchor=anchor)
            count += 1

        logger.debug(f"Painted {count} line(s) with font {style.font!r} at size {style.size}")
        return count
