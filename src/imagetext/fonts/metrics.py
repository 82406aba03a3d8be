"""Text measurement with Pillow font metrics."""

from imagetext.fonts import load_font
from imagetext.layout.engine import TextExtent
from imagetext.types import FontRef


class FontMeasurer:
    """
    Measures the bounding box of rendered text.

    Instances are callables matching the layout engine's measure signature.
    """

    def __call__(self, text: str, font: FontRef, size: float) -> TextExtent:
        """
        Measure `text` rendered with `font` at `size` pixels.

        Returns:
            Width and height of the ink bounding box in pixels.

        Raises:
            MeasurementError: If the font cannot be opened.
        """
        left, top, right, bottom = load_font(font, size).getbbox(text)
        return TextExtent(width=right - left, height=bottom - top)
