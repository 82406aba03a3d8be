"""Images with text blocks drawn on them."""

import logging
from pathlib import Path

from PIL import Image

from imagetext.api.text import Text
from imagetext.fonts.metrics import FontMeasurer
from imagetext.layout import DrawInstruction, Measure
from imagetext.render.glyphs import GlyphRenderer
from imagetext.render.image import load_image, save_image, save_image_to_bytes
from imagetext.types import ImageInput

logger = logging.getLogger(__name__)


class TextImage:
    """
    Renders an image with multiple, independently styled text blocks.

    Each block controls its own alignment, color, font, line height, size
    and position:

        image = TextImage("source.jpg")
        image.add_text(Text("Thanks for using our image text library!", 3, 25, color="FFFFFF"))
        image.add_text(Text("No, really, thanks!", 1, 30, start_y=140))
        image.render("destination.jpg")
    """

    def __init__(self, source: ImageInput, measurer: Measure | None = None) -> None:
        """
        Args:
            source: Image path, http(s) URL, or raw image bytes.
            measurer: Text measurement callable. Defaults to Pillow font metrics.
        """
        self.image: Image.Image = load_image(source)
        self.measurer: Measure = measurer or FontMeasurer()
        self.texts: list[Text] = []

    @property
    def width(self) -> int:
        """Image width in pixels."""
        return self.image.width

    def add_text(self, text: Text) -> None:
        self.texts.append(text)

    def layout(self) -> list[tuple[Text, list[DrawInstruction]]]:
        """
        Lay out every block without painting.

        Raises:
            TextOverflowError: If any block does not fit its lines.
            MeasurementError: If a font cannot be opened.
        """
        return [(text, text.layout(self.width, self.measurer)) for text in self.texts]

    def draw_text(self) -> None:
        """
        Paint all text blocks onto the image.

        Every block is laid out before anything is painted, so a block that
        overflows leaves the image untouched.
        """
        planned = self.layout()
        renderer = GlyphRenderer(self.image)
        for text, instructions in planned:
            renderer.draw(instructions, text.style())
        logger.info(f"Drew {len(planned)} text block(s)")

    def render(self, output_path: str | Path, format: str | None = None) -> Path:
        """
        Draw all text blocks and save the image.

        Args:
            output_path: Destination file. The format follows the extension
                unless `format` is given.
            format: Optional Pillow format name (PNG, JPEG, ...).

        Returns:
            Path the image was written to.
        """
        self.draw_text()
        return save_image(self.image, output_path, format)

    def render_to_bytes(self, format: str = "PNG") -> bytes:
        """Draw all text blocks and return the encoded image."""
        self.draw_text()
        return save_image_to_bytes(self.image, format)


def _block_property(name: str, doc: str) -> property:
    def getter(self):
        return getattr(self.block, name)

    def setter(self, value):
        setattr(self.block, name, value)

    return property(getter, setter, doc=doc)


class ImageWithText(TextImage):
    """
    Renders one text block whose lines each have their own character budget.

    You must declare the available lines with add_line() or add_lines():

        image = ImageWithText("source.jpg", "Thanks for using our image text library!")
        image.add_lines(25, 30, 23)
        image.align = "right"
        image.start_x = 20
        image.render("destination.jpg")

    For left and center alignment, start_x/start_y is the top-left corner of
    the text block. For right alignment, start_x is the inset from the right
    edge of the image.
    """

    def __init__(self, source: ImageInput, text: str, measurer: Measure | None = None) -> None:
        super().__init__(source, measurer)
        self.block = Text(text, num_lines=0)
        self.add_text(self.block)

    text = _block_property("text", "The text to write on the image.")
    align = _block_property("align", "Text alignment: left, center, or right.")
    color = _block_property("color", "Text color, hex without '#' accepted.")
    font = _block_property("font", "Font file path or registered font name.")
    line_height = _block_property("line_height", "Distance between baselines in pixels.")
    size = _block_property("size", "Font size in pixels.")
    start_x = _block_property("start_x", "X offset of the text block.")
    start_y = _block_property("start_y", "Y offset of the text block.")

    def add_line(self, max_characters: int = 80) -> None:
        """Declare an available line of text."""
        self.block.add_line(max_characters)

    def add_lines(self, *max_characters: int) -> None:
        """
        Declare several available lines at once.

        Each argument is the maximum number of characters allowed on that line.
        """
        for max_chars in max_characters:
            self.add_line(max_chars)
