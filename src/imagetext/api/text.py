"""Styled text blocks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from imagetext.errors import ConfigurationError
from imagetext.layout import (
    Align,
    AlignValue,
    ColorValue,
    DrawInstruction,
    LayoutEngine,
    LayoutStyle,
    LineAllocator,
    LineSlot,
    Measure,
    make_slots,
)
from imagetext.render.glyphs import GlyphRenderer
from imagetext.types import FontRef

if TYPE_CHECKING:
    from imagetext.api.image import TextImage

logger = logging.getLogger(__name__)


class Text(BaseModel):
    """
    A single text block drawn onto an image.

    Style fields may be changed after construction; every assignment is
    validated, so an unknown alignment or color fails immediately:

        text = Text("Thanks for using our image text library!", 3, 25)
        text.align = "center"
        text.color = "FFFFFF"
        text.start_x = 40

    Lines are declared up front. Words that do not fit in the declared
    lines raise TextOverflowError when the block is laid out.
    """

    model_config = ConfigDict(validate_assignment=True)

    text: str = "Hello world"

    width: int = Field(default=80, ge=0)
    """Default number of characters per line."""

    line_widths: list[int | None] = Field(default_factory=list)
    """Character budget of each declared line. None uses `width` at layout time."""

    align: AlignValue = Align.LEFT
    """Text alignment: "left", "center", or "right"."""

    color: ColorValue = "#000000"
    """Text color. Hex with or without "#" ("FFFFFF"), or a color name."""

    font: FontRef = None
    """Font file path, registered name, or "family:weight". None uses Pillow's default font."""

    line_height: float = 24
    """Distance between baselines in pixels."""

    size: float = Field(default=16, gt=0)
    """Font size in pixels."""

    start_x: float = 0
    """Left edge of the block (LEFT/CENTER) or inset from the right image edge (RIGHT)."""

    start_y: float = 0
    """Top of the block. The first baseline sits one line height below it."""

    def __init__(self, text: str = "Hello world", num_lines: int = 1, width: int = 80, **data) -> None:
        """
        Initialize text block.

        Args:
            text: The text.
            num_lines: Number of lines to declare.
            width: Maximum number of characters per declared line.
            **data: Style fields (align, color, font, line_height, size, start_x, start_y).
        """
        super().__init__(text=text, width=width, **data)
        self.add_lines(num_lines)

    @property
    def num_lines(self) -> int:
        return len(self.line_widths)

    def add_lines(self, num_lines: int = 1, width: int | None = None) -> None:
        """
        Declare more lines.

        Args:
            num_lines: Number of lines to add.
            width: Character budget for the new lines. Defaults to the block width.
        """
        for _ in range(num_lines):
            self.line_widths.append(self._check_width(width))

    def add_line(self, max_chars: int) -> None:
        """Declare one line with its own character budget."""
        if max_chars is None:
            raise ConfigurationError("max_chars is required")
        self.line_widths.append(self._check_width(max_chars))

    @staticmethod
    def _check_width(width: int | None) -> int | None:
        if width is not None and width < 0:
            raise ConfigurationError(f"Line width must be non-negative, got {width}")
        return width

    def slots(self) -> list[LineSlot]:
        """Fresh, empty slots for every declared line."""
        return make_slots(*(self.width if w is None else w for w in self.line_widths))

    def style(self) -> LayoutStyle:
        return LayoutStyle(
            align=self.align,
            origin_x=self.start_x,
            origin_y=self.start_y,
            line_height=self.line_height,
            font=self.font,
            size=self.size,
            color=self.color,
        )

    def allocate(self) -> list[LineSlot]:
        """
        Distribute the text into fresh slots.

        Raises:
            TextOverflowError: If the text does not fit.
        """
        return list(LineAllocator().distribute(self.text, self.slots()))

    def layout(self, image_width: float, measure: Measure) -> list[DrawInstruction]:
        """
        Allocate and lay out the block.

        Args:
            image_width: Width of the target image in pixels.
            measure: Text measurement callable.

        Returns:
            One draw instruction per non-empty line.
        """
        return LayoutEngine(measure).layout(self.allocate(), self.style(), image_width)

    def render_to_image(self, image: TextImage) -> list[DrawInstruction]:
        """
        Lay out this block and paint it onto `image`.

        Returns:
            The instructions that were painted.
        """
        instructions = self.layout(image.width, image.measurer)
        GlyphRenderer(image.image).draw(instructions, self.style())
        logger.info(f"Drew {len(instructions)} line(s) of {self.text!r}")
        return instructions
