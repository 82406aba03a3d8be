"""Pixel layout of distributed lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Callable, NamedTuple, Sequence

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from imagetext.errors import ConfigurationError, ImageTextError, MeasurementError
from imagetext.layout.slots import LineSlot
from imagetext.types import FontRef
from imagetext.utils.colors import normalize_color

logger = logging.getLogger(__name__)


class Align(str, Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def coerce_align(value):
    """Accept alignment names case-insensitively; other values pass through to validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


def coerce_color(value):
    """Normalize color strings; other values pass through to validation."""
    if isinstance(value, str):
        return normalize_color(value)
    return value


AlignValue = Annotated[Align, BeforeValidator(coerce_align)]
ColorValue = Annotated[str, BeforeValidator(coerce_color)]


class TextExtent(NamedTuple):
    """Pixel size of a rendered string."""

    width: float
    height: float


# (text, font, size) -> TextExtent
Measure = Callable[[str, FontRef, float], TextExtent]


class LayoutStyle(BaseModel):
    """
    Style for one layout pass.

    For LEFT and CENTER alignment, origin_x/origin_y is the top-left corner of
    the text block. For RIGHT alignment, origin_x is the inset from the right
    edge of the image.
    """

    model_config = ConfigDict(frozen=True)

    align: AlignValue = Align.LEFT
    origin_x: float = 0
    origin_y: float = 0
    line_height: float = 24
    """Vertical distance between baselines in pixels."""

    font: FontRef = None
    """Font reference passed through to the measurement callable."""

    size: float = Field(default=16, gt=0)
    color: ColorValue = "#000000"


@dataclass
class MeasuredLine:
    """A non-empty line with its measured pixel size."""

    row: int
    text: str
    pixel_width: float
    pixel_height: float


@dataclass(frozen=True)
class DrawInstruction:
    """Text to paint and its baseline origin."""

    text: str
    x: float
    y: float
    row: int


class LayoutEngine:
    """Computes draw offsets for distributed lines."""

    def __init__(self, measure: Measure) -> None:
        """
        Initialize layout engine.

        Args:
            measure: Callable returning the pixel extent of a string for a
                given font and size.
        """
        self.measure = measure

    def measure_lines(self, slots: Sequence[LineSlot], style: LayoutStyle) -> list[MeasuredLine]:
        """
        Join and measure every non-empty slot.

        Rows keep their declared position; empty slots are skipped without
        renumbering the lines below them.
        """
        measured = []
        for row, slot in enumerate(slots):
            if not slot.words:
                continue
            text = slot.text
            width, height = self._measure(text, style)
            measured.append(MeasuredLine(row=row, text=text, pixel_width=width, pixel_height=height))
        return measured

    def layout(
        self, slots: Sequence[LineSlot], style: LayoutStyle, image_width: float
    ) -> list[DrawInstruction]:
        """
        Compute one draw instruction per non-empty line.

        Args:
            slots: Distributed line slots, top to bottom.
            style: Alignment, origin, line height and font.
            image_width: Width of the target image in pixels.

        Returns:
            Draw instructions in ascending row order.

        Raises:
            MeasurementError: If a line cannot be measured.
            ConfigurationError: If the alignment is not an Align member.
        """
        if style.align not in (Align.LEFT, Align.CENTER, Align.RIGHT):
            raise ConfigurationError(f"Unsupported alignment: {style.align!r}")

        lines = self.measure_lines(slots, style)
        max_line_width = max((line.pixel_width for line in lines), default=0)

        instructions = []
        for line in lines:
            # First baseline sits one line height below the origin
            y = style.origin_y + style.line_height * (line.row + 1)

            if style.align == Align.LEFT:
                x = style.origin_x
            elif style.align == Align.CENTER:
                x = style.origin_x + (max_line_width - line.pixel_width) / 2
            else:
                x = image_width - line.pixel_width - style.origin_x

            logger.debug(f"Row {line.row}: {line.text!r} at ({x}, {y}), width {line.pixel_width}")
            instructions.append(DrawInstruction(text=line.text, x=x, y=y, row=line.row))

        return instructions

    def _measure(self, text: str, style: LayoutStyle) -> TextExtent:
        try:
            width, height = self.measure(text, style.font, style.size)
        except ImageTextError:
            raise
        except Exception as e:
            raise MeasurementError(
                f"Failed to measure {text!r} with font {style.font!r} at size {style.size}: {e}"
            ) from e
        return TextExtent(width, height)
