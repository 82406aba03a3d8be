"""Line fitting and layout."""

from imagetext.layout.allocator import LineAllocator, distribute, split_words
from imagetext.layout.engine import (
    Align,
    AlignValue,
    ColorValue,
    DrawInstruction,
    LayoutEngine,
    LayoutStyle,
    Measure,
    MeasuredLine,
    TextExtent,
)
from imagetext.layout.slots import LineSlot, make_slots, uniform_slots

__all__ = [
    "Align",
    "AlignValue",
    "ColorValue",
    "DrawInstruction",
    "LayoutEngine",
    "LayoutStyle",
    "LineAllocator",
    "LineSlot",
    "Measure",
    "MeasuredLine",
    "TextExtent",
    "distribute",
    "make_slots",
    "split_words",
    "uniform_slots",
]
