#!/usr/bin/env python3
"""
Single Block Example: Lines With Different Budgets

ImageWithText holds one text block whose lines each allow a different
number of characters, e.g. a shape that narrows towards the bottom.
"""

from pathlib import Path

from imagetext import ImageWithText, TextOverflowError

HERE = Path(__file__).parent

image = ImageWithText(HERE / "source.jpg", "Thanks for using our image text library!")
image.add_lines(25, 30, 23)
image.align = "right"
image.start_x = 20
image.start_y = 20
image.color = "FFFFFF"
image.size = 24
image.line_height = 32

try:
    image.render(HERE / "destination-right.png")
except TextOverflowError as e:
    print(f"✗ Error: {e}")
else:
    print("✓ Image saved to: destination-right.png")
