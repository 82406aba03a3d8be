#!/usr/bin/env python3
"""
Demo: Two Styled Text Blocks

Draws two independently styled text blocks onto source.jpg and saves the
result as destination.jpg. Put a TTF font next to this script (or pass
font=None to use Pillow's built-in font).
"""

from pathlib import Path

from imagetext import Text, TextImage

HERE = Path(__file__).parent

image = TextImage(HERE / "source.jpg")

# Three lines of up to 25 characters each
text1 = Text("Thanks for using our image text library!", 3, 25)
text1.align = "left"
text1.color = "FFFFFF"
text1.font = str(HERE / "Ubuntu-Medium.ttf")
text1.line_height = 36
text1.size = 24
text1.start_x = 40
text1.start_y = 40
image.add_text(text1)

text2 = Text("No, really, thanks!", 1, 30)
text2.align = "left"
text2.color = "000000"
text2.font = str(HERE / "Ubuntu-Medium.ttf")
text2.line_height = 20
text2.size = 14
text2.start_x = 40
text2.start_y = 140
image.add_text(text2)

image.render(HERE / "destination.jpg")

print("✓ Image saved to: destination.jpg")
