import io

import pytest
from PIL import Image

from imagetext.layout import TextExtent

CHAR_WIDTH = 10
LINE_HEIGHT = 12


def fixed_width_measure(text, font, size):
    """Every character is CHAR_WIDTH pixels wide."""
    return TextExtent(width=len(text) * CHAR_WIDTH, height=LINE_HEIGHT)


class RecordingMeasure:
    def __init__(self):
        self.calls = []

    def __call__(self, text, font, size):
        self.calls.append((text, font, size))
        return fixed_width_measure(text, font, size)


@pytest.fixture
def measure():
    return RecordingMeasure()


def make_png(size=(200, 100), color="white", mode="RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color=color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def source_image(tmp_path):
    path = tmp_path / "source.png"
    path.write_bytes(make_png(size=(300, 150)))
    return path


def is_blank(img: Image.Image) -> bool:
    """True if every pixel is pure white."""
    return all(low == 255 for low, _ in img.convert("RGB").getextrema())
