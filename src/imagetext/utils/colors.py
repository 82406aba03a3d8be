"""Color parsing for text styles."""

import re

from PIL import ImageColor

from imagetext.errors import ConfigurationError
from imagetext.types import RGBColor

# Bare hex without the "#" prefix ("FFFFFF")
_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def normalize_color(value: str) -> str:
    """
    Normalize a color string to a form Pillow understands.

    Accepts bare hex ("FFFFFF"), prefixed hex ("#ffffff"), and any color
    name or function Pillow knows ("white", "rgb(255, 0, 0)").

    Args:
        value: Color string.

    Returns:
        Color string accepted by PIL.ImageColor.

    Raises:
        ConfigurationError: If the color cannot be parsed.
    """
    value = value.strip()
    if _BARE_HEX.match(value):
        value = f"#{value}"

    try:
        ImageColor.getrgb(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid color: {value!r}") from e

    return value


def parse_color(value: str | RGBColor) -> RGBColor:
    """
    Convert a color string or tuple to an RGB(A) tuple in 0-255 range.

    Raises:
        ConfigurationError: If the color cannot be parsed.
    """
    if isinstance(value, tuple):
        if len(value) not in (3, 4) or not all(0 <= c <= 255 for c in value):
            raise ConfigurationError(f"Invalid color tuple: {value!r}")
        return value
    return ImageColor.getrgb(normalize_color(value))
