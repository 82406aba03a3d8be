"""Type aliases used across the imagetext package."""

from pathlib import Path
from typing import Tuple, Union

# Color types
RGBColor = Tuple[int, ...]  # RGB or RGBA color in 0-255 range

# Font reference: None (built-in default), a file path, a registered name,
# or a "family:weight" Google Font spec
FontRef = Union[str, None]

# Anything load_image() accepts
ImageInput = Union[str, Path, bytes]
