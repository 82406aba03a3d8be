"""Font registration, resolution and loading."""

import logging
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from imagetext.errors import MeasurementError
from imagetext.fonts.google import GoogleFontCache
from imagetext.types import FontRef

logger = logging.getLogger(__name__)

FONT_SUFFIXES = (".ttf", ".otf")

# Registered font names (TitleCase) mapped to their files
_FONT_PATHS: dict[str, Path] = {}

_google_fonts = GoogleFontCache()


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Examples:
        "ubuntu-medium" → "Ubuntu-Medium"
        "roboto:700" → "Roboto-700"
    """
    parts = name.replace(":", "-").split("-")
    return "-".join(part.strip().title() for part in parts)


def register_fonts(directory: str | Path) -> int:
    """
    Register every TTF/OTF file in a directory.

    Each font is registered under a TitleCase name based on its filename,
    e.g. Ubuntu-Medium.ttf and ubuntu-medium.otf both become "Ubuntu-Medium".
    Files Pillow cannot open are skipped with a warning.

    Args:
        directory: Directory to scan (not recursive).

    Returns:
        Number of fonts registered.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Font directory not found: {directory}")

    font_files = sorted(p for p in directory.iterdir() if p.suffix.lower() in FONT_SUFFIXES)
    if not font_files:
        logger.warning(f"No TTF/OTF font files found in {directory}")

    registered_count = 0
    for font_path in font_files:
        font_name = _normalize_font_name(font_path.stem)
        try:
            ImageFont.truetype(str(font_path), 12)
        except OSError as e:
            logger.warning(f"Failed to register font {font_name} from {font_path.name}: {e}. Skipping.")
            continue

        _FONT_PATHS[font_name] = font_path
        logger.info(f"Registered font: {font_name} from {font_path.name}")
        registered_count += 1

    load_font.cache_clear()
    return registered_count


def get_font_path(font_name: str) -> Path | None:
    """Get the file of a registered font, or None if it is not registered."""
    stem = Path(font_name)
    if stem.suffix.lower() in FONT_SUFFIXES:
        font_name = stem.stem
    return _FONT_PATHS.get(_normalize_font_name(font_name))


def resolve_font(font: FontRef) -> str | None:
    """
    Resolve a font reference to something Pillow can open.

    Resolution order:
    1. None → None (Pillow's built-in default font)
    2. Existing file path
    3. Registered font name (case-insensitive)
    4. "family:weight" → Google Fonts download (cached)
    5. Anything else is returned unchanged; Pillow searches the system font
       directories for it (e.g. "DejaVuSans.ttf")

    Raises:
        MeasurementError: If a Google Font spec is malformed or cannot be downloaded.
    """
    if font is None:
        return None

    spec = str(font).strip()
    path = Path(spec).expanduser()
    if path.is_file():
        return str(path)

    if (registered := get_font_path(spec)) is not None:
        logger.debug(f"Font '{spec}' found in registry")
        return str(registered)

    if ":" in spec:
        family, weight_str = (part.strip() for part in spec.split(":", 1))
        try:
            weight = int(weight_str)
        except ValueError as e:
            raise MeasurementError(f"Invalid font weight '{weight_str}' in '{spec}'") from e

        font_path = _google_fonts.fetch(family, weight)
        _FONT_PATHS[_normalize_font_name(spec)] = font_path
        return str(font_path)

    return spec


@lru_cache(maxsize=64)
def load_font(font: FontRef, size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """
    Open a font at a pixel size.

    Args:
        font: Font reference (see resolve_font).
        size: Font size in pixels.

    Raises:
        MeasurementError: If the font cannot be opened.
    """
    font_path = resolve_font(font)
    if font_path is None:
        return ImageFont.load_default(size=size)

    try:
        return ImageFont.truetype(font_path, size)
    except OSError as e:
        raise MeasurementError(f"Cannot open font {font!r}: {e}") from e
