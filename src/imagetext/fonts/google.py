"""Google Fonts download cache."""

import logging
import os
import re
from pathlib import Path

import requests

from imagetext.errors import MeasurementError

logger = logging.getLogger(__name__)

CACHE_ENV_VAR = "IMAGETEXT_FONT_CACHE"
DEFAULT_CACHE_DIR = Path.home() / ".cache" / "imagetext" / "fonts"

# CSS API v1 serves TrueType sources to clients that do not ask for woff2
CSS_URL = "https://fonts.googleapis.com/css"

_TTF_SRC = re.compile(r"src:\s*url\((https://[^)]+\.ttf)\)")
_ANY_TTF = re.compile(r"(https://[^\s'\"]+\.ttf)")


class GoogleFontCache:
    """Downloads Google Fonts once and serves them from a local directory."""

    def __init__(self, cache_dir: Path | None = None, timeout: float = 10.0) -> None:
        """
        Args:
            cache_dir: Directory for downloaded TTF files. Defaults to
                $IMAGETEXT_FONT_CACHE or ~/.cache/imagetext/fonts.
            timeout: Timeout in seconds for each HTTP request.
        """
        if cache_dir is None:
            env_dir = os.environ.get(CACHE_ENV_VAR)
            cache_dir = Path(env_dir) if env_dir else DEFAULT_CACHE_DIR
        self.cache_dir = Path(cache_dir)
        self.timeout = timeout

    def cache_path(self, family: str, weight: int) -> Path:
        return self.cache_dir / f"{family.replace(' ', '')}-{weight}.ttf"

    def fetch(self, family: str, weight: int = 400) -> Path:
        """
        Return the path of a cached TTF for `family` at `weight`, downloading it if needed.

        Raises:
            MeasurementError: If the font cannot be downloaded.
        """
        path = self.cache_path(family, weight)
        if path.exists():
            logger.debug(f"Using cached Google Font: {path.name}")
            return path

        logger.info(f"Downloading Google Font: {family} (weight {weight})")
        try:
            css = requests.get(
                CSS_URL,
                params={"family": f"{family}:{weight}", "display": "swap"},
                timeout=self.timeout,
            )
            css.raise_for_status()

            font_url = extract_font_url(css.text)
            if font_url is None:
                raise MeasurementError(f"No TrueType source for Google Font {family} (weight {weight})")

            font = requests.get(font_url, timeout=self.timeout * 3)
            font.raise_for_status()
        except requests.RequestException as e:
            raise MeasurementError(f"Failed to download Google Font {family} (weight {weight}): {e}") from e

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(font.content)
        logger.info(f"Cached Google Font: {path}")
        return path


def extract_font_url(css_content: str) -> str | None:
    """
    Pull the TTF URL out of an @font-face stylesheet.

    Returns:
        The first TrueType URL, or None if the stylesheet has none.
    """
    match = _TTF_SRC.search(css_content) or _ANY_TTF.search(css_content)
    return match.group(1) if match else None
