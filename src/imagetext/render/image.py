"""Image loading and saving using Pillow."""

import logging
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, ImageOps

from imagetext.types import ImageInput

logger = logging.getLogger(__name__)

URL_TIMEOUT = 15

# Formats that cannot store an alpha channel
_NO_ALPHA_FORMATS = ("JPEG", "BMP")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_image_from_bytes(image_data: bytes) -> Image.Image:
    """
    Load image from raw bytes.

    Args:
        image_data: Raw image bytes (JPEG, PNG, etc.).

    Returns:
        PIL Image object.
    """
    img = Image.open(BytesIO(image_data))
    img.load()
    return img


def load_image_from_url(url: str) -> Image.Image:
    """
    Download and open an image.

    Raises:
        requests.HTTPError: If the server answers with an error status.
    """
    logger.info(f"Downloading image: {url}")
    response = requests.get(url, timeout=URL_TIMEOUT)
    response.raise_for_status()
    return load_image_from_bytes(response.content)


def load_image(source: ImageInput) -> Image.Image:
    """
    Load a source image for drawing.

    EXIF orientation is applied and palette/greyscale images are converted so
    that colored text can be painted on them.

    Args:
        source: File path, http(s) URL, or raw image bytes.

    Returns:
        PIL Image in RGB or RGBA mode.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    if isinstance(source, bytes):
        img = load_image_from_bytes(source)
    elif isinstance(source, str) and _is_url(source):
        img = load_image_from_url(source)
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Source image not found: {path}")
        img = Image.open(path)
        img.load()

    img = ImageOps.exif_transpose(img)
    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA" if "A" in img.getbands() else "RGB")
    return img


def _normalize_format(format: str) -> str:
    fmt = format.upper()
    return "JPEG" if fmt == "JPG" else fmt


def _output_format(path: Path, format: str | None) -> str:
    if format:
        return _normalize_format(format)
    ext = path.suffix.lower()
    registered = Image.registered_extensions()
    if ext not in registered:
        raise ValueError(f"Cannot determine image format from extension '{ext}'")
    return registered[ext]


def _prepare_for_format(img: Image.Image, format: str) -> Image.Image:
    if format in _NO_ALPHA_FORMATS and img.mode != "RGB":
        return img.convert("RGB")
    return img


def save_image(img: Image.Image, output_path: str | Path, format: str | None = None) -> Path:
    """
    Save image to a file.

    The format comes from the file extension unless given explicitly.

    Returns:
        Path the image was written to.
    """
    output_path = Path(output_path)
    fmt = _output_format(output_path, format)
    _prepare_for_format(img, fmt).save(output_path, format=fmt)
    logger.info(f"Image saved to: {output_path}")
    return output_path


def save_image_to_bytes(img: Image.Image, format: str = "PNG") -> bytes:
    """
    Save PIL Image to bytes.

    Args:
        img: PIL Image object.
        format: Image format (PNG, JPEG, etc.).

    Returns:
        Image as bytes.
    """
    fmt = _normalize_format(format)
    buffer = BytesIO()
    _prepare_for_format(img, fmt).save(buffer, format=fmt)
    return buffer.getvalue()
