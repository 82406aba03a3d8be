"""Exception types raised by imagetext."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories callers can branch on."""

    OVERFLOW = "overflow"
    MEASUREMENT = "measurement"
    CONFIGURATION = "configuration"


class ImageTextError(Exception):
    """Base class for all imagetext errors."""

    kind: ErrorKind


class TextOverflowError(ImageTextError, OverflowError):
    """Text does not fit into the declared lines."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, message: str = "Text is too long for available lines", word: str | None = None) -> None:
        super().__init__(message)
        self.word = word


class MeasurementError(ImageTextError):
    """A font could not be opened or text could not be measured."""

    kind = ErrorKind.MEASUREMENT


class ConfigurationError(ImageTextError, ValueError):
    """Invalid style value, color, or job configuration."""

    kind = ErrorKind.CONFIGURATION
