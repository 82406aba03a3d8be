"""Render job configuration loading and validation."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, NonNegativeInt, ValidationError, model_validator

from imagetext.api import Text, TextImage
from imagetext.errors import ConfigurationError
from imagetext.fonts import register_fonts
from imagetext.layout import Align, AlignValue, ColorValue

logger = logging.getLogger(__name__)


class TextBlockConfig(BaseModel):
    """One [[text]] table of a job file."""

    text: str

    lines: NonNegativeInt | None = None
    """Number of lines of `width` characters. Ignored when line_widths is set."""

    width: NonNegativeInt = 80
    """Characters per line for `lines`."""

    line_widths: list[NonNegativeInt] | None = None
    """Per-line character budgets (e.g. [25, 30, 23])."""

    align: AlignValue = Align.LEFT
    color: ColorValue = "#000000"
    font: str | None = None
    line_height: float = 24
    size: float = Field(default=16, gt=0)
    start_x: float = 0
    start_y: float = 0

    @model_validator(mode="after")
    def _require_lines(self) -> "TextBlockConfig":
        if self.lines is None and self.line_widths is None:
            self.lines = 1
        return self

    def to_text(self, base_dir: Path | None = None) -> Text:
        """
        Build a Text block.

        Args:
            base_dir: Directory relative font paths are resolved against.
        """
        font = self.font
        if font is not None and base_dir is not None and (base_dir / font).is_file():
            font = str(base_dir / font)

        text = Text(
            self.text,
            num_lines=0 if self.line_widths is not None else self.lines,
            width=self.width,
            align=self.align,
            color=self.color,
            font=font,
            line_height=self.line_height,
            size=self.size,
            start_x=self.start_x,
            start_y=self.start_y,
        )
        for max_chars in self.line_widths or []:
            text.add_line(max_chars)
        return text


class RenderJob(BaseModel):
    """
    A complete render job: source image, output file and text blocks.

    Relative paths are resolved against `base_dir` (the job file's directory).
    """

    source: str
    """Source image path or http(s) URL."""

    output: Path

    fonts_dir: Path | None = None
    """Directory of TTF/OTF fonts registered before rendering."""

    text: list[TextBlockConfig] = Field(default_factory=list)

    base_dir: Path = Field(default_factory=Path.cwd)

    def source_path(self) -> str:
        if self.source.startswith(("http://", "https://")):
            return self.source
        return str(self.base_dir / self.source)

    def output_path(self) -> Path:
        return self.base_dir / self.output

    def texts(self) -> list[Text]:
        return [block.to_text(self.base_dir) for block in self.text]


def load_job(job_path: Path) -> RenderJob:
    """
    Load a render job from a TOML file.

    Args:
        job_path: Path to the job file.

    Returns:
        Validated RenderJob with base_dir set to the file's directory.

    Raises:
        FileNotFoundError: If the job file doesn't exist.
        ConfigurationError: If the file is not valid TOML or has invalid values.
    """
    job_path = Path(job_path)
    if not job_path.exists():
        raise FileNotFoundError(f"Job file not found: {job_path}")

    try:
        with open(job_path, "rb") as f:
            job_dict = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {job_path}: {e}") from e

    job_dir = job_path.resolve().parent
    base_dir = job_dict.get("base_dir")
    if base_dir is None:
        job_dict["base_dir"] = job_dir
    elif isinstance(base_dir, str):
        # Relative to the job file, not the working directory
        job_dict["base_dir"] = job_dir / base_dir

    try:
        return RenderJob(**job_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid job file {job_path}:\n{e}") from e


def render_job(job: RenderJob) -> Path:
    """
    Render a job to its output file.

    Returns:
        Path the image was written to.
    """
    if job.fonts_dir is not None:
        register_fonts(job.base_dir / job.fonts_dir)

    image = TextImage(job.source_path())
    for text in job.texts():
        image.add_text(text)

    logger.info(f"Rendering {len(job.text)} text block(s) onto {job.source}")
    return image.render(job.output_path())
