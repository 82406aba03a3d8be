"""CLI interface for drawing text on images."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click

from imagetext.api import Text, TextImage
from imagetext.config import load_job, render_job
from imagetext.errors import ImageTextError
from imagetext.fonts import register_fonts
from imagetext.fonts.metrics import FontMeasurer
from imagetext.layout import Align

ALIGN_CHOICES = [a.value for a in Align]


def _style_options(func):
    """Options shared by commands that build a text block."""
    options = [
        click.option("--lines", type=int, default=1, show_default=True, help="Number of available lines."),
        click.option("--width", type=int, default=80, show_default=True, help="Maximum characters per line."),
        click.option(
            "--line-width",
            "line_widths",
            type=int,
            multiple=True,
            help="Character budget of one line. Repeat for each line; overrides --lines/--width.",
        ),
        click.option(
            "--align",
            type=click.Choice(ALIGN_CHOICES, case_sensitive=False),
            default="left",
            show_default=True,
            help="Text alignment.",
        ),
        click.option("--color", default="000000", show_default=True, help="Text color (hex, '#' optional)."),
        click.option("--font", help="Font file, registered font name, or Google Font 'family:weight'."),
        click.option("--size", type=float, default=16, show_default=True, help="Font size in pixels."),
        click.option("--line-height", type=float, default=24, show_default=True, help="Line height in pixels."),
        click.option("--start-x", type=float, default=0, show_default=True, help="X offset (right inset for right alignment)."),
        click.option("--start-y", type=float, default=0, show_default=True, help="Y offset of the block top."),
        click.option(
            "--fonts-dir",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            help="Directory of TTF/OTF fonts to register.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_text(text: str, options: dict) -> Text:
    if options["fonts_dir"]:
        register_fonts(options["fonts_dir"])

    line_widths = options["line_widths"]
    block = Text(
        text,
        num_lines=0 if line_widths else options["lines"],
        width=options["width"],
        align=options["align"],
        color=options["color"],
        font=options["font"],
        size=options["size"],
        line_height=options["line_height"],
        start_x=options["start_x"],
        start_y=options["start_y"],
    )
    for max_chars in line_widths:
        block.add_line(max_chars)
    return block


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="imagetext")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def main(log_level: str) -> None:
    """Draw multi-line, aligned text blocks onto images."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("source")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("text")
@_style_options
def render(source: str, output: Path, text: str, **options) -> None:
    """
    Draw TEXT onto SOURCE and save it to OUTPUT.

    SOURCE can be a file path or an http(s) URL.
    """
    try:
        block = _build_text(text, options)
        image = TextImage(source)
        image.add_text(block)
        saved = image.render(output)
    except (ImageTextError, FileNotFoundError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail(str(e))

    click.echo(f"✓ Image saved to: {saved}")


@main.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def job(config: Path) -> None:
    """Render a TOML job file (source, output and [[text]] blocks)."""
    try:
        saved = render_job(load_job(config))
    except (ImageTextError, FileNotFoundError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail(str(e))

    click.echo(f"✓ Image saved to: {saved}")


@main.command()
@click.argument("text")
@click.option("--image-width", type=int, required=True, help="Width of the target image in pixels.")
@_style_options
def layout(text: str, image_width: int, **options) -> None:
    """
    Print the draw instructions for TEXT as JSON without rendering.

    Lines are measured with the selected font.
    """
    try:
        block = _build_text(text, options)
        instructions = block.layout(image_width, FontMeasurer())
    except (ImageTextError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail(str(e))

    click.echo(json.dumps([asdict(i) for i in instructions], indent=2))


if __name__ == "__main__":
    main()
