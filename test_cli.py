import json

from click.testing import CliRunner
from PIL import Image

from imagetext.cli import main


def test_layout_prints_instructions():
    result = CliRunner().invoke(
        main,
        ["layout", "a bb ccc dddd", "--image-width", "200", "--line-width", "10", "--line-width", "10"],
    )

    assert result.exit_code == 0, result.output
    instructions = json.loads(result.output)
    assert len(instructions) == 1
    assert instructions[0]["text"] == "a bb ccc dddd"
    assert instructions[0]["row"] == 0
    assert instructions[0]["x"] == 0
    assert instructions[0]["y"] == 24


def test_layout_overflow_fails():
    result = CliRunner().invoke(main, ["layout", "Hello world", "--image-width", "100", "--width", "5"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_invalid_alignment_is_rejected():
    result = CliRunner().invoke(main, ["layout", "Hello", "--image-width", "100", "--align", "justify"])

    assert result.exit_code == 2


def test_render(tmp_path, source_image):
    output = tmp_path / "out.png"

    result = CliRunner().invoke(
        main,
        [
            "render", str(source_image), str(output), "Thanks for using our image text library!",
            "--lines", "3", "--width", "25", "--align", "center", "--size", "20", "--start-x", "10",
        ],
    )

    assert result.exit_code == 0, result.output
    with Image.open(output) as img:
        assert img.size == (300, 150)


def test_render_missing_source(tmp_path):
    result = CliRunner().invoke(main, ["render", str(tmp_path / "nope.png"), str(tmp_path / "out.png"), "Hi"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_render_non_image_source(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("not an image", encoding="utf-8")

    result = CliRunner().invoke(main, ["render", str(source), str(tmp_path / "out.png"), "Hi"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not (tmp_path / "out.png").exists()


def test_render_directory_source(tmp_path):
    result = CliRunner().invoke(main, ["render", str(tmp_path), str(tmp_path / "out.png"), "Hi"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_job_with_non_image_source(tmp_path):
    (tmp_path / "source.png").write_bytes(b"garbage")
    job_file = tmp_path / "job.toml"
    job_file.write_text('source = "source.png"\noutput = "out.png"\n', encoding="utf-8")

    result = CliRunner().invoke(main, ["job", str(job_file)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_job(tmp_path, source_image):
    job_file = tmp_path / "job.toml"
    job_file.write_text(
        'source = "source.png"\noutput = "out.jpg"\n[[text]]\ntext = "Hello world"\nlines = 2\nwidth = 5\n',
        encoding="utf-8",
    )

    result = CliRunner().invoke(main, ["--log-level", "debug", "job", str(job_file)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out.jpg").exists()
