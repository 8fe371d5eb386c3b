"""Tests for the pagequill command-line interface."""

import pytest

from pagequill.cli import create_parser, main
from pagequill.version import __version__

CV_MARKDOWN = """# Jane Doe

**Role:** Backend engineer

## Skills

| Skill | Level |
|---|---|
| Python | Expert |

## Experience

- Built a billing service
  - Mentored two juniors
"""


@pytest.fixture
def cv_file(temp_dir):
    path = temp_dir / "cv.md"
    path.write_text(CV_MARKDOWN, encoding="utf-8")
    return path


class TestParser:
    """Test suite for argument parsing."""

    def test_render_arguments(self):
        args = create_parser().parse_args([
            "--log-level", "DEBUG", "render", "cv.md", "-o", "out.pdf",
            "--title", "CV", "--page-size", "letter", "--margin", "50", "--font-size", "10",
        ])

        assert args.command == "render"
        assert args.page_size == "LETTER"
        assert args.margin == 50.0
        assert args.font_size == 10.0
        assert args.log_level == "DEBUG"

    def test_invalid_page_size(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["render", "cv.md", "--page-size", "B5"])


class TestRenderCommand:
    """Test suite for `pagequill render`."""

    def test_default_output_and_title(self, cv_file, capsys):
        assert main(["render", str(cv_file)]) == 0

        output = cv_file.with_suffix(".pdf")
        data = output.read_bytes()
        assert data.startswith(b"%PDF-1.4")
        assert b"/Title (Jane Doe)" in data
        assert "Saved:" in capsys.readouterr().out

    def test_explicit_output_and_title(self, cv_file, temp_dir):
        output = temp_dir / "nested" / "letter.pdf"

        assert main(["render", str(cv_file), "-o", str(output), "--title", "Cover letter"]) == 0
        assert b"/Title (Cover letter)" in output.read_bytes()

    def test_title_falls_back_to_file_stem(self, temp_dir):
        path = temp_dir / "cover_letter.md"
        path.write_text("Dear hiring team,\n\nThank you.\n", encoding="utf-8")

        assert main(["render", str(path)]) == 0
        assert b"/Title (cover_letter)" in path.with_suffix(".pdf").read_bytes()

    def test_page_size_option(self, cv_file):
        assert main(["render", str(cv_file), "--page-size", "LETTER"]) == 0
        assert b"/MediaBox [0 0 612.00 792.00]" in cv_file.with_suffix(".pdf").read_bytes()

    def test_missing_input(self, temp_dir):
        assert main(["render", str(temp_dir / "missing.md")]) == 1

    def test_unencodable_input(self, temp_dir):
        path = temp_dir / "cv.md"
        path.write_text("# 山田太郎\n", encoding="utf-8")

        assert main(["render", str(path)]) == 1
        assert not path.with_suffix(".pdf").exists()

    def test_invalid_geometry(self, cv_file):
        assert main(["render", str(cv_file), "--margin", "400"]) == 1


class TestOtherCommands:
    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
