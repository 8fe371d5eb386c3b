"""
Command-line interface for pagequill.

Usage:
    pagequill render cv.md --output cv.pdf
    pagequill render cover.md --title "Cover letter" --page-size LETTER
    pagequill version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .engine.geometry import PAGE_SIZES, PageGeometry
from .exceptions import PageQuillError

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagequill",
        description="pagequill - typeset markdown CVs and cover pages as PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pagequill render cv.md --output download/cv.pdf
  pagequill render cover.md --title "Cover letter" --margin 50
  pagequill version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a markdown file to PDF")
    render_parser.add_argument("input", help="Input markdown file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .pdf)"
    )
    render_parser.add_argument(
        "-t", "--title",
        help="Document title (default: first level-1 heading or file name)"
    )
    render_parser.add_argument(
        "--page-size",
        choices=sorted(PAGE_SIZES),
        type=str.upper,
        help="Page size preset (default: A4)"
    )
    render_parser.add_argument("--margin", type=float, help="Page margin in points")
    render_parser.add_argument("--font-size", type=float, help="Body font size in points")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _default_title(blocks, input_path: Path) -> str:
    from .models.blocks import Heading

    for block in blocks:
        if isinstance(block, Heading) and block.level == 1 and block.text.strip():
            return block.text.strip()
    return input_path.stem


def cmd_render(args) -> int:
    """Handle render command."""
    from .api import render
    from .importers import blocks_from_markdown

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")

    try:
        geometry = PageGeometry.from_options({
            "page_size": args.page_size,
            "margin": args.margin,
            "font_size": args.font_size,
        })
        blocks = blocks_from_markdown(input_path.read_text(encoding="utf-8"))
        title = args.title if args.title is not None else _default_title(blocks, input_path)
        data = render(blocks, title, geometry)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except PageQuillError as e:
        logger.error("Cannot render %s: %s", input_path, e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1

    print(f"Saved: {output_path} ({len(data):,} bytes)")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"pagequill v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    from .utils.logger import configure_logging

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "render":
        return cmd_render(args)
    if args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
