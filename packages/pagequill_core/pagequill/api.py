"""
High-level API for pagequill.

    from pagequill import Heading, Paragraph, render

    pdf_bytes = render([Heading(1, "Jane Doe"), Paragraph("Engineer.")], title="CV")

The caller owns file I/O: ``render`` returns the finished buffer.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .engine.geometry import PageGeometry, default_geometry
from .engine.layout_engine import LayoutEngine
from .engine.layout_primitives import Page
from .engine.pdfcompiler import PDFCompiler
from .models.blocks import Block

logger = logging.getLogger(__name__)


def layout(blocks: Iterable[Block], geometry: Optional[PageGeometry] = None) -> List[Page]:
    """Lay out blocks on pages of ``geometry`` (default A4)."""
    return LayoutEngine(geometry or default_geometry()).layout(blocks)


def write(pages: Sequence[Page], title: str) -> bytes:
    """Serialize pages into a standalone PDF file."""
    return PDFCompiler(title).compile(pages)


def render(blocks: Iterable[Block], title: str, geometry: Optional[PageGeometry] = None) -> bytes:
    """Render blocks to PDF bytes.

    Pure and deterministic: identical inputs produce byte-identical output.

    Args:
        blocks: Ordered block sequence
        title: Document title (stored in the document information)
        geometry: Optional geometry override

    Returns:
        Complete PDF file contents

    Raises:
        EncodingError: if a block is malformed or cannot be encoded
        LayoutError: if a list item is indented past the printable width
        CompilationError: on an internal serialization defect
    """
    pages = layout(blocks, geometry)
    data = write(pages, title)
    logger.info("Rendered %r: %d pages, %d bytes", title, len(pages), len(data))
    return data
