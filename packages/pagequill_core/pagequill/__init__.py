"""
pagequill - small, dependable PDF typesetting for CVs and cover pages.

The pipeline has three stages:
- block model (headings, paragraphs, list items, table rows with bold spans)
- layout engine (line breaking, pagination, table fitting)
- document writer (a standalone PDF 1.4 file using the standard fonts)

Quick Start:
    from pagequill import Heading, ListItem, Paragraph, Span, render

    blocks = [
        Heading(1, "Jane Doe"),
        Paragraph([Span("Role: ", bold=True), Span("Backend engineer")]),
        ListItem("Python, PostgreSQL"),
    ]
    with open("cv.pdf", "wb") as fh:
        fh.write(render(blocks, title="Jane Doe - CV"))

    # Or straight from markdown
    from pagequill import blocks_from_markdown
    pdf_bytes = render(blocks_from_markdown(text), title="Cover letter")
"""

from .version import __version__, __version_info__

from .exceptions import (
    PageQuillError,
    EncodingError,
    GeometryError,
    LayoutError,
    CompilationError,
)

from .models import Block, Heading, ListItem, Paragraph, Span, TableRow
from .engine.geometry import PAGE_SIZES, PageGeometry, default_geometry
from .engine.layout_primitives import FontFace, Page, PositionedOp
from .api import layout, render, write
from .importers import blocks_from_markdown

__all__ = [
    "__version__",
    "__version_info__",
    # Exceptions
    "PageQuillError",
    "EncodingError",
    "GeometryError",
    "LayoutError",
    "CompilationError",
    # Block model
    "Block",
    "Heading",
    "ListItem",
    "Paragraph",
    "Span",
    "TableRow",
    # Layout
    "PAGE_SIZES",
    "PageGeometry",
    "default_geometry",
    "FontFace",
    "Page",
    "PositionedOp",
    # Pipeline
    "layout",
    "write",
    "render",
    "blocks_from_markdown",
]
