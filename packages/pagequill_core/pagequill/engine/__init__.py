"""Layout engine and PDF compiler."""

from .geometry import PAGE_SIZES, PageGeometry, default_geometry
from .layout_engine import BULLET, LayoutEngine, layout, validate_blocks
from .layout_primitives import FontFace, Page, PositionedOp
from .pdfcompiler import PDFCompiler, write

__all__ = [
    "BULLET",
    "FontFace",
    "LayoutEngine",
    "PAGE_SIZES",
    "PDFCompiler",
    "Page",
    "PageGeometry",
    "PositionedOp",
    "default_geometry",
    "layout",
    "validate_blocks",
    "write",
]
