"""PDF Compiler - serializes laid-out pages into a PDF file."""

from .compiler import PDFCompiler, write
from .writer import EOF_MARKER, PDF_HEADER, PdfWriter

__all__ = ["PDFCompiler", "PdfWriter", "write", "PDF_HEADER", "EOF_MARKER"]
