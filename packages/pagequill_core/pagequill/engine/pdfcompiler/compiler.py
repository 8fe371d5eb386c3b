"""Main PDF compiler - converts laid-out pages to PDF bytes."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ...exceptions import CompilationError, EncodingError
from ...version import __version__
from ..layout_primitives import Page
from .objects import (
    PdfArray,
    PdfDictionary,
    PdfDocument,
    PdfName,
    PdfObjectTable,
    PdfReference,
    PdfStream,
    PdfString,
)
from .resources import PdfFontRegistry
from .text_renderer import PdfTextRenderer
from .utils import encode_text_string
from .writer import PdfWriter

logger = logging.getLogger(__name__)

PRODUCER = f"pagequill {__version__}"


class PDFCompiler:
    """Builds the object graph for a set of pages and serializes it.

    Object ids follow emission order: catalog, page tree, then for each page
    its content stream and its page object, then the regular and bold fonts,
    then the document information dictionary.
    """

    def __init__(self, title: str = ""):
        if not isinstance(title, str):
            raise EncodingError("Title must be a string", type(title).__name__)
        try:
            encode_text_string(title)
        except EncodingError as e:
            raise EncodingError("Title cannot be encoded", e.details) from e
        self.title = title
        self.font_registry = PdfFontRegistry()
        self.text_renderer = PdfTextRenderer(self.font_registry)

    def compile(self, pages: Sequence[Page]) -> bytes:
        """Compile pages to a complete PDF file.

        Raises:
            CompilationError: if ``pages`` is empty or bookkeeping fails
            EncodingError: if an op's text cannot be encoded
        """
        document = self.build_document(pages)
        return PdfWriter().write(document)

    def build_document(self, pages: Sequence[Page]) -> PdfDocument:
        if not pages:
            raise CompilationError("pages cannot be empty")

        table = PdfObjectTable()
        catalog_id = table.allocate()
        pages_id = table.allocate()

        slots: List[Dict[str, int]] = []
        for _ in pages:
            content_id = table.allocate()
            page_id = table.allocate()
            slots.append({"content": content_id, "page": page_id})

        for font in self.font_registry.fonts():
            font.object_id = table.allocate()
        info_id = table.allocate()

        table.assign(catalog_id, PdfDictionary({
            "Type": PdfName("Catalog"),
            "Pages": PdfReference(pages_id),
            "ViewerPreferences": PdfDictionary({"DisplayDocTitle": True}),
        }))
        table.assign(pages_id, PdfDictionary({
            "Type": PdfName("Pages"),
            "Kids": PdfArray([PdfReference(slot["page"]) for slot in slots]),
            "Count": len(slots),
        }))

        resources = PdfDictionary({
            "Font": self.font_registry.get_resources_dict(),
            "ProcSet": PdfArray([PdfName("PDF"), PdfName("Text")]),
        })
        for page, slot in zip(pages, slots):
            table.assign(slot["content"], PdfStream(data=self.text_renderer.render_page(page)))
            table.assign(slot["page"], PdfDictionary({
                "Type": PdfName("Page"),
                "Parent": PdfReference(pages_id),
                "MediaBox": PdfArray([0, 0, float(page.width), float(page.height)]),
                "Resources": resources,
                "Contents": PdfReference(slot["content"]),
            }))

        for font in self.font_registry.fonts():
            table.assign(font.object_id, font.to_dictionary())

        table.assign(info_id, PdfDictionary({
            "Title": PdfString(self.title),
            "Producer": PdfString(PRODUCER),
        }))

        logger.debug("Built %d objects for %d pages", len(table), len(pages))
        return PdfDocument(objects=table, root_id=catalog_id, info_id=info_id)


def write(pages: Sequence[Page], title: str) -> bytes:
    """Serialize laid-out pages into a PDF file."""
    return PDFCompiler(title).compile(pages)
