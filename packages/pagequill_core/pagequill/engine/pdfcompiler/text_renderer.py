"""Text renderer for PDF - turns positioned ops into content stream bytes."""

from __future__ import annotations

from typing import Iterable, List

from ..layout_primitives import Page, PositionedOp
from .resources import PdfFontRegistry
from .utils import ensure_encodable, escape_pdf_bytes, format_pdf_number


class PdfTextRenderer:
    """Renders each op as its own BT/ET block at an absolute baseline."""

    def __init__(self, font_registry: PdfFontRegistry):
        self.font_registry = font_registry

    def render_op(self, op: PositionedOp, where: str = "") -> List[bytes]:
        font = self.font_registry.get_font(op.face)
        text = escape_pdf_bytes(ensure_encodable(op.text, where))
        return [
            b"BT",
            f"/{font.alias} {format_pdf_number(op.size)} Tf".encode("ascii"),
            f"{format_pdf_number(op.x)} {format_pdf_number(op.y)} Td".encode("ascii"),
            b"(" + text + b") Tj",
            b"ET",
        ]

    def render_ops(self, ops: Iterable[PositionedOp], where: str = "") -> bytes:
        commands: List[bytes] = []
        for op in ops:
            commands.extend(self.render_op(op, where))
        return b"\n".join(commands)

    def render_page(self, page: Page) -> bytes:
        """Content stream data for a page (empty for a blank page)."""
        return self.render_ops(page.ops, f"page {page.number}")
