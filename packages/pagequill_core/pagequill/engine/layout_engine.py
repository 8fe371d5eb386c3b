"""

LayoutEngine - turns blocks into pages of positioned text.

Owns every pagination and line-wrap decision:
- greedy wrapping at the printable width (LineBreaker)
- vertical flow with a cursor at the top of the next line box
- page breaks when a line box would cross the bottom margin
- headings kept whole, paragraphs split at line boundaries
- hanging indents for list items
- fixed-width tables (TableLayout)

"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..exceptions import EncodingError, LayoutError
from ..models.blocks import BLOCK_TYPES, Block, Heading, ListItem, Paragraph, Span, TableRow
from .geometry import HEADING_LEVELS, PageGeometry, default_geometry
from .layout_primitives import FontFace, Page, PositionedOp
from .line_breaker import LineBreaker, LineBreakResult, TextRun, merge_runs
from .pdfcompiler.utils import ensure_encodable
from .table_layout import TableLayout, row_as_spans
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

BULLET = "•"

_EPSILON = 1e-6


class _Table:
    """Run of consecutive table rows laid out with shared column widths."""

    __slots__ = ("rows",)

    def __init__(self, rows: List[TableRow]):
        self.rows = rows


_Unit = Union[Heading, Paragraph, ListItem, _Table]


def validate_blocks(blocks: Sequence[Block]) -> None:
    """Reject malformed blocks before any layout work.

    Raises:
        EncodingError: for unknown block kinds, malformed fields, or text that
            the standard fonts cannot encode
    """
    for index, block in enumerate(blocks):
        where = f"block {index}"
        if not isinstance(block, BLOCK_TYPES):
            raise EncodingError("Unsupported block type", f"{where}: {type(block).__name__}")

        if isinstance(block, Heading):
            if not _is_int(block.level) or not 1 <= block.level <= HEADING_LEVELS:
                raise EncodingError("Heading level must be between 1 and 6", f"{where}: {block.level!r}")
            span_groups: Iterable = (block.spans,)
        elif isinstance(block, ListItem):
            if not _is_int(block.depth) or block.depth < 0:
                raise EncodingError("List depth must be a non-negative integer", f"{where}: {block.depth!r}")
            if block.ordinal is not None and (not _is_int(block.ordinal) or block.ordinal < 0):
                raise EncodingError("List ordinal must be a non-negative integer", f"{where}: {block.ordinal!r}")
            span_groups = (block.spans,)
        elif isinstance(block, Paragraph):
            span_groups = (block.spans,)
        else:
            span_groups = block.cells

        for spans in span_groups:
            for span in spans:
                if not isinstance(span, Span):
                    raise EncodingError("Block content must be spans", f"{where}: {type(span).__name__}")
                ensure_encodable(span.text, where)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class _PageCursor:
    """Per-call pagination state: sealed pages, the open page, and ``y``.

    ``y`` is the top of the next line box. A line of size ``s`` occupies
    ``[y - s * leading, y]`` and its baseline sits at ``y - s``.
    """

    def __init__(self, geometry: PageGeometry):
        self.geometry = geometry
        self.pages: List[Page] = []
        self.page = self._blank_page(1)
        self.y = geometry.top

    def _blank_page(self, number: int) -> Page:
        return Page(number=number, width=self.geometry.width, height=self.geometry.height)

    @property
    def at_top(self) -> bool:
        return self.y >= self.geometry.top - _EPSILON

    def fits(self, height: float) -> bool:
        return self.y - height >= self.geometry.margin - _EPSILON

    def new_page(self) -> None:
        logger.debug("Sealing page %d with %d ops", self.page.number, len(self.page.ops))
        self.pages.append(self.page)
        self.page = self._blank_page(self.page.number + 1)
        self.y = self.geometry.top

    def gap(self, amount: float) -> None:
        """Vertical space between blocks; dropped at the top of a page."""
        if amount > 0 and not self.at_top:
            self.y -= amount

    def place_line(self, items: Sequence[Tuple[float, TextRun]], font_size: float) -> None:
        line_height = self.geometry.line_height(font_size)
        # With leading below 1 the baseline sits under the line box.
        if not self.fits(max(font_size, line_height)) and not self.at_top:
            self.new_page()
        baseline = self.y - font_size
        for x, run in items:
            self.page.ops.append(
                PositionedOp(
                    text=run.text,
                    x=x,
                    y=baseline,
                    face=FontFace.for_bold(run.bold),
                    size=font_size,
                )
            )
        self.y -= line_height

    def finish(self) -> List[Page]:
        if self.page.ops or not self.pages:
            self.pages.append(self.page)
        return self.pages


class LayoutEngine:
    """Lays out a block sequence on pages of a fixed geometry."""

    def __init__(self, geometry: Optional[PageGeometry] = None,
                 metrics_engine: Optional[TextMetricsEngine] = None):
        self.geometry = geometry or default_geometry()
        self.metrics_engine = metrics_engine or TextMetricsEngine()
        self.line_breaker = LineBreaker(self.metrics_engine)

    def layout(self, blocks: Iterable[Block]) -> List[Page]:
        """Lay out blocks and return the pages (always at least one).

        Raises:
            EncodingError: if a block is malformed or not encodable
            LayoutError: if a list item is indented past the printable width
        """
        blocks = list(blocks)
        validate_blocks(blocks)

        cursor = _PageCursor(self.geometry)
        pending_gap = 0.0
        units = list(self._units(blocks))
        for index, unit in enumerate(units):
            following = units[index + 1] if index + 1 < len(units) else None
            if isinstance(unit, Heading):
                pending_gap = self._layout_heading(cursor, unit, pending_gap)
            elif isinstance(unit, Paragraph):
                pending_gap = self._layout_paragraph(cursor, unit, pending_gap)
            elif isinstance(unit, ListItem):
                pending_gap = self._layout_list_item(cursor, unit, pending_gap, following)
            elif isinstance(unit, _Table):
                pending_gap = self._layout_table(cursor, unit, pending_gap)
            else:
                raise LayoutError("Unhandled layout unit", type(unit).__name__)

        pages = cursor.finish()
        logger.debug("Laid out %d blocks on %d pages", len(blocks), len(pages))
        return pages

    @staticmethod
    def _units(blocks: Sequence[Block]) -> Iterator[_Unit]:
        table: List[TableRow] = []
        for block in blocks:
            if isinstance(block, TableRow) and block.cells:
                table.append(block)
                continue
            if table:
                yield _Table(table)
                table = []
            if isinstance(block, TableRow):
                logger.warning("Table row without columns rendered as a paragraph")
                yield Paragraph(row_as_spans(block))
            else:
                yield block
        if table:
            yield _Table(table)

    def _runs_at(self, line: LineBreakResult, x: float, font_size: float) -> List[Tuple[float, TextRun]]:
        advance = self.metrics_engine.advance_width(font_size)
        return [(x + run.offset * advance, run) for run in line.runs()]

    def _layout_heading(self, cursor: _PageCursor, heading: Heading, pending_gap: float) -> float:
        geometry = self.geometry
        size = geometry.heading_font_size(heading.level)
        line_height = geometry.line_height(size)
        lines = self.line_breaker.break_spans(heading.spans, geometry.printable_width, size, force_bold=True)

        gap = pending_gap + geometry.heading_space_before * size
        block_height = line_height * (len(lines) - 1) + max(size, line_height) if lines else 0.0
        if not cursor.at_top and not cursor.fits(gap + block_height):
            logger.debug("Deferring level-%d heading %r to next page", heading.level, heading.text[:40])
            cursor.new_page()
        cursor.gap(gap)

        if block_height > geometry.printable_height + _EPSILON:
            logger.warning("Heading %r is taller than a page; splitting it at line boundaries", heading.text[:40])

        for line in lines:
            x = geometry.margin
            if heading.level == 1 and geometry.center_title:
                x += max(0.0, (geometry.printable_width - line.width) / 2)
            cursor.place_line(self._runs_at(line, x, size), size)

        return geometry.heading_space_after * size

    def _layout_paragraph(self, cursor: _PageCursor, paragraph: Paragraph, pending_gap: float) -> float:
        geometry = self.geometry
        size = geometry.body_font_size
        lines = self.line_breaker.break_spans(paragraph.spans, geometry.printable_width, size)

        cursor.gap(pending_gap)
        for line in lines:
            cursor.place_line(self._runs_at(line, geometry.margin, size), size)
        return geometry.block_spacing

    def _layout_list_item(self, cursor: _PageCursor, item: ListItem, pending_gap: float,
                          following: Optional[_Unit]) -> float:
        geometry = self.geometry
        size = geometry.body_font_size
        advance = self.metrics_engine.advance_width(size)

        indent = item.depth * geometry.list_indent
        prefix = BULLET if item.ordinal is None else f"{item.ordinal}."
        prefix_width = (len(prefix) + 1) * advance
        available = geometry.printable_width - indent - prefix_width
        if available < advance - _EPSILON:
            raise LayoutError(
                "List item indentation leaves no room for text",
                f"depth {item.depth}, prefix {prefix!r}",
            )

        prefix_x = geometry.margin + indent
        text_x = prefix_x + prefix_width
        lines = self.line_breaker.break_spans(item.spans, available, size)

        cursor.gap(pending_gap)
        prefix_item = (prefix_x, TextRun(offset=0, text=prefix, bold=False))
        if not lines:
            cursor.place_line([prefix_item], size)
        for index, line in enumerate(lines):
            items = self._runs_at(line, text_x, size)
            if index == 0:
                items.insert(0, prefix_item)
            cursor.place_line(items, size)

        if isinstance(following, ListItem):
            return geometry.list_item_spacing
        return geometry.block_spacing

    def _layout_table(self, cursor: _PageCursor, table: _Table, pending_gap: float) -> float:
        geometry = self.geometry
        size = geometry.body_font_size
        advance = self.metrics_engine.advance_width(size)
        capacity = self.metrics_engine.char_capacity(geometry.printable_width, size)
        table_layout = TableLayout.for_rows(table.rows, capacity)

        cursor.gap(pending_gap)
        for row in table.rows:
            runs = merge_runs(table_layout.format_row(row))
            cursor.place_line([(geometry.margin + run.offset * advance, run) for run in runs], size)
        return geometry.block_spacing


def layout(blocks: Iterable[Block], geometry: Optional[PageGeometry] = None) -> List[Page]:
    """Lay out blocks with the given (or default) geometry."""
    return LayoutEngine(geometry).layout(blocks)
