"""

Fixed-width table layout.

Widths are counted in characters of the monospace body face. A table is a
run of consecutive TableRow blocks; its column widths are computed once
from every row of that run, so column boundaries line up across rows.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..models.blocks import Span, Spans, TableRow
from .line_breaker import Fragment

logger = logging.getLogger(__name__)

ELLIPSIS = "…"
CELL_SEPARATOR = " "


def _cell_fragments(cell: Spans) -> List[Fragment]:
    # Tables never wrap, so any line break inside a cell becomes a space.
    fragments = []
    for span in cell:
        text = " ".join(span.text.splitlines()).replace("\t", " ")
        if text:
            fragments.append((text, span.bold))
    return fragments


def _fragments_length(fragments: Sequence[Fragment]) -> int:
    return sum(len(text) for text, _ in fragments)


def truncate_fragments(fragments: Sequence[Fragment], width: int) -> List[Fragment]:
    """Cut fragments to ``width`` characters, ending with an ellipsis if cut."""
    if _fragments_length(fragments) <= width:
        return list(fragments)
    if width <= 0:
        return []

    keep = width - 1
    result: List[Fragment] = []
    last_bold = fragments[0][1] if fragments else False
    for text, bold in fragments:
        if keep <= 0:
            break
        piece = text[:keep]
        result.append((piece, bold))
        last_bold = bold
        keep -= len(piece)
    result.append((ELLIPSIS, last_bold))
    return result


def column_widths(rows: Sequence[TableRow]) -> List[int]:
    """Natural width of every column: the longest cell it holds."""
    count = max((len(row.cells) for row in rows), default=0)
    widths = [0] * count
    for row in rows:
        for index, cell in enumerate(row.cells):
            widths[index] = max(widths[index], _fragments_length(_cell_fragments(cell)))
    return widths


def row_width(widths: Sequence[int]) -> int:
    if not widths:
        return 0
    return sum(widths) + len(CELL_SEPARATOR) * (len(widths) - 1)


def shrink_widths(widths: Sequence[int], capacity: int) -> List[int]:
    """Shrink the widest column one character at a time until the row fits.

    Ties go to the leftmost column. Columns never drop below one character;
    if the row still does not fit at that point it is returned as is.
    """
    result = list(widths)
    while row_width(result) > capacity:
        widest = max(range(len(result)), key=lambda index: (result[index], -index))
        if result[widest] <= 1:
            logger.warning(
                "Table with %d columns cannot fit in %d characters; rows will overflow",
                len(result), capacity,
            )
            break
        result[widest] -= 1
    return result


@dataclass(slots=True)
class TableLayout:
    """Column widths for one table and the row formatter using them."""

    widths: List[int]

    @classmethod
    def for_rows(cls, rows: Sequence[TableRow], capacity: int) -> "TableLayout":
        natural = column_widths(rows)
        widths = shrink_widths(natural, capacity)
        if widths != natural:
            logger.debug("Table columns shrunk from %s to %s (capacity %d)", natural, widths, capacity)
        return cls(widths=widths)

    @property
    def column_offsets(self) -> List[int]:
        offsets = []
        position = 0
        for width in self.widths:
            offsets.append(position)
            position += width + len(CELL_SEPARATOR)
        return offsets

    def format_row(self, row: TableRow) -> List[Fragment]:
        """Fixed-width fragments for a row: left-aligned cells padded with spaces."""
        fragments: List[Fragment] = []
        cells = list(row.cells) + [()] * (len(self.widths) - len(row.cells))
        for index, (cell, width) in enumerate(zip(cells, self.widths)):
            if index:
                fragments.append((CELL_SEPARATOR, False))
            content = truncate_fragments(_cell_fragments(cell), width)
            fragments.extend(content)
            padding = width - _fragments_length(content)
            if padding > 0:
                fragments.append((" " * padding, False))
        return fragments


def row_as_spans(row: TableRow) -> Spans:
    """Concatenated cell content, used when a row has no columns."""
    spans: List[Span] = []
    for cell in row.cells:
        spans.extend(cell)
    return tuple(spans)
