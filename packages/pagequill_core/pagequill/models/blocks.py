"""

Block model - semantic representation of parsed content.

The layout engine consumes an ordered sequence of these blocks. They carry
no behaviour beyond small text helpers; validation happens in the engine.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from ..exceptions import EncodingError


@dataclass(frozen=True, slots=True)
class Span:
    """Run of text with a weight flag."""

    text: str
    bold: bool = False


Spans = Tuple[Span, ...]


def _as_spans(value: Union[str, Span, Iterable[Span]]) -> Spans:
    if isinstance(value, str):
        return (Span(value),)
    if isinstance(value, Span):
        return (value,)
    if not isinstance(value, Iterable):
        raise EncodingError("Block content must be text or spans", type(value).__name__)
    return tuple(value)


def spans_text(spans: Iterable[Span]) -> str:
    """Concatenate the text of spans."""
    return "".join(span.text for span in spans)


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    spans: Spans = ()

    def __post_init__(self):
        object.__setattr__(self, "spans", _as_spans(self.spans))

    @property
    def text(self) -> str:
        return spans_text(self.spans)


@dataclass(frozen=True, slots=True)
class Paragraph:
    spans: Spans = ()

    def __post_init__(self):
        object.__setattr__(self, "spans", _as_spans(self.spans))

    @property
    def text(self) -> str:
        return spans_text(self.spans)


@dataclass(frozen=True, slots=True)
class ListItem:
    """List entry; ``ordinal`` is None for bullet items."""

    spans: Spans = ()
    depth: int = 0
    ordinal: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "spans", _as_spans(self.spans))

    @property
    def text(self) -> str:
        return spans_text(self.spans)


@dataclass(frozen=True, slots=True)
class TableRow:
    """Single table row; consecutive rows form one table."""

    cells: Tuple[Spans, ...] = ()

    def __post_init__(self):
        if isinstance(self.cells, (str, Span)) or not isinstance(self.cells, Iterable):
            raise EncodingError("Table row cells must be a sequence of cells", type(self.cells).__name__)
        object.__setattr__(self, "cells", tuple(_as_spans(cell) for cell in self.cells))

    @property
    def cell_texts(self) -> Tuple[str, ...]:
        return tuple(spans_text(cell) for cell in self.cells)


Block = Union[Heading, Paragraph, ListItem, TableRow]

BLOCK_TYPES = (Heading, Paragraph, ListItem, TableRow)
