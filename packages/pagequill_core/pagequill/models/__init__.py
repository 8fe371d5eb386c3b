"""Semantic block model."""

from .blocks import (
    BLOCK_TYPES,
    Block,
    Heading,
    ListItem,
    Paragraph,
    Span,
    Spans,
    TableRow,
    spans_text,
)

__all__ = [
    "BLOCK_TYPES",
    "Block",
    "Heading",
    "ListItem",
    "Paragraph",
    "Span",
    "Spans",
    "TableRow",
    "spans_text",
]
