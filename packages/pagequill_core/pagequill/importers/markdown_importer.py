"""

Markdown importer - converts markdown text into the block model.

Uses markdown-it-py (CommonMark plus tables). Only the subset a CV or a
cover letter needs is mapped:

- headings, paragraphs, bullet and ordered lists (nested), tables
- strong and emphasis become bold spans, links keep their text
- inline code is plain text, fenced code keeps its line breaks
- images and raw HTML are dropped

"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..models.blocks import Block, Heading, ListItem, Paragraph, Span, TableRow

logger = logging.getLogger(__name__)


@dataclass
class _ListState:
    ordered: bool
    next_ordinal: int = 1


@dataclass
class _ItemState:
    depth: int
    ordinal: Optional[int]
    spans: List[Span] = field(default_factory=list)
    emitted: bool = False


def _is_blank(spans: Sequence[Span]) -> bool:
    return all(not span.text.strip() for span in spans)


def _merge_spans(spans: Sequence[Span]) -> List[Span]:
    merged: List[Span] = []
    for span in spans:
        if not span.text:
            continue
        if merged and merged[-1].bold == span.bold:
            merged[-1] = Span(merged[-1].text + span.text, span.bold)
        else:
            merged.append(span)
    return merged


def inline_spans(children: Optional[Sequence[Token]]) -> List[Span]:
    """Convert inline tokens to spans."""
    spans: List[Span] = []
    bold_depth = 0
    for child in children or ():
        kind = child.type
        if kind in ("strong_open", "em_open"):
            bold_depth += 1
        elif kind in ("strong_close", "em_close"):
            bold_depth = max(0, bold_depth - 1)
        elif kind in ("text", "code_inline"):
            spans.append(Span(child.content, bold_depth > 0))
        elif kind == "softbreak":
            spans.append(Span(" ", bold_depth > 0))
        elif kind == "hardbreak":
            spans.append(Span("\n", bold_depth > 0))
        elif kind == "image":
            logger.debug("Dropping image %r", child.attrGet("src"))
        # link_open/link_close and html_inline carry no text of their own
    return _merge_spans(spans)


class MarkdownImporter:
    """Walks the markdown-it token stream and emits blocks in order."""

    def __init__(self, parser: Optional[MarkdownIt] = None):
        self.parser = parser or MarkdownIt("commonmark", {"html": True}).enable("table")

    def import_text(self, text: str) -> List[Block]:
        tokens = self.parser.parse(text)
        blocks: List[Block] = []
        lists: List[_ListState] = []
        items: List[_ItemState] = []
        heading_level: Optional[int] = None
        row: Optional[List[List[Span]]] = None

        def emit_item(item: _ItemState) -> None:
            if not item.emitted and not _is_blank(item.spans):
                blocks.append(ListItem(tuple(_merge_spans(item.spans)), depth=item.depth, ordinal=item.ordinal))
            item.emitted = True

        for token in tokens:
            kind = token.type

            if kind == "heading_open":
                heading_level = int(token.tag[1:])
            elif kind == "heading_close":
                heading_level = None

            elif kind in ("bullet_list_open", "ordered_list_open"):
                if items:
                    # Parent item text precedes its nested list.
                    emit_item(items[-1])
                start = token.attrGet("start")
                lists.append(_ListState(ordered=kind == "ordered_list_open", next_ordinal=int(start or 1)))
            elif kind in ("bullet_list_close", "ordered_list_close"):
                lists.pop()
            elif kind == "list_item_open":
                current = lists[-1]
                ordinal = None
                if current.ordered:
                    ordinal = current.next_ordinal
                    current.next_ordinal += 1
                items.append(_ItemState(depth=len(lists) - 1, ordinal=ordinal))
            elif kind == "list_item_close":
                emit_item(items.pop())

            elif kind == "tr_open":
                row = []
            elif kind == "tr_close":
                if row is not None and not all(_is_blank(cell) for cell in row):
                    blocks.append(TableRow(tuple(tuple(cell) for cell in row)))
                row = None

            elif kind == "inline":
                spans = inline_spans(token.children)
                if heading_level is not None:
                    blocks.append(Heading(heading_level, tuple(spans)))
                elif row is not None:
                    row.append(spans)
                elif items and items[-1].emitted:
                    # Text after a nested list continues as a plain paragraph.
                    if not _is_blank(spans):
                        blocks.append(Paragraph(tuple(spans)))
                elif items:
                    item = items[-1]
                    if item.spans and spans:
                        item.spans.append(Span(" ", False))
                    item.spans.extend(spans)
                elif not _is_blank(spans):
                    blocks.append(Paragraph(tuple(spans)))

            elif kind in ("fence", "code_block"):
                content = token.content.rstrip("\n")
                if items:
                    emit_item(items[-1])
                if content.strip():
                    blocks.append(Paragraph((Span(content),)))
            elif kind == "hr":
                blocks.append(Paragraph(()))
            elif kind == "html_block":
                logger.debug("Dropping raw HTML block")

        logger.debug("Imported %d blocks from markdown", len(blocks))
        return blocks


def blocks_from_markdown(text: str) -> List[Block]:
    """Parse markdown text into blocks."""
    return MarkdownImporter().import_text(text)
