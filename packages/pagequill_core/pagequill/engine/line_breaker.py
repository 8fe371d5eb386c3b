"""Paragraph line breaking over styled spans."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from ..models.blocks import Span
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

# Newline is a forced break; other ASCII whitespace separates words.
# Non-breaking space (U+00A0) is not in this set.
_TOKEN_RE = re.compile(r"\n|[ \t\r\f\v]+|[^ \t\r\f\v\n]+")

_EPSILON = 1e-6

Fragment = Tuple[str, bool]


@dataclass(frozen=True, slots=True)
class Word:
    """Whitespace-delimited word; may straddle spans of different weight."""

    fragments: Tuple[Fragment, ...]

    @property
    def text(self) -> str:
        return "".join(text for text, _ in self.fragments)

    def __len__(self) -> int:
        return sum(len(text) for text, _ in self.fragments)


class ForcedBreak:
    """Marker token for an explicit line break."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "FORCED_BREAK"


FORCED_BREAK = ForcedBreak()

Token = Union[Word, ForcedBreak]


@dataclass(frozen=True, slots=True)
class TextRun:
    """Maximal same-weight run inside a line, positioned by character offset."""

    offset: int
    text: str
    bold: bool


@dataclass(slots=True)
class LineBreakResult:
    words: List[Word] = field(default_factory=list)
    width: float = 0.0

    @property
    def char_count(self) -> int:
        if not self.words:
            return 0
        return sum(len(word) for word in self.words) + len(self.words) - 1

    @property
    def text(self) -> str:
        return " ".join(word.text for word in self.words)

    def fragments(self) -> List[Fragment]:
        result: List[Fragment] = []
        for index, word in enumerate(self.words):
            if index:
                # The separating space takes the weight of what precedes it.
                result.append((" ", result[-1][1]))
            result.extend(word.fragments)
        return result

    def runs(self) -> List[TextRun]:
        return merge_runs(self.fragments())


def merge_runs(fragments: Iterable[Fragment]) -> List[TextRun]:
    """Merge fragments into same-weight runs positioned by character offset.

    Blanks at either end of a run are dropped and the offset adjusted, so
    the runs draw exactly the characters of the line at their columns.
    """
    merged: List[List] = []  # [offset, text, bold]
    offset = 0
    for text, bold in fragments:
        if merged and merged[-1][2] == bold:
            merged[-1][1] += text
        else:
            merged.append([offset, text, bold])
        offset += len(text)

    runs = []
    for start, text, bold in merged:
        stripped = text.lstrip(" ")
        start += len(text) - len(stripped)
        stripped = stripped.rstrip(" ")
        if stripped:
            runs.append(TextRun(offset=start, text=stripped, bold=bold))
    return runs


def tokenize(spans: Iterable[Span], force_bold: bool = False) -> List[Token]:
    """Turn spans into words and forced breaks.

    Text from adjacent spans with no whitespace between them joins into a
    single word so that a style change never opens a break opportunity.
    """
    tokens: List[Token] = []
    pending: List[Fragment] = []

    def flush() -> None:
        if pending:
            tokens.append(Word(tuple(pending)))
            pending.clear()

    for span in spans:
        bold = force_bold or span.bold
        for match in _TOKEN_RE.finditer(span.text):
            piece = match.group(0)
            if piece == "\n":
                flush()
                tokens.append(FORCED_BREAK)
            elif piece[0] in " \t\r\f\v":
                flush()
            else:
                pending.append((piece, bold))
    flush()
    return tokens


class LineBreaker:
    """Greedy line breaker; over-wide words get a line of their own."""

    def __init__(self, metrics_engine: TextMetricsEngine):
        self.metrics_engine = metrics_engine

    def break_spans(
        self,
        spans: Iterable[Span],
        max_width: float,
        font_size: float,
        force_bold: bool = False,
    ) -> List[LineBreakResult]:
        return self.break_tokens(tokenize(spans, force_bold), max_width, font_size)

    def break_tokens(self, tokens: Iterable[Token], max_width: float, font_size: float) -> List[LineBreakResult]:
        advance = self.metrics_engine.advance_width(font_size)
        lines: List[LineBreakResult] = []
        current: List[Word] = []
        current_chars = 0

        def emit() -> None:
            nonlocal current, current_chars
            if current:
                lines.append(LineBreakResult(words=current, width=current_chars * advance))
            current = []
            current_chars = 0

        for token in tokens:
            if isinstance(token, ForcedBreak):
                emit()
                continue

            word_chars = len(token)
            if current:
                candidate = current_chars + 1 + word_chars
                if candidate * advance <= max_width + _EPSILON:
                    current.append(token)
                    current_chars = candidate
                    continue
                emit()

            current = [token]
            current_chars = word_chars
            if word_chars * advance > max_width + _EPSILON:
                # Never split a word: it stands alone and may overhang.
                logger.warning(
                    "Word %r (%.2fpt) is wider than the available %.2fpt; placing it on its own line",
                    token.text[:40], word_chars * advance, max_width,
                )
                emit()

        emit()
        return lines
