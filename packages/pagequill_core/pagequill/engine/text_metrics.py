"""

TextMetricsEngine - text width for the monospace standard fonts.

Uses ReportLab's built-in AFM metrics for Courier. Every glyph of a
monospace face has the same advance, so a run's width is simply
``char_count * advance_width(size)``; no kerning and no ligatures.

"""

from __future__ import annotations

from functools import lru_cache

from reportlab.pdfbase import pdfmetrics  # type: ignore

from .layout_primitives import FontFace

# Reference glyph used to read the advance from the AFM tables.
_REFERENCE_GLYPH = "M"


@lru_cache(maxsize=64)
def _advance(font_name: str, font_size: float) -> float:
    return pdfmetrics.stringWidth(_REFERENCE_GLYPH, font_name, font_size)


class TextMetricsEngine:
    """Measures text in the monospace body face."""

    def __init__(self, face: FontFace = FontFace.REGULAR):
        self.face = face

    def advance_width(self, font_size: float, face: FontFace | None = None) -> float:
        """Horizontal advance of a single character at ``font_size``."""
        return _advance((face or self.face).value, float(font_size))

    def measure(self, text: str, font_size: float, face: FontFace | None = None) -> float:
        """Width of ``text`` in points."""
        return len(text) * self.advance_width(font_size, face)

    def char_capacity(self, width: float, font_size: float) -> int:
        """Number of whole characters that fit in ``width``."""
        advance = self.advance_width(font_size)
        # Tolerance for float noise so that exactly-fitting lines count.
        return max(0, int((width + 1e-6) / advance))
