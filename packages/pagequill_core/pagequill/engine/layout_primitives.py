"""

Data structures describing LayoutEngine output.

A Page is an ordered list of PositionedOp; each op is one run of text drawn
at an absolute baseline position. The PDF compiler consumes these without
any further interpretation.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class FontFace(Enum):
    """Font weights available to the layout; values are PDF base font names."""

    REGULAR = "Courier"
    BOLD = "Courier-Bold"

    @classmethod
    def for_bold(cls, bold: bool) -> "FontFace":
        return cls.BOLD if bold else cls.REGULAR


@dataclass(frozen=True, slots=True)
class PositionedOp:
    """Text run with its baseline position (points, origin bottom-left)."""

    text: str
    x: float
    y: float
    face: FontFace
    size: float


@dataclass(slots=True)
class Page:
    """Single output page."""

    number: int
    width: float
    height: float
    ops: List[PositionedOp] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.ops

    def baselines(self) -> List[float]:
        """Distinct baselines in drawing order."""
        seen: List[float] = []
        for op in self.ops:
            if not seen or seen[-1] != op.y:
                seen.append(op.y)
        return seen
