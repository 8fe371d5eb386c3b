"""Page geometry - the fixed dimensions governing one render call."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from ..exceptions import GeometryError

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": (595.0, 842.0),
    "A5": (420.0, 595.0),
    "LETTER": (612.0, 792.0),
    "LEGAL": (612.0, 1008.0),
}

HEADING_LEVELS = 6


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size, margin and typographic parameters, all in points.

    ``heading_scales`` holds the font-size multiplier for heading levels 1..6.
    ``heading_space_before`` / ``heading_space_after`` are multiples of the
    heading font size.
    """

    width: float = 595.0
    height: float = 842.0
    margin: float = 40.0
    body_font_size: float = 9.0
    heading_scales: Tuple[float, ...] = (1.75, 1.35, 1.2, 1.1, 1.05, 1.0)
    line_height_factor: float = 1.6
    list_indent: float = 18.0
    block_spacing: float = 8.0
    list_item_spacing: float = 2.0
    heading_space_before: float = 0.5
    heading_space_after: float = 0.35
    center_title: bool = True

    def __post_init__(self):
        object.__setattr__(self, "heading_scales", tuple(float(s) for s in self.heading_scales))
        self.validate()

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def top(self) -> float:
        return self.height - self.margin

    def heading_font_size(self, level: int) -> float:
        return self.body_font_size * self.heading_scales[level - 1]

    def line_height(self, font_size: float) -> float:
        return font_size * self.line_height_factor

    def validate(self) -> None:
        """Raise GeometryError when the geometry cannot hold a single line."""
        for name in ("width", "height", "body_font_size", "line_height_factor"):
            if getattr(self, name) <= 0:
                raise GeometryError(f"{name} must be positive", f"got {getattr(self, name)!r}")
        for name in ("margin", "list_indent", "block_spacing", "list_item_spacing",
                     "heading_space_before", "heading_space_after"):
            if getattr(self, name) < 0:
                raise GeometryError(f"{name} must not be negative", f"got {getattr(self, name)!r}")
        if self.printable_width <= 0 or self.printable_height <= 0:
            raise GeometryError(
                "margins leave no printable area",
                f"page {self.width}x{self.height}, margin {self.margin}",
            )
        if len(self.heading_scales) != HEADING_LEVELS:
            raise GeometryError(
                f"heading_scales needs {HEADING_LEVELS} entries",
                f"got {len(self.heading_scales)}",
            )
        if any(scale <= 0 for scale in self.heading_scales):
            raise GeometryError("heading scales must be positive")
        if any(a < b for a, b in zip(self.heading_scales, self.heading_scales[1:])):
            raise GeometryError("heading scales must not increase with level", str(self.heading_scales))
        largest = max(self.body_font_size, self.heading_font_size(1))
        tallest = max(largest, self.line_height(largest))
        if tallest > self.printable_height:
            raise GeometryError(
                "printable height cannot hold a single line",
                f"line height {tallest:.2f} > {self.printable_height:.2f}",
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PageGeometry":
        """Build a geometry from a flat options mapping.

        Accepts every field name plus ``page_size`` (a key of PAGE_SIZES)
        and ``font_size`` as an alias of ``body_font_size``. None values are
        ignored so CLI namespaces can be passed through unfiltered.
        """
        values: Dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in options.items():
            if value is None:
                continue
            if key == "page_size":
                size = PAGE_SIZES.get(str(value).upper())
                if size is None:
                    raise GeometryError(f"Unknown page size: {value}", f"choose from {', '.join(PAGE_SIZES)}")
                values["width"], values["height"] = size
            elif key == "font_size":
                values["body_font_size"] = float(value)
            elif key in known:
                values[key] = value
            else:
                raise GeometryError(f"Unknown geometry option: {key}")
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "PageGeometry":
        return replace(self, **overrides)


def default_geometry() -> PageGeometry:
    """A4 portrait with compiled-in margins and font sizes."""
    return PageGeometry()
