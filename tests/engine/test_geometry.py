"""Tests for PageGeometry."""

import pytest

from pagequill.engine.geometry import PAGE_SIZES, PageGeometry, default_geometry
from pagequill.exceptions import GeometryError


class TestPageGeometry:
    """Test suite for PageGeometry."""

    def test_defaults_are_a4(self):
        """Default geometry is A4 with a 40pt margin and 9pt body text."""
        geometry = default_geometry()

        assert (geometry.width, geometry.height) == PAGE_SIZES["A4"]
        assert geometry.margin == 40.0
        assert geometry.body_font_size == 9.0
        assert geometry.printable_width == 515.0
        assert geometry.top == 802.0

    def test_heading_sizes_decrease_with_level(self):
        """Level 1 is the largest heading and sizes never grow with level."""
        geometry = PageGeometry()
        sizes = [geometry.heading_font_size(level) for level in range(1, 7)]

        assert sizes[0] > geometry.body_font_size
        assert sizes == sorted(sizes, reverse=True)

    def test_line_height_uses_leading_factor(self):
        """Line height is font size times the leading factor."""
        geometry = PageGeometry(line_height_factor=1.5)

        assert geometry.line_height(10) == pytest.approx(15.0)

    def test_heading_scales_are_tuples(self):
        """A list of scales is stored as an immutable tuple."""
        geometry = PageGeometry(heading_scales=[2, 1.5, 1.25, 1.1, 1.0, 1.0])

        assert geometry.heading_scales == (2.0, 1.5, 1.25, 1.1, 1.0, 1.0)

    @pytest.mark.parametrize("overrides", [
        {"width": 0},
        {"body_font_size": -1},
        {"margin": -5},
        {"margin": 300},
        {"heading_scales": (1.0, 1.0)},
        {"heading_scales": (1.0, 1.2, 1.0, 1.0, 1.0, 1.0)},
        {"height": 60, "margin": 20},
        {"height": 30, "margin": 10, "line_height_factor": 0.5},
    ])
    def test_invalid_geometry_raises(self, overrides):
        """Geometries that cannot hold a line are rejected up front."""
        with pytest.raises(GeometryError):
            PageGeometry(**overrides)


class TestGeometryOptions:
    """Test suite for PageGeometry.from_options."""

    def test_page_size_preset(self):
        """page_size selects the width and height, case-insensitively."""
        geometry = PageGeometry.from_options({"page_size": "letter"})

        assert (geometry.width, geometry.height) == (612.0, 792.0)

    def test_font_size_alias_and_none_values(self):
        """font_size maps to body_font_size and None values are ignored."""
        geometry = PageGeometry.from_options({"font_size": 10, "margin": None})

        assert geometry.body_font_size == 10.0
        assert geometry.margin == 40.0

    def test_unknown_page_size(self):
        """An unknown preset raises GeometryError listing the choices."""
        with pytest.raises(GeometryError) as exc_info:
            PageGeometry.from_options({"page_size": "B5"})

        assert "A4" in str(exc_info.value)

    def test_unknown_option(self):
        """Typos in option names are not silently dropped."""
        with pytest.raises(GeometryError):
            PageGeometry.from_options({"margins": 20})

    def test_with_overrides_validates(self):
        """Overrides go through the same validation."""
        geometry = PageGeometry().with_overrides(margin=20)

        assert geometry.printable_width == 555.0
        with pytest.raises(GeometryError):
            geometry.with_overrides(margin=400)
