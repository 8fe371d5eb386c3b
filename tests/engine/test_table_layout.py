"""Tests for fixed-width table layout."""

import logging

from pagequill.engine.table_layout import (
    ELLIPSIS,
    TableLayout,
    column_widths,
    row_width,
    shrink_widths,
    truncate_fragments,
)
from pagequill.models.blocks import Span, TableRow


def text_of(fragments):
    return "".join(text for text, _ in fragments)


class TestColumnWidths:
    """Test suite for natural column widths."""

    def test_widest_cell_per_column(self):
        """Each column is as wide as its longest cell."""
        rows = [TableRow(["Skill", "Level"]), TableRow(["PostgreSQL", "Advanced"])]

        assert column_widths(rows) == [10, 8]

    def test_ragged_rows(self):
        """Short rows do not limit the column count."""
        rows = [TableRow(["a"]), TableRow(["b", "ccc", "dd"])]

        assert column_widths(rows) == [1, 3, 2]

    def test_row_width_counts_separators(self):
        assert row_width([10, 8]) == 19
        assert row_width([]) == 0


class TestShrinkWidths:
    """Test suite for the column shrinking policy."""

    def test_fitting_table_untouched(self):
        assert shrink_widths([10, 8], 40) == [10, 8]

    def test_widest_column_shrinks_first(self):
        """The widest column gives up characters until it ties with the next."""
        assert shrink_widths([10, 30], 31) == [10, 20]

    def test_ties_go_leftmost(self):
        """Equal columns shrink alternately, starting from the left."""
        assert shrink_widths([50, 60], 95) == [47, 47]
        assert shrink_widths([5, 5], 9) == [4, 4]
        assert shrink_widths([5, 5], 10) == [4, 5]

    def test_minimum_width_is_one(self, caplog):
        """Columns stop at one character even if the row still overflows."""
        with caplog.at_level(logging.WARNING):
            widths = shrink_widths([3, 3, 3], 3)

        assert widths == [1, 1, 1]
        assert "cannot fit" in caplog.text


class TestTruncateFragments:
    """Test suite for ellipsis truncation."""

    def test_short_content_untouched(self):
        assert truncate_fragments([("abc", False)], 3) == [("abc", False)]

    def test_keeps_width_minus_one_then_ellipsis(self):
        """The ellipsis takes the last column of the cell."""
        fragments = truncate_fragments([("abcdef", False)], 4)

        assert text_of(fragments) == "abc" + ELLIPSIS
        assert len(text_of(fragments)) == 4

    def test_truncation_across_weights(self):
        """The ellipsis inherits the weight of the last kept fragment."""
        fragments = truncate_fragments([("ab", True), ("cdef", False)], 4)

        assert fragments == [("ab", True), ("c", False), (ELLIPSIS, False)]

    def test_single_column_cell(self):
        assert truncate_fragments([("xyz", True)], 1) == [(ELLIPSIS, True)]


class TestTableLayout:
    """Test suite for TableLayout."""

    def test_rows_padded_to_shared_columns(self):
        """Every row places column starts at the same offsets."""
        rows = [TableRow(["Skill", "Level"]), TableRow(["Python", "Expert"])]
        layout = TableLayout.for_rows(rows, capacity=95)

        assert layout.widths == [6, 6]
        assert layout.column_offsets == [0, 7]
        assert text_of(layout.format_row(rows[0])) == "Skill  Level "
        assert text_of(layout.format_row(rows[1])) == "Python Expert"

    def test_missing_cells_are_blank(self):
        rows = [TableRow(["a", "b", "c"]), TableRow(["d"])]
        layout = TableLayout.for_rows(rows, capacity=95)

        assert text_of(layout.format_row(rows[1])) == "d    "

    def test_overflowing_table_truncates(self):
        """Shrunk columns truncate their content with an ellipsis."""
        rows = [TableRow(["Responsibilities", "Led the platform migration"])]
        layout = TableLayout.for_rows(rows, capacity=20)

        text = text_of(layout.format_row(rows[0]))
        assert len(text) == 20
        assert text.count(ELLIPSIS) == 2

    def test_bold_cells_keep_weight(self):
        rows = [TableRow([[Span("Skill", bold=True)], "Level"])]
        layout = TableLayout.for_rows(rows, capacity=95)

        assert layout.format_row(rows[0])[0] == ("Skill", True)
