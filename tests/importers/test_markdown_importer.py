"""Tests for the markdown importer."""

from pagequill.importers import MarkdownImporter, blocks_from_markdown
from pagequill.models.blocks import Heading, ListItem, Paragraph, Span, TableRow


class TestInlineMapping:
    """Test suite for inline markup."""

    def test_heading_and_paragraph(self):
        blocks = blocks_from_markdown("# Jane Doe\n\nBackend **engineer**.\n")

        assert blocks == [
            Heading(1, "Jane Doe"),
            Paragraph([Span("Backend "), Span("engineer", bold=True), Span(".")]),
        ]

    def test_emphasis_is_bold(self):
        blocks = blocks_from_markdown("*Remote* or on site\n")

        assert blocks[0].spans[0] == Span("Remote", bold=True)

    def test_soft_and_hard_breaks(self):
        """Soft breaks join with a space; hard breaks become newlines."""
        blocks = blocks_from_markdown("Line one\nline two  \nline three\n")

        assert blocks == [Paragraph("Line one line two\nline three")]

    def test_link_keeps_text(self):
        blocks = blocks_from_markdown("See [my site](https://example.org) for more.\n")

        assert blocks == [Paragraph("See my site for more.")]

    def test_inline_code_is_plain(self):
        blocks = blocks_from_markdown("Uses `asyncio` daily\n")

        assert blocks == [Paragraph("Uses asyncio daily")]

    def test_image_only_paragraph_dropped(self):
        assert blocks_from_markdown("![photo](me.png)\n") == []

    def test_raw_html_dropped(self):
        blocks = blocks_from_markdown("<div>\nhidden\n</div>\n\nVisible <b>text</b>\n")

        assert blocks == [Paragraph("Visible text")]


class TestLists:
    """Test suite for list mapping."""

    def test_nested_bullets(self):
        text = "- Python\n- Databases\n  - PostgreSQL\n  - Redis\n- Docker\n"

        assert blocks_from_markdown(text) == [
            ListItem("Python"),
            ListItem("Databases"),
            ListItem("PostgreSQL", depth=1),
            ListItem("Redis", depth=1),
            ListItem("Docker"),
        ]

    def test_ordered_list_start(self):
        blocks = blocks_from_markdown("3. Third\n4. Fourth\n")

        assert blocks == [ListItem("Third", ordinal=3), ListItem("Fourth", ordinal=4)]

    def test_ordered_list_from_one(self):
        blocks = blocks_from_markdown("1. a\n1. b\n")

        assert [block.ordinal for block in blocks] == [1, 2]

    def test_loose_item_paragraphs_join(self):
        text = "- First paragraph\n\n  second paragraph\n\n- Next\n"

        assert blocks_from_markdown(text) == [
            ListItem("First paragraph second paragraph"),
            ListItem("Next"),
        ]

    def test_text_after_nested_list(self):
        text = "- Parent\n  - Child\n\n  Trailing note\n"

        assert blocks_from_markdown(text) == [
            ListItem("Parent"),
            ListItem("Child", depth=1),
            Paragraph("Trailing note"),
        ]


class TestTablesAndCode:
    """Test suite for tables, code and rules."""

    def test_table_rows(self):
        text = "| Skill | Level |\n|---|---|\n| **Python** | Expert |\n| Go | |\n"

        assert blocks_from_markdown(text) == [
            TableRow(["Skill", "Level"]),
            TableRow([[Span("Python", bold=True)], "Expert"]),
            TableRow(["Go", []]),
        ]

    def test_fenced_code_keeps_lines(self):
        blocks = blocks_from_markdown("```\npip install pagequill\npagequill version\n```\n")

        assert blocks == [Paragraph("pip install pagequill\npagequill version")]

    def test_horizontal_rule_is_empty_paragraph(self):
        blocks = blocks_from_markdown("Above\n\n---\n\nBelow\n")

        assert blocks == [Paragraph("Above"), Paragraph([]), Paragraph("Below")]

    def test_custom_parser(self):
        from markdown_it import MarkdownIt

        importer = MarkdownImporter(MarkdownIt("commonmark"))

        assert importer.import_text("## Skills\n") == [Heading(2, "Skills")]
