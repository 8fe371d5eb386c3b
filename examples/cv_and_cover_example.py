#!/usr/bin/env python3
"""
Example: render a CV and a cover page with the block API.

Builds the blocks by hand for the CV and from markdown for the cover page,
then writes both files. The renders are independent and could run on
separate threads.
"""

from pathlib import Path

from pagequill import (
    Heading,
    ListItem,
    PageGeometry,
    Paragraph,
    Span,
    TableRow,
    blocks_from_markdown,
    render,
)

COVER_LETTER = """# Cover letter

Dear hiring team,

I would like to apply for the **Backend engineer** position.
Over the last six years I have:

- designed billing services in Python
- run PostgreSQL at scale

Kind regards,
Jane Doe
"""


def cv_blocks():
    return [
        Heading(1, "Jane Doe"),
        Paragraph([Span("Role: ", bold=True), Span("Backend engineer, Warsaw")]),
        Heading(2, "Skills"),
        TableRow([[Span("Skill", bold=True)], [Span("Level", bold=True)], [Span("Years", bold=True)]]),
        TableRow(["Python", "Expert", "8"]),
        TableRow(["PostgreSQL", "Advanced", "6"]),
        Heading(2, "Experience"),
        ListItem([Span("Acme Corp", bold=True), Span(" - billing platform (2019-2024)")]),
        ListItem("Cut invoice generation time from hours to minutes", depth=1),
        ListItem("Mentored four engineers", depth=1),
        ListItem([Span("Initech", bold=True), Span(" - data pipelines (2016-2019)")]),
    ]


def main():
    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("Rendering CV...")
    cv_path = output_dir / "cv.pdf"
    cv_path.write_bytes(render(cv_blocks(), "Jane Doe - CV"))
    print(f"   Saved: {cv_path}")

    print("Rendering cover page (US Letter)...")
    geometry = PageGeometry.from_options({"page_size": "LETTER", "margin": 54})
    cover_path = output_dir / "cover_letter.pdf"
    cover_path.write_bytes(render(blocks_from_markdown(COVER_LETTER), "Cover letter", geometry))
    print(f"   Saved: {cover_path}")


if __name__ == "__main__":
    main()
