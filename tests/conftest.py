"""
Pytest configuration for pagequill
"""

import logging
import sys
from pathlib import Path

import pytest

from pagequill import Heading, ListItem, Paragraph, Span, TableRow
from pagequill.engine.geometry import PageGeometry


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid leaking CLI handlers."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary directory for tests that touch the file system."""
    return tmp_path


@pytest.fixture
def geometry():
    """Default A4 geometry."""
    return PageGeometry()


@pytest.fixture
def cv_blocks():
    """Small CV covering every block kind."""
    return [
        Heading(1, "Jane Doe"),
        Paragraph([Span("Role: ", bold=True), Span("Backend engineer (Python)")]),
        Heading(2, "Skills"),
        TableRow([[Span("Skill", bold=True)], [Span("Level", bold=True)]]),
        TableRow(["Python", "Expert"]),
        TableRow(["PostgreSQL", "Advanced"]),
        Heading(2, "Experience"),
        ListItem("Built a billing service handling 2M requests a day"),
        ListItem("Mentored two junior developers", depth=1),
        ListItem("Migrated CI to containers", ordinal=3),
    ]


@pytest.fixture
def long_paragraph():
    """Paragraph forced onto many lines (one word per line)."""
    def build(line_count: int) -> Paragraph:
        return Paragraph("\n".join(f"line{index}" for index in range(line_count)))
    return build


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    logging.raiseExceptions = False
