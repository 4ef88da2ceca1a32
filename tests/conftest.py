"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - extraction_config: Deterministic configuration, independent of .env
    - lecture_pptx: Two-slide presentation (title + bullet, then empty)
    - lecture_pdf: Two-page PDF with a course code and lecture number
    - corrupt_pdf: Bytes with a PDF header and no readable structure

Documents are generated in memory by ``tests.builders``.
"""

import pytest

from lecture_ingest.config import ExtractionConfig
from tests.builders import build_pdf, build_pptx, slide_xml, text_shape


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    """Return configuration with explicit defaults.

    Returns:
        ExtractionConfig unaffected by LECTURE_* environment variables.
    """
    return ExtractionConfig(
        max_file_size_mb=50,
        table_min_rows=2,
        table_min_columns=2,
        table_line_threshold=3,
        keep_slide_markers=True,
    )


@pytest.fixture
def lecture_pptx() -> bytes:
    """Build a two-slide presentation.

    Returns:
        PPTX bytes: slide 1 has a title and one bullet, slide 2 has no text.
    """
    return build_pptx(
        [
            slide_xml(
                text_shape("Introduction to Variables"),
                text_shape("Variables store values"),
            ),
            slide_xml(),
        ],
        title="Programming Basics",
    )


@pytest.fixture
def lecture_pdf() -> bytes:
    """Build a two-page lecture PDF.

    Returns:
        PDF bytes whose text mentions COMP1234 and Lecture 5.
    """
    return build_pdf(
        [
            ["COMP1234 Lecture 5", "Variables and functions in Python"],
            ["A function returns a value to the caller"],
        ],
        title="Python Fundamentals",
    )


@pytest.fixture
def corrupt_pdf() -> bytes:
    """Return bytes that pass the header check but are not a PDF.

    Returns:
        Truncated PDF bytes.
    """
    return b"%PDF-1.4\n1 0 obj\n<<"
