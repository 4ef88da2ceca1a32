"""Extraction configuration with environment variable loading.

Pydantic-based configuration for the extraction pipeline.
Values default from LECTURE_* environment variables (a .env file is honored).
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from lecture_ingest.models.schemas import TableDetectionOptions

# Load environment variables from .env file
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


class ExtractionConfig(BaseModel):
    """Configuration for document extraction.

    Attributes:
        max_file_size_mb: Largest accepted input document, in megabytes.
        table_min_rows: Minimum lines for a plain-text table region.
        table_min_columns: Minimum columns for a line to look tabular.
        table_line_threshold: Minimum rule characters for a table rule line.
        keep_slide_markers: Keep the empty-slide and slide-error markers in
            PPTX content instead of stripping them during cleanup.
    """

    max_file_size_mb: int = Field(
        default_factory=lambda: _env_int("LECTURE_MAX_FILE_MB", 50),
        description="Maximum input size in megabytes",
    )
    table_min_rows: int = Field(
        default_factory=lambda: _env_int("LECTURE_TABLE_MIN_ROWS", 2),
        description="Minimum rows for a detected table",
    )
    table_min_columns: int = Field(
        default_factory=lambda: _env_int("LECTURE_TABLE_MIN_COLUMNS", 2),
        description="Minimum columns for a table-like line",
    )
    table_line_threshold: int = Field(
        default_factory=lambda: _env_int("LECTURE_TABLE_LINE_THRESHOLD", 3),
        description="Minimum rule characters for a horizontal rule line",
    )
    keep_slide_markers: bool = Field(
        default_factory=lambda: _env_bool("LECTURE_KEEP_SLIDE_MARKERS", True),
        description="Keep per-slide diagnostic markers in PPTX content",
    )

    @field_validator(
        "max_file_size_mb", "table_min_rows", "table_min_columns", "table_line_threshold"
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that size and table thresholds are positive."""
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @property
    def max_file_size(self) -> int:
        """Maximum input size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def table_options(self) -> TableDetectionOptions:
        """Table detection options built from this configuration."""
        return TableDetectionOptions(
            min_rows=self.table_min_rows,
            min_columns=self.table_min_columns,
            line_threshold=self.table_line_threshold,
        )


def get_extraction_config() -> ExtractionConfig:
    """Create extraction configuration from environment.

    Returns:
        Configured ExtractionConfig instance.

    Raises:
        ValueError: If an environment value is not a valid setting.
    """
    return ExtractionConfig()
