"""Pydantic models for extraction inputs and outputs.

Models:
    - ExtractedData: Normalized lecture record handed downstream
    - Difficulty: Easy / Medium / Hard
    - TableDetectionOptions: Table detection sensitivity
    - TableRegion: Transient line range of a detected table
    - RawDocument: Container parser output
    - QuizQuestion: Parsed quiz question from the generation service
"""

from lecture_ingest.models.schemas import (
    EMPTY_CONTENT,
    UNKNOWN,
    Difficulty,
    ExtractedData,
    QuizQuestion,
    RawDocument,
    TableDetectionOptions,
    TableRegion,
)

__all__ = [
    "EMPTY_CONTENT",
    "UNKNOWN",
    "Difficulty",
    "ExtractedData",
    "QuizQuestion",
    "RawDocument",
    "TableDetectionOptions",
    "TableRegion",
]
