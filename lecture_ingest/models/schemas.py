from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNKNOWN = "Unknown"
EMPTY_CONTENT = "[No extractable text content in this document]"


class Difficulty(str, Enum):
    """Difficulty levels assigned to lecture content and quiz questions."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class ExtractedData(BaseModel):
    """Normalized lecture record produced by the extraction pipeline.

    Serializes with camelCase keys (courseId, lectureId, ...) when dumped
    with ``by_alias=True``.

    Attributes:
        course_id: Course identifier, or "Unknown".
        lecture_id: Lecture identifier, or "Unknown".
        title: Document title.
        content: Normalized text, possibly containing [TABLE] and $$ blocks.
        difficulty: Estimated difficulty level.
        file_name: Uploaded file name (basename of the storage key).
        file_type: File extension without the leading dot.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    course_id: str = UNKNOWN
    lecture_id: str = UNKNOWN
    title: str
    content: str = Field(..., min_length=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    file_name: str | None = None
    file_type: str | None = None

    @field_validator("course_id", "lecture_id", mode="before")
    @classmethod
    def default_unknown(cls, v: str | None) -> str:
        """Map missing identifiers to the Unknown sentinel."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return UNKNOWN
        return v


class TableDetectionOptions(BaseModel):
    """Sensitivity settings for plain-text table detection.

    Attributes:
        min_rows: Minimum number of lines a region needs to become a table.
        min_columns: Minimum number of columns a line needs to look tabular.
        line_threshold: Minimum rule characters for a horizontal rule line.
    """

    model_config = ConfigDict(frozen=True)

    min_rows: int = Field(default=2, ge=1)
    min_columns: int = Field(default=2, ge=1)
    line_threshold: int = Field(default=3, ge=1)


class TableRegion(BaseModel):
    """Inclusive line-index range classified as tabular."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(ge=0)
    end_line: int = Field(ge=0)


class RawDocument(BaseModel):
    """Text and title hints pulled out of a document container.

    Attributes:
        text: Concatenated raw text of the document.
        title: Title from document properties, or a fallback.
        subject: Subject property.
        company: Company property (PPTX only).
    """

    text: str
    title: str = ""
    subject: str = ""
    company: str = ""


class QuizQuestion(BaseModel):
    """A multiple-choice question parsed from a generated quiz.

    Attributes:
        question: Question text.
        options: Answer choices without letter prefixes.
        answer: Full text of the correct option.
        explanation: Why the answer is correct.
        difficulty: Question difficulty.
        topic_tag: Concept being tested.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question: str = Field(..., min_length=1)
    options: list[str]
    answer: str
    explanation: str
    difficulty: Difficulty = Difficulty.MEDIUM
    topic_tag: str = "General"
