"""Document processing entry point.

Routes a document to the right extractor by file type and fills in file
details and path-derived identifiers.
"""

import logging
import posixpath

from lecture_ingest.config import ExtractionConfig
from lecture_ingest.extractors import extract_pdf_with_tables, extract_pptx_content
from lecture_ingest.models.schemas import UNKNOWN, ExtractedData

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = ("pdf", "pptx", "ppt")

# Storage keys look like protected/<user>/<courseId>/<lectureId>/<file>
MIN_KEY_SEGMENTS = 5


class UnsupportedFileTypeError(ValueError):
    """Raised when a document type has no extractor."""

    pass


def resolve_file_type(key: str, file_type: str | None = None) -> str:
    """Return the normalized file type from a hint or the key's extension.

    Raises:
        UnsupportedFileTypeError: If the type is missing or not supported.
    """
    raw = file_type if file_type else posixpath.splitext(key)[1]
    normalized = raw.lower().lstrip(".")
    if normalized not in SUPPORTED_TYPES:
        shown = f".{normalized}" if normalized else "(none)"
        raise UnsupportedFileTypeError(f"Unsupported file type: {shown}")
    return normalized


def identifiers_from_key(key: str) -> tuple[str | None, str | None]:
    """Read course and lecture IDs from a conventional storage key.

    Returns:
        (course_id, lecture_id), or (None, None) if the key is too short.
    """
    parts = key.split("/")
    if len(parts) < MIN_KEY_SEGMENTS:
        return None, None
    return parts[-3] or None, parts[-2] or None


def process_document(
    content: bytes,
    key: str,
    file_type: str | None = None,
    config: ExtractionConfig | None = None,
) -> ExtractedData:
    """Extract one document into an ExtractedData record.

    Args:
        content: Raw document bytes.
        key: Storage path or file name; supplies file name and fallback IDs.
        file_type: Optional type hint ("pdf", "pptx", "ppt"); defaults to
                   the key's extension.
        config: Optional extraction configuration.

    Returns:
        The extracted record. Container failures give a degraded record.

    Raises:
        UnsupportedFileTypeError: Before any extraction, for other types.
    """
    resolved = resolve_file_type(key, file_type)
    logger.info(f"Processing file: {key}")

    if resolved == "pdf":
        data = extract_pdf_with_tables(content, config)
    else:
        data = extract_pptx_content(content, config)

    updates: dict[str, str] = {
        "file_name": posixpath.basename(key),
        "file_type": resolved,
    }

    course_id, lecture_id = identifiers_from_key(key)
    if data.course_id == UNKNOWN and course_id:
        updates["course_id"] = course_id
    if data.lecture_id == UNKNOWN and lecture_id:
        updates["lecture_id"] = lecture_id

    return data.model_copy(update=updates)
