"""PDF content extraction.

Two modes share the same parsing, cleanup and classification:

    - ``extract_pdf_content``: text only;
    - ``extract_pdf_with_tables``: scientific then generic table passes
      before cleanup.

Neither raises: any failure produces a degraded ExtractedData whose content
names the error.
"""

import logging
import time
from collections.abc import Callable

from lecture_ingest.config import ExtractionConfig, get_extraction_config
from lecture_ingest.extractors.metadata import determine_difficulty, resolve_identifiers
from lecture_ingest.extractors.tables import (
    detect_tables_in_pdf_text,
    extract_scientific_pdf_tables,
)
from lecture_ingest.models.schemas import (
    EMPTY_CONTENT,
    UNKNOWN,
    Difficulty,
    ExtractedData,
    RawDocument,
)
from lecture_ingest.parsing.pdf_parser import parse_pdf
from lecture_ingest.postprocessing import ProcessingContext, postprocess_content

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"
UNTITLED_PDF = "Untitled PDF"


def degraded_pdf_result(message: str) -> ExtractedData:
    """Build the placeholder record returned when PDF extraction fails."""
    return ExtractedData(
        course_id=UNKNOWN,
        lecture_id=UNKNOWN,
        title=UNTITLED_PDF,
        content=message,
        difficulty=Difficulty.MEDIUM,
    )


def _extract(
    pdf_bytes: bytes,
    config: ExtractionConfig,
    table_pass: Callable[[str], str] | None,
) -> ExtractedData:
    pdf_content = parse_pdf(pdf_bytes, max_size=config.max_file_size)
    document = RawDocument(
        text=pdf_content.text,
        title=pdf_content.title,
        subject=pdf_content.info.subject,
    )

    text = document.text
    if table_pass is not None:
        logger.info("Detecting and formatting tables...")
        text = table_pass(text)

    context = ProcessingContext(
        document_type="pdf", title=document.title, subject=document.subject
    )
    processed = postprocess_content(text, context)
    course_id, lecture_id = resolve_identifiers(processed, document)

    return ExtractedData(
        course_id=course_id,
        lecture_id=lecture_id,
        title=document.title or UNTITLED,
        content=processed or EMPTY_CONTENT,
        difficulty=determine_difficulty(processed),
    )


def extract_pdf_content(
    pdf_bytes: bytes, config: ExtractionConfig | None = None
) -> ExtractedData:
    """Extract and normalize the text of a PDF without table detection.

    Args:
        pdf_bytes: Raw bytes of the PDF file.
        config: Optional extraction configuration.
                Loads from environment if not provided.

    Returns:
        ExtractedData, degraded if the PDF could not be processed.
    """
    logger.info("Extracting content from PDF...")
    start = time.perf_counter()

    try:
        result = _extract(pdf_bytes, config or get_extraction_config(), table_pass=None)
    except Exception as e:
        logger.warning(f"Error extracting PDF content: {e}")
        return degraded_pdf_result(f"Error extracting PDF content: {e}")

    logger.info(f"PDF extraction completed in {time.perf_counter() - start:.2f} seconds")
    logger.info(f"Extracted {len(result.content)} characters")
    return result


def extract_pdf_with_tables(
    pdf_bytes: bytes, config: ExtractionConfig | None = None
) -> ExtractedData:
    """Extract a PDF with captioned and plain-text tables formatted.

    The scientific (caption-anchored) pass runs first, then the generic pass
    with the configured options, then the PDF cleanup stages.

    Args:
        pdf_bytes: Raw bytes of the PDF file.
        config: Optional extraction configuration.
                Loads from environment if not provided.

    Returns:
        ExtractedData, degraded if the PDF could not be processed.
    """
    logger.info("Extracting PDF with tables...")
    start = time.perf_counter()

    try:
        config = config or get_extraction_config()
        options = config.table_options

        def table_pass(text: str) -> str:
            return detect_tables_in_pdf_text(extract_scientific_pdf_tables(text), options)

        result = _extract(pdf_bytes, config, table_pass=table_pass)
    except Exception as e:
        logger.warning(f"Error extracting PDF tables: {e}")
        return degraded_pdf_result(f"Error extracting PDF tables: {e}")

    logger.info(f"PDF table extraction completed in {time.perf_counter() - start:.2f} seconds")
    logger.info(f"Difficulty assessment: {result.difficulty.value}")
    return result
