"""PowerPoint content extraction.

Slides are flattened in numeric order into ``Slide N:`` sections, each
followed by the slide text (or an empty-slide marker) and its tables.
A slide that fails to parse leaves an error marker and the rest of the
deck is still processed.
"""

import logging
import time

from lecture_ingest.config import ExtractionConfig, get_extraction_config
from lecture_ingest.extractors.metadata import determine_difficulty, resolve_identifiers
from lecture_ingest.extractors.tables import extract_tables_from_pptx_slide
from lecture_ingest.models.schemas import (
    EMPTY_CONTENT,
    UNKNOWN,
    Difficulty,
    ExtractedData,
    RawDocument,
)
from lecture_ingest.parsing.pptx_parser import PPTXContent, SlideFailure, parse_pptx
from lecture_ingest.parsing.slide_tree import extract_slide_text
from lecture_ingest.postprocessing import ProcessingContext, postprocess_content
from lecture_ingest.postprocessing.common import (
    EMPTY_SLIDE_MARKER,
    SLIDE_ERROR_MARKER,
    SLIDE_HEADER,
)

logger = logging.getLogger(__name__)

UNTITLED_PPTX = "Untitled PPTX"


def degraded_pptx_result(message: str) -> ExtractedData:
    """Build the placeholder record returned when PPTX extraction fails."""
    return ExtractedData(
        course_id=UNKNOWN,
        lecture_id=UNKNOWN,
        title=UNTITLED_PPTX,
        content=message,
        difficulty=Difficulty.MEDIUM,
    )


def render_presentation(presentation: PPTXContent) -> RawDocument:
    """Flatten parsed slides into one text with per-slide sections."""
    sections = []
    for slide in presentation.slides:
        if isinstance(slide, SlideFailure):
            sections.append(SLIDE_ERROR_MARKER.format(number=slide.number) + "\n\n")
            continue

        section = SLIDE_HEADER.format(number=slide.number) + "\n"
        text = extract_slide_text(slide)
        section += (text if text else EMPTY_SLIDE_MARKER) + "\n\n"

        tables = extract_tables_from_pptx_slide(slide)
        if tables.strip():
            section += tables + "\n\n"
        sections.append(section)

    properties = presentation.properties
    return RawDocument(
        text="".join(sections),
        title=properties.title,
        subject=properties.subject,
        company=properties.company,
    )


def extract_pptx_content(
    pptx_bytes: bytes, config: ExtractionConfig | None = None
) -> ExtractedData:
    """Extract and normalize the text and tables of a PPTX presentation.

    Args:
        pptx_bytes: Raw bytes of the PPTX file.
        config: Optional extraction configuration.
                Loads from environment if not provided.

    Returns:
        ExtractedData, degraded if the presentation could not be opened.
    """
    logger.info("Extracting content from PPTX...")
    start = time.perf_counter()

    try:
        config = config or get_extraction_config()
        presentation = parse_pptx(pptx_bytes, max_size=config.max_file_size)
        document = render_presentation(presentation)

        context = ProcessingContext(
            document_type="pptx",
            title=document.title,
            subject=document.subject,
            company=document.company,
            keep_slide_markers=config.keep_slide_markers,
        )
        processed = postprocess_content(document.text, context)
        course_id, lecture_id = resolve_identifiers(processed, document)

        result = ExtractedData(
            course_id=course_id,
            lecture_id=lecture_id,
            title=document.title,
            content=processed or EMPTY_CONTENT,
            difficulty=determine_difficulty(processed),
        )
    except Exception as e:
        logger.warning(f"Error extracting PPTX content: {e}")
        return degraded_pptx_result(f"Error extracting PPTX content: {e}")

    logger.info(f"PPTX extraction completed in {time.perf_counter() - start:.2f} seconds")
    logger.info(
        f"Extracted {len(result.content)} characters from {len(presentation.slides)} slides"
    )
    return result
