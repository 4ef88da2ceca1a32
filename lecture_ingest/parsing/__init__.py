"""Container parsing for lecture documents.

Turns document bytes into raw text sources for the extraction pipeline.

Responsibilities:
    - PDF text and metadata extraction with pypdf
    - PPTX zip traversal, slide ordering and property lookup
    - Typed slide shape trees for text and table flattening

Parsers raise on unreadable containers; the extractors decide how to degrade.
"""

from lecture_ingest.parsing.pdf_parser import DocumentInfo, PDFContent, PDFParseError, parse_pdf
from lecture_ingest.parsing.pptx_parser import (
    PPTXContent,
    PPTXParseError,
    PresentationProperties,
    SlideFailure,
    parse_pptx,
)

__all__ = [
    "DocumentInfo",
    "PDFContent",
    "PDFParseError",
    "PPTXContent",
    "PPTXParseError",
    "PresentationProperties",
    "SlideFailure",
    "parse_pdf",
    "parse_pptx",
]
