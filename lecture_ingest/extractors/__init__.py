"""Format extractors for lecture documents.

Each extractor takes raw bytes and returns a normalized ExtractedData,
degrading to a placeholder record instead of raising.

Exports:
    - extract_pdf_content / extract_pdf_with_tables: PDF documents
    - extract_pptx_content: PowerPoint presentations
"""

from lecture_ingest.extractors.pdf_extractor import extract_pdf_content, extract_pdf_with_tables
from lecture_ingest.extractors.pptx_extractor import extract_pptx_content

__all__ = ["extract_pdf_content", "extract_pdf_with_tables", "extract_pptx_content"]
