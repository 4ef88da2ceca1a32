"""Lecture Ingest - normalized text extraction for lecture documents.

Turns raw PDF and PPTX lecture files into a structured text record ready
for AI summarization and quiz generation.

Components:
    - parsing: Container decoding (pypdf for PDF, zip + XML for PPTX)
    - extractors: Format extractors, table detection, metadata inference
    - postprocessing: Ordered cleanup stages for extracted text
    - models: Pydantic output and option models
    - prompts: Prompt contract for downstream summary and quiz generation
"""

__version__ = "0.1.0"
