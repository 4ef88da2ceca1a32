"""Text postprocessing for extracted lecture content.

Use ``postprocess_content`` for the standard ordered pipeline, or the
individual stages for targeted transformations.

Modules:
    - core: Stage lists per document type and the entry point
    - pipeline: Stage type, context and runner
    - whitespace: Line breaks, page numbers, broken sentences
    - headers: Repeating header/footer and boilerplate removal
    - math: Math notation fixes and formula blocks
    - tables: Simple-table pass and stray pipe cleanup
    - pdf_specific / pptx_specific: Document-type cleanup stages
"""

from lecture_ingest.postprocessing.core import FINALIZE_STAGES, postprocess_content, stages_for
from lecture_ingest.postprocessing.headers import (
    remove_common_headers_footers,
    remove_repeating_headers,
)
from lecture_ingest.postprocessing.math import (
    clean_repeated_punctuation,
    enhance_mathematical_content,
    fix_math_notation,
)
from lecture_ingest.postprocessing.pdf_specific import clean_pdf_content
from lecture_ingest.postprocessing.pipeline import ProcessingContext, Stage, run_stages
from lecture_ingest.postprocessing.pptx_specific import clean_ppt_content
from lecture_ingest.postprocessing.tables import (
    clean_pipe_artifacts,
    detect_column_positions,
    detect_simple_tables,
    format_as_table,
)
from lecture_ingest.postprocessing.whitespace import (
    merge_broken_sentences,
    remove_page_numbers,
    remove_redundant_line_breaks,
)

__all__ = [
    "FINALIZE_STAGES",
    "ProcessingContext",
    "Stage",
    "clean_pdf_content",
    "clean_pipe_artifacts",
    "clean_ppt_content",
    "clean_repeated_punctuation",
    "detect_column_positions",
    "detect_simple_tables",
    "enhance_mathematical_content",
    "fix_math_notation",
    "format_as_table",
    "merge_broken_sentences",
    "postprocess_content",
    "remove_common_headers_footers",
    "remove_page_numbers",
    "remove_redundant_line_breaks",
    "remove_repeating_headers",
    "run_stages",
    "stages_for",
]
