"""Core postprocessing functionality.

Stage order is fixed: document-specific cleanup, then (PDF only) the simple
table pass, then generic finalization. Table markers must exist before the
line-break pass runs, or table rows would be joined into prose.

PDF cleanup runs ``normalize_spacing`` before the simple table pass, and it
collapses every run of spaces. In the PDF pipeline that pass therefore never
sees a two-space column gap; aligned PDF tables are formatted earlier, by
the table pass of ``extract_pdf_with_tables``.
"""

from lecture_ingest.postprocessing.pdf_specific import PDF_CLEANUP_STAGES
from lecture_ingest.postprocessing.pipeline import (
    ProcessingContext,
    Stage,
    run_stages,
    text_stage,
)
from lecture_ingest.postprocessing.pptx_specific import PPTX_CLEANUP_STAGES
from lecture_ingest.postprocessing.tables import detect_simple_tables
from lecture_ingest.postprocessing.whitespace import (
    merge_broken_sentences,
    remove_page_numbers,
    remove_redundant_line_breaks,
)

FINALIZE_STAGES: list[Stage] = [
    text_stage("remove_redundant_line_breaks", remove_redundant_line_breaks),
    text_stage("remove_page_numbers", remove_page_numbers),
    text_stage("merge_broken_sentences", merge_broken_sentences),
    text_stage("strip", str.strip),
]

DOCUMENT_STAGES: dict[str, list[Stage]] = {
    "pdf": [*PDF_CLEANUP_STAGES, text_stage("detect_simple_tables", detect_simple_tables)],
    "pptx": PPTX_CLEANUP_STAGES,
    "ppt": PPTX_CLEANUP_STAGES,
}


def stages_for(document_type: str) -> list[Stage]:
    """Return the full ordered stage list for a document type.

    Unknown types only get the generic finalization stages.
    """
    return [*DOCUMENT_STAGES.get(document_type, []), *FINALIZE_STAGES]


def postprocess_content(content: str, context: ProcessingContext) -> str:
    """Apply document-specific and generic cleanup to extracted content.

    Args:
        content: The raw extracted text content.
        context: Document type and metadata hints.

    Returns:
        Normalized content.
    """
    return run_stages(content, stages_for(context.document_type), context)
