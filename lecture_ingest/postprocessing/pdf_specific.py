"""PDF-specific cleanup stages."""

import re

from lecture_ingest.postprocessing.headers import (
    remove_common_headers_footers,
    remove_repeating_headers,
)
from lecture_ingest.postprocessing.math import (
    clean_repeated_punctuation,
    enhance_mathematical_content,
    fix_math_notation,
)
from lecture_ingest.postprocessing.pipeline import (
    ProcessingContext,
    Stage,
    run_stages,
    text_stage,
)
from lecture_ingest.postprocessing.tables import clean_pipe_artifacts
from lecture_ingest.postprocessing.whitespace import merge_broken_sentences, normalize_spacing

HYPHEN_BREAK_PATTERN = re.compile(r"(\w+)-\s*\n\s*(\w+)")
MIN_HYPHEN_PART = 3


def _join_hyphenated(match: re.Match) -> str:
    head, tail = match.group(1), match.group(2)
    if len(head) >= MIN_HYPHEN_PART and len(tail) >= MIN_HYPHEN_PART:
        return f"{head}{tail}"
    return match.group(0)


def rejoin_hyphenated_words(content: str) -> str:
    """Rejoin words hyphenated across a line break.

    Both halves need at least three characters; shorter halves are more
    likely a real hyphenated compound. Also closes ``a- b`` gaps.
    """
    result = HYPHEN_BREAK_PATTERN.sub(_join_hyphenated, content)
    return re.sub(r"([a-z])- ([a-z])", r"\1-\2", result)


PDF_CLEANUP_STAGES: list[Stage] = [
    text_stage("remove_repeating_headers", remove_repeating_headers),
    text_stage("rejoin_hyphenated_words", rejoin_hyphenated_words),
    text_stage("remove_common_headers_footers", remove_common_headers_footers),
    text_stage("clean_pipe_artifacts", clean_pipe_artifacts),
    text_stage("merge_broken_sentences", merge_broken_sentences),
    text_stage("normalize_spacing", normalize_spacing),
    text_stage("clean_repeated_punctuation", clean_repeated_punctuation),
    text_stage("fix_math_notation", fix_math_notation),
    text_stage("enhance_mathematical_content", enhance_mathematical_content),
]


def clean_pdf_content(content: str, context: ProcessingContext | None = None) -> str:
    """Clean artifacts of PDF text extraction.

    Args:
        content: Raw extracted PDF text.
        context: Document hints; defaults to a bare PDF context.

    Returns:
        Cleaned PDF content.
    """
    return run_stages(content, PDF_CLEANUP_STAGES, context or ProcessingContext("pdf"))
