"""PowerPoint-specific cleanup stages."""

import re

from lecture_ingest.postprocessing.common import EMPTY_SLIDE_MARKER, escape_regexp
from lecture_ingest.postprocessing.pipeline import (
    ProcessingContext,
    Stage,
    run_stages,
)

# "Slide 3" or "Page 3" mentions, except "Slide 3:" headers and error markers
SLIDE_MENTION_PATTERN = re.compile(
    r"(?<!Error parsing )\b(?:Slide|Page)\s+\d+\b(?!:)", re.IGNORECASE
)
EMPTY_SLIDE_MARKER_PATTERN = re.compile(escape_regexp(EMPTY_SLIDE_MARKER) + r"\s*")
SLIDE_ERROR_MARKER_PATTERN = re.compile(r"\[Error parsing slide \d+\]\s*")


def remove_title_lines(content: str, context: ProcessingContext) -> str:
    """Remove lines equal to the presentation title (a repeated footer)."""
    if not context.title:
        return content
    pattern = re.compile(rf"^\s*{escape_regexp(context.title)}\s*$", re.MULTILINE)
    return pattern.sub("", content)


def remove_slide_mentions(content: str, context: ProcessingContext) -> str:
    """Remove bare slide/page numbers, keeping ``Slide N:`` headers."""
    return SLIDE_MENTION_PATTERN.sub("", content)


def remove_slide_markers(content: str, context: ProcessingContext) -> str:
    """Drop empty-slide and slide-error markers unless they should be kept."""
    if context.keep_slide_markers:
        return content
    result = EMPTY_SLIDE_MARKER_PATTERN.sub("", content)
    return SLIDE_ERROR_MARKER_PATTERN.sub("", result)


PPTX_CLEANUP_STAGES: list[Stage] = [
    Stage("remove_title_lines", remove_title_lines),
    Stage("remove_slide_mentions", remove_slide_mentions),
    Stage("remove_slide_markers", remove_slide_markers),
]


def clean_ppt_content(content: str, context: ProcessingContext | None = None) -> str:
    """Clean artifacts of PowerPoint text extraction.

    Args:
        content: Raw extracted slide text.
        context: Presentation hints (title, marker policy).

    Returns:
        Cleaned presentation content.
    """
    return run_stages(content, PPTX_CLEANUP_STAGES, context or ProcessingContext("pptx"))
