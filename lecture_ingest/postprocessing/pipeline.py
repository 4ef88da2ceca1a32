"""Ordered stage runner for text postprocessing.

A stage is a named pure function ``(text, context) -> text``. Stage lists
are explicit so their order can be read, tested and changed deliberately.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessingContext:
    """Per-document hints available to every stage.

    Attributes:
        document_type: "pdf", "pptx" or "ppt".
        title: Document title, used to strip repeated title footers.
        subject: Presentation subject.
        company: Presentation company.
        keep_slide_markers: Keep empty-slide and slide-error markers.
    """

    document_type: str
    title: str = ""
    subject: str = ""
    company: str = ""
    keep_slide_markers: bool = True


StageFunc = Callable[[str, ProcessingContext], str]


@dataclass(frozen=True)
class Stage:
    name: str
    apply: StageFunc


def text_stage(name: str, func: Callable[[str], str]) -> Stage:
    """Build a stage from a function that does not need the context."""
    return Stage(name=name, apply=lambda text, _context: func(text))


def run_stages(content: str, stages: Sequence[Stage], context: ProcessingContext) -> str:
    """Apply stages in order, each to the previous stage's output."""
    result = content
    for stage in stages:
        result = stage.apply(result, context)
        logger.debug(f"Stage {stage.name}: {len(result)} characters")
    return result
