"""Whitespace and line break handling."""

import re

from lecture_ingest.postprocessing.common import (
    FORMULA_DELIMITER,
    SLIDE_HEADER_PATTERN,
    TABLE_END,
    TABLE_START,
)

BULLET_PATTERN = re.compile(r"^[•\-*]\s")
NUMBERED_ITEM_PATTERN = re.compile(r"^\d+[.)]\s")
PAGE_NUMBER_LINE_PATTERN = re.compile(r"^[ \t]*\d+[ \t]*$", re.MULTILINE)
PAGE_OF_PATTERN = re.compile(
    r"[ \t]*(?:Page|Slide)[ \t]*\d+[ \t]*(?:of|/|-)[ \t]*\d+[ \t]*", re.IGNORECASE
)
BROKEN_SENTENCE_PATTERN = re.compile(r"(\w)\s*\n\s*([a-z])")


def _pad_newlines(text: str, count: int) -> str:
    """Make text end with at least ``count`` newlines (no-op on empty text)."""
    if not text:
        return text
    trailing = len(text) - len(text.rstrip("\n"))
    if trailing < count:
        text += "\n" * (count - trailing)
    return text


def _is_structural(line: str) -> bool:
    return bool(
        BULLET_PATTERN.match(line)
        or NUMBERED_ITEM_PATTERN.match(line)
        or (line.startswith(FORMULA_DELIMITER) and line.endswith(FORMULA_DELIMITER))
    )


def remove_redundant_line_breaks(content: str) -> str:
    """Join wrapped lines into paragraphs while keeping structural lines.

    Blank lines become a single paragraph break. Table blocks, ``Slide N:``
    headers, bullets, numbered items and ``$$`` formula blocks stay on their
    own lines; every other line is joined to the previous one with a space.
    Applying the function twice gives the same result as applying it once.
    """
    result = ""
    in_table = False

    for raw_line in content.split("\n"):
        line = raw_line.strip()

        if not line:
            result = _pad_newlines(result, 2)
            continue

        if line == TABLE_START:
            in_table = True
            result = _pad_newlines(result, 1) + line + "\n"
            continue
        if line == TABLE_END:
            in_table = False
            result = _pad_newlines(result, 1) + line + "\n"
            continue

        if in_table and line.startswith("|"):
            result = _pad_newlines(result, 1) + line + "\n"
            continue

        if SLIDE_HEADER_PATTERN.match(line):
            result = _pad_newlines(result, 2) + line + "\n"
            continue

        if _is_structural(line):
            result = _pad_newlines(result, 1) + line + "\n"
            continue

        if result and not result.endswith("\n"):
            result += " "
        result += line

    result = re.sub(r"\n{3,}", "\n\n", result)
    return result.rstrip("\n")


def remove_page_numbers(content: str) -> str:
    """Remove standalone page-number lines and ``Page X of Y`` markers."""
    result = PAGE_NUMBER_LINE_PATTERN.sub("", content)
    return PAGE_OF_PATTERN.sub("", result)


def merge_broken_sentences(content: str) -> str:
    """Rejoin a sentence split by a line break before a lowercase word."""
    return BROKEN_SENTENCE_PATTERN.sub(r"\1 \2", content)


def normalize_spacing(content: str) -> str:
    """Single-space text, drop spaces before punctuation, cap blank lines."""
    result = re.sub(r"[ \t]+", " ", content)
    result = re.sub(r"\s+([,.;:!?])", r"\1", result)
    return re.sub(r"\n{3,}", "\n\n", result)
