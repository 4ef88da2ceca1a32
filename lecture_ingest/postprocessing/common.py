"""Common utilities for text processing."""

import re

TABLE_START = "[TABLE]"
TABLE_END = "[/TABLE]"
FORMULA_DELIMITER = "$$"

SLIDE_HEADER_PATTERN = re.compile(r"^Slide \d+:$")
SLIDE_HEADER = "Slide {number}:"
EMPTY_SLIDE_MARKER = "[No text content in this slide]"
SLIDE_ERROR_MARKER = "[Error parsing slide {number}]"


def escape_regexp(text: str) -> str:
    """Escape regex metacharacters so text matches literally."""
    return re.escape(text)


def is_table_row(line: str) -> bool:
    """True for a rendered table row such as ``| a | b |``."""
    stripped = line.strip()
    return len(stripped) > 1 and stripped.startswith("|") and stripped.endswith("|")


def table_block_mask(lines: list[str]) -> list[bool]:
    """Mark the lines belonging to existing [TABLE]...[/TABLE] blocks.

    Marker lines are included. An unclosed block runs to the end.
    """
    mask = []
    inside = False
    for line in lines:
        stripped = line.strip()
        if stripped == TABLE_START:
            inside = True
            mask.append(True)
        elif stripped == TABLE_END:
            mask.append(True)
            inside = False
        else:
            mask.append(inside)
    return mask
