"""Table detection and extraction for the different document types.

Two engines work on plain PDF text:

    - the generic pass scores every line with layout heuristics and turns
      runs of table-like lines into ``[TABLE]`` blocks;
    - the scientific pass anchors on ``Table N:`` captions and runs the
      generic pass on each captioned section.

Detected regions are rewritten by line index, never by searching for their
text, so repeated passages elsewhere in the document are never touched.
PPTX tables come straight from the slide tree.
"""

import logging
import math
import re

from lecture_ingest.models.schemas import TableDetectionOptions, TableRegion
from lecture_ingest.parsing.slide_tree import Paragraph, Slide, TableFrame, iter_tables
from lecture_ingest.postprocessing.common import TABLE_END, TABLE_START, table_block_mask

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = TableDetectionOptions()

SPACED_COLUMNS_PATTERN = re.compile(r"\S+\s{2,}\S+")
NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")
TABLE_CAPTION_PATTERN = re.compile(
    r"^[ \t]*(?:Table|Tab\.)\s+\d+\s*[.:][ \t]*\S.*$", re.IGNORECASE | re.MULTILINE
)

RULE_CHARACTERS = "-=_+"
SEPARATOR_CHARACTERS = set("-+=:| ")
MIN_LINE_LENGTH = 5
MIN_ALIGNED_TOKENS = 3
COLUMN_VOTE_SHARE = 0.6


def is_rule_line(line: str, options: TableDetectionOptions = DEFAULT_OPTIONS) -> bool:
    """True for a horizontal rule such as ``-----`` or ``+===+===+``."""
    stripped = line.strip()
    if not stripped or any(ch not in RULE_CHARACTERS and ch not in "| " for ch in stripped):
        return False
    return sum(ch in RULE_CHARACTERS for ch in stripped) >= options.line_threshold


def is_table_like(line: str, options: TableDetectionOptions = DEFAULT_OPTIONS) -> bool:
    """Score a trimmed line with the table layout heuristics."""
    return (
        len(SPACED_COLUMNS_PATTERN.findall(line)) >= options.min_columns - 1
        or "|" in line
        or "+" in line
        or len(NUMBER_PATTERN.findall(line)) >= options.min_columns
        or len(line.split()) >= MIN_ALIGNED_TOKENS
        or is_rule_line(line, options)
    )


def find_table_regions(
    lines: list[str],
    options: TableDetectionOptions = DEFAULT_OPTIONS,
    skip: list[bool] | None = None,
) -> list[TableRegion]:
    """Find runs of table-like lines spanning at least ``options.min_rows`` lines.

    Lines shorter than MIN_LINE_LENGTH do not break a run. Non-blank short
    lines inside a run count as rows; blank lines and trailing short lines
    do not. Lines flagged in ``skip`` break any run and are never included.

    Args:
        lines: Text lines to scan.
        options: Detection sensitivity.
        skip: Optional per-line flags for lines that must not be touched.

    Returns:
        Regions in document order.
    """
    regions: list[TableRegion] = []
    start: int | None = None
    last = 0
    count = 0
    pending_short = 0

    def close() -> None:
        nonlocal start, count, pending_short
        if start is not None and count >= options.min_rows:
            regions.append(TableRegion(start_line=start, end_line=last))
        start = None
        count = 0
        pending_short = 0

    for i, raw_line in enumerate(lines):
        if skip is not None and skip[i]:
            close()
            continue

        line = raw_line.strip()
        if len(line) < MIN_LINE_LENGTH:
            if start is not None and line:
                pending_short += 1
            continue

        if is_table_like(line, options):
            if start is None:
                start = i
            count += pending_short + 1
            pending_short = 0
            last = i
        else:
            close()

    close()
    return regions


def _is_separator(line: str) -> bool:
    return set(line) <= SEPARATOR_CHARACTERS and any(ch in "-=" for ch in line)


def format_delimiter_table(lines: list[str]) -> list[str]:
    """Normalize pipe-delimited lines into rows, dropping separator lines."""
    rows = []
    for line in lines:
        if _is_separator(line):
            continue
        row = line if line.startswith("|") else f"| {line}"
        row = row if row.endswith("|") else f"{row} |"
        rows.append(row)
    return rows


def detect_column_cuts(lines: list[str]) -> list[int]:
    """Find column boundaries by majority vote over space positions.

    A gap opens at an offset where at least 60% of the lines have a space
    and the previous offset did not; the column after it starts where the
    vote drops again. With no gap, the lines are cut in half.
    """
    width = max(len(line) for line in lines)
    votes = [0] * width
    for line in lines:
        for i, ch in enumerate(line):
            if ch == " ":
                votes[i] += 1

    needed = max(1, math.ceil(len(lines) * COLUMN_VOTE_SHARE))
    cuts = []
    in_gap = False
    for i, vote in enumerate(votes):
        if vote >= needed:
            in_gap = True
        elif in_gap:
            cuts.append(i)
            in_gap = False

    if not cuts:
        cuts = [width // 2]
    return cuts


def format_space_aligned_table(lines: list[str]) -> list[str]:
    """Slice space-aligned lines into ``| cell | cell |`` rows."""
    cuts = detect_column_cuts(lines)
    bounds = [0, *cuts]
    rows = []
    for line in lines:
        cells = [line[a:b].strip() for a, b in zip(bounds, bounds[1:])]
        cells.append(line[bounds[-1]:].strip())
        while cells and not cells[-1]:
            cells.pop()
        rows.append("| " + " | ".join(cells) + " |")
    return rows


def format_table_lines(table_lines: list[str]) -> list[str]:
    """Render a detected region as a [TABLE] block.

    Regions containing a pipe are treated as delimiter tables, all others
    as space-aligned tables.
    """
    clean_lines = [line.strip() for line in table_lines if line.strip()]
    if any("|" in line for line in clean_lines):
        rows = format_delimiter_table(clean_lines)
    else:
        rows = format_space_aligned_table(clean_lines)
    return [TABLE_START, *rows, TABLE_END]


def detect_tables_in_pdf_text(
    content: str, options: TableDetectionOptions = DEFAULT_OPTIONS
) -> str:
    """Detect plain-text tables and rewrite them as [TABLE] blocks.

    Existing [TABLE] blocks are left as they are. Text without any table
    region is returned unchanged.

    Args:
        content: Raw text content from a PDF.
        options: Detection sensitivity.

    Returns:
        Content with detected tables formatted as pipe-delimited rows.
    """
    lines = content.split("\n")
    regions = find_table_regions(lines, options, skip=table_block_mask(lines))
    if not regions:
        return content

    output: list[str] = []
    cursor = 0
    for region in regions:
        output.extend(lines[cursor : region.start_line])
        output.extend(["", *format_table_lines(lines[region.start_line : region.end_line + 1]), ""])
        cursor = region.end_line + 1
    output.extend(lines[cursor:])

    logger.debug(f"Formatted {len(regions)} table regions")
    return "\n".join(output)


def extract_scientific_pdf_tables(pdf_text: str) -> str:
    """Detect tables introduced by formal captions such as ``Table 1: ...``.

    The body of each section, from below a caption line to the next caption
    (or the end of the text), is run through the generic pass with default
    options. Caption lines are kept as they are and sections are reassembled
    by offset.

    Args:
        pdf_text: Text content extracted from a PDF.

    Returns:
        Text with captioned tables formatted.
    """
    starts = [match.start() for match in TABLE_CAPTION_PATTERN.finditer(pdf_text)]
    if not starts:
        return pdf_text

    logger.debug(f"Found {len(starts)} table captions")
    pieces = [pdf_text[: starts[0]]]
    for start, end in zip(starts, [*starts[1:], len(pdf_text)]):
        section = pdf_text[start:end]
        caption, newline, body = section.partition("\n")
        pieces.append(caption + newline + detect_tables_in_pdf_text(body, DEFAULT_OPTIONS))
    return "".join(pieces)


def _cell_text(paragraphs: tuple[Paragraph, ...]) -> str:
    return " ".join(text for text in (p.text.strip() for p in paragraphs) if text)


def format_pptx_table(table: TableFrame) -> str:
    """Render a slide table as a [TABLE] block, one row per table row."""
    lines = [TABLE_START]
    for row in table.rows:
        if row:
            lines.append("| " + " | ".join(_cell_text(cell) for cell in row) + " |")
    lines.append(TABLE_END)
    return "\n".join(lines)


def extract_tables_from_pptx_slide(slide: Slide) -> str:
    """Render every table of a slide, including grouped ones, in document order."""
    return "\n\n".join(format_pptx_table(table) for table in iter_tables(slide.shapes))
