"""Table detection and formatting on cleaned text."""

import re

from lecture_ingest.postprocessing.common import TABLE_END, TABLE_START, table_block_mask

TABLE_ROW_PATTERN = re.compile(r"\|.*\|.*\|")
STRAY_PIPE_PATTERN = re.compile(r"\s*\|\s*")
SPACING_PATTERN = re.compile(r"\S+\s{2,}\S+")

MIN_SIMPLE_TABLE_LINES = 3


def clean_pipe_artifacts(content: str) -> str:
    """Replace stray pipe characters outside real table rows with a space.

    Lines inside [TABLE] blocks and lines with at least three pipes are kept.
    """
    lines = content.split("\n")
    in_table = table_block_mask(lines)
    return "\n".join(
        line if keep or TABLE_ROW_PATTERN.search(line) else STRAY_PIPE_PATTERN.sub(" ", line)
        for line, keep in zip(lines, in_table)
    )


def detect_column_positions(lines: list[str]) -> list[int]:
    """Return offsets where columns start, based on runs of 2+ spaces.

    Offset 0 is always first; every offset following a 2+ space run in any
    line is a column start.
    """
    positions = {0}
    for line in lines:
        if not line.strip():
            continue
        for match in re.finditer(r" {2,}(?=\S)", line):
            positions.add(match.end())
    return sorted(positions)


def format_as_table(lines: list[str]) -> list[str]:
    """Render space-aligned lines as ``| cell | cell |`` rows."""
    positions = detect_column_positions(lines)
    rows = []

    for line in lines:
        if not line.strip():
            continue

        cells = []
        last = 0
        for pos in positions[1:]:
            if pos > len(line):
                break
            cells.append(line[last:pos].strip())
            last = pos
        cells.append(line[last:].strip())

        non_empty = [cell for cell in cells if cell]
        if non_empty:
            rows.append("| " + " | ".join(non_empty) + " |")

    return rows


def detect_simple_tables(content: str, min_lines: int = MIN_SIMPLE_TABLE_LINES) -> str:
    """Wrap runs of space-aligned lines in [TABLE] blocks.

    A run is at least ``min_lines`` consecutive lines that each contain a
    gap of two or more spaces. Existing table blocks are left untouched.
    """
    lines = content.split("\n")
    in_existing_table = table_block_mask(lines)
    result: list[str] = []
    run: list[str] = []

    def flush() -> None:
        if len(run) >= min_lines:
            result.append(TABLE_START)
            result.extend(format_as_table(run))
            result.append(TABLE_END)
        else:
            result.extend(line.strip() for line in run)
        run.clear()

    for line, existing in zip(lines, in_existing_table):
        if existing:
            flush()
            result.append(line)
            continue

        stripped = line.strip()
        if stripped and SPACING_PATTERN.search(stripped):
            run.append(line)
            continue

        flush()
        result.append(stripped)

    flush()
    return "\n".join(result)
