"""Unit tests for table detection and formatting."""

import pytest_check as check

from lecture_ingest.extractors.tables import (
    detect_column_cuts,
    detect_tables_in_pdf_text,
    extract_scientific_pdf_tables,
    extract_tables_from_pptx_slide,
    find_table_regions,
    format_space_aligned_table,
    is_rule_line,
    is_table_like,
)
from lecture_ingest.models.schemas import TableDetectionOptions, TableRegion
from lecture_ingest.parsing.slide_tree import parse_slide
from tests.builders import group_shape, slide_xml, table_frame, text_shape

ALIGNED_ROWS = "Name     Score\nAlice    90"


class TestLineHeuristics:
    """Tests for line classification."""

    def test_spaced_columns_are_table_like(self) -> None:
        """Two or more space-separated columns look tabular."""
        check.is_true(is_table_like("Name     Score"))

    def test_delimiters_are_table_like(self) -> None:
        """Pipes and plus signs mark table lines."""
        check.is_true(is_table_like("a|b"))
        check.is_true(is_table_like("a+b"))

    def test_numbers_are_table_like(self) -> None:
        """Enough numeric tokens look tabular."""
        check.is_true(is_table_like("12 4.5"))

    def test_short_prose_is_not_table_like(self) -> None:
        """A single word or two words are not tabular."""
        check.is_false(is_table_like("Introduction"))
        check.is_false(is_table_like("Closing remarks"))

    def test_rule_lines(self) -> None:
        """Rule lines need enough rule characters and nothing else."""
        check.is_true(is_rule_line("-----"))
        check.is_true(is_rule_line("+===+===+"))
        check.is_false(is_rule_line("--"))
        check.is_false(is_rule_line("a---"))

    def test_rule_threshold_is_configurable(self) -> None:
        """line_threshold sets how many rule characters are needed."""
        strict = TableDetectionOptions(line_threshold=6)

        check.is_false(is_rule_line("-----", strict))


class TestFindTableRegions:
    """Tests for region detection."""

    def test_region_spans_table_lines(self) -> None:
        """Consecutive table-like lines form one region."""
        lines = ["Results", "Name     Score", "Alice    90", "Summary"]

        check.equal(find_table_regions(lines), [TableRegion(start_line=1, end_line=2)])

    def test_too_few_rows(self) -> None:
        """Runs shorter than min_rows are rejected."""
        lines = ["Results", "Name     Score", "Summary"]

        check.equal(find_table_regions(lines), [])

    def test_short_lines_count_inside_region(self) -> None:
        """A short line between table lines counts as a row."""
        lines = ["Name     Score", "Bob", "Alice    90", "Summary"]
        options = TableDetectionOptions(min_rows=3)

        check.equal(find_table_regions(lines, options), [TableRegion(start_line=0, end_line=2)])

    def test_trailing_short_lines_excluded(self) -> None:
        """Short lines after the last table line are not part of it."""
        lines = ["Name     Score", "Alice    90", "End", "Summary"]

        check.equal(find_table_regions(lines), [TableRegion(start_line=0, end_line=1)])

    def test_skipped_lines_break_regions(self) -> None:
        """Skipped lines are never part of a region."""
        lines = ["Name     Score", "Alice    90"]

        check.equal(find_table_regions(lines, skip=[True, True]), [])


class TestColumnCuts:
    """Tests for majority-vote column boundaries."""

    def test_cut_after_common_gap(self) -> None:
        """The column starts where the shared gap ends."""
        check.equal(detect_column_cuts(ALIGNED_ROWS.split("\n")), [9])

    def test_no_gap_splits_in_half(self) -> None:
        """Without a shared gap, lines are cut in half."""
        check.equal(detect_column_cuts(["abcdef", "ghijkl"]), [3])

    def test_drops_empty_trailing_cells(self) -> None:
        """Short rows do not end with empty cells."""
        rows = format_space_aligned_table(["Name     Score", "Alice    90", "Bob"])

        check.equal(rows, ["| Name | Score |", "| Alice | 90 |", "| Bob |"])


class TestDetectTablesInPdfText:
    """Tests for the generic table pass."""

    def test_text_without_tables_unchanged(self) -> None:
        """Input without table-like lines is returned unchanged."""
        text = "Introduction\nClosing remarks\n\nConclusion"

        check.equal(detect_tables_in_pdf_text(text), text)

    def test_min_rows_lines_make_one_table(self) -> None:
        """Exactly min_rows aligned lines give one table, one row per line."""
        text = f"Results\n{ALIGNED_ROWS}\nSummary"
        result = detect_tables_in_pdf_text(text)

        check.equal(
            result,
            "Results\n\n[TABLE]\n| Name | Score |\n| Alice | 90 |\n[/TABLE]\n\nSummary",
        )
        check.equal(result.count("[TABLE]"), 1)

    def test_fewer_than_min_rows_untouched(self) -> None:
        """min_rows - 1 aligned lines never produce a table."""
        text = f"Results\n{ALIGNED_ROWS}\nSummary"
        options = TableDetectionOptions(min_rows=3)

        check.equal(detect_tables_in_pdf_text(text, options), text)

    def test_delimiter_table(self) -> None:
        """Pipe tables drop separator lines and keep their rows."""
        text = "Grades\n| a | b |\n|---|---|\n| 1 | 2 |\nClosing"
        result = detect_tables_in_pdf_text(text)

        check.is_in("[TABLE]\n| a | b |\n| 1 | 2 |\n[/TABLE]", result)
        check.is_not_in("---", result)

    def test_delimiter_rows_get_outer_pipes(self) -> None:
        """Rows missing leading or trailing pipes are completed."""
        result = detect_tables_in_pdf_text("Heading\nname | value\nx | 1\nClosing")

        check.is_in("| name | value |\n| x | 1 |", result)

    def test_existing_tables_untouched(self) -> None:
        """Content already inside [TABLE] blocks is not reformatted."""
        text = "[TABLE]\n| a | b |\n| c | d |\n[/TABLE]"

        check.equal(detect_tables_in_pdf_text(text), text)


class TestScientificTables:
    """Tests for the caption-anchored table pass."""

    def test_captioned_table(self) -> None:
        """The body under a caption is formatted, the caption is kept."""
        text = f"Intro text here.\nTable 1: Exam results\n{ALIGNED_ROWS}\n"
        result = extract_scientific_pdf_tables(text)

        check.is_true(result.startswith("Intro text here.\nTable 1: Exam results\n"))
        check.is_in("[TABLE]\n| Name | Score |\n| Alice | 90 |\n[/TABLE]", result)

    def test_tab_abbreviation(self) -> None:
        """Abbreviated Tab. N. captions are recognized."""
        result = extract_scientific_pdf_tables(f"Tab. 2. Scores\n{ALIGNED_ROWS}")

        check.is_in("[TABLE]", result)

    def test_inline_mention_is_not_a_caption(self) -> None:
        """A mid-sentence reference does not start a table section."""
        text = "As shown in Table 2: results improve.\nMore prose"

        check.equal(extract_scientific_pdf_tables(text), text)

    def test_no_caption_unchanged(self) -> None:
        """Text without captions is returned unchanged."""
        check.equal(extract_scientific_pdf_tables(ALIGNED_ROWS), ALIGNED_ROWS)


class TestPptxTables:
    """Tests for slide table rendering."""

    def test_renders_rows(self) -> None:
        """Each table row becomes a pipe row."""
        rows = [["Term", "Meaning"], ["CPU", "Processor"]]
        slide = parse_slide(slide_xml(table_frame(rows)), 1)

        check.equal(
            extract_tables_from_pptx_slide(slide),
            "[TABLE]\n| Term | Meaning |\n| CPU | Processor |\n[/TABLE]",
        )

    def test_grouped_tables_included(self) -> None:
        """Tables inside groups are rendered after earlier ones."""
        xml = slide_xml(table_frame([["A"]]), group_shape(table_frame([["B"]])))
        result = extract_tables_from_pptx_slide(parse_slide(xml, 1))

        check.equal(result, "[TABLE]\n| A |\n[/TABLE]\n\n[TABLE]\n| B |\n[/TABLE]")

    def test_table_without_rows(self) -> None:
        """A table with no rows renders only the marker pair."""
        slide = parse_slide(slide_xml(table_frame([])), 1)

        check.equal(extract_tables_from_pptx_slide(slide), "[TABLE]\n[/TABLE]")

    def test_slide_without_tables(self) -> None:
        """Slides without tables render nothing."""
        slide = parse_slide(slide_xml(text_shape("x")), 1)

        check.equal(extract_tables_from_pptx_slide(slide), "")
