"""Unit tests for slide shape trees."""

from xml.etree import ElementTree as ET

import pytest
import pytest_check as check

from lecture_ingest.parsing.slide_tree import (
    GroupShape,
    Paragraph,
    TableFrame,
    TextShape,
    extract_slide_text,
    iter_tables,
    parse_slide,
)
from tests.builders import (
    A_NS,
    P_NS,
    group_shape,
    paragraph,
    picture_shape,
    slide_xml,
    table_frame,
    text_shape,
)


class TestParseSlide:
    """Tests for reading slide XML into a tree."""

    def test_reads_text_shapes(self) -> None:
        """Text shapes become TextShape nodes with paragraphs."""
        slide = parse_slide(slide_xml(text_shape("Title", "Body")), number=1)

        check.equal(slide.number, 1)
        check.equal(len(slide.shapes), 1)
        check.is_instance(slide.shapes[0], TextShape)
        check.equal([p.text for p in slide.shapes[0].paragraphs], ["Title", "Body"])

    def test_reads_nested_groups(self) -> None:
        """Groups nest to any depth."""
        xml = slide_xml(group_shape(text_shape("Outer"), group_shape(text_shape("Inner"))))
        slide = parse_slide(xml, number=3)

        outer = slide.shapes[0]
        check.is_instance(outer, GroupShape)
        check.is_instance(outer.shapes[1], GroupShape)

    def test_reads_tables(self) -> None:
        """Graphic frames holding a table become TableFrame nodes."""
        slide = parse_slide(slide_xml(table_frame([["A", "B"], ["1", "2"]])), number=1)

        table = slide.shapes[0]
        check.is_instance(table, TableFrame)
        check.equal(len(table.rows), 2)
        check.equal(table.rows[1][0][0].text, "1")

    def test_ignores_pictures(self) -> None:
        """Unsupported shapes are skipped."""
        slide = parse_slide(slide_xml(picture_shape(), text_shape("Caption")), number=1)

        check.equal(len(slide.shapes), 1)

    def test_slide_without_shape_tree(self) -> None:
        """A slide with no spTree has no shapes."""
        slide = parse_slide(f'<p:sld xmlns:p="{P_NS}" xmlns:a="{A_NS}"/>', number=2)

        check.equal(slide.shapes, ())

    def test_malformed_xml_raises(self) -> None:
        """Malformed XML raises a parse error."""
        with pytest.raises(ET.ParseError):
            parse_slide("<p:sld><unclosed>", number=1)


class TestExtractSlideText:
    """Tests for flattening slide text."""

    def test_paragraph_joins_runs(self) -> None:
        """Runs of a paragraph are concatenated."""
        check.equal(Paragraph(runs=("Hel", "lo")).text, "Hello")

    def test_flattens_groups_in_order(self) -> None:
        """Grouped text appears in document order."""
        xml = slide_xml(
            text_shape("First"),
            group_shape(text_shape("Second"), group_shape(text_shape("Third"))),
        )

        check.equal(extract_slide_text(parse_slide(xml, 1)), "First\nSecond\nThird")

    def test_skips_empty_paragraphs(self) -> None:
        """Paragraphs without runs produce no line."""
        paragraphs = paragraph("Kept") + paragraph() + paragraph("Also")
        body = f"<p:sp><p:txBody>{paragraphs}</p:txBody></p:sp>"

        check.equal(extract_slide_text(parse_slide(slide_xml(body), 1)), "Kept\nAlso")

    def test_table_text_not_in_slide_text(self) -> None:
        """Tables are rendered separately, not as slide text."""
        xml = slide_xml(text_shape("Heading"), table_frame([["cell"]]))

        check.equal(extract_slide_text(parse_slide(xml, 1)), "Heading")

    def test_empty_slide_has_no_text(self) -> None:
        """A slide without text flattens to an empty string."""
        check.equal(extract_slide_text(parse_slide(slide_xml(), 1)), "")


class TestIterTables:
    """Tests for finding tables in the shape tree."""

    def test_finds_grouped_tables_in_order(self) -> None:
        """Tables inside groups are yielded in document order."""
        xml = slide_xml(
            table_frame([["first"]]),
            group_shape(text_shape("x"), table_frame([["second"]])),
        )
        tables = list(iter_tables(parse_slide(xml, 1).shapes))

        check.equal(len(tables), 2)
        check.equal(tables[1].rows[0][0][0].text, "second")

    def test_no_tables(self) -> None:
        """Slides without tables yield nothing."""
        check.equal(list(iter_tables(parse_slide(slide_xml(text_shape("x")), 1).shapes)), [])
