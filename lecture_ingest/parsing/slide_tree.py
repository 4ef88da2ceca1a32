"""Typed shape tree for PowerPoint slide XML.

A slide's ``p:spTree`` is read into a small tree of immutable nodes:

    Slide -> TextShape | GroupShape | TableFrame
    TextShape -> Paragraph -> run texts
    GroupShape -> nested shapes (any depth)
    TableFrame -> rows -> cells -> Paragraph

Text is flattened with ``SlideTextVisitor``; tables are found with
``iter_tables``. Pictures, connectors and other shapes are ignored.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

NAMESPACES = {
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
}

_P = "{%s}" % NAMESPACES["p"]


@dataclass(frozen=True)
class Paragraph:
    runs: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.runs)


@dataclass(frozen=True)
class TextShape:
    paragraphs: tuple[Paragraph, ...] = ()


@dataclass(frozen=True)
class TableFrame:
    rows: tuple[tuple[tuple[Paragraph, ...], ...], ...] = ()


@dataclass(frozen=True)
class GroupShape:
    shapes: tuple["ShapeNode", ...] = ()


ShapeNode = TextShape | GroupShape | TableFrame


@dataclass(frozen=True)
class Slide:
    number: int
    shapes: tuple[ShapeNode, ...] = field(default_factory=tuple)


def _read_paragraphs(parent: ET.Element | None) -> tuple[Paragraph, ...]:
    if parent is None:
        return ()
    paragraphs = []
    for para in parent.findall("a:p", NAMESPACES):
        runs = tuple(
            t.text or ""
            for run in para.findall("a:r", NAMESPACES)
            for t in run.findall("a:t", NAMESPACES)
        )
        paragraphs.append(Paragraph(runs=runs))
    return tuple(paragraphs)


def _read_table(frame: ET.Element) -> TableFrame | None:
    table = frame.find("a:graphic/a:graphicData/a:tbl", NAMESPACES)
    if table is None:
        return None
    rows = []
    for row in table.findall("a:tr", NAMESPACES):
        cells = tuple(
            _read_paragraphs(cell.find("a:txBody", NAMESPACES))
            for cell in row.findall("a:tc", NAMESPACES)
        )
        rows.append(cells)
    return TableFrame(rows=tuple(rows))


def _read_shapes(container: ET.Element) -> tuple[ShapeNode, ...]:
    """Read supported child shapes of a shape tree or group, in document order."""
    shapes: list[ShapeNode] = []
    for child in container:
        if child.tag == _P + "sp":
            body = child.find("p:txBody", NAMESPACES)
            shapes.append(TextShape(paragraphs=_read_paragraphs(body)))
        elif child.tag == _P + "grpSp":
            shapes.append(GroupShape(shapes=_read_shapes(child)))
        elif child.tag == _P + "graphicFrame":
            table = _read_table(child)
            if table is not None:
                shapes.append(table)
    return tuple(shapes)


def parse_slide(xml: bytes | str, number: int) -> Slide:
    """Parse slide XML into a Slide tree.

    Args:
        xml: Raw slide XML.
        number: 1-based slide position in the presentation.

    Returns:
        The parsed Slide. A slide without a shape tree has no shapes.

    Raises:
        xml.etree.ElementTree.ParseError: If the XML is malformed.
    """
    root = ET.fromstring(xml)
    sp_tree = root.find("p:cSld/p:spTree", NAMESPACES)
    if sp_tree is None:
        return Slide(number=number)
    return Slide(number=number, shapes=_read_shapes(sp_tree))


class SlideTextVisitor:
    """Collects the text of every paragraph with runs, one line per paragraph.

    Tables are skipped here; they are rendered separately.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def visit(self, node: ShapeNode) -> None:
        match node:
            case TextShape(paragraphs=paragraphs):
                for paragraph in paragraphs:
                    if paragraph.runs:
                        self._lines.append(paragraph.text)
            case GroupShape(shapes=shapes):
                for child in shapes:
                    self.visit(child)
            case TableFrame():
                pass

    @property
    def text(self) -> str:
        return "\n".join(self._lines).strip()


def extract_slide_text(slide: Slide) -> str:
    """Flatten all text shapes of a slide, including grouped shapes."""
    visitor = SlideTextVisitor()
    for shape in slide.shapes:
        visitor.visit(shape)
    return visitor.text


def iter_tables(shapes: tuple[ShapeNode, ...]) -> Iterator[TableFrame]:
    """Yield table frames in document order, descending into groups."""
    for shape in shapes:
        match shape:
            case TableFrame():
                yield shape
            case GroupShape(shapes=children):
                yield from iter_tables(children)
            case TextShape():
                continue
