"""PPTX parsing module using the zip container and slide XML.

Reads presentation properties and every slide part in numeric order.
A slide that fails to parse is reported as a SlideFailure instead of
aborting the whole presentation.
"""

import io
import logging
import re
import zipfile
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict, Field

from lecture_ingest.parsing.slide_tree import Slide, parse_slide

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB
ZIP_MAGIC_BYTES = b"PK"
DEFAULT_TITLE = "Untitled Presentation"

SLIDE_PART_PATTERN = re.compile(r"^ppt/slides/slide(\d+)\.xml$")

CORE_PROPS_PART = "docProps/core.xml"
APP_PROPS_PART = "docProps/app.xml"

_CORE_NS = {
    "cp": "http://schemas.openxmlformats.org/package/2006/metadata/core-properties",
    "dc": "http://purl.org/dc/elements/1.1/",
}
_APP_NS = {
    "ep": "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties",
    "vt": "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes",
}


class PPTXParseError(Exception):
    """Raised when the PPTX container cannot be opened."""

    pass


class PresentationProperties(BaseModel):
    """Document properties used for title and identifier hints.

    Attributes:
        title: Core title, app TitlesOfParts fallback, or the default placeholder.
        subject: Core subject.
        company: Extended-properties company.
    """

    title: str = DEFAULT_TITLE
    subject: str = ""
    company: str = ""


class SlideFailure(BaseModel):
    """A slide whose XML could not be parsed.

    Attributes:
        number: 1-based slide position.
        reason: Parser error message.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)
    reason: str


class PPTXContent(BaseModel):
    """Parsed presentation: properties and slides in numeric order.

    Attributes:
        properties: Title, subject and company hints.
        slides: Parsed slide trees, or a SlideFailure per unreadable slide.
    """

    properties: PresentationProperties = Field(default_factory=PresentationProperties)
    slides: list[Slide | SlideFailure] = Field(default_factory=list)


def _validate_pptx_bytes(file_content: bytes, max_size: int) -> None:
    """Validate PPTX file content before parsing.

    Raises:
        PPTXParseError: If validation fails.
    """
    if not file_content:
        raise PPTXParseError("Empty file provided")

    if len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise PPTXParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.startswith(ZIP_MAGIC_BYTES):
        raise PPTXParseError("Invalid PPTX: file is not a zip container")


def slide_part_names(names: list[str]) -> list[str]:
    """Return slide part names sorted by the number in the file name.

    ``slide10.xml`` sorts after ``slide9.xml``.
    """
    numbered = []
    for name in names:
        match = SLIDE_PART_PATTERN.match(name)
        if match:
            numbered.append((int(match.group(1)), name))
    return [name for _, name in sorted(numbered)]


def _text_of(root: ET.Element, path: str, namespaces: dict[str, str]) -> str:
    element = root.find(path, namespaces)
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def read_properties(archive: zipfile.ZipFile) -> PresentationProperties:
    """Read title, subject and company from the document property parts.

    Unreadable property parts are logged and skipped.
    """
    properties = PresentationProperties()
    names = set(archive.namelist())

    if CORE_PROPS_PART in names:
        try:
            core = ET.fromstring(archive.read(CORE_PROPS_PART))
            properties.title = _text_of(core, "dc:title", _CORE_NS) or properties.title
            properties.subject = _text_of(core, "dc:subject", _CORE_NS)
        except Exception as e:
            logger.warning(f"Failed to parse core properties: {e}")

    if APP_PROPS_PART in names:
        try:
            app = ET.fromstring(archive.read(APP_PROPS_PART))
            properties.company = _text_of(app, "ep:Company", _APP_NS)
            if not properties.title or properties.title == DEFAULT_TITLE:
                part_title = _text_of(app, "ep:TitlesOfParts/vt:vector/vt:lpstr", _APP_NS)
                if part_title:
                    properties.title = part_title
        except Exception as e:
            logger.warning(f"Failed to parse app properties: {e}")

    return properties


def parse_pptx(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> PPTXContent:
    """Parse a PPTX file into properties and slide trees.

    Args:
        file_content: Raw bytes of the PPTX file.
        max_size: Largest accepted size in bytes.

    Returns:
        PPTXContent with slides numbered by their position (1-based).

    Raises:
        PPTXParseError: If the file is empty, too large, or not a readable zip.
    """
    _validate_pptx_bytes(file_content, max_size)

    try:
        archive = zipfile.ZipFile(io.BytesIO(file_content))
    except zipfile.BadZipFile as e:
        raise PPTXParseError(f"Corrupt or invalid PPTX: {e}") from e
    except Exception as e:
        raise PPTXParseError(f"Failed to read PPTX: {e}") from e

    with archive:
        slide_names = slide_part_names(archive.namelist())
        logger.info(f"Found {len(slide_names)} slides in presentation")

        content = PPTXContent(properties=read_properties(archive))
        for number, name in enumerate(slide_names, start=1):
            try:
                content.slides.append(parse_slide(archive.read(name), number))
            except Exception as e:
                logger.warning(f"Error parsing slide {number}: {e}")
                content.slides.append(SlideFailure(number=number, reason=str(e)))

    return content
