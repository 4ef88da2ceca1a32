"""PDF parsing module using pypdf.

Reads page texts and the document information dictionary. Pages whose
text cannot be extracted are skipped with a warning; an unreadable
container raises PDFParseError.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"


class DocumentInfo(BaseModel):
    """Information dictionary entries used as title and identifier hints.

    Attributes:
        title: /Title entry, stripped.
        subject: /Subject entry, stripped.
    """

    title: str = ""
    subject: str = ""


class PDFContent(BaseModel):
    """Parsed PDF document.

    Attributes:
        page_texts: Text of every page that produced any, in page order.
        pages: Total number of pages, including pages without text.
        info: Title and subject from the information dictionary.
    """

    page_texts: list[str] = Field(default_factory=list)
    pages: int = Field(ge=0)
    info: DocumentInfo = Field(default_factory=DocumentInfo)

    @property
    def text(self) -> str:
        return PAGE_SEPARATOR.join(self.page_texts)

    @property
    def title(self) -> str:
        """Title from /Title, else the first non-blank line of text."""
        if self.info.title:
            return self.info.title
        for page_text in self.page_texts:
            for line in page_text.split("\n"):
                if line.strip():
                    return line.strip()
        return ""


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def check_pdf_bytes(file_content: bytes, max_size: int) -> None:
    """Reject empty, oversized and non-PDF buffers before parsing.

    Raises:
        PDFParseError: With the reason the buffer was rejected.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > max_size:
        raise PDFParseError(
            f"File size ({len(file_content) / 2**20:.1f}MB) "
            f"exceeds maximum allowed ({max_size / 2**20:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def read_document_info(reader: PdfReader) -> DocumentInfo:
    """Read /Title and /Subject; an unreadable dictionary gives empty hints."""
    try:
        info = reader.metadata
        if info is None:
            return DocumentInfo()
        return DocumentInfo(
            title=(info.title or "").strip(),
            subject=(info.subject or "").strip(),
        )
    except Exception as e:
        logger.warning(f"Failed to read document information: {e}")
        return DocumentInfo()


def _read_page_texts(reader: PdfReader) -> list[str]:
    page_texts = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            page_text = page.extract_text()
        except Exception as e:
            logger.warning(f"Failed to extract text from page {number}: {e}")
            continue
        if page_text.strip():
            page_texts.append(page_text)
    return page_texts


def parse_pdf(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> PDFContent:
    """Parse a PDF file into page texts and document information.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted size in bytes.

    Returns:
        PDFContent; its ``text`` joins the page texts with a blank line.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    check_pdf_bytes(file_content, max_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        page_count = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if page_count == 0:
        raise PDFParseError("PDF contains no pages")

    content = PDFContent(
        page_texts=_read_page_texts(reader),
        pages=page_count,
        info=read_document_info(reader),
    )
    if not content.text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    logger.info(f"Parsed {page_count} pages, {len(content.page_texts)} with text")
    return content
