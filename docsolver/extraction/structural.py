"""
Structural Extractor - PyMuPDF-based PDF text extraction

Reads the embedded text layer of a PDF page by page. Each page's words are
taken in layout order and joined with single spaces; non-empty pages are
joined with PAGE_SEPARATOR.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import fitz  # PyMuPDF

from config.constants import PAGE_SEPARATOR

from ..errors import ExtractionFailedError

logger = logging.getLogger(__name__)


@dataclass
class PageText:
    """Text pulled from a single page"""
    page_number: int  # 1-indexed
    text: str


@dataclass
class StructuralResult:
    """All pages of one PDF"""
    total_pages: int
    pages: List[PageText] = field(default_factory=list)

    @property
    def text(self) -> str:
        return PAGE_SEPARATOR.join(page.text for page in self.pages if page.text).strip()


def open_pdf(data: bytes) -> fitz.Document:
    """
    Open PDF bytes, translating PyMuPDF failures into ExtractionFailedError.

    The caller owns the returned document and must close it.
    """
    if not data:
        raise ExtractionFailedError("malformed_document", "empty payload")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ExtractionFailedError("malformed_document", str(e)) from e

    if doc.needs_pass:
        doc.close()
        raise ExtractionFailedError("encrypted_document")

    if doc.page_count == 0:
        doc.close()
        raise ExtractionFailedError("empty_document")

    return doc


class StructuralExtractor:
    """
    Fast PDF text extraction using PyMuPDF.

    Usage:
        extractor = StructuralExtractor()
        result = extractor.extract(pdf_bytes)
        print(result.text)
    """

    def extract(self, data: bytes) -> StructuralResult:
        doc = open_pdf(data)
        try:
            result = StructuralResult(total_pages=doc.page_count)
            for index, page in enumerate(doc, start=1):
                result.pages.append(PageText(page_number=index, text=self._page_text(page)))
        except Exception as e:
            raise ExtractionFailedError("malformed_document", str(e)) from e
        finally:
            doc.close()

        logger.info(
            f"Structural extraction: {result.total_pages} pages, {len(result.text)} chars"
        )
        return result

    def _page_text(self, page: fitz.Page) -> str:
        # (x0, y0, x1, y1, word, block_no, line_no, word_no), sorted top-left to bottom-right
        words = page.get_text("words", sort=True)
        return " ".join(word[4] for word in words).strip()
