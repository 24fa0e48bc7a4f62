"""
Text Extractor - strategy dispatch plus the minimum-length gate.

    extractor = TextExtractor(optical=OpticalExtractor(ocr_factory=...))
    doc = extractor.extract(ExtractionStrategy.STRUCTURAL, pdf_bytes)

Both strategies produce an ExtractedDocument with trimmed text. Anything
shorter than min_text_length is rejected as unreadable.
"""

import logging
from typing import Optional

from config.constants import MIN_EXTRACTED_TEXT_LENGTH

from ..errors import ExtractionFailedError
from ..models import ExtractedDocument, ExtractionStrategy
from .optical import OpticalExtractor
from .structural import StructuralExtractor

logger = logging.getLogger(__name__)


class TextExtractor:
    """
    Dispatches to structural or optical extraction.

    Args:
        optical: OCR extractor; required for OPTICAL attachments and for
            the scanned-PDF fallback
        structural: PDF text-layer extractor
        min_text_length: Minimum trimmed length of a usable result
        ocr_fallback: Re-run PDFs with a missing text layer through OCR
    """

    def __init__(
        self,
        optical: Optional[OpticalExtractor] = None,
        structural: Optional[StructuralExtractor] = None,
        min_text_length: int = MIN_EXTRACTED_TEXT_LENGTH,
        ocr_fallback: bool = False,
    ):
        self.optical = optical
        self.structural = structural or StructuralExtractor()
        self.min_text_length = min_text_length
        self.ocr_fallback = ocr_fallback

    def extract(self, strategy: ExtractionStrategy, data: bytes) -> ExtractedDocument:
        if strategy == ExtractionStrategy.STRUCTURAL:
            document = self._extract_structural(data)
        elif strategy == ExtractionStrategy.OPTICAL:
            document = ExtractedDocument(
                text=self._require_optical().extract_image(data),
                source_kind=ExtractionStrategy.OPTICAL,
                page_count=1,
            )
        else:
            raise ValueError(f"Unknown extraction strategy: {strategy}")

        self._check_length(document)
        return document

    def _extract_structural(self, data: bytes) -> ExtractedDocument:
        result = self.structural.extract(data)
        document = ExtractedDocument(
            text=result.text,
            source_kind=ExtractionStrategy.STRUCTURAL,
            page_count=result.total_pages,
        )

        if len(document.text) >= self.min_text_length or not self.ocr_fallback:
            return document

        logger.info(
            f"PDF text layer too small ({len(document.text)} chars), "
            f"running OCR on {result.total_pages} rendered pages"
        )
        text, page_count = self._require_optical().extract_pdf(data)
        return ExtractedDocument(
            text=text,
            source_kind=ExtractionStrategy.OPTICAL,
            page_count=page_count,
        )

    def _require_optical(self) -> OpticalExtractor:
        if self.optical is None:
            raise ExtractionFailedError("ocr_unavailable", "no OCR engine configured")
        return self.optical

    def _check_length(self, document: ExtractedDocument) -> None:
        length = len(document.text.strip())
        if length < self.min_text_length:
            logger.warning(
                f"{document.source_kind.value} extraction yielded {length} chars "
                f"(< {self.min_text_length}), treating as unreadable"
            )
            raise ExtractionFailedError(
                "below_minimum_length",
                f"{length} < {self.min_text_length} chars",
            )
