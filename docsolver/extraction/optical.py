"""
Optical Extractor

Runs OCR over a single image buffer, or over every page of a PDF rendered
to images (used for scanned PDFs without a text layer).

Runs may call one extractor from several worker threads. The OCR client is
built once and its extract() calls are serialized; PaddleOCR engines are
not safe for concurrent use.
"""

import threading
from typing import Callable, Optional, Tuple

import fitz  # PyMuPDF

from config.constants import OCR_DPI, PAGE_SEPARATOR
from config.logging_config import get_logger

from ..errors import ExtractionFailedError
from ..ocr import OcrClient, OcrError
from .structural import open_pdf

logger = get_logger(__name__)


class OpticalExtractor:
    """
    OCR-backed extraction.

    The OCR client is built on first use so deployments that only receive
    PDFs never load the OCR models.

    Example:
        extractor = OpticalExtractor(ocr_factory=lambda: TesseractOcrClient())
        text = extractor.extract_image(png_bytes)
    """

    def __init__(
        self,
        ocr_client: Optional[OcrClient] = None,
        ocr_factory: Optional[Callable[[], OcrClient]] = None,
        dpi: int = OCR_DPI,
        image_format: str = "png",
    ):
        if ocr_client is None and ocr_factory is None:
            raise ValueError("OpticalExtractor needs an ocr_client or an ocr_factory")
        self._ocr_client = ocr_client
        self._ocr_factory = ocr_factory
        self.dpi = dpi
        self.image_format = image_format
        self._build_lock = threading.Lock()
        self._extract_lock = threading.Lock()

    @property
    def ocr_client(self) -> OcrClient:
        if self._ocr_client is not None:
            return self._ocr_client
        with self._build_lock:
            if self._ocr_client is None:
                try:
                    self._ocr_client = self._ocr_factory()
                except OcrError as e:
                    raise ExtractionFailedError("ocr_unavailable", str(e)) from e
                logger.info(f"OCR engine ready: {type(self._ocr_client).__name__}")
        return self._ocr_client

    def extract_image(self, image_bytes: bytes) -> str:
        """OCR one image buffer; returns trimmed text"""
        client = self.ocr_client
        try:
            with self._extract_lock:
                text = client.extract(image_bytes)
        except OcrError as e:
            logger.warning(f"OCR failed on image buffer: {e}")
            raise ExtractionFailedError("ocr_unavailable", str(e)) from e
        return (text or "").strip()

    def extract_pdf(self, data: bytes) -> Tuple[str, int]:
        """
        Render each PDF page and OCR it.

        Returns:
            (text joined with PAGE_SEPARATOR, total page count)
        """
        doc = open_pdf(data)
        try:
            total_pages = doc.page_count
            logger.info(f"Processing {total_pages} pages with OCR (DPI: {self.dpi})...")

            page_texts = []
            for page in doc:
                page_texts.append(self.extract_image(self._page_to_image(page)))
        finally:
            doc.close()

        return PAGE_SEPARATOR.join(t for t in page_texts if t).strip(), total_pages

    def _page_to_image(self, page: fitz.Page) -> bytes:
        mat = fitz.Matrix(self.dpi / 72, self.dpi / 72)
        pix = page.get_pixmap(matrix=mat)
        return pix.tobytes(self.image_format)
