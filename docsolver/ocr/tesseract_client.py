"""
Tesseract Client - Local OCR via pytesseract
Implements OcrClient protocol on top of the tesseract binary.
"""

import logging

import pytesseract

from .base import OcrError, OcrConnectionError, load_rgb_image

logger = logging.getLogger(__name__)


class TesseractOcrClient:
    """
    Tesseract-based OCR client.

    Requires the `tesseract` binary on PATH (apt install tesseract-ocr).

    Usage:
        client = TesseractOcrClient(lang='eng')
        text = client.extract(image_bytes)
    """

    def __init__(self, lang: str = 'eng', config: str = ''):
        self.lang = lang
        self.config = config

    def extract(self, image_bytes: bytes) -> str:
        image = load_rgb_image(image_bytes)

        try:
            text = pytesseract.image_to_string(image, lang=self.lang, config=self.config)
        except pytesseract.TesseractNotFoundError as e:
            raise OcrConnectionError("tesseract is not installed or not on PATH") from e
        except (pytesseract.TesseractError, RuntimeError) as e:
            raise OcrError(f"Tesseract failed: {e}") from e

        logger.debug(f"Tesseract recognized {len(text)} chars (lang={self.lang})")
        return text or ""
