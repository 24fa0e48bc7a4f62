"""
OCR (Optical Character Recognition) Module

Provides text recognition for image attachments and for scanned PDF pages:
- Abstract OCR client interface
- PaddleOCR client (local, default)
- Tesseract client (local, via pytesseract)

Example usage:

    from docsolver.ocr import create_ocr_client

    client = create_ocr_client("tesseract", tesseract_lang="eng")
    text = client.extract(image_bytes)
"""

from .base import (
    OcrClient,
    OcrError,
    OcrConnectionError,
    OcrInvalidInputError,
)
from .tesseract_client import TesseractOcrClient


def create_ocr_client(
    backend: str = "paddle",
    paddle_lang: str = "en",
    tesseract_lang: str = "eng",
) -> OcrClient:
    """
    Build the configured OCR client.

    PaddleOCR is imported only when selected; it ships in the [ocr] extra.
    """
    if backend == "paddle":
        from .paddle_client import PaddleOcrClient
        return PaddleOcrClient(lang=paddle_lang)
    if backend == "tesseract":
        return TesseractOcrClient(lang=tesseract_lang)
    raise ValueError(f"Unknown OCR backend: {backend}")


__all__ = [
    'OcrClient',
    'OcrError',
    'OcrConnectionError',
    'OcrInvalidInputError',
    'TesseractOcrClient',
    'create_ocr_client',
]
