"""
OCR Client Base Interface

Defines abstract interface for OCR clients.
"""

import io
from typing import Protocol

from PIL import Image, UnidentifiedImageError


class OcrClient(Protocol):
    """
    Abstract OCR client interface

    All OCR implementations should follow this protocol. A client is
    configured with exactly one recognition language at construction.

    Implementations:
    - PaddleOcrClient (PaddleOCR, local)
    - TesseractOcrClient (Tesseract via pytesseract, local)
    """

    def extract(self, image_bytes: bytes) -> str:
        """
        Extract text from image

        Args:
            image_bytes: Image data (PNG, JPEG, etc.)

        Returns:
            Extracted text (may be empty)

        Raises:
            OcrInvalidInputError: If the buffer is not a decodable image
            OcrError: If the OCR engine fails
        """
        ...


class OcrError(Exception):
    """Base exception for OCR-related errors"""
    pass


class OcrConnectionError(OcrError):
    """OCR engine missing or could not be initialized"""
    pass


class OcrInvalidInputError(OcrError):
    """Invalid input image"""
    pass


def load_rgb_image(image_bytes: bytes) -> Image.Image:
    """Decode an image buffer into an RGB PIL image"""
    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise OcrInvalidInputError(f"Invalid image data: {e}") from e

    if image.mode != 'RGB':
        image = image.convert('RGB')
    return image
