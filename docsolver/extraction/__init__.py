"""
Extraction Module - text out of attachments

- StructuralExtractor: PDF text layer via PyMuPDF
- OpticalExtractor: OCR over images and rendered PDF pages
- TextExtractor: strategy dispatch + minimum-length gate
"""

from .structural import StructuralExtractor, StructuralResult, PageText, open_pdf
from .optical import OpticalExtractor
from .extractor import TextExtractor

__all__ = [
    "StructuralExtractor",
    "StructuralResult",
    "PageText",
    "open_pdf",
    "OpticalExtractor",
    "TextExtractor",
]
