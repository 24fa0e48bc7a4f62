#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PaddleOCR Client - Local OCR Implementation
Implements OcrClient protocol using PaddleOCR for free, offline OCR.
"""

import logging

import numpy as np

from .base import OcrError, OcrConnectionError, load_rgb_image

logger = logging.getLogger(__name__)


def _is_garbage_text(text: str, special_char_threshold: float = 0.5) -> bool:
    """
    Check if text is likely garbage from OCR reading illustrations.

    Examples:
        >>> _is_garbage_text("#$%&#'!('!)")
        True
        >>> _is_garbage_text("Question 1")
        False
        >>> _is_garbage_text("2+2=?")
        False
    """
    if not text or not text.strip():
        return True

    # Count alphanumeric vs special characters
    alphanumeric = sum(1 for c in text if c.isalnum() or c.isspace())
    total = len(text)

    alphanumeric_ratio = alphanumeric / total if total > 0 else 0

    return alphanumeric_ratio < (1 - special_char_threshold)


class PaddleOcrClient:
    """
    PaddleOCR-based OCR client for local, offline text recognition.

    Installation:
        pip install paddleocr paddlepaddle opencv-python-headless
        (or: pip install -e .[ocr])

    Usage:
        client = PaddleOcrClient(lang='en')
        text = client.extract(image_bytes)
    """

    def __init__(self, lang: str = 'en', confidence_threshold: float = 0.5):
        """
        Initialize PaddleOCR client.

        Args:
            lang: Language code ('en', 'ch', 'japan', 'korean', etc.)
            confidence_threshold: Recognized lines below this score are dropped

        Raises:
            OcrConnectionError: If PaddleOCR is not installed or fails to start
        """
        self.lang = lang
        self.confidence_threshold = confidence_threshold

        try:
            from paddleocr import PaddleOCR
        except ImportError as e:
            raise OcrConnectionError(
                "PaddleOCR is not installed. Install it with:\n"
                "  pip install -e .[ocr]"
            ) from e

        try:
            # First run downloads models (~100-200MB)
            logger.info(f"Initializing PaddleOCR with lang='{lang}'")
            self.ocr = PaddleOCR(lang=lang)
        except Exception as e:
            raise OcrConnectionError(f"Failed to initialize PaddleOCR: {e}") from e

    def extract(self, image_bytes: bytes) -> str:
        """
        Extract text from image.

        Lines are returned top to bottom; a blank line marks a vertical gap
        larger than 1.5x the running line height (paragraph break).
        """
        image = load_rgb_image(image_bytes)

        try:
            result = self.ocr.predict(np.array(image))
        except Exception as e:
            raise OcrError(f"OCR extraction failed: {e}") from e

        if not result:
            return ""

        ocr_result = result[0]
        rec_texts = ocr_result.get('rec_texts', [])
        rec_scores = ocr_result.get('rec_scores', [])
        rec_polys = ocr_result.get('rec_polys', [])

        text_lines = []
        prev_y_center = None
        avg_line_height = None

        for i, text in enumerate(rec_texts):
            conf = rec_scores[i] if i < len(rec_scores) else 1.0

            if conf < self.confidence_threshold:
                logger.debug(f"Skipping low-confidence OCR: {text[:30]}... (conf={conf:.2f})")
                continue

            if _is_garbage_text(text):
                logger.debug(f"Skipping garbage text: {text[:30]}...")
                continue

            if i < len(rec_polys):
                y_coords = [p[1] for p in rec_polys[i]]
                y_center = sum(y_coords) / len(y_coords)
                line_height = max(y_coords) - min(y_coords)

                if avg_line_height is None:
                    avg_line_height = line_height
                else:
                    avg_line_height = (avg_line_height + line_height) / 2

                if prev_y_center is not None and y_center - prev_y_center > avg_line_height * 1.5:
                    text_lines.append("")

                prev_y_center = y_center

            text_lines.append(text)

        return "\n".join(text_lines)
