"""
Unit tests for docsolver/ocr - client construction and error mapping
"""
from unittest.mock import patch

import pytesseract
import pytest

from docsolver.ocr import (
    OcrConnectionError,
    OcrError,
    OcrInvalidInputError,
    TesseractOcrClient,
    create_ocr_client,
)
from docsolver.ocr.base import load_rgb_image
from docsolver.ocr.paddle_client import _is_garbage_text


class TestLoadImage:

    def test_png_to_rgb(self, png_bytes):
        image = load_rgb_image(png_bytes)
        assert image.mode == "RGB"
        assert image.size == (60, 30)

    def test_invalid_bytes(self):
        with pytest.raises(OcrInvalidInputError):
            load_rgb_image(b"not an image")


class TestTesseractClient:

    def test_extract(self, png_bytes):
        with patch("pytesseract.image_to_string", return_value="What is 2+2?\n") as mock_ocr:
            text = TesseractOcrClient(lang="eng").extract(png_bytes)

        assert text == "What is 2+2?\n"
        assert mock_ocr.call_args.kwargs["lang"] == "eng"

    def test_binary_missing(self, png_bytes):
        with patch("pytesseract.image_to_string", side_effect=pytesseract.TesseractNotFoundError()):
            with pytest.raises(OcrConnectionError):
                TesseractOcrClient().extract(png_bytes)

    def test_engine_failure(self, png_bytes):
        with patch("pytesseract.image_to_string", side_effect=RuntimeError("timeout")):
            with pytest.raises(OcrError):
                TesseractOcrClient().extract(png_bytes)

    def test_invalid_image(self):
        with pytest.raises(OcrInvalidInputError):
            TesseractOcrClient().extract(b"\x00\x01")


class TestFactory:

    def test_tesseract(self):
        client = create_ocr_client("tesseract", tesseract_lang="deu")
        assert isinstance(client, TesseractOcrClient)
        assert client.lang == "deu"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_ocr_client("mathpix")


class TestGarbageFilter:

    @pytest.mark.parametrize("text,expected", [
        ("#$%&#'!('!)", True),
        ("", True),
        ("Question 1", False),
        ("2+2=?", False),
    ])
    def test_is_garbage(self, text, expected):
        assert _is_garbage_text(text) is expected
