#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    CHUNK_SIZE_LIMIT,
    FETCH_TIMEOUT_SECONDS,
    FONT_NAME,
    FONT_SIZE,
    LINE_SPACING,
    MAX_ATTACHMENT_SIZE_MB,
    MIN_EXTRACTED_TEXT_LENGTH,
    OCR_DEFAULT_BACKEND,
    OCR_DPI,
    OCR_PADDLE_LANG,
    OCR_TESSERACT_LANG,
    PAGE_HEIGHT,
    PAGE_MARGIN,
    PAGE_WIDTH,
    SOLVER_MAX_INPUT_CHARS,
    SOLVER_MAX_TOKENS,
    SOLVER_TEMPERATURE,
    TITLE_FONT_NAME,
    TITLE_FONT_SIZE,
    WRAP_COLUMNS,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== API Keys ==========
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Bearer token for downloading attachments from the chat workspace
    attachment_token: str = ""

    # ========== Provider & Solver Profiles ==========
    provider: Literal["openai", "anthropic"] = "openai"

    # Brief profile: plain text questions
    brief_model: str = "gpt-4o-mini"
    brief_instruction: Optional[str] = None  # None = built-in prompt

    # Detailed profile: questions extracted from attachments
    detailed_model: str = "gpt-4o"
    detailed_instruction: Optional[str] = None

    solver_max_tokens: int = SOLVER_MAX_TOKENS
    solver_temperature: float = SOLVER_TEMPERATURE
    max_solver_input_chars: int = SOLVER_MAX_INPUT_CHARS

    # ========== Extraction ==========
    min_extracted_text_length: int = MIN_EXTRACTED_TEXT_LENGTH

    # Re-run scanned PDFs (no text layer) through OCR page by page
    structural_ocr_fallback: bool = False

    # ========== OCR ==========
    ocr_backend: Literal["paddle", "tesseract"] = OCR_DEFAULT_BACKEND
    paddle_lang: str = OCR_PADDLE_LANG
    tesseract_lang: str = OCR_TESSERACT_LANG
    ocr_dpi: int = OCR_DPI

    # ========== Delivery ==========
    chunk_size_limit: int = CHUNK_SIZE_LIMIT

    # How answers to attachments are delivered: document | chunked | both
    file_answer_mode: Literal["document", "chunked", "both"] = "document"

    # Prefix the solution PDF with the extracted question text
    include_source_in_document: bool = False

    # ========== Page Layout (points) ==========
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT
    margin_top: float = PAGE_MARGIN
    margin_bottom: float = PAGE_MARGIN
    margin_left: float = PAGE_MARGIN
    margin_right: float = PAGE_MARGIN
    font_name: str = FONT_NAME
    font_size: float = FONT_SIZE
    line_spacing: float = LINE_SPACING
    title_font_name: str = TITLE_FONT_NAME
    title_font_size: float = TITLE_FONT_SIZE
    wrap_columns: int = WRAP_COLUMNS

    # Optional TrueType font for non-Latin answers (e.g. DejaVuSans.ttf)
    font_path: Optional[str] = None

    # ========== Attachment Fetch ==========
    fetch_timeout_seconds: float = FETCH_TIMEOUT_SECONDS
    max_attachment_size_mb: int = MAX_ATTACHMENT_SIZE_MB

    # ========== Directories ==========
    temp_dir: Path = BASE_DIR / "data" / "temp"
    output_dir: Path = BASE_DIR / "data" / "output"

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields from .env that aren't defined in model
    )

    def get_api_key(self) -> str:
        """Get API key based on provider"""
        if self.provider == "openai":
            if not self.openai_api_key:
                raise ValueError("OPENAI_API_KEY not set in .env")
            return self.openai_api_key
        elif self.provider == "anthropic":
            if not self.anthropic_api_key:
                raise ValueError("ANTHROPIC_API_KEY not set in .env")
            return self.anthropic_api_key
        else:
            raise ValueError(f"Unsupported provider: {self.provider}")

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "="*70)
        print("CONFIGURATION")
        print("="*70)
        print(f"Provider:          {self.provider}")
        print(f"Brief Model:       {self.brief_model}")
        print(f"Detailed Model:    {self.detailed_model}")
        print(f"OCR Backend:       {self.ocr_backend}")
        print(f"OCR Fallback:      {self.structural_ocr_fallback}")
        print(f"Min Text Length:   {self.min_extracted_text_length}")
        print(f"Chunk Size Limit:  {self.chunk_size_limit}")
        print(f"File Answer Mode:  {self.file_answer_mode}")
        print(f"Page Size:         {self.page_width} x {self.page_height} pt")
        print("="*70 + "\n")


# Global settings instance
settings = Settings()
