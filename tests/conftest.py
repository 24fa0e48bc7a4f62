"""
Pytest configuration and shared fixtures for DocSolver tests.
"""
import io
import sys
import shutil
import tempfile
from pathlib import Path
from typing import Generator, List, Optional
from unittest.mock import AsyncMock

import fitz  # PyMuPDF
import pytest
from PIL import Image

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from docsolver.errors import DeliveryFailedError
from docsolver.models import SolverAnswer
from docsolver.ocr import OcrError


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="docsolver_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Test settings with mock API keys and private directories."""
    return Settings(
        openai_api_key="test_openai_key",
        anthropic_api_key="test_anthropic_key",
        provider="openai",
        brief_model="gpt-4o-mini",
        detailed_model="gpt-4o",
        chunk_size_limit=2800,
        min_extracted_text_length=10,
        file_answer_mode="document",
        temp_dir=temp_dir / "tmp",
        output_dir=temp_dir / "out",
    )


# ============================================================================
# Fixtures: Sample Documents
# ============================================================================

def build_pdf(pages: List[str]) -> bytes:
    """In-memory PDF with one text line per page (empty string = blank page)."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def build_png(width: int = 60, height: int = 30) -> bytes:
    """Small white PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def png_bytes() -> bytes:
    return build_png()


# ============================================================================
# Fakes: OCR, Solver, Destination
# ============================================================================

class FakeOcrClient:
    """OCR client returning canned text; records every call."""

    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = 0

    def extract(self, image_bytes: bytes) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return self.text


class RecordingDestination:
    """Destination that keeps everything it is given."""

    def __init__(
        self,
        max_message_chars: Optional[int] = None,
        fail_documents: bool = False,
        fail_messages: bool = False,
    ):
        self.max_message_chars = max_message_chars
        self.fail_documents = fail_documents
        self.fail_messages = fail_messages
        self.messages: List[str] = []
        self.documents: List[dict] = []

    async def send_message(self, text: str) -> None:
        if self.fail_messages:
            raise DeliveryFailedError("channel_closed")
        self.messages.append(text)

    async def send_document(self, path: Path, filename: str, title: str, caption: str) -> None:
        record = {
            "path": Path(path),
            "filename": filename,
            "title": title,
            "caption": caption,
            "existed": Path(path).exists(),
        }
        self.documents.append(record)
        if self.fail_documents:
            raise RuntimeError("upload rejected: file too large")
        record["content"] = Path(path).read_bytes()


@pytest.fixture
def fake_ocr():
    return FakeOcrClient


@pytest.fixture
def ocr_error():
    return OcrError


@pytest.fixture
def destination() -> RecordingDestination:
    return RecordingDestination()


@pytest.fixture
def recording_destination():
    """Factory for destinations with custom limits or failures."""
    return RecordingDestination


@pytest.fixture
def fake_solver():
    """Solver whose solve() is an AsyncMock answering 'A1: 4\\nA2: Paris'."""
    solver = AsyncMock()
    solver.solve.return_value = SolverAnswer(text="A1: 4\nA2: Paris", model="gpt-4o")
    return solver


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Pipeline tests with faked collaborators")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Auto-add 'unit' marker to test files in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        # Auto-add 'integration' marker to test files in tests/integration/
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
