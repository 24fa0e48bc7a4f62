"""
Data models for a single pipeline run.

All values are owned by one run and discarded after delivery.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional


class RequestOrigin(Enum):
    """Where the question came from"""
    FILE_ATTACHMENT = "file_attachment"
    PLAIN_TEXT = "plain_text"


class ExtractionStrategy(Enum):
    """How text is pulled out of an attachment"""
    STRUCTURAL = "structural"   # embedded text layer (PDF)
    OPTICAL = "optical"         # OCR over pixels


class ByteSource:
    """
    Lazily fetched attachment payload.

    The loader runs on the first read() only; later reads return the same
    bytes. Nothing is fetched until a stage actually needs the payload.
    """

    def __init__(self, loader: Callable[[], Awaitable[bytes]]):
        self._loader = loader
        self._data: Optional[bytes] = None
        self.fetch_count = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteSource":
        """Source whose payload is already in memory"""
        async def _loaded() -> bytes:
            return data
        return cls(_loaded)

    @property
    def fetched(self) -> bool:
        return self._data is not None

    async def read(self) -> bytes:
        if self._data is None:
            self.fetch_count += 1
            self._data = await self._loader()
        return self._data


@dataclass(frozen=True)
class Attachment:
    """A file attached to an inbound event"""
    content_type: str
    byte_source: ByteSource
    display_name: str = ""
    declared_kind: Optional[str] = None  # filetype hint, e.g. "pdf"
    file_id: Optional[str] = None


@dataclass(frozen=True)
class InboundRequest:
    """
    One unit of work.

    Exactly one of raw_text / attachment is set; both empty is the
    "empty mention" case.
    """
    origin: RequestOrigin
    raw_text: Optional[str] = None
    attachment: Optional[Attachment] = None

    def __post_init__(self):
        if self.raw_text is not None and self.attachment is not None:
            raise ValueError("InboundRequest takes raw_text or attachment, not both")
        if self.origin == RequestOrigin.FILE_ATTACHMENT and self.attachment is None:
            raise ValueError("FILE_ATTACHMENT request requires an attachment")
        if self.origin == RequestOrigin.PLAIN_TEXT and self.attachment is not None:
            raise ValueError("PLAIN_TEXT request cannot carry an attachment")

    @classmethod
    def from_text(cls, text: Optional[str]) -> "InboundRequest":
        return cls(origin=RequestOrigin.PLAIN_TEXT, raw_text=text)

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "InboundRequest":
        return cls(origin=RequestOrigin.FILE_ATTACHMENT, attachment=attachment)


@dataclass(frozen=True)
class ExtractedDocument:
    """Normalized text pulled out of an attachment"""
    text: str
    source_kind: ExtractionStrategy
    page_count: Optional[int] = None


class SolverProfileKind(Enum):
    """Verbosity / quality tier"""
    BRIEF = "brief"
    DETAILED = "detailed"


@dataclass(frozen=True)
class SolverProfile:
    """Pairing of system instruction and model tier"""
    kind: SolverProfileKind
    model: str
    system_instruction: str
    max_tokens: int = 4096
    temperature: float = 0.2


@dataclass(frozen=True)
class SolverRequest:
    """Role-tagged request handed to the solver"""
    system_instruction: str
    user_content: str
    profile: SolverProfile


@dataclass(frozen=True)
class SolverAnswer:
    """Free-form solver output"""
    text: str
    model: Optional[str] = None
    usage: Optional[Dict[str, int]] = field(default=None, compare=False)
