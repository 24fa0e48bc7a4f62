"""
DocSolver - answers questions sent as chat text, PDFs or images.

    from config.settings import settings
    from docsolver import AnswerPipeline, InboundEvent, HttpAttachmentFetcher

    pipeline = AnswerPipeline.from_settings(settings)
    outcomes = await pipeline.handle_event(
        InboundEvent.from_payload(payload),
        destination,
        HttpAttachmentFetcher(token=settings.attachment_token),
    )
"""

from .classifier import classify, classify_metadata
from .delivery import DeliveryDestination, LocalDirectoryDestination
from .errors import (
    AttachmentUnavailableError,
    DeliveryFailedError,
    ErrorKind,
    ExtractionFailedError,
    PipelineError,
    SolverRejectedError,
    SolverUnavailableError,
    UnsupportedAttachmentKindError,
)
from .intake import EventFile, HttpAttachmentFetcher, InboundEvent, requests_from_event
from .models import (
    Attachment,
    ByteSource,
    ExtractedDocument,
    ExtractionStrategy,
    InboundRequest,
    RequestOrigin,
    SolverAnswer,
    SolverProfile,
    SolverProfileKind,
    SolverRequest,
)
from .pipeline import AnswerPipeline, RunOutcome, RunStatus

__all__ = [
    "classify",
    "classify_metadata",
    "DeliveryDestination",
    "LocalDirectoryDestination",
    "AttachmentUnavailableError",
    "DeliveryFailedError",
    "ErrorKind",
    "ExtractionFailedError",
    "PipelineError",
    "SolverRejectedError",
    "SolverUnavailableError",
    "UnsupportedAttachmentKindError",
    "EventFile",
    "HttpAttachmentFetcher",
    "InboundEvent",
    "requests_from_event",
    "Attachment",
    "ByteSource",
    "ExtractedDocument",
    "ExtractionStrategy",
    "InboundRequest",
    "RequestOrigin",
    "SolverAnswer",
    "SolverProfile",
    "SolverProfileKind",
    "SolverRequest",
    "AnswerPipeline",
    "RunOutcome",
    "RunStatus",
]

__version__ = "1.0.0"
