"""
Pipeline error taxonomy.

Every stage raises a subclass of PipelineError. The orchestrator turns each
one into exactly one user-visible message (see docsolver.messages).
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Terminal failure categories for a pipeline run"""
    UNSUPPORTED_ATTACHMENT = "unsupported_attachment"
    ATTACHMENT_UNAVAILABLE = "attachment_unavailable"
    EXTRACTION_FAILED = "extraction_failed"
    SOLVER_UNAVAILABLE = "solver_unavailable"
    SOLVER_REJECTED = "solver_rejected"
    DELIVERY_FAILED = "delivery_failed"
    INTERNAL = "internal"


class PipelineError(Exception):
    """Base exception for pipeline failures"""

    kind: ErrorKind = ErrorKind.INTERNAL
    retriable: bool = False

    def __init__(self, reason: str, detail: Optional[str] = None):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


class UnsupportedAttachmentKindError(PipelineError):
    """Attachment matches neither extraction strategy"""

    kind = ErrorKind.UNSUPPORTED_ATTACHMENT

    def __init__(self, content_type: str, declared_kind: Optional[str] = None):
        super().__init__(
            "unsupported_attachment",
            f"content_type={content_type!r} declared_kind={declared_kind!r}",
        )
        self.content_type = content_type
        self.declared_kind = declared_kind


class AttachmentUnavailableError(PipelineError):
    """Attachment bytes could not be fetched"""

    kind = ErrorKind.ATTACHMENT_UNAVAILABLE
    retriable = True


class ExtractionFailedError(PipelineError):
    """
    Text could not be extracted.

    Reasons: malformed_document, encrypted_document, empty_document,
    ocr_unavailable, below_minimum_length.
    """

    kind = ErrorKind.EXTRACTION_FAILED


class SolverUnavailableError(PipelineError):
    """Solver could not be reached"""

    kind = ErrorKind.SOLVER_UNAVAILABLE
    retriable = True


class SolverRejectedError(PipelineError):
    """Solver refused the request or answered with nothing"""

    kind = ErrorKind.SOLVER_REJECTED
    retriable = True


class DeliveryFailedError(PipelineError):
    """Destination refused the outbound payload"""

    kind = ErrorKind.DELIVERY_FAILED
