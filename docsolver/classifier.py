"""
Attachment classifier.

Picks an extraction strategy from declared metadata only; payload bytes
are never touched here.
"""

from typing import Optional

from config.constants import (
    OPTICAL_CONTENT_PREFIX,
    STRUCTURAL_CONTENT_TYPES,
    STRUCTURAL_DECLARED_KINDS,
)

from .errors import UnsupportedAttachmentKindError
from .models import Attachment, ExtractionStrategy


def _normalize_content_type(content_type: Optional[str]) -> str:
    # "Image/PNG; name=x.png" -> "image/png"
    return (content_type or "").split(";", 1)[0].strip().lower()


def classify_metadata(
    content_type: Optional[str],
    declared_kind: Optional[str] = None,
) -> ExtractionStrategy:
    """
    Classify a (content type, filetype hint) pair.

    First match wins:
        1. paginated text document (PDF)  -> STRUCTURAL
        2. image/* content type           -> OPTICAL
        3. anything else                  -> UnsupportedAttachmentKindError
    """
    mime = _normalize_content_type(content_type)
    kind = (declared_kind or "").strip().lower().lstrip(".")

    if mime in STRUCTURAL_CONTENT_TYPES or kind in STRUCTURAL_DECLARED_KINDS:
        return ExtractionStrategy.STRUCTURAL
    if mime.startswith(OPTICAL_CONTENT_PREFIX):
        return ExtractionStrategy.OPTICAL

    raise UnsupportedAttachmentKindError(content_type or "", declared_kind)


def classify(attachment: Attachment) -> ExtractionStrategy:
    """Select the extraction strategy for an attachment"""
    return classify_metadata(attachment.content_type, attachment.declared_kind)
