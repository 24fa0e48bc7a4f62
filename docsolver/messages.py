"""
User-visible replies, one per terminal outcome.
"""

from .errors import ErrorKind, PipelineError, UnsupportedAttachmentKindError

PROMPT_FOR_INPUT = "Please ask a question or attach a file."

_MESSAGES = {
    ErrorKind.UNSUPPORTED_ATTACHMENT: (
        "Sorry, I can't process files of type `{kind}`. "
        "Please send a text question, a PDF, or an image."
    ),
    ErrorKind.ATTACHMENT_UNAVAILABLE: (
        "Sorry, I couldn't access that file. Please try again in a moment."
    ),
    ErrorKind.EXTRACTION_FAILED: (
        "I couldn't read any usable text from `{name}`. "
        "Please send a clearer scan or a different file."
    ),
    ErrorKind.SOLVER_UNAVAILABLE: (
        "Sorry, I couldn't work out an answer right now. Please try again."
    ),
    ErrorKind.SOLVER_REJECTED: (
        "Sorry, I couldn't work out an answer for that. Please try again."
    ),
    ErrorKind.DELIVERY_FAILED: (
        "I solved it, but couldn't send the result ({reason}). "
        "The file may be too large or I may lack permission to upload here."
    ),
    ErrorKind.INTERNAL: (
        "Something went wrong while handling your request. Please try again."
    ),
}


def error_message(error: PipelineError, display_name: str = "") -> str:
    """Reply text for a failed run"""
    kind = "unknown"
    if isinstance(error, UnsupportedAttachmentKindError):
        kind = error.declared_kind or error.content_type or "unknown"
    return _MESSAGES[error.kind].format(
        kind=kind,
        name=display_name or "your file",
        reason=error.reason,
    )


def internal_error_message() -> str:
    return _MESSAGES[ErrorKind.INTERNAL]
