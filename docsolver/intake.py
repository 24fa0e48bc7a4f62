"""
Intake - from a raw chat event to InboundRequests.

The event shape follows Slack's app_mention payload:

    {
        "text": "<@U123> what is 2+2?",
        "channel": "C1", "ts": "1700000000.0001", "thread_ts": None,
        "files": [{"id": "F1", "name": "hw.pdf", "mimetype": "application/pdf",
                   "filetype": "pdf", "url_private_download": "https://..."}],
    }

Channel and thread identifiers are carried along for reply addressing only.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import httpx

from config.constants import FETCH_TIMEOUT_SECONDS, MAX_ATTACHMENT_SIZE_MB
from config.logging_config import get_logger

from .errors import AttachmentUnavailableError
from .models import Attachment, ByteSource, InboundRequest

logger = get_logger(__name__)

MENTION_PATTERN = re.compile(r"<@[^>]+>")


def strip_mentions(text: Optional[str]) -> str:
    """Remove user mention markers and surrounding whitespace"""
    return MENTION_PATTERN.sub("", text or "").strip()


@dataclass(frozen=True)
class EventFile:
    """File descriptor as delivered with the event"""
    file_id: Optional[str]
    name: str
    content_type: str
    declared_kind: Optional[str]
    locator: Optional[str]  # download URL

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EventFile":
        return cls(
            file_id=payload.get("id"),
            name=payload.get("name") or payload.get("title") or "",
            content_type=payload.get("mimetype") or "",
            declared_kind=payload.get("filetype"),
            locator=payload.get("url_private_download") or payload.get("url_private"),
        )


@dataclass(frozen=True)
class InboundEvent:
    """A mention of the bot, with optional attachments"""
    text: str
    files: List[EventFile] = field(default_factory=list)
    channel: Optional[str] = None
    thread_ts: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InboundEvent":
        return cls(
            text=strip_mentions(payload.get("text")),
            files=[EventFile.from_payload(f) for f in payload.get("files") or []],
            channel=payload.get("channel"),
            # replies go to the existing thread, or start one on the message
            thread_ts=payload.get("thread_ts") or payload.get("ts"),
        )


class HttpAttachmentFetcher:
    """
    Authenticated attachment download over HTTP.

    Every failure (missing URL, network error, error status, login page,
    oversized payload) raises AttachmentUnavailableError.
    """

    def __init__(
        self,
        token: str = "",
        timeout: float = FETCH_TIMEOUT_SECONDS,
        max_bytes: int = MAX_ATTACHMENT_SIZE_MB * 1024 * 1024,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.timeout = timeout
        self.max_bytes = max_bytes
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def fetch(self, locator: Optional[str]) -> bytes:
        if not locator:
            raise AttachmentUnavailableError("missing_locator")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream("GET", locator, headers=self._headers()) as response:
                    if response.status_code in (401, 403):
                        raise AttachmentUnavailableError(
                            "unauthorized", f"HTTP {response.status_code}"
                        )
                    if response.status_code >= 400:
                        raise AttachmentUnavailableError(
                            "http_error", f"HTTP {response.status_code}"
                        )
                    # An expired token yields the HTML sign-in page with status 200
                    if response.headers.get("content-type", "").startswith("text/html"):
                        raise AttachmentUnavailableError(
                            "unauthorized", "received an HTML page instead of the file"
                        )

                    chunks = []
                    size = 0
                    async for chunk in response.aiter_bytes():
                        size += len(chunk)
                        if size > self.max_bytes:
                            raise AttachmentUnavailableError(
                                "too_large", f"more than {self.max_bytes} bytes"
                            )
                        chunks.append(chunk)
        except httpx.HTTPError as e:
            raise AttachmentUnavailableError("network_error", str(e)) from e

        logger.info(f"Fetched attachment ({size} bytes)")
        return b"".join(chunks)


def requests_from_event(event: InboundEvent, fetcher: HttpAttachmentFetcher) -> List[InboundRequest]:
    """
    One request per attachment, or one plain text request when there are
    none. The text of a message with attachments is not used.
    """
    if not event.files:
        return [InboundRequest.from_text(event.text)]

    requests = []
    for event_file in event.files:
        locator = event_file.locator

        async def _load(locator: Optional[str] = locator) -> bytes:
            return await fetcher.fetch(locator)

        requests.append(InboundRequest.from_attachment(Attachment(
            content_type=event_file.content_type,
            declared_kind=event_file.declared_kind,
            byte_source=ByteSource(_load),
            display_name=event_file.name,
            file_id=event_file.file_id,
        )))
    return requests
