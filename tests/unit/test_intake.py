"""
Unit tests for docsolver/intake.py - event parsing and attachment download
"""
import httpx
import pytest

from docsolver.errors import AttachmentUnavailableError, ErrorKind
from docsolver.intake import (
    EventFile,
    HttpAttachmentFetcher,
    InboundEvent,
    requests_from_event,
    strip_mentions,
)
from docsolver.models import RequestOrigin

FILE_URL = "https://files.example.com/F1/hw.pdf"


def _fetcher(handler, **kwargs) -> HttpAttachmentFetcher:
    return HttpAttachmentFetcher(token="xoxb-test", transport=httpx.MockTransport(handler), **kwargs)


class TestStripMentions:

    @pytest.mark.parametrize("raw,expected", [
        ("<@U123> what is 2+2?", "what is 2+2?"),
        ("<@U123|bot>   ", ""),
        ("hey <@U1> and <@U2> help", "hey  and  help"),
        (None, ""),
        ("no mention", "no mention"),
    ])
    def test_strip(self, raw, expected):
        assert strip_mentions(raw) == expected


class TestInboundEvent:

    def test_from_payload(self):
        event = InboundEvent.from_payload({
            "text": "<@U123> please solve",
            "channel": "C1",
            "ts": "1700000000.0001",
            "files": [{
                "id": "F1",
                "name": "hw.pdf",
                "mimetype": "application/pdf",
                "filetype": "pdf",
                "url_private_download": FILE_URL,
            }],
        })

        assert event.text == "please solve"
        assert event.channel == "C1"
        assert event.thread_ts == "1700000000.0001"
        assert event.files == [EventFile(
            file_id="F1",
            name="hw.pdf",
            content_type="application/pdf",
            declared_kind="pdf",
            locator=FILE_URL,
        )]

    def test_existing_thread_preferred(self):
        event = InboundEvent.from_payload({"text": "", "ts": "2", "thread_ts": "1"})
        assert event.thread_ts == "1"
        assert event.files == []

    def test_url_private_fallback(self):
        event_file = EventFile.from_payload({"title": "scan", "url_private": FILE_URL})
        assert event_file.name == "scan"
        assert event_file.locator == FILE_URL
        assert event_file.content_type == ""


class TestRequestsFromEvent:

    def test_text_only(self):
        event = InboundEvent(text="what is 2+2?")
        requests = requests_from_event(event, HttpAttachmentFetcher())

        assert len(requests) == 1
        assert requests[0].origin == RequestOrigin.PLAIN_TEXT
        assert requests[0].raw_text == "what is 2+2?"

    def test_one_request_per_file(self):
        event = InboundEvent(text="ignored", files=[
            EventFile("F1", "a.pdf", "application/pdf", "pdf", FILE_URL),
            EventFile("F2", "b.png", "image/png", "png", FILE_URL),
        ])
        requests = requests_from_event(event, HttpAttachmentFetcher())

        assert [r.origin for r in requests] == [RequestOrigin.FILE_ATTACHMENT] * 2
        assert [r.attachment.display_name for r in requests] == ["a.pdf", "b.png"]
        assert all(r.raw_text is None for r in requests)
        assert not any(r.attachment.byte_source.fetched for r in requests)

    @pytest.mark.asyncio
    async def test_byte_source_fetches_its_own_locator(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, content=b"%PDF-1.7", headers={"content-type": "application/pdf"})

        event = InboundEvent(text="", files=[
            EventFile("F1", "a.pdf", "application/pdf", "pdf", "https://files.example.com/a"),
            EventFile("F2", "b.pdf", "application/pdf", "pdf", "https://files.example.com/b"),
        ])
        requests = requests_from_event(event, _fetcher(handler))

        await requests[1].attachment.byte_source.read()
        assert seen == ["https://files.example.com/b"]


class TestHttpAttachmentFetcher:

    @pytest.mark.asyncio
    async def test_fetch_with_bearer_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer xoxb-test"
            return httpx.Response(200, content=b"image-bytes", headers={"content-type": "image/png"})

        assert await _fetcher(handler).fetch(FILE_URL) == b"image-bytes"

    @pytest.mark.asyncio
    async def test_missing_locator(self):
        with pytest.raises(AttachmentUnavailableError) as exc_info:
            await HttpAttachmentFetcher().fetch(None)
        assert exc_info.value.reason == "missing_locator"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,reason", [
        (401, "unauthorized"),
        (403, "unauthorized"),
        (404, "http_error"),
        (500, "http_error"),
    ])
    async def test_error_status(self, status, reason):
        fetcher = _fetcher(lambda request: httpx.Response(status))

        with pytest.raises(AttachmentUnavailableError) as exc_info:
            await fetcher.fetch(FILE_URL)

        assert exc_info.value.reason == reason
        assert exc_info.value.kind == ErrorKind.ATTACHMENT_UNAVAILABLE
        assert exc_info.value.retriable is True

    @pytest.mark.asyncio
    async def test_html_login_page(self):
        fetcher = _fetcher(lambda request: httpx.Response(
            200, content=b"<html>Sign in</html>", headers={"content-type": "text/html; charset=utf-8"}
        ))
        with pytest.raises(AttachmentUnavailableError) as exc_info:
            await fetcher.fetch(FILE_URL)
        assert exc_info.value.reason == "unauthorized"

    @pytest.mark.asyncio
    async def test_too_large(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, content=b"x" * 2048), max_bytes=1024)

        with pytest.raises(AttachmentUnavailableError) as exc_info:
            await fetcher.fetch(FILE_URL)
        assert exc_info.value.reason == "too_large"

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AttachmentUnavailableError) as exc_info:
            await _fetcher(handler).fetch(FILE_URL)
        assert exc_info.value.reason == "network_error"
