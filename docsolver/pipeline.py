"""
Answer Pipeline - orchestration and error plumbing.

One run per InboundRequest:

    classify -> fetch -> extract -> build request -> solve -> assemble -> deliver

Every failure is caught at the run boundary and answered with exactly one
message; nothing propagates to the host. Runs share no state, so the host
may execute them concurrently.

Usage:
    pipeline = AnswerPipeline.from_settings(settings)
    outcome = await pipeline.run(InboundRequest.from_text("2+2?"), destination)
"""

import asyncio
import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from pathlib import Path
from typing import List, Optional

from config.constants import ACKNOWLEDGMENT_TEXT, DOCUMENT_CAPTION
from config.logging_config import get_logger
from config.settings import Settings

from .classifier import classify
from .delivery import DeliveryDestination
from .errors import (
    AttachmentUnavailableError,
    DeliveryFailedError,
    ErrorKind,
    PipelineError,
)
from .extraction import OpticalExtractor, TextExtractor
from .intake import HttpAttachmentFetcher, InboundEvent, requests_from_event
from .messages import PROMPT_FOR_INPUT, error_message, internal_error_message
from .models import (
    Attachment,
    ExtractedDocument,
    InboundRequest,
    RequestOrigin,
    SolverAnswer,
)
from .ocr import OcrClient, create_ocr_client
from .output import ChunkedText, LayoutMetrics, assemble_document, render_document
from .solver import ProviderSolverClient, SolverClient, build_profiles, build_solver_request

logger = get_logger(__name__)


class RunStatus(Enum):
    """Terminal state of a run"""
    ANSWERED = "answered"
    PROMPTED = "prompted"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """What a run ended with and what reached the destination"""
    status: RunStatus
    error_kind: Optional[ErrorKind] = None
    delivered: List[str] = field(default_factory=list)
    answer: Optional[SolverAnswer] = None


class AnswerPipeline:
    """
    Drives one request from inbound content to delivered answer.

    Collaborators are injected so a run can execute against fakes:

        pipeline = AnswerPipeline(settings, solver=fake_solver, extractor=extractor)
    """

    def __init__(
        self,
        settings: Settings,
        solver: SolverClient,
        extractor: TextExtractor,
        metrics: Optional[LayoutMetrics] = None,
    ):
        self.settings = settings
        self.solver = solver
        self.extractor = extractor
        self.metrics = metrics or LayoutMetrics.from_settings(settings)
        self.profiles = build_profiles(settings)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        solver: Optional[SolverClient] = None,
        ocr_client: Optional[OcrClient] = None,
    ) -> "AnswerPipeline":
        """Wire the production collaborators described by settings"""
        optical = OpticalExtractor(
            ocr_client=ocr_client,
            ocr_factory=partial(
                create_ocr_client,
                settings.ocr_backend,
                paddle_lang=settings.paddle_lang,
                tesseract_lang=settings.tesseract_lang,
            ),
            dpi=settings.ocr_dpi,
        )
        extractor = TextExtractor(
            optical=optical,
            min_text_length=settings.min_extracted_text_length,
            ocr_fallback=settings.structural_ocr_fallback,
        )
        return cls(
            settings,
            solver=solver or ProviderSolverClient.from_settings(settings),
            extractor=extractor,
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def handle_event(
        self,
        event: InboundEvent,
        destination: DeliveryDestination,
        fetcher: HttpAttachmentFetcher,
    ) -> List[RunOutcome]:
        """Run every request carried by an event, in attachment order"""
        outcomes = []
        for request in requests_from_event(event, fetcher):
            outcomes.append(await self.run(request, destination))
        return outcomes

    async def run(self, request: InboundRequest, destination: DeliveryDestination) -> RunOutcome:
        display_name = request.attachment.display_name if request.attachment else ""
        try:
            return await self._run(request, destination)
        except PipelineError as e:
            log = logger.error if e.kind in (ErrorKind.DELIVERY_FAILED, ErrorKind.INTERNAL) else logger.warning
            log(f"Run failed [{e.kind.value}] {display_name or '(text)'}: {e}")
            return await self._report_failure(
                e.kind, error_message(e, display_name), destination
            )
        except Exception:
            logger.exception(f"Unexpected error handling {display_name or '(text)'}")
            return await self._report_failure(
                ErrorKind.INTERNAL, internal_error_message(), destination
            )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _run(self, request: InboundRequest, destination: DeliveryDestination) -> RunOutcome:
        if request.origin == RequestOrigin.PLAIN_TEXT:
            solver_request = build_solver_request(request.raw_text, request.origin, self.profiles)
            if solver_request is None:
                await self._deliver(destination.send_message, PROMPT_FOR_INPUT)
                return RunOutcome(status=RunStatus.PROMPTED, delivered=["prompt"])

            answer = await self.solver.solve(solver_request)
            await self._deliver_chunks(answer.text, destination)
            return RunOutcome(status=RunStatus.ANSWERED, delivered=["chunked_text"], answer=answer)

        attachment = request.attachment
        strategy = classify(attachment)
        logger.info(f"Attachment {attachment.display_name!r} -> {strategy.value} extraction")

        data = await self._fetch(attachment)
        document = await asyncio.to_thread(self.extractor.extract, strategy, data)
        logger.info(
            f"Extracted {len(document.text)} chars from {document.page_count} page(s) "
            f"({document.source_kind.value})"
        )

        content = self._limit_input(document.text)
        solver_request = build_solver_request(content, request.origin, self.profiles)
        answer = await self.solver.solve(solver_request)

        delivered = await self._deliver_file_answer(attachment, answer, document, destination)
        return RunOutcome(status=RunStatus.ANSWERED, delivered=delivered, answer=answer)

    async def _fetch(self, attachment: Attachment) -> bytes:
        try:
            return await attachment.byte_source.read()
        except PipelineError:
            raise
        except Exception as e:
            raise AttachmentUnavailableError("fetch_failed", str(e)) from e

    def _limit_input(self, text: str) -> str:
        limit = self.settings.max_solver_input_chars
        if len(text) <= limit:
            return text
        logger.warning(f"Extracted text truncated from {len(text)} to {limit} chars")
        return text[:limit]

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def _chunk_limit(self, destination: DeliveryDestination) -> int:
        limit = self.settings.chunk_size_limit
        channel_limit = getattr(destination, "max_message_chars", None)
        if channel_limit:
            limit = min(limit, channel_limit)
        return limit

    async def _deliver(self, send, *args) -> None:
        try:
            await send(*args)
        except DeliveryFailedError:
            raise
        except Exception as e:
            raise DeliveryFailedError("destination_error", str(e)) from e

    async def _deliver_chunks(self, text: str, destination: DeliveryDestination) -> None:
        chunks = ChunkedText.from_text(text, self._chunk_limit(destination))
        if len(chunks) > 1:
            logger.info(f"Answer of {len(text)} chars split into {len(chunks)} messages")
        for chunk in chunks:
            await self._deliver(destination.send_message, chunk)

    async def _deliver_file_answer(
        self,
        attachment: Attachment,
        answer: SolverAnswer,
        document: ExtractedDocument,
        destination: DeliveryDestination,
    ) -> List[str]:
        mode = self.settings.file_answer_mode

        if mode == "chunked":
            await self._deliver_chunks(answer.text, destination)
            return ["chunked_text"]

        source_text = document.text if self.settings.include_source_in_document else None
        await self._deliver_document(attachment, answer.text, source_text, destination)
        delivered = ["document"]

        # Acknowledge only an uploaded document; the answer is already delivered
        if mode == "both":
            try:
                await destination.send_message(ACKNOWLEDGMENT_TEXT)
                delivered.append("acknowledgment")
            except Exception as e:
                logger.warning(f"Document delivered but acknowledgment failed: {e}")
        return delivered

    async def _deliver_document(
        self,
        attachment: Attachment,
        answer_text: str,
        source_text: Optional[str],
        destination: DeliveryDestination,
    ) -> None:
        name = attachment.display_name
        stem = Path(name).stem if name else ""
        filename = f"solution_{stem}.pdf" if stem else "solution.pdf"
        title = f"Solved {name}" if name else "Solution"

        paginated = await asyncio.to_thread(
            assemble_document,
            answer_text,
            self.metrics,
            title=title,
            source_text=source_text,
            font_path=self.settings.font_path,
        )
        pdf_bytes = await asyncio.to_thread(render_document, paginated)
        logger.info(f"Rendered {filename}: {paginated.page_count} page(s), {len(pdf_bytes)} bytes")

        temp_dir = Path(self.settings.temp_dir)
        temp_dir.mkdir(parents=True, exist_ok=True)
        prefix = f"solution_{attachment.file_id}_" if attachment.file_id else "solution_"
        fd, temp_name = tempfile.mkstemp(prefix=prefix, suffix=".pdf", dir=temp_dir)
        path = Path(temp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(pdf_bytes)
            await self._deliver(destination.send_document, path, filename, title, DOCUMENT_CAPTION)
        finally:
            path.unlink(missing_ok=True)

    async def _report_failure(
        self,
        kind: ErrorKind,
        text: str,
        destination: DeliveryDestination,
    ) -> RunOutcome:
        outcome = RunOutcome(status=RunStatus.FAILED, error_kind=kind)
        try:
            await destination.send_message(text)
            outcome.delivered.append("error_message")
        except Exception:
            logger.exception("Could not deliver the failure message")
        return outcome
