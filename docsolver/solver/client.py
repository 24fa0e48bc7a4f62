"""
Solver client - adapts an ai_providers provider to solve(request).
"""

from typing import Protocol

from ai_providers import (
    AIMessage,
    BaseAIProvider,
    ProviderRejectedError,
    ProviderUnavailableError,
    create_provider,
)
from config.logging_config import get_logger
from config.settings import Settings

from ..errors import SolverRejectedError, SolverUnavailableError
from ..models import SolverAnswer, SolverRequest

logger = get_logger(__name__)


class SolverClient(Protocol):
    """Anything that turns a SolverRequest into a SolverAnswer"""

    async def solve(self, request: SolverRequest) -> SolverAnswer:
        ...


class ProviderSolverClient:
    """
    Solver backed by a hosted completion provider.

    One request, one response; the profile decides model, token budget and
    temperature for each call.
    """

    def __init__(self, provider: BaseAIProvider):
        self.provider = provider

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderSolverClient":
        provider = create_provider(
            settings.provider,
            api_key=settings.get_api_key(),
            max_tokens=settings.solver_max_tokens,
            temperature=settings.solver_temperature,
        )
        return cls(provider)

    async def solve(self, request: SolverRequest) -> SolverAnswer:
        profile = request.profile
        logger.info(
            f"Solving with {self.provider.provider_type.value}/{profile.model} "
            f"({profile.kind.value}, {len(request.user_content)} chars)"
        )

        try:
            response = await self.provider.complete(
                [AIMessage(role="user", content=request.user_content)],
                system_prompt=request.system_instruction,
                model=profile.model,
                max_tokens=profile.max_tokens,
                temperature=profile.temperature,
            )
        except ProviderUnavailableError as e:
            raise SolverUnavailableError("solver_unavailable", str(e)) from e
        except ProviderRejectedError as e:
            raise SolverRejectedError(e.reason, str(e)) from e

        if response.usage:
            logger.info(
                f"Solver usage: {response.usage.get('input_tokens')} in / "
                f"{response.usage.get('output_tokens')} out"
            )

        return SolverAnswer(text=response.content, model=response.model, usage=response.usage)
