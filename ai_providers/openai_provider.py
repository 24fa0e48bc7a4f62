"""
OpenAI Provider - GPT-4o, GPT-4o-mini, etc.
DocSolver - Hosted completion providers
"""

from typing import Optional, List, Dict, Any

import openai
from openai import AsyncOpenAI

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
    ProviderRejectedError,
    ProviderUnavailableError,
)


class OpenAIProvider(BaseAIProvider):
    """
    OpenAI GPT Provider

    Supports:
    - GPT-4o (detailed worksheet solving)
    - GPT-4o-mini (fast, cost-effective answers)
    - GPT-4-turbo
    """

    MODELS = {
        "gpt-4o": "GPT-4o (Latest, Multimodal)",
        "gpt-4o-mini": "GPT-4o Mini (Fast)",
        "gpt-4-turbo": "GPT-4 Turbo",
        "gpt-4": "GPT-4",
    }

    DEFAULT_MODEL = "gpt-4o"

    @property
    def provider_type(self) -> AIProviderType:
        return AIProviderType.OPENAI

    @property
    def supported_models(self) -> List[str]:
        return list(self.MODELS.keys())

    async def initialize(self) -> None:
        """Initialize OpenAI client"""
        self._client = AsyncOpenAI(
            api_key=self.config.api_key,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )

    def _convert_messages(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Convert AIMessage to OpenAI format"""
        converted = []

        # Add system message if provided
        if system_prompt:
            converted.append({"role": "system", "content": system_prompt})

        for msg in messages:
            converted.append({"role": msg.role, "content": msg.content})

        return converted

    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """Generate completion using OpenAI"""
        if not self._client:
            await self.initialize()

        api_messages = self._convert_messages(messages, system_prompt)

        try:
            response = await self._client.chat.completions.create(
                model=kwargs.get("model", self.config.model),
                max_tokens=kwargs.get("max_tokens", self.config.max_tokens),
                temperature=kwargs.get("temperature", self.config.temperature),
                messages=api_messages
            )
        except (openai.APIConnectionError, openai.RateLimitError) as e:
            # APITimeoutError is a subclass of APIConnectionError
            raise ProviderUnavailableError(f"OpenAI unreachable: {e}") from e
        except openai.APIStatusError as e:
            if e.status_code >= 500:
                raise ProviderUnavailableError(f"OpenAI server error {e.status_code}") from e
            raise ProviderRejectedError(
                f"openai_status_{e.status_code}", status_code=e.status_code
            ) from e

        if not response.choices:
            raise ProviderRejectedError("empty_completion")

        choice = response.choices[0]
        if not choice.message.content:
            raise ProviderRejectedError("empty_completion")

        return AIResponse(
            content=choice.message.content,
            model=response.model,
            provider=self.provider_type,
            usage={
                "input_tokens": response.usage.prompt_tokens,
                "output_tokens": response.usage.completion_tokens
            } if response.usage else None,
            finish_reason=choice.finish_reason,
            raw_response=response
        )
