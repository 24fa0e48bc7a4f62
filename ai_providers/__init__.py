"""
AI Providers Package
DocSolver - Hosted completion providers

Supports:
- OpenAI GPT (gpt-4o, gpt-4o-mini, etc.)
- Anthropic Claude (claude-sonnet-4, claude-3.5-haiku, etc.)

Usage:
    from ai_providers import create_provider, AIMessage

    provider = create_provider("openai", api_key="sk-...", model="gpt-4o")
    response = await provider.complete(
        [AIMessage(role="user", content="What is 2+2?")],
        system_prompt="Answer briefly.",
    )
    print(response.content)
"""

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
    AIConfig,
    ProviderError,
    ProviderUnavailableError,
    ProviderRejectedError,
)

from .claude_provider import ClaudeProvider
from .openai_provider import OpenAIProvider

from .manager import (
    ProviderInfo,
    PROVIDER_REGISTRY,
    PROVIDER_INFO,
    create_provider,
)

__all__ = [
    # Base classes
    "BaseAIProvider",
    "AIProviderType",
    "AIMessage",
    "AIResponse",
    "AIConfig",

    # Errors
    "ProviderError",
    "ProviderUnavailableError",
    "ProviderRejectedError",

    # Providers
    "ClaudeProvider",
    "OpenAIProvider",

    # Registry
    "ProviderInfo",
    "PROVIDER_REGISTRY",
    "PROVIDER_INFO",
    "create_provider",
]

__version__ = "1.0.0"
