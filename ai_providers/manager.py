"""
AI Provider Registry
DocSolver - Hosted completion providers

Maps provider names to implementations and builds configured instances.
"""

from typing import Dict, Type, Optional
from dataclasses import dataclass

from .base import BaseAIProvider, AIProviderType, AIConfig
from .claude_provider import ClaudeProvider
from .openai_provider import OpenAIProvider


@dataclass
class ProviderInfo:
    """Information about an AI provider"""
    type: AIProviderType
    name: str
    models: Dict[str, str]
    default_model: str
    env_key: str  # Environment variable name for API key


# Registry of all available providers
PROVIDER_REGISTRY: Dict[AIProviderType, Type[BaseAIProvider]] = {
    AIProviderType.OPENAI: OpenAIProvider,
    AIProviderType.ANTHROPIC: ClaudeProvider,
}

# Provider information
PROVIDER_INFO: Dict[AIProviderType, ProviderInfo] = {
    AIProviderType.OPENAI: ProviderInfo(
        type=AIProviderType.OPENAI,
        name="OpenAI GPT",
        models=OpenAIProvider.MODELS,
        default_model=OpenAIProvider.DEFAULT_MODEL,
        env_key="OPENAI_API_KEY"
    ),
    AIProviderType.ANTHROPIC: ProviderInfo(
        type=AIProviderType.ANTHROPIC,
        name="Anthropic Claude",
        models=ClaudeProvider.MODELS,
        default_model=ClaudeProvider.DEFAULT_MODEL,
        env_key="ANTHROPIC_API_KEY"
    ),
}


def create_provider(
    provider: str,
    api_key: str,
    model: Optional[str] = None,
    max_tokens: int = 4096,
    temperature: float = 0.7,
    timeout: Optional[float] = None,
) -> BaseAIProvider:
    """
    Build a provider instance by name.

    Args:
        provider: "openai" or "anthropic"
        api_key: API key for the provider
        model: Default model (per-call overrides still apply)
        max_tokens: Default completion budget
        temperature: Default sampling temperature
        timeout: HTTP timeout in seconds (None = SDK default)

    Raises:
        ValueError: Unknown provider or missing API key
    """
    try:
        provider_type = AIProviderType(provider)
    except ValueError:
        raise ValueError(f"Unknown provider: {provider}")

    if not api_key:
        raise ValueError(f"{PROVIDER_INFO[provider_type].env_key} is not configured")

    provider_cls = PROVIDER_REGISTRY[provider_type]
    config = AIConfig(
        api_key=api_key,
        model=model or PROVIDER_INFO[provider_type].default_model,
        max_tokens=max_tokens,
        temperature=temperature,
        timeout=timeout,
    )
    return provider_cls(config)
