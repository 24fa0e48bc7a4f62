"""
Base AI Provider - Abstract Interface
DocSolver - Hosted completion providers
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any
from dataclasses import dataclass
from enum import Enum


class AIProviderType(Enum):
    """Supported AI Providers"""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


@dataclass
class AIMessage:
    """Unified message format across providers"""
    role: str  # "user", "assistant"
    content: str


@dataclass
class AIResponse:
    """Unified response format"""
    content: str
    model: str
    provider: AIProviderType
    usage: Optional[Dict[str, int]] = None  # tokens used
    finish_reason: Optional[str] = None
    raw_response: Optional[Any] = None


@dataclass
class AIConfig:
    """Provider configuration"""
    api_key: str
    model: str
    max_tokens: int = 4096
    temperature: float = 0.7
    base_url: Optional[str] = None  # For custom endpoints
    timeout: Optional[float] = None


class ProviderError(Exception):
    """Base exception for provider failures"""
    pass


class ProviderUnavailableError(ProviderError):
    """Provider could not be reached or is overloaded (safe to retry later)"""
    pass


class ProviderRejectedError(ProviderError):
    """Provider refused the request or returned nothing usable"""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class BaseAIProvider(ABC):
    """
    Abstract base class for AI providers.
    All providers must implement these methods.
    """

    def __init__(self, config: AIConfig):
        self.config = config
        self._client = None

    @property
    @abstractmethod
    def provider_type(self) -> AIProviderType:
        """Return the provider type"""
        pass

    @property
    @abstractmethod
    def supported_models(self) -> List[str]:
        """Return list of known models"""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client connection"""
        pass

    @abstractmethod
    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """
        Generate a completion from the AI model.

        Args:
            messages: List of conversation messages
            system_prompt: Optional system prompt
            **kwargs: Per-call overrides (model, max_tokens, temperature)

        Returns:
            AIResponse with the generated content

        Raises:
            ProviderUnavailableError: Network failure, timeout, rate limit, 5xx
            ProviderRejectedError: Request refused or empty completion
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} model={self.config.model}>"
