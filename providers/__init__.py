"""LLM Provider abstraction for multi-model support."""

from .base import LLMProvider, LLMResponse
from .factory import get_provider, list_providers
from .mock_provider import MockProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "MockProvider",
    "get_provider",
    "list_providers",
]
