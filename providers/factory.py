"""Factory for creating LLM providers."""

from typing import Optional, Dict, Type

from config import settings

from .base import LLMProvider
from .anthropic_provider import AnthropicProvider
from .openai_provider import OpenAIProvider, DeepseekProvider
from .litellm_provider import LiteLLMProvider, to_litellm_model
from .mock_provider import MockProvider


# Registry of available providers
PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,
    "openai": OpenAIProvider,
    "gpt": OpenAIProvider,
    "deepseek": DeepseekProvider,
    "litellm": LiteLLMProvider,
    "mock": MockProvider,
}

_ALIASES = ("claude", "gpt")

# Model prefix to provider mapping for auto-detection
MODEL_PROVIDERS: Dict[str, str] = {
    "claude": "anthropic",
    "sonnet": "anthropic",
    "opus": "anthropic",
    "haiku": "anthropic",
    "gpt-": "openai",
    "o1": "openai",
    "deepseek": "deepseek",
    "gemini": "litellm",
}


def get_provider(
    provider_name: Optional[str] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> LLMProvider:
    """Get an LLM provider instance.

    Args:
        provider_name: Explicit provider name (anthropic, openai, deepseek, litellm, mock)
        model: Model name - if provided without provider, will auto-detect provider
        api_key: Optional API key for SDK-backed providers
        timeout: Optional per-request timeout in seconds

    Returns:
        LLMProvider instance

    Examples:
        get_provider("anthropic")
        get_provider(model="gpt-4o")          # OpenAI provider
        get_provider(model="gemini-pro")      # LiteLLM provider
        get_provider("mock")                  # offline provider
    """
    key = None
    if provider_name:
        key = provider_name.lower()
        if key not in PROVIDERS:
            raise ValueError(
                f"Unknown provider: {provider_name}. "
                f"Available: {list(PROVIDERS.keys())}"
            )
    elif model:
        model_lower = model.lower()
        for prefix, provider in MODEL_PROVIDERS.items():
            if model_lower.startswith(prefix):
                key = provider
                break

    if key is None:
        key = "anthropic"

    provider_class = PROVIDERS[key]
    if provider_class is MockProvider:
        return MockProvider()
    if provider_class is LiteLLMProvider:
        return LiteLLMProvider(default_model=to_litellm_model(None, model), timeout=timeout)
    if api_key is None:
        # BUILDGATE_<NAME>_API_KEY; the provider falls back to its standard env var
        canonical = {"claude": "anthropic", "gpt": "openai"}.get(key, key)
        api_key = getattr(settings, f"{canonical}_api_key", "") or None
    return provider_class(api_key=api_key, timeout=timeout)


def list_providers() -> Dict[str, bool]:
    """List all providers and their availability.

    Returns:
        Dict mapping provider name to availability status
    """
    result = {}
    for name, provider_class in PROVIDERS.items():
        if name in _ALIASES:
            continue
        result[name] = get_provider(name).is_available()
    return result
