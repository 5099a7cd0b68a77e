"""LiteLLM-backed provider. Reaches any LiteLLM-supported backend (incl. Gemini)."""

from typing import Optional

from .base import LLMProvider, LLMResponse


# LiteLLM model strings: provider/model-name (OpenAI can omit prefix)
DEFAULT_MODELS = {
    "anthropic": "anthropic/claude-sonnet-4-20250514",
    "openai": "gpt-4o",
    "gemini": "gemini/gemini-2.5-flash",
    "deepseek": "deepseek/deepseek-chat",
}

# Short aliases accepted on the command line
MODEL_ALIASES = {
    "claude-sonnet": "anthropic/claude-sonnet-4-20250514",
    "claude-haiku": "anthropic/claude-3-5-haiku-20241022",
    "gemini-flash": "gemini/gemini-2.5-flash",
    "gemini-pro": "gemini/gemini-2.5-pro",
    "deepseek-chat": "deepseek/deepseek-chat",
}

_PREFIXED_BACKENDS = ("anthropic", "gemini", "deepseek")


def to_litellm_model(backend: Optional[str], model: Optional[str]) -> str:
    """Map an optional backend name + model to a LiteLLM model string."""
    if model and "/" in model:
        return model
    if model and model.lower() in MODEL_ALIASES:
        return MODEL_ALIASES[model.lower()]
    if backend:
        key = backend.lower()
        if model:
            return f"{key}/{model}" if key in _PREFIXED_BACKENDS else model
        return DEFAULT_MODELS.get(key, DEFAULT_MODELS["openai"])
    return model or DEFAULT_MODELS["openai"]


class LiteLLMProvider(LLMProvider):
    """Single provider that delegates to litellm.acompletion()."""

    def __init__(
        self,
        default_model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize with the LiteLLM model string to use by default.

        Args:
            default_model: LiteLLM model string (e.g. gpt-4o, gemini/gemini-2.5-flash).
            timeout: Per-request timeout in seconds
        """
        self._default_model = default_model or DEFAULT_MODELS["openai"]
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "litellm"

    @property
    def default_model(self) -> str:
        return self._default_model

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        import litellm

        resolved_model = to_litellm_model(None, model) if model else self._default_model
        kwargs = {
            "model": resolved_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "max_tokens": max_tokens,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        response = await litellm.acompletion(**kwargs)

        content = response.choices[0].message.content or ""
        usage = getattr(response, "usage", None)
        input_tokens = getattr(usage, "prompt_tokens", 0) or 0
        output_tokens = getattr(usage, "completion_tokens", 0) or 0
        hidden = getattr(response, "_hidden_params", None) or {}
        cost = float(hidden.get("response_cost", 0) or 0)

        return LLMResponse(
            content=content,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=getattr(response, "model", None) or resolved_model,
            provider=self.name,
            cost=cost,
        )

    def is_available(self) -> bool:
        """LiteLLM reads API keys from env; we consider it available if the model is set."""
        return bool(self._default_model)
