"""Provider interface the build pipeline generates through.

A run makes one plan call, then one generation call per attempt, plus at
most one JSON repair call per attempt. All of them go through
`LLMProvider.complete`, and token counts from every response are summed
into the final output's `tokens` meta.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMResponse:
    """Raw text plus usage for one provider call.

    `content` is expected to hold JSON (a build plan or a generated
    output); parsing happens in the planning and orchestrator layers.
    """
    content: str
    input_tokens: int
    output_tokens: int
    model: str
    provider: str
    cost: float = 0.0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class LLMProvider(ABC):
    """A generation backend for plan and app calls.

    `complete` is the pipeline's only suspension point. Network and API
    errors propagate to the caller unchanged; the pipeline never retries
    them, only content failures.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stamped into the output's `provider` meta."""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when the pipeline passes no override."""

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send one system + user exchange.

        Args:
            system_prompt: Role, brand design system and output rules
            user_message: The request, plus any repair instructions
            model: Model override (provider default when None)
            max_tokens: Response token cap from settings

        Returns:
            LLMResponse with the raw text and token counts
        """

    def is_available(self) -> bool:
        """Whether credentials are configured; the CLI falls back to the mock provider otherwise."""
        return True
