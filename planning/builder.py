"""Plan Builder: asks the provider for a build plan once per run."""

import logging
from typing import Optional, Tuple

from brand import brand_injection_prompt
from contracts import BuildPlan, StyleDecision
from providers import LLMProvider, LLMResponse

from .build_plan import build_plan_prompt, fallback_plan, parse_plan

logger = logging.getLogger(__name__)


class PlanBuilder:
    """Produces the run's BuildPlan.

    A bad plan falls back to `fallback_plan`; provider errors propagate.
    The returned plan always carries the decision's style key.
    """

    SYSTEM_PROMPT = "You are a technical architect planning web application structure."

    def __init__(
        self,
        provider: LLMProvider,
        model: Optional[str] = None,
        max_tokens: int = 2048,
    ):
        self.provider = provider
        self.model = model
        self.max_tokens = max_tokens

    def _system_prompt(self, decision: StyleDecision) -> str:
        return f"{self.SYSTEM_PROMPT}\n\n{brand_injection_prompt(decision.profile, decision.style_key)}"

    async def build(self, prompt: str, decision: StyleDecision) -> Tuple[BuildPlan, LLMResponse]:
        """Request, parse and pin the plan.

        Returns:
            Tuple of (plan, provider_response)
        """
        user_message = f"{build_plan_prompt(decision.style_key)}\n\nUser request: {prompt}"
        response = await self.provider.complete(
            system_prompt=self._system_prompt(decision),
            user_message=user_message,
            model=self.model,
            max_tokens=self.max_tokens,
        )

        plan = parse_plan(response.content)
        if plan is None:
            logger.warning("Build plan validation failed, using default plan")
            plan = fallback_plan(decision.style_key)

        # The plan must never disagree with brand resolution
        if plan.style_key != decision.style_key:
            plan = plan.model_copy(update={"style_key": decision.style_key})
        return plan, response
