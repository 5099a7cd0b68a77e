"""Build Pipeline - the retry orchestrator.

Runs one build request through brand resolution, planning and a bounded
generate/validate/score loop:

    RESOLVE_BRAND -> BUILD_PLAN -> GENERATE -> NORMALIZE -> VALIDATE_CONTRACT
        -> SCORE -> FINALIZE

A failed contract or a low score sends the run back to GENERATE with a
repair prompt while attempts remain. Each attempt produces a complete
replacement output. The run always ends in FINALIZE unless a precondition,
parse or provider error aborts it.
"""

import logging
import time
from enum import Enum
from typing import List, Optional

from brand import BrandResolver, brand_injection_prompt, default_brand_profile, enforce
from config import Settings, settings as default_settings
from contracts import BrandProfile, BuildPlan, BuildRequest, ContractResult, GeneratedOutput, QualityScore, StyleDecision
from errors import OutputParseError
from gates import ContractValidator, brand_summary, contract_repair_prompt, contract_summary
from planning import PlanBuilder, explain_plan
from providers import LLMProvider, LLMResponse
from scoring import score, score_summary, should_retry

from .explanation import format_text, generate_build_explanation
from .normalizer import ensure_minimum_files
from .output_parser import parse_output
from .prompts import json_repair_prompt, score_repair_prompt, system_message, user_prompt

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    RESOLVE_BRAND = "resolve_brand"
    BUILD_PLAN = "build_plan"
    GENERATE = "generate"
    NORMALIZE = "normalize"
    VALIDATE_CONTRACT = "validate_contract"
    SCORE = "score"
    FINALIZE = "finalize"


class BuildPipeline:
    """Orchestrates a single build run against one provider.

    The pipeline itself holds only read-only configuration; all run state
    lives inside `run`, so one instance can serve concurrent runs.
    """

    def __init__(
        self,
        provider: LLMProvider,
        profile: Optional[BrandProfile] = None,
        settings: Optional[Settings] = None,
        model: Optional[str] = None,
    ):
        """Initialize the pipeline.

        Args:
            provider: Generation provider used for the plan and every attempt
            profile: Brand profile to enforce (defaults to the canonical profile)
            settings: Retry and token limits (defaults to the module settings)
            model: Model override passed through to the provider
        """
        self.provider = provider
        self.profile = profile or default_brand_profile()
        self.settings = settings or default_settings
        self.model = model
        self.resolver = BrandResolver(self.profile)
        self.validator = ContractValidator(self.profile)
        self.plan_builder = PlanBuilder(provider, model=model, max_tokens=self.settings.max_tokens_per_call)

    @property
    def max_retries(self) -> int:
        return self.settings.max_retries

    def _log_state(self, state: PipelineState, message: str, attempt: Optional[int] = None, **fields) -> None:
        extra = {"phase": state.value, **fields}
        if attempt is not None:
            extra["attempt"] = attempt
        logger.info(message, extra=extra)

    async def _complete(self, system: str, message: str, responses: List[LLMResponse]) -> LLMResponse:
        response = await self.provider.complete(
            system_prompt=system,
            user_message=message,
            model=self.model,
            max_tokens=self.settings.max_tokens_per_call,
        )
        responses.append(response)
        return response

    async def _generate(self, system: str, message: str, responses: List[LLMResponse]) -> GeneratedOutput:
        """One generation call, plus a single JSON repair call if needed."""
        response = await self._complete(system, message, responses)
        output = parse_output(response.content)
        if output is not None:
            return output

        logger.warning("Generation response did not parse, attempting JSON repair")
        repaired = await self._complete(system, json_repair_prompt(response.content), responses)
        output = parse_output(repaired.content)
        if output is None:
            raise OutputParseError("Failed to parse generated output after JSON repair")
        return output

    async def run(self, request: BuildRequest) -> GeneratedOutput:
        """Execute one build request.

        Returns:
            The final attempt's output with meta stamped

        Raises:
            BrandEnforcementError: If brand resolution is incomplete (no provider call is made)
            OutputParseError: If an attempt's response cannot be parsed even after repair
        """
        started = time.monotonic()
        responses: List[LLMResponse] = []

        decision = enforce(self.resolver.resolve(request.prompt, request.style_key))
        self._log_state(
            PipelineState.RESOLVE_BRAND,
            "brand resolved",
            style_key=decision.style_key,
            source=decision.source.value,
        )

        plan, plan_response = await self.plan_builder.build(request.prompt, decision)
        responses.append(plan_response)
        plan_explanation = explain_plan(plan)
        self._log_state(
            PipelineState.BUILD_PLAN,
            "plan generated",
            components=len(plan.components),
            style_key=plan.style_key,
        )

        system = system_message(plan, brand_injection_prompt(self.profile, decision.style_key))
        base_message = user_prompt(request.prompt, request.existing_files)

        attempt = 0
        repair: Optional[str] = None
        retry_history: List[str] = []

        while True:
            message = base_message if repair is None else f"{base_message}\n\n{repair}"
            self._log_state(
                PipelineState.GENERATE,
                f"generation attempt {attempt + 1}/{self.settings.max_attempts}",
                attempt=attempt + 1,
            )
            output = await self._generate(system, message, responses)

            output = ensure_minimum_files(output)
            self._log_state(PipelineState.NORMALIZE, "output normalized", attempt=attempt + 1, files=len(output.files))

            contract = self.validator.validate(output)
            self._log_state(
                PipelineState.VALIDATE_CONTRACT,
                f"attempt {attempt + 1} {contract_summary(contract)}; {brand_summary(contract)}",
                attempt=attempt + 1,
                violations=len(contract.violations),
                brand_compliant=contract.brand_compliant,
            )
            if not contract.valid:
                if attempt < self.max_retries:
                    attempt += 1
                    retry_history.append(f"Attempt {attempt}: Contract violations - retrying...")
                    logger.warning("Contract violations detected, retrying", extra={"attempt": attempt})
                    repair = contract_repair_prompt(contract.violations)
                    continue
                logger.error("Max retries reached with contract violations", extra={"attempt": attempt + 1})
                output.warnings.extend(f"[{v.rule}] {v.message}" for v in contract.violations)

            quality = score(output)
            self._log_state(
                PipelineState.SCORE,
                f"attempt {attempt + 1} {score_summary(quality)}",
                attempt=attempt + 1,
                score=quality.overall,
            )
            if should_retry(quality, self.settings.quality_pass_score) and attempt < self.max_retries:
                attempt += 1
                retry_history.append(f"Attempt {attempt}: Score {quality.overall}/100 - retrying...")
                logger.warning("Quality score below threshold, retrying", extra={"attempt": attempt})
                repair = score_repair_prompt(quality)
                continue

            break

        output.warnings[:0] = retry_history
        self._finalize(output, decision, plan, plan_explanation, contract, quality, attempt, responses, started)
        self._log_state(
            PipelineState.FINALIZE,
            "build finalized",
            attempt=attempt + 1,
            score=quality.overall,
            brand_compliant=contract.brand_compliant,
        )
        return output

    def _finalize(
        self,
        output: GeneratedOutput,
        decision: StyleDecision,
        plan: BuildPlan,
        plan_explanation: str,
        contract: ContractResult,
        quality: QualityScore,
        attempt: int,
        responses: List[LLMResponse],
        started: float,
    ) -> None:
        explanation = generate_build_explanation(plan, output, quality, self.settings.quality_pass_score)
        last = responses[-1] if responses else None
        output.meta.update({
            "qualityScore": quality.overall,
            "componentCount": quality.component_count,
            "designSystemCompliance": quality.design_system_compliance,
            "buildPlan": plan.to_wire(),
            "planExplanation": plan_explanation,
            "buildExplanation": format_text(explanation),
            "attempts": attempt + 1,
            "brandName": self.profile.brand_name,
            "brandSource": decision.source.value,
            "styleProfile": decision.style_key,
            "brandCompliant": contract.brand_compliant,
            "brandViolations": [v.message for v in contract.brand_violations],
            "model": last.model if last else self.model,
            "provider": self.provider.name,
            "tokens": sum(r.total_tokens for r in responses),
            "duration_ms": int((time.monotonic() - started) * 1000),
        })
