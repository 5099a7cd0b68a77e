"""Tests for the BuildPipeline retry orchestration."""

import asyncio
import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from config import Settings
from contracts import BuildRequest, GeneratedFile, StyleDecision, StyleSource
from errors import BrandEnforcementError, OutputParseError
from gates import ContractValidator
from orchestrator import BuildPipeline, PipelineState, parse_output
from providers import MockProvider
from providers.mock_provider import mock_output_payload
from scoring import score

META_KEYS = {
    "qualityScore", "componentCount", "designSystemCompliance", "buildPlan",
    "planExplanation", "buildExplanation", "attempts", "brandName", "brandSource",
    "styleProfile", "brandCompliant", "brandViolations", "model", "provider",
    "tokens", "duration_ms",
}

INLINE_STYLED = {"summary": "inline", "files": [{"path": "src/App.tsx", "content": '<div style={{color: "red"}}>x</div>'}]}
UNSTYLED = {"summary": "unstyled", "files": [{"path": "src/App.tsx", "content": "<div>hi</div>"}]}


@pytest.fixture
def test_settings():
    return Settings(max_retries=2, quality_pass_score=80)


@pytest.fixture
def scripted(respond):
    """Provider whose complete() returns the given contents in order."""
    def _scripted(*contents):
        provider = MagicMock()
        provider.name = "scripted"
        provider.complete = AsyncMock(side_effect=[
            c if isinstance(c, BaseException) else respond(c) for c in contents
        ])
        return provider
    return _scripted


def user_messages(provider):
    return [c.kwargs["user_message"] for c in provider.complete.call_args_list]


class TestHappyPath:
    """Test runs that pass on the first attempt."""

    @pytest.mark.asyncio
    async def test_mock_provider_single_attempt(self, test_settings):
        provider = MockProvider()
        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="Build a task dashboard"))

        assert provider.calls == 2
        assert set(output.meta) == META_KEYS
        assert output.meta["attempts"] == 1
        assert output.meta["qualityScore"] >= 80
        assert output.meta["brandCompliant"] is True
        assert output.meta["brandViolations"] == []
        assert output.meta["brandName"] == "BuildGate"
        assert output.meta["brandSource"] == "default"
        assert output.meta["styleProfile"] == "dark-saas"
        assert output.meta["provider"] == "mock"
        assert output.meta["buildPlan"]["type"] == "web"
        assert output.meta["planExplanation"].startswith("I'll build a Dark SaaS web app")
        assert output.meta["buildExplanation"].startswith("Built web application with 6 components")
        assert not any(w.startswith("Attempt") for w in output.warnings)

    @pytest.mark.asyncio
    async def test_colorful_prompt_end_to_end(self, test_settings):
        output = await BuildPipeline(MockProvider(), settings=test_settings).run(
            BuildRequest(prompt="Build a colorful dashboard")
        )
        # The provider's own plan says dark-saas
        assert output.meta["styleProfile"] == "colorful"
        assert output.meta["buildPlan"]["styleProfile"] == "colorful"
        assert output.meta["brandSource"] == "user-implicit"

    @pytest.mark.asyncio
    async def test_explicit_style_selection(self, test_settings):
        output = await BuildPipeline(MockProvider(), settings=test_settings).run(
            BuildRequest(prompt="Build a colorful dashboard", style_key="minimal")
        )
        assert output.meta["styleProfile"] == "minimal"
        assert output.meta["brandSource"] == "user-explicit"

    @pytest.mark.asyncio
    async def test_injected_profile(self, profile, test_settings):
        acme = profile.model_copy(update={"brand_name": "Acme"})
        output = await BuildPipeline(MockProvider(), profile=acme, settings=test_settings).run(
            BuildRequest(prompt="Build a CRM")
        )
        assert output.meta["brandName"] == "Acme"

    @pytest.mark.asyncio
    async def test_existing_files_reach_the_generator(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, mock_output_payload("x"))
        request = BuildRequest(
            prompt="Add a pricing section",
            existing_files=[GeneratedFile(path="src/App.tsx", content="EXISTING APP")],
        )
        await BuildPipeline(provider, settings=test_settings).run(request)
        assert "--- src/App.tsx ---\nEXISTING APP" in user_messages(provider)[1]

    @pytest.mark.asyncio
    async def test_token_and_model_provenance(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, mock_output_payload("x"))
        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))
        assert output.meta["tokens"] == 60
        assert output.meta["model"] == "test-model"
        assert output.meta["provider"] == "scripted"
        assert output.meta["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_concurrent_runs_are_independent(self, test_settings):
        pipeline = BuildPipeline(MockProvider(), settings=test_settings)
        dark, colorful = await asyncio.gather(
            pipeline.run(BuildRequest(prompt="Build a CRM")),
            pipeline.run(BuildRequest(prompt="Build a colorful CRM")),
        )
        assert dark.meta["styleProfile"] == "dark-saas"
        assert colorful.meta["styleProfile"] == "colorful"


class TestContractRetries:
    """Test the bounded contract retry loop."""

    @pytest.mark.asyncio
    async def test_retry_bound_and_last_attempt_violations(self, scripted, plan_payload, profile, test_settings):
        provider = scripted(plan_payload, INLINE_STYLED, INLINE_STYLED, UNSTYLED)

        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        # One plan call plus exactly three generation calls
        assert provider.complete.await_count == 4
        assert output.summary == "unstyled"
        assert output.meta["attempts"] == 3
        assert output.meta["brandCompliant"] is False
        assert output.warnings[:2] == [
            "Attempt 1: Contract violations - retrying...",
            "Attempt 2: Contract violations - retrying...",
        ]
        last = ContractValidator(profile).validate(parse_output(json.dumps(UNSTYLED)))
        expected = [f"[{v.rule}] {v.message}" for v in last.violations]
        assert output.warnings[-len(expected):] == expected
        assert not any(w.startswith("[NO_INLINE_STYLES]") for w in output.warnings)
        assert "Missing required files: src/main.tsx, src/index.css" in output.warnings
        assert output.meta["brandViolations"] == [v.message for v in last.brand_violations]

    @pytest.mark.asyncio
    async def test_repair_prompt_sent_on_retry(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, UNSTYLED, mock_output_payload("x"))

        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        messages = user_messages(provider)
        assert "violates quality contract rules" not in messages[1]
        assert "violates quality contract rules" in messages[2]
        assert "NO_UNSTYLED_HTML" in messages[2]
        assert output.meta["attempts"] == 2
        assert output.meta["brandCompliant"] is True
        assert output.warnings[0] == "Attempt 1: Contract violations - retrying..."

    @pytest.mark.asyncio
    async def test_no_retries_configured(self, scripted, plan_payload):
        provider = scripted(plan_payload, UNSTYLED)
        settings = Settings(max_retries=0)

        output = await BuildPipeline(provider, settings=settings).run(BuildRequest(prompt="app"))

        assert provider.complete.await_count == 2
        assert output.meta["attempts"] == 1
        assert any(w.startswith("[NO_UNSTYLED_HTML]") for w in output.warnings)


class TestScoreRetries:
    """Test the low-score retry path."""

    @pytest.mark.asyncio
    async def test_low_score_triggers_retry(self, scripted, plan_payload, minimal_valid_output, test_settings):
        low = minimal_valid_output.model_dump(mode="json")
        provider = scripted(plan_payload, low, mock_output_payload("x"))

        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        expected_score = score(minimal_valid_output).overall
        assert output.warnings[0] == f"Attempt 1: Score {expected_score}/100 - retrying..."
        assert "below the quality bar" in user_messages(provider)[2]
        assert output.meta["attempts"] == 2
        assert output.meta["qualityScore"] >= 80

    @pytest.mark.asyncio
    async def test_low_score_finalized_when_exhausted(self, scripted, plan_payload, minimal_valid_output, test_settings):
        low = minimal_valid_output.model_dump(mode="json")
        provider = scripted(plan_payload, low, low, low)

        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        assert provider.complete.await_count == 4
        assert output.meta["attempts"] == 3
        assert output.meta["qualityScore"] == score(minimal_valid_output).overall
        assert output.meta["brandCompliant"] is True
        assert [w for w in output.warnings if w.startswith("Attempt")] == [
            f"Attempt 1: Score {output.meta['qualityScore']}/100 - retrying...",
            f"Attempt 2: Score {output.meta['qualityScore']}/100 - retrying...",
        ]
        assert "Suggested improvements" in output.meta["buildExplanation"]


class TestFailures:
    """Test fatal paths: parse, provider and precondition failures."""

    @pytest.mark.asyncio
    async def test_json_repair_recovers(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, "Sorry, here you go: not json", mock_output_payload("x"))

        output = await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        assert provider.complete.await_count == 3
        assert user_messages(provider)[2].startswith("The following response is not valid JSON")
        assert output.meta["attempts"] == 1

    @pytest.mark.asyncio
    async def test_unparseable_after_repair_aborts(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, "not json", "still not json")

        with pytest.raises(OutputParseError):
            await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

    @pytest.mark.asyncio
    async def test_network_failure_during_generation_propagates(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, ConnectionError("connection reset"))

        with pytest.raises(ConnectionError, match="connection reset"):
            await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

    @pytest.mark.asyncio
    async def test_network_failure_on_retry_propagates(self, scripted, plan_payload, test_settings):
        provider = scripted(plan_payload, UNSTYLED, TimeoutError("timed out"))

        with pytest.raises(TimeoutError):
            await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

    @pytest.mark.asyncio
    async def test_brand_enforcement_blocks_generation(self, scripted, test_settings):
        provider = scripted()
        broken = StyleDecision(profile=None, source=StyleSource.DEFAULT, style_key="dark-saas")

        with patch("orchestrator.pipeline.BrandResolver.resolve", return_value=broken):
            with pytest.raises(BrandEnforcementError):
                await BuildPipeline(provider, settings=test_settings).run(BuildRequest(prompt="app"))

        provider.complete.assert_not_awaited()


class TestPipelineState:
    """Test the state enum and logged transitions."""

    def test_state_order(self):
        assert [s.name for s in PipelineState] == [
            "RESOLVE_BRAND", "BUILD_PLAN", "GENERATE", "NORMALIZE",
            "VALIDATE_CONTRACT", "SCORE", "FINALIZE",
        ]

    @pytest.mark.asyncio
    async def test_phase_transitions_are_logged(self, caplog, test_settings):
        with caplog.at_level("INFO", logger="orchestrator.pipeline"):
            await BuildPipeline(MockProvider(), settings=test_settings).run(BuildRequest(prompt="app"))
        phases = [r.phase for r in caplog.records if hasattr(r, "phase")]
        assert phases == [s.value for s in PipelineState]

    @pytest.mark.asyncio
    async def test_summaries_are_logged(self, caplog, test_settings):
        with caplog.at_level("INFO", logger="orchestrator.pipeline"):
            await BuildPipeline(MockProvider(), settings=test_settings).run(BuildRequest(prompt="app"))
        messages = {r.phase: r.getMessage() for r in caplog.records if hasattr(r, "phase")}
        assert messages["generate"] == "generation attempt 1/3"
        assert messages["validate_contract"] == (
            "attempt 1 Quality contract: PASS (all rules satisfied); Brand validation: PASS (BuildGate compliant)"
        )
        assert messages["score"].startswith("attempt 1 Quality Score: ")


class TestSettingsFlow:
    """Test that injected settings reach every call and the explanation."""

    @pytest.mark.asyncio
    async def test_token_limit_applies_to_plan_call(self, scripted, plan_payload):
        provider = scripted(plan_payload, mock_output_payload("x"))
        await BuildPipeline(provider, settings=Settings(max_tokens_per_call=1234)).run(BuildRequest(prompt="app"))
        assert [c.kwargs["max_tokens"] for c in provider.complete.call_args_list] == [1234, 1234]

    @pytest.mark.asyncio
    async def test_lower_pass_score_accepts_without_next_steps(self, scripted, plan_payload, minimal_valid_output):
        provider = scripted(plan_payload, minimal_valid_output.model_dump(mode="json"))
        settings = Settings(quality_pass_score=20)

        output = await BuildPipeline(provider, settings=settings).run(BuildRequest(prompt="app"))

        assert output.meta["attempts"] == 1
        assert output.meta["qualityScore"] == score(minimal_valid_output).overall
        assert "Suggested improvements" not in output.meta["buildExplanation"]
