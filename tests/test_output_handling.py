"""Tests for output parsing, normalization, prompts and build explanations."""

import json

from contracts import BuildPlan, GeneratedFile, QualityBreakdown, QualityScore
from json_extract import iter_json_objects
from orchestrator import (
    REQUIRED_FILES,
    ensure_minimum_files,
    format_markdown,
    format_text,
    generate_build_explanation,
    json_repair_prompt,
    parse_output,
    score_repair_prompt,
    system_message,
    user_prompt,
)
from planning import fallback_plan


def quality(structure, styling, accessibility, ux):
    breakdown = QualityBreakdown(structure=structure, styling=styling, accessibility=accessibility, ux=ux)
    return QualityScore(
        breakdown=breakdown,
        overall=breakdown.total,
        component_count=3,
        design_system_compliance=styling >= 20,
        layout_depth=2,
    )


class TestJsonExtract:
    """Test candidate extraction order."""

    def test_yields_only_objects(self):
        assert list(iter_json_objects("[1, 2]")) == []
        assert list(iter_json_objects('{"a": 1}')) == [{"a": 1}]

    def test_fenced_block_yielded_once(self):
        raw = 'Output:\n```json\n{"a": 1}\n```'
        assert list(iter_json_objects(raw)) == [{"a": 1}]


class TestParseOutput:
    """Test output shape validation."""

    def test_direct(self):
        raw = json.dumps({"summary": "s", "files": [{"path": "src/App.tsx", "content": "x"}], "warnings": ["w"]})
        output = parse_output(raw)
        assert output.summary == "s"
        assert output.paths == ["src/App.tsx"]
        assert output.warnings == ["w"]

    def test_fenced(self):
        body = json.dumps({"summary": "s", "files": [{"path": "a.tsx", "content": ""}]})
        assert parse_output(f"```\n{body}\n```") is not None

    def test_provider_meta_is_dropped(self):
        raw = json.dumps({"summary": "s", "files": [{"path": "a.tsx", "content": ""}], "meta": {"qualityScore": 100}})
        assert parse_output(raw).meta == {}

    def test_rejects_bad_shapes(self):
        assert parse_output(json.dumps({"summary": "s", "files": []})) is None
        assert parse_output(json.dumps({"summary": 1, "files": [{"path": "a", "content": ""}]})) is None
        assert parse_output(json.dumps({"summary": "s", "files": [{"path": "a"}]})) is None
        assert parse_output(json.dumps({"summary": "s", "files": [{"path": "", "content": ""}]})) is None
        assert parse_output("not json") is None


class TestNormalizer:
    """Test the minimum-files annotation."""

    def test_complete_output_untouched(self, compliant_output):
        before = list(compliant_output.warnings)
        assert ensure_minimum_files(compliant_output) is compliant_output
        assert compliant_output.warnings == before

    def test_one_warning_names_every_missing_path(self, make_output):
        output = make_output({"src/App.tsx": ""})
        ensure_minimum_files(output)
        assert output.warnings == ["Missing required files: src/main.tsx, src/index.css"]
        assert output.paths == ["src/App.tsx"]

    def test_required_paths(self):
        assert REQUIRED_FILES == ("src/main.tsx", "src/App.tsx", "src/index.css")


class TestPrompts:
    """Test generation prompt construction."""

    def test_system_message_contains_plan_and_brand(self):
        plan = fallback_plan("colorful")
        message = system_message(plan, "## BRAND DESIGN SYSTEM (Test)")
        assert "## BRAND DESIGN SYSTEM (Test)" in message
        assert "- Style profile: colorful (ENFORCED BY BRAND)" in message
        assert "- Components to create: Header.tsx, Main.tsx, Footer.tsx" in message
        assert "Routing" not in message.split("CRITICAL OUTPUT RULES")[0]

    def test_user_prompt_lists_existing_files(self):
        prompt = user_prompt("Add pricing", [GeneratedFile(path="src/App.tsx", content="OLD")])
        assert prompt.startswith("Build this app: Add pricing")
        assert "--- src/App.tsx ---\nOLD" in prompt
        assert "Update or add to these files as needed." in prompt

    def test_user_prompt_without_existing_files(self):
        assert "Existing files" not in user_prompt("Build a blog", [])

    def test_json_repair_prompt_embeds_raw(self):
        assert "BROKEN{" in json_repair_prompt("BROKEN{")

    def test_score_repair_prompt_names_weak_dimensions(self):
        prompt = score_repair_prompt(quality(12, 22, 3, 21))
        assert "scored 58/100" in prompt
        assert "1. STRUCTURE (12/25)" in prompt
        assert "2. ACCESSIBILITY (3/25)" in prompt
        assert "STYLING" not in prompt

    def test_score_repair_prompt_without_weak_dimension(self):
        prompt = score_repair_prompt(quality(20, 20, 21, 22))
        assert "STRUCTURE" in prompt and "STYLING" in prompt


class TestBuildExplanation:
    """Test the operational build explanation."""

    def test_passing_build_has_no_next_steps(self, compliant_output):
        plan = BuildPlan.model_validate({
            "type": "web", "pages": ["Home"], "layout": ["Hero", "Footer"],
            "components": ["Hero.tsx", "Footer.tsx"], "styleProfile": "dark-saas",
            "stateUsage": True, "forms": True, "backendRequired": False,
        })
        explanation = generate_build_explanation(plan, compliant_output, quality(21, 22, 25, 25))
        assert explanation.summary == "Built web application with 2 components using dark saas design system."
        assert "- 10 files generated" in explanation.structure
        assert "- Layout: Hero -> Footer" in explanation.structure
        assert "- Includes state management" in explanation.structure
        assert "- Includes form handling" in explanation.structure
        assert "API integration" not in explanation.structure
        assert explanation.quality_notes.startswith("Quality score: 93/100")
        assert explanation.next_steps is None
        assert "Next Steps" not in format_markdown(explanation)

    def test_low_score_suggests_per_weak_dimension(self, make_output):
        explanation = generate_build_explanation(
            fallback_plan("minimal"), make_output({"src/App.tsx": ""}), quality(12, 9, 21, 0),
        )
        assert explanation.next_steps == (
            "Suggested improvements:\n"
            "1. Consider refactoring into smaller components\n"
            "2. Add responsive breakpoints and design system compliance\n"
            "3. Add loading states and user feedback"
        )
        text = format_text(explanation)
        assert text.endswith(explanation.next_steps)
        markdown = format_markdown(explanation)
        assert markdown.startswith("## Built web application")
        assert "### Quality Metrics" in markdown
        assert "### Next Steps" in markdown

    def test_next_steps_follow_pass_score(self, make_output):
        output = make_output({"src/App.tsx": ""})
        scored = quality(20, 19, 20, 16)
        assert generate_build_explanation(fallback_plan("minimal"), output, scored, pass_score=70).next_steps is None
        assert generate_build_explanation(fallback_plan("minimal"), output, scored).next_steps == (
            "Suggested improvements:\n"
            "1. Add responsive breakpoints and design system compliance\n"
            "2. Add loading states and user feedback"
        )
