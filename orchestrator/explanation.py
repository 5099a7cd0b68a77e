"""Build explanation: a calm, operational account of what was built."""

from typing import Optional

from pydantic import BaseModel

from contracts import BuildPlan, GeneratedOutput, QualityScore
from scoring import DEFAULT_PASS_SCORE

WEAK_DIMENSION_BELOW = 20

SUGGESTIONS = (
    ("structure", "Consider refactoring into smaller components"),
    ("styling", "Add responsive breakpoints and design system compliance"),
    ("accessibility", "Improve semantic HTML and ARIA attributes"),
    ("ux", "Add loading states and user feedback"),
)


class BuildExplanation(BaseModel):
    summary: str
    structure: str
    quality_notes: str
    next_steps: Optional[str] = None


def generate_build_explanation(
    plan: BuildPlan,
    output: GeneratedOutput,
    quality: QualityScore,
    pass_score: int = DEFAULT_PASS_SCORE,
) -> BuildExplanation:
    """Describe the build; next steps are suggested only below `pass_score`."""
    count = len(plan.components)
    style = plan.style_key.replace("-", " ")
    summary = f"Built {plan.kind.value} application with {count} components using {style} design system."

    structure_lines = [
        "Application structure:",
        f"- {len(output.files)} files generated",
        f"- {count} React components",
    ]
    if plan.layout_sections:
        structure_lines.append(f"- Layout: {' -> '.join(plan.layout_sections)}")
    if plan.uses_state:
        structure_lines.append("- Includes state management")
    if plan.uses_forms:
        structure_lines.append("- Includes form handling")
    if plan.needs_backend:
        structure_lines.append("- Configured for API integration")

    b = quality.breakdown
    quality_notes = "\n".join([
        f"Quality score: {quality.overall}/100",
        f"- Structure: {b.structure}/25",
        f"- Styling: {b.styling}/25",
        f"- Accessibility: {b.accessibility}/25",
        f"- UX: {b.ux}/25",
    ])

    next_steps = None
    if quality.overall < pass_score:
        scores = b.model_dump()
        suggestions = [text for name, text in SUGGESTIONS if scores[name] < WEAK_DIMENSION_BELOW]
        if suggestions:
            next_steps = "Suggested improvements:\n" + "\n".join(
                f"{i}. {s}" for i, s in enumerate(suggestions, 1)
            )

    return BuildExplanation(
        summary=summary,
        structure="\n".join(structure_lines),
        quality_notes=quality_notes,
        next_steps=next_steps,
    )


def format_text(explanation: BuildExplanation) -> str:
    text = f"{explanation.summary}\n\n{explanation.structure}\n\n{explanation.quality_notes}"
    if explanation.next_steps:
        text += f"\n\n{explanation.next_steps}"
    return text


def format_markdown(explanation: BuildExplanation) -> str:
    md = f"## {explanation.summary}\n\n{explanation.structure}\n\n### Quality Metrics\n\n{explanation.quality_notes}"
    if explanation.next_steps:
        md += f"\n\n### Next Steps\n\n{explanation.next_steps}"
    return md
