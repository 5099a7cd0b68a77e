"""Prompt construction for the generation calls."""

from typing import List

from contracts import BuildPlan, GeneratedFile, QualityScore

WEAK_DIMENSION_BELOW = 20

OUTPUT_RULES = """CRITICAL OUTPUT RULES:
1. You MUST respond with valid JSON in this exact format:
{
  "summary": "Brief description of what you built",
  "files": [
    {
      "path": "src/App.tsx",
      "content": "file content here"
    }
  ],
  "warnings": ["optional warnings"]
}

2. MINIMUM FILES (return MULTIPLE files, not just App.tsx):
   - src/main.tsx (React mount point)
   - src/App.tsx (main app component OR page shell)
   - src/components/* (at least 2 components for non-trivial apps)
   - src/index.css (Tailwind imports + custom styles if needed)

3. UI CONVENTIONS (non-negotiable):
   - Use Tailwind CSS with consistent spacing on the 8px scale
   - Max width containers with generous padding (px-4 sm:px-6 lg:px-8)
   - Layout: grid-based, responsive, mobile-first
   - Landmarks (header, main, nav, section), aria attributes and focus states
   - Loading, empty and hover states with transitions
   - NEVER ship plain HTML with unstyled lists or raw text blocks
   - ALWAYS compose with components

4. CODE QUALITY:
   - React 18 + TypeScript
   - Functional components with hooks
   - NO placeholder comments or TODOs
   - All JSX must be valid TypeScript React components"""


def _yes_no(flag: bool, detail: str) -> str:
    return f"YES ({detail})" if flag else "NO"


def plan_context(plan: BuildPlan) -> str:
    lines = [
        "BUILD PLAN (follow this structure):",
        f"- Type: {plan.kind.value}",
        f"- Pages: {', '.join(plan.pages)}",
        f"- Layout sections: {' -> '.join(plan.layout_sections)}",
        f"- Components to create: {', '.join(plan.components)}",
        f"- Style profile: {plan.style_key} (ENFORCED BY BRAND)",
        f"- State management: {_yes_no(plan.uses_state, 'use useState/hooks')}",
        f"- Forms: {_yes_no(plan.uses_forms, 'include input validation')}",
        f"- Backend integration: {_yes_no(plan.needs_backend, 'add API calls')}",
    ]
    if plan.uses_routing:
        lines.append("- Routing: YES (use React Router)")
    lines.append("")
    lines.append("IMPORTANT: Follow this build plan exactly. Create all components listed above.")
    return "\n".join(lines)


def system_message(plan: BuildPlan, brand_prompt: str) -> str:
    """System instructions for every generation attempt of a run."""
    return (
        "You are an expert app builder. You build production-ready React apps "
        "with Tailwind CSS and shadcn/ui patterns.\n\n"
        "Your mission: generate a polished, production-ready UI on the first pass.\n\n"
        f"{brand_prompt}\n"
        f"{plan_context(plan)}\n\n"
        f"{OUTPUT_RULES}"
    )


def user_prompt(prompt: str, existing_files: List[GeneratedFile]) -> str:
    """The build request, with any existing files listed for incremental edits."""
    parts = [f"Build this app: {prompt}\n"]
    if existing_files:
        parts.append("Existing files:")
        for f in existing_files:
            parts.append(f"\n--- {f.path} ---\n{f.content}")
        parts.append("\nUpdate or add to these files as needed.\n")
    parts.append("Respond with valid JSON following the schema in the system message.")
    return "\n".join(parts)


def json_repair_prompt(raw: str) -> str:
    return (
        "The following response is not valid JSON. Please extract and return ONLY "
        "the valid JSON object following the output schema:\n\n"
        f"{raw}\n\n"
        "Return only the JSON object, no explanations."
    )


def score_repair_prompt(quality: QualityScore) -> str:
    """Instruction naming each dimension that scored below par."""
    hints = {
        "structure": "Split the UI into more focused components under src/components/ and src/pages/",
        "styling": "Use more Tailwind classes, responsive breakpoints (sm:, md:, lg:) and no inline styles",
        "accessibility": "Use header/main/nav/section landmarks, aria attributes, focus states and <button> for actions",
        "ux": "Add state handling, loading and empty states, transitions and hover states",
    }
    scores = quality.breakdown.model_dump()
    weak = [name for name in hints if scores[name] < WEAK_DIMENSION_BELOW]
    if not weak:
        # Total is low without any single weak dimension
        weak = sorted(hints, key=lambda name: scores[name])[:2]

    lines = [
        f"The generated output scored {quality.overall}/100, below the quality bar. Improve these areas:",
        "",
    ]
    for i, name in enumerate(weak, 1):
        lines.append(f"{i}. {name.upper()} ({scores[name]}/25): {hints[name]}")
    lines.append("")
    lines.append("Regenerate the COMPLETE output. Return the full JSON output with all files.")
    return "\n".join(lines) + "\n"
