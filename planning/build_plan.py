"""Build plan prompt, validation, parsing and explanation.

The plan is advisory: a malformed or invalid plan from the provider is
replaced by `fallback_plan` instead of failing the run.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from brand import STYLE_PROFILES
from contracts import AppKind, BuildPlan, StyleKey
from json_extract import iter_json_objects

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "type", "pages", "layout", "components", "styleProfile",
    "stateUsage", "forms", "backendRequired",
)
VALID_KINDS = {k.value for k in AppKind}
VALID_STYLE_KEYS = {k.value for k in StyleKey}
MIN_PLAN_COMPONENTS = 2


def build_plan_prompt(style_key: Optional[str] = None) -> str:
    """Instruction asking the provider for a JSON build plan pinned to `style_key`."""
    required_style = style_key or StyleKey.DARK_SAAS.value
    return f"""
CRITICAL: Before generating any code, you MUST first create a Build Plan.

Respond with ONLY a JSON object in this exact format:

{{
  "type": "web",
  "pages": ["Home"],
  "layout": ["Hero", "FeatureGrid", "CTA", "Footer"],
  "components": ["Hero.tsx", "FeatureCard.tsx", "CTA.tsx", "Footer.tsx"],
  "styleProfile": "{required_style}",
  "stateUsage": false,
  "forms": false,
  "backendRequired": false,
  "routing": false
}}

RULES:
1. type: "web" for web apps, "mobile" for mobile apps
2. pages: List of page names (usually just ["Home"] for single-page apps)
3. layout: Top-level layout sections in order (Hero, Features, Pricing, CTA, Footer, etc.)
4. components: List of component filenames (include .tsx extension), at least {MIN_PLAN_COMPONENTS}
5. styleProfile: MUST be "{required_style}" (ENFORCED, NON-NEGOTIABLE)
6. stateUsage: true if app needs useState/state management
7. forms: true if app has input forms
8. backendRequired: true if app needs API calls
9. routing: true if multi-page app with React Router

Respond with ONLY the JSON, no explanation, no markdown code blocks.
"""


def validate_plan(candidate: Any) -> bool:
    """Check a raw (wire-shaped) plan candidate. All checks must hold."""
    if not isinstance(candidate, dict):
        return False

    for field in REQUIRED_FIELDS:
        if field not in candidate:
            logger.debug("Build plan missing required field: %s", field)
            return False

    if not isinstance(candidate["type"], str) or candidate["type"] not in VALID_KINDS:
        logger.debug("Invalid plan type: %r", candidate["type"])
        return False

    for field in ("pages", "layout"):
        value = candidate[field]
        if not isinstance(value, list) or len(value) == 0:
            logger.debug("Plan %s must be a non-empty list", field)
            return False

    components = candidate["components"]
    if not isinstance(components, list) or len(components) < MIN_PLAN_COMPONENTS:
        logger.debug("Plan components must have at least %d entries", MIN_PLAN_COMPONENTS)
        return False

    style = candidate["styleProfile"]
    if not isinstance(style, str) or style not in VALID_STYLE_KEYS:
        logger.debug("Invalid plan styleProfile: %r", candidate["styleProfile"])
        return False

    return True


def parse_plan(raw: str) -> Optional[BuildPlan]:
    """Parse and validate a plan from provider text. Returns None if nothing valid is found."""
    for data in iter_json_objects(raw):
        if not validate_plan(data):
            continue
        try:
            return BuildPlan.model_validate(data)
        except ValidationError as e:
            logger.debug("Plan candidate rejected by schema: %s", e)
    return None


def fallback_plan(style_key: str) -> BuildPlan:
    """Minimal plan used when the provider's plan is unusable."""
    return BuildPlan(
        kind=AppKind.WEB,
        pages=["Home"],
        layout_sections=["Header", "Main", "Footer"],
        components=["Header.tsx", "Main.tsx", "Footer.tsx"],
        style_key=style_key,
        uses_state=False,
        uses_forms=False,
        needs_backend=False,
        uses_routing=False,
    )


def style_label(style_key: str) -> str:
    option = STYLE_PROFILES.get(style_key)
    if option is not None and option.value is not None:
        return option.label
    return style_key.replace("-", " ")


def explain_plan(plan: BuildPlan) -> str:
    """Human-readable explanation of what the plan will build."""
    count = len(plan.components)
    clauses = ""
    if plan.uses_routing:
        clauses += f" with {len(plan.pages)} pages"
    if plan.uses_state:
        clauses += " with state management"
    if plan.uses_forms:
        clauses += " and user input forms"
    if plan.needs_backend:
        clauses += " connected to an API"

    lines = [f"I'll build a {style_label(plan.style_key)} {plan.kind.value} app{clauses}.", ""]
    lines.append("**Layout Structure:**")
    lines.extend(f"{i}. {section}" for i, section in enumerate(plan.layout_sections, 1))
    shown = ", ".join(plan.components[:3])
    more = ", ..." if count > 3 else ""
    lines.append("")
    lines.append(f"**Components:** {count} components ({shown}{more})")
    return "\n".join(lines) + "\n"
