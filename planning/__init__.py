"""Build plan generation and validation."""

from .build_plan import (
    build_plan_prompt,
    explain_plan,
    fallback_plan,
    parse_plan,
    validate_plan,
)
from .builder import PlanBuilder

__all__ = [
    "PlanBuilder",
    "build_plan_prompt",
    "explain_plan",
    "fallback_plan",
    "parse_plan",
    "validate_plan",
]
