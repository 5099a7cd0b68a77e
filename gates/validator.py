"""Contract Validator: hard rules every generated app must satisfy.

Any violation rejects the attempt. Brand violations are folded into the
same result so a single repair prompt covers both.
"""

from typing import List, Union

from contracts import (
    BrandProfile,
    BrandValidationResult,
    BrandViolation,
    ContractResult,
    GeneratedOutput,
    Violation,
)

from .brand_rules import check_brand_rules
from .contract_rules import check_general_rules
from .corpus import ArtifactCorpus


def _fold_brand_violation(bv: BrandViolation) -> Violation:
    return Violation(
        rule=bv.rule,
        severity=bv.severity,
        message=f"BRAND VIOLATION: {bv.message}",
        remedy=f"Expected: {bv.expected}. Actual: {bv.actual}",
    )


class ContractValidator:
    """Validates outputs against the general rules plus a brand profile."""

    def __init__(self, profile: BrandProfile):
        self.profile = profile

    def validate(self, output: GeneratedOutput) -> ContractResult:
        """Evaluate every rule against `output`. Pure; same output gives the same result."""
        corpus = ArtifactCorpus.from_output(output)
        violations = check_general_rules(corpus)
        brand_violations = check_brand_rules(corpus, self.profile)
        violations.extend(_fold_brand_violation(bv) for bv in brand_violations)
        return ContractResult(
            valid=not violations,
            violations=violations,
            brand_compliant=not brand_violations,
            brand_name=self.profile.brand_name,
        )


def contract_repair_prompt(violations: List[Violation]) -> str:
    """Instruction listing each violation with its fix."""
    if not violations:
        return ""
    lines = ["The generated output violates quality contract rules. You MUST fix these issues:", ""]
    for i, v in enumerate(violations, 1):
        lines.append(f"{i}. {v.rule}: {v.message}")
        lines.append(f"   FIX: {v.remedy}")
        lines.append("")
    lines.append("CRITICAL: Fix ALL violations and regenerate the COMPLETE output.")
    lines.append("Return the full corrected JSON output with all files.")
    return "\n".join(lines) + "\n"


def brand_repair_prompt(violations: List[BrandViolation], profile: BrandProfile) -> str:
    """Brand-only repair instruction, with the profile's required fixes."""
    if not violations:
        return ""
    lines = [f"CRITICAL: Output violates {profile.brand_name} brand requirements.", "", "BRAND VIOLATIONS:"]
    for i, v in enumerate(violations, 1):
        lines.append(f"{i}. {v.rule}: {v.message}")
        lines.append(f"   Expected: {v.expected}")
        lines.append(f"   Actual: {v.actual}")
        lines.append("")

    fixes = ["Use only semantic color tokens (bg-background, bg-card, bg-primary, bg-accent, bg-muted)"]
    if profile.monospace_typography:
        fixes.append("Apply monospace font (font-mono class) to all text")
    if profile.sharp_corners:
        fixes.append("Use sharp borders only (rounded-sm max, NO rounded-lg/xl/full)")
    if profile.dark_by_default:
        fixes.append("Ensure dark mode by default (bg-background, text-foreground)")
    fixes.append("Add className to ALL HTML elements")

    lines.append("REQUIRED FIXES:")
    lines.extend(f"{i}. {fix}" for i, fix in enumerate(fixes, 1))
    lines.append("")
    lines.append("Return the COMPLETE corrected output with ALL brand violations fixed.")
    return "\n".join(lines) + "\n"


def _plural(n: int) -> str:
    return "violation" if n == 1 else "violations"


def contract_summary(result: ContractResult) -> str:
    if result.valid:
        return "Quality contract: PASS (all rules satisfied)"
    n = len(result.violations)
    return f"Quality contract: FAIL ({n} {_plural(n)})"


def brand_summary(result: Union[BrandValidationResult, ContractResult]) -> str:
    """One-line brand verdict from a brand-only or a full contract result."""
    if isinstance(result, ContractResult):
        valid, n = result.brand_compliant, len(result.brand_violations)
    else:
        valid, n = result.valid, len(result.violations)
    if valid:
        return f"Brand validation: PASS ({result.brand_name} compliant)"
    return f"Brand validation: FAIL ({n} {_plural(n)})"
