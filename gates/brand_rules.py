"""Brand compliance rules.

Identity rules (typography, corners, dark mode) apply only when the
profile declares the matching flag; color-token and unstyled-element
checks apply to every profile.
"""

import re
from typing import Callable, List

from contracts import BrandProfile, BrandValidationResult, BrandViolation, GeneratedOutput

from .corpus import ArtifactCorpus

BrandRule = Callable[[ArtifactCorpus, BrandProfile], List[BrandViolation]]

MAX_HARDCODED_COLORS = 3

HARDCODED_COLOR_RE = re.compile(r"bg-(?:gray|blue|red|green|purple|pink|indigo)-\d00")
UNSTYLED_ELEMENT_RE = re.compile(r"<(?:div|p|h1|h2|h3|button|input|section)(?!\s+className)")
ROUNDED_MARKERS = ("rounded-lg", "rounded-xl", "rounded-full")


def _primary_font_name(profile: BrandProfile) -> str:
    # "'Share Tech Mono', ui-monospace, monospace" -> "Share Tech Mono"
    return profile.typography.font_family.split(",")[0].strip().strip("'\"")


def brand_typography(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    if not profile.monospace_typography:
        return []
    font_name = _primary_font_name(profile)
    markers = ["font-mono", "ui-monospace"]
    if font_name:
        markers.append(font_name)
    if any(m in corpus.ui_text for m in markers):
        return []
    return [BrandViolation(
        rule="BRAND_TYPOGRAPHY",
        message=f"Missing monospace font family required by {profile.brand_name} brand",
        expected=f"font-mono or '{font_name}'",
        actual="No monospace font detected",
    )]


def brand_border_radius(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    if not profile.sharp_corners:
        return []
    if not any(m in corpus.ui_text for m in ROUNDED_MARKERS):
        return []
    return [BrandViolation(
        rule="BRAND_BORDER_RADIUS",
        message=f"Border radius violates {profile.brand_name} sharp design (max rounded-sm)",
        expected="rounded-sm or rounded (0.25rem)",
        actual="rounded-lg, rounded-xl, or rounded-full detected",
    )]


def brand_color_tokens(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    hardcoded = HARDCODED_COLOR_RE.findall(corpus.ui_text)
    if len(hardcoded) <= MAX_HARDCODED_COLORS:
        return []
    return [BrandViolation(
        rule="BRAND_COLOR_TOKENS",
        message="Using hard-coded color classes instead of semantic tokens",
        expected="bg-background, bg-card, bg-primary, bg-accent, bg-muted",
        actual=f"Hard-coded: {', '.join(hardcoded[:3])}...",
    )]


def brand_dark_mode(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    if not profile.dark_by_default:
        return []
    text = corpus.ui_text
    uses_light = "bg-white" in text and "text-black" in text
    uses_dark_tokens = "bg-background" in text or "bg-card" in text
    if not uses_light or uses_dark_tokens:
        return []
    return [BrandViolation(
        rule="BRAND_DARK_MODE",
        message="Output uses light mode but brand requires dark mode default",
        expected="bg-background, text-foreground (dark mode tokens)",
        actual="bg-white, text-black (light mode)",
    )]


def brand_no_unstyled(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    unstyled = UNSTYLED_ELEMENT_RE.findall(corpus.ui_text)
    if not unstyled:
        return []
    return [BrandViolation(
        rule="BRAND_NO_UNSTYLED",
        message="Unstyled HTML elements violate brand design system",
        expected="All elements styled with className",
        actual=f"{len(unstyled)} unstyled elements found",
    )]


BRAND_RULES: List[BrandRule] = [
    brand_typography,
    brand_border_radius,
    brand_color_tokens,
    brand_dark_mode,
    brand_no_unstyled,
]


def check_brand_rules(corpus: ArtifactCorpus, profile: BrandProfile) -> List[BrandViolation]:
    violations: List[BrandViolation] = []
    for rule in BRAND_RULES:
        violations.extend(rule(corpus, profile))
    return violations


def validate_brand(output: GeneratedOutput, profile: BrandProfile) -> BrandValidationResult:
    """Run the brand rules alone against `output`."""
    violations = check_brand_rules(ArtifactCorpus.from_output(output), profile)
    return BrandValidationResult(
        valid=not violations,
        brand_name=profile.brand_name,
        violations=violations,
    )
