"""Brand resolution: turns a prompt and optional style selection into a StyleDecision.

Priority (first match wins):
1. Explicit style selection (anything but "auto")
2. Light/minimal keywords in the prompt
3. Colorful keywords
4. Monochrome keywords
5. The profile's default style
"""

from typing import Optional, Tuple

from contracts import AUTO_STYLE, BrandProfile, StyleDecision, StyleKey, StyleSource
from errors import BrandEnforcementError


class BrandResolver:
    """Resolves the style decision for a run against an injected profile.

    Pure and deterministic: the same prompt and selection always yield the
    same decision.
    """

    LIGHT_KEYWORDS: Tuple[str, ...] = (
        "light theme", "light mode", "white background", "minimal", "clean and simple",
    )
    COLORFUL_KEYWORDS: Tuple[str, ...] = (
        "colorful", "vibrant", "playful", "bright colors", "rainbow",
    )
    MONOCHROME_KEYWORDS: Tuple[str, ...] = (
        "black and white", "b&w", "monochrome", "grayscale",
    )

    def __init__(self, profile: BrandProfile):
        self.profile = profile

    def _keyword_rules(self):
        return (
            (self.LIGHT_KEYWORDS, StyleKey.LIGHT_SAAS),
            (self.COLORFUL_KEYWORDS, StyleKey.COLORFUL),
            (self.MONOCHROME_KEYWORDS, StyleKey.MINIMAL),
        )

    def resolve(self, prompt: str, explicit_style: Optional[str] = None) -> StyleDecision:
        """Resolve the style decision for `prompt`.

        Args:
            prompt: Free-text build request
            explicit_style: Style chosen by the user; None or "auto" means detect

        Returns:
            StyleDecision sharing this resolver's profile
        """
        if explicit_style and explicit_style != AUTO_STYLE:
            return StyleDecision(
                profile=self.profile,
                source=StyleSource.USER_EXPLICIT,
                style_key=explicit_style,
                override_detected=True,
            )

        prompt_lower = (prompt or "").lower()
        for keywords, style_key in self._keyword_rules():
            if any(kw in prompt_lower for kw in keywords):
                return StyleDecision(
                    profile=self.profile,
                    source=StyleSource.USER_IMPLICIT,
                    style_key=style_key.value,
                    override_detected=True,
                )

        return StyleDecision(
            profile=self.profile,
            source=StyleSource.DEFAULT,
            style_key=self.profile.default_style.value,
            override_detected=False,
        )


def enforce(decision: Optional[StyleDecision]) -> StyleDecision:
    """Fail-fast precondition checked before any generation work.

    Returns the decision unchanged when complete.

    Raises:
        BrandEnforcementError: If the decision, its profile or its style key is missing
    """
    if decision is None:
        raise BrandEnforcementError("CRITICAL: Brand resolution failed. All builds require a brand profile.")
    if decision.profile is None:
        raise BrandEnforcementError("CRITICAL: Brand profile is missing. Cannot proceed without brand enforcement.")
    if not decision.style_key:
        raise BrandEnforcementError("CRITICAL: Style profile is missing. Cannot proceed without style enforcement.")
    return decision


def source_label(source: StyleSource) -> str:
    """Human-readable label for a decision's provenance."""
    return {
        StyleSource.DEFAULT: "Brand Default",
        StyleSource.USER_EXPLICIT: "User Selected",
        StyleSource.USER_IMPLICIT: "Detected from Prompt",
    }[source]
