"""Brand profiles and the design-system prompt injected into generation.

Profiles are immutable values. Callers build one with
`default_brand_profile()` (or their own) and pass it down; nothing here
holds run state.
"""

from typing import Dict, Optional

from contracts import (
    AUTO_STYLE,
    BrandProfile,
    ColorTokens,
    ComponentPatterns,
    Spacing,
    StyleKey,
    StyleProfileOption,
    Typography,
)


def default_brand_profile() -> BrandProfile:
    """The canonical deployment profile: dark, sharp-cornered, monospace."""
    return BrandProfile(
        brand_name="BuildGate",
        version="1",
        default_style=StyleKey.DARK_SAAS,
        typography=Typography(
            font_family="'Share Tech Mono', ui-monospace, monospace",
            heading_scale={
                "h1": "text-4xl lg:text-5xl font-bold tracking-tight",
                "h2": "text-2xl lg:text-3xl font-bold tracking-tight",
                "h3": "text-xl lg:text-2xl font-semibold tracking-tight",
                "h4": "text-lg font-semibold",
            },
            body_text="text-base lg:text-lg text-muted-foreground antialiased",
            muted_text="text-sm text-muted-foreground",
        ),
        spacing=Spacing(
            scale=["8px", "12px", "16px", "24px", "32px", "48px", "64px", "96px"],
            container_padding="px-4 sm:px-6 lg:px-8",
            section_spacing="py-12 lg:py-16",
        ),
        colors=ColorTokens(
            background="hsl(220 15% 5%)",
            foreground="hsl(0 0% 95%)",
            primary="hsl(0 0% 100%)",
            accent="hsl(232 50% 70%)",
            muted="hsl(220 10% 15%)",
            border="hsl(220 10% 18%)",
        ),
        components=ComponentPatterns(
            cards="bg-card border border-border rounded-sm shadow-md hover:shadow-lg transition-shadow duration-200",
            primary_button="px-6 py-3 bg-primary text-primary-foreground rounded-sm font-medium hover:opacity-90 transition-opacity duration-200 shadow-sm",
            secondary_button="px-6 py-3 bg-secondary text-secondary-foreground rounded-sm font-medium hover:bg-secondary/80 transition-colors duration-200",
            inputs="w-full px-4 py-2 bg-input border border-border rounded-sm focus:outline-none focus:ring-2 focus:ring-ring",
        ),
        rules=[
            "NEVER output unstyled HTML - all elements must have Tailwind classes",
            "Use monospace font family (Share Tech Mono) for all text",
            "Maintain sharp border-radius (rounded-sm, 0.25rem max)",
            "Apply generous spacing using 8px grid scale",
            "Include responsive breakpoints (sm:, md:, lg:) for all layouts",
            "Use dark mode by default unless user requests light theme",
            "Use semantic color tokens (bg-background, bg-card, bg-primary) instead of palette colors",
            "Ensure all interactive elements have hover and focus states",
        ],
        monospace_typography=True,
        sharp_corners=True,
        dark_by_default=True,
    )


# Style selector catalogue; "auto" defers to resolution
STYLE_PROFILES: Dict[str, StyleProfileOption] = {
    AUTO_STYLE: StyleProfileOption(
        label="Auto (Brand Default)",
        description="Dark, sharp, monospace",
        value=None,
    ),
    StyleKey.DARK_SAAS.value: StyleProfileOption(
        label="Dark SaaS",
        description="Modern dark theme with premium feel",
        value=StyleKey.DARK_SAAS,
    ),
    StyleKey.LIGHT_SAAS.value: StyleProfileOption(
        label="Light Minimal",
        description="Clean light theme with subtle shadows",
        value=StyleKey.LIGHT_SAAS,
    ),
    StyleKey.COLORFUL.value: StyleProfileOption(
        label="Colorful",
        description="Vibrant colors and playful gradients",
        value=StyleKey.COLORFUL,
    ),
    StyleKey.MINIMAL.value: StyleProfileOption(
        label="B&W Minimal",
        description="Black and white, maximum simplicity",
        value=StyleKey.MINIMAL,
    ),
}


def brand_injection_prompt(profile: BrandProfile, style_key: Optional[str] = None) -> str:
    """Render the brand design system as prompt text for the generator."""
    default_key = profile.default_style.value
    effective_style = style_key or default_key
    typo = profile.typography
    spacing = profile.spacing
    colors = profile.colors
    parts = [
        f"## BRAND DESIGN SYSTEM ({profile.brand_name})\n",
        f"**Style Profile**: {effective_style}\n",
        "### Typography",
        f"- **Font Family**: {typo.font_family}",
    ]
    for level in ("h1", "h2", "h3", "h4"):
        if level in typo.heading_scale:
            parts.append(f"- **{level.upper()}**: {typo.heading_scale[level]}")
    parts.extend([
        f"- **Body**: {typo.body_text}",
        f"- **Muted**: {typo.muted_text}",
        "",
        "### Spacing System (8px Grid)",
        f"- Scale: {', '.join(spacing.scale)}",
        f"- Container: {spacing.container_padding}",
        f"- Sections: {spacing.section_spacing}",
        "",
        "### Color Tokens",
        f"- Background: {colors.background}",
        f"- Foreground: {colors.foreground}",
        f"- Primary: {colors.primary}",
        f"- Accent: {colors.accent}",
        f"- Muted: {colors.muted}",
        f"- Border: {colors.border}",
        "",
        "### Component Patterns",
        f"**Cards**: {profile.components.cards}",
        f"**Primary Button**: {profile.components.primary_button}",
        f"**Secondary Button**: {profile.components.secondary_button}",
        f"**Input**: {profile.components.inputs}",
        "",
        "### Critical Rules",
    ])
    parts.extend(f"{i}. {rule}" for i, rule in enumerate(profile.rules, 1))

    if style_key and style_key != default_key:
        parts.append(
            f"\n**USER OVERRIDE**: Use \"{style_key}\" style instead of default, "
            "but maintain quality rules above."
        )
    return "\n".join(parts) + "\n"
