"""Brand contracts: the design identity a generated app must comply with."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from enum import Enum


class StyleKey(str, Enum):
    """Named style variants recognized by the planner and the resolver."""
    DARK_SAAS = "dark-saas"
    LIGHT_SAAS = "light-saas"
    COLORFUL = "colorful"
    MINIMAL = "minimal"
    CUSTOM = "custom"


# Input sentinel meaning "no explicit selection"; never a resolved key
AUTO_STYLE = "auto"


class StyleSource(str, Enum):
    """Provenance of a style decision."""
    DEFAULT = "default"
    USER_EXPLICIT = "user-explicit"
    USER_IMPLICIT = "user-implicit"


class Typography(BaseModel):
    """Typography tokens."""
    model_config = ConfigDict(frozen=True)

    font_family: str = Field(..., description="CSS font-family stack")
    heading_scale: Dict[str, str] = Field(..., description="Tailwind classes per heading level (h1-h4)")
    body_text: str
    muted_text: str


class Spacing(BaseModel):
    """Spacing tokens on the brand grid."""
    model_config = ConfigDict(frozen=True)

    scale: List[str] = Field(..., min_length=1)
    container_padding: str
    section_spacing: str


class ColorTokens(BaseModel):
    """Semantic color tokens."""
    model_config = ConfigDict(frozen=True)

    background: str
    foreground: str
    primary: str
    accent: str
    muted: str
    border: str


class ComponentPatterns(BaseModel):
    """Tailwind class recipes for common components."""
    model_config = ConfigDict(frozen=True)

    cards: str
    primary_button: str
    secondary_button: str
    inputs: str


class BrandProfile(BaseModel):
    """Static, versioned design identity injected into every run.

    `rules` are natural-language rules used only for prompt construction.
    The identity flags select which machine-checked brand rules apply.
    """
    model_config = ConfigDict(frozen=True)

    brand_name: str = Field(..., min_length=1)
    version: str = Field(default="1")
    default_style: StyleKey = Field(default=StyleKey.DARK_SAAS)
    typography: Typography
    spacing: Spacing
    colors: ColorTokens
    components: ComponentPatterns
    rules: List[str] = Field(default_factory=list)

    monospace_typography: bool = Field(default=False, description="Brand requires a monospace font")
    sharp_corners: bool = Field(default=False, description="Brand forbids large/full corner rounding")
    dark_by_default: bool = Field(default=False, description="Brand is dark mode unless the user overrides")


class StyleDecision(BaseModel):
    """The resolved, provenance-tagged style choice for one run."""
    model_config = ConfigDict(frozen=True)

    profile: Optional[BrandProfile] = Field(..., description="Active brand profile")
    source: StyleSource
    style_key: str = Field(..., description="Resolved style variant")
    override_detected: bool = False


class StyleProfileOption(BaseModel):
    """Catalogue entry for style selectors."""
    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    value: Optional[StyleKey] = None
