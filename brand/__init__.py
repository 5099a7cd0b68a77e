"""Brand profile configuration and style resolution."""

from .profiles import STYLE_PROFILES, brand_injection_prompt, default_brand_profile
from .resolver import BrandResolver, enforce, source_label

__all__ = [
    "STYLE_PROFILES",
    "BrandResolver",
    "brand_injection_prompt",
    "default_brand_profile",
    "enforce",
    "source_label",
]
