"""Pydantic contracts for the BuildGate system.

All handoffs between pipeline phases are typed through these contracts.
"""

from .brand_contracts import (
    AUTO_STYLE,
    StyleKey,
    StyleSource,
    Typography,
    Spacing,
    ColorTokens,
    ComponentPatterns,
    BrandProfile,
    StyleDecision,
    StyleProfileOption,
)

from .plan_contracts import (
    AppKind,
    BuildPlan,
)

from .output_contracts import (
    GeneratedFile,
    GeneratedOutput,
    BuildRequest,
)

from .quality_contracts import (
    Severity,
    Violation,
    BrandViolation,
    BrandValidationResult,
    ContractResult,
    QualityBreakdown,
    QualityScore,
)

__all__ = [
    # Brand
    "AUTO_STYLE",
    "StyleKey",
    "StyleSource",
    "Typography",
    "Spacing",
    "ColorTokens",
    "ComponentPatterns",
    "BrandProfile",
    "StyleDecision",
    "StyleProfileOption",
    # Plan
    "AppKind",
    "BuildPlan",
    # Output
    "GeneratedFile",
    "GeneratedOutput",
    "BuildRequest",
    # Quality
    "Severity",
    "Violation",
    "BrandViolation",
    "BrandValidationResult",
    "ContractResult",
    "QualityBreakdown",
    "QualityScore",
]
