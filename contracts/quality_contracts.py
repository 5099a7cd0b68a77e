"""Quality contracts for contract validation and scoring results."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List
from enum import Enum


class Severity(str, Enum):
    """Severity level of a violation. Hard-contract rules are all critical."""
    CRITICAL = "critical"


class Violation(BaseModel):
    """A single detected failure of a structural or brand rule."""
    model_config = ConfigDict(frozen=True)

    rule: str = Field(..., description="Stable rule identifier, e.g. MINIMUM_COMPONENTS")
    severity: Severity = Field(default=Severity.CRITICAL)
    message: str = Field(..., description="What is wrong")
    remedy: str = Field(..., description="How the generator should fix it")

    @property
    def is_brand(self) -> bool:
        return self.rule.startswith("BRAND_")


class BrandViolation(BaseModel):
    """A brand rule failure with expected/actual detail."""
    model_config = ConfigDict(frozen=True)

    rule: str
    severity: Severity = Field(default=Severity.CRITICAL)
    message: str
    expected: str
    actual: str


class BrandValidationResult(BaseModel):
    """Result of the brand-specific checks."""
    valid: bool
    brand_name: str
    violations: List[BrandViolation] = Field(default_factory=list)


class ContractResult(BaseModel):
    """Result of a full contract validation (general + brand rules)."""
    valid: bool
    violations: List[Violation] = Field(default_factory=list)
    brand_compliant: bool
    brand_name: str

    @property
    def brand_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.is_brand]


class QualityBreakdown(BaseModel):
    """Per-dimension sub-scores, each capped at 25."""
    structure: int = Field(..., ge=0, le=25)
    styling: int = Field(..., ge=0, le=25)
    accessibility: int = Field(..., ge=0, le=25)
    ux: int = Field(..., ge=0, le=25)

    @property
    def total(self) -> int:
        return self.structure + self.styling + self.accessibility + self.ux


class QualityScore(BaseModel):
    """The 0-100 weighted assessment of a generated artifact set."""
    breakdown: QualityBreakdown
    overall: int = Field(..., ge=0, le=100)
    component_count: int = Field(..., ge=0)
    design_system_compliance: bool = Field(..., description="Styling sub-score is at least 20")
    layout_depth: int = Field(..., ge=0, le=10)

    @property
    def accessibility_score(self) -> int:
        return self.breakdown.accessibility
