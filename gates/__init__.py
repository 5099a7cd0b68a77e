"""Quality gates: lexical contract and brand rules over generated output."""

from .brand_rules import BRAND_RULES, validate_brand
from .contract_rules import GENERAL_RULES
from .corpus import ArtifactCorpus
from .validator import (
    ContractValidator,
    brand_repair_prompt,
    brand_summary,
    contract_repair_prompt,
    contract_summary,
)

__all__ = [
    "ArtifactCorpus",
    "BRAND_RULES",
    "ContractValidator",
    "GENERAL_RULES",
    "brand_repair_prompt",
    "brand_summary",
    "contract_repair_prompt",
    "contract_summary",
    "validate_brand",
]
