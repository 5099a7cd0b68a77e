"""Build plan contracts.

The plan is the structured shape a generation attempt is asked to follow.
Its serialized (camelCase) form is part of the output metadata that
external callers read.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from enum import Enum


class AppKind(str, Enum):
    """Kind of application being generated."""
    WEB = "web"
    MOBILE = "mobile"


class BuildPlan(BaseModel):
    """Advisory build plan injected into generation prompts."""
    model_config = ConfigDict(populate_by_name=True)

    kind: AppKind = Field(..., alias="type")
    pages: List[str] = Field(..., min_length=1)
    layout_sections: List[str] = Field(..., alias="layout", min_length=1)
    components: List[str] = Field(..., min_length=2)
    style_key: str = Field(..., alias="styleProfile")
    uses_state: bool = Field(default=False, alias="stateUsage")
    uses_forms: bool = Field(default=False, alias="forms")
    needs_backend: bool = Field(default=False, alias="backendRequired")
    uses_routing: bool = Field(default=False, alias="routing")
    data_flow: Optional[str] = Field(default=None, alias="dataFlow")

    def to_wire(self) -> dict:
        """Serialize with the external camelCase field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
