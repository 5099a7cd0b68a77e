"""Generated artifact contracts and the build request that produces them."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class GeneratedFile(BaseModel):
    """A single generated source artifact."""
    path: str = Field(..., min_length=1)
    content: str


class GeneratedOutput(BaseModel):
    """The artifact set produced by one generation attempt.

    Each attempt yields a complete replacement; file sets are never merged
    across attempts. `meta` is stamped only on the final output.
    """
    summary: str
    files: List[GeneratedFile] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    meta: Dict[str, Any] = Field(default_factory=dict)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def get_file(self, path: str) -> Optional[GeneratedFile]:
        """Return the file at exactly `path`, if present."""
        for f in self.files:
            if f.path == path:
                return f
        return None


class BuildRequest(BaseModel):
    """A request handed to the pipeline by the request-handling layer."""
    prompt: str
    style_key: Optional[str] = Field(None, description="Explicit style selection; 'auto' or None means detect")
    existing_files: List[GeneratedFile] = Field(default_factory=list, description="Artifacts for incremental edits")
