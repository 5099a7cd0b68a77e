"""Parse a generation response into a GeneratedOutput."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from contracts import GeneratedOutput
from json_extract import iter_json_objects

logger = logging.getLogger(__name__)


def is_output_shape(data: Any) -> bool:
    """String summary plus a non-empty list of {path: str, content: str}."""
    if not isinstance(data, dict) or not isinstance(data.get("summary"), str):
        return False
    files = data.get("files")
    if not isinstance(files, list) or not files:
        return False
    return all(
        isinstance(f, dict) and isinstance(f.get("path"), str) and isinstance(f.get("content"), str)
        for f in files
    )


def parse_output(raw: str) -> Optional[GeneratedOutput]:
    """Return the first well-shaped output found in `raw`, or None.

    Provider-supplied `meta` is discarded; meta is stamped by the pipeline.
    """
    for data in iter_json_objects(raw):
        if not is_output_shape(data):
            continue
        warnings = data.get("warnings")
        try:
            return GeneratedOutput(
                summary=data["summary"],
                files=data["files"],
                warnings=[w for w in warnings if isinstance(w, str)] if isinstance(warnings, list) else [],
            )
        except ValidationError as e:
            logger.debug("Output candidate rejected by schema: %s", e)
    return None
