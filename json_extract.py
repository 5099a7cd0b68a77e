"""Extract a JSON object from free-form LLM text.

Tries, in order: the whole text, a fenced ```json block, and the span from
the first '{' to the last '}'. Each distinct candidate that decodes to a
dict is yielded so callers can apply their own shape checks.
"""

import json
import re
from typing import Any, Dict, Iterator

_FENCED = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")


def _candidates(raw: str) -> Iterator[str]:
    text = raw.strip()
    yield text
    match = _FENCED.search(text)
    if match:
        yield match.group(1)
    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last > first:
        yield text[first:last + 1]


def iter_json_objects(raw: str) -> Iterator[Dict[str, Any]]:
    """Yield each decodable JSON object found in `raw`."""
    if not raw:
        return
    seen = set()
    for candidate in _candidates(raw):
        if candidate in seen:
            continue
        seen.add(candidate)
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            yield data
