"""Quality scoring of generated outputs."""

from .quality_scorer import (
    DEFAULT_PASS_SCORE,
    count_components,
    grade,
    layout_depth,
    score,
    score_summary,
    should_retry,
)

__all__ = [
    "DEFAULT_PASS_SCORE",
    "count_components",
    "grade",
    "layout_depth",
    "score",
    "score_summary",
    "should_retry",
]
