"""Quality Scorer: rates a generated output 0-100 over four dimensions.

Structure, styling, accessibility and UX each contribute up to 25 points.
Scores below the pass threshold trigger a retry in the pipeline.
"""

import math
import re
from typing import List

from contracts import GeneratedFile, GeneratedOutput, QualityBreakdown, QualityScore

DIMENSION_MAX = 25
DEFAULT_PASS_SCORE = 80
DESIGN_SYSTEM_STYLING_MIN = 20
MAX_LAYOUT_DEPTH = 10

CLASSNAME_RE = re.compile(r'className="')
RESPONSIVE_RE = re.compile(r"\b(?:sm:|md:|lg:|xl:|2xl:)")
CARD_RADIUS_RE = re.compile(r"rounded-(?:2xl|xl|lg)")
BUTTON_COLOR_RE = re.compile(r"bg-(?:blue|indigo|purple)-\d00")
SPACING_RE = re.compile(r"\b(?:p-|py-|px-|space-|gap-)\d+")
INLINE_STYLE_RE = re.compile(r"style=\{\{")
FOCUS_RE = re.compile(r"focus:(?:ring|outline|border)")
CLICKABLE_DIV_RE = re.compile(r"onClick.*<div")
STATE_HOOK_RE = re.compile(r"useState|useReducer")
STATE_SETTER_RE = re.compile(r"set[A-Z]\w+")
LOADING_RE = re.compile(r"loading|isLoading|Loading")
EMPTY_STATE_RE = re.compile(r"empty|Empty|no items|No items")
LEADING_INDENT_RE = re.compile(r"^(\s+)<")

# (minimum, points) pairs, highest first
COMPONENT_TIERS = ((6, 10), (4, 8), (3, 6), (2, 4))
CLASSNAME_TIERS = ((30, 8), (20, 6), (10, 4), (5, 2))
RESPONSIVE_TIERS = ((10, 5), (5, 3), (2, 1))
ARIA_TIERS = ((5, 5), (3, 3), (1, 1))
HOVER_TIERS = ((5, 5), (3, 3), (1, 1))


def _tier(count: int, tiers) -> int:
    for minimum, points in tiers:
        if count >= minimum:
            return points
    return 0


def _tsx_text(output: GeneratedOutput) -> str:
    return "\n".join(f.content for f in output.files if f.path.endswith(".tsx"))


def _is_component(f: GeneratedFile) -> bool:
    return f.path.endswith((".tsx", ".jsx")) and ("components/" in f.path or "pages/" in f.path)


def count_components(output: GeneratedOutput) -> int:
    """UI files under components/ or pages/."""
    return sum(1 for f in output.files if _is_component(f))


def average_component_size(output: GeneratedOutput) -> int:
    """Mean line count of components/*.tsx files, halves rounded up; 0 when there are none."""
    components: List[GeneratedFile] = [
        f for f in output.files if "components/" in f.path and f.path.endswith(".tsx")
    ]
    if not components:
        return 0
    total_lines = sum(len(f.content.split("\n")) for f in components)
    return math.floor(total_lines / len(components) + 0.5)


def layout_depth(output: GeneratedOutput) -> int:
    """Deepest JSX indentation in src/App.tsx, in two-space levels.

    Only the whitespace before the opening `<` is measured; the result is
    floored to a whole level and capped at MAX_LAYOUT_DEPTH.
    """
    app = output.get_file("src/App.tsx")
    if app is None:
        return 0
    deepest = 0
    for line in app.content.split("\n"):
        match = LEADING_INDENT_RE.match(line)
        if match:
            deepest = max(deepest, len(match.group(1)) // 2)
    return min(deepest, MAX_LAYOUT_DEPTH)


def score_structure(output: GeneratedOutput) -> int:
    paths = output.paths
    points = _tier(count_components(output), COMPONENT_TIERS)

    if any("components/" in p for p in paths):
        points += 3
    if any("pages/" in p for p in paths):
        points += 2

    if "src/App.tsx" in paths:
        points += 2
    if any(p.endswith(".css") for p in paths):
        points += 2
    if "src/main.tsx" in paths:
        points += 1

    avg = average_component_size(output)
    if 100 < avg < 500:
        points += 5
    elif 50 < avg < 800:
        points += 3
    else:
        points += 1

    return min(DIMENSION_MAX, points)


def score_styling(output: GeneratedOutput) -> int:
    text = _tsx_text(output)
    points = _tier(len(CLASSNAME_RE.findall(text)), CLASSNAME_TIERS)
    points += _tier(len(RESPONSIVE_RE.findall(text)), RESPONSIVE_TIERS)

    if CARD_RADIUS_RE.search(text) and "shadow-" in text:
        points += 3
    if BUTTON_COLOR_RE.search(text) and "hover:bg-" in text:
        points += 2
    if SPACING_RE.search(text):
        points += 2

    inline = len(INLINE_STYLE_RE.findall(text))
    if inline == 0:
        points += 5
    elif inline < 3:
        points += 2

    return min(DIMENSION_MAX, points)


def score_accessibility(output: GeneratedOutput) -> int:
    text = _tsx_text(output)
    points = sum(2 for tag in ("<header", "<main", "<nav", "<section") if tag in text)
    points += _tier(text.count("aria-"), ARIA_TIERS)

    if FOCUS_RE.search(text):
        points += 5

    buttons = text.count("<button")
    clickable_divs = len(CLICKABLE_DIV_RE.findall(text))
    if buttons > 0 and clickable_divs == 0:
        points += 4
    elif buttons > clickable_divs:
        points += 2

    images = text.count("<img")
    alts = text.count('alt="')
    if images == 0 or images == alts:
        points += 3
    elif alts > 0:
        points += 1

    return min(DIMENSION_MAX, points)


def score_ux(output: GeneratedOutput) -> int:
    text = _tsx_text(output)
    points = 0

    if STATE_HOOK_RE.search(text):
        points += 5 if STATE_SETTER_RE.search(text) else 2
    if LOADING_RE.search(text):
        points += 5
    if EMPTY_STATE_RE.search(text):
        points += 5
    if "transition" in text:
        points += 5
    points += _tier(text.count("hover:"), HOVER_TIERS)

    return min(DIMENSION_MAX, points)


def score(output: GeneratedOutput) -> QualityScore:
    """Score `output`. Pure function of the file set."""
    breakdown = QualityBreakdown(
        structure=score_structure(output),
        styling=score_styling(output),
        accessibility=score_accessibility(output),
        ux=score_ux(output),
    )
    return QualityScore(
        breakdown=breakdown,
        overall=breakdown.total,
        component_count=count_components(output),
        design_system_compliance=breakdown.styling >= DESIGN_SYSTEM_STYLING_MIN,
        layout_depth=layout_depth(output),
    )


def should_retry(quality: QualityScore, threshold: int = DEFAULT_PASS_SCORE) -> bool:
    return quality.overall < threshold


def grade(overall: int) -> str:
    if overall >= 90:
        return "A"
    if overall >= 80:
        return "B"
    if overall >= 70:
        return "C"
    if overall >= 60:
        return "D"
    return "F"


def score_summary(quality: QualityScore) -> str:
    """Multi-line human-readable breakdown with a letter grade."""
    b = quality.breakdown
    return (
        f"Quality Score: {quality.overall}/100 (Grade {grade(quality.overall)})\n"
        f"├─ Structure: {b.structure}/25\n"
        f"├─ Styling: {b.styling}/25\n"
        f"├─ Accessibility: {b.accessibility}/25\n"
        f"└─ UX: {b.ux}/25\n"
        f"\nComponents: {quality.component_count}, Layout Depth: {quality.layout_depth}"
    )
