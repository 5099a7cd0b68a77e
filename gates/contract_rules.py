"""General quality-contract rules.

Each rule is a pure function of an ArtifactCorpus returning the violations
it finds (usually zero or one). Rules are independent; all of them run on
every validation.
"""

import re
from typing import Callable, List

from contracts import Violation

from .corpus import ArtifactCorpus

Rule = Callable[[ArtifactCorpus], List[Violation]]

MIN_COMPONENT_FILES = 2
MIN_CLASSNAME_COUNT = 5
SINGLE_FILE_APP_CHARS = 1500

CLASSNAME_RE = re.compile(r'className="')
INLINE_STYLE_RE = re.compile(r"style=\{\{")
RESPONSIVE_RE = re.compile(r"\b(sm:|md:|lg:|xl:)")
UNSTYLED_RE = re.compile(r"<(div|p|h1|h2|h3|button|input)(?!\s+className)")


def minimum_components(corpus: ArtifactCorpus) -> List[Violation]:
    count = len(corpus.component_files)
    if count >= MIN_COMPONENT_FILES:
        return []
    return [Violation(
        rule="MINIMUM_COMPONENTS",
        message=f"Only {count} components found. Required: at least {MIN_COMPONENT_FILES} React components in src/components/",
        remedy="Break down App.tsx into reusable components (e.g., Header, Hero, Footer)",
    )]


def design_system_usage(corpus: ArtifactCorpus) -> List[Violation]:
    if len(CLASSNAME_RE.findall(corpus.ui_text)) >= MIN_CLASSNAME_COUNT:
        return []
    return [Violation(
        rule="DESIGN_SYSTEM_USAGE",
        message="Insufficient Tailwind usage. Components appear unstyled.",
        remedy='Use Tailwind utility classes (className="...") for all styling',
    )]


def no_inline_styles(corpus: ArtifactCorpus) -> List[Violation]:
    inline = len(INLINE_STYLE_RE.findall(corpus.ui_text))
    if inline <= len(CLASSNAME_RE.findall(corpus.ui_text)):
        return []
    return [Violation(
        rule="NO_INLINE_STYLES",
        message="Excessive inline styles detected. Use Tailwind classes instead.",
        remedy='Replace all style={{...}} with className="..." using Tailwind utilities',
    )]


def responsive_layout(corpus: ArtifactCorpus) -> List[Violation]:
    if RESPONSIVE_RE.search(corpus.ui_text):
        return []
    return [Violation(
        rule="RESPONSIVE_LAYOUT",
        message="No responsive breakpoints found. App will not work on mobile.",
        remedy="Add responsive classes (sm:, md:, lg:) to layout elements",
    )]


def no_unstyled_html(corpus: ArtifactCorpus) -> List[Violation]:
    if not UNSTYLED_RE.search(corpus.ui_text):
        return []
    return [Violation(
        rule="NO_UNSTYLED_HTML",
        message="Raw unstyled HTML elements detected.",
        remedy="Add className with Tailwind classes to all HTML elements",
    )]


def no_single_file_apps(corpus: ArtifactCorpus) -> List[Violation]:
    app = corpus.app_content
    if app is None or len(app) <= SINGLE_FILE_APP_CHARS:
        return []
    if len(corpus.component_files) >= MIN_COMPONENT_FILES:
        return []
    return [Violation(
        rule="NO_SINGLE_FILE_APPS",
        message="Single-file app detected. App.tsx is too large without component breakdown.",
        remedy="Split App.tsx into smaller components in src/components/",
    )]


def required_files(corpus: ArtifactCorpus) -> List[Violation]:
    violations = []
    if not corpus.has_app:
        violations.append(Violation(
            rule="REQUIRED_FILES",
            message="Missing src/App.tsx",
            remedy="Create src/App.tsx as main app component",
        ))
    if not corpus.has_css:
        violations.append(Violation(
            rule="REQUIRED_FILES",
            message="Missing CSS file (src/index.css)",
            remedy="Create src/index.css with Tailwind directives",
        ))
    return violations


GENERAL_RULES: List[Rule] = [
    minimum_components,
    design_system_usage,
    no_inline_styles,
    responsive_layout,
    no_unstyled_html,
    no_single_file_apps,
    required_files,
]


def check_general_rules(corpus: ArtifactCorpus) -> List[Violation]:
    """Evaluate every general rule, in table order."""
    violations: List[Violation] = []
    for rule in GENERAL_RULES:
        violations.extend(rule(corpus))
    return violations
