"""Tests for the quality scorer."""

import pytest

from contracts import QualityBreakdown, QualityScore
from scoring import count_components, grade, layout_depth, score, score_summary, should_retry
from scoring.quality_scorer import (
    ARIA_TIERS,
    HOVER_TIERS,
    RESPONSIVE_TIERS,
    _tier,
    average_component_size,
    score_structure,
    score_styling,
)

RICH_COMPONENT = """import React, { useState } from 'react';

export default function Widget() {
  const [items, setItems] = useState([]);
  const isLoading = items === null;
  return (
    <section className="p-4 sm:p-6 md:p-8 lg:p-10 xl:p-12 rounded-lg shadow-md" aria-label="widget">
      <button className="bg-indigo-600 hover:bg-indigo-500 focus:ring-2 transition-colors" aria-pressed="false">Go</button>
      <p className="text-sm">Empty</p>
      <p className="text-sm">{isLoading}</p>
      <p className="hover:underline">more</p>
    </section>
  );
}
"""


def perfect_files():
    filler = "\n".join("// layout note" for _ in range(140))
    files = {
        "src/main.tsx": "import App from './App';",
        "src/App.tsx": '<header className="a"><nav className="b" /></header>\n<main className="c" />',
        "src/index.css": "@tailwind base;",
        "src/pages/Home.tsx": '<div className="page">Home</div>',
    }
    for i in range(6):
        files[f"src/components/Widget{i}.tsx"] = RICH_COMPONENT + filler
    return files


class TestScoreBoundaries:
    """Test the all-zero and all-full outputs."""

    def test_bare_output(self, make_output):
        output = make_output({"notes.tsx": "<div style={{a: 1}} /><div style={{b: 2}} /><div style={{c: 3}} />"})
        result = score(output)
        assert result.breakdown.styling == 0
        assert result.breakdown.accessibility == 3
        assert result.breakdown.ux == 0
        assert result.breakdown.structure == 1
        assert result.overall == 4
        assert result.component_count == 0
        assert result.layout_depth == 0
        assert result.design_system_compliance is False

    def test_perfect_output(self, make_output):
        result = score(make_output(perfect_files()))
        assert result.breakdown.structure == 25
        assert result.breakdown.styling == 25
        assert result.breakdown.accessibility == 25
        assert result.breakdown.ux == 25
        assert result.overall == 100
        assert result.component_count == 7
        assert result.design_system_compliance is True
        assert result.accessibility_score == 25

    def test_mock_app_passes(self, compliant_output):
        result = score(compliant_output)
        assert result.overall >= 80
        assert result.breakdown.accessibility == 25
        assert result.breakdown.ux == 25
        assert not should_retry(result)

    def test_minimal_valid_output_is_low(self, minimal_valid_output):
        result = score(minimal_valid_output)
        assert result.breakdown.structure == 12
        assert result.breakdown.styling == 9
        assert result.breakdown.accessibility == 3
        assert result.breakdown.ux == 0
        assert result.overall == 24
        assert should_retry(result)


class TestScoreDetails:
    """Test individual scoring signals."""

    def test_count_components_includes_pages(self, make_output):
        output = make_output({
            "src/components/A.tsx": "",
            "src/pages/Home.jsx": "",
            "src/components/styles.css": "",
            "src/App.tsx": "",
        })
        assert count_components(output) == 2

    def test_clickable_divs_reduce_button_points(self, make_output):
        with_buttons = make_output({"src/App.tsx": "<button>a</button>"})
        with_clickable_div = make_output({"src/App.tsx": "<button>a</button>\nonClick={go} <div>"})
        assert score(with_buttons).breakdown.accessibility - score(with_clickable_div).breakdown.accessibility == 4

    def test_missing_alt_text(self, make_output):
        some_alt = make_output({"src/App.tsx": '<img src="a" alt="a" /><img src="b" />'})
        no_alt = make_output({"src/App.tsx": '<img src="a" /><img src="b" />'})
        assert score(some_alt).breakdown.accessibility == 1
        assert score(no_alt).breakdown.accessibility == 0

    def test_state_hook_without_setter(self, make_output):
        output = make_output({"src/App.tsx": "const state = useReducer(reducer);"})
        assert score(output).breakdown.ux == 2

    def test_only_tsx_counts_for_styling(self, make_output):
        output = make_output({"src/App.jsx": '<div className="a">' * 40})
        assert score(output).breakdown.styling == 5

    def test_layout_depth(self, make_output):
        app = "function App() {\n  return (\n    <div>\n      <main>\n        <p />\n"
        assert layout_depth(make_output({"src/App.tsx": app})) == 4

    def test_layout_depth_is_capped(self, make_output):
        app = " " * 40 + "<div />"
        assert layout_depth(make_output({"src/App.tsx": app})) == 10

    def test_layout_depth_without_app(self, make_output):
        assert layout_depth(make_output({"src/main.tsx": "    <App />"})) == 0

    def test_scoring_is_pure(self, compliant_output):
        assert score(compliant_output) == score(compliant_output)


def make_score(overall, structure=25, styling=25, accessibility=25, ux=25):
    return QualityScore(
        breakdown=QualityBreakdown(structure=structure, styling=styling, accessibility=accessibility, ux=ux),
        overall=overall,
        component_count=3,
        design_system_compliance=styling >= 20,
        layout_depth=2,
    )


class TestRetryAndSummary:
    """Test the retry threshold and summary formatting."""

    def test_threshold_boundary(self):
        assert should_retry(make_score(79))
        assert not should_retry(make_score(80))

    def test_custom_threshold(self):
        assert should_retry(make_score(85), threshold=90)

    @pytest.mark.parametrize("overall,expected", [(95, "A"), (90, "A"), (85, "B"), (72, "C"), (60, "D"), (10, "F")])
    def test_grades(self, overall, expected):
        assert grade(overall) == expected

    def test_summary(self):
        summary = score_summary(make_score(92, structure=22, ux=20))
        assert summary.startswith("Quality Score: 92/100 (Grade A)")
        assert "├─ Structure: 22/25" in summary
        assert "└─ UX: 20/25" in summary
        assert summary.endswith("Components: 3, Layout Depth: 2")


def component_files(*line_counts):
    return {
        f"src/components/C{i}.tsx": "\n".join("x" for _ in range(n))
        for i, n in enumerate(line_counts)
    }


class TestStructureFenceposts:
    """Test component tiers and the component-size bands."""

    def test_half_line_average_rounds_up(self, make_output):
        output = make_output(component_files(100, 101))
        assert average_component_size(output) == 101
        # 4 (two components) + 3 (components/) + 5 (size in the 100-500 band)
        assert score_structure(output) == 12

    def test_average_without_components(self, make_output):
        assert average_component_size(make_output({"src/pages/Home.tsx": "x"})) == 0

    @pytest.mark.parametrize("lines,expected", [
        (50, 4), (51, 6), (100, 6), (101, 8), (499, 8), (500, 6), (799, 6), (800, 4),
    ])
    def test_size_bands(self, make_output, lines, expected):
        # one component: no tier points, 3 for components/, then the size bonus
        assert score_structure(make_output(component_files(lines))) == expected

    @pytest.mark.parametrize("count,expected", [(1, 4), (2, 8), (3, 10), (4, 12), (5, 12), (6, 14)])
    def test_component_tiers(self, make_output, count, expected):
        assert score_structure(make_output(component_files(*([1] * count)))) == expected


class TestTierTables:
    """Test the count-to-points tables at each threshold."""

    @pytest.mark.parametrize("count,expected", [(4, 5), (5, 7), (9, 7), (10, 9), (20, 11), (29, 11), (30, 13)])
    def test_classname_tiers(self, make_output, count, expected):
        # plus 5 for having no inline styles
        output = make_output({"src/App.tsx": '<p className="a">x</p>' * count})
        assert score_styling(output) == expected

    @pytest.mark.parametrize("tiers,count,expected", [
        (RESPONSIVE_TIERS, 1, 0), (RESPONSIVE_TIERS, 2, 1), (RESPONSIVE_TIERS, 5, 3), (RESPONSIVE_TIERS, 10, 5),
        (ARIA_TIERS, 0, 0), (ARIA_TIERS, 1, 1), (ARIA_TIERS, 3, 3), (ARIA_TIERS, 5, 5),
        (HOVER_TIERS, 2, 1), (HOVER_TIERS, 4, 3), (HOVER_TIERS, 6, 5),
    ])
    def test_tables(self, tiers, count, expected):
        assert _tier(count, tiers) == expected

    def test_indent_before_tag_only(self, make_output):
        assert layout_depth(make_output({"src/App.tsx": " <div>"})) == 0
        assert layout_depth(make_output({"src/App.tsx": "   <div>"})) == 1
