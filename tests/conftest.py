"""Shared fixtures for BuildGate tests."""

import json

import pytest

from brand import default_brand_profile
from contracts import GeneratedFile, GeneratedOutput
from providers import LLMResponse
from providers.mock_provider import MOCK_PLAN, mock_output_payload


def _output(files, summary="test output"):
    return GeneratedOutput(
        summary=summary,
        files=[GeneratedFile(path=path, content=content) for path, content in files.items()],
    )


@pytest.fixture
def profile():
    return default_brand_profile()


@pytest.fixture
def make_output():
    """Build a GeneratedOutput from a {path: content} dict."""
    return _output


@pytest.fixture
def compliant_output():
    """The mock provider's app: passes every contract and brand rule."""
    return GeneratedOutput.model_validate(mock_output_payload("dashboard"))


@pytest.fixture
def minimal_valid_output():
    """Passes every contract rule but scores well below 80."""
    return _output({
        "src/App.tsx": (
            "import A from './components/A';\n"
            "export default function App() {\n"
            "  return (\n"
            '    <div className="font-mono md:p-4">\n'
            "      <A />\n"
            "    </div>\n"
            "  );\n"
            "}\n"
        ),
        "src/index.css": "@tailwind base;",
        "src/components/A.tsx": (
            'export default function A() { return <h1 className="text-xl">A</h1>; }\n'
            'export function Note() { return <p className="text-sm">a</p>; }'
        ),
        "src/components/B.tsx": (
            'export default function B() { return <h2 className="text-lg">B</h2>; }\n'
            'export function Hint() { return <p className="text-sm">b</p>; }'
        ),
    })


@pytest.fixture
def respond():
    """Wrap text as an LLMResponse."""
    def _respond(content, model="test-model"):
        if not isinstance(content, str):
            content = json.dumps(content)
        return LLMResponse(
            content=content,
            input_tokens=10,
            output_tokens=20,
            model=model,
            provider="test",
        )
    return _respond


@pytest.fixture
def plan_payload():
    return dict(MOCK_PLAN)
