"""Deterministic offline provider.

Returns a canned build plan or a canned brand-compliant app depending on
what is being asked. Used when no API key is configured and for demos.
"""

import json
from typing import Dict, List, Optional

from .base import LLMProvider, LLMResponse


MOCK_PLAN: Dict = {
    "type": "web",
    "pages": ["Home"],
    "layout": ["Header", "Hero", "FeatureGrid", "StatusPanel", "Footer"],
    "components": [
        "Header.tsx",
        "Hero.tsx",
        "FeatureGrid.tsx",
        "FeatureCard.tsx",
        "StatusPanel.tsx",
        "Footer.tsx",
    ],
    "styleProfile": "dark-saas",
    "stateUsage": True,
    "forms": False,
    "backendRequired": False,
    "routing": False,
}

_MAIN_TSX = """import React from 'react';
import ReactDOM from 'react-dom/client';
import App from './App';
import './index.css';

ReactDOM.createRoot(document.getElementById('root')!).render(
  <React.StrictMode>
    <App />
  </React.StrictMode>
);
"""

_APP_TSX = """import React from 'react';
import Home from './pages/Home';

function App() {
  return (
    <div className="min-h-screen bg-background text-foreground font-mono antialiased">
      <Home />
    </div>
  );
}

export default App;
"""

_INDEX_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

_HOME_TSX = """import React from 'react';
import Header from '../components/Header';
import Hero from '../components/Hero';
import FeatureGrid from '../components/FeatureGrid';
import StatusPanel from '../components/StatusPanel';
import Footer from '../components/Footer';

export default function Home() {
  return (
    <div className="flex flex-col min-h-screen font-mono">
      <Header />
      <main className="flex-1" aria-label="Main content">
        <Hero />
        <FeatureGrid />
        <StatusPanel />
      </main>
      <Footer />
    </div>
  );
}
"""

_HEADER_TSX = """import React from 'react';

export default function Header() {
  return (
    <header className="border-b border-border bg-card">
      <nav className="max-w-6xl mx-auto px-4 sm:px-6 lg:px-8 py-4 flex items-center justify-between" aria-label="Primary">
        <span className="text-lg font-bold tracking-tight">Console</span>
        <a className="text-sm text-muted-foreground hover:text-foreground transition-colors duration-200 focus:outline-none focus:ring-2 focus:ring-ring" href="#features">
          Features
        </a>
      </nav>
    </header>
  );
}
"""

_HERO_TSX = """import React from 'react';

export default function Hero() {
  return (
    <section className="py-12 lg:py-16 bg-background" aria-labelledby="hero-title">
      <div className="max-w-6xl mx-auto px-4 sm:px-6 lg:px-8 text-center">
        <h1 className="text-4xl lg:text-5xl font-bold tracking-tight mb-6" id="hero-title">
          Ship faster
        </h1>
        <p className="text-base lg:text-lg text-muted-foreground mb-8 max-w-2xl mx-auto">
          Everything you need, nothing you do not.
        </p>
        <button className="px-6 py-3 bg-indigo-600 text-primary-foreground rounded-sm font-medium hover:bg-indigo-500 transition-colors duration-200 focus:outline-none focus:ring-2 focus:ring-ring">
          Get Started
        </button>
      </div>
    </section>
  );
}
"""

_FEATURE_GRID_TSX = """import React from 'react';
import FeatureCard from './FeatureCard';

const features = [
  { title: 'Typed', description: 'TypeScript end to end.' },
  { title: 'Responsive', description: 'Mobile first layouts.' },
  { title: 'Accessible', description: 'Semantic landmarks and focus states.' },
];

export default function FeatureGrid() {
  return (
    <section className="py-12 lg:py-16" id="features" aria-label="Features">
      <div className="max-w-6xl mx-auto px-4 sm:px-6 lg:px-8">
        <h2 className="text-2xl lg:text-3xl font-bold tracking-tight mb-2">Features</h2>
        <p className="text-muted-foreground mb-8">What ships in the box.</p>
        <div className="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 gap-6 lg:gap-8">
          {features.map((feature) => (
            <FeatureCard key={feature.title} title={feature.title} description={feature.description} />
          ))}
        </div>
      </div>
    </section>
  );
}
"""

_FEATURE_CARD_TSX = """import React from 'react';

interface FeatureCardProps {
  title: string;
  description: string;
}

export default function FeatureCard({ title, description }: FeatureCardProps) {
  return (
    <div className="bg-card border border-border rounded-sm p-6 shadow-md hover:shadow-lg transition-shadow duration-200">
      <h3 className="text-xl font-semibold mb-2">{title}</h3>
      <p className="text-sm text-muted-foreground">{description}</p>
    </div>
  );
}
"""

_STATUS_PANEL_TSX = """import React, { useState } from 'react';

export default function StatusPanel() {
  const [items, setItems] = useState<string[]>([]);
  const [isLoading, setIsLoading] = useState(false);

  const refresh = () => {
    setIsLoading(true);
    setItems(['Build queued', 'Build passed']);
    setIsLoading(false);
  };

  return (
    <section className="py-12 lg:py-16 bg-card" aria-live="polite">
      <div className="max-w-6xl mx-auto px-4 sm:px-6 lg:px-8">
        <button className="px-6 py-3 bg-primary text-primary-foreground rounded-sm hover:opacity-90 transition-opacity duration-200 focus:outline-none focus:ring-2 focus:ring-ring" onClick={refresh} aria-busy={isLoading}>
          Refresh
        </button>
        {isLoading && <p className="mt-4 text-muted-foreground">Loading...</p>}
        {!isLoading && items.length === 0 && (
          <p className="mt-4 text-muted-foreground">No items yet. Empty state.</p>
        )}
        <ul className="mt-4 space-y-2">
          {items.map((item) => (
            <li key={item} className="px-4 py-2 border border-border hover:bg-muted transition-colors">{item}</li>
          ))}
        </ul>
      </div>
    </section>
  );
}
"""

_FOOTER_TSX = """import React from 'react';

export default function Footer() {
  return (
    <footer className="border-t border-border py-8 bg-card">
      <div className="max-w-6xl mx-auto px-4 sm:px-6 lg:px-8 text-sm text-muted-foreground">
        <p className="text-center md:text-left">Built with care.</p>
      </div>
    </footer>
  );
}
"""


def mock_output_payload(prompt: str) -> Dict:
    """Return the canned generation payload for `prompt`."""
    files: List[Dict[str, str]] = [
        {"path": "src/main.tsx", "content": _MAIN_TSX},
        {"path": "src/App.tsx", "content": _APP_TSX},
        {"path": "src/index.css", "content": _INDEX_CSS},
        {"path": "src/pages/Home.tsx", "content": _HOME_TSX},
        {"path": "src/components/Header.tsx", "content": _HEADER_TSX},
        {"path": "src/components/Hero.tsx", "content": _HERO_TSX},
        {"path": "src/components/FeatureGrid.tsx", "content": _FEATURE_GRID_TSX},
        {"path": "src/components/FeatureCard.tsx", "content": _FEATURE_CARD_TSX},
        {"path": "src/components/StatusPanel.tsx", "content": _STATUS_PANEL_TSX},
        {"path": "src/components/Footer.tsx", "content": _FOOTER_TSX},
    ]
    return {
        "summary": f"Mock build: {prompt}",
        "files": files,
        "warnings": ["Using mock output - configure an API key for real builds"],
        "meta": {},
    }


class MockProvider(LLMProvider):
    """Offline provider returning canned plan/app JSON."""

    PLAN_MARKER = "create a Build Plan"

    def __init__(self):
        self.calls = 0

    @property
    def name(self) -> str:
        return "mock"

    @property
    def default_model(self) -> str:
        return "mock"

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        self.calls += 1
        if self.PLAN_MARKER in user_message:
            payload = MOCK_PLAN
        else:
            payload = mock_output_payload(_extract_request(user_message))
        content = json.dumps(payload)
        return LLMResponse(
            content=content,
            input_tokens=(len(system_prompt) + len(user_message)) // 4,
            output_tokens=len(content) // 4,
            model=model or self.default_model,
            provider=self.name,
        )


def _extract_request(user_message: str) -> str:
    first_line = user_message.strip().splitlines()[0] if user_message.strip() else ""
    return first_line.replace("Build this app:", "").strip() or "app"
