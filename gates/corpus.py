"""Flattened view of an output that the lexical rules run against."""

from dataclasses import dataclass
from typing import Optional, Tuple

from contracts import GeneratedOutput

UI_EXTENSIONS = (".tsx", ".jsx")
APP_PATH = "src/App.tsx"


@dataclass(frozen=True)
class ArtifactCorpus:
    """UI text plus path metadata for one generated output.

    Built once per validation call and shared by every rule.
    """
    ui_text: str
    paths: Tuple[str, ...]
    component_files: Tuple[str, ...]
    app_content: Optional[str] = None

    @classmethod
    def from_output(cls, output: GeneratedOutput) -> "ArtifactCorpus":
        ui_files = [f for f in output.files if f.path.endswith(UI_EXTENSIONS)]
        app = output.get_file(APP_PATH)
        return cls(
            ui_text="\n".join(f.content for f in ui_files),
            paths=tuple(output.paths),
            component_files=tuple(f.path for f in ui_files if "components/" in f.path),
            app_content=app.content if app else None,
        )

    @property
    def has_app(self) -> bool:
        return APP_PATH in self.paths

    @property
    def has_css(self) -> bool:
        return any(p.endswith(".css") for p in self.paths)
