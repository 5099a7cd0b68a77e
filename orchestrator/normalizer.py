"""Output Normalizer: reports, never fabricates, missing scaffold files."""

import logging

from contracts import GeneratedOutput

logger = logging.getLogger(__name__)

REQUIRED_FILES = ("src/main.tsx", "src/App.tsx", "src/index.css")


def ensure_minimum_files(output: GeneratedOutput) -> GeneratedOutput:
    """Append one warning naming every missing required path.

    Returns the same object; no file content is synthesized.
    """
    present = set(output.paths)
    missing = [path for path in REQUIRED_FILES if path not in present]
    if missing:
        names = ", ".join(missing)
        logger.warning("Missing required files: %s", names)
        output.warnings.append(f"Missing required files: {names}")
    return output
