#!/usr/bin/env python3
"""BuildGate CLI - run one build request through the quality gate.

Usage:
    # Brand default style, provider from settings
    python main.py --prompt "Build a task dashboard"

    # Explicit style and an offline run
    python main.py --prompt "Build a landing page" --style light-saas --provider mock

    # Incremental edit of an existing project, saving the result
    python main.py --prompt "Add a pricing section" --existing ./my-app --output build.json
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

try:
    import click
    from rich.console import Console
    from rich.panel import Panel
    from rich.progress import Progress, SpinnerColumn, TextColumn
except ImportError:
    print("Missing dependencies. Run: pip install click rich")
    sys.exit(1)

from brand import STYLE_PROFILES, source_label
from config import settings
from contracts import BuildRequest, GeneratedFile, StyleSource
from errors import BuildGateError
from orchestrator import BuildPipeline
from providers import get_provider, list_providers as get_available_providers


console = Console()

SOURCE_SUFFIXES = {".tsx", ".ts", ".jsx", ".js", ".css", ".html", ".json"}
SKIP_DIRS = {"node_modules", ".git", "dist", "build"}


def read_existing_files(directory: str) -> List[GeneratedFile]:
    """Collect source files under `directory` as project-relative artifacts.

    Args:
        directory: Root of an existing generated project

    Returns:
        Files sorted by path
    """
    root = Path(directory)
    files = []
    for file in sorted(root.rglob("*")):
        if not file.is_file() or file.suffix not in SOURCE_SUFFIXES:
            continue
        if any(part in SKIP_DIRS for part in file.relative_to(root).parts):
            continue
        files.append(GeneratedFile(
            path=file.relative_to(root).as_posix(),
            content=file.read_text(encoding="utf-8", errors="replace"),
        ))
    return files


def print_summary(output) -> None:
    meta = output.meta
    compliant = meta.get("brandCompliant")
    console.print(Panel.fit(
        f"[bold]{output.summary}[/bold]\n\n"
        f"[dim]Quality score:[/dim] {meta.get('qualityScore')}/100\n"
        f"[dim]Attempts:[/dim] {meta.get('attempts')}\n"
        f"[dim]Style:[/dim] {meta.get('styleProfile')} "
        f"({source_label(StyleSource(meta.get('brandSource')))})\n"
        f"[dim]Brand compliant:[/dim] "
        + ("[green]yes[/green]" if compliant else "[red]no[/red]")
        + f"\n[dim]Files:[/dim] {len(output.files)}",
        title=meta.get("brandName"),
        border_style="blue",
    ))

    if output.warnings:
        console.print(f"\n[yellow]Warnings ({len(output.warnings)}):[/yellow]")
        for warning in output.warnings:
            console.print(f"  - {warning}")

    console.print(f"\n{meta.get('buildExplanation', '')}")


@click.command()
@click.option(
    "--prompt", "-p",
    required=False,
    help="Free-text description of the app to build"
)
@click.option(
    "--style", "-s",
    type=click.Choice(list(STYLE_PROFILES.keys())),
    default="auto",
    help="Style profile (default: auto, resolved from brand and prompt)"
)
@click.option(
    "--existing", "-e",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory of existing files to edit incrementally"
)
@click.option(
    "--provider",
    type=click.Choice(["anthropic", "openai", "deepseek", "litellm", "mock"]),
    default=None,
    help=f"LLM provider (default: {settings.default_provider})"
)
@click.option(
    "--model", "-m",
    default=None,
    help="Model name (e.g., gpt-4o, gemini-1.5-pro, deepseek-chat)"
)
@click.option(
    "--output", "-o", "output_file",
    default=None,
    help="Write the final output as JSON to this file"
)
@click.option(
    "--list-providers",
    is_flag=True,
    help="List available providers and exit"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output"
)
def main(
    prompt: Optional[str],
    style: str,
    existing: Optional[str],
    provider: Optional[str],
    model: Optional[str],
    output_file: Optional[str],
    list_providers: bool,
    verbose: bool,
):
    """BuildGate: brand-enforced, quality-gated app generation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if list_providers:
        console.print("[bold]Available LLM Providers:[/bold]\n")
        for name, available in get_available_providers().items():
            status = "[green]✓ Ready[/green]" if available else "[red]✗ No API key[/red]"
            console.print(f"  {name:12} {status}")
        console.print("\n[dim]Set API keys via environment variables:[/dim]")
        console.print("  ANTHROPIC_API_KEY, OPENAI_API_KEY, DEEPSEEK_API_KEY, GEMINI_API_KEY (litellm)")
        return

    if not prompt or not prompt.strip():
        console.print("[red]Error: --prompt is required[/red]")
        sys.exit(1)

    if provider is None and model is None:
        provider, model = settings.default_provider, settings.default_model

    llm = get_provider(
        provider,
        model=model,
        timeout=settings.api_timeout_seconds,
    )
    if not llm.is_available():
        console.print(f"[yellow]{llm.name} has no API key configured, using the mock provider[/yellow]")
        llm = get_provider("mock")

    existing_files = read_existing_files(existing) if existing else []
    request = BuildRequest(prompt=prompt, style_key=style, existing_files=existing_files)

    console.print(f"[dim]Provider:[/dim] {llm.name}  [dim]Model:[/dim] {model or llm.default_model}")
    if existing_files:
        console.print(f"[dim]Existing files:[/dim] {len(existing_files)}")

    pipeline = BuildPipeline(llm, settings=settings, model=model)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Building...", total=None)
        try:
            output = asyncio.run(pipeline.run(request))
        except BuildGateError as e:
            console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)
        progress.update(task, completed=True)

    print_summary(output)

    if output_file:
        Path(output_file).write_text(json.dumps(output.model_dump(mode="json"), indent=2), encoding="utf-8")
        console.print(f"\n[bold]Output saved to:[/bold] {output_file}")


if __name__ == "__main__":
    main()
