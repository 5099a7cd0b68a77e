"""Orchestrator module for BuildGate execution control."""

from .explanation import BuildExplanation, format_markdown, format_text, generate_build_explanation
from .normalizer import REQUIRED_FILES, ensure_minimum_files
from .output_parser import parse_output
from .pipeline import BuildPipeline, PipelineState
from .prompts import json_repair_prompt, score_repair_prompt, system_message, user_prompt

__all__ = [
    "BuildExplanation",
    "BuildPipeline",
    "PipelineState",
    "REQUIRED_FILES",
    "ensure_minimum_files",
    "format_markdown",
    "format_text",
    "generate_build_explanation",
    "json_repair_prompt",
    "parse_output",
    "score_repair_prompt",
    "system_message",
    "user_prompt",
]
