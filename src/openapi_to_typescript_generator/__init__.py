"""OpenAPI to TypeScript client generator package."""

from __future__ import annotations

from .cli import main
from .generator import GenerationRun, generate_client_source, run_generation

__all__ = ["GenerationRun", "generate_client_source", "main", "run_generation"]
