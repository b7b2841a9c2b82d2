"""High-level generator orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .client_emitter import build_client_class, build_client_options, skipped_parameter_warnings
from .codegen_ts import render_document
from .loader import OpenAPILoadError, load_specification, unsupported_version_warning
from .model_emitter import build_interfaces
from .model_types import Declaration, GenerationResult, TypeScriptDocument
from .naming import NamingError, client_name, resolve_operations
from .spec_model import Specification
from .writer import WriteError, write_source

logger = logging.getLogger(__name__)

HEADER_COMMENTS: tuple[str, ...] = (
    "Auto-generated TypeScript client",
    "Generated from OpenAPI specification",
)


@dataclass(frozen=True)
class GenerationRun:
    """Generation result with the location it was written to."""

    result: GenerationResult
    output_path: Path


def generate_client_source(
    spec: Specification,
    *,
    client_name_override: Optional[str] = None,
) -> GenerationResult:
    """Generate the TypeScript client source for a parsed document.

    Nothing is written here; the whole source is built in memory.

    Args:
        spec (Specification): Parsed OpenAPI document.
        client_name_override (Optional[str]): Class name used instead of the
            one derived from ``info.title``.

    Returns:
        GenerationResult: Client name, rendered source and warnings.
    """
    warnings: list[str] = []
    version_warning = unsupported_version_warning(spec.openapi)
    if version_warning is not None:
        warnings.append(version_warning)

    operations = resolve_operations(spec)
    warnings.extend(skipped_parameter_warnings(operations))
    name = client_name(spec.info.title, client_name_override)

    interfaces = build_interfaces(spec.components)
    logger.debug(
        "Building %s with %d interfaces and %d operations",
        name,
        len(interfaces),
        len(operations),
    )
    declarations: list[Declaration] = [
        *interfaces,
        build_client_options(),
        build_client_class(name, operations),
    ]
    document = TypeScriptDocument(
        header_comments=HEADER_COMMENTS,
        declarations=tuple(declarations),
    )
    return GenerationResult(
        client_name=name,
        source=render_document(document),
        warnings=tuple(warnings),
    )


def run_generation(
    *,
    input_path: Path,
    output_path: Path,
    client_name_override: Optional[str] = None,
) -> GenerationRun:
    """Generate a TypeScript client file from an OpenAPI document.

    Args:
        input_path (Path): Path to the input OpenAPI document.
        output_path (Path): Destination ``.ts`` file; parent directories are created.
        client_name_override (Optional[str]): Optional client class name.

    Returns:
        GenerationRun: Generation metadata and the absolute output path.
    """
    logger.debug("Loading OpenAPI document from %s", input_path)
    spec = load_specification(input_path)
    result = generate_client_source(spec, client_name_override=client_name_override)
    written_path = write_source(output_path, result.source)
    logger.info("Wrote %s to %s", result.client_name, written_path)
    return GenerationRun(result=result, output_path=written_path)


__all__ = [
    "GenerationRun",
    "HEADER_COMMENTS",
    "NamingError",
    "OpenAPILoadError",
    "WriteError",
    "generate_client_source",
    "run_generation",
]
