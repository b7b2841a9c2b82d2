"""Filesystem writer for generated client sources."""

from __future__ import annotations

from pathlib import Path


class WriteError(RuntimeError):
    """Raised when output files cannot be written."""


def write_source(output_path: Path, source: str) -> Path:
    """Write generated source, creating missing parent directories.

    Args:
        output_path (Path): Destination file path.
        source (str): Complete generated source text.

    Returns:
        Path: Absolute path of the written file.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Failed to create output directory {output_path.parent}: {exc}") from exc

    try:
        output_path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {output_path}: {exc}") from exc
    return output_path.resolve()
