"""Command line interface for OpenAPI to TypeScript client generation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .generator import NamingError, OpenAPILoadError, WriteError, run_generation

DEFAULT_OUTPUT = "generated.ts"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="openapi-to-typescript-generator",
        description="Generates a TypeScript client from an OpenAPI specification",
    )
    parser.add_argument(
        "--input",
        "-i",
        required=True,
        help="The OpenAPI JSON or YAML file to generate a client from",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=DEFAULT_OUTPUT,
        help=f"The output TypeScript file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--client-name",
        default=None,
        help="Class name for the generated client instead of one derived from info.title",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    return parser


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        run = run_generation(
            input_path=Path(args.input),
            output_path=Path(args.output),
            client_name_override=args.client_name,
        )
    except (OpenAPILoadError, NamingError, WriteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for warning in run.result.warnings:
        print(f"Warning: {warning}")
    print(f"Generated: {run.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
