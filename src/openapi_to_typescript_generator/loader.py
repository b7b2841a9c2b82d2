"""OpenAPI document loading and deserialization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .json_types import JSONObject, JSONValue
from .spec_model import Specification

_JSON_SUFFIXES: tuple[str, ...] = (".json",)
_SUPPORTED_MAJOR_VERSION = 3


class OpenAPILoadError(RuntimeError):
    """Raised when a source OpenAPI document cannot be loaded."""


def load_openapi_document(path: Path) -> JSONObject:
    """Read a JSON or YAML OpenAPI document into plain mappings.

    Args:
        path (Path): Path to the input document. Files ending in ``.json`` are
            parsed as JSON, anything else as YAML.

    Returns:
        JSONObject: Top-level document mapping.
    """
    if not path.is_file():
        raise OpenAPILoadError(f"Input file not found: {path.resolve()}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in _JSON_SUFFIXES:
                payload = json.load(handle)
            else:
                payload = yaml.safe_load(handle)
    except OSError as exc:
        raise OpenAPILoadError(f"Failed to read OpenAPI file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise OpenAPILoadError(f"Failed to parse JSON in {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise OpenAPILoadError(f"Failed to parse YAML in {path}: {exc}") from exc

    payload_value: JSONValue = payload
    if not isinstance(payload_value, dict):
        raise OpenAPILoadError(
            f"OpenAPI document must deserialize to a mapping, got {type(payload_value)!r}"
        )
    return payload_value


def parse_specification(document: JSONObject) -> Specification:
    """Bind a raw document onto the typed specification model.

    Args:
        document (JSONObject): Raw top-level document mapping.

    Returns:
        Specification: Parsed document with defaults for missing optional fields.
    """
    try:
        return Specification.model_validate(document)
    except ValidationError as exc:
        raise OpenAPILoadError(f"OpenAPI document does not fit the expected model: {exc}") from exc


def load_specification(path: Path) -> Specification:
    """Load and parse an OpenAPI document from disk."""
    return parse_specification(load_openapi_document(path))


def unsupported_version_warning(version: str) -> Optional[str]:
    """Return a warning when the declared version is not OpenAPI 3.x."""
    major_text = version.strip().split(".", maxsplit=1)[0]
    try:
        major = int(major_text)
    except ValueError:
        return f"Unable to parse OpenAPI version {version!r}; assuming 3.x semantics"
    if major != _SUPPORTED_MAJOR_VERSION:
        return f"OpenAPI version {version} is not 3.x; output may be incomplete"
    return None
