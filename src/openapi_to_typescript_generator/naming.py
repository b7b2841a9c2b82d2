"""Naming helpers for TypeScript identifiers and client methods."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from .model_types import OperationSpec
from .spec_model import Specification

DEFAULT_CLIENT_NAME = "ApiClient"
CLIENT_NAME_SUFFIX = "Client"

_TITLE_STRIP_CHARACTERS: tuple[str, ...] = (" ", "|", "-")


class NamingError(RuntimeError):
    """Raised when operations cannot be given distinct method names."""


def camel_case(name: str) -> str:
    """Lower-case the first character of an identifier.

    The remaining characters are kept as-is; snake or kebab case names are
    not re-segmented.
    """
    if not name:
        return name
    return name[0].lower() + name[1:]


def client_name(title: str, override: Optional[str] = None) -> str:
    """Derive the generated client class name.

    Args:
        title (str): Document title from ``info.title``.
        override (Optional[str]): Explicit class name that wins when non-empty.

    Returns:
        str: Client class name.
    """
    if override:
        return override
    cleaned = title
    for character in _TITLE_STRIP_CHARACTERS:
        cleaned = cleaned.replace(character, "")
    cleaned = cleaned.strip()
    if not cleaned:
        return DEFAULT_CLIENT_NAME
    return f"{cleaned}{CLIENT_NAME_SUFFIX}"


def resolve_operations(spec: Specification) -> list[OperationSpec]:
    """Collect operations in path-then-method declaration order.

    Args:
        spec (Specification): Parsed OpenAPI document.

    Returns:
        list[OperationSpec]: Operations with their client method names.

    Raises:
        NamingError: If an operation has no ``operationId`` or two operations
            map to the same method name.
    """
    resolved: list[OperationSpec] = []
    for path, methods in spec.paths.items():
        for method, operation in methods.items():
            if not operation.operation_id.strip():
                raise NamingError(f"Operation {method.upper()} {path} has no operationId")
            resolved.append(
                OperationSpec(
                    path=path,
                    method=method,
                    method_name=camel_case(operation.operation_id),
                    operation=operation,
                )
            )

    _ensure_unique_method_names(resolved)
    return resolved


def _ensure_unique_method_names(operations: list[OperationSpec]) -> None:
    counts = Counter(operation.method_name for operation in operations)
    conflicting = {name for name, count in counts.items() if count > 1}
    if not conflicting:
        return
    conflicts = [
        f"{operation.method.upper()} {operation.path} ({operation.operation.operation_id})"
        for operation in operations
        if operation.method_name in conflicting
    ]
    raise NamingError(
        "Conflicting operationId values map to the same method name: " + ", ".join(conflicts)
    )
