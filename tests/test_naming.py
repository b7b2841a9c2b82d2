"""Unit tests for identifier and client naming."""

from __future__ import annotations

from typing import Any

import pytest

from openapi_to_typescript_generator.naming import (
    NamingError,
    camel_case,
    client_name,
    resolve_operations,
)
from openapi_to_typescript_generator.spec_model import Specification


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("PetId", "petId"),
        ("petId", "petId"),
        ("X", "x"),
        ("user_id", "user_id"),
        ("X-Request-Id", "x-Request-Id"),
        ("", ""),
    ],
)
def test_camel_case_only_lowers_first_character(raw: str, expected: str) -> None:
    """Only the first character changes; words are not re-segmented."""
    assert camel_case(raw) == expected


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Pet Store", "PetStoreClient"),
        ("Inventory | Service-API", "InventoryServiceAPIClient"),
        ("", "ApiClient"),
        ("   ", "ApiClient"),
        (" - | ", "ApiClient"),
    ],
)
def test_client_name_from_title(title: str, expected: str) -> None:
    """Spaces, pipes and hyphens are removed before adding the suffix."""
    assert client_name(title) == expected


def test_client_name_override_wins() -> None:
    """An explicit name is used regardless of the title."""
    assert client_name("Pet Store", "Pets") == "Pets"
    assert client_name("", "Pets") == "Pets"


def test_empty_override_falls_back_to_title() -> None:
    """An empty override does not suppress title derivation."""
    assert client_name("Pet Store", "") == "PetStoreClient"


def _spec(paths: dict[str, Any]) -> Specification:
    return Specification.model_validate({"openapi": "3.0.0", "paths": paths})


def test_operations_follow_path_then_method_declaration_order() -> None:
    """Operations keep document order for paths and methods."""
    spec = _spec(
        {
            "/b": {
                "post": {"operationId": "CreateB"},
                "get": {"operationId": "listB"},
            },
            "/a": {"delete": {"operationId": "deleteA"}},
        }
    )
    operations = resolve_operations(spec)
    assert [(op.path, op.method, op.method_name) for op in operations] == [
        ("/b", "post", "createB"),
        ("/b", "get", "listB"),
        ("/a", "delete", "deleteA"),
    ]


@pytest.mark.parametrize("operation", [{}, {"operationId": ""}, {"operationId": "  "}])
def test_missing_operation_id_fails(operation: dict[str, str]) -> None:
    """Operations without an operationId stop generation."""
    spec = _spec({"/pets": {"get": operation}})
    with pytest.raises(NamingError, match="GET /pets has no operationId"):
        resolve_operations(spec)


def test_duplicate_operation_ids_fail() -> None:
    """Duplicated operationIds stop generation."""
    spec = _spec(
        {
            "/pets": {"get": {"operationId": "listPets"}},
            "/animals": {"get": {"operationId": "listPets"}},
        }
    )
    with pytest.raises(NamingError, match="listPets"):
        resolve_operations(spec)


def test_operation_ids_colliding_after_camel_case_fail() -> None:
    """Ids that only differ in their first letter collide as method names."""
    spec = _spec(
        {
            "/pets": {"get": {"operationId": "ListPets"}},
            "/animals": {"get": {"operationId": "listPets"}},
        }
    )
    with pytest.raises(NamingError) as exc_info:
        resolve_operations(spec)
    message = str(exc_info.value)
    assert "GET /pets (ListPets)" in message
    assert "GET /animals (listPets)" in message
