"""Unit tests for OpenAPI to TypeScript type mapping."""

from __future__ import annotations

from typing import Optional

import pytest

from openapi_to_typescript_generator.spec_model import PrimitiveType, Schema, TypeUnion
from openapi_to_typescript_generator.type_mapper import (
    map_primitive_type,
    reference_name,
    resolve_type,
)


@pytest.mark.parametrize(
    ("openapi_type", "expected"),
    [
        ("string", "string"),
        ("integer", "number"),
        ("number", "number"),
        ("boolean", "boolean"),
        ("object", "Record<string, unknown>"),
        ("array", "unknown[]"),
        ("String", "unknown"),
        ("file", "unknown"),
        (None, "unknown"),
    ],
)
def test_primitive_table(openapi_type: Optional[str], expected: str) -> None:
    """Primitive names map case-sensitively through the fixed table."""
    assert map_primitive_type(openapi_type) == expected


def test_reference_uses_final_segment_and_ignores_other_fields() -> None:
    """A reference resolves to the last path segment regardless of type or items."""
    schema = Schema.model_validate(
        {
            "$ref": "#/components/schemas/Pet",
            "type": "array",
            "items": {"type": "string"},
        }
    )
    assert resolve_type(schema) == "Pet"


def test_dollar_ref_takes_precedence_over_alternate_ref() -> None:
    """``$ref`` wins when both reference fields are present."""
    schema = Schema.model_validate({"$ref": "#/components/schemas/Pet", "ref": "#/x/Owner"})
    assert resolve_type(schema) == "Pet"


def test_alternate_ref_field_is_used_when_dollar_ref_is_absent() -> None:
    """The alternate ``ref`` field is honored on its own."""
    schema = Schema.model_validate({"ref": "#/components/schemas/Owner"})
    assert resolve_type(schema) == "Owner"


def test_reference_without_slash_is_used_verbatim() -> None:
    """A reference with no ``/`` is its own component name."""
    assert reference_name("Pet") == "Pet"


def test_nullable_union() -> None:
    """A ``null`` entry adds a trailing nullable member."""
    schema = Schema.model_validate({"type": ["string", "null"]})
    assert resolve_type(schema) == "string | null"


def test_union_without_null() -> None:
    """A list type without ``null`` yields a plain union."""
    schema = Schema.model_validate({"type": ["integer", "boolean"]})
    assert resolve_type(schema) == "number | boolean"


def test_null_entry_position_does_not_matter() -> None:
    """The nullable member is appended after all mapped members."""
    schema = Schema.model_validate({"type": ["null", "integer", "string"]})
    assert resolve_type(schema) == "number | string | null"


@pytest.mark.parametrize("raw_type", [[], ["null"]])
def test_union_with_no_usable_entries_is_unknown(raw_type: list[str]) -> None:
    """Unions that contain nothing but ``null`` degrade to ``unknown``."""
    schema = Schema.model_validate({"type": raw_type})
    assert resolve_type(schema) == "unknown"


def test_nested_arrays() -> None:
    """Arrays of arrays nest their element type."""
    schema = Schema.model_validate(
        {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}
    )
    assert resolve_type(schema) == "number[][]"


def test_array_of_references() -> None:
    """Array items may be references."""
    schema = Schema.model_validate(
        {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}
    )
    assert resolve_type(schema) == "Pet[]"


def test_array_without_items_is_untyped() -> None:
    """A bare array maps to ``unknown[]``."""
    assert resolve_type(Schema.model_validate({"type": "array"})) == "unknown[]"


def test_schema_without_type_or_reference_is_unknown() -> None:
    """Empty schemas degrade to ``unknown``."""
    assert resolve_type(Schema()) == "unknown"
    assert resolve_type(Schema.model_validate({"format": "uuid"})) == "unknown"


def test_type_sum_is_built_directly() -> None:
    """Schemas built from Python values resolve like parsed ones."""
    single = Schema(schema_type=PrimitiveType(name="boolean"))
    union = Schema(schema_type=TypeUnion(names=("number",), nullable=True))
    assert resolve_type(single) == "boolean"
    assert resolve_type(union) == "number | null"
