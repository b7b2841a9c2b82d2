"""Map OpenAPI schema nodes to TypeScript type expressions."""

from __future__ import annotations

from typing import Optional

from .spec_model import PrimitiveType, Schema, TypeUnion

UNKNOWN_TYPE = "unknown"
VOID_TYPE = "void"
NULL_TYPE = "null"
UNION_SEPARATOR = " | "

_PRIMITIVE_TYPES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "object": "Record<string, unknown>",
    "array": "unknown[]",
}


def map_primitive_type(openapi_type: Optional[str]) -> str:
    """Map one OpenAPI primitive type name to its TypeScript counterpart.

    Args:
        openapi_type (Optional[str]): OpenAPI type name, matched case-sensitively.

    Returns:
        str: TypeScript type name, or ``unknown`` for unrecognized names.
    """
    if openapi_type is None:
        return UNKNOWN_TYPE
    return _PRIMITIVE_TYPES.get(openapi_type, UNKNOWN_TYPE)


def reference_name(reference: str) -> str:
    """Return the component name a reference string points to."""
    return reference.rsplit("/", maxsplit=1)[-1]


def resolve_type(schema: Schema) -> str:
    """Convert a schema node into a TypeScript type expression.

    References win over every other field. Shapes that cannot be resolved
    degrade to ``unknown`` instead of failing.

    Args:
        schema (Schema): Schema node to convert.

    Returns:
        str: TypeScript type expression.
    """
    reference = schema.reference
    if reference:
        return reference_name(reference)

    schema_type = schema.schema_type
    if isinstance(schema_type, PrimitiveType):
        return _resolve_primitive(schema_type, schema.items)
    if isinstance(schema_type, TypeUnion):
        return _resolve_union(schema_type)
    return UNKNOWN_TYPE


def _resolve_primitive(schema_type: PrimitiveType, items: Optional[Schema]) -> str:
    if schema_type.name == "array" and items is not None:
        return f"{resolve_type(items)}[]"
    return map_primitive_type(schema_type.name)


def _resolve_union(schema_type: TypeUnion) -> str:
    if not schema_type.names:
        return UNKNOWN_TYPE
    members = [map_primitive_type(name) for name in schema_type.names]
    if schema_type.nullable:
        members.append(NULL_TYPE)
    return UNION_SEPARATOR.join(members)
