"""Build interface declarations for component schemas."""

from __future__ import annotations

from .model_types import InterfaceDecl, PropertySignature
from .naming import camel_case
from .spec_model import Components, Schema
from .type_mapper import resolve_type


def build_interfaces(components: Components) -> list[InterfaceDecl]:
    """Build one interface per component schema, in declaration order.

    Args:
        components (Components): Document components section.

    Returns:
        list[InterfaceDecl]: Interface declarations.
    """
    return [build_interface(name, schema) for name, schema in components.schemas.items()]


def build_interface(name: str, schema: Schema) -> InterfaceDecl:
    """Build the interface for one named schema.

    Members follow the schema's property order. A member is optional unless
    its original property name is listed in ``required``.
    """
    required = set(schema.required)
    members = tuple(
        PropertySignature(
            name=camel_case(property_name),
            annotation=resolve_type(property_schema),
            optional=property_name not in required,
        )
        for property_name, property_schema in schema.properties.items()
    )
    return InterfaceDecl(name=name, members=members)
