"""Typed in-memory model of an OpenAPI document."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

HTTP_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "patch",
    "head",
    "options",
    "trace",
)

_NULL_TYPE_NAME = "null"


class _SpecNode(BaseModel):
    """Base for model nodes bound from wire keys regardless of letter case."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        known_names = _known_key_names(cls)
        matched: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str) or value is None:
                continue
            name = known_names.get(key.lower())
            if name is not None:
                matched.setdefault(name, value)
        return matched


def _known_key_names(model: type[BaseModel]) -> dict[str, str]:
    names: dict[str, str] = {}
    for field_name, field_info in model.model_fields.items():
        names[field_name.lower()] = field_name
        if field_info.alias:
            names[field_info.alias.lower()] = field_info.alias
    return names


def _lookup(mapping: Mapping[Any, Any], key: str) -> Any:
    for candidate, value in mapping.items():
        if isinstance(candidate, str) and candidate.lower() == key:
            return value
    return None


class PrimitiveType(BaseModel):
    """A schema ``type`` given as a single type name."""

    model_config = ConfigDict(frozen=True)

    name: str


class TypeUnion(BaseModel):
    """A schema ``type`` given as a list of type names.

    ``names`` excludes the literal ``"null"`` entries, whose presence is
    recorded by ``nullable`` instead.
    """

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = ()
    nullable: bool = False


SchemaType = Union[PrimitiveType, TypeUnion]


class Schema(_SpecNode):
    """Recursive type descriptor, either a reference or an inline shape."""

    dollar_ref: Optional[str] = Field(default=None, alias="$ref")
    ref: Optional[str] = None
    schema_type: Optional[SchemaType] = Field(default=None, alias="type")
    format: Optional[str] = None
    items: Optional[Schema] = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    required: tuple[str, ...] = ()

    @field_validator("schema_type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        if isinstance(value, (PrimitiveType, TypeUnion)):
            return value
        if isinstance(value, str):
            return PrimitiveType(name=value)
        if isinstance(value, list):
            names = tuple(
                entry for entry in value if isinstance(entry, str) and entry != _NULL_TYPE_NAME
            )
            return TypeUnion(names=names, nullable=_NULL_TYPE_NAME in value)
        return None

    @property
    def reference(self) -> Optional[str]:
        """Return the reference string, preferring ``$ref`` over ``ref``."""
        if self.dollar_ref is not None:
            return self.dollar_ref
        return self.ref


class Parameter(_SpecNode):
    """One operation parameter."""

    name: str = ""
    location: str = Field(default="", alias="in")
    required: bool = False
    schema_def: Schema = Field(default_factory=Schema, alias="schema")


class MediaType(_SpecNode):
    """Schema wrapper for one response media type."""

    schema_def: Schema = Field(default_factory=Schema, alias="schema")


class Response(_SpecNode):
    """One operation response."""

    description: str = ""
    content: Optional[dict[str, MediaType]] = None


class Operation(_SpecNode):
    """One HTTP method bound to a path template."""

    operation_id: str = Field(default="", alias="operationId")
    summary: str = ""
    tags: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    responses: dict[str, Response] = Field(default_factory=dict)

    def with_shared_parameters(self, shared: Sequence[Parameter]) -> Operation:
        """Return a copy with path-level parameters merged in front of its own.

        Args:
            shared (Sequence[Parameter]): Parameters declared on the path item.

        Returns:
            Operation: Operation whose parameters start with the path-level
            ones not overridden by an own parameter of the same name and location.
        """
        if not shared:
            return self
        own_keys = {(parameter.name, parameter.location) for parameter in self.parameters}
        inherited = [
            parameter
            for parameter in shared
            if (parameter.name, parameter.location) not in own_keys
        ]
        return self.model_copy(update={"parameters": (*inherited, *self.parameters)})


class Info(_SpecNode):
    """Document metadata."""

    title: str = ""
    version: str = ""


class Components(_SpecNode):
    """Named reusable schemas, kept in declaration order."""

    schemas: dict[str, Schema] = Field(default_factory=dict)


_PARAMETER_LIST = TypeAdapter(tuple[Parameter, ...])


class Specification(_SpecNode):
    """Root of the parsed OpenAPI document."""

    openapi: str = ""
    info: Info = Field(default_factory=Info)
    paths: dict[str, dict[str, Operation]] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    @field_validator("paths", mode="before")
    @classmethod
    def _collect_operations(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        paths: dict[Any, Any] = {}
        for path, path_item in value.items():
            if not isinstance(path_item, Mapping):
                paths[path] = path_item
                continue
            shared = _PARAMETER_LIST.validate_python(_lookup(path_item, "parameters") or ())
            operations: dict[str, Operation] = {}
            for method, raw_operation in path_item.items():
                if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                    continue
                operation = Operation.model_validate(raw_operation or {})
                operations[method] = operation.with_shared_parameters(shared)
            paths[path] = operations
        return paths
