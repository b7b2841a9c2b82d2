"""Internal datatypes for TypeScript declarations and generation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeAlias, Union

from .spec_model import Operation


@dataclass(frozen=True)
class PropertySignature:
    """One member of an interface declaration."""

    name: str
    annotation: str
    optional: bool


@dataclass(frozen=True)
class InterfaceDecl:
    """An exported interface declaration."""

    name: str
    members: tuple[PropertySignature, ...]


@dataclass(frozen=True)
class Statement:
    """A single statement line, including its own trailing punctuation."""

    text: str


@dataclass(frozen=True)
class BlankLine:
    """An empty line between statements."""


@dataclass(frozen=True)
class BlockStatement:
    """A statement whose body is indented between an opener and a closer line."""

    opener: str
    body: tuple[StatementNode, ...]
    closer: str = "}"


StatementNode: TypeAlias = Union[Statement, BlankLine, BlockStatement]


@dataclass(frozen=True)
class ParameterDecl:
    """A method parameter."""

    name: str
    annotation: str
    default: Optional[str] = None


@dataclass(frozen=True)
class MethodDecl:
    """A class method or constructor.

    ``return_type`` is ``None`` for constructors.
    """

    name: str
    parameters: tuple[ParameterDecl, ...]
    return_type: Optional[str]
    body: tuple[StatementNode, ...]
    modifiers: tuple[str, ...] = ()
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldDecl:
    """A class field declaration without initializer."""

    name: str
    annotation: str
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassDecl:
    """An exported class declaration."""

    name: str
    fields: tuple[FieldDecl, ...]
    methods: tuple[MethodDecl, ...]


Declaration: TypeAlias = Union[InterfaceDecl, ClassDecl]


@dataclass(frozen=True)
class TypeScriptDocument:
    """A complete generated source file."""

    header_comments: tuple[str, ...]
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class OperationSpec:
    """Operation metadata extracted from OpenAPI paths."""

    path: str
    method: str
    method_name: str
    operation: Operation


@dataclass(frozen=True)
class GenerationResult:
    """Generated source and the observations made while producing it."""

    client_name: str
    source: str
    warnings: tuple[str, ...]
