"""Build the client options interface and the client class."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .model_types import (
    BlankLine,
    BlockStatement,
    ClassDecl,
    FieldDecl,
    InterfaceDecl,
    MethodDecl,
    OperationSpec,
    ParameterDecl,
    PropertySignature,
    Statement,
)
from .naming import camel_case
from .spec_model import Operation, Response
from .type_mapper import VOID_TYPE, resolve_type

CLIENT_OPTIONS_NAME = "ClientOptions"
HEADERS_TYPE = "Record<string, string>"

PATH_LOCATION = "path"
QUERY_LOCATION = "query"
SIGNATURE_LOCATIONS: tuple[str, ...] = (PATH_LOCATION, QUERY_LOCATION)

SUCCESS_STATUS_CODES: tuple[str, ...] = ("200", "201")
JSON_MEDIA_TYPE_MARKER = "json"


def build_client_options() -> InterfaceDecl:
    """Build the options interface accepted by the client constructor."""
    return InterfaceDecl(
        name=CLIENT_OPTIONS_NAME,
        members=(
            PropertySignature(name="baseUrl", annotation="string", optional=False),
            PropertySignature(name="headers", annotation=HEADERS_TYPE, optional=True),
        ),
    )


def build_client_class(name: str, operations: Sequence[OperationSpec]) -> ClassDecl:
    """Build the client class with one method per operation.

    Args:
        name (str): Client class name.
        operations (Sequence[OperationSpec]): Operations in emission order.

    Returns:
        ClassDecl: Class declaration holding the constructor, the request
        helper and the operation methods.
    """
    return ClassDecl(
        name=name,
        fields=(
            FieldDecl(name="baseUrl", annotation="string", modifiers=("private",)),
            FieldDecl(name="headers", annotation=HEADERS_TYPE, modifiers=("private",)),
        ),
        methods=(
            _build_constructor(),
            _build_request_helper(),
            *(build_operation_method(operation) for operation in operations),
        ),
    )


def build_operation_method(operation_spec: OperationSpec) -> MethodDecl:
    """Build the async client method for one operation.

    Query parameters are part of the signature but are not sent with the
    request.
    """
    operation = operation_spec.operation
    result_type = return_type(operation)
    path = path_expression(operation_spec.path, operation)
    return MethodDecl(
        name=operation_spec.method_name,
        parameters=method_parameters(operation),
        return_type=f"Promise<{result_type}>",
        modifiers=("async",),
        body=(
            BlockStatement(
                opener=f"return this.request<{result_type}>({path}, {{",
                body=(Statement(f"method: '{operation_spec.method.upper()}',"),),
                closer="});",
            ),
        ),
    )


def method_parameters(operation: Operation) -> tuple[ParameterDecl, ...]:
    """Return the signature parameters for path and query parameters, all required."""
    return tuple(
        ParameterDecl(
            name=camel_case(parameter.name),
            annotation=resolve_type(parameter.schema_def),
        )
        for parameter in operation.parameters
        if parameter.location in SIGNATURE_LOCATIONS
    )


def return_type(operation: Operation) -> str:
    """Resolve the method return type from the ``200`` or ``201`` response.

    ``200`` is preferred over ``201`` regardless of declaration order. A
    missing response, missing content or absent JSON media type yields
    ``void``.
    """
    response = _success_response(operation)
    if response is None or response.content is None:
        return VOID_TYPE

    for media_type_name, media_type in response.content.items():
        if JSON_MEDIA_TYPE_MARKER in media_type_name:
            return resolve_type(media_type.schema_def)
    return VOID_TYPE


def path_expression(path: str, operation: Operation) -> str:
    """Render the request path as a string literal or a template literal.

    Args:
        path (str): URL path template such as ``/pets/{petId}``.
        operation (Operation): Operation whose path parameters are substituted.

    Returns:
        str: ``'...'`` when the operation has no path parameters, otherwise a
        backtick template with each ``{name}`` placeholder interpolated.
    """
    path_parameters = [
        parameter for parameter in operation.parameters if parameter.location == PATH_LOCATION
    ]
    if not path_parameters:
        return f"'{path}'"

    expression = path
    for parameter in path_parameters:
        expression = expression.replace(
            f"{{{parameter.name}}}", f"${{{camel_case(parameter.name)}}}"
        )
    return f"`{expression}`"


def skipped_parameter_warnings(operations: Sequence[OperationSpec]) -> list[str]:
    """Describe parameters left out of method signatures because of their location."""
    warnings: list[str] = []
    for operation_spec in operations:
        for parameter in operation_spec.operation.parameters:
            if parameter.location in SIGNATURE_LOCATIONS:
                continue
            warnings.append(
                f"Skipping {parameter.location or 'unlocated'} parameter '{parameter.name}' "
                f"of {operation_spec.method.upper()} {operation_spec.path}"
            )
    return warnings


def _success_response(operation: Operation) -> Optional[Response]:
    for status_code in SUCCESS_STATUS_CODES:
        response = operation.responses.get(status_code)
        if response is not None:
            return response
    return None


def _build_constructor() -> MethodDecl:
    return MethodDecl(
        name="constructor",
        parameters=(ParameterDecl(name="options", annotation=CLIENT_OPTIONS_NAME),),
        return_type=None,
        body=(
            Statement("this.baseUrl = options.baseUrl.replace(/\\/$/, '');"),
            Statement("this.headers = options.headers ?? {};"),
        ),
    )


def _build_request_helper() -> MethodDecl:
    return MethodDecl(
        name="request",
        parameters=(
            ParameterDecl(name="path", annotation="string"),
            ParameterDecl(name="options", annotation="RequestInit", default="{}"),
        ),
        return_type="Promise<T>",
        modifiers=("private", "async"),
        type_parameters=("T",),
        body=(
            BlockStatement(
                opener="const response = await fetch(`${this.baseUrl}${path}`, {",
                body=(
                    Statement("...options,"),
                    BlockStatement(
                        opener="headers: {",
                        body=(
                            Statement("'Content-Type': 'application/json',"),
                            Statement("...this.headers,"),
                            Statement("...options.headers,"),
                        ),
                        closer="},",
                    ),
                ),
                closer="});",
            ),
            BlankLine(),
            BlockStatement(
                opener="if (!response.ok) {",
                body=(
                    Statement("throw new Error(`HTTP ${response.status}: ${response.statusText}`);"),
                ),
            ),
            BlankLine(),
            BlockStatement(
                opener="if (response.status === 204) {",
                body=(Statement("return undefined as T;"),),
            ),
            BlankLine(),
            Statement("return response.json();"),
        ),
    )
