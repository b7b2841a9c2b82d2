"""Render TypeScript declaration nodes as source text."""

from __future__ import annotations

from collections.abc import Iterable

from .model_types import (
    BlankLine,
    BlockStatement,
    ClassDecl,
    Declaration,
    InterfaceDecl,
    MethodDecl,
    ParameterDecl,
    Statement,
    StatementNode,
    TypeScriptDocument,
)

INDENT = "  "


def render_document(document: TypeScriptDocument) -> str:
    """Render a complete TypeScript source file.

    Header comments are followed by one blank line, and every declaration
    except the last is followed by one blank line.

    Args:
        document (TypeScriptDocument): Document to render.

    Returns:
        str: TypeScript source ending with a newline.
    """
    lines: list[str] = [f"// {comment}" for comment in document.header_comments]
    lines.append("")
    last_index = len(document.declarations) - 1
    for index, declaration in enumerate(document.declarations):
        lines.extend(render_declaration(declaration))
        if index < last_index:
            lines.append("")
    return "\n".join(lines) + "\n"


def render_declaration(declaration: Declaration) -> list[str]:
    """Render one top-level declaration as source lines."""
    if isinstance(declaration, InterfaceDecl):
        return _render_interface(declaration)
    if isinstance(declaration, ClassDecl):
        return _render_class(declaration)
    raise TypeError(f"Unsupported declaration node: {declaration!r}")


def render_statements(statements: Iterable[StatementNode]) -> list[str]:
    """Render statement nodes as unindented source lines."""
    lines: list[str] = []
    for statement in statements:
        if isinstance(statement, Statement):
            lines.append(statement.text)
        elif isinstance(statement, BlankLine):
            lines.append("")
        elif isinstance(statement, BlockStatement):
            lines.append(statement.opener)
            lines.extend(_indent(render_statements(statement.body)))
            lines.append(statement.closer)
        else:
            raise TypeError(f"Unsupported statement node: {statement!r}")
    return lines


def _render_interface(declaration: InterfaceDecl) -> list[str]:
    lines = [f"export interface {declaration.name} {{"]
    for member in declaration.members:
        marker = "?" if member.optional else ""
        lines.append(f"{INDENT}{member.name}{marker}: {member.annotation};")
    lines.append("}")
    return lines


def _render_class(declaration: ClassDecl) -> list[str]:
    lines = [f"export class {declaration.name} {{"]
    for field in declaration.fields:
        prefix = _modifier_prefix(field.modifiers)
        lines.append(f"{INDENT}{prefix}{field.name}: {field.annotation};")
    lines.append("")
    for method in declaration.methods:
        lines.extend(_indent(_render_method(method)))
        lines.append("")
    lines.append("}")
    return lines


def _render_method(method: MethodDecl) -> list[str]:
    prefix = _modifier_prefix(method.modifiers)
    type_parameters = f"<{', '.join(method.type_parameters)}>" if method.type_parameters else ""
    parameters = ", ".join(_render_parameter(parameter) for parameter in method.parameters)
    return_type = f": {method.return_type}" if method.return_type is not None else ""
    header = f"{prefix}{method.name}{type_parameters}({parameters}){return_type} {{"
    return [header, *_indent(render_statements(method.body)), "}"]


def _render_parameter(parameter: ParameterDecl) -> str:
    rendered = f"{parameter.name}: {parameter.annotation}"
    if parameter.default is not None:
        rendered = f"{rendered} = {parameter.default}"
    return rendered


def _modifier_prefix(modifiers: tuple[str, ...]) -> str:
    return "".join(f"{modifier} " for modifier in modifiers)


def _indent(lines: list[str]) -> list[str]:
    return [f"{INDENT}{line}" if line else line for line in lines]
