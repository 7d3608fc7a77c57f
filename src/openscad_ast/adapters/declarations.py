"""Adapters for module and function declarations and for ``use``/``include``."""

from __future__ import annotations

from ..cst import SyntaxNode
from ..nodes import (
    FunctionDeclaration, IncludeStatement, ModuleDeclaration, Parameter, Unknown,
    UseStatement,
)
from ..position import extract_position
from .children import adapt_body


def _parameters(node: SyntaxNode, recurse) -> list[Parameter]:
    block = node.child_by_type("parameter_block")
    params = block.child_by_type("parameters") if block is not None else None
    if params is None:
        return []
    result = []
    for param in params.children_by_type("parameter"):
        inner = param.named_child(0) or param
        name = inner.child_by_type("variable_name")
        default = inner.child_by_type("expr")
        result.append(Parameter(
            position=extract_position(param),
            name=name.text if name is not None else "",
            default=recurse(default) if default is not None else None,
        ))
    return result


def _name(node: SyntaxNode, tag: str) -> str:
    found = node.child_by_type(tag)
    return found.text if found is not None else ""


def adapt_module_declaration(cursor, recurse):
    node = cursor.node
    return ModuleDeclaration(
        position=extract_position(cursor),
        name=_name(node, "module_name"),
        parameters=_parameters(node, recurse),
        body=adapt_body(cursor, recurse, tag="statement"),
    )


def adapt_function_declaration(cursor, recurse):
    node = cursor.node
    expression = node.child_by_type("expr")
    return FunctionDeclaration(
        position=extract_position(cursor),
        name=_name(node, "function_name"),
        parameters=_parameters(node, recurse),
        expression=recurse(expression) if expression is not None else Unknown(position=extract_position(cursor)),
    )


def _path(node: SyntaxNode) -> str:
    target = node.child_by_type("use_include_file")
    path = target.child_by_type("include_path") if target is not None else None
    return path.text.strip() if path is not None else ""


def adapt_use(cursor, recurse):
    return UseStatement(position=extract_position(cursor), path=_path(cursor.node))


def adapt_include(cursor, recurse):
    return IncludeStatement(position=extract_position(cursor), path=_path(cursor.node))
