"""Adapters for assignments, conditionals, loops and other module-level control flow."""

from __future__ import annotations

from typing import Optional

from ..cst import SyntaxNode
from ..nodes import (
    AssertStatement, AssignmentStatement, BlockStatement, ChildrenStatement,
    EchoStatement, ForStatement, IdentifierExpression, IfStatement,
    IntersectionForStatement, LetStatement, Unknown,
)
from ..position import extract_position
from .arguments import bind_arguments, collect_arguments, number
from .children import adapt_bodies, adapt_body, adapt_statements


def _assignment(node: SyntaxNode, recurse) -> AssignmentStatement:
    """Build an assignment from ``name = expr``, recovering missing parts.

    A missing name becomes ``unknown`` and a missing value becomes ``0``.
    """
    position = extract_position(node)
    name = node.child_by_type("variable_name")
    value = node.child_by_type("expr")
    return AssignmentStatement(
        position=position,
        left=IdentifierExpression(
            position=extract_position(name) if name is not None else position,
            name=name.text if name is not None and name.text else "unknown",
        ),
        right=recurse(value) if value is not None else number(0, position),
    )


def adapt_assignment_list(assignments: Optional[SyntaxNode], recurse) -> list[AssignmentStatement]:
    """Adapt each ``name = expr`` of an ``assignments_expr`` node; None gives an empty list."""
    if assignments is None:
        return []
    return [_assignment(child, recurse) for child in assignments.children_by_type("assignment_expr")]


def _assignments(node: SyntaxNode, recurse) -> list[AssignmentStatement]:
    return adapt_assignment_list(node.child_by_type("assignments_expr"), recurse)


def adapt_assignment(cursor, recurse):
    return _assignment(cursor.node, recurse)


def adapt_if(cursor, recurse):
    """``if`` with an optional ``else``; ``else_branch`` is None without one."""
    node = cursor.node
    condition = node.child_by_type("expr")
    bodies = adapt_bodies(cursor, recurse)
    return IfStatement(
        position=extract_position(cursor),
        condition=recurse(condition) if condition is not None else Unknown(position=extract_position(cursor)),
        then_branch=bodies[0] if bodies else [],
        else_branch=bodies[1] if node.type == "ifelse_statement" and len(bodies) > 1 else None,
    )


def _loop(node_class, cursor, recurse):
    # for (i = a, j = b) nests: the loop over i holds the loop over j.
    position = extract_position(cursor)
    assignments = _assignments(cursor.node, recurse)
    children = adapt_body(cursor, recurse)
    if not assignments:
        return node_class(
            position=position,
            variable="unknown",
            iterable=Unknown(position=position),
            children=children,
        )
    for assignment in reversed(assignments):
        loop = node_class(
            position=position,
            variable=assignment.left.name,
            iterable=assignment.right,
            children=children,
        )
        children = [loop]
    return loop


def adapt_for(cursor, recurse):
    return _loop(ForStatement, cursor, recurse)


def adapt_intersection_for(cursor, recurse):
    return _loop(IntersectionForStatement, cursor, recurse)


def adapt_let(cursor, recurse):
    return LetStatement(
        position=extract_position(cursor),
        assignments=_assignments(cursor.node, recurse),
        children=adapt_body(cursor, recurse),
    )


def adapt_block(cursor, recurse):
    return BlockStatement(
        position=extract_position(cursor),
        children=adapt_statements(cursor, recurse),
    )


def adapt_echo(cursor, recurse):
    return EchoStatement(
        position=extract_position(cursor),
        arguments=collect_arguments(cursor.node, recurse),
        children=adapt_body(cursor, recurse),
    )


def adapt_assert(cursor, recurse):
    return AssertStatement(
        position=extract_position(cursor),
        arguments=collect_arguments(cursor.node, recurse),
        children=adapt_body(cursor, recurse),
    )


def adapt_children_statement(cursor, recurse):
    """``children()`` or ``children(index)`` inside a module body."""
    bound = bind_arguments(collect_arguments(cursor.node, recurse), ("index",))
    return ChildrenStatement(position=extract_position(cursor), index=bound.get("index"))
