"""Cursor helpers for walking construct bodies."""

from __future__ import annotations

from ..cst import STATEMENT_WRAPPERS, SyntaxNode
from ..cursor import TreeCursor
from ..nodes import ASTNode


def named_children(cursor: TreeCursor) -> list[SyntaxNode]:
    """Named children of the node under ``cursor``; the cursor ends where it started."""
    nodes = []
    if cursor.goto_first_named_child():
        nodes.append(cursor.node)
        while cursor.goto_next_named_sibling():
            nodes.append(cursor.node)
        cursor.goto_parent()
    return nodes


def adapt_statements(cursor: TreeCursor, recurse) -> list[ASTNode]:
    """Adapt the statement under ``cursor`` as a body.

    A brace block contributes its statements, a lone ``;`` contributes
    nothing, and any other statement contributes itself.
    """
    depth = cursor.depth
    try:
        while cursor.node_type in STATEMENT_WRAPPERS and cursor.goto_first_named_child():
            pass
        if not cursor.node_is_named:
            return []
        if cursor.node_type == "statement_block":
            return [recurse(node) for node in named_children(cursor)]
        return [recurse(cursor.node)]
    finally:
        while cursor.depth > depth:
            cursor.goto_parent()


def adapt_bodies(cursor: TreeCursor, recurse, tag: str = "child_statement") -> list[list[ASTNode]]:
    """Adapt every child of type ``tag`` as a body, in source order."""
    bodies = []
    if cursor.goto_first_child():
        while True:
            if cursor.node_type == tag:
                bodies.append(adapt_statements(cursor, recurse))
            if not cursor.goto_next_sibling():
                break
        cursor.goto_parent()
    return bodies


def adapt_body(cursor: TreeCursor, recurse, tag: str = "child_statement") -> list[ASTNode]:
    bodies = adapt_bodies(cursor, recurse, tag)
    return bodies[0] if bodies else []
