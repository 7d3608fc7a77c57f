"""Adapter for the document root."""

from __future__ import annotations

from ..nodes import Program
from ..position import Position


def adapt_program(cursor, recurse):
    """A ``Program`` spanning the whole source text.

    Top-level statements are filled in by the traversal itself.
    """
    end_line, end_column = cursor.node.tree.end_point
    return Program(position=Position(0, 0, end_line, end_column))
