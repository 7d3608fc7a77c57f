"""Adapters for boolean operations."""

from __future__ import annotations

from ..nodes import (
    DifferenceOperation, HullOperation, IntersectionOperation, MinkowskiOperation,
    UnionOperation,
)
from ..position import extract_position
from .arguments import bind_arguments, collect_arguments
from .children import adapt_body


def _children_only(node_class):
    def adapt_operation(cursor, recurse):
        return node_class(
            position=extract_position(cursor),
            children=adapt_body(cursor, recurse),
        )
    adapt_operation.__name__ = f"adapt_{node_class.__name__}"
    adapt_operation.__doc__ = f"Adapt a ``{node_class.__name__}``; arguments are ignored."
    return adapt_operation


adapt_union = _children_only(UnionOperation)
adapt_difference = _children_only(DifferenceOperation)
adapt_intersection = _children_only(IntersectionOperation)
adapt_hull = _children_only(HullOperation)


def adapt_minkowski(cursor, recurse):
    bound = bind_arguments(collect_arguments(cursor.node, recurse), ("convexity",))
    return MinkowskiOperation(
        position=extract_position(cursor),
        convexity=bound.get("convexity"),
        children=adapt_body(cursor, recurse),
    )
