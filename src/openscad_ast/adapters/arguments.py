"""Argument extraction and parameter normalization shared by the adapters.

OpenSCAD modules accept arguments positionally, in each module's canonical
parameter order, or by name. ``bind_arguments`` resolves both forms into a
``{parameter: expression}`` mapping. The remaining helpers turn those
expressions into the shape the AST nodes expect: broadcast vectors, radii
from diameters, boolean flags, and literal defaults for missing values.
"""

from __future__ import annotations

import copy
from typing import Callable, Iterable, Optional, Sequence

from ..cst import SyntaxNode
from ..nodes import (
    Argument, ASTNode, BinaryExpression, Expression, LiteralExpression, Unknown,
    Vector2, Vector3, VectorExpression,
)
from ..position import Position, extract_position

Recurse = Callable[[SyntaxNode], ASTNode]


def find_arguments(node: SyntaxNode) -> Optional[SyntaxNode]:
    """Locate the ``arguments`` node of a call, directly or inside its ``argument_block``."""
    found = node.child_by_type("arguments")
    if found is not None:
        return found
    block = node.child_by_type("argument_block")
    if block is not None:
        return block.child_by_type("arguments")
    return None


def collect_arguments(node: SyntaxNode, recurse: Recurse) -> list[Argument]:
    """Adapt every argument of the call ``node`` in source order.

    A call without arguments has no ``arguments`` node at all, which yields
    an empty list.
    """
    args_node = find_arguments(node)
    if args_node is None:
        return []
    result = []
    for arg in args_node.children_by_type("argument"):
        inner = arg.named_child(0) or arg
        name_node = inner.child_by_type("variable_name") if inner.type == "named_argument" else None
        value_node = inner.child_by_type("expr")
        if value_node is not None:
            value = recurse(value_node)
        else:
            value = Unknown(position=extract_position(arg))
        result.append(Argument(
            position=extract_position(arg),
            value=value,
            name=name_node.text if name_node is not None else None,
        ))
    return result


def bind_arguments(
        arguments: Iterable[Argument],
        positional: Sequence[str],
        names: Iterable[str] = ()
) -> dict[str, Expression]:
    """Bind call arguments to parameter names.

    Args:
        arguments: Arguments in source order.
        positional: Canonical parameter order for positional arguments.
        names: Parameters accepted by name only (``d``, ``$fn``...).

    Returns:
        Mapping of parameter name to bound expression. Surplus positionals
        and unrecognized names are dropped; a named argument overrides a
        positional one for the same parameter.
    """
    accepted = set(positional) | set(names)
    bound: dict[str, Expression] = {}
    index = 0
    for argument in arguments:
        if argument.name is None:
            if index < len(positional):
                bound.setdefault(positional[index], argument.value)
            index += 1
        elif argument.name in accepted:
            bound[argument.name] = argument.value
    return bound


# --- Literal helpers ---

def number(value: float, position: Position) -> LiteralExpression:
    return LiteralExpression(position=position, value_type="number", value=float(value))


def literal_number(expr: Optional[ASTNode]) -> Optional[float]:
    """The value of a numeric literal, None for anything else."""
    if isinstance(expr, LiteralExpression) and expr.value_type == "number":
        return expr.value
    return None


def literal_bool(expr: Optional[ASTNode], default: bool = False) -> bool:
    """The value of a boolean literal, ``default`` for anything else."""
    if isinstance(expr, LiteralExpression) and expr.value_type == "boolean":
        return bool(expr.value)
    return default


def halve(diameter: Expression) -> Expression:
    """Convert a diameter expression into a radius expression.

    Numeric literals are halved in place. Any other expression becomes
    ``diameter / 2`` so that no evaluation is needed.
    """
    value = literal_number(diameter)
    if value is not None:
        return number(value / 2, diameter.position)
    return BinaryExpression(
        position=diameter.position,
        operator="/",
        left=diameter,
        right=number(2, diameter.position),
    )


def radius(bound: dict[str, Expression], radius_name: str, diameter_name: str) -> Optional[Expression]:
    """Radius from a ``r``-style or ``d``-style parameter; the radius wins if both are given."""
    if radius_name in bound:
        return bound[radius_name]
    if diameter_name in bound:
        return halve(bound[diameter_name])
    return None


# --- Vector normalization ---

def _components(expr: Optional[Expression], length: int, pad: float,
                default: Optional[Sequence[float]], position: Position) -> list[Expression]:
    if expr is None:
        values = default if default is not None else [pad] * length
        return [number(value, position) for value in values]
    if isinstance(expr, VectorExpression):
        components = list(expr.elements[:length])
        while len(components) < length:
            components.append(number(pad, expr.position))
        return components
    # Anything that is not a vector literal is taken as a scalar.
    return [expr] + [copy.deepcopy(expr) for _ in range(length - 1)]


def to_vector2(expr: Optional[Expression], position: Position, pad: float = 0.0,
               default: Optional[Sequence[float]] = None) -> Vector2:
    """Normalize ``expr`` to a ``Vector2``, broadcasting scalars and padding short vectors."""
    x, y = _components(expr, 2, pad, default, position)
    return Vector2(position=expr.position if expr is not None else position, x=x, y=y)


def to_vector3(expr: Optional[Expression], position: Position, pad: float = 0.0,
               default: Optional[Sequence[float]] = None) -> Vector3:
    """Normalize ``expr`` to a ``Vector3``, broadcasting scalars and padding short vectors.

    Args:
        expr: The bound argument, or None when it was not given.
        position: Position used for synthesized components when ``expr`` is None.
        pad: Component used to pad short vectors.
        default: Components used when ``expr`` is None; ``pad`` on every axis
            when omitted.
    """
    x, y, z = _components(expr, 3, pad, default, position)
    return Vector3(position=expr.position if expr is not None else position, x=x, y=y, z=z)
