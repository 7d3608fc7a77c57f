"""Adapters for transformations.

All transformations keep their child statements in ``children``; a trailing
``;`` instead of a body gives an empty list.
"""

from __future__ import annotations

from ..nodes import (
    ColorTransform, LinearExtrudeTransform, LiteralExpression, MirrorTransform,
    MultmatrixTransform, OffsetTransform, ResizeTransform, RotateExtrudeTransform,
    RotateTransform, ScaleTransform, TranslateTransform, VectorExpression,
)
from ..position import extract_position
from .arguments import bind_arguments, collect_arguments, literal_bool, number, to_vector3
from .children import adapt_body

FRAGMENT_NAMES = ("$fn", "$fa", "$fs")


def _bind(cursor, recurse, positional, names=()):
    arguments = collect_arguments(cursor.node, recurse)
    return bind_arguments(arguments, positional, names), extract_position(cursor)


def adapt_translate(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("v",))
    return TranslateTransform(
        position=position,
        vector=to_vector3(bound.get("v"), position),
        children=adapt_body(cursor, recurse),
    )


def adapt_rotate(cursor, recurse):
    """``rotate(a)``, ``rotate([x, y, z])`` or ``rotate(a, v)``.

    A vector angle becomes a ``Vector3`` of per-axis angles; a scalar angle
    stays a single expression, with ``axis`` set when ``v`` is given.
    """
    bound, position = _bind(cursor, recurse, ("a", "v"))
    angle = bound.get("a")
    if angle is None:
        angle = number(0, position)
    elif isinstance(angle, VectorExpression):
        angle = to_vector3(angle, position)
    axis = bound.get("v")
    return RotateTransform(
        position=position,
        angle=angle,
        axis=to_vector3(axis, position) if axis is not None else None,
        children=adapt_body(cursor, recurse),
    )


def adapt_scale(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("v",))
    return ScaleTransform(
        position=position,
        factors=to_vector3(bound.get("v"), position, pad=1),
        children=adapt_body(cursor, recurse),
    )


def adapt_mirror(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("v",))
    return MirrorTransform(
        position=position,
        vector=to_vector3(bound.get("v"), position, default=(1, 0, 0)),
        children=adapt_body(cursor, recurse),
    )


def adapt_color(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("c", "alpha"))
    color = bound.get("c")
    if color is None:
        color = LiteralExpression(position=position, value_type="undef", value=None)
    return ColorTransform(
        position=position,
        color=color,
        alpha=bound.get("alpha"),
        children=adapt_body(cursor, recurse),
    )


def adapt_offset(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("r",), ("delta", "chamfer"))
    return OffsetTransform(
        position=position,
        radius=bound.get("r"),
        delta=bound.get("delta"),
        chamfer=literal_bool(bound.get("chamfer")),
        children=adapt_body(cursor, recurse),
    )


def adapt_linear_extrude(cursor, recurse):
    bound, position = _bind(
        cursor, recurse,
        ("height", "center", "convexity", "twist", "slices"),
        ("scale",) + FRAGMENT_NAMES,
    )
    return LinearExtrudeTransform(
        position=position,
        height=bound.get("height") or number(1, position),
        center=literal_bool(bound.get("center")),
        convexity=bound.get("convexity"),
        twist=bound.get("twist"),
        slices=bound.get("slices"),
        scale=bound.get("scale"),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
        children=adapt_body(cursor, recurse),
    )


def adapt_rotate_extrude(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("angle", "convexity"), FRAGMENT_NAMES)
    return RotateExtrudeTransform(
        position=position,
        angle=bound.get("angle") or number(360, position),
        convexity=bound.get("convexity"),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
        children=adapt_body(cursor, recurse),
    )


def adapt_resize(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("newsize", "auto", "convexity"))
    return ResizeTransform(
        position=position,
        newsize=to_vector3(bound.get("newsize"), position),
        auto=bound.get("auto"),
        convexity=bound.get("convexity"),
        children=adapt_body(cursor, recurse),
    )


def _identity_matrix(position):
    return VectorExpression(position=position, elements=[
        VectorExpression(position=position, elements=[
            number(1 if row == column else 0, position) for column in range(4)
        ])
        for row in range(4)
    ])


def adapt_multmatrix(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("m",))
    return MultmatrixTransform(
        position=position,
        matrix=bound.get("m") or _identity_matrix(position),
        children=adapt_body(cursor, recurse),
    )
