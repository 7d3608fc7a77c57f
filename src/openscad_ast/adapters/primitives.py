"""Adapters for the built-in 2D and 3D primitives.

Each primitive binds its arguments in OpenSCAD's positional order and fills
in OpenSCAD's defaults, so a bare ``cube();`` and ``cube(1, false);`` adapt
to equal nodes (positions aside).
"""

from __future__ import annotations

import copy

from ..nodes import (
    Circle2D, Cube3D, Cylinder3D, LiteralExpression, Polygon2D, Polyhedron3D,
    Sphere3D, Square2D, Text2D, VectorExpression,
)
from ..position import extract_position
from .arguments import (
    bind_arguments, collect_arguments, literal_bool, number, radius, to_vector2, to_vector3,
)

FRAGMENT_NAMES = ("$fn", "$fa", "$fs")


def _bind(cursor, recurse, positional, names=()):
    arguments = collect_arguments(cursor.node, recurse)
    return bind_arguments(arguments, positional, names), extract_position(cursor)


def adapt_cube(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("size", "center"))
    return Cube3D(
        position=position,
        size=to_vector3(bound.get("size"), position, pad=1),
        center=literal_bool(bound.get("center")),
    )


def adapt_sphere(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("r",), ("d",) + FRAGMENT_NAMES)
    return Sphere3D(
        position=position,
        radius=radius(bound, "r", "d") or number(1, position),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
    )


def adapt_cylinder(cursor, recurse):
    """``cylinder(h, r1, r2, center)`` plus ``r``, ``d``, ``d1`` and ``d2``.

    A specific radius (``r1``/``d1``, ``r2``/``d2``) overrides the shared
    one (``r``/``d``). Only ``r``/``d`` set both radii; a lone ``r1`` leaves
    the top radius at its default of 1.
    """
    bound, position = _bind(
        cursor, recurse,
        ("h", "r1", "r2", "center"),
        ("r", "d", "d1", "d2") + FRAGMENT_NAMES,
    )
    shared = radius(bound, "r", "d")
    radius1 = radius(bound, "r1", "d1") or shared or number(1, position)
    radius2 = radius(bound, "r2", "d2") or (
        copy.deepcopy(shared) if shared is not None else number(1, position))
    return Cylinder3D(
        position=position,
        height=bound.get("h") or number(1, position),
        radius1=radius1,
        radius2=radius2,
        center=literal_bool(bound.get("center")),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
    )


def adapt_polyhedron(cursor, recurse):
    # ``triangles`` is the pre-2014 name of ``faces``.
    bound, position = _bind(cursor, recurse, ("points", "faces", "convexity"), ("triangles",))
    return Polyhedron3D(
        position=position,
        points=bound.get("points") or VectorExpression(position=position),
        faces=bound.get("faces") or bound.get("triangles") or VectorExpression(position=position),
        convexity=bound.get("convexity"),
    )


def adapt_circle(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("r",), ("d",) + FRAGMENT_NAMES)
    return Circle2D(
        position=position,
        radius=radius(bound, "r", "d") or number(1, position),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
    )


def adapt_square(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("size", "center"))
    return Square2D(
        position=position,
        size=to_vector2(bound.get("size"), position, pad=1),
        center=literal_bool(bound.get("center")),
    )


def adapt_polygon(cursor, recurse):
    bound, position = _bind(cursor, recurse, ("points", "paths", "convexity"))
    return Polygon2D(
        position=position,
        points=bound.get("points") or VectorExpression(position=position),
        paths=bound.get("paths"),
        convexity=bound.get("convexity"),
    )


def adapt_text(cursor, recurse):
    bound, position = _bind(
        cursor, recurse,
        ("text", "size", "font", "halign", "valign", "spacing", "direction", "language", "script"),
        FRAGMENT_NAMES,
    )
    return Text2D(
        position=position,
        text=bound.get("text") or LiteralExpression(position=position, value_type="string", value=""),
        size=bound.get("size") or number(10, position),
        spacing=bound.get("spacing") or number(1, position),
        font=bound.get("font"),
        halign=bound.get("halign"),
        valign=bound.get("valign"),
        direction=bound.get("direction"),
        language=bound.get("language"),
        script=bound.get("script"),
        fn=bound.get("$fn"),
        fa=bound.get("$fa"),
        fs=bound.get("$fs"),
    )
