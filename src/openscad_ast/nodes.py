from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional, Union

if TYPE_CHECKING:
    from .position import Position


class NodeKind(str, Enum):
    """Canonical AST node kinds.

    The node-type detector classifies every CST node into exactly one of
    these, and the default adapter registry must hold an adapter for each.
    The value of each member is the name of the node class it produces.
    """
    PROGRAM = "Program"
    UNKNOWN = "Unknown"

    # Expressions
    LITERAL = "LiteralExpression"
    IDENTIFIER = "IdentifierExpression"
    UNARY = "UnaryExpression"
    BINARY = "BinaryExpression"
    CONDITIONAL = "ConditionalExpression"
    CALL = "CallExpression"
    INDEX = "IndexExpression"
    MEMBER = "MemberExpression"
    VECTOR = "VectorExpression"
    RANGE = "RangeExpression"
    LIST_COMPREHENSION = "ListComprehensionExpression"

    # 3D primitives
    CUBE = "Cube3D"
    SPHERE = "Sphere3D"
    CYLINDER = "Cylinder3D"
    POLYHEDRON = "Polyhedron3D"

    # 2D primitives
    CIRCLE = "Circle2D"
    SQUARE = "Square2D"
    POLYGON = "Polygon2D"
    TEXT = "Text2D"

    # Transformations
    TRANSLATE = "TranslateTransform"
    ROTATE = "RotateTransform"
    SCALE = "ScaleTransform"
    MIRROR = "MirrorTransform"
    COLOR = "ColorTransform"
    OFFSET = "OffsetTransform"
    LINEAR_EXTRUDE = "LinearExtrudeTransform"
    ROTATE_EXTRUDE = "RotateExtrudeTransform"
    RESIZE = "ResizeTransform"
    MULTMATRIX = "MultmatrixTransform"

    # Boolean operations
    UNION = "UnionOperation"
    DIFFERENCE = "DifferenceOperation"
    INTERSECTION = "IntersectionOperation"
    HULL = "HullOperation"
    MINKOWSKI = "MinkowskiOperation"

    # Control flow
    ASSIGNMENT = "AssignmentStatement"
    IF = "IfStatement"
    FOR = "ForStatement"
    INTERSECTION_FOR = "IntersectionForStatement"
    LET = "LetStatement"
    BLOCK = "BlockStatement"
    ECHO = "EchoStatement"
    ASSERT = "AssertStatement"
    CHILDREN = "ChildrenStatement"

    # Declarations
    MODULE_DECLARATION = "ModuleDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    USE = "UseStatement"
    INCLUDE = "IncludeStatement"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _args(*pairs) -> str:
    """Render ``name=value`` pairs, skipping those whose value is None."""
    return ", ".join(f"{name}={value}" for name, value in pairs if value is not None)


_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _string(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(char, char) for char in value) + '"'


def _number(value) -> str:
    """Integral floats print without a fractional part, others round-trip."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def _body(children) -> str:
    if not children:
        return ";"
    return " { " + " ".join(str(child) for child in children) + " }"


# --- AST nodes classes. ---

@dataclass
class ASTNode(object):
    """Base class for all AST nodes.

    Every node carries the span of the CST construct it was adapted from.
    Nodes own their children by value and keep no reference to the CST.

    Attributes:
        position: The source span of this node.
    """
    position: "Position"

    kind: ClassVar[Optional[NodeKind]] = None

    @property
    def type(self) -> str:
        """The node kind tag, e.g. ``"Cube3D"``."""
        return self.kind.value if self.kind is not None else self.__class__.__name__

    def __str__(self) -> str:
        return f"<{self.type}>"


@dataclass
class Expression(ASTNode):
    """Base class for all OpenSCAD expressions."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for statements and geometry-producing instantiations."""
    pass


@dataclass
class Primitive(Statement):
    """Base class for 2D and 3D geometric primitives."""
    pass


@dataclass
class Transform(Statement):
    """Base class for transformations; all of them carry ``children``."""
    pass


@dataclass
class Operation(Statement):
    """Base class for boolean operations; all of them carry ``children``."""
    pass


# --- Root and fallback ---

@dataclass
class Program(ASTNode):
    """Root of an adapted document.

    Attributes:
        children: Top-level statements in source order, punctuation excluded.
    """
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.PROGRAM

    def __str__(self):
        return "\n".join(str(child) for child in self.children)


@dataclass
class Unknown(Expression):
    """Fallback for constructs that have no adapter.

    Carries only a position, so callers never have to handle a missing node.
    """
    kind: ClassVar[NodeKind] = NodeKind.UNKNOWN


# --- Expressions ---

@dataclass
class LiteralExpression(Expression):
    """A number, string, boolean or ``undef`` literal.

    Examples:
        42          // value_type "number", value 42.0
        "hello"     // value_type "string", value "hello"
        true        // value_type "boolean", value True
        undef       // value_type "undef", value None

    Attributes:
        value_type: One of ``"number"``, ``"string"``, ``"boolean"``, ``"undef"``.
        value: The Python value of the literal.
    """
    value_type: str
    value: Union[float, str, bool, None]

    kind: ClassVar[NodeKind] = NodeKind.LITERAL

    def __str__(self):
        if self.value_type == "string":
            return _string(self.value)
        if self.value_type == "boolean":
            return _bool(bool(self.value))
        if self.value_type == "undef":
            return "undef"
        return _number(self.value)


@dataclass
class IdentifierExpression(Expression):
    """A variable or function name, including ``$``-prefixed specials.

    Attributes:
        name: The identifier text.
    """
    name: str

    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    def __str__(self):
        return self.name


@dataclass
class UnaryExpression(Expression):
    """A prefix operator applied to one operand: ``-x``, ``!flag``, ``~bits``."""
    operator: str
    operand: Expression

    kind: ClassVar[NodeKind] = NodeKind.UNARY

    def __str__(self):
        operand = str(self.operand)
        # ``- -1`` must not print as ``--1``
        if operand.startswith(("-", "+", "!", "~")):
            operand = f"({operand})"
        return f"{self.operator}{operand}"


@dataclass
class BinaryExpression(Expression):
    """An infix operation.

    Chains of the same precedence level fold to the left, so ``1 + 2 - 3``
    becomes ``(1 + 2) - 3``.

    Attributes:
        operator: Operator text as written (``+``, ``<=``, ``&&``, ``^``...).
        left: Left operand.
        right: Right operand.
    """
    operator: str
    left: Expression
    right: Expression

    kind: ClassVar[NodeKind] = NodeKind.BINARY

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class ConditionalExpression(Expression):
    """The ternary ``condition ? then_expr : else_expr``."""
    condition: Expression
    then_expr: Expression
    else_expr: Expression

    kind: ClassVar[NodeKind] = NodeKind.CONDITIONAL

    def __str__(self):
        return f"({self.condition} ? {self.then_expr} : {self.else_expr})"


@dataclass
class Argument(ASTNode):
    """One argument of a call, positional when ``name`` is None."""
    value: Expression
    name: Optional[str] = None

    def __str__(self):
        return f"{self.name}={self.value}" if self.name else str(self.value)


@dataclass
class CallExpression(Expression):
    """A function call inside an expression, e.g. ``sin(30)`` or ``f(x=1)``.

    Attributes:
        callee: The called expression, usually an ``IdentifierExpression``.
        arguments: Arguments in source order.
    """
    callee: Expression
    arguments: list[Argument] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.CALL

    def __str__(self):
        return f"{self.callee}({', '.join(str(arg) for arg in self.arguments)})"


@dataclass
class IndexExpression(Expression):
    """Element lookup ``target[index]``."""
    target: Expression
    index: Expression

    kind: ClassVar[NodeKind] = NodeKind.INDEX

    def __str__(self):
        return f"{self.target}[{self.index}]"


@dataclass
class MemberExpression(Expression):
    """Member lookup ``target.member`` (``v.x``, ``v.y``, ``v.z``)."""
    target: Expression
    member: str

    kind: ClassVar[NodeKind] = NodeKind.MEMBER

    def __str__(self):
        return f"{self.target}.{self.member}"


@dataclass
class VectorExpression(Expression):
    """A vector literal ``[a, b, c]``."""
    elements: list[Expression] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.VECTOR

    def __str__(self):
        return "[" + ", ".join(str(element) for element in self.elements) + "]"


@dataclass
class RangeExpression(Expression):
    """A range ``[start : end]`` or ``[start : step : end]``.

    ``step`` is None when the source omits it; OpenSCAD then steps by 1.
    """
    start: Expression
    end: Expression
    step: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.RANGE

    def __str__(self):
        if self.step is None:
            return f"[{self.start} : {self.end}]"
        return f"[{self.start} : {self.step} : {self.end}]"


def _bindings(assignments) -> str:
    return ", ".join(f"{a.left} = {a.right}" for a in assignments)


@dataclass
class ListComprehensionExpression(Expression):
    """One generator clause inside a vector literal, e.g. ``[for (i = [0:3]) i * 2]``.

    Examples:
        for (i = r) if (i > 0) i    // clause "for", variable "i", iterable r, condition i > 0
        for (i = 0; i < 3; i = i + 1) i   // clause "c_for"
        if (c) a else b             // clause "if", else_element b
        let (x = 1) x               // clause "let"
        each v                      // clause "each"

    Several loop variables, ``for (i = a, j = b)``, nest the same way
    ``ForStatement`` does. A nested comprehension is the ``element`` of
    the clause that encloses it.

    Attributes:
        clause: One of ``"for"``, ``"c_for"``, ``"if"``, ``"let"``, ``"each"``.
        element: The generated element.
        variable: Loop variable of a ``for`` clause.
        iterable: Iterated expression of a ``for`` clause.
        condition: Filter of ``if`` and ``for``, loop test of ``c_for``.
        else_element: The ``else`` element of an ``if`` clause.
        assignments: Bindings of ``let``, initializers of ``c_for``.
        updates: Per-iteration assignments of ``c_for``.
    """
    clause: str
    element: Expression
    variable: Optional[str] = None
    iterable: Optional[Expression] = None
    condition: Optional[Expression] = None
    else_element: Optional[Expression] = None
    assignments: list[AssignmentStatement] = field(default_factory=list)
    updates: list[AssignmentStatement] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.LIST_COMPREHENSION

    def __str__(self):
        if self.clause == "for":
            head = f"for ({self.variable} = {self.iterable})"
            if self.condition is not None:
                head += f" if ({self.condition})"
            return f"{head} {self.element}"
        if self.clause == "c_for":
            return (f"for ({_bindings(self.assignments)}; {self.condition}; "
                    f"{_bindings(self.updates)}) {self.element}")
        if self.clause == "if":
            text = f"if ({self.condition}) {self.element}"
            if self.else_element is not None:
                text += f" else {self.else_element}"
            return text
        if self.clause == "let":
            return f"let ({_bindings(self.assignments)}) {self.element}"
        return f"each {self.element}"


# --- Normalized parameter values ---

@dataclass
class Vector2(ASTNode):
    """A two-component parameter after scalar broadcast, e.g. square size."""
    x: Expression
    y: Expression

    def __str__(self):
        return f"[{self.x}, {self.y}]"


@dataclass
class Vector3(ASTNode):
    """A three-component parameter after scalar broadcast, e.g. cube size."""
    x: Expression
    y: Expression
    z: Expression

    def __str__(self):
        return f"[{self.x}, {self.y}, {self.z}]"


@dataclass
class Parameter(ASTNode):
    """A parameter of a module or function declaration."""
    name: str
    default: Optional[Expression] = None

    def __str__(self):
        return self.name if self.default is None else f"{self.name}={self.default}"


# --- 3D primitives ---

@dataclass
class Cube3D(Primitive):
    """``cube(size, center)``.

    A scalar ``size`` is broadcast to all three axes.

    Attributes:
        size: Edge lengths along x, y and z. Defaults to 1 on each axis.
        center: Whether the cube is centered on the origin. Defaults to False.
    """
    size: Vector3
    center: bool = False

    kind: ClassVar[NodeKind] = NodeKind.CUBE

    def __str__(self):
        return f"cube(size={self.size}, center={_bool(self.center)});"


@dataclass
class Sphere3D(Primitive):
    """``sphere(r)`` or ``sphere(d)``; a diameter is stored as its radius.

    Attributes:
        radius: Sphere radius. Defaults to 1.
        fn: ``$fn`` fragment count, None when not given.
        fa: ``$fa`` minimum fragment angle, None when not given.
        fs: ``$fs`` minimum fragment size, None when not given.
    """
    radius: Expression
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.SPHERE

    def __str__(self):
        return f"sphere({_args(('r', self.radius), ('$fn', self.fn), ('$fa', self.fa), ('$fs', self.fs))});"


@dataclass
class Cylinder3D(Primitive):
    """``cylinder(h, r1, r2, center)`` and its ``r``/``d``/``d1``/``d2`` forms.

    ``r`` and ``d`` set both radii. Each radius otherwise defaults to 1 on
    its own, so ``cylinder(10, 5)`` is a cone from radius 5 to radius 1.
    """
    height: Expression
    radius1: Expression
    radius2: Expression
    center: bool = False
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.CYLINDER

    def __str__(self):
        args = _args(
            ("h", self.height), ("r1", self.radius1), ("r2", self.radius2),
            ("center", _bool(self.center)), ("$fn", self.fn), ("$fa", self.fa), ("$fs", self.fs),
        )
        return f"cylinder({args});"


@dataclass
class Polyhedron3D(Primitive):
    """``polyhedron(points, faces, convexity)``; legacy ``triangles`` fills ``faces``."""
    points: Expression
    faces: Expression
    convexity: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.POLYHEDRON

    def __str__(self):
        return f"polyhedron({_args(('points', self.points), ('faces', self.faces), ('convexity', self.convexity))});"


# --- 2D primitives ---

@dataclass
class Circle2D(Primitive):
    """``circle(r)`` or ``circle(d)``; a diameter is stored as its radius."""
    radius: Expression
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.CIRCLE

    def __str__(self):
        return f"circle({_args(('r', self.radius), ('$fn', self.fn), ('$fa', self.fa), ('$fs', self.fs))});"


@dataclass
class Square2D(Primitive):
    """``square(size, center)``; a scalar size is broadcast to x and y."""
    size: Vector2
    center: bool = False

    kind: ClassVar[NodeKind] = NodeKind.SQUARE

    def __str__(self):
        return f"square(size={self.size}, center={_bool(self.center)});"


@dataclass
class Polygon2D(Primitive):
    """``polygon(points, paths, convexity)``.

    Attributes:
        points: The point list. An empty vector when omitted.
        paths: Optional path index lists.
        convexity: Optional convexity hint.
    """
    points: Expression
    paths: Optional[Expression] = None
    convexity: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.POLYGON

    def __str__(self):
        return f"polygon({_args(('points', self.points), ('paths', self.paths), ('convexity', self.convexity))});"


@dataclass
class Text2D(Primitive):
    """``text(text, size, font, halign, valign, spacing, direction, language, script)``.

    ``text`` defaults to the empty string, ``size`` to 10 and ``spacing``
    to 1. The layout and font parameters are None unless given, in which
    case OpenSCAD picks them (left/baseline alignment, left-to-right,
    ``"en"``, ``"latin"``).
    """
    text: Expression
    size: Expression
    spacing: Expression
    font: Optional[Expression] = None
    halign: Optional[Expression] = None
    valign: Optional[Expression] = None
    direction: Optional[Expression] = None
    language: Optional[Expression] = None
    script: Optional[Expression] = None
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    def __str__(self):
        args = _args(
            ("text", self.text), ("size", self.size), ("font", self.font),
            ("halign", self.halign), ("valign", self.valign), ("spacing", self.spacing),
            ("direction", self.direction), ("language", self.language), ("script", self.script),
            ("$fn", self.fn), ("$fa", self.fa), ("$fs", self.fs),
        )
        return f"text({args});"


# --- Transformations ---

@dataclass
class TranslateTransform(Transform):
    """``translate(v) { ... }``; missing components are 0."""
    vector: Vector3
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.TRANSLATE

    def __str__(self):
        return f"translate({self.vector}){_body(self.children)}"


@dataclass
class RotateTransform(Transform):
    """``rotate(a, v) { ... }``.

    Attributes:
        angle: A single angle expression when rotating about ``axis`` (or
            the z axis), or a ``Vector3`` of per-axis angles.
        axis: The rotation axis for a scalar angle, None when not given.
        children: Transformed child nodes.
    """
    angle: Union[Expression, Vector3]
    axis: Optional[Vector3] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ROTATE

    def __str__(self):
        return f"rotate({_args(('a', self.angle), ('v', self.axis))}){_body(self.children)}"


@dataclass
class ScaleTransform(Transform):
    """``scale(v) { ... }``; a scalar factor is broadcast, missing components are 1."""
    factors: Vector3
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.SCALE

    def __str__(self):
        return f"scale({self.factors}){_body(self.children)}"


@dataclass
class MirrorTransform(Transform):
    """``mirror(v) { ... }``; ``v`` is the normal of the mirror plane."""
    vector: Vector3
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.MIRROR

    def __str__(self):
        return f"mirror({self.vector}){_body(self.children)}"


@dataclass
class ColorTransform(Transform):
    """``color(c, alpha) { ... }`` with a color name, hex string or RGBA vector."""
    color: Expression
    alpha: Optional[Expression] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.COLOR

    def __str__(self):
        return f"color({_args(('c', self.color), ('alpha', self.alpha))}){_body(self.children)}"


@dataclass
class OffsetTransform(Transform):
    """``offset(r | delta, chamfer) { ... }`` for 2D children."""
    radius: Optional[Expression] = None
    delta: Optional[Expression] = None
    chamfer: bool = False
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.OFFSET

    def __str__(self):
        args = _args(("r", self.radius), ("delta", self.delta), ("chamfer", _bool(self.chamfer)))
        return f"offset({args}){_body(self.children)}"


@dataclass
class LinearExtrudeTransform(Transform):
    """``linear_extrude(height, center, convexity, twist, slices, scale) { ... }``.

    Only ``height`` (default 1) and ``center`` (default False) are always
    present; every other parameter is None unless given.
    """
    height: Expression
    center: bool = False
    convexity: Optional[Expression] = None
    twist: Optional[Expression] = None
    slices: Optional[Expression] = None
    scale: Optional[Expression] = None
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.LINEAR_EXTRUDE

    def __str__(self):
        args = _args(
            ("height", self.height), ("center", _bool(self.center)), ("convexity", self.convexity),
            ("twist", self.twist), ("slices", self.slices), ("scale", self.scale),
            ("$fn", self.fn), ("$fa", self.fa), ("$fs", self.fs),
        )
        return f"linear_extrude({args}){_body(self.children)}"


@dataclass
class RotateExtrudeTransform(Transform):
    """``rotate_extrude(angle, convexity) { ... }``; angle defaults to 360."""
    angle: Expression
    convexity: Optional[Expression] = None
    fn: Optional[Expression] = None
    fa: Optional[Expression] = None
    fs: Optional[Expression] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ROTATE_EXTRUDE

    def __str__(self):
        args = _args(
            ("angle", self.angle), ("convexity", self.convexity),
            ("$fn", self.fn), ("$fa", self.fa), ("$fs", self.fs),
        )
        return f"rotate_extrude({args}){_body(self.children)}"


@dataclass
class ResizeTransform(Transform):
    """``resize(newsize, auto, convexity) { ... }``.

    A zero component of ``newsize`` leaves that axis alone, or scales it
    with the others where ``auto`` says so. ``auto`` stays an expression
    since it may be a single boolean or one per axis.
    """
    newsize: Vector3
    auto: Optional[Expression] = None
    convexity: Optional[Expression] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.RESIZE

    def __str__(self):
        args = _args(("newsize", self.newsize), ("auto", self.auto), ("convexity", self.convexity))
        return f"resize({args}){_body(self.children)}"


@dataclass
class MultmatrixTransform(Transform):
    """``multmatrix(m) { ... }`` with a 4x4 (or 3x4) affine matrix.

    Without ``m`` the matrix is the 4x4 identity.
    """
    matrix: Expression
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.MULTMATRIX

    def __str__(self):
        return f"multmatrix({self.matrix}){_body(self.children)}"


# --- Boolean operations ---

@dataclass
class UnionOperation(Operation):
    """``union() { ... }``."""
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.UNION

    def __str__(self):
        return f"union(){_body(self.children)}"


@dataclass
class DifferenceOperation(Operation):
    """``difference() { ... }``: the first child minus all the others."""
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.DIFFERENCE

    def __str__(self):
        return f"difference(){_body(self.children)}"


@dataclass
class IntersectionOperation(Operation):
    """``intersection() { ... }``."""
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.INTERSECTION

    def __str__(self):
        return f"intersection(){_body(self.children)}"


@dataclass
class HullOperation(Operation):
    """``hull() { ... }``."""
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.HULL

    def __str__(self):
        return f"hull(){_body(self.children)}"


@dataclass
class MinkowskiOperation(Operation):
    """``minkowski(convexity) { ... }``."""
    convexity: Optional[Expression] = None
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.MINKOWSKI

    def __str__(self):
        return f"minkowski({_args(('convexity', self.convexity))}){_body(self.children)}"


# --- Control flow ---

@dataclass
class AssignmentStatement(Statement):
    """``name = expr;``

    A CST assignment missing its name yields ``left.name == "unknown"``, one
    missing its value yields a numeric literal 0.
    """
    left: IdentifierExpression
    right: Expression

    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT

    def __str__(self):
        return f"{self.left} = {self.right};"


@dataclass
class IfStatement(Statement):
    """``if (condition) ... else ...``.

    Attributes:
        condition: The tested expression.
        then_branch: Statements run when the condition holds.
        else_branch: Statements of the ``else`` part, None without one.
    """
    condition: Expression
    then_branch: list[ASTNode] = field(default_factory=list)
    else_branch: Optional[list[ASTNode]] = None

    kind: ClassVar[NodeKind] = NodeKind.IF

    def __str__(self):
        text = f"if ({self.condition}){_body(self.then_branch)}"
        if self.else_branch is not None:
            text += f" else{_body(self.else_branch)}"
        return text


@dataclass
class ForStatement(Statement):
    """``for (variable = iterable) { ... }``.

    Several loop variables, ``for (i = a, j = b)``, nest: the statement for
    ``i`` holds a single ``ForStatement`` for ``j`` as its child.
    """
    variable: str
    iterable: Expression
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.FOR

    def __str__(self):
        return f"for ({self.variable} = {self.iterable}){_body(self.children)}"


@dataclass
class IntersectionForStatement(Statement):
    """``intersection_for (variable = iterable) { ... }``."""
    variable: str
    iterable: Expression
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.INTERSECTION_FOR

    def __str__(self):
        return f"intersection_for ({self.variable} = {self.iterable}){_body(self.children)}"


@dataclass
class LetStatement(Statement):
    """``let (a = 1, b = 2) { ... }``."""
    assignments: list[AssignmentStatement] = field(default_factory=list)
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.LET

    def __str__(self):
        return f"let ({_bindings(self.assignments)}){_body(self.children)}"


@dataclass
class BlockStatement(Statement):
    """A brace-delimited group of statements that is not a construct body."""
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    def __str__(self):
        return "{ " + " ".join(str(child) for child in self.children) + " }"


@dataclass
class EchoStatement(Statement):
    """Module-level ``echo(...)``."""
    arguments: list[Argument] = field(default_factory=list)
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ECHO

    def __str__(self):
        return f"echo({', '.join(str(arg) for arg in self.arguments)}){_body(self.children)}"


@dataclass
class AssertStatement(Statement):
    """Module-level ``assert(condition, message)``."""
    arguments: list[Argument] = field(default_factory=list)
    children: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ASSERT

    def __str__(self):
        return f"assert({', '.join(str(arg) for arg in self.arguments)}){_body(self.children)}"


@dataclass
class ChildrenStatement(Statement):
    """``children()`` or ``children(index)`` inside a module body.

    Attributes:
        index: Which children to instantiate: a number, vector or range.
            None instantiates all of them.
    """
    index: Optional[Expression] = None

    kind: ClassVar[NodeKind] = NodeKind.CHILDREN

    def __str__(self):
        return f"children({self.index if self.index is not None else ''});"


# --- Declarations ---

@dataclass
class ModuleDeclaration(Statement):
    """``module name(parameters) body``."""
    name: str
    parameters: list[Parameter] = field(default_factory=list)
    body: list[ASTNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.MODULE_DECLARATION

    def __str__(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"module {self.name}({params}){_body(self.body)}"


@dataclass
class FunctionDeclaration(Statement):
    """``function name(parameters) = expression;``"""
    name: str
    expression: Expression
    parameters: list[Parameter] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.FUNCTION_DECLARATION

    def __str__(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"function {self.name}({params}) = {self.expression};"


@dataclass
class UseStatement(Statement):
    """``use <path>``."""
    path: str

    kind: ClassVar[NodeKind] = NodeKind.USE

    def __str__(self):
        return f"use <{self.path}>"


@dataclass
class IncludeStatement(Statement):
    """``include <path>``."""
    path: str

    kind: ClassVar[NodeKind] = NodeKind.INCLUDE

    def __str__(self):
        return f"include <{self.path}>"


# Every node class that can appear in an adapted tree, by class name.
NODE_CLASSES: dict[str, type[ASTNode]] = {
    cls.__name__: cls
    for cls in [
        Program, Unknown,
        LiteralExpression, IdentifierExpression, UnaryExpression, BinaryExpression,
        ConditionalExpression, Argument, CallExpression, IndexExpression, MemberExpression,
        VectorExpression, RangeExpression, ListComprehensionExpression,
        Vector2, Vector3, Parameter,
        Cube3D, Sphere3D, Cylinder3D, Polyhedron3D,
        Circle2D, Square2D, Polygon2D, Text2D,
        TranslateTransform, RotateTransform, ScaleTransform, MirrorTransform, ColorTransform,
        OffsetTransform, LinearExtrudeTransform, RotateExtrudeTransform, ResizeTransform,
        MultmatrixTransform,
        UnionOperation, DifferenceOperation, IntersectionOperation, HullOperation, MinkowskiOperation,
        AssignmentStatement, IfStatement, ForStatement, IntersectionForStatement, LetStatement,
        BlockStatement, EchoStatement, AssertStatement, ChildrenStatement,
        ModuleDeclaration, FunctionDeclaration, UseStatement, IncludeStatement,
    ]
}
