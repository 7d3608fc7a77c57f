"""Tests for the AST node classes."""

import dataclasses

import pytest

from openscad_ast import (
    ASTNode, Cube3D, Cylinder3D, Expression, IdentifierExpression, IfStatement,
    LiteralExpression, ModuleDeclaration, NodeKind, Operation, Parameter, Position,
    Primitive, Program, Statement, Transform, TranslateTransform, UnaryExpression,
    UnionOperation, Unknown, Vector3,
)
from openscad_ast.nodes import NODE_CLASSES

from conftest import parse_statement


def _pos():
    return Position(0, 0, 0, 1)


def _number(value):
    return LiteralExpression(position=_pos(), value_type="number", value=value)


class TestNodeKinds:
    """Test the kind tags carried by node classes."""

    def test_every_kind_has_a_class(self):
        kinds = {cls.kind for cls in NODE_CLASSES.values() if cls.kind is not None}
        assert kinds == set(NodeKind)

    @pytest.mark.parametrize("kind", list(NodeKind))
    def test_kind_value_is_class_name(self, kind):
        assert NODE_CLASSES[kind.value].kind is kind

    def test_type_property(self):
        assert Unknown(position=_pos()).type == "Unknown"
        assert _number(1.0).type == "LiteralExpression"

    def test_helper_nodes_have_no_kind(self):
        assert Vector3.kind is None
        assert Parameter(position=_pos(), name="a").type == "Parameter"


class TestHierarchy:
    """Test the marker base classes."""

    @pytest.mark.parametrize("cls, base", [
        (LiteralExpression, Expression),
        (Unknown, Expression),
        (Cube3D, Primitive),
        (TranslateTransform, Transform),
        (UnionOperation, Operation),
        (IfStatement, Statement),
        (Primitive, Statement),
    ])
    def test_subclass(self, cls, base):
        assert issubclass(cls, base)
        assert issubclass(cls, ASTNode)

    def test_program_is_not_a_statement(self):
        assert not issubclass(Program, Statement)


class TestDataclassBehavior:
    """Test equality, defaults and ownership."""

    def test_equality_includes_position(self):
        a = IdentifierExpression(position=Position(0, 0, 0, 1), name="a")
        b = IdentifierExpression(position=Position(1, 0, 1, 1), name="a")
        assert a != b
        assert a == dataclasses.replace(b, position=Position(0, 0, 0, 1))

    def test_list_defaults_are_not_shared(self):
        first = UnionOperation(position=_pos())
        second = UnionOperation(position=_pos())
        first.children.append(Unknown(position=_pos()))
        assert second.children == []

    def test_optional_defaults(self):
        node = IfStatement(position=_pos(), condition=_number(1.0))
        assert node.then_branch == []
        assert node.else_branch is None


class TestStr:
    """Test the OpenSCAD-like rendering of statements."""

    def test_cube(self, parser):
        assert str(parse_statement(parser, "cube(2, center=true);")) == "cube(size=[2, 2, 2], center=true);"

    def test_translate_with_child(self, parser):
        rendered = str(parse_statement(parser, "translate([1, 2, 3]) cube(1);"))
        assert rendered.startswith("translate([1, 2, 3])")
        assert "cube(size=[1, 1, 1], center=false);" in rendered

    def test_cylinder_mentions_radii(self, parser):
        rendered = str(parse_statement(parser, "cylinder(h=3, r1=1, r2=2);"))
        assert rendered.startswith("cylinder(")
        assert "h=3" in rendered

    def test_module_declaration(self):
        module = ModuleDeclaration(
            position=_pos(),
            name="m",
            parameters=[Parameter(position=_pos(), name="a", default=_number(1.0))],
        )
        assert str(module).startswith("module m(a=1)")

    def test_program_joins_statements(self, parser):
        from conftest import parse_program
        program = parse_program(parser, "a = 1;\nb = 2;")
        assert str(program).split("\n") == [str(program.children[0]), str(program.children[1])]

    def test_unknown(self):
        assert str(Unknown(position=_pos())) == "<Unknown>"

    def test_text(self, parser):
        assert str(parse_statement(parser, 'text("hi", halign="center");')) == \
            'text(text="hi", size=10, halign="center", spacing=1);'

    def test_resize_and_multmatrix(self, parser):
        rendered = str(parse_statement(parser, "resize([4, 0, 0]) multmatrix(m) cube(1);"))
        assert rendered.startswith("resize(newsize=[4, 0, 0]) { multmatrix(m) { cube(")

    def test_negative_literal_operand_is_parenthesized(self):
        negated = UnaryExpression(position=_pos(), operator="-", operand=_number(-1.0))
        assert str(negated) == "-(-1)"

    def test_large_integral_number(self):
        assert str(_number(1234567.0)) == "1234567"

    def test_fractional_number_keeps_precision(self):
        assert str(_number(0.1 + 0.2)) == "0.30000000000000004"

    def test_string_with_control_characters(self):
        literal = LiteralExpression(position=_pos(), value_type="string", value='a\n"b"\t\\')
        assert str(literal) == r'"a\n\"b\"\t\\"'


def test_cylinder_radii_are_independent(parser):
    cylinder = parse_statement(parser, "cylinder(h=1, r=r0);")
    assert isinstance(cylinder, Cylinder3D)
    cylinder.radius2.name = "changed"
    assert cylinder.radius1.name == "r0"
