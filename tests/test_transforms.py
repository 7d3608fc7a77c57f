"""Tests for transformation adapters."""

import pytest

from openscad_ast import (
    ColorTransform, Cube3D, IdentifierExpression, LinearExtrudeTransform,
    LiteralExpression, MirrorTransform, MultmatrixTransform, OffsetTransform,
    ResizeTransform, RotateExtrudeTransform, RotateTransform, ScaleTransform,
    Sphere3D, TranslateTransform, Vector3, VectorExpression,
)

from conftest import parse_statement


def values(vector):
    return (vector.x.value, vector.y.value, vector.z.value)


class TestTranslate:
    """Test translate() adaptation."""

    def test_vector_and_child(self, parser):
        node = parse_statement(parser, "translate([1, 2, 3]) cube(1);")
        assert isinstance(node, TranslateTransform)
        assert values(node.vector) == (1.0, 2.0, 3.0)
        assert len(node.children) == 1
        assert isinstance(node.children[0], Cube3D)

    def test_named_vector(self, parser):
        node = parse_statement(parser, "translate(v=[4, 5, 6]) cube(1);")
        assert values(node.vector) == (4.0, 5.0, 6.0)

    def test_short_vector_is_padded_with_zero(self, parser):
        node = parse_statement(parser, "translate([1, 2]) cube(1);")
        assert values(node.vector) == (1.0, 2.0, 0.0)

    def test_missing_vector(self, parser):
        node = parse_statement(parser, "translate() cube(1);")
        assert values(node.vector) == (0.0, 0.0, 0.0)

    def test_block_children(self, parser):
        node = parse_statement(parser, "translate([0, 0, 1]) { cube(1); sphere(2); }")
        assert [type(child) for child in node.children] == [Cube3D, Sphere3D]

    def test_no_children(self, parser):
        node = parse_statement(parser, "translate([0, 0, 1]);")
        assert node.children == []

    def test_nested_transforms(self, parser):
        node = parse_statement(parser, "translate([1, 0, 0]) rotate(45) cube(1);")
        assert isinstance(node.children[0], RotateTransform)
        assert isinstance(node.children[0].children[0], Cube3D)


class TestRotate:
    """Test rotate() adaptation."""

    def test_scalar_angle(self, parser):
        node = parse_statement(parser, "rotate(45) cube(1);")
        assert isinstance(node, RotateTransform)
        assert isinstance(node.angle, LiteralExpression)
        assert node.angle.value == 45.0
        assert node.axis is None

    def test_vector_angle(self, parser):
        node = parse_statement(parser, "rotate([90, 0, 45]) cube(1);")
        assert isinstance(node.angle, Vector3)
        assert values(node.angle) == (90.0, 0.0, 45.0)

    def test_angle_about_axis(self, parser):
        node = parse_statement(parser, "rotate(a=30, v=[0, 0, 1]) cube(1);")
        assert node.angle.value == 30.0
        assert values(node.axis) == (0.0, 0.0, 1.0)

    def test_missing_angle(self, parser):
        assert parse_statement(parser, "rotate() cube(1);").angle.value == 0.0

    def test_identifier_angle_stays_scalar(self, parser):
        node = parse_statement(parser, "rotate(a) cube(1);")
        assert isinstance(node.angle, IdentifierExpression)


class TestScaleAndMirror:
    """Test scale() and mirror() adaptation."""

    def test_scale_vector(self, parser):
        node = parse_statement(parser, "scale([2, 3, 4]) cube(1);")
        assert isinstance(node, ScaleTransform)
        assert values(node.factors) == (2.0, 3.0, 4.0)

    def test_scale_scalar_is_broadcast(self, parser):
        assert values(parse_statement(parser, "scale(2) cube(1);").factors) == (2.0, 2.0, 2.0)

    def test_scale_pads_with_one(self, parser):
        assert values(parse_statement(parser, "scale([2, 3]) cube(1);").factors) == (2.0, 3.0, 1.0)

    def test_mirror_vector(self, parser):
        node = parse_statement(parser, "mirror([0, 1, 0]) cube(1);")
        assert isinstance(node, MirrorTransform)
        assert values(node.vector) == (0.0, 1.0, 0.0)

    def test_mirror_default(self, parser):
        assert values(parse_statement(parser, "mirror() cube(1);").vector) == (1.0, 0.0, 0.0)


class TestColor:
    """Test color() adaptation."""

    def test_named_color(self, parser):
        node = parse_statement(parser, 'color("red") cube(1);')
        assert isinstance(node, ColorTransform)
        assert node.color.value == "red"
        assert node.alpha is None

    def test_vector_color_and_alpha(self, parser):
        node = parse_statement(parser, "color([1, 0, 0], 0.5) cube(1);")
        assert len(node.color.elements) == 3
        assert node.alpha.value == 0.5

    def test_missing_color_is_undef(self, parser):
        node = parse_statement(parser, "color() cube(1);")
        assert node.color.value_type == "undef"
        assert node.color.value is None


class TestOffset:
    """Test offset() adaptation."""

    def test_radius(self, parser):
        node = parse_statement(parser, "offset(r=2) square(5);")
        assert isinstance(node, OffsetTransform)
        assert node.radius.value == 2.0
        assert node.delta is None
        assert node.chamfer is False

    def test_positional_radius(self, parser):
        assert parse_statement(parser, "offset(3) square(5);").radius.value == 3.0

    def test_delta_and_chamfer(self, parser):
        node = parse_statement(parser, "offset(delta=1, chamfer=true) square(5);")
        assert node.radius is None
        assert node.delta.value == 1.0
        assert node.chamfer is True


class TestExtrusion:
    """Test linear_extrude() and rotate_extrude() adaptation."""

    def test_linear_extrude_named(self, parser):
        node = parse_statement(
            parser,
            "linear_extrude(height=10, center=true, twist=90, slices=20, scale=2, $fn=16) square(5);")
        assert isinstance(node, LinearExtrudeTransform)
        assert node.height.value == 10.0
        assert node.center is True
        assert node.twist.value == 90.0
        assert node.slices.value == 20.0
        assert node.scale.value == 2.0
        assert node.fn.value == 16.0
        assert node.convexity is None

    def test_linear_extrude_positional(self, parser):
        node = parse_statement(parser, "linear_extrude(5, false, 4) circle(1);")
        assert node.height.value == 5.0
        assert node.center is False
        assert node.convexity.value == 4.0

    def test_linear_extrude_default_height(self, parser):
        assert parse_statement(parser, "linear_extrude() square(1);").height.value == 1.0

    def test_rotate_extrude(self, parser):
        node = parse_statement(parser, "rotate_extrude(angle=180, $fn=64) translate([2, 0]) circle(1);")
        assert isinstance(node, RotateExtrudeTransform)
        assert node.angle.value == 180.0
        assert node.fn.value == 64.0
        assert isinstance(node.children[0], TranslateTransform)

    def test_rotate_extrude_default_angle(self, parser):
        assert parse_statement(parser, "rotate_extrude() circle(1);").angle.value == 360.0


class TestResize:
    """Test resize() adaptation."""

    def test_newsize(self, parser):
        node = parse_statement(parser, "resize([10, 20, 0]) cube(1);")
        assert isinstance(node, ResizeTransform)
        assert values(node.newsize) == (10.0, 20.0, 0.0)
        assert node.auto is None
        assert isinstance(node.children[0], Cube3D)

    def test_short_newsize_is_padded_with_zero(self, parser):
        node = parse_statement(parser, "resize([10]) sphere(1);")
        assert values(node.newsize) == (10.0, 0.0, 0.0)

    def test_auto_and_convexity(self, parser):
        node = parse_statement(parser, "resize(newsize=[5, 0, 0], auto=[true, true, false], convexity=3) cube(1);")
        assert values(node.newsize) == (5.0, 0.0, 0.0)
        assert isinstance(node.auto, VectorExpression)
        assert len(node.auto.elements) == 3
        assert node.convexity.value == 3.0

    def test_scalar_auto(self, parser):
        node = parse_statement(parser, "resize([5, 0, 0], true) cube(1);")
        assert node.auto.value is True


class TestMultmatrix:
    """Test multmatrix() adaptation."""

    def test_matrix(self, parser):
        node = parse_statement(
            parser,
            "multmatrix([[1, 0, 0, 5], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]) cube(1);",
        )
        assert isinstance(node, MultmatrixTransform)
        assert len(node.matrix.elements) == 4
        assert node.matrix.elements[0].elements[3].value == 5.0
        assert isinstance(node.children[0], Cube3D)

    def test_named_matrix(self, parser):
        node = parse_statement(parser, "multmatrix(m=shear) cube(1);")
        assert isinstance(node.matrix, IdentifierExpression)
        assert node.matrix.name == "shear"

    def test_missing_matrix_is_identity(self, parser):
        node = parse_statement(parser, "multmatrix() cube(1);")
        rows = [[cell.value for cell in row.elements] for row in node.matrix.elements]
        assert rows == [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]


@pytest.mark.parametrize("code", [
    "translate([1, 0, 0]) cube(1);",
    "rotate(90) cube(1);",
    "scale(2) cube(1);",
    "mirror([1, 0, 0]) cube(1);",
    "color(\"blue\") cube(1);",
    "offset(1) square(1);",
    "linear_extrude(2) square(1);",
    "rotate_extrude() square(1);",
    "resize([2, 2, 2]) cube(1);",
    "multmatrix(m) cube(1);",
])
def test_transforms_keep_their_children(parser, code):
    node = parse_statement(parser, code)
    assert len(node.children) == 1
    assert node.position.start_column == 0
