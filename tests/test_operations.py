"""Tests for boolean operation adapters."""

import pytest

from openscad_ast import (
    Cube3D, DifferenceOperation, HullOperation, IntersectionOperation,
    MinkowskiOperation, Sphere3D, TranslateTransform, UnionOperation,
)

from conftest import parse_statement


@pytest.mark.parametrize("keyword, node_class", [
    ("union", UnionOperation),
    ("difference", DifferenceOperation),
    ("intersection", IntersectionOperation),
    ("hull", HullOperation),
    ("minkowski", MinkowskiOperation),
])
class TestOperations:
    """Behavior shared by every boolean operation."""

    def test_block_children_in_order(self, parser, keyword, node_class):
        node = parse_statement(parser, f"{keyword}() {{ cube(1); sphere(2); }}")
        assert isinstance(node, node_class)
        assert [type(child) for child in node.children] == [Cube3D, Sphere3D]

    def test_single_child(self, parser, keyword, node_class):
        node = parse_statement(parser, f"{keyword}() cube(1);")
        assert [type(child) for child in node.children] == [Cube3D]

    def test_empty_block(self, parser, keyword, node_class):
        assert parse_statement(parser, f"{keyword}() {{ }}").children == []

    def test_no_body(self, parser, keyword, node_class):
        assert parse_statement(parser, f"{keyword}();").children == []


class TestOperationDetails:
    """Operation-specific behavior."""

    def test_difference_keeps_first_child_first(self, parser):
        node = parse_statement(parser, "difference() { cube(10); translate([1, 1, 1]) cube(8); }")
        assert isinstance(node.children[0], Cube3D)
        assert isinstance(node.children[1], TranslateTransform)

    def test_empty_statements_in_block_are_dropped(self, parser):
        node = parse_statement(parser, "union() { ; cube(1); ; }")
        assert len(node.children) == 1

    def test_union_ignores_arguments(self, parser):
        node = parse_statement(parser, "union(1, 2) cube(1);")
        assert len(node.children) == 1

    def test_minkowski_convexity(self, parser):
        node = parse_statement(parser, "minkowski(convexity=4) { cube(1); sphere(1); }")
        assert node.convexity.value == 4.0

    def test_minkowski_without_convexity(self, parser):
        assert parse_statement(parser, "minkowski() cube(1);").convexity is None

    def test_nested_operations(self, parser):
        node = parse_statement(parser, "difference() { union() { cube(1); sphere(1); } cube(2); }")
        inner = node.children[0]
        assert isinstance(inner, UnionOperation)
        assert len(inner.children) == 2
