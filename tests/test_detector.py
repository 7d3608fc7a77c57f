"""Tests for CST node classification."""

import pytest

from openscad_ast import NodeKind, descend_transparent, detect_node_type
from openscad_ast.detector import CALL_KINDS

from conftest import expression_node, synthetic_node, terminal, top_level_node


class TestStatementDetection:
    """Test detection of statement-level constructs."""

    @pytest.mark.parametrize("code, kind", [
        ("x = 1;", NodeKind.ASSIGNMENT),
        ("if (a) cube();", NodeKind.IF),
        ("if (a) cube(); else sphere();", NodeKind.IF),
        ("for (i = [0:3]) cube(i);", NodeKind.FOR),
        ("intersection_for (i = [0:3]) cube(i);", NodeKind.INTERSECTION_FOR),
        ("let (a = 1) cube(a);", NodeKind.LET),
        ("echo(\"hi\");", NodeKind.ECHO),
        ("assert(true);", NodeKind.ASSERT),
        ("{ cube(); }", NodeKind.BLOCK),
        ("module m() { cube(); }", NodeKind.MODULE_DECLARATION),
        ("function f(x) = x;", NodeKind.FUNCTION_DECLARATION),
        ("use <lib.scad>", NodeKind.USE),
        ("include <lib.scad>", NodeKind.INCLUDE),
    ])
    def test_direct_tags(self, parser, code, kind):
        assert detect_node_type(top_level_node(parser, code)) is kind

    def test_program(self, parser):
        assert detect_node_type(parser.parse("cube(1);").root_node) is NodeKind.PROGRAM

    @pytest.mark.parametrize("keyword", sorted(CALL_KINDS))
    def test_builtin_module_calls(self, parser, keyword):
        node = top_level_node(parser, f"{keyword}();")
        assert node.type == "modular_call"
        assert detect_node_type(node) is CALL_KINDS[keyword]

    def test_keyword_table_is_complete(self):
        assert len(CALL_KINDS) == 24

    def test_user_module_call_is_unknown(self, parser):
        assert detect_node_type(top_level_node(parser, "my_part(1);")) is NodeKind.UNKNOWN

    def test_keyword_must_match_exactly(self, parser):
        assert detect_node_type(top_level_node(parser, "cubes(1);")) is NodeKind.UNKNOWN
        assert detect_node_type(top_level_node(parser, "Cube(1);")) is NodeKind.UNKNOWN

    @pytest.mark.parametrize("modifier", ["!", "#", "%", "*"])
    def test_modifiers_are_transparent(self, parser, modifier):
        node = top_level_node(parser, f"{modifier}cube(1);")
        assert detect_node_type(node) is NodeKind.CUBE

    def test_unrecognized_tag_is_unknown(self):
        node = synthetic_node(terminal("weird_future_syntax", 0, "hello"), "hello")
        assert detect_node_type(node) is NodeKind.UNKNOWN


class TestExpressionDetection:
    """Test detection of expressions through their precedence wrappers."""

    @pytest.mark.parametrize("expr, kind", [
        ("42", NodeKind.LITERAL),
        ('"text"', NodeKind.LITERAL),
        ("true", NodeKind.LITERAL),
        ("false", NodeKind.LITERAL),
        ("undef", NodeKind.LITERAL),
        ("y", NodeKind.IDENTIFIER),
        ("$fn", NodeKind.IDENTIFIER),
        ("(42)", NodeKind.LITERAL),
        ("1 + 2", NodeKind.BINARY),
        ("1 * 2", NodeKind.BINARY),
        ("a < b", NodeKind.BINARY),
        ("a == b", NodeKind.BINARY),
        ("a && b", NodeKind.BINARY),
        ("a || b", NodeKind.BINARY),
        ("2 ^ 3", NodeKind.BINARY),
        ("-y", NodeKind.UNARY),
        ("!y", NodeKind.UNARY),
        ("a ? b : c", NodeKind.CONDITIONAL),
        ("sin(30)", NodeKind.CALL),
        ("v[0]", NodeKind.INDEX),
        ("v.x", NodeKind.MEMBER),
        ("f(1)[2]", NodeKind.INDEX),
        ("v[0](1)", NodeKind.CALL),
        ("[1, 2, 3]", NodeKind.VECTOR),
        ("[]", NodeKind.VECTOR),
        ("[0 : 10]", NodeKind.RANGE),
        ("[0 : 2 : 10]", NodeKind.RANGE),
    ])
    def test_expression_kinds(self, parser, expr, kind):
        assert detect_node_type(expression_node(parser, expr)) is kind

    @pytest.mark.parametrize("expr", [
        "let (a = 1) a",
        "function (x) x",
    ])
    def test_unsupported_expressions_are_unknown(self, parser, expr):
        assert detect_node_type(expression_node(parser, expr)) is NodeKind.UNKNOWN

    @pytest.mark.parametrize("element", [
        "for (i = v) i",
        "for (i = 0; i < 3; i = i + 1) i",
        "if (a) 1",
        "if (a) 1 else 2",
        "let (b = 1) b",
        "each v",
        "(for (i = v) i)",
    ])
    def test_comprehension_elements(self, parser, element):
        vector = expression_node(parser, f"[{element}]")
        assert detect_node_type(vector) is NodeKind.VECTOR
        with vector.child_by_type("vector_elements").named_child(0).walk() as cursor:
            descend_transparent(cursor)
            assert detect_node_type(cursor.node) is NodeKind.LIST_COMPREHENSION
