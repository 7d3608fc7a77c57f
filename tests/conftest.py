"""Pytest configuration and shared fixtures for OpenSCAD AST adapter tests."""

import pytest
from arpeggio import NonTerminal, Sequence, StrMatch, Terminal

from openscad_ast import OpenSCADParser, SyntaxTree, adapt, descend_transparent


@pytest.fixture
def parser():
    """Create a parser instance for testing."""
    return OpenSCADParser()


@pytest.fixture
def parser_with_comments():
    """Create a parser instance that keeps comments in the parse tree."""
    return OpenSCADParser(include_comments=True)


def parse_program(parser, code):
    """Helper function to parse and adapt code into a Program."""
    return adapt(parser.parse(code))


def parse_statement(parser, code):
    """Helper function to adapt code and return its only top-level statement."""
    program = parse_program(parser, code)
    assert len(program.children) == 1, program.children
    return program.children[0]


def parse_expression(parser, expr):
    """Helper function to adapt ``expr`` through an assignment's right-hand side."""
    return parse_statement(parser, f"x = {expr};").right


def top_level_node(parser, code):
    """Helper function returning the first meaningful CST node of ``code``."""
    tree = parser.parse(code)
    with tree.walk() as cursor:
        assert cursor.goto_first_named_child()
        descend_transparent(cursor)
        return cursor.node


def expression_node(parser, expr):
    """Helper function returning the meaningful CST node of an expression."""
    assignment = top_level_node(parser, f"x = {expr};")
    with assignment.child_by_type("expr").walk() as cursor:
        descend_transparent(cursor)
        return cursor.node


def terminal(rule_name, position, value):
    """Build a raw Arpeggio terminal for hand-made trees."""
    return Terminal(StrMatch(value, rule_name=rule_name), position, value)


def nonterminal(rule_name, *nodes):
    """Build a raw Arpeggio non-terminal for hand-made trees."""
    return NonTerminal(Sequence(rule_name=rule_name), list(nodes))


def synthetic_node(raw, text):
    """Wrap a hand-made raw node in a tree over ``text`` and return its node."""
    return SyntaxTree(raw, text).root_node
