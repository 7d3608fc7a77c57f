"""Classification of CST nodes into canonical AST node kinds.

The grammar produces many wrapper rules that exist only to encode
precedence or statement structure (``statement``, ``expr``, ``prec_addition``
with a single operand, ``paren_expr``...). ``descend_transparent`` moves a
cursor through those before ``detect_node_type`` looks at the node, so each
detection sees the construct that actually carries meaning.
"""

from __future__ import annotations

from .cst import SyntaxNode
from .cursor import TreeCursor
from .nodes import NodeKind


# Grammar tags that map 1:1 onto a node kind.
DIRECT_KINDS: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "program_with_comments": NodeKind.PROGRAM,
    "assignment": NodeKind.ASSIGNMENT,
    "if_statement": NodeKind.IF,
    "ifelse_statement": NodeKind.IF,
    "modular_for": NodeKind.FOR,
    "modular_intersection_for": NodeKind.INTERSECTION_FOR,
    "modular_let": NodeKind.LET,
    "modular_echo": NodeKind.ECHO,
    "modular_assert": NodeKind.ASSERT,
    "statement_block": NodeKind.BLOCK,
    "module_definition": NodeKind.MODULE_DECLARATION,
    "function_definition": NodeKind.FUNCTION_DECLARATION,
    "use_statement": NodeKind.USE,
    "include_statement": NodeKind.INCLUDE,
    "TOK_NUMBER": NodeKind.LITERAL,
    "string_literal": NodeKind.LITERAL,
    "KWD_TRUE": NodeKind.LITERAL,
    "KWD_FALSE": NodeKind.LITERAL,
    "KWD_UNDEF": NodeKind.LITERAL,
    "TOK_ID": NodeKind.IDENTIFIER,
    "variable_name": NodeKind.IDENTIFIER,
    "variable_or_function_name": NodeKind.IDENTIFIER,
    "vector_expr": NodeKind.VECTOR,
    "range_expr": NodeKind.RANGE,
    "ternary_expr": NodeKind.CONDITIONAL,
    "listcomp_for": NodeKind.LIST_COMPREHENSION,
    "listcomp_c_for": NodeKind.LIST_COMPREHENSION,
    "listcomp_ifonly": NodeKind.LIST_COMPREHENSION,
    "listcomp_ifelse": NodeKind.LIST_COMPREHENSION,
    "listcomp_let": NodeKind.LIST_COMPREHENSION,
    "listcomp_each": NodeKind.LIST_COMPREHENSION,
}

# Built-in module names recognized at a ``modular_call``.
CALL_KINDS: dict[str, NodeKind] = {
    "cube": NodeKind.CUBE,
    "sphere": NodeKind.SPHERE,
    "cylinder": NodeKind.CYLINDER,
    "polyhedron": NodeKind.POLYHEDRON,
    "circle": NodeKind.CIRCLE,
    "square": NodeKind.SQUARE,
    "polygon": NodeKind.POLYGON,
    "text": NodeKind.TEXT,
    "translate": NodeKind.TRANSLATE,
    "rotate": NodeKind.ROTATE,
    "scale": NodeKind.SCALE,
    "mirror": NodeKind.MIRROR,
    "color": NodeKind.COLOR,
    "offset": NodeKind.OFFSET,
    "linear_extrude": NodeKind.LINEAR_EXTRUDE,
    "rotate_extrude": NodeKind.ROTATE_EXTRUDE,
    "resize": NodeKind.RESIZE,
    "multmatrix": NodeKind.MULTMATRIX,
    "union": NodeKind.UNION,
    "difference": NodeKind.DIFFERENCE,
    "intersection": NodeKind.INTERSECTION,
    "hull": NodeKind.HULL,
    "minkowski": NodeKind.MINKOWSKI,
    "children": NodeKind.CHILDREN,
}

# Infix precedence levels: OneOrMore(operand, sep=operators).
BINARY_RULES = frozenset({
    "prec_logical_or",
    "prec_logical_and",
    "prec_equality",
    "prec_comparison",
    "prec_binary_or",
    "prec_binary_and",
    "prec_binary_shift",
    "prec_addition",
    "prec_multiplication",
})

POSTFIX_KINDS: dict[str, NodeKind] = {
    "call_expr": NodeKind.CALL,
    "lookup_expr": NodeKind.INDEX,
    "member_expr": NodeKind.MEMBER,
}

# Wrappers that never carry meaning of their own.
TRANSPARENT_RULES = frozenset({
    "toplevel_statement",
    "toplevel_statement_or_comment",
    "statement",
    "child_statement",
    "module_instantiation",
    "single_module_instantiation",
    "modifier_show_only",
    "modifier_highlight",
    "modifier_background",
    "modifier_disable",
    "expr",
    "primary",
    "paren_expr",
    "vector_element",
    "listcomp_elements",
    "listcomp_paren_expr",
})

UNARY_OPERATORS = ("+", "-", "!", "~")


def unary_operators(node: SyntaxNode) -> list[SyntaxNode]:
    """Prefix operator children of a ``prec_unary`` node, in source order."""
    return [child for child in node.children
            if not child.is_named and child.text in UNARY_OPERATORS]


def postfix_suffixes(node: SyntaxNode) -> list[SyntaxNode]:
    """Call, index and member suffixes of a ``prec_call`` node, in source order."""
    return [child for child in node.children if child.type in POSTFIX_KINDS]


def is_transparent(node: SyntaxNode) -> bool:
    """Return True if ``node`` only wraps a single meaningful child."""
    tag = node.type
    if node.named_child_count != 1:
        return False
    if tag in TRANSPARENT_RULES or tag in BINARY_RULES:
        return True
    if tag == "prec_unary":
        return not unary_operators(node)
    if tag == "prec_exponent":
        return node.child_by_type("TOK_EXPONENT") is None
    if tag == "prec_call":
        return not postfix_suffixes(node)
    return False


def descend_transparent(cursor: TreeCursor) -> None:
    """Move ``cursor`` down through transparent wrappers.

    Stops at the first node that carries meaning, or at a wrapper whose
    only content is punctuation.
    """
    while is_transparent(cursor.node):
        cursor.goto_first_named_child()


def detect_node_type(node: SyntaxNode) -> NodeKind:
    """Classify one CST node.

    Never raises: anything without a recognized shape is ``NodeKind.UNKNOWN``.
    """
    tag = node.type
    kind = DIRECT_KINDS.get(tag)
    if kind is not None:
        return kind
    if tag == "modular_call":
        return _detect_call(node)
    if tag in BINARY_RULES:
        return NodeKind.BINARY if node.named_child_count > 1 else NodeKind.UNKNOWN
    if tag == "prec_unary" and unary_operators(node):
        return NodeKind.UNARY
    if tag == "prec_exponent" and node.child_by_type("TOK_EXPONENT") is not None:
        return NodeKind.BINARY
    if tag == "prec_call":
        suffixes = postfix_suffixes(node)
        if suffixes:
            return POSTFIX_KINDS[suffixes[-1].type]
    return NodeKind.UNKNOWN


def _detect_call(node: SyntaxNode) -> NodeKind:
    # The first named child decides; there is no second guess.
    callee = node.named_child(0)
    if callee is None or callee.type != "module_instantiation_name":
        return NodeKind.UNKNOWN
    return CALL_KINDS.get(callee.text, NodeKind.UNKNOWN)
