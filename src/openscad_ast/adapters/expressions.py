"""Adapters for expression constructs."""

from __future__ import annotations

import re

from ..detector import BINARY_RULES, postfix_suffixes, unary_operators
from ..nodes import (
    BinaryExpression, CallExpression, ConditionalExpression, IdentifierExpression,
    IndexExpression, ListComprehensionExpression, LiteralExpression, MemberExpression,
    RangeExpression, UnaryExpression, Unknown, VectorExpression,
)
from ..position import extract_position, span_position
from .arguments import collect_arguments
from .control_flow import adapt_assignment_list

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def unescape_string(text: str) -> str:
    """Resolve the backslash escapes OpenSCAD recognizes in string literals."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), text)


def parse_number(text: str) -> float:
    text = text.strip()
    sign = -1.0 if text.startswith("-") else 1.0
    digits = text.lstrip("+-")
    if digits[:2].lower() == "0x":
        return sign * float(int(digits, 16))
    return sign * float(digits)


def adapt_literal(cursor, recurse):
    node = cursor.node
    position = extract_position(cursor)
    tag = node.type
    if tag == "TOK_NUMBER":
        return LiteralExpression(position=position, value_type="number", value=parse_number(node.text))
    if tag == "string_literal":
        # The node text still carries both quotes.
        return LiteralExpression(position=position, value_type="string", value=unescape_string(node.text[1:-1]))
    if tag in ("KWD_TRUE", "KWD_FALSE"):
        return LiteralExpression(position=position, value_type="boolean", value=tag == "KWD_TRUE")
    return LiteralExpression(position=position, value_type="undef", value=None)


def adapt_identifier(cursor, recurse):
    return IdentifierExpression(position=extract_position(cursor), name=cursor.node.text.strip())


def adapt_unary(cursor, recurse):
    """Prefix operators apply innermost-last: ``-!x`` is ``-(!x)``."""
    node = cursor.node
    operators = unary_operators(node)
    operand_node = node.named_child(node.named_child_count - 1)
    if operand_node is None:
        return Unknown(position=extract_position(cursor))
    result = recurse(operand_node)
    for operator in reversed(operators):
        result = UnaryExpression(
            position=span_position(operator, node),
            operator=operator.text,
            operand=result,
        )
    return result


def adapt_binary(cursor, recurse):
    """Fold an operator chain to the left; ``^`` nests to the right through the grammar."""
    node = cursor.node
    if node.type not in BINARY_RULES:
        # prec_exponent: (prec_call, '^', prec_unary)
        base, exponent = node.named_children[:2]
        return BinaryExpression(
            position=extract_position(cursor),
            operator="^",
            left=recurse(base),
            right=recurse(exponent),
        )
    operands = [child for child in node.children if child.is_named]
    operators = [child for child in node.children if not child.is_named and child.text]
    first = operands[0]
    result = recurse(first)
    for operator, operand in zip(operators, operands[1:]):
        result = BinaryExpression(
            position=span_position(first, operand),
            operator=operator.text,
            left=result,
            right=recurse(operand),
        )
    return result


def adapt_conditional(cursor, recurse):
    condition, then_expr, else_expr = cursor.node.named_children[:3]
    return ConditionalExpression(
        position=extract_position(cursor),
        condition=recurse(condition),
        then_expr=recurse(then_expr),
        else_expr=recurse(else_expr),
    )


def adapt_postfix(cursor, recurse):
    """Calls, index lookups and member lookups, folded left to right.

    ``a.b[1](2)`` becomes a call whose callee is an index whose target is a
    member lookup.
    """
    node = cursor.node
    primary = node.named_child(0)
    result = recurse(primary)
    for suffix in postfix_suffixes(node):
        position = span_position(primary, suffix)
        if suffix.type == "call_expr":
            result = CallExpression(
                position=position,
                callee=result,
                arguments=collect_arguments(suffix, recurse),
            )
        elif suffix.type == "lookup_expr":
            index = suffix.child_by_type("expr")
            result = IndexExpression(
                position=position,
                target=result,
                index=recurse(index) if index is not None else Unknown(position=extract_position(suffix)),
            )
        else:
            member = suffix.child_by_type("member_name")
            result = MemberExpression(
                position=position,
                target=result,
                member=member.text if member is not None else "",
            )
    return result


def adapt_vector(cursor, recurse):
    node = cursor.node
    elements = node.child_by_type("vector_elements")
    return VectorExpression(
        position=extract_position(cursor),
        elements=[recurse(element) for element in elements.named_children] if elements is not None else [],
    )


def adapt_range(cursor, recurse):
    """``[start : end]`` or ``[start : step : end]``."""
    parts = [recurse(child) for child in cursor.node.children_by_type("expr")]
    if len(parts) == 3:
        start, step, end = parts
    else:
        (start, end), step = parts[:2], None
    return RangeExpression(position=extract_position(cursor), start=start, end=end, step=step)


def _generated(node, recurse):
    element = node.child_by_type("vector_element", "listcomp_elements")
    return recurse(element) if element is not None else Unknown(position=extract_position(node))


def _c_for_header(node):
    """Split ``(init; condition; update)`` into its three parts, any of which may be None."""
    init = condition = update = None
    separators = 0
    for child in node.children:
        if not child.is_named:
            if child.text == ";":
                separators += 1
        elif child.type == "assignments_expr":
            if separators == 0:
                init = child
            else:
                update = child
        elif child.type == "expr":
            condition = child
    return init, condition, update


def _comprehension_for(node, recurse, position):
    # for (i = r) if (c) e: the filter belongs to the innermost loop.
    assignments = adapt_assignment_list(node.child_by_type("assignments_expr"), recurse)
    element = _generated(node, recurse)
    condition = None
    if (isinstance(element, ListComprehensionExpression) and element.clause == "if"
            and element.else_element is None):
        condition, element = element.condition, element.element
    if not assignments:
        return ListComprehensionExpression(
            position=position,
            clause="for",
            element=element,
            variable="unknown",
            iterable=Unknown(position=position),
            condition=condition,
        )
    for assignment in reversed(assignments):
        element = ListComprehensionExpression(
            position=position,
            clause="for",
            element=element,
            variable=assignment.left.name,
            iterable=assignment.right,
            condition=condition,
        )
        condition = None
    return element


def adapt_list_comprehension(cursor, recurse):
    """One generator clause of a vector literal: ``for``, C-style ``for``, ``if``, ``let`` or ``each``."""
    node = cursor.node
    tag = node.type
    position = extract_position(cursor)
    if tag == "listcomp_for":
        return _comprehension_for(node, recurse, position)
    if tag == "listcomp_c_for":
        init, condition, update = _c_for_header(node)
        return ListComprehensionExpression(
            position=position,
            clause="c_for",
            element=_generated(node, recurse),
            condition=recurse(condition) if condition is not None else Unknown(position=position),
            assignments=adapt_assignment_list(init, recurse),
            updates=adapt_assignment_list(update, recurse),
        )
    if tag == "listcomp_let":
        return ListComprehensionExpression(
            position=position,
            clause="let",
            element=_generated(node, recurse),
            assignments=adapt_assignment_list(node.child_by_type("assignments_expr"), recurse),
        )
    if tag == "listcomp_each":
        return ListComprehensionExpression(position=position, clause="each", element=_generated(node, recurse))
    # listcomp_ifonly / listcomp_ifelse
    condition = node.child_by_type("expr")
    branches = [recurse(child) for child in node.children_by_type("vector_element")]
    return ListComprehensionExpression(
        position=position,
        clause="if",
        element=branches[0] if branches else Unknown(position=position),
        condition=recurse(condition) if condition is not None else Unknown(position=position),
        else_element=branches[1] if tag == "listcomp_ifelse" and len(branches) > 1 else None,
    )
