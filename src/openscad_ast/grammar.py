"""Arpeggio PEG grammar for OpenSCAD.

Rule function names double as the CST type tags seen by the node-type
detector (``program``, ``modular_call``, ``if_statement``, ``TOK_NUMBER``...).

Punctuation and structural keywords are written inline, so they come out of
the parser as anonymous matches with an empty rule name. The few token rules
that remain either carry content the adapters read (identifiers, numbers,
``true``/``false``/``undef``) or need a lookahead to tell them apart from a
longer operator (``=`` from ``==``, ``<`` from ``<=``...).
"""

from arpeggio import (
    Optional, ZeroOrMore, OneOrMore, EOF, Kwd, Not,
    RegExMatch as _
)


# --- Roots ---

def program():
    return (ZeroOrMore(toplevel_statement), EOF)


def program_with_comments():
    """Root rule that keeps top-level comments as CST nodes."""
    return (ZeroOrMore(toplevel_statement_or_comment), EOF)


def toplevel_statement():
    return [use_statement, include_statement, statement]


def toplevel_statement_or_comment():
    return [use_statement, include_statement, statement, comment]


# --- Comments and whitespace ---

def comment_line():
    return _(r'//.*?$', str_repr='comment')


def comment_multi():
    return _(r'(?ms)/\*.*?\*/', str_repr='comment')


def comment():
    return [comment_line, comment_multi]


def whitespace_only():
    """Skips whitespace but not comments, for parsers that keep comments."""
    return _(r'[ \t\n\r]+')


# --- Content tokens ---

def TOK_ID():
    return _(r"(\$?[_A-Za-z][A-Za-z0-9_]*)", str_repr='string')


def TOK_NUMBER():
    return _(
        r'[+-]?(0x[0-9A-Fa-f]+|'
        r'\d+([.]\d*)?([eE][+-]?\d+)?'
        r'|[.]\d+([eE][+-]?\d+)?)'
        )


def KWD_TRUE():
    return Kwd('true')


def KWD_FALSE():
    return Kwd('false')


def KWD_UNDEF():
    return Kwd('undef')


# --- Operators that need a lookahead ---

def TOK_ASSIGN():
    return ('=', Not('='))


def TOK_LT():
    return ('<', Not('<', '='))


def TOK_GT():
    return ('>', Not('>', '='))


def TOK_LOGICAL_NOT():
    return ('!', Not('='))


def TOK_BINARY_OR():
    return ('|', Not('|'))


def TOK_BINARY_AND():
    return ('&', Not('&'))


def TOK_EXPONENT():
    return '^'


# --- Names ---
# Single-element tuples keep the identifier from being elided.

def module_name():
    return (TOK_ID,)


def function_name():
    return (TOK_ID,)


def variable_name():
    return (TOK_ID,)


def module_instantiation_name():
    return (TOK_ID,)


def member_name():
    return (TOK_ID,)


def variable_or_function_name():
    return (TOK_ID,)


# --- use / include ---

def include_path():
    return _(r"[^>]*", str_repr="path")


def use_include_file():
    return ('<', include_path, '>')


def use_statement():
    return (Kwd('use'), use_include_file)


def include_statement():
    return (Kwd('include'), use_include_file)


# --- Statements ---

def statement():
    return [
            empty_statement,
            statement_block,
            module_definition,
            function_definition,
            module_instantiation,
            assignment
        ]


def empty_statement():
    return ';'


def statement_block():
    return ('{', ZeroOrMore(statement), '}')


def module_definition():
    return (Kwd('module'), module_name, parameter_block, statement)


def function_definition():
    return (Kwd('function'), function_name, parameter_block, TOK_ASSIGN, expr, ';')


def assignment():
    return (variable_name, TOK_ASSIGN, expr, ';')


def child_statement():
    return [
            empty_statement,
            statement_block,
            module_instantiation
        ]


# --- Module instantiation ---

def module_instantiation():
    return [
            modifier_show_only,
            modifier_highlight,
            modifier_background,
            modifier_disable,
            ifelse_statement,
            if_statement,
            single_module_instantiation
        ]


def modifier_show_only():
    return ('!', module_instantiation)


def modifier_highlight():
    return ('#', module_instantiation)


def modifier_background():
    return ('%', module_instantiation)


def modifier_disable():
    return ('*', module_instantiation)


def if_statement():
    return (Kwd('if'), '(', expr, ')', child_statement)


def ifelse_statement():
    return (Kwd('if'), '(', expr, ')', child_statement, Kwd('else'), child_statement)


def single_module_instantiation():
    return [
            modular_c_for,
            modular_for,
            modular_intersection_c_for,
            modular_intersection_for,
            modular_let,
            modular_assert,
            modular_echo,
            modular_call
        ]


def _c_for_header():
    # (init; condition; update)
    return ('(', assignments_expr, ';', expr, ';', assignments_expr, ')')


def modular_for():
    return (Kwd('for'), '(', assignments_expr, ')', child_statement)


def modular_c_for():
    return (Kwd('for'),) + _c_for_header() + (child_statement,)


def modular_intersection_for():
    return (Kwd('intersection_for'), '(', assignments_expr, ')', child_statement)


def modular_intersection_c_for():
    return (Kwd('intersection_for'),) + _c_for_header() + (child_statement,)


def modular_let():
    return (Kwd('let'), '(', assignments_expr, ')', child_statement)


def modular_assert():
    return (Kwd('assert'), '(', arguments, ')', child_statement)


def modular_echo():
    return (Kwd('echo'), '(', arguments, ')', child_statement)


def modular_call():
    return (module_instantiation_name, '(', arguments, ')', child_statement)


# --- Parameters and arguments ---

def parameter_block():
    return ('(', parameters, ')')


def parameters():
    return (ZeroOrMore(parameter, sep=','), ZeroOrMore(','))


def parameter():
    return [
            parameter_with_default,
            parameter_without_default
        ]


def parameter_with_default():
    return (variable_name, TOK_ASSIGN, expr)


def parameter_without_default():
    return (variable_name, Not(TOK_ASSIGN))


def argument_block():
    return ('(', arguments, ')')


def arguments():
    return (ZeroOrMore(argument, sep=','), Optional(','))


def argument():
    return [
            named_argument,
            positional_argument
        ]


def positional_argument():
    return (expr, Not(TOK_ASSIGN))


def named_argument():
    return (variable_name, TOK_ASSIGN, expr)


def assignments_expr():
    return (ZeroOrMore(assignment_expr, sep=','), Optional(','))


def assignment_expr():
    return (variable_name, TOK_ASSIGN, expr)


# --- Expressions, loosest binding first ---

def expr():
    return [
            let_expr,
            assert_expr,
            echo_expr,
            funclit_def,
            ternary_expr,
            prec_logical_or
        ]


def let_expr():
    return (Kwd('let'), '(', assignments_expr, ')', expr)


def assert_expr():
    return (Kwd('assert'), '(', arguments, ')', Optional(expr))


def echo_expr():
    return (Kwd('echo'), '(', arguments, ')', Optional(expr))


def funclit_def():
    return (Kwd('function'), '(', parameters, ')', expr)


def ternary_expr():
    return (prec_logical_or, '?', expr, ':', expr)


def prec_logical_or():
    return OneOrMore(prec_logical_and, sep='||')


def prec_logical_and():
    return OneOrMore(prec_equality, sep='&&')


def prec_equality():
    return OneOrMore(prec_comparison, sep=['==', '!='])


def prec_comparison():
    return OneOrMore(prec_binary_or, sep=['<=', '>=', TOK_LT, TOK_GT])


def prec_binary_or():
    return OneOrMore(prec_binary_and, sep=TOK_BINARY_OR)


def prec_binary_and():
    return OneOrMore(prec_binary_shift, sep=TOK_BINARY_AND)


def prec_binary_shift():
    return OneOrMore(prec_addition, sep=['<<', '>>'])


def prec_addition():
    return OneOrMore(prec_multiplication, sep=['+', '-'])


def prec_multiplication():
    return OneOrMore(prec_unary, sep=['*', '/', '%'])


def prec_unary():
    return (ZeroOrMore(['+', '-', TOK_LOGICAL_NOT, '~']), prec_exponent)


def prec_exponent():
    # Right associative: the exponent recurses through prec_unary.
    return [
        (prec_call, TOK_EXPONENT, prec_unary),
        prec_call
    ]


def prec_call():
    return (primary, ZeroOrMore([call_expr, lookup_expr, member_expr]))


def call_expr():
    return (argument_block,)


def lookup_expr():
    return ('[', expr, ']')


def member_expr():
    return ('.', member_name)


def primary():
    return [
            paren_expr,
            range_expr,
            vector_expr,
            KWD_UNDEF,
            KWD_TRUE,
            KWD_FALSE,
            string_literal,
            TOK_NUMBER,
            variable_or_function_name
        ]


def string_contents():
    return _(r'([^"\\]|\\.|\\$)*', str_repr='string')


def string_literal():
    return ('"', string_contents, '"')


def paren_expr():
    return ('(', expr, ')')


def range_expr():
    return ('[', expr, ':', expr, Optional(':', expr), ']')


def vector_expr():
    return ('[', vector_elements, Optional(','), ']')


# --- Vectors and list comprehensions ---

def vector_elements():
    return ZeroOrMore(vector_element, sep=',')


def vector_element():
    return [listcomp_elements, expr]


def listcomp_elements():
    return [
            listcomp_paren_expr,
            listcomp_let,
            listcomp_each,
            listcomp_c_for,
            listcomp_for,
            listcomp_ifelse,
            listcomp_ifonly,
        ]


def listcomp_paren_expr():
    return ('(', listcomp_elements, ')')


def listcomp_let():
    return (Kwd('let'), '(', assignments_expr, ')', listcomp_elements)


def listcomp_each():
    return (Kwd('each'), vector_element)


def listcomp_for():
    return (Kwd('for'), '(', assignments_expr, ')', vector_element)


def listcomp_c_for():
    return (Kwd('for'),) + _c_for_header() + (vector_element,)


def listcomp_ifonly():
    return (Kwd('if'), '(', expr, ')', vector_element)


def listcomp_ifelse():
    return (Kwd('if'), '(', expr, ')', vector_element, Kwd('else'), vector_element)


# vim: set ts=4 sw=4 expandtab:
