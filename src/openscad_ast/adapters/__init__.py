"""Per-construct adapters and the table that maps node kinds onto them."""

from ..nodes import NodeKind
from ..registry import adapt_unknown
from .control_flow import (
    adapt_assert, adapt_assignment, adapt_block, adapt_children_statement, adapt_echo,
    adapt_for, adapt_if, adapt_intersection_for, adapt_let,
)
from .declarations import (
    adapt_function_declaration, adapt_include, adapt_module_declaration, adapt_use,
)
from .expressions import (
    adapt_binary, adapt_conditional, adapt_identifier, adapt_list_comprehension,
    adapt_literal, adapt_postfix, adapt_range, adapt_unary, adapt_vector,
)
from .operations import (
    adapt_difference, adapt_hull, adapt_intersection, adapt_minkowski, adapt_union,
)
from .primitives import (
    adapt_circle, adapt_cube, adapt_cylinder, adapt_polygon, adapt_polyhedron,
    adapt_sphere, adapt_square, adapt_text,
)
from .program import adapt_program
from .transforms import (
    adapt_color, adapt_linear_extrude, adapt_mirror, adapt_multmatrix, adapt_offset,
    adapt_resize, adapt_rotate, adapt_rotate_extrude, adapt_scale, adapt_translate,
)


ADAPTERS = {
    NodeKind.PROGRAM: adapt_program,
    NodeKind.UNKNOWN: adapt_unknown,

    NodeKind.LITERAL: adapt_literal,
    NodeKind.IDENTIFIER: adapt_identifier,
    NodeKind.UNARY: adapt_unary,
    NodeKind.BINARY: adapt_binary,
    NodeKind.CONDITIONAL: adapt_conditional,
    NodeKind.CALL: adapt_postfix,
    NodeKind.INDEX: adapt_postfix,
    NodeKind.MEMBER: adapt_postfix,
    NodeKind.VECTOR: adapt_vector,
    NodeKind.RANGE: adapt_range,
    NodeKind.LIST_COMPREHENSION: adapt_list_comprehension,

    NodeKind.CUBE: adapt_cube,
    NodeKind.SPHERE: adapt_sphere,
    NodeKind.CYLINDER: adapt_cylinder,
    NodeKind.POLYHEDRON: adapt_polyhedron,
    NodeKind.CIRCLE: adapt_circle,
    NodeKind.SQUARE: adapt_square,
    NodeKind.POLYGON: adapt_polygon,
    NodeKind.TEXT: adapt_text,

    NodeKind.TRANSLATE: adapt_translate,
    NodeKind.ROTATE: adapt_rotate,
    NodeKind.SCALE: adapt_scale,
    NodeKind.MIRROR: adapt_mirror,
    NodeKind.COLOR: adapt_color,
    NodeKind.OFFSET: adapt_offset,
    NodeKind.LINEAR_EXTRUDE: adapt_linear_extrude,
    NodeKind.ROTATE_EXTRUDE: adapt_rotate_extrude,
    NodeKind.RESIZE: adapt_resize,
    NodeKind.MULTMATRIX: adapt_multmatrix,

    NodeKind.UNION: adapt_union,
    NodeKind.DIFFERENCE: adapt_difference,
    NodeKind.INTERSECTION: adapt_intersection,
    NodeKind.HULL: adapt_hull,
    NodeKind.MINKOWSKI: adapt_minkowski,

    NodeKind.ASSIGNMENT: adapt_assignment,
    NodeKind.IF: adapt_if,
    NodeKind.FOR: adapt_for,
    NodeKind.INTERSECTION_FOR: adapt_intersection_for,
    NodeKind.LET: adapt_let,
    NodeKind.BLOCK: adapt_block,
    NodeKind.ECHO: adapt_echo,
    NodeKind.ASSERT: adapt_assert,
    NodeKind.CHILDREN: adapt_children_statement,

    NodeKind.MODULE_DECLARATION: adapt_module_declaration,
    NodeKind.FUNCTION_DECLARATION: adapt_function_declaration,
    NodeKind.USE: adapt_use,
    NodeKind.INCLUDE: adapt_include,
}
