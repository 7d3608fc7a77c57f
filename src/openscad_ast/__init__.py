#######################################################################
# OpenSCAD concrete syntax tree to abstract syntax tree adapter
#######################################################################

from .cst import SyntaxNode, SyntaxTree
from .cursor import TreeCursor
from .detector import descend_transparent, detect_node_type
from .document import Document, DocumentState, getASTfromString, update
from .errors import CursorClosedError, OpenSCADASTError, OpenSCADSyntaxError, RegistryError
from .nodes import (
    ASTNode,
    Expression,
    Statement,
    Primitive,
    Transform,
    Operation,
    NodeKind,
    Program,
    Unknown,
    LiteralExpression,
    IdentifierExpression,
    UnaryExpression,
    BinaryExpression,
    ConditionalExpression,
    Argument,
    CallExpression,
    IndexExpression,
    MemberExpression,
    VectorExpression,
    RangeExpression,
    ListComprehensionExpression,
    Vector2,
    Vector3,
    Parameter,
    Cube3D,
    Sphere3D,
    Cylinder3D,
    Polyhedron3D,
    Circle2D,
    Square2D,
    Polygon2D,
    Text2D,
    TranslateTransform,
    RotateTransform,
    ScaleTransform,
    MirrorTransform,
    ColorTransform,
    OffsetTransform,
    LinearExtrudeTransform,
    RotateExtrudeTransform,
    ResizeTransform,
    MultmatrixTransform,
    UnionOperation,
    DifferenceOperation,
    IntersectionOperation,
    HullOperation,
    MinkowskiOperation,
    AssignmentStatement,
    IfStatement,
    ForStatement,
    IntersectionForStatement,
    LetStatement,
    BlockStatement,
    EchoStatement,
    AssertStatement,
    ChildrenStatement,
    ModuleDeclaration,
    FunctionDeclaration,
    UseStatement,
    IncludeStatement,
)
from .parser import OpenSCADParser, getOpenSCADParser
from .position import Position, extract_position, span_position
from .registry import AdapterRegistry, build_default_registry, default_registry
from .serialization import (
    ast_to_dict,
    ast_to_json,
    ast_from_dict,
    ast_from_json,
    ast_to_yaml,
    ast_from_yaml,
)
from .traversal import CursorTraversal, adapt


# vim: set ts=4 sw=4 expandtab:
