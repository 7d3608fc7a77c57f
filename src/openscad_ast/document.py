"""Version-gated parsing and adaptation of one editor document.

Editors report a version id with every content change. ``update`` only
re-parses and re-adapts when that id changes, so repeated notifications for
the same version cost nothing.

Example:
    state = update(None, "cube(10);", version_id=1)
    state = update(state, "cube(10);", version_id=1)   # same object back
    state.ast.children[0]                              # Cube3D(...)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Optional

from .cst import LineIndex, SyntaxTree
from .errors import OpenSCADSyntaxError
from .nodes import Program
from .parser import OpenSCADParser, describe_syntax_error
from .position import Position
from .registry import AdapterRegistry
from .traversal import adapt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentState:
    """Immutable snapshot of one document version.

    Attributes:
        version_id: Version the snapshot was built for; None before the first update.
        tree: The parse tree, None if the text did not parse.
        ast: The adapted ``Program``; empty when the text did not parse.
        error: The syntax error of this version, if any.
    """
    version_id: Optional[Hashable] = None
    tree: Optional[SyntaxTree] = None
    ast: Optional[Program] = None
    error: Optional[OpenSCADSyntaxError] = None


def update(
        state: Optional[DocumentState],
        source_text: str,
        version_id: Hashable,
        parser: Optional[OpenSCADParser] = None,
        registry: Optional[AdapterRegistry] = None
) -> DocumentState:
    """Return the document state for ``version_id``.

    If ``state`` already describes ``version_id`` it is returned unchanged
    and ``source_text`` is not looked at. Otherwise the text is parsed and
    adapted into a new state. Syntax errors are logged and recorded on the
    new state rather than raised.
    """
    if state is not None and state.version_id == version_id:
        return state
    parser = parser if parser is not None else OpenSCADParser()
    logger.info("adapting document version %r (%d chars)", version_id, len(source_text))
    try:
        tree = parser.parse(source_text)
    except OpenSCADSyntaxError as e:
        logger.warning("syntax error in document version %r: %s",
                       version_id, describe_syntax_error(source_text, e))
        end_line, end_column = LineIndex(source_text).end_point
        return DocumentState(
            version_id=version_id,
            ast=Program(position=Position(0, 0, end_line, end_column)),
            error=e,
        )
    return DocumentState(version_id=version_id, tree=tree, ast=adapt(tree, registry))


class Document:
    """Mutable holder of a ``DocumentState`` for callers that prefer an object.

    Args:
        parser: Parser to use; a default ``OpenSCADParser`` when omitted.
        registry: Adapter registry to use; the default registry when omitted.
    """

    def __init__(self, parser: Optional[OpenSCADParser] = None, registry: Optional[AdapterRegistry] = None):
        self.parser = parser
        self.registry = registry
        self.state = DocumentState()

    def update(self, source_text: str, version_id: Hashable) -> DocumentState:
        self.state = update(self.state, source_text, version_id, self.parser, self.registry)
        return self.state

    @property
    def version_id(self) -> Optional[Hashable]:
        return self.state.version_id

    @property
    def tree(self) -> Optional[SyntaxTree]:
        return self.state.tree

    @property
    def ast(self) -> Optional[Program]:
        return self.state.ast

    @property
    def error(self) -> Optional[OpenSCADSyntaxError]:
        return self.state.error


def getASTfromString(code: str, include_comments: bool = False) -> Program:
    """
    Parse OpenSCAD source code from a string and return its AST.

    Args:
        code (str): The OpenSCAD source code to be parsed.
        include_comments (bool): If True, parse with comments kept in the
            parse tree (default: False). Comments never appear in the AST.

    Returns:
        Program: The adapted document.

    Raises:
        OpenSCADSyntaxError: If the code does not parse.

    Example:
        ast = getASTfromString("cube([1,2,3]);")
        ast.children[0].size.y.value   # 2.0
    """
    tree = OpenSCADParser(include_comments=include_comments).parse(code)
    return adapt(tree)
