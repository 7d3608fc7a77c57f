"""Arpeggio parser construction and the ``SyntaxTree`` producing front end."""

from __future__ import annotations

import logging

from arpeggio import NoMatch, ParserPython

from .cst import LineIndex, SyntaxTree
from .errors import OpenSCADSyntaxError
from .grammar import comment, program, program_with_comments, whitespace_only

logger = logging.getLogger(__name__)


def getOpenSCADParser(debug=False, include_comments=False):
    """Create an OpenSCAD parser instance.

    Args:
        debug: If True, enable Arpeggio debug output (default: False)
        include_comments: If True, keep comments as CST nodes instead of
            skipping them as whitespace (default: False)

    Returns:
        ParserPython instance configured for OpenSCAD parsing
    """
    if include_comments:
        # Comments are part of the grammar; only real whitespace is skipped
        return ParserPython(
            program_with_comments, whitespace_only, reduce_tree=False,
            memoization=True, autokwd=True, debug=debug
        )
    return ParserPython(
        program, comment, reduce_tree=False,
        memoization=True, autokwd=True, debug=debug
    )


class OpenSCADParser:
    """Parses OpenSCAD source text into ``SyntaxTree`` objects.

    Every call to ``parse`` builds a fresh Arpeggio parser. A memoizing
    Arpeggio parser keeps state from one parse to the next, so sharing one
    across texts can reject valid source.

    Example:
        tree = OpenSCADParser().parse("cube(10);")
        tree.root_node.type   # "program"
    """

    def __init__(self, include_comments: bool = False, debug: bool = False):
        self.include_comments = include_comments
        self.debug = debug

    def parse(self, text: str, origin: str = "<string>") -> SyntaxTree:
        """Parse ``text``.

        Raises:
            OpenSCADSyntaxError: The text does not match the grammar.
        """
        try:
            parser = getOpenSCADParser(debug=self.debug, include_comments=self.include_comments)
            root = parser.parse(text)
        except NoMatch as e:
            offset = e.position if isinstance(e.position, int) else 0
            line, column = LineIndex(text).point(offset)
            raise OpenSCADSyntaxError(str(e), line, column, offset) from e
        logger.debug("parsed %s (%d chars)", origin, len(text))
        return SyntaxTree(root, text, origin)


def describe_syntax_error(text: str, error: OpenSCADSyntaxError) -> str:
    """Render the offending source line with a caret under the error column."""
    lines = text.split("\n")
    if not 0 <= error.line < len(lines):
        return str(error)
    source_line = lines[error.line]
    caret = len(source_line[:error.column].expandtabs())
    return f"{error}\n{source_line}\n{' ' * caret}^"
