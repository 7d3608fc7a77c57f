"""Exceptions raised by the OpenSCAD CST to AST adapter.

Malformed but parseable input never raises: adapters recover locally and the
traversal always yields a node. The exceptions here cover the remaining
cases, namely source the grammar cannot parse at all and misuse of the
traversal machinery.
"""


class OpenSCADASTError(Exception):
    """Base class for all errors raised by this package."""


class OpenSCADSyntaxError(OpenSCADASTError):
    """Source text could not be parsed by the OpenSCAD grammar.

    Attributes:
        message: The parser's description of what was expected.
        line: 0-based line of the failure.
        column: 0-based column of the failure.
        offset: Character offset of the failure in the source text.
    """

    def __init__(self, message: str, line: int, column: int, offset: int = 0):
        super().__init__(f"{message} at line {line + 1}, column {column + 1}")
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset


class CursorClosedError(OpenSCADASTError):
    """A tree cursor was used after it had been closed."""


class RegistryError(OpenSCADASTError):
    """The adapter registry was mutated after freezing, or is incomplete."""
