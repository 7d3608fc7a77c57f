from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Source span of an AST node.

    All four fields are 0-based and copied verbatim from the CST, so a node
    starting at the very beginning of a file has ``start_line == 0`` and
    ``start_column == 0``.
    """
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def __str__(self):
        return f"{self.start_line}:{self.start_column}-{self.end_line}:{self.end_column}"


def extract_position(source) -> Position:
    """Build a ``Position`` from anything with ``start_point``/``end_point``.

    Works for tree cursors and syntax nodes alike.
    """
    start_row, start_column = source.start_point
    end_row, end_column = source.end_point
    return Position(
        start_line=start_row,
        start_column=start_column,
        end_line=end_row,
        end_column=end_column,
    )


def span_position(first, last) -> Position:
    """Position running from the start of ``first`` to the end of ``last``."""
    start_row, start_column = first.start_point
    end_row, end_column = last.end_point
    return Position(
        start_line=start_row,
        start_column=start_column,
        end_line=end_row,
        end_column=end_column,
    )
