"""Read-only view over an Arpeggio parse tree.

The Arpeggio parser produces ``Terminal`` and ``NonTerminal`` nodes that only
know their character offset and rule. ``SyntaxTree`` and ``SyntaxNode`` wrap
them with the accessors the adapters need: grammar type tag, named versus
punctuation children, source text and 0-based ``(row, column)`` points.

Nothing here owns the parse tree; a new parse produces a new ``SyntaxTree``.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING, Iterator, Optional

from arpeggio import NonTerminal

if TYPE_CHECKING:
    from .cursor import TreeCursor


# Token rules that carry semantic content rather than punctuation.
NAMED_TOKENS = frozenset({"TOK_ID", "TOK_NUMBER", "KWD_TRUE", "KWD_FALSE", "KWD_UNDEF"})

# Rules that are never semantic children.
PUNCTUATION_RULES = frozenset({
    "EOF",
    "empty_statement",
    "comment",
    "comment_line",
    "comment_multi",
})

# Statement wrappers are punctuation when all they hold is a terminator.
STATEMENT_WRAPPERS = frozenset({
    "toplevel_statement",
    "toplevel_statement_or_comment",
    "statement",
    "child_statement",
})

_TOKEN_PREFIXES = ("TOK_", "KWD_", "MOD_")


def is_named_raw(raw) -> bool:
    """Return True if an Arpeggio node is a semantic (named) CST node."""
    while raw.rule_name in STATEMENT_WRAPPERS and isinstance(raw, NonTerminal) and len(raw) == 1:
        raw = raw[0]
    name = raw.rule_name
    if name in NAMED_TOKENS:
        return True
    if not name or not name.isidentifier():
        return False  # anonymous string or regex match inside a rule
    if name in PUNCTUATION_RULES or name.startswith(_TOKEN_PREFIXES):
        return False
    return True


def _end_offset(raw) -> int:
    while isinstance(raw, NonTerminal):
        if len(raw) == 0:
            return raw.position
        raw = raw[-1]
    return raw.position + len(raw.value)


class LineIndex:
    """Maps character offsets to 0-based ``(row, column)`` points."""

    def __init__(self, text: str):
        self._starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._starts.append(i + 1)
        self._length = len(text)

    def point(self, offset: int) -> tuple[int, int]:
        offset = max(0, min(offset, self._length))
        row = bisect_right(self._starts, offset) - 1
        return (row, offset - self._starts[row])

    @property
    def end_point(self) -> tuple[int, int]:
        return self.point(self._length)


class SyntaxTree:
    """One parse of one source text.

    Attributes:
        text: The source text the tree was parsed from.
        origin: Free-form identifier of the source (file name, editor buffer).
    """

    def __init__(self, root, text: str, origin: str = "<string>"):
        self._root = root
        self.text = text
        self.origin = origin
        self._lines = LineIndex(text)

    @property
    def root_node(self) -> SyntaxNode:
        return SyntaxNode(self, self._root)

    def walk(self) -> TreeCursor:
        """Create a cursor positioned at the root node."""
        return self.root_node.walk()

    def point_at(self, offset: int) -> tuple[int, int]:
        return self._lines.point(offset)

    @property
    def end_point(self) -> tuple[int, int]:
        return self._lines.end_point

    def __repr__(self):
        return f"SyntaxTree({self.origin!r}, {len(self.text)} chars)"


class SyntaxNode:
    """Non-owning handle on one node of a ``SyntaxTree``."""

    __slots__ = ("tree", "raw")

    def __init__(self, tree: SyntaxTree, raw):
        self.tree = tree
        self.raw = raw

    @property
    def type(self) -> str:
        return self.raw.rule_name

    @property
    def is_named(self) -> bool:
        return is_named_raw(self.raw)

    @property
    def is_terminal(self) -> bool:
        return not isinstance(self.raw, NonTerminal)

    @property
    def child_count(self) -> int:
        return len(self.raw) if isinstance(self.raw, NonTerminal) else 0

    def iter_children(self) -> Iterator[SyntaxNode]:
        if isinstance(self.raw, NonTerminal):
            for child in self.raw:
                yield SyntaxNode(self.tree, child)

    @property
    def children(self) -> list[SyntaxNode]:
        return list(self.iter_children())

    @property
    def named_children(self) -> list[SyntaxNode]:
        return [child for child in self.iter_children() if child.is_named]

    @property
    def named_child_count(self) -> int:
        return len(self.named_children)

    def child(self, index: int) -> Optional[SyntaxNode]:
        if 0 <= index < self.child_count:
            return SyntaxNode(self.tree, self.raw[index])
        return None

    def named_child(self, index: int) -> Optional[SyntaxNode]:
        named = self.named_children
        if 0 <= index < len(named):
            return named[index]
        return None

    def child_by_type(self, *types: str) -> Optional[SyntaxNode]:
        for child in self.iter_children():
            if child.type in types:
                return child
        return None

    def children_by_type(self, *types: str) -> list[SyntaxNode]:
        return [child for child in self.iter_children() if child.type in types]

    @property
    def start_byte(self) -> int:
        return self.raw.position

    @property
    def end_byte(self) -> int:
        return _end_offset(self.raw)

    @property
    def start_point(self) -> tuple[int, int]:
        return self.tree.point_at(self.start_byte)

    @property
    def end_point(self) -> tuple[int, int]:
        return self.tree.point_at(self.end_byte)

    @property
    def text(self) -> str:
        return self.tree.text[self.start_byte:self.end_byte]

    def walk(self) -> TreeCursor:
        """Create a cursor rooted at this node."""
        from .cursor import TreeCursor
        return TreeCursor(self)

    def __eq__(self, other):
        if not isinstance(other, SyntaxNode):
            return NotImplemented
        return self.tree is other.tree and self.raw is other.raw

    def __hash__(self):
        return hash((id(self.tree), id(self.raw)))

    def __repr__(self):
        return f"<SyntaxNode {self.type or '<anonymous>'} {self.start_point}-{self.end_point}>"
