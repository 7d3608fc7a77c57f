"""Explicit, disposable cursor over a ``SyntaxTree``.

The cursor keeps its traversal state in a stack of ``(node, index)`` frames
instead of in Python call frames, and is moved with ``goto_first_child``,
``goto_next_sibling`` and ``goto_parent`` the way a tree-sitter cursor is.
It can never leave the subtree it was created for.

A cursor must be closed once the traversal that created it is done. Using a
closed cursor raises ``CursorClosedError``. Cursors are also context
managers::

    with tree.walk() as cursor:
        if cursor.goto_first_named_child():
            print(cursor.node_type)
"""

from __future__ import annotations

from typing import Optional

from arpeggio import NonTerminal

from .cst import SyntaxNode, is_named_raw
from .errors import CursorClosedError


class TreeCursor:
    """Stateful handle walking the subtree rooted at one ``SyntaxNode``."""

    def __init__(self, node: SyntaxNode):
        self._tree = node.tree
        self._frames: list[tuple[object, Optional[int]]] = [(node.raw, None)]
        self._closed = False

    # --- lifecycle ---

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the cursor. Closing twice is a no-op."""
        self._closed = True
        self._frames = []

    def __enter__(self) -> TreeCursor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise CursorClosedError("cursor used after close()")

    # --- current node ---

    @property
    def node(self) -> SyntaxNode:
        self._check_open()
        return SyntaxNode(self._tree, self._frames[-1][0])

    @property
    def node_type(self) -> str:
        return self.node.type

    @property
    def node_is_named(self) -> bool:
        self._check_open()
        return is_named_raw(self._frames[-1][0])

    @property
    def start_point(self) -> tuple[int, int]:
        return self.node.start_point

    @property
    def end_point(self) -> tuple[int, int]:
        return self.node.end_point

    @property
    def depth(self) -> int:
        self._check_open()
        return len(self._frames) - 1

    # --- movement ---

    def goto_first_child(self) -> bool:
        self._check_open()
        raw = self._frames[-1][0]
        if isinstance(raw, NonTerminal) and len(raw) > 0:
            self._frames.append((raw[0], 0))
            return True
        return False

    def goto_next_sibling(self) -> bool:
        self._check_open()
        if len(self._frames) < 2:
            return False
        parent = self._frames[-2][0]
        index = self._frames[-1][1] + 1
        if index < len(parent):
            self._frames[-1] = (parent[index], index)
            return True
        return False

    def goto_parent(self) -> bool:
        self._check_open()
        if len(self._frames) < 2:
            return False
        self._frames.pop()
        return True

    def goto_first_named_child(self) -> bool:
        """Move to the first named child, skipping punctuation."""
        if not self.goto_first_child():
            return False
        if self.node_is_named or self.goto_next_named_sibling():
            return True
        self.goto_parent()
        return False

    def goto_next_named_sibling(self) -> bool:
        """Move to the next named sibling; stay put if there is none."""
        self._check_open()
        saved = self._frames[-1]
        while self.goto_next_sibling():
            if self.node_is_named:
                return True
        self._frames[-1] = saved
        return False

    def __repr__(self):
        if self._closed:
            return "<TreeCursor closed>"
        return f"<TreeCursor at {self.node!r} depth={self.depth}>"
