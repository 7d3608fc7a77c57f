"""Cursor-driven dispatch from CST nodes to AST nodes.

Every dispatch acquires its own ``TreeCursor``, steps through transparent
wrappers, detects the node kind and hands the cursor to the registered
adapter. The cursor is closed on every exit path, including adapter
failures, which propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .cst import SyntaxNode, SyntaxTree
from .cursor import TreeCursor
from .detector import descend_transparent, detect_node_type
from .nodes import ASTNode, NodeKind, Program
from .registry import AdapterRegistry, default_registry

logger = logging.getLogger(__name__)


class CursorTraversal:
    """Adapts CST nodes using one adapter registry.

    Args:
        registry: Adapters to dispatch to.
        cursor_class: Factory called with a ``SyntaxNode`` to obtain a cursor.
    """

    def __init__(self, registry: AdapterRegistry, cursor_class=TreeCursor):
        self.registry = registry
        self.cursor_class = cursor_class

    def adapt(self, node: SyntaxNode) -> ASTNode:
        cursor = self.cursor_class(node)
        try:
            descend_transparent(cursor)
            kind = detect_node_type(cursor.node)
            if kind is NodeKind.UNKNOWN or kind not in self.registry:
                logger.debug("no adapter for %r (kind %s), using Unknown", cursor.node, kind.value)
            adapter = self.registry.lookup(kind)
            result = adapter(cursor, self.adapt)
            if isinstance(result, Program):
                result.children = self._adapt_top_level(cursor)
            return result
        finally:
            cursor.close()

    __call__ = adapt

    def _adapt_top_level(self, cursor: TreeCursor) -> list[ASTNode]:
        children = []
        depth = cursor.depth
        if cursor.goto_first_named_child():
            children.append(self.adapt(cursor.node))
            while cursor.goto_next_named_sibling():
                children.append(self.adapt(cursor.node))
        while cursor.depth > depth:
            cursor.goto_parent()
        return children


def adapt(tree_or_node: Union[SyntaxTree, SyntaxNode], registry: Optional[AdapterRegistry] = None) -> ASTNode:
    """Adapt a parse tree, or any node of one, to an AST node.

    Args:
        tree_or_node: A ``SyntaxTree`` (its root is adapted) or a ``SyntaxNode``.
        registry: Adapters to use; the default registry when omitted.

    Returns:
        The adapted node. A whole tree yields a ``Program``.
    """
    if isinstance(tree_or_node, SyntaxTree):
        tree_or_node = tree_or_node.root_node
    return CursorTraversal(registry if registry is not None else default_registry()).adapt(tree_or_node)
