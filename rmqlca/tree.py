"""
Rooted n-ary Tree Arena

Nodes live in one owning arena and are referred to by dense integer ids
(0, 1, 2, ... in insertion order). Each node has a value and an ordered
list of child ids. Ids never move, so ancestors can be held by index
while the tree grows.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional

logger = logging.getLogger(__name__)


class Tree:
    """
    Tree stored as parallel lists indexed by node id.

    The first node added without a parent is the root; there can be only
    one. Children are always new nodes, so sharing and cycles cannot occur.
    """

    def __init__(self):
        self.values: List[Any] = []
        self.children: List[List[int]] = []
        self.root: Optional[int] = None

    def __len__(self) -> int:
        return len(self.values)

    def add(self, value: Any, parent: Optional[int] = None) -> int:
        """
        Add a node.

        Args:
            value: Value stored at the node
            parent: Parent node id, or None for the root

        Returns:
            The new node's id
        """
        if parent is None:
            if self.root is not None:
                raise ValueError("Tree already has a root")
        elif not 0 <= parent < len(self.values):
            raise ValueError(f"Unknown parent node {parent}")

        node = len(self.values)
        self.values.append(value)
        self.children.append([])
        if parent is None:
            self.root = node
        else:
            self.children[parent].append(node)
        return node

    def value(self, node: int) -> Any:
        return self.values[node]

    def preorder(self) -> Iterator[int]:
        """Yield node ids in pre-order (children in order)."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children[node]))

    def find(self, value: Any) -> int:
        """First node in pre-order holding value."""
        for node in self.preorder():
            if self.values[node] == value:
                return node
        raise KeyError(value)

    @classmethod
    def from_nested(cls, data: Any) -> 'Tree':
        """
        Build a tree from nested value + children data.

        Accepted node forms:
        - {"value": v, "children": [...]}
        - (v, [...]) or [v, [...]]
        - a bare value, meaning a leaf

        Args:
            data: Root node in one of the forms above

        Returns:
            Tree with ids assigned in pre-order
        """
        tree = cls()
        # Pending (node data, parent id) pairs, kept in pre-order
        stack = [(data, None)]
        while stack:
            item, parent = stack.pop()
            value, children = _split_node(item)
            node = tree.add(value, parent)
            stack.extend((child, node) for child in reversed(children))

        logger.debug(f"Tree built from nested data: {len(tree)} nodes")
        return tree

    def print_tree(self, node: Optional[int] = None, indent: int = 0):
        """Print tree structure (for debugging)."""
        if node is None:
            node = self.root

        prefix = "  " * indent
        print(f"{prefix}├─ {self.values[node]} (id={node})")

        for child in self.children[node]:
            self.print_tree(child, indent + 1)


def _split_node(item: Any):
    if isinstance(item, Mapping):
        return item['value'], list(item.get('children') or [])
    if isinstance(item, (tuple, list)) and len(item) == 2 and isinstance(item[1], (tuple, list)):
        return item[0], list(item[1])
    return item, []
