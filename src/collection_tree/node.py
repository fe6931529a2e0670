# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node class."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from .paths import NESTING_DELIMITER

T = TypeVar('T')


class TreeNode(Generic[T]):
    """A node in a collection tree.

    Each node has:
    - name: One path segment (not the full path)
    - data: The originating item, or None for a synthetic node
    - parent: The owning TreeNode, or None for roots
    - children: Child nodes in first-seen order

    Children are held both in an ordered list and in a dict keyed by name,
    so lookups by segment are O(1) while iteration keeps insertion order.

    Example:
        >>> node = TreeNode('Backend', {'id': 1, 'name': 'Backend'})
        >>> node.name
        'Backend'
        >>> node.is_synthetic
        False
    """

    __slots__ = ('name', 'data', 'parent', 'delimiter', '_children', '_index')

    def __init__(
        self,
        name: str,
        data: T | None = None,
        parent: TreeNode[T] | None = None,
        delimiter: str = NESTING_DELIMITER,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The segment label for this node.
            data: The originating item, None if synthetic.
            parent: The owning node, None for roots. The node is not
                attached to the parent; use add_child() for that.
            delimiter: Delimiter used to render the node's path.
        """
        self.name = name
        self.data = data
        self.parent = parent
        self.delimiter = delimiter
        self._children: list[TreeNode[T]] = []
        self._index: dict[str, TreeNode[T]] = {}

    def __repr__(self) -> str:
        kind = 'synthetic' if self.data is None else repr(self.data)
        return f"TreeNode({self.name!r}, data={kind}, children={len(self._children)})"

    def __iter__(self) -> Iterator[TreeNode[T]]:
        """Iterate over direct children in insertion order."""
        return iter(self._children)

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    @property
    def children(self) -> list[TreeNode[T]]:
        """Direct children in first-seen order."""
        return self._children

    @property
    def is_synthetic(self) -> bool:
        """True if no item's path terminates at this node."""
        return self.data is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._children

    @property
    def is_branch(self) -> bool:
        """True if this node has children."""
        return bool(self._children)

    @property
    def root(self) -> TreeNode[T]:
        """The root node of this node's tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Number of hops from the root (root=0)."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    @property
    def path_parts(self) -> list[str]:
        """Segments from the root down to this node."""
        parts = []
        node: TreeNode[T] | None = self
        while node is not None:
            parts.append(node.name)
            node = node.parent
        parts.reverse()
        return parts

    @property
    def path(self) -> str:
        """Full delimiter-joined path of this node."""
        return self.delimiter.join(self.path_parts)

    def get_child(self, name: str, default: Any = None) -> TreeNode[T] | None:
        """Get a direct child by segment name, with default."""
        return self._index.get(name, default)

    def add_child(self, node: TreeNode[T]) -> TreeNode[T]:
        """Append node as the last child and set its parent.

        A node already attached elsewhere is removed from its old parent
        first, so it is never listed under two parents.

        Args:
            node: The node to attach.

        Returns:
            The attached node.

        Raises:
            KeyError: If a child with the same name already exists.
            ValueError: If node is this node or one of its ancestors.
        """
        if node.name in self._index:
            raise KeyError(f"Child '{node.name}' already exists under '{self.path}'")
        ancestor: TreeNode[T] | None = self
        while ancestor is not None:
            if ancestor is node:
                raise ValueError(f"Cannot attach '{node.path}' under its own subtree")
            ancestor = ancestor.parent
        old_parent = node.parent
        if old_parent is not None and old_parent.get_child(node.name) is node:
            old_parent.remove_child(node)
        node.parent = self
        self._index[node.name] = node
        self._children.append(node)
        return node

    def remove_child(self, node: TreeNode[T]) -> TreeNode[T]:
        """Detach node from this node's children and clear its parent.

        Raises:
            KeyError: If node is not a child of this node.
        """
        if self._index.get(node.name) is not node:
            raise KeyError(f"'{node.name}' is not a child of '{self.path}'")
        del self._index[node.name]
        self._children.remove(node)
        node.parent = None
        return node
