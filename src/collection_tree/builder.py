# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeBuilder - nested tree construction from flat collection lists.

Collections are stored flat; nesting is encoded in their names with a
delimiter ('Engineering/Backend/Infra'). TreeBuilder turns such a list into
a forest of TreeNode, one tree level per name segment.

Rules:
    - Items are processed in input order. Siblings keep first-seen order.
    - Missing intermediate segments get a synthetic node (data=None).
    - An item whose path ends on an existing node sets that node's data,
      replacing any previous item (last write wins). Children are kept.
    - Leading and trailing delimiters are ignored. A None or empty name
      yields a root node named ''.
    - Items are never modified.

Example:
    >>> roots = build_tree([{'id': 1, 'name': 'A/B'}, {'id': 2, 'name': 'A/C'}])
    >>> [root.name for root in roots]
    ['A']
    >>> [child.name for child in roots[0].children]
    ['B', 'C']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from .exceptions import InvalidItemsError
from .items import item_name
from .node import TreeNode
from .paths import NESTING_DELIMITER, check_delimiter, split_name

logger = logging.getLogger(__name__)

T = TypeVar('T')


class TreeBuilder(Generic[T]):
    """Stateless builder of collection forests.

    Attributes:
        delimiter: The nesting delimiter, '/' by default.
    """

    __slots__ = ('delimiter',)

    def __init__(self, delimiter: str = NESTING_DELIMITER) -> None:
        """Initialize a TreeBuilder.

        Args:
            delimiter: Non-empty string separating name segments.

        Raises:
            InvalidDelimiterError: If delimiter is empty or not a string.
        """
        self.delimiter = check_delimiter(delimiter)

    def __repr__(self) -> str:
        return f"TreeBuilder(delimiter={self.delimiter!r})"

    def build(self, items: Iterable[T]) -> list[TreeNode[T]]:
        """Build the forest for items.

        Args:
            items: Ordered items, each a mapping with a 'name' key or an
                object with a name attribute.

        Returns:
            Root nodes in first-seen order.

        Raises:
            InvalidItemsError: If items is None, a string, a mapping, or
                not iterable, or if any item is None.
        """
        if items is None or isinstance(items, (str, bytes, Mapping)):
            raise InvalidItemsError(
                f"items must be a sequence of items, not {type(items).__name__}"
            )
        try:
            iterator = iter(items)
        except TypeError:
            raise InvalidItemsError(
                f"items must be a sequence of items, not {type(items).__name__}"
            ) from None

        roots: list[TreeNode[T]] = []
        root_index: dict[str, TreeNode[T]] = {}
        item_count = node_count = 0

        for item in iterator:
            if item is None:
                raise InvalidItemsError(f"item at position {item_count} is None")
            item_count += 1
            parts = split_name(item_name(item), self.delimiter)
            node_count += self._insert(roots, root_index, parts, item)

        logger.debug(
            "Built tree: %d roots, %d nodes from %d items",
            len(roots), node_count, item_count,
        )
        return roots

    def _insert(
        self,
        roots: list[TreeNode[T]],
        root_index: dict[str, TreeNode[T]],
        parts: list[str],
        item: T,
    ) -> int:
        """Place item at the node addressed by parts.

        Returns:
            Number of nodes created.
        """
        created = 0
        last = len(parts) - 1
        parent: TreeNode[T] | None = None

        for depth, part in enumerate(parts):
            if parent is None:
                node = root_index.get(part)
            else:
                node = parent.get_child(part)

            if node is None:
                node = TreeNode(part, delimiter=self.delimiter)
                if parent is None:
                    root_index[part] = node
                    roots.append(node)
                else:
                    parent.add_child(node)
                created += 1
            elif depth == last and node.data is not None:
                logger.debug("Duplicate path %r, replacing previous item", node.path)

            if depth == last:
                node.data = item
            parent = node

        return created


def build_tree(
    items: Iterable[Any], delimiter: str = NESTING_DELIMITER
) -> list[TreeNode[Any]]:
    """Build a forest from items with a one-off TreeBuilder.

    Args:
        items: Ordered items with nested names.
        delimiter: Nesting delimiter.

    Returns:
        Root nodes in first-seen order.
    """
    return TreeBuilder(delimiter).build(items)
