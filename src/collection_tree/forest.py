# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read-only queries over a built forest.

A forest is the ordered list of root nodes returned by TreeBuilder.build().
None of these functions modify the nodes they visit.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence

from .items import item_id
from .node import TreeNode
from .paths import NESTING_DELIMITER, split_name


def walk(forest: Sequence[TreeNode[Any]]) -> Iterator[tuple[str, TreeNode[Any]]]:
    """Yield (path, node) pairs depth-first, parents before children.

    Example:
        >>> for path, node in walk(roots):
        ...     print(path, node.data)
    """
    def _walk_gen() -> Iterator[tuple[str, TreeNode[Any]]]:
        # Explicit stack, children pushed reversed to keep pre-order.
        stack: list[tuple[str, TreeNode[Any]]] = [
            (node.name, node) for node in reversed(forest)
        ]
        while stack:
            path, node = stack.pop()
            yield path, node
            stack.extend(
                (f"{path}{node.delimiter}{child.name}", child)
                for child in reversed(node.children)
            )

    return _walk_gen()


def get_node(
    forest: Sequence[TreeNode[Any]],
    path: str | None,
    delimiter: str = NESTING_DELIMITER,
) -> TreeNode[Any]:
    """Get the node at path.

    The path is normalized like an item name, so '/A/B/' finds 'A/B'.

    Raises:
        KeyError: If path not found.
    """
    first, *rest = split_name(path, delimiter)
    node = next((root for root in forest if root.name == first), None)
    if node is None:
        raise KeyError(f"Path segment '{first}' not found")
    for part in rest:
        child = node.get_child(part)
        if child is None:
            raise KeyError(f"Path segment '{part}' not found under '{node.path}'")
        node = child
    return node


def find_node(forest: Sequence[TreeNode[Any]], id: Any) -> TreeNode[Any] | None:
    """Return the first node whose item has the given id, or None.

    Synthetic nodes are skipped.
    """
    if id is None:
        return None
    for _, node in walk(forest):
        if node.data is not None and item_id(node.data) == id:
            return node
    return None


def find_nodes(
    forest: Sequence[TreeNode[Any]],
    predicate: Callable[[TreeNode[Any]], bool],
) -> list[TreeNode[Any]]:
    """Return all nodes matching predicate, in walk order."""
    return [node for _, node in walk(forest) if predicate(node)]


def count_nodes(forest: Sequence[TreeNode[Any]]) -> int:
    """Return the total number of nodes, synthetic ones included."""
    return sum(1 for _ in walk(forest))


def count_items(forest: Sequence[TreeNode[Any]]) -> int:
    """Return the number of nodes carrying an item."""
    return sum(1 for _, node in walk(forest) if node.data is not None)


def as_dict(forest: Sequence[TreeNode[Any]]) -> dict[str, Any]:
    """Convert to nested plain dicts keyed by segment name."""
    result: dict[str, Any] = {}
    stack: list[tuple[Sequence[TreeNode[Any]], dict[str, Any]]] = [(forest, result)]
    while stack:
        nodes, target = stack.pop()
        for node in nodes:
            child_dict: dict[str, Any] = {}
            target[node.name] = child_dict
            stack.append((node.children, child_dict))
    return result


def render_text(forest: Sequence[TreeNode[Any]]) -> str:
    """Render the forest as an ASCII tree, for logs and debugging.

    Synthetic nodes are marked with a trailing delimiter.

    Example:
        >>> print(render_text(build_tree([{'name': 'A/B'}, {'name': 'A/C'}])))
        .
        `-- A/
            |-- B
            `-- C
    """
    lines = ["."]

    def _push(stack: list, nodes: Sequence[TreeNode[Any]], prefix: str) -> None:
        last = len(nodes) - 1
        stack.extend(
            (node, prefix, idx == last)
            for idx, node in reversed(list(enumerate(nodes)))
        )

    stack: list[tuple[TreeNode[Any], str, bool]] = []
    _push(stack, forest, "")
    while stack:
        node, prefix, is_last = stack.pop()
        branch = "`-- " if is_last else "|-- "
        label = f"{node.name}{node.delimiter}" if node.is_synthetic else node.name
        lines.append(f"{prefix}{branch}{label}")
        _push(stack, node.children, f"{prefix}{'    ' if is_last else '|   '}")
    return "\n".join(lines)
