# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Collection-Tree - Nested trees from flat, delimiter-named collections.

A lightweight, zero-dependency library that turns a flat list of items
named like 'Engineering/Backend/Infra' into a forest of TreeNode, ready
for folder-style browsing.
"""

__version__ = "0.1.0"

from .builder import TreeBuilder, build_tree
from .exceptions import (
    CollectionTreeError,
    InvalidDelimiterError,
    InvalidItemsError,
)
from .forest import (
    as_dict,
    count_items,
    count_nodes,
    find_node,
    find_nodes,
    get_node,
    render_text,
    walk,
)
from .items import Collection, CollectionAdmin, item_id, item_name
from .node import TreeNode
from .paths import NESTING_DELIMITER, join_parts, split_name

__all__ = [
    # Core classes
    "TreeBuilder",
    "TreeNode",
    "build_tree",
    # Items
    "Collection",
    "CollectionAdmin",
    "item_id",
    "item_name",
    # Paths
    "NESTING_DELIMITER",
    "join_parts",
    "split_name",
    # Forest queries
    "as_dict",
    "count_items",
    "count_nodes",
    "find_node",
    "find_nodes",
    "get_node",
    "render_text",
    "walk",
    # Exceptions
    "CollectionTreeError",
    "InvalidItemsError",
    "InvalidDelimiterError",
]
