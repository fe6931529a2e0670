# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Collection tree exceptions."""

from __future__ import annotations


class CollectionTreeError(Exception):
    """Base exception for collection tree errors."""

    pass


class InvalidItemsError(CollectionTreeError, TypeError):
    """Raised when the items passed to the builder are not a sequence."""

    pass


class InvalidDelimiterError(CollectionTreeError, ValueError):
    """Raised when a nesting delimiter is empty or not a string."""

    pass
