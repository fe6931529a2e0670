# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Splitting of nested collection names into path segments.

A nested name such as ``'Engineering/Backend/Infra'`` is turned into the
segments ``['Engineering', 'Backend', 'Infra']``. Runs of the delimiter at
either end are ignored, so ``'/Engineering/'`` and ``'Engineering'`` address
the same node. Interior segments are kept verbatim: ``'A//B'`` has an empty
middle segment and ``' A'`` keeps its leading space.

Example:
    >>> split_name('/A/B/')
    ['A', 'B']
    >>> split_name(None)
    ['']
"""

from __future__ import annotations

from typing import Iterable

from .exceptions import InvalidDelimiterError

NESTING_DELIMITER = '/'


def check_delimiter(delimiter: str) -> str:
    """Return delimiter unchanged, or raise if it cannot split names."""
    if not isinstance(delimiter, str) or not delimiter:
        raise InvalidDelimiterError(
            f"delimiter must be a non-empty string, not {delimiter!r}"
        )
    return delimiter


def strip_delimiter(name: str | None, delimiter: str = NESTING_DELIMITER) -> str:
    """Remove leading and trailing runs of delimiter from name.

    None is treated as the empty string.
    """
    if not name:
        return ''
    while name.startswith(delimiter):
        name = name[len(delimiter):]
    while name.endswith(delimiter):
        name = name[:-len(delimiter)]
    return name


def split_name(name: str | None, delimiter: str = NESTING_DELIMITER) -> list[str]:
    """Split a nested name into its ordered path segments.

    Args:
        name: The item name. May be None or empty.
        delimiter: Nesting delimiter.

    Returns:
        Non-empty list of segments. A name that is empty after stripping
        yields ``['']`` so that every item maps to exactly one node.
    """
    check_delimiter(delimiter)
    return strip_delimiter(name, delimiter).split(delimiter)


def join_parts(parts: Iterable[str], delimiter: str = NESTING_DELIMITER) -> str:
    """Join path segments back into a nested name."""
    return delimiter.join(parts)
