# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Item access and collection item models.

The builder only needs an item's name. Items may be plain mappings
(``{'id': 1, 'name': 'A/B'}``) or objects exposing a ``name`` attribute,
such as the Collection and CollectionAdmin views defined here. Any other
fields travel untouched on the ``data`` of the produced nodes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _get_field(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def item_name(item: Any) -> str | None:
    """Return the nested name of item, or None if it has none.

    Example:
        >>> item_name({'name': 'A/B'})
        'A/B'
        >>> item_name(Collection(id='c1'))
    """
    name = _get_field(item, 'name')
    if name is None or isinstance(name, str):
        return name
    return str(name)


def item_id(item: Any) -> Any:
    """Return the id of item, or None if it has none."""
    return _get_field(item, 'id')


class Collection:
    """A collection as seen by an organization member.

    Attributes:
        id: Collection identifier.
        name: Nested display name, e.g. 'Engineering/Backend'.
        organization_id: Owning organization.
        external_id: Identifier in an external directory, if any.
        read_only: True if the member cannot edit the collection.
        hide_passwords: True if passwords are hidden from the member.
    """

    __slots__ = (
        'id', 'name', 'organization_id', 'external_id',
        'read_only', 'hide_passwords',
    )

    def __init__(
        self,
        id: Any = None,
        name: str | None = None,
        organization_id: Any = None,
        external_id: str | None = None,
        read_only: bool = False,
        hide_passwords: bool = False,
    ) -> None:
        self.id = id
        self.name = name
        self.organization_id = organization_id
        self.external_id = external_id
        self.read_only = read_only
        self.hide_passwords = hide_passwords

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            getattr(self, slot) == getattr(other, slot)
            for slot in self._all_slots()
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def _all_slots(cls) -> list[str]:
        slots: list[str] = []
        for klass in reversed(cls.__mro__):
            slots.extend(getattr(klass, '__slots__', ()))
        return slots

    def clone(self) -> Collection:
        """Return a shallow copy, with list fields copied."""
        cloned = type(self).__new__(type(self))
        for slot in self._all_slots():
            value = getattr(self, slot)
            setattr(cloned, slot, list(value) if isinstance(value, list) else value)
        return cloned


class CollectionAdmin(Collection):
    """A collection as seen by an organization administrator.

    Adds the group and user access lists. The builder treats these as
    opaque payload.

    Attributes:
        groups: Group access entries.
        users: User access entries.
        assigned: True if the administrator is assigned to the collection.
    """

    __slots__ = ('groups', 'users', 'assigned')

    def __init__(
        self,
        id: Any = None,
        name: str | None = None,
        organization_id: Any = None,
        external_id: str | None = None,
        read_only: bool = False,
        hide_passwords: bool = False,
        groups: list[Any] | None = None,
        users: list[Any] | None = None,
        assigned: bool = False,
    ) -> None:
        super().__init__(
            id, name, organization_id, external_id, read_only, hide_passwords
        )
        self.groups = groups or []
        self.users = users or []
        self.assigned = assigned
