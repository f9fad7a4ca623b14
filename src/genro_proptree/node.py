# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Property tree node classes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Iterator

from .clone import deep_clone


class Property(Mapping):
    """A leaf of the property tree.

    A read-only mapping that always holds a string ``id`` next to any
    number of value fields. Contents are deep-copied on construction, so
    a Property never shares containers with the data it was built from.

    Example:
        >>> prop = Property({'id': 'Opacity', 'value': 1.0})
        >>> prop.id
        'Opacity'
        >>> prop == {'id': 'Opacity', 'value': 1.0}
        True
    """

    __slots__ = ('_data',)

    def __init__(self, data: Mapping[str, Any] | None = None, **fields: Any) -> None:
        """Initialize a Property.

        Args:
            data: Mapping of fields, must include a string ``id``.
            **fields: Additional fields as keyword arguments.

        Raises:
            ValueError: If no string ``id`` is given.
        """
        merged: dict[str, Any] = dict(data or {})
        merged.update(fields)
        if not isinstance(merged.get('id'), str):
            raise ValueError("Property requires a string 'id'")
        self._data = deep_clone(merged)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Property({self._data!r})"

    @property
    def id(self) -> str:
        """The property id, last segment of its URI."""
        return self._data['id']


@dataclass(frozen=True)
class Owner:
    """A named node owning properties and nested owners.

    Owners are immutable snapshots: reducers build new instances rather
    than changing existing ones, so consumers can detect changes by
    identity.

    Attributes:
        name: The owner's name, unique among its siblings.
        properties: Leaf properties, in payload order.
        subowners: Nested owners, in payload order.
        tag: Free-form tags attached to the owner.
        listeners: Number of active listeners.
    """

    name: str
    properties: tuple[Property, ...] = ()
    subowners: tuple[Owner, ...] = ()
    tag: tuple[str, ...] = ()
    listeners: int = 0

    # Properties are mappings, so owners compare by value but cannot be hashed
    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Owner({self.name!r}, properties={len(self.properties)}, "
            f"subowners={len(self.subowners)}, listeners={self.listeners})"
        )

    @property
    def is_listened(self) -> bool:
        """True if at least one listener is registered."""
        return self.listeners > 0

    def get_property(self, property_id: str) -> Property | None:
        """Return the first property with the given id, or None."""
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        return None

    def get_subowner(self, name: str) -> Owner | None:
        """Return the first subowner with the given name, or None."""
        return find_owner(self.subowners, name)

    def evolve(self, **changes: Any) -> Owner:
        """Return a copy of this owner with ``changes`` applied."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Convert to plain nested dicts and lists (recursive)."""
        return {
            'name': self.name,
            'properties': [deep_clone(prop) for prop in self.properties],
            'subowners': [sub.as_dict() for sub in self.subowners],
            'tag': list(self.tag),
            'listeners': self.listeners,
        }


# Top-level collection of root owners.
Forest = tuple[Owner, ...]


def find_owner(owners: tuple[Owner, ...], name: str) -> Owner | None:
    """Return the first owner named ``name`` in ``owners``, or None."""
    for owner in owners:
        if owner.name == name:
            return owner
    return None
