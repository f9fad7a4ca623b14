# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path lookup over a forest of owners.

Lookups never raise: any segment that fails to match yields ``None``,
which callers treat as a normal outcome.

Path Syntax:
    - Owner chain then property id: 'Scene.Earth.Renderable.Opacity'
    - Owner chain only (``resolve_owner``): 'Scene.Earth.Renderable'

Example:
    >>> forest = (Owner('Scene', properties=(Property(id='Opacity', value=1),)),)
    >>> resolve(forest, 'Scene.Opacity')
    Property({'id': 'Opacity', 'value': 1})
    >>> resolve(forest, 'Scene.Missing') is None
    True
"""

from __future__ import annotations

import logging
from typing import Iterator

from .node import Forest, Owner, Property, find_owner
from .uri import decompose, extract_property_id

logger = logging.getLogger(__name__)


def resolve(forest: Forest, path: str) -> Property | None:
    """Find the property addressed by ``path``.

    The first segment selects a top-level owner by name; the rest of the
    path is resolved inside it by :func:`resolve_in_owner`.

    Args:
        forest: Root owners.
        path: Dotted path ending with a property id.

    Returns:
        The first matching property, or None.
    """
    split = decompose(path)
    owner = find_owner(forest, split.segment)
    if owner is None:
        logger.debug("No root owner %r for path %r", split.segment, path)
        return None
    return resolve_in_owner(owner, split.remainder)


def resolve_in_owner(owner: Owner, path: str) -> Property | None:
    """Find the property addressed by ``path`` relative to ``owner``."""
    split = decompose(path)
    if split.is_leaf:
        prop = owner.get_property(extract_property_id(path))
        if prop is None:
            logger.debug("No property %r in owner %r", path, owner.name)
        return prop

    subowner = owner.get_subowner(split.segment)
    if subowner is None:
        logger.debug("No subowner %r in owner %r", split.segment, owner.name)
        return None
    return resolve_in_owner(subowner, split.remainder)


def resolve_owner(forest: Forest, path: str) -> Owner | None:
    """Find the owner addressed by ``path``, where every segment is a name.

    Example:
        >>> resolve_owner(forest, 'Scene').name
        'Scene'
    """
    owners = forest
    remaining = path
    while True:
        split = decompose(remaining)
        owner = find_owner(owners, split.segment)
        if owner is None:
            logger.debug("No owner %r for path %r", split.segment, path)
            return None
        if split.is_leaf:
            return owner
        owners = owner.subowners
        remaining = split.remainder


def walk(forest: Forest, prefix: str = '') -> Iterator[tuple[str, Property]]:
    """Yield ``(uri, property)`` for every property, depth-first.

    Each owner's own properties come before its subowners'. Every yielded
    uri resolves back to its property through :func:`resolve` as long as
    sibling names and property ids are unique.

    Example:
        >>> for uri, prop in walk(forest):
        ...     print(uri, prop['value'])
        Scene.Opacity 1
    """
    for owner in forest:
        path = f"{prefix}.{owner.name}" if prefix else owner.name
        for prop in owner.properties:
            yield f"{path}.{prop.id}", prop
        yield from walk(owner.subowners, path)
