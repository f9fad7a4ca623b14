# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reducers folding update events into owner snapshots.

Every reducer is a pure function ``(state, event) -> new_state``: the
previous state and the event are never modified, and a real transition
always returns a new object. Consumers can therefore detect changes by
comparing identities.

Transitions:
    - START_LISTENING: listeners + 1
    - STOP_LISTENING: listeners - 1 (clamped at 0 unless disabled)
    - UPDATE_PROPERTY: the owner is rebuilt from the payload node,
      subowners recursively, and its listener count restarts from 0
    - anything else: state returned unchanged

Example:
    >>> event = Event.update({'name': 'Scene', 'properties': [], 'subowners': []})
    >>> owner = reduce_owner(None, event)
    >>> reduce_owner(owner, Event(EventType.START_LISTENING)).listeners
    1
"""

from __future__ import annotations

import logging
from typing import Callable

from .config import TreeSettings, get_settings
from .events import Event, EventType
from .node import Forest, Owner, Property
from .uri import decompose

logger = logging.getLogger(__name__)


def reduce_properties(
    state: tuple[Property, ...] | None, event: Event
) -> tuple[Property, ...]:
    """Reduce the property list of a single owner.

    On UPDATE_PROPERTY the properties are rebuilt from the payload node;
    other events leave ``state`` untouched.

    Raises:
        InvalidPayloadError: If an UPDATE_PROPERTY payload is malformed.
    """
    if event.type is EventType.UPDATE_PROPERTY:
        return tuple(Property(prop) for prop in event.node().properties)
    return state if state is not None else ()


def reduce_owner(
    state: Owner | None,
    event: Event,
    settings: TreeSettings | None = None,
) -> Owner | None:
    """Reduce a single owner.

    Args:
        state: Current owner snapshot, or None if not created yet.
        event: The event to apply.
        settings: Settings to use; defaults to ``get_settings()``.

    Returns:
        The new owner snapshot, or ``state`` itself when the event does
        not apply.

    Raises:
        InvalidPayloadError: If an UPDATE_PROPERTY payload is malformed.
    """
    if event.type is EventType.START_LISTENING:
        if state is None:
            return None
        return state.evolve(listeners=state.listeners + 1)

    if event.type is EventType.STOP_LISTENING:
        if state is None:
            return None
        settings = settings or get_settings()
        listeners = state.listeners - 1
        if listeners < 0 and settings.clamp_listeners:
            logger.warning("Listener count of %r would go negative, clamped", state.name)
            listeners = 0
        return state.evolve(listeners=listeners)

    if event.type is EventType.UPDATE_PROPERTY:
        node = event.node()
        event = event.with_node(node)
        return Owner(
            name=node.name,
            properties=reduce_properties(None, event),
            subowners=tuple(
                reduce_owner(None, event.with_node(sub), settings)
                for sub in node.subowners
            ),
            tag=tuple(node.tag) if node.tag is not None else (),
            listeners=0,
        )

    logger.debug("Ignoring event of type %r", event.type)
    return state


def reduce_forest(
    forest: Forest | None,
    event: Event,
    settings: TreeSettings | None = None,
) -> Forest:
    """Apply ``event`` to the owner it targets inside ``forest``.

    UPDATE_PROPERTY inserts or replaces the payload node among the
    children of the owner addressed by ``event.uri`` (among the root
    owners if ``uri`` is empty). Listening events reduce the owner
    addressed by ``event.uri``. Only the owners along the path are
    rebuilt; all others are kept as they are.

    Returns:
        The new forest, or ``forest`` itself if nothing changed (unknown
        event type or unmatched path).
    """
    forest = tuple(forest) if forest is not None else ()

    if event.type is EventType.UPDATE_PROPERTY:
        owner = reduce_owner(None, event, settings)
        if not event.uri:
            return _put_owner(forest, owner)
        return _apply_at(
            forest, event.uri,
            lambda parent: parent.evolve(subowners=_put_owner(parent.subowners, owner)),
        )

    if event.type in (EventType.START_LISTENING, EventType.STOP_LISTENING):
        return _apply_at(forest, event.uri, lambda target: reduce_owner(target, event, settings))

    logger.debug("Ignoring event of type %r", event.type)
    return forest


def _put_owner(owners: Forest, owner: Owner) -> Forest:
    """Replace the first owner named like ``owner``, or append it."""
    for index, current in enumerate(owners):
        if current.name == owner.name:
            return owners[:index] + (owner,) + owners[index + 1:]
    return owners + (owner,)


def _apply_at(
    owners: Forest, path: str, transform: Callable[[Owner], Owner]
) -> Forest:
    """Rebuild ``owners`` with ``transform`` applied to the owner at ``path``."""
    split = decompose(path)
    for index, current in enumerate(owners):
        if current.name != split.segment:
            continue
        if split.is_leaf:
            updated = transform(current)
        else:
            subowners = _apply_at(current.subowners, split.remainder, transform)
            if subowners is current.subowners:
                return owners
            updated = current.evolve(subowners=subowners)
        return owners[:index] + (updated,) + owners[index + 1:]
    logger.debug("No owner at %r, event dropped", path)
    return owners
