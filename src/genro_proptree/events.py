# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Update events consumed by the reducers.

Wire shape::

    {'type': 'UPDATE_PROPERTY',
     'payload': {'node': {'name': ..., 'properties': [...],
                          'subowners': [...], 'tag': [...]}},
     'uri': 'Scene.Earth'}

Listening events need only ``type`` (and ``uri`` for forest routing).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import InvalidPayloadError

# Prefix carried by event types coming from the scene graph UI
_TYPE_PREFIX = 'SCENEGRAPH_'


class EventType(str, Enum):
    """Event types understood by the reducers."""

    START_LISTENING = 'START_LISTENING'
    STOP_LISTENING = 'STOP_LISTENING'
    UPDATE_PROPERTY = 'UPDATE_PROPERTY'

    @classmethod
    def parse(cls, value: Any) -> EventType | str:
        """Map ``value`` to an EventType, or return it unchanged if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value[len(_TYPE_PREFIX):] if value.startswith(_TYPE_PREFIX) else value
            try:
                return cls(name)
            except ValueError:
                pass
        return value


class NodeDescription(BaseModel):
    """Full description of an owner, as carried by UPDATE_PROPERTY."""

    model_config = ConfigDict(extra='ignore')

    name: str
    properties: list[dict[str, Any]]
    subowners: list[NodeDescription]
    tag: list[str] | None = None

    @field_validator('properties')
    @classmethod
    def _check_property_ids(cls, value: list[dict[str, Any]]) -> list[dict[str, Any]]:
        for index, prop in enumerate(value):
            if not isinstance(prop.get('id'), str):
                raise ValueError(f"property #{index} has no string 'id'")
        return value


@dataclass(frozen=True)
class Event:
    """A single update event.

    Attributes:
        type: An EventType, or the raw type of an event foreign to the
            reducers (those are identity transitions).
        payload: Event payload; UPDATE_PROPERTY expects ``{'node': {...}}``.
        uri: Dotted path of the target owner, used by ``reduce_forest``.
    """

    type: EventType | str
    payload: Mapping[str, Any] = field(default_factory=dict)
    uri: str = ''

    def __post_init__(self) -> None:
        object.__setattr__(self, 'type', EventType.parse(self.type))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Build an Event from its wire shape.

        Example:
            >>> Event.from_dict({'type': 'SCENEGRAPH_START_LISTENING'}).type
            <EventType.START_LISTENING: 'START_LISTENING'>
        """
        return cls(
            type=data.get('type'),
            payload=data.get('payload') or {},
            uri=data.get('uri') or '',
        )

    @classmethod
    def update(cls, node: Mapping[str, Any], uri: str = '') -> Event:
        """Shortcut for an UPDATE_PROPERTY event carrying ``node``."""
        return cls(EventType.UPDATE_PROPERTY, {'node': node}, uri)

    def node(self) -> NodeDescription:
        """Validate and return the node description of the payload.

        Raises:
            InvalidPayloadError: If the payload has no valid ``node``.
        """
        if not isinstance(self.payload, Mapping):
            raise InvalidPayloadError(
                f"{self.type} payload must be a mapping, not {type(self.payload).__name__}"
            )
        raw = self.payload.get('node')
        if isinstance(raw, NodeDescription):
            return raw
        if raw is None:
            raise InvalidPayloadError(f"{self.type} event has no 'node' in payload")
        try:
            return NodeDescription.model_validate(raw)
        except ValidationError as exc:
            raise InvalidPayloadError(f"Invalid node description: {exc}") from exc

    def with_node(self, node: NodeDescription) -> Event:
        """Return a copy of this event carrying ``node`` as payload."""
        return Event(self.type, {**self.payload, 'node': node}, self.uri)
