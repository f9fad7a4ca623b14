# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PropTree - Dotted-path property trees with pure reducers.

An immutable mirror of a remote tree of property owners, addressed by
dotted URIs ('Scene.Earth.Renderable.Opacity') and kept up to date by
folding update events through pure reducers.
"""

__version__ = "0.1.0"

from .config import TreeSettings, get_settings, load_settings
from .conversion import convert_envelopes, flip_point, json_to_lua
from .events import Event, EventType, NodeDescription
from .exceptions import InvalidPayloadError, PropertyTreeError
from .node import Forest, Owner, Property
from .reducer import reduce_forest, reduce_owner, reduce_properties
from .traversal import resolve, resolve_in_owner, resolve_owner, walk
from .uri import SplitURI, decompose, extract_property_id

__all__ = [
    # Core classes
    "Owner",
    "Property",
    "Forest",
    # URI
    "SplitURI",
    "decompose",
    "extract_property_id",
    # Traversal
    "resolve",
    "resolve_in_owner",
    "resolve_owner",
    "walk",
    # Events and reducers
    "Event",
    "EventType",
    "NodeDescription",
    "reduce_owner",
    "reduce_properties",
    "reduce_forest",
    # Conversion
    "convert_envelopes",
    "flip_point",
    "json_to_lua",
    # Settings
    "TreeSettings",
    "get_settings",
    "load_settings",
    # Exceptions
    "PropertyTreeError",
    "InvalidPayloadError",
]
