# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conversion of transfer-function envelopes for transport.

Envelopes are edited on a canvas whose y axis grows downwards; the
receiving side expects it to grow upwards, so every point is flipped
against the canvas height before encoding.

Example:
    >>> envelopes = [{'points': [{'color': 'red', 'position': {'x': 10, 'y': 50}}]}]
    >>> convert_envelopes(envelopes)
    '[{"points":[{"color":"red","position":{"x":10,"y":550}}],"height":600,"width":800}]'
    >>> json_to_lua(convert_envelopes(envelopes))
    '{"points":[{"color":"red","position":{"x":10,"y":550}},"height":600,"width":800}]'
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .clone import deep_clone
from .config import TreeSettings, get_settings


def flip_point(position: Mapping[str, Any], height: int = 600) -> dict[str, Any]:
    """Return ``position`` with its y coordinate flipped against ``height``."""
    return {'x': position['x'], 'y': height - position['y']}


def convert_envelopes(
    envelopes: Sequence[Mapping[str, Any]],
    settings: TreeSettings | None = None,
) -> str:
    """Encode envelopes as compact JSON with flipped points.

    Each envelope is reduced to its points (``color`` and flipped
    ``position`` only) plus the canvas ``height`` and ``width``.

    Args:
        envelopes: Sequence of ``{'points': [{'color', 'position'}]}``.
        settings: Settings providing the canvas size; defaults to
            ``get_settings()``.

    Returns:
        JSON text.
    """
    settings = settings or get_settings()
    converted = [
        {
            'points': [
                {
                    'color': point['color'],
                    'position': flip_point(point['position'], settings.canvas_height),
                }
                for point in envelope['points']
            ],
            'height': settings.canvas_height,
            'width': settings.canvas_width,
        }
        for envelope in deep_clone(list(envelopes))
    ]
    return json.dumps(converted, separators=(',', ':'))


def json_to_lua(text: str) -> str:
    """Drop the first ``[`` and the first ``]`` from ``text``.

    Turns a one-element JSON array into a bare table literal for the Lua
    scripting side. Only the first occurrence of each bracket is removed.
    """
    return text.replace('[', '', 1).replace(']', '', 1)
