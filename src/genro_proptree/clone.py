# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural deep copy of plain data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_clone(value: Any) -> Any:
    """Recursively copy mappings, lists and tuples.

    Mappings become plain dicts, lists stay lists and tuples stay tuples.
    Any other value (numbers, strings, None, opaque objects) is returned
    as is.

    Example:
        >>> src = {'points': [{'x': 1}]}
        >>> copy = deep_clone(src)
        >>> copy == src, copy['points'] is src['points']
        (True, False)
    """
    if isinstance(value, Mapping):
        return {key: deep_clone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deep_clone(item) for item in value]
    if isinstance(value, tuple):
        return tuple(deep_clone(item) for item in value)
    return value
