# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted URI helpers.

A URI is a chain of owner names terminated by a property id, joined by
dots: ``'Scene.Earth.Renderable.Opacity'``. These helpers only split and
join strings; they know nothing about the tree itself.

Example:
    >>> decompose('Scene.Earth.Opacity')
    SplitURI(segment='Scene', remainder='Earth.Opacity', is_last_owner_segment=False, is_leaf=False)
    >>> extract_property_id('Scene.Earth.Opacity')
    'Opacity'
"""

from __future__ import annotations

from typing import NamedTuple


class SplitURI(NamedTuple):
    """Result of :func:`decompose`.

    Attributes:
        segment: Text before the first dot (whole path if there is none).
        remainder: Text after the first dot, or ``''``.
        is_last_owner_segment: True if ``remainder`` holds no further dot.
        is_leaf: True if ``remainder`` is empty, i.e. the path was a
            single segment naming a property of the current owner.
    """

    segment: str
    remainder: str
    is_last_owner_segment: bool
    is_leaf: bool


def decompose(path: str) -> SplitURI:
    """Split ``path`` at its first dot.

    Empty segments produced by leading or trailing dots are passed
    through as they are.

    Args:
        path: Dotted path.

    Returns:
        SplitURI for the path.
    """
    segment, sep, remainder = path.partition('.')
    if not sep:
        remainder = ''
    return SplitURI(
        segment=segment,
        remainder=remainder,
        is_last_owner_segment='.' not in remainder,
        is_leaf=remainder == '',
    )


def extract_property_id(path: str) -> str:
    """Return the last segment of ``path`` (the whole path if undotted)."""
    return path.rpartition('.')[2]

