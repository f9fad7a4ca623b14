# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the genro-proptree test suite."""

from __future__ import annotations

import logging

import pytest
import structlog

from genro_proptree import Event, TreeSettings, reduce_forest


@pytest.fixture
def scene_node() -> dict:
    """Node description of a small scene graph."""
    return {
        'name': 'Scene',
        'properties': [{'id': 'Opacity', 'value': 1}],
        'subowners': [
            {
                'name': 'Earth',
                'properties': [
                    {'id': 'Opacity', 'value': 0.5},
                    {'id': 'Enabled', 'value': True},
                ],
                'subowners': [
                    {
                        'name': 'Renderable',
                        'properties': [{'id': 'Color', 'value': [1, 0, 0]}],
                        'subowners': [],
                    },
                ],
                'tag': ['planet'],
            },
            {
                'name': 'Moon',
                'properties': [{'id': 'Enabled', 'value': False}],
                'subowners': [],
            },
        ],
        'tag': [],
    }


@pytest.fixture
def camera_node() -> dict:
    """Node description of a second root owner."""
    return {
        'name': 'NavigationHandler',
        'properties': [{'id': 'Speed', 'value': 2.0}],
        'subowners': [],
    }


@pytest.fixture
def forest(scene_node, camera_node):
    """Forest built from two root UPDATE_PROPERTY events."""
    forest = reduce_forest((), Event.update(scene_node))
    return reduce_forest(forest, Event.update(camera_node))


@pytest.fixture
def settings() -> TreeSettings:
    """Settings with the documented defaults, independent from env vars."""
    return TreeSettings(
        canvas_height=600, canvas_width=800, clamp_listeners=True,
    )


@pytest.fixture
def restore_logging():
    """Drop handlers installed by setup_logging and reset structlog."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
