# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Library settings.

Defaults can be overridden through ``PROPERTYTREE_*`` environment
variables, e.g. ``PROPERTYTREE_CLAMP_LISTENERS=false``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class TreeSettings(BaseSettings):
    """Settings shared by the reducers and the conversion helpers."""

    # Target canvas of the transfer-function editor
    canvas_height: int = Field(default=600, gt=0)
    canvas_width: int = Field(default=800, gt=0)

    # Keep listener counts from going below zero
    clamp_listeners: bool = True

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    model_config = {"env_prefix": "PROPERTYTREE_"}


@lru_cache(maxsize=1)
def get_settings() -> TreeSettings:
    """Return the process-wide default settings."""
    return TreeSettings()


def load_settings(overrides: dict[str, Any] | None = None) -> TreeSettings:
    """Build fresh settings from env vars plus optional overrides.

    Args:
        overrides: Dict of values applied on top of the environment.
    """
    return TreeSettings(**(overrides or {}))
