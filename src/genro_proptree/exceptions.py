# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Property tree exceptions."""

from __future__ import annotations


class PropertyTreeError(Exception):
    """Base exception for property tree errors."""

    pass


class InvalidPayloadError(PropertyTreeError, ValueError):
    """Raised when an update event carries a malformed node description."""

    pass
