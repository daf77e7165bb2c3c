# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Exceptions raised by the recovery map core."""

from __future__ import annotations

from typing import Final

__all__: Final[list[str]] = [
    "RecoveryMapError",
    "ConfigError",
    "UnsupportedGamutError",
    "UnsupportedPixelFormatError",
]


class RecoveryMapError(Exception):
    """Base exception for recovery map errors."""

    pass


class ConfigError(RecoveryMapError):
    """Recovery map configuration is invalid (HDR ratio or scale factor)."""

    pass


class UnsupportedGamutError(RecoveryMapError):
    """No conversion exists between the requested colour gamuts."""

    pass


class UnsupportedPixelFormatError(RecoveryMapError):
    """No pixel reader exists for the buffer's pixel format."""

    pass
