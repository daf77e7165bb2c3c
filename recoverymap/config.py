# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Recovery map parameters shared by the encode and decode paths.

Environment variables (used by RecoveryMapConfig.create()):
  RECOVERYMAP_HDR_RATIO          Maximum boost factor (default: 4.0)
  RECOVERYMAP_MAP_SCALE_FACTOR   Image pixels per map pixel (default: 4)
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Final, Self

from recoverymap.errors import ConfigError

__all__: Final[list[str]] = [
    "DEFAULT_HDR_RATIO",
    "DEFAULT_MAP_SCALE_FACTOR",
    "RecoveryMapConfig",
]

logger = logging.getLogger(__name__)

DEFAULT_HDR_RATIO: Final[float] = 4.0
DEFAULT_MAP_SCALE_FACTOR: Final[int] = 4


def _get_env_float(var_name: str, /) -> float | None:
    """Get a float from environment variable, or None if not set/invalid."""
    value = os.environ.get(var_name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", var_name, value)
        return None


def _get_env_int(var_name: str, /) -> int | None:
    """Get a positive int from environment variable, or None if invalid."""
    value = os.environ.get(var_name, "").strip()
    if not value:
        return None
    try:
        result = int(value)
        return result if result > 0 else None
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", var_name, value)
        return None


@dataclass(frozen=True, slots=True, kw_only=True)
class RecoveryMapConfig:
    """Parameters of one recovery map.

    Attributes:
        hdr_ratio: Maximum boost representable by the map; must be > 1
        map_scale_factor: Image pixels per map pixel along each axis
    """

    hdr_ratio: float = DEFAULT_HDR_RATIO
    map_scale_factor: int = DEFAULT_MAP_SCALE_FACTOR

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not math.isfinite(self.hdr_ratio) or self.hdr_ratio <= 1.0:
            msg = f"hdr_ratio must be a finite value > 1, got {self.hdr_ratio}"
            raise ConfigError(msg)
        if self.map_scale_factor < 1:
            msg = f"map_scale_factor must be >= 1, got {self.map_scale_factor}"
            raise ConfigError(msg)

    @classmethod
    def create(
        cls,
        *,
        hdr_ratio: float | None = None,
        map_scale_factor: int | None = None,
    ) -> Self:
        """Create config from arguments with environment variable fallbacks."""
        return cls(
            hdr_ratio=(
                hdr_ratio
                if hdr_ratio is not None
                else _get_env_float("RECOVERYMAP_HDR_RATIO") or DEFAULT_HDR_RATIO
            ),
            map_scale_factor=(
                map_scale_factor
                if map_scale_factor is not None
                else _get_env_int("RECOVERYMAP_MAP_SCALE_FACTOR") or DEFAULT_MAP_SCALE_FACTOR
            ),
        )

    def map_dimensions(self, width: int, height: int) -> tuple[int, int]:
        """Recovery map (width, height) for an image of the given size."""
        scale = self.map_scale_factor
        return -(-width // scale), -(-height // scale)
