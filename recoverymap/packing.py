# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""RGBA 10:10:10:2 output packing."""

from __future__ import annotations

from typing import Final

import numpy as np

from recoverymap.color import Rgb

__all__: Final[list[str]] = [
    "color_to_rgba1010102",
]

_CHANNEL_MAX: Final[float] = 1023.0
_CHANNEL_MASK: Final[int] = 0x3FF
_OPAQUE_ALPHA: Final[int] = 0x3 << 30


def _pack_channel(c: float) -> int:
    # NaN -> 0, +inf -> full scale, -inf -> 0
    scaled = np.nan_to_num(c * _CHANNEL_MAX, nan=0.0, posinf=_CHANNEL_MAX, neginf=0.0)
    return _CHANNEL_MASK & int(scaled)


def color_to_rgba1010102(e_gamma: Rgb) -> int:
    """Pack a [0, 1] RGB triple into a 32-bit RGBA1010102 word.

    Layout from the LSB: R (10 bits), G (10), B (10), A (2, always opaque).
    Values are truncated, not rounded; finite out-of-range input wraps through
    the 10-bit mask instead of saturating. Non-finite channels never raise.
    """
    return (
        _pack_channel(e_gamma.r)
        | (_pack_channel(e_gamma.g) << 10)
        | (_pack_channel(e_gamma.b) << 20)
        | _OPAQUE_ALPHA
    )
