# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Recovery (gain) value encoding and application.

A gain byte stores log2(y_hdr / y_sdr) relative to log2(hdr_ratio), mapped
from [-1, 1] onto [0, 255] with 127.5 meaning "no boost". The same
hdr_ratio must be used to encode and to apply a map.
"""

from __future__ import annotations

from typing import Final

import numpy as np

from recoverymap.color import Rgb

__all__: Final[list[str]] = [
    "MAP_BIAS",
    "encode_recovery",
    "apply_recovery",
    "apply_recovery_rgb",
    "map_uint_to_float",
    "map_float_to_uint",
]

MAP_BIAS: Final[float] = 127.5


@np.errstate(invalid="ignore", divide="ignore")
def encode_recovery(y_sdr: float, y_hdr: float, hdr_ratio: float) -> int:
    """Encode the SDR -> HDR luminance gain as a recovery map byte.

    A zero SDR luminance is treated as "no boost" (gain 1.0). The gain is
    clamped to [-hdr_ratio, hdr_ratio] before the log encoding; a gain that
    ends up non-positive encodes to 0.
    """
    gain = 1.0
    if y_sdr > 0.0:
        gain = y_hdr / y_sdr

    if gain < -hdr_ratio:
        gain = -hdr_ratio
    if gain > hdr_ratio:
        gain = hdr_ratio

    encoded = np.log2(gain) / np.log2(hdr_ratio) * MAP_BIAS + MAP_BIAS
    encoded = np.nan_to_num(encoded, nan=0.0)
    return int(np.clip(np.round(encoded), 0, 255))


@np.errstate(invalid="ignore", divide="ignore", over="ignore")
def apply_recovery(e: float, recovery: float, hdr_ratio: float) -> float:
    """Boost one channel by a decoded recovery value in [-1, 1].

    ``e`` must be positive; 0 yields 0 and negative input yields NaN.
    """
    return float(np.exp2(np.log2(e) + recovery * np.log2(hdr_ratio)))


def apply_recovery_rgb(e: Rgb, recovery: float, hdr_ratio: float) -> Rgb:
    return e.map(lambda c: apply_recovery(c, recovery, hdr_ratio))


def map_uint_to_float(map_uint: int) -> float:
    """Decode a recovery map byte to a signed value in [-1, 1]."""
    return (float(map_uint) - MAP_BIAS) / MAP_BIAS


def map_float_to_uint(value: float) -> int:
    """Encode a signed value in [-1, 1] as a recovery map byte."""
    return int(np.clip(np.round(value * MAP_BIAS + MAP_BIAS), 0, 255))
