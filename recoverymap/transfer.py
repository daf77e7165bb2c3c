# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Transfer functions (OETF / inverse OETF) for sRGB, HLG and PQ.

Scalar functions operate on one channel; the ``*_rgb`` variants apply the
scalar function to each channel of an ``Rgb`` with no cross-channel coupling.

Out-of-domain input never raises: numpy propagates it as NaN/inf and the
floating point warnings are silenced.
"""

from __future__ import annotations

from typing import Final

import numpy as np

from recoverymap.color import Rgb

__all__: Final[list[str]] = [
    "srgb_inv_oetf",
    "srgb_inv_oetf_rgb",
    "hlg_oetf",
    "hlg_oetf_rgb",
    "hlg_inv_oetf",
    "hlg_inv_oetf_rgb",
    "pq_oetf",
    "pq_oetf_rgb",
    "pq_inv_oetf",
    "pq_inv_oetf_rgb",
    "PQ_MAX_NITS",
]

# =============================================================================
# sRGB (IEC 61966-2-1)
# =============================================================================

SRGB_LINEAR_THRESHOLD: Final[float] = 0.04045


def srgb_inv_oetf(e_gamma: float) -> float:
    """Decode an sRGB gamma value to linear light."""
    if e_gamma <= SRGB_LINEAR_THRESHOLD:
        return e_gamma / 12.92
    return float(np.power((e_gamma + 0.055) / 1.055, 2.4))


def srgb_inv_oetf_rgb(e_gamma: Rgb) -> Rgb:
    return e_gamma.map(srgb_inv_oetf)


# =============================================================================
# HLG (ITU-R BT.2100)
# =============================================================================

HLG_A: Final[float] = 0.17883277
HLG_B: Final[float] = 0.28466892
HLG_C: Final[float] = 0.55991073


@np.errstate(invalid="ignore", divide="ignore")
def hlg_oetf(e: float) -> float:
    """Encode scene linear light in [0, 1] to an HLG signal."""
    if e <= 1.0 / 12.0:
        return float(np.sqrt(3.0 * e))
    return float(HLG_A * np.log(12.0 * e - HLG_B) + HLG_C)


def hlg_oetf_rgb(e: Rgb) -> Rgb:
    return e.map(hlg_oetf)


@np.errstate(over="ignore")
def hlg_inv_oetf(e_gamma: float) -> float:
    """Decode an HLG signal back to scene linear light."""
    if e_gamma <= 0.5:
        return e_gamma * e_gamma / 3.0
    return float((np.exp((e_gamma - HLG_C) / HLG_A) + HLG_B) / 12.0)


def hlg_inv_oetf_rgb(e_gamma: Rgb) -> Rgb:
    return e_gamma.map(hlg_inv_oetf)


# =============================================================================
# PQ (SMPTE ST 2084)
# =============================================================================

PQ_MAX_NITS: Final[float] = 10000.0

PQ_M1: Final[float] = 2610.0 / 16384.0
PQ_M2: Final[float] = 2523.0 / 4096.0 * 128.0
PQ_C1: Final[float] = 3424.0 / 4096.0
PQ_C2: Final[float] = 2413.0 / 4096.0 * 32.0
PQ_C3: Final[float] = 2392.0 / 4096.0 * 32.0

# Exponents of the inverse curve, derived once from the forward constants
_PQ_INV_M1: Final[float] = 1.0 / PQ_M1
_PQ_INV_M2: Final[float] = 1.0 / PQ_M2


def pq_oetf(e: float) -> float:
    """Encode absolute luminance in nits to a PQ signal in [0, 1].

    Negative input is clamped to 0 before encoding.
    """
    if e < 0.0:
        e = 0.0
    y_m1 = np.power(e / PQ_MAX_NITS, PQ_M1)
    return float(np.power((PQ_C1 + PQ_C2 * y_m1) / (1.0 + PQ_C3 * y_m1), PQ_M2))


def pq_oetf_rgb(e: Rgb) -> Rgb:
    return e.map(pq_oetf)


@np.errstate(invalid="ignore", divide="ignore")
def pq_inv_oetf(e_gamma: float) -> float:
    """Decode a PQ signal to absolute luminance in nits.

    The caller must supply ``e_gamma > 0``; other values are not rejected here.
    """
    e_m2 = np.power(e_gamma, _PQ_INV_M2)
    numerator = np.maximum(e_m2 - PQ_C1, 0.0)
    denominator = PQ_C2 - PQ_C3 * e_m2
    return float(np.power(numerator / denominator, _PQ_INV_M1) * PQ_MAX_NITS)


def pq_inv_oetf_rgb(e_gamma: Rgb) -> Rgb:
    return e_gamma.map(pq_inv_oetf)
