# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Colour gamut conversions.

Provides:
- Luminance for sRGB/BT.709, Display-P3 and BT.2100 primaries
- YUV <-> RGB transforms for sRGB (BT.601 coefficients) and BT.2100
- Fixed 3x3 matrices between BT.709, Display-P3 and BT.2100
- get_hdr_conversion_fn(): lookup of the HDR -> SDR gamut conversion

Every conversion is a literal matrix. Nothing is composed at runtime, so each
coefficient set can be audited on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum, auto
from typing import Final, TypeAlias

import numpy as np
from numpy.typing import NDArray

from recoverymap.color import Rgb, Yuv
from recoverymap.errors import UnsupportedGamutError

__all__: Final[list[str]] = [
    "ColorGamut",
    "ColorTransformFn",
    "LuminanceFn",
    "srgb_luminance",
    "p3_luminance",
    "bt2100_luminance",
    "srgb_rgb_to_yuv",
    "srgb_yuv_to_rgb",
    "bt2100_rgb_to_yuv",
    "bt2100_yuv_to_rgb",
    "identity_conversion",
    "bt709_to_p3",
    "bt709_to_bt2100",
    "p3_to_bt709",
    "p3_to_bt2100",
    "bt2100_to_bt709",
    "bt2100_to_p3",
    "get_hdr_conversion_fn",
    "require_hdr_conversion_fn",
    "get_luminance_fn",
]

logger = logging.getLogger(__name__)

ColorTransformFn: TypeAlias = Callable[[Rgb], Rgb]
LuminanceFn: TypeAlias = Callable[[Rgb], float]


class ColorGamut(StrEnum):
    """Colour primaries of an image."""

    BT709 = auto()
    P3 = auto()
    BT2100 = auto()
    UNSPECIFIED = auto()


def _apply_matrix(matrix: NDArray[np.float64], e: Rgb) -> Rgb:
    return Rgb.from_array(matrix @ e.as_array())


# =============================================================================
# sRGB / BT.709
# =============================================================================

SRGB_Y_COEFFS: Final[NDArray[np.float64]] = np.array([0.299, 0.587, 0.114])

SRGB_RGB_TO_YUV: Final[NDArray[np.float64]] = np.array([
    [0.299, 0.587, 0.114],
    [-0.1687, -0.3313, 0.5],
    [0.5, -0.4187, -0.0813],
])

SRGB_YUV_TO_RGB: Final[NDArray[np.float64]] = np.array([
    [1.0, 0.0, 1.402],
    [1.0, -0.34414, -0.71414],
    [1.0, 1.772, 0.0],
])


def srgb_luminance(e: Rgb) -> float:
    return float(np.dot(SRGB_Y_COEFFS, e.as_array()))


def srgb_rgb_to_yuv(e_gamma: Rgb) -> Yuv:
    y, u, v = SRGB_RGB_TO_YUV @ e_gamma.as_array()
    return Yuv(y, u, v)


def srgb_yuv_to_rgb(e_gamma: Yuv) -> Rgb:
    return Rgb.from_array(SRGB_YUV_TO_RGB @ e_gamma.as_array())


# =============================================================================
# Display-P3
# =============================================================================

P3_Y_COEFFS: Final[NDArray[np.float64]] = np.array([0.22897, 0.69174, 0.07929])


def p3_luminance(e: Rgb) -> float:
    return float(np.dot(P3_Y_COEFFS, e.as_array()))


# =============================================================================
# BT.2100 (ITU-R BT.2100-2)
# =============================================================================

BT2100_Y_COEFFS: Final[NDArray[np.float64]] = np.array([0.2627, 0.6780, 0.0593])

BT2100_CB: Final[float] = 1.8814
BT2100_CR: Final[float] = 1.4746

# G from YUV, by substituting R = Y + Cr*V and B = Y + Cb*U into the
# luminance equation and solving for G:
#   G = Y - U * (kB * Cb / kG) - V * (kR * Cr / kG)
# giving roughly 0.1645 for U and 0.5713 for V.
_KR, _KG, _KB = (float(c) for c in BT2100_Y_COEFFS)
BT2100_G_CB: Final[float] = _KB * BT2100_CB / _KG
BT2100_G_CR: Final[float] = _KR * BT2100_CR / _KG


def bt2100_luminance(e: Rgb) -> float:
    return float(np.dot(BT2100_Y_COEFFS, e.as_array()))


def bt2100_rgb_to_yuv(e_gamma: Rgb) -> Yuv:
    y_gamma = bt2100_luminance(e_gamma)
    return Yuv(
        y_gamma,
        (e_gamma.b - y_gamma) / BT2100_CB,
        (e_gamma.r - y_gamma) / BT2100_CR,
    )


def bt2100_yuv_to_rgb(e_gamma: Yuv) -> Rgb:
    return Rgb(
        e_gamma.y + BT2100_CR * e_gamma.v,
        e_gamma.y - BT2100_G_CB * e_gamma.u - BT2100_G_CR * e_gamma.v,
        e_gamma.y + BT2100_CB * e_gamma.u,
    )


# =============================================================================
# Gamut Matrices
# =============================================================================

BT709_TO_P3: Final[NDArray[np.float64]] = np.array([
    [0.82254, 0.17755, 0.00006],
    [0.03312, 0.96684, -0.00001],
    [0.01706, 0.07240, 0.91049],
])

BT709_TO_BT2100: Final[NDArray[np.float64]] = np.array([
    [0.62740, 0.32930, 0.04332],
    [0.06904, 0.91958, 0.01138],
    [0.01636, 0.08799, 0.89555],
])

P3_TO_BT709: Final[NDArray[np.float64]] = np.array([
    [1.22482, -0.22490, -0.00007],
    [-0.04196, 1.04199, 0.00001],
    [-0.01961, -0.07865, 1.09831],
])

P3_TO_BT2100: Final[NDArray[np.float64]] = np.array([
    [0.75378, 0.19862, 0.04754],
    [0.04576, 0.94177, 0.01250],
    [-0.00121, 0.01757, 0.98359],
])

BT2100_TO_BT709: Final[NDArray[np.float64]] = np.array([
    [1.66045, -0.58764, -0.07286],
    [-0.12445, 1.13282, -0.00837],
    [-0.01811, -0.10057, 1.11878],
])

BT2100_TO_P3: Final[NDArray[np.float64]] = np.array([
    [1.34369, -0.28223, -0.06135],
    [-0.06533, 1.07580, -0.01051],
    [0.00283, -0.01957, 1.01679],
])


def identity_conversion(e: Rgb) -> Rgb:
    return e


def bt709_to_p3(e: Rgb) -> Rgb:
    return _apply_matrix(BT709_TO_P3, e)


def bt709_to_bt2100(e: Rgb) -> Rgb:
    return _apply_matrix(BT709_TO_BT2100, e)


def p3_to_bt709(e: Rgb) -> Rgb:
    return _apply_matrix(P3_TO_BT709, e)


def p3_to_bt2100(e: Rgb) -> Rgb:
    return _apply_matrix(P3_TO_BT2100, e)


def bt2100_to_bt709(e: Rgb) -> Rgb:
    return _apply_matrix(BT2100_TO_BT709, e)


def bt2100_to_p3(e: Rgb) -> Rgb:
    return _apply_matrix(BT2100_TO_P3, e)


# =============================================================================
# Dispatch
# =============================================================================

# Keyed by (sdr_gamut, hdr_gamut); the function converts HDR into SDR primaries
_HDR_CONVERSIONS: Final[dict[tuple[ColorGamut, ColorGamut], ColorTransformFn]] = {
    (ColorGamut.BT709, ColorGamut.BT709): identity_conversion,
    (ColorGamut.BT709, ColorGamut.P3): p3_to_bt709,
    (ColorGamut.BT709, ColorGamut.BT2100): bt2100_to_bt709,
    (ColorGamut.P3, ColorGamut.BT709): bt709_to_p3,
    (ColorGamut.P3, ColorGamut.P3): identity_conversion,
    (ColorGamut.P3, ColorGamut.BT2100): bt2100_to_p3,
    (ColorGamut.BT2100, ColorGamut.BT709): bt709_to_bt2100,
    (ColorGamut.BT2100, ColorGamut.P3): p3_to_bt2100,
    (ColorGamut.BT2100, ColorGamut.BT2100): identity_conversion,
}

_LUMINANCE_FNS: Final[dict[ColorGamut, LuminanceFn]] = {
    ColorGamut.BT709: srgb_luminance,
    ColorGamut.P3: p3_luminance,
    ColorGamut.BT2100: bt2100_luminance,
}


def get_hdr_conversion_fn(
    sdr_gamut: ColorGamut,
    hdr_gamut: ColorGamut,
) -> ColorTransformFn | None:
    """Return the function converting HDR pixels into the SDR gamut.

    Returns None when either gamut is unspecified; the caller cannot build a
    recovery map for that image.
    """
    fn = _HDR_CONVERSIONS.get((sdr_gamut, hdr_gamut))
    if fn is None:
        logger.debug("No HDR conversion for sdr=%s hdr=%s", sdr_gamut, hdr_gamut)
    return fn


def require_hdr_conversion_fn(
    sdr_gamut: ColorGamut,
    hdr_gamut: ColorGamut,
) -> ColorTransformFn:
    """Like get_hdr_conversion_fn(), but raise when no conversion exists."""
    fn = get_hdr_conversion_fn(sdr_gamut, hdr_gamut)
    if fn is None:
        msg = f"Cannot convert HDR gamut {hdr_gamut} to SDR gamut {sdr_gamut}"
        raise UnsupportedGamutError(msg)
    return fn


def get_luminance_fn(gamut: ColorGamut) -> LuminanceFn | None:
    """Return the luminance function for a gamut, or None if unspecified."""
    return _LUMINANCE_FNS.get(gamut)
