# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Recovery map (HDR gain map) pixel math.

Per-pixel primitives for computing and applying an 8-bit recovery map that
reconstructs an HDR rendering from an SDR base image:
- Transfer functions (sRGB, HLG, PQ) and gamut conversions
- Gain encoding and application
- YUV 4:2:0 / P010 pixel readers and map samplers
- RGBA1010102 output packing
"""

from __future__ import annotations

from typing import Final

from recoverymap.color import Rgb, Yuv
from recoverymap.config import RecoveryMapConfig
from recoverymap.errors import ConfigError, RecoveryMapError, UnsupportedGamutError, UnsupportedPixelFormatError
from recoverymap.gain import apply_recovery, apply_recovery_rgb, encode_recovery, map_float_to_uint, map_uint_to_float
from recoverymap.gamut import (
    ColorGamut,
    bt2100_luminance,
    bt2100_rgb_to_yuv,
    bt2100_yuv_to_rgb,
    get_hdr_conversion_fn,
    get_luminance_fn,
    p3_luminance,
    require_hdr_conversion_fn,
    srgb_luminance,
    srgb_rgb_to_yuv,
    srgb_yuv_to_rgb,
)
from recoverymap.image import GainMap, ImageBuffer, PixelFormat, get_p010_pixel, get_pixel_fn, get_yuv420_pixel
from recoverymap.log import configure_logging
from recoverymap.packing import color_to_rgba1010102
from recoverymap.sampling import sample_image, sample_map, sample_p010, sample_pixels, sample_yuv420
from recoverymap.transfer import (
    hlg_inv_oetf,
    hlg_inv_oetf_rgb,
    hlg_oetf,
    hlg_oetf_rgb,
    pq_inv_oetf,
    pq_inv_oetf_rgb,
    pq_oetf,
    pq_oetf_rgb,
    srgb_inv_oetf,
    srgb_inv_oetf_rgb,
)

__all__: Final[list[str]] = [
    "Rgb",
    "Yuv",
    "RecoveryMapConfig",
    "RecoveryMapError",
    "ConfigError",
    "UnsupportedGamutError",
    "UnsupportedPixelFormatError",
    "ColorGamut",
    "PixelFormat",
    "ImageBuffer",
    "GainMap",
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
    "srgb_luminance",
    "p3_luminance",
    "bt2100_luminance",
    "srgb_rgb_to_yuv",
    "srgb_yuv_to_rgb",
    "bt2100_rgb_to_yuv",
    "bt2100_yuv_to_rgb",
    "get_hdr_conversion_fn",
    "require_hdr_conversion_fn",
    "get_luminance_fn",
    "encode_recovery",
    "apply_recovery",
    "apply_recovery_rgb",
    "map_uint_to_float",
    "map_float_to_uint",
    "get_yuv420_pixel",
    "get_p010_pixel",
    "get_pixel_fn",
    "sample_pixels",
    "sample_yuv420",
    "sample_p010",
    "sample_image",
    "sample_map",
    "color_to_rgba1010102",
    "configure_logging",
]

__version__: Final[str] = "1.0.0"
