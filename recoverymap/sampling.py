# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Sampling between image resolution and recovery map resolution.

- sample_pixels(): box filter, one map-resolution sample from a block of
  image pixels (used when computing the map)
- sample_map(): interpolated read of the map at an image coordinate (used
  when applying the map)
"""

from __future__ import annotations

import math
from typing import Final

from recoverymap.color import Yuv
from recoverymap.gain import map_uint_to_float
from recoverymap.image import GainMap, GetPixelFn, ImageBuffer, get_p010_pixel, get_pixel_fn, get_yuv420_pixel

__all__: Final[list[str]] = [
    "sample_pixels",
    "sample_yuv420",
    "sample_p010",
    "sample_image",
    "sample_map",
]


def sample_pixels(
    image: ImageBuffer,
    map_scale_factor: int,
    x: int,
    y: int,
    get_pixel_fn: GetPixelFn,
) -> Yuv:
    """Average the map_scale_factor x map_scale_factor block for map pixel (x, y)."""
    e = Yuv(0.0, 0.0, 0.0)
    for dy in range(map_scale_factor):
        for dx in range(map_scale_factor):
            e += get_pixel_fn(image, x * map_scale_factor + dx, y * map_scale_factor + dy)

    return e / float(map_scale_factor * map_scale_factor)


def sample_yuv420(image: ImageBuffer, map_scale_factor: int, x: int, y: int) -> Yuv:
    return sample_pixels(image, map_scale_factor, x, y, get_yuv420_pixel)


def sample_p010(image: ImageBuffer, map_scale_factor: int, x: int, y: int) -> Yuv:
    return sample_pixels(image, map_scale_factor, x, y, get_p010_pixel)


def sample_image(image: ImageBuffer, map_scale_factor: int, x: int, y: int) -> Yuv:
    """Box-filter sample using the reader matching the image's pixel format."""
    return sample_pixels(image, map_scale_factor, x, y, get_pixel_fn(image.pixel_format))


def _clamp(value: int, low: int, high: int) -> int:
    return low if value < low else (high if high < value else value)


def sample_map(gain_map: GainMap, map_scale_factor: int, x: int, y: int) -> float:
    """Sample the recovery map at image coordinate (x, y).

    Neighbour indices are clamped to the map edges, so edge pixels are
    replicated. The blend weights are not the textbook bilinear products
    (they sum to 2); existing encoders depend on this exact blend.
    """
    x_map = x / map_scale_factor
    y_map = y / map_scale_factor

    x_lower = math.floor(x_map)
    x_upper = x_lower + 1
    y_lower = math.floor(y_map)
    y_upper = y_lower + 1

    x_lower = _clamp(x_lower, 0, gain_map.width - 1)
    x_upper = _clamp(x_upper, 0, gain_map.width - 1)
    y_lower = _clamp(y_lower, 0, gain_map.height - 1)
    y_upper = _clamp(y_upper, 0, gain_map.height - 1)

    x_influence = x_map - x_lower
    y_influence = y_map - y_lower

    e1 = map_uint_to_float(gain_map.value_at(x_lower, y_lower))
    e2 = map_uint_to_float(gain_map.value_at(x_lower, y_upper))
    e3 = map_uint_to_float(gain_map.value_at(x_upper, y_lower))
    e4 = map_uint_to_float(gain_map.value_at(x_upper, y_upper))

    return (
        e1 * (x_influence + y_influence) / 2.0
        + e2 * (x_influence + 1.0 - y_influence) / 2.0
        + e3 * (1.0 - x_influence + y_influence) / 2.0
        + e4 * (1.0 - x_influence + 1.0 - y_influence) / 2.0
    )
