# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Uncompressed image and recovery map buffers, and per-pixel readers.

Buffers are borrowed: the raw samples are wrapped in a numpy view without
copying and are never written. Readers do not check coordinates; callers
must keep ``0 <= x < width`` and ``0 <= y < height``.

Supported layouts (4:2:0 chroma subsampling):
- YUV420: 8-bit planar. Y plane, then U plane (w*h/4), then V plane.
- P010: 16-bit little-endian words holding 10 bits in the top of each word.
  Y plane, then interleaved U/V pairs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Final, Self, TypeAlias

import numpy as np
from numpy.typing import NDArray

from recoverymap.color import Yuv
from recoverymap.errors import UnsupportedPixelFormatError
from recoverymap.gamut import ColorGamut

__all__: Final[list[str]] = [
    "PixelFormat",
    "ImageBuffer",
    "GainMap",
    "GetPixelFn",
    "get_yuv420_pixel",
    "get_p010_pixel",
    "get_pixel_fn",
]

RawBuffer: TypeAlias = bytes | bytearray | memoryview | NDArray[np.generic]


class PixelFormat(StrEnum):
    """Sample layout of an uncompressed image."""

    YUV420 = auto()
    P010 = auto()


def _byte_view(data: RawBuffer) -> NDArray[np.uint8]:
    if isinstance(data, np.ndarray):
        return np.ascontiguousarray(data).reshape(-1).view(np.uint8)
    return np.frombuffer(data, dtype=np.uint8)


@dataclass(frozen=True, slots=True, kw_only=True)
class ImageBuffer:
    """Borrowed view of an uncompressed YUV image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Raw sample storage (buffer protocol object or numpy array)
        pixel_format: Sample layout of ``data``
        gamut: Colour primaries of the image
    """

    width: int
    height: int
    data: RawBuffer = field(repr=False)
    pixel_format: PixelFormat = PixelFormat.YUV420
    gamut: ColorGamut = ColorGamut.UNSPECIFIED
    samples: NDArray[np.uint8] | NDArray[np.uint16] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        view = _byte_view(self.data)
        if self.pixel_format == PixelFormat.P010:
            view = view.view("<u2")
        object.__setattr__(self, "samples", view)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True, slots=True, kw_only=True)
class GainMap:
    """Single-channel 8-bit recovery map, row-major with no padding."""

    width: int
    height: int
    data: RawBuffer = field(repr=False)
    samples: NDArray[np.uint8] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", _byte_view(self.data))

    @classmethod
    def from_array(cls, values: NDArray[np.uint8]) -> Self:
        """Wrap a (height, width) uint8 array."""
        height, width = values.shape
        return cls(width=width, height=height, data=values.astype(np.uint8, copy=False))

    def value_at(self, x: int, y: int) -> int:
        return int(self.samples[x + y * self.width])


GetPixelFn: TypeAlias = Callable[[ImageBuffer, int, int], Yuv]


def _uv_index(image: ImageBuffer, x: int, y: int) -> int:
    return x // 2 + (y // 2) * (image.width // 2)


def get_yuv420_pixel(image: ImageBuffer, x: int, y: int) -> Yuv:
    """Read one pixel of an 8-bit full-range YUV 4:2:0 image."""
    pixel_count = image.pixel_count
    uv_idx = _uv_index(image, x, y)
    samples = image.samples

    y_uint = int(samples[x + y * image.width])
    u_uint = int(samples[pixel_count + uv_idx])
    v_uint = int(samples[pixel_count * 5 // 4 + uv_idx])

    # Chroma is stored unsigned with a 128 bias (jpeglib convention)
    return Yuv(
        y_uint / 255.0,
        (u_uint - 128.0) / 255.0,
        (v_uint - 128.0) / 255.0,
    )


def get_p010_pixel(image: ImageBuffer, x: int, y: int) -> Yuv:
    """Read one pixel of a 10-bit narrow-range P010 image.

    Narrow range leaves headroom, so Y can exceed 1.0.
    """
    pixel_count = image.pixel_count
    uv_idx = _uv_index(image, x, y)
    samples = image.samples

    y_uint = int(samples[x + y * image.width]) >> 6
    u_uint = int(samples[pixel_count + uv_idx * 2]) >> 6
    v_uint = int(samples[pixel_count + uv_idx * 2 + 1]) >> 6

    return Yuv(
        y_uint / 940.0,
        (u_uint - 64.0) / 940.0 - 0.5,
        (v_uint - 64.0) / 940.0 - 0.5,
    )


_PIXEL_READERS: Final[dict[PixelFormat, GetPixelFn]] = {
    PixelFormat.YUV420: get_yuv420_pixel,
    PixelFormat.P010: get_p010_pixel,
}


def get_pixel_fn(pixel_format: PixelFormat) -> GetPixelFn:
    """Return the pixel reader for a pixel format."""
    try:
        return _PIXEL_READERS[pixel_format]
    except KeyError:
        raise UnsupportedPixelFormatError(f"No pixel reader for format: {pixel_format!r}") from None
