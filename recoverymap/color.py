# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025-2026 Aryan Ameri
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""
Colour value types.

RGB and YUV triples are kept as two distinct immutable types so a YUV sample
can never be fed to an RGB-only function by accident. Moving between them is
only possible through the explicit transforms in ``recoverymap.gamut``.

Components are stored at single precision, matching the 32-bit float pixel
math of the recovery map format. Nothing is clamped implicitly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Final, Self

import numpy as np
from numpy.typing import NDArray

__all__: Final[list[str]] = [
    "Rgb",
    "Yuv",
]


def _f32(value: float) -> float:
    return float(np.float32(value))


@dataclass(frozen=True, slots=True)
class Rgb:
    """Red/green/blue triple (linear or gamma encoded, depending on context)."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _f32(self.r))
        object.__setattr__(self, "g", _f32(self.g))
        object.__setattr__(self, "b", _f32(self.b))

    def __add__(self, other: Rgb) -> Rgb:
        return Rgb(self.r + other.r, self.g + other.g, self.b + other.b)

    def __truediv__(self, divisor: float) -> Rgb:
        return Rgb(self.r / divisor, self.g / divisor, self.b / divisor)

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def map(self, fn: Callable[[float], float]) -> Rgb:
        """Apply a scalar function to each channel independently."""
        return Rgb(fn(self.r), fn(self.g), fn(self.b))

    def clamp(self, low: float = 0.0, high: float = 1.0) -> Rgb:
        return self.map(lambda c: min(max(c, low), high))

    def as_array(self) -> NDArray[np.float32]:
        return np.array([self.r, self.g, self.b], dtype=np.float32)

    @classmethod
    def from_array(cls, values: NDArray[np.floating]) -> Self:
        r, g, b = (float(v) for v in values)
        return cls(r, g, b)


@dataclass(frozen=True, slots=True)
class Yuv:
    """Luma/chroma triple. Chroma is signed and centred on zero."""

    y: float
    u: float
    v: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "y", _f32(self.y))
        object.__setattr__(self, "u", _f32(self.u))
        object.__setattr__(self, "v", _f32(self.v))

    def __add__(self, other: Yuv) -> Yuv:
        return Yuv(self.y + other.y, self.u + other.u, self.v + other.v)

    def __truediv__(self, divisor: float) -> Yuv:
        return Yuv(self.y / divisor, self.u / divisor, self.v / divisor)

    def __iter__(self) -> Iterator[float]:
        return iter((self.y, self.u, self.v))

    def map(self, fn: Callable[[float], float]) -> Yuv:
        return Yuv(fn(self.y), fn(self.u), fn(self.v))

    def as_array(self) -> NDArray[np.float32]:
        return np.array([self.y, self.u, self.v], dtype=np.float32)
