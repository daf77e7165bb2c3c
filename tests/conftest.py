"""Shared pytest fixtures for recoverymap tests."""
import numpy as np
import pytest

from recoverymap.gamut import ColorGamut
from recoverymap.image import GainMap, ImageBuffer, PixelFormat


def build_yuv420(width, height, y_plane, u_plane, v_plane, gamut=ColorGamut.BT709):
    """Assemble an 8-bit planar 4:2:0 buffer from flat plane values."""
    data = bytearray(bytes(y_plane) + bytes(u_plane) + bytes(v_plane))
    assert len(data) == width * height * 3 // 2
    return ImageBuffer(
        width=width,
        height=height,
        data=data,
        pixel_format=PixelFormat.YUV420,
        gamut=gamut,
    )


def build_p010(width, height, y_words, uv_words, gamut=ColorGamut.BT2100):
    """Assemble a P010 buffer from 10-bit values (shifted into the top bits)."""
    words = (np.array(list(y_words) + list(uv_words), dtype=np.uint16) << 6).astype("<u2")
    return ImageBuffer(
        width=width,
        height=height,
        data=words.tobytes(),
        pixel_format=PixelFormat.P010,
        gamut=gamut,
    )


@pytest.fixture
def gradient_yuv420():
    """4x4 image with luma 0, 10, ..., 150 and neutral chroma."""
    return build_yuv420(4, 4, [i * 10 for i in range(16)], [128] * 4, [128] * 4)


@pytest.fixture
def flat_p010():
    """4x4 P010 image of a single neutral grey."""
    return build_p010(4, 4, [502] * 16, [534, 534] * 4)


@pytest.fixture
def corner_map():
    """2x2 recovery map: full boost at the origin, full attenuation elsewhere."""
    return GainMap.from_array(np.array([[255, 0], [0, 0]], dtype=np.uint8))
