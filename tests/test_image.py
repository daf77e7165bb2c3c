"""Tests for image buffers and per-pixel readers."""
import numpy as np
import pytest

from recoverymap.color import Yuv
from recoverymap.errors import UnsupportedPixelFormatError
from recoverymap.gamut import ColorGamut
from recoverymap.image import (
    GainMap,
    ImageBuffer,
    PixelFormat,
    get_p010_pixel,
    get_pixel_fn,
    get_yuv420_pixel,
)
from tests.conftest import build_p010, build_yuv420


@pytest.fixture
def small_yuv420():
    # 4x2 image: 8 luma bytes, then 2 U bytes, then 2 V bytes
    return build_yuv420(4, 2, [0, 10, 20, 30, 40, 50, 60, 255], [128, 0], [255, 128])


class TestYuv420Reader:
    def test_origin(self, small_yuv420):
        assert get_yuv420_pixel(small_yuv420, 0, 0) == Yuv(0.0, 0.0, 127 / 255)

    def test_chroma_shared_by_2x2_block(self, small_yuv420):
        top = get_yuv420_pixel(small_yuv420, 1, 0)
        bottom = get_yuv420_pixel(small_yuv420, 1, 1)
        assert (top.u, top.v) == (bottom.u, bottom.v)
        assert top.y == pytest.approx(10 / 255)
        assert bottom.y == pytest.approx(50 / 255)

    def test_second_chroma_block(self, small_yuv420):
        e = get_yuv420_pixel(small_yuv420, 3, 1)
        assert e.y == pytest.approx(1.0)
        assert e.u == pytest.approx(-128 / 255)
        assert e.v == 0.0

    def test_reads_borrowed_storage(self, small_yuv420):
        small_yuv420.data[0] = 255
        assert get_yuv420_pixel(small_yuv420, 0, 0).y == pytest.approx(1.0)


class TestP010Reader:
    def test_raw_word_is_shifted_down(self):
        words = np.array([0x3FC0, 0, 0, 0, 64 << 6, 534 << 6], dtype="<u2")
        image = ImageBuffer(width=2, height=2, data=words.tobytes(), pixel_format=PixelFormat.P010)
        e = get_p010_pixel(image, 0, 0)
        # Narrow-range headroom: 1023 / 940 exceeds 1.0
        assert e.y == pytest.approx(1023 / 940)
        assert e.u == pytest.approx(-0.5)
        assert e.v == pytest.approx(0.0, abs=1e-7)

    def test_low_bits_are_ignored(self):
        words = np.array([(100 << 6) | 0x3F, 0, 0, 0, 64 << 6, 64 << 6], dtype="<u2")
        image = ImageBuffer(width=2, height=2, data=words.tobytes(), pixel_format=PixelFormat.P010)
        assert get_p010_pixel(image, 0, 0).y == pytest.approx(100 / 940)

    def test_interleaved_chroma(self):
        image = build_p010(4, 2, [64] * 8, [64, 1004, 534, 534])
        left = get_p010_pixel(image, 1, 1)
        right = get_p010_pixel(image, 2, 0)
        assert left.u == pytest.approx(-0.5)
        assert left.v == pytest.approx(0.5)
        assert right.u == pytest.approx(0.0, abs=1e-7)
        assert right.v == pytest.approx(0.0, abs=1e-7)

    def test_accepts_uint16_array(self):
        words = np.full(6, 940 << 6, dtype=np.uint16)
        image = ImageBuffer(width=2, height=2, data=words, pixel_format=PixelFormat.P010)
        assert get_p010_pixel(image, 1, 1).y == pytest.approx(1.0)


class TestImageBuffer:
    def test_defaults(self):
        image = ImageBuffer(width=2, height=2, data=bytes(6))
        assert image.pixel_format == PixelFormat.YUV420
        assert image.gamut == ColorGamut.UNSPECIFIED
        assert image.pixel_count == 4

    def test_p010_samples_are_16_bit(self):
        image = build_p010(2, 2, [0] * 4, [0, 0])
        assert image.samples.dtype == np.dtype("<u2")
        assert image.samples.size == 6


class TestGainMap:
    def test_from_array_is_row_major(self):
        gain_map = GainMap.from_array(np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8))
        assert (gain_map.width, gain_map.height) == (3, 2)
        assert gain_map.value_at(2, 0) == 3
        assert gain_map.value_at(0, 1) == 4

    def test_from_bytes(self):
        gain_map = GainMap(width=2, height=1, data=b"\x00\xff")
        assert gain_map.value_at(1, 0) == 255


class TestGetPixelFn:
    def test_lookup(self):
        assert get_pixel_fn(PixelFormat.YUV420) is get_yuv420_pixel
        assert get_pixel_fn(PixelFormat.P010) is get_p010_pixel

    def test_unknown_format(self):
        with pytest.raises(UnsupportedPixelFormatError):
            get_pixel_fn("nv21")
