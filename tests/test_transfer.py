"""Tests for sRGB, HLG and PQ transfer functions."""
import math

import numpy as np
import pytest

from recoverymap.color import Rgb
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


# =============================================================================
# sRGB
# =============================================================================

class TestSrgbInvOetf:
    def test_end_points(self):
        assert srgb_inv_oetf(0.0) == 0.0
        assert srgb_inv_oetf(1.0) == pytest.approx(1.0)

    def test_linear_segment(self):
        assert srgb_inv_oetf(0.02) == pytest.approx(0.02 / 12.92)

    def test_continuous_at_threshold(self):
        below = srgb_inv_oetf(0.04045)
        above = srgb_inv_oetf(0.04045 + 1e-9)
        assert below == pytest.approx(above, abs=1e-6)

    def test_monotonic(self):
        values = [srgb_inv_oetf(v) for v in np.linspace(0.0, 1.0, 256)]
        assert all(b > a for a, b in zip(values, values[1:]))

    def test_rgb_overload(self):
        e = srgb_inv_oetf_rgb(Rgb(0.0, 0.5, 1.0))
        assert e.r == 0.0
        assert e.g == pytest.approx(srgb_inv_oetf(0.5))
        assert e.b == pytest.approx(1.0)


# =============================================================================
# HLG
# =============================================================================

class TestHlg:
    def test_segment_boundary(self):
        assert hlg_oetf(1.0 / 12.0) == pytest.approx(0.5)
        assert hlg_inv_oetf(0.5) == pytest.approx(1.0 / 12.0)

    def test_reference_white(self):
        assert hlg_oetf(1.0) == pytest.approx(1.0, abs=1e-5)

    @pytest.mark.parametrize("x", [0.0, 0.001, 0.05, 1.0 / 12.0, 0.2, 0.5, 0.9, 1.0])
    def test_round_trip(self, x):
        assert hlg_inv_oetf(hlg_oetf(x)) == pytest.approx(x, abs=1e-9)

    def test_negative_input_is_nan_not_error(self):
        assert math.isnan(hlg_oetf(-0.1))

    def test_rgb_overloads_are_per_channel(self):
        e = Rgb(0.0, 1.0 / 12.0, 1.0)
        encoded = hlg_oetf_rgb(e)
        assert encoded.r == 0.0
        assert encoded.g == pytest.approx(0.5)
        assert hlg_inv_oetf_rgb(encoded).b == pytest.approx(1.0, abs=1e-5)


# =============================================================================
# PQ
# =============================================================================

class TestPq:
    def test_peak(self):
        assert pq_oetf(10000.0) == pytest.approx(1.0)
        assert pq_inv_oetf(1.0) == pytest.approx(10000.0)

    def test_negative_input_clamped(self):
        assert pq_oetf(-5.0) == pq_oetf(0.0)

    def test_monotonic(self):
        values = [pq_oetf(v) for v in [0.0, 0.01, 1.0, 100.0, 1000.0, 10000.0]]
        assert all(b > a for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("x", [0.001, 0.1, 0.5, 1.0, 100.0, 203.0, 1000.0])
    def test_round_trip(self, x):
        assert pq_inv_oetf(pq_oetf(x)) == pytest.approx(x, rel=1e-6)

    def test_rgb_overloads_are_per_channel(self):
        e = Rgb(0.0, 100.0, 10000.0)
        encoded = pq_oetf_rgb(e)
        assert encoded.b == pytest.approx(1.0)
        decoded = pq_inv_oetf_rgb(encoded)
        assert decoded.g == pytest.approx(100.0, rel=1e-4)
        assert decoded.b == pytest.approx(10000.0, rel=1e-4)
