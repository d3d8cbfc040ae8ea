"""Tests for the synthetic peak-frequency tracks."""

import numpy as np
import pytest

from carriersynth.dsp import signals


def test_constant_track():
    track = signals.constant_track(440.0, 3, 8)
    assert track.shape == (3, 8)
    assert track.dtype == np.float64
    assert np.all(track == 440.0)


def test_glide_track_endpoints():
    track = signals.glide_track(100.0, 1100.0, 2, 11)
    assert track.shape == (2, 11)
    np.testing.assert_allclose(track[:, 0], 100.0)
    np.testing.assert_allclose(track[:, -1], 1100.0)
    np.testing.assert_allclose(track[0, 5], 600.0)
    np.testing.assert_array_equal(track[0], track[1])


def test_random_track_is_seeded_and_bounded():
    a = signals.random_track(50.0, 500.0, 4, 100, seed=42)
    b = signals.random_track(50.0, 500.0, 4, 100, seed=42)
    np.testing.assert_array_equal(a, b)
    assert np.all(a >= 50.0)
    assert np.all(a <= 500.0)


def test_random_track_rejects_negative_range():
    with pytest.raises(ValueError):
        signals.random_track(-10.0, 100.0, 1, 10)
