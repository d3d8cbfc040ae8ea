"""Synthetic peak-frequency tracks used for testing the carrier stage."""
from __future__ import annotations

from typing import Optional

import numpy as np


def constant_track(freq: float, n_chan: int, n_frames: int) -> np.ndarray:
    return np.full((n_chan, n_frames), float(freq), dtype=np.float64)


def glide_track(start_freq: float, end_freq: float, n_chan: int, n_frames: int) -> np.ndarray:
    track = np.linspace(start_freq, end_freq, n_frames, dtype=np.float64)
    return np.tile(np.maximum(track, 0.0), (n_chan, 1))


def random_track(
    low: float, high: float, n_chan: int, n_frames: int, seed: Optional[int] = None
) -> np.ndarray:
    if low < 0 or high < low:
        raise ValueError("random_track expects 0 <= low <= high")
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(n_chan, n_frames))
