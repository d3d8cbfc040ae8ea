"""High-level carrier engine that wraps the synthesis functions."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .carrier import StimTiming, ft_frame_times, synthesize_carrier
from .params import CarrierParams

logger = logging.getLogger(__name__)


class CarrierEngine:
    """Holds a validated parameter set and its derived timing."""

    def __init__(self, params: Optional[CarrierParams] = None):
        self._params: CarrierParams
        self._timing: StimTiming
        self.set_params(params if params is not None else CarrierParams())

    def set_params(self, params: CarrierParams) -> None:
        """Validate and install a new parameter set."""
        params.validate()
        timing = StimTiming.from_params(params)
        self._params = params
        self._timing = timing
        logger.debug(
            "carrier timing: %d channels, rate_ft=%d Hz, %.6g s per audio frame",
            params.n_chan,
            timing.rate_ft,
            timing.dur_frame,
        )

    @property
    def params(self) -> CarrierParams:
        return self._params

    @property
    def timing(self) -> StimTiming:
        return self._timing

    def process(self, peak_freq: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        carrier, idx_audio = synthesize_carrier(self._params, peak_freq)
        logger.debug(
            "synthesised %d FT frames, last audio frame held %d",
            carrier.shape[1],
            int(idx_audio[-1]),
        )
        return carrier, idx_audio

    def frame_times(self, n_audio_frames: int) -> np.ndarray:
        """FT frame start times in seconds for ``n_audio_frames`` of input."""
        return ft_frame_times(self._timing, self._timing.n_ft_frames(n_audio_frames))
