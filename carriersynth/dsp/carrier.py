"""Square-wave carrier synthesis driven by per-channel peak frequencies."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import DegenerateTiming, InvalidConfiguration, InvalidInput
from .params import CarrierParams


@dataclass(frozen=True)
class StimTiming:
    """Audio-frame and stimulation-cycle timing derived from the strategy."""

    dur_frame: float  # s per audio frame
    dur_stim_cycle: float  # s per full stimulation cycle
    rate_ft: int  # forward-telemetry frames per second

    @classmethod
    def from_params(cls, params: CarrierParams) -> "StimTiming":
        strat = params.parent
        dur_frame = strat.n_hop / strat.fs
        dur_stim_cycle = 2 * strat.pulse_width * strat.n_chan * 1e-6
        if dur_stim_cycle <= 0:
            raise InvalidConfiguration("pulse_width", "stimulation cycle duration must be > 0")
        # round half away from zero
        rate_ft = int(math.floor(1.0 / dur_stim_cycle + 0.5))
        if rate_ft < 1:
            raise InvalidConfiguration(
                "pulse_width", f"stimulation cycle of {dur_stim_cycle} s gives a zero FT rate"
            )
        return cls(dur_frame, dur_stim_cycle, rate_ft)

    def n_ft_frames(self, n_audio_frames: int) -> int:
        """Number of FT frames covering ``n_audio_frames`` audio frames."""
        n_ft = math.ceil(self.dur_frame * n_audio_frames / self.dur_stim_cycle) - 1
        if n_ft < 1:
            raise DegenerateTiming(
                f"{n_audio_frames} audio frame(s) of {self.dur_frame} s yield {n_ft} FT frames "
                f"at {self.dur_stim_cycle} s per stimulation cycle"
            )
        return n_ft


def stim_timing(params: CarrierParams) -> StimTiming:
    return StimTiming.from_params(params)


def n_ft_frames(timing: StimTiming, n_audio_frames: int) -> int:
    return timing.n_ft_frames(n_audio_frames)


def ft_frame_times(timing: StimTiming, n_ft: int) -> np.ndarray:
    """Start time of each FT frame in seconds, starting at 0."""
    return np.arange(n_ft, dtype=np.float64) * timing.dur_stim_cycle


def audio_frame_index(timing: StimTiming, n_ft: int, n_audio_frames: int) -> np.ndarray:
    """0-based index of the latest audio frame available at each FT frame."""
    t_ft = ft_frame_times(timing, n_ft)
    idx = np.floor(t_ft / timing.dur_frame).astype(np.intp)
    return np.clip(idx, 0, n_audio_frames - 1)


def validate_peak_freq(peak_freq, n_chan: int) -> np.ndarray:
    """Return ``peak_freq`` as a float64 (n_chan, n_frames) array or raise."""
    try:
        fpeak = np.asarray(peak_freq, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"peak_freq is not a numeric matrix: {exc}") from exc
    if fpeak.ndim != 2:
        raise InvalidInput(f"peak_freq must be 2-D (channels, frames), got {fpeak.ndim}-D")
    if fpeak.shape[0] != n_chan:
        raise InvalidInput(f"peak_freq has {fpeak.shape[0]} rows, expected n_chan={n_chan}")
    if fpeak.shape[1] < 1:
        raise InvalidInput("peak_freq has no audio frames")
    if not np.all(np.isfinite(fpeak)):
        raise InvalidInput("peak_freq contains non-finite values")
    if np.any(fpeak < 0):
        raise InvalidInput("peak_freq contains negative frequencies")
    return fpeak


def accumulate_phase(f_peak_ft: np.ndarray, rate_ft: float, delta_phase_max: float) -> np.ndarray:
    """Running phase in turns, wrapped to [0, 1), per channel along frames.

    Each FT frame advances by ``f / rate_ft`` turns, capped at
    ``delta_phase_max``. The first frame already includes its own advance.
    """
    if rate_ft <= 0:
        raise InvalidConfiguration("rate_ft", f"must be > 0, got {rate_ft}")
    delta_phi = np.minimum(f_peak_ft / rate_ft, delta_phase_max)
    return np.mod(np.cumsum(delta_phi, axis=1), 1.0)


def modulation_depth(
    f_peak_ft: np.ndarray,
    rate_ft: float,
    f_mod_on: float,
    f_mod_off: float,
    max_mod_depth: float,
) -> np.ndarray:
    """Depth ramps from ``max_mod_depth`` at f_mod_on down to 0 at f_mod_off."""
    f_on = rate_ft * f_mod_on
    f_off = rate_ft * f_mod_off
    if f_off <= f_on:
        raise InvalidConfiguration("f_mod_off", f"ramp end {f_off} Hz must exceed start {f_on} Hz")
    clamped = np.minimum(np.maximum(f_peak_ft, f_on), f_off)
    return max_mod_depth * (f_off - clamped) / (f_off - f_on)


def synthesize_carrier(params: CarrierParams, peak_freq) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the per-channel carrier for every forward-telemetry frame.

    Returns ``(carrier, idx_audio)``. ``carrier`` has shape
    ``(n_chan, n_ft)`` with values in ``[1 - max_mod_depth, 1]``.
    The second element is the 0-based audio frame index held at each FT
    frame rather than the FT frame start time; use :func:`ft_frame_times`
    for the latter.
    """
    params.validate()
    timing = stim_timing(params)
    fpeak = validate_peak_freq(peak_freq, params.n_chan)
    n_audio = fpeak.shape[1]
    n_ft = timing.n_ft_frames(n_audio)
    idx_audio = audio_frame_index(timing, n_ft, n_audio)
    f_peak_ft = fpeak[:, idx_audio]

    phi = accumulate_phase(f_peak_ft, timing.rate_ft, params.delta_phase_max)
    depth = modulation_depth(
        f_peak_ft,
        timing.rate_ft,
        params.f_mod_on,
        params.f_mod_off,
        params.max_mod_depth,
    )
    carrier = 1.0 - depth * (phi < 0.5)
    return carrier, idx_audio
