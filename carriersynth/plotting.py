"""Helpers for visualising a synthesised carrier."""
from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure

from carriersynth.dsp import StimTiming, ft_frame_times


def carrier_figure(
    carrier: np.ndarray,
    peak_freq: np.ndarray,
    idx_audio: np.ndarray,
    timing: StimTiming,
    channel: int = 0,
) -> Figure:
    if not 0 <= channel < carrier.shape[0]:
        raise ValueError(f"channel {channel} out of range for {carrier.shape[0]} channels")
    t_ft = ft_frame_times(timing, carrier.shape[1]) * 1e3
    f_held = np.asarray(peak_freq)[channel, idx_audio]

    fig = Figure(figsize=(8, 4), tight_layout=True)
    ax_freq, ax_carrier = fig.subplots(2, 1, sharex=True)
    ax_freq.step(t_ft, f_held, where="post", color="orange")
    ax_freq.set_ylabel("Peak freq (Hz)")
    ax_freq.grid(True, ls=":", lw=0.5)

    ax_carrier.step(t_ft, carrier[channel], where="post")
    ax_carrier.set_ylim(-0.05, 1.05)
    ax_carrier.set_xlabel("Time (ms)")
    ax_carrier.set_ylabel(f"Carrier ch {channel}")
    ax_carrier.grid(True, ls=":", lw=0.5)
    return fig
