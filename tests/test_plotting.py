"""Tests for the carrier figure helper."""

import pytest

from carriersynth.dsp import CarrierEngine, signals
from carriersynth.plotting import carrier_figure


def test_carrier_figure_has_two_axes(default_params, tmp_path):
    engine = CarrierEngine(default_params)
    peak_freq = signals.glide_track(200.0, 2000.0, 4, 30)
    carrier, idx_audio = engine.process(peak_freq)

    fig = carrier_figure(carrier, peak_freq, idx_audio, engine.timing, channel=2)
    assert len(fig.axes) == 2
    assert fig.axes[1].get_ylabel() == "Carrier ch 2"

    out = tmp_path / "carrier.png"
    fig.savefig(out)
    assert out.stat().st_size > 0


def test_carrier_figure_rejects_bad_channel(default_params):
    engine = CarrierEngine(default_params)
    peak_freq = signals.constant_track(500.0, 4, 10)
    carrier, idx_audio = engine.process(peak_freq)
    with pytest.raises(ValueError):
        carrier_figure(carrier, peak_freq, idx_audio, engine.timing, channel=4)
