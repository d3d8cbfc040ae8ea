import pytest

from carriersynth.dsp import CarrierParams, StrategyParams


@pytest.fixture
def single_channel_params():
    """One channel at a 20 kHz forward-telemetry rate, full-band ramp."""
    strat = StrategyParams(n_chan=1, fs=17400.0, pulse_width=25.0, n_hop=20)
    return CarrierParams(
        parent=strat,
        f_mod_on=0.0,
        f_mod_off=1.0,
        max_mod_depth=0.5,
        delta_phase_max=1.0,
    )


@pytest.fixture
def default_params():
    return CarrierParams(parent=StrategyParams(n_chan=4))
