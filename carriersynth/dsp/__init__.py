"""DSP package exports for the carrier synthesis stage."""
from .carrier import (
    StimTiming,
    accumulate_phase,
    audio_frame_index,
    ft_frame_times,
    modulation_depth,
    n_ft_frames,
    stim_timing,
    synthesize_carrier,
    validate_peak_freq,
)
from .engine import CarrierEngine
from .errors import CarrierSynthError, DegenerateTiming, InvalidConfiguration, InvalidInput
from .params import CarrierParams, StrategyParams
from . import signals

__all__ = [
    "CarrierEngine",
    "CarrierParams",
    "CarrierSynthError",
    "DegenerateTiming",
    "InvalidConfiguration",
    "InvalidInput",
    "StimTiming",
    "StrategyParams",
    "accumulate_phase",
    "audio_frame_index",
    "ft_frame_times",
    "modulation_depth",
    "n_ft_frames",
    "signals",
    "stim_timing",
    "synthesize_carrier",
    "validate_peak_freq",
]
