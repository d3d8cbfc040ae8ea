"""Square-wave carrier synthesis for multi-channel stimulation strategies."""
from .dsp import (
    CarrierEngine,
    CarrierParams,
    StrategyParams,
    synthesize_carrier,
)

__version__ = "0.1.0"

__all__ = [
    "CarrierEngine",
    "CarrierParams",
    "StrategyParams",
    "synthesize_carrier",
    "__version__",
]
