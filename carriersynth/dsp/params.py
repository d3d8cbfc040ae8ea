"""Parameter records for the carrier synthesis stage."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from .errors import InvalidConfiguration

# camelCase record keys -> dataclass field names
_STRATEGY_KEYS = {
    "nChan": "n_chan",
    "fs": "fs",
    "pulseWidth": "pulse_width",
    "nHop": "n_hop",
    "stimRate": "stim_rate",
}
_CARRIER_KEYS = {
    "fModOn": "f_mod_on",
    "fModOff": "f_mod_off",
    "maxModDepth": "max_mod_depth",
    "deltaPhaseMax": "delta_phase_max",
}


def _positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(name, f"expected an integer, got {value!r}")
    if value < 1:
        raise InvalidConfiguration(name, f"must be >= 1, got {value}")


def _positive_real(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(name, f"expected a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(name, f"must be a finite value > 0, got {value}")


def _finite_real(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(name, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfiguration(name, f"must be finite, got {value}")


def _unit_interval(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(name, f"expected a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(name, f"must lie in [0, 1], got {value}")


@dataclass(frozen=True)
class StrategyParams:
    """Strategy-wide settings shared by every processing stage."""

    n_chan: int = 15
    fs: float = 17400.0  # Hz
    pulse_width: float = 18.0  # us per phase
    n_hop: int = 20  # samples
    stim_rate: float = 2000.0  # pps, informational here

    def validate(self) -> "StrategyParams":
        _positive_int("n_chan", self.n_chan)
        _positive_real("fs", self.fs)
        _positive_real("pulse_width", self.pulse_width)
        _positive_int("n_hop", self.n_hop)
        _finite_real("stim_rate", self.stim_rate)
        return self


@dataclass(frozen=True)
class CarrierParams:
    """Carrier synthesis settings plus the strategy they belong to.

    ``f_mod_on`` and ``f_mod_off`` are fractions of the forward-telemetry
    rate; ``delta_phase_max`` is in turns per FT frame.
    """

    parent: StrategyParams = field(default_factory=StrategyParams)
    f_mod_on: float = 0.5
    f_mod_off: float = 1.0
    max_mod_depth: float = 1.0
    delta_phase_max: float = 0.5

    @property
    def n_chan(self) -> int:
        return self.parent.n_chan

    @property
    def fs(self) -> float:
        return self.parent.fs

    @property
    def pulse_width(self) -> float:
        return self.parent.pulse_width

    @property
    def n_hop(self) -> int:
        return self.parent.n_hop

    def validate(self) -> "CarrierParams":
        """Raise :class:`InvalidConfiguration` for the first bad field."""
        if not isinstance(self.parent, StrategyParams):
            raise InvalidConfiguration("parent", "expected a StrategyParams instance")
        self.parent.validate()
        _unit_interval("f_mod_on", self.f_mod_on)
        _unit_interval("f_mod_off", self.f_mod_off)
        if self.f_mod_off <= self.f_mod_on:
            raise InvalidConfiguration(
                "f_mod_off",
                f"must be greater than f_mod_on ({self.f_mod_on}), got {self.f_mod_off}",
            )
        _unit_interval("max_mod_depth", self.max_mod_depth)
        _unit_interval("delta_phase_max", self.delta_phase_max)
        return self

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "CarrierParams":
        """Build params from a flat record using camelCase or snake_case keys."""
        strategy: Dict[str, Any] = {}
        carrier: Dict[str, Any] = {}
        strategy_fields = {f.name for f in fields(StrategyParams)}
        carrier_fields = {f.name for f in fields(cls)} - {"parent"}

        for key, value in record.items():
            if key == "parent":
                if not isinstance(value, Mapping):
                    raise InvalidConfiguration("parent", "expected a mapping")
                for sub_key, sub_value in value.items():
                    name = _STRATEGY_KEYS.get(sub_key, sub_key)
                    if name not in strategy_fields:
                        raise InvalidConfiguration(f"parent.{sub_key}", "unknown parameter")
                    strategy[name] = sub_value
                continue
            name = _STRATEGY_KEYS.get(key, key)
            if name in strategy_fields:
                strategy[name] = value
                continue
            name = _CARRIER_KEYS.get(key, key)
            if name in carrier_fields:
                carrier[name] = value
                continue
            raise InvalidConfiguration(key, "unknown parameter")

        return cls(parent=StrategyParams(**strategy), **carrier)

    def to_mapping(self) -> Dict[str, Any]:
        """Return the flat camelCase record for this parameter set."""
        record: Dict[str, Any] = {}
        for key, name in _STRATEGY_KEYS.items():
            record[key] = getattr(self.parent, name)
        for key, name in _CARRIER_KEYS.items():
            record[key] = getattr(self, name)
        return record
