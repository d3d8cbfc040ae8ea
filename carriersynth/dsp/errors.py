"""Exceptions raised by the carrier synthesis DSP code."""
from __future__ import annotations


class CarrierSynthError(ValueError):
    """Base class for every carrier synthesis failure."""


class InvalidConfiguration(CarrierSynthError):
    """A strategy or carrier parameter is out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class InvalidInput(CarrierSynthError):
    """The peak-frequency matrix does not match the parameters."""


class DegenerateTiming(CarrierSynthError):
    """The derived forward-telemetry frame count is below one."""
