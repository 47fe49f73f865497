from __future__ import annotations

from typing import Any


class EngineError(Exception):
    """Base class for all warrant engine errors."""


class InvalidInputError(EngineError, ValueError):
    """A formula received a value outside its domain (non-positive price, strike, vol, ...)."""

    def __init__(self, parameter: str, value: Any, reason: str = "must be positive"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} {reason}, got {value!r}")


class UndefinedRatioError(EngineError, ZeroDivisionError):
    """Return metrics are undefined because the total investment is zero."""


class NoCrossingFound(EngineError):
    """P&L keeps the same sign across the whole break-even grid."""


class RateProviderError(EngineError, LookupError):
    """A rate provider has no quote for the requested benchmark."""
