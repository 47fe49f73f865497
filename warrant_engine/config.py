from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Model constants for a simulation run.

    - decay_factor: share of the remaining life left at the simulated point
    - payoff_decay_factor: share of the full expiry used by the payoff table
    - duration_multiplier: heuristic duration / maturity ratio
    - rate_floor, rate_cap, break_even_step, break_even_tol: break-even search
      domain, grid spacing and tolerance (decimal rates)
    """
    decay_factor: float = 0.8
    payoff_decay_factor: float = 0.5
    days_per_year: float = 365.0
    duration_multiplier: float = 0.85
    rate_floor: float = 0.01
    rate_cap: float = 0.07
    break_even_step: float = 0.0005
    break_even_tol: float = 1e-6

    def __post_init__(self):
        if self.decay_factor < 0:
            raise ValueError(f"decay_factor must be non-negative, got {self.decay_factor}")
        if self.payoff_decay_factor < 0:
            raise ValueError(f"payoff_decay_factor must be non-negative, got {self.payoff_decay_factor}")
        if self.days_per_year <= 0:
            raise ValueError("days_per_year must be positive")
        if not self.rate_floor < self.rate_cap:
            raise ValueError("rate_floor must be below rate_cap")
        if self.break_even_step <= 0 or self.break_even_tol <= 0:
            raise ValueError("break-even step and tolerance must be positive")


DEFAULT_CONFIG = EngineConfig()
