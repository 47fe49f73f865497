from __future__ import annotations


def duration_estimate(maturity_years: float, multiplier: float = 0.85) -> float:
    """
    Rough rate sensitivity of the bond leg: maturity * multiplier.

    This is a display heuristic, not a Macaulay/modified duration, and is never
    fed back into warrant pricing.
    """
    if maturity_years <= 0:
        raise ValueError(f"maturity_years must be positive, got {maturity_years}")
    return float(maturity_years) * multiplier


def expected_price_change(
    duration: float,
    current_rate: float,
    simulated_rate: float,
    current_price: float,
) -> float:
    """First-order bond price move for a rate change: -D * dy * P (rates decimal)."""
    return -duration * (simulated_rate - current_rate) * current_price
