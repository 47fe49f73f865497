from __future__ import annotations

import numpy as np


def remaining_years(expiry_years: float, elapsed_days: float, days_per_year: float = 365.0) -> float:
    """
    Time to expiry in years after elapsed_days calendar days, floored at 0.
    """
    if elapsed_days < 0:
        raise ValueError(f"elapsed_days must be non-negative, got {elapsed_days}")
    return max(0.0, float(expiry_years) - float(elapsed_days) / days_per_year)


def inclusive_grid(start: float, stop: float, step: float) -> np.ndarray:
    """
    start, start + step, ... up to and including stop when stop lies on the grid.

    Points are built as start + k*step and rounded, so float steps (0.25,
    0.0005) neither drop the last point nor accumulate drift.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    if stop < start:
        raise ValueError(f"stop < start: {start=} {stop=}")

    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return np.round(start + step * np.arange(n), 10)


def format_number(x: float) -> str:
    """Compact label text: 2.0 -> '2', 2.25 -> '2.25'."""
    return f"{float(x):g}"


def as_output(values: np.ndarray):
    """Return a plain float for 0-d results, the array otherwise."""
    values = np.asarray(values, dtype=float)
    if values.ndim == 0:
        return float(values)
    return values
