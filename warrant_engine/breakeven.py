"""
Break-even rate search.

The P&L curve (bond price -> warrant value -> position value) is continuous in
the simulated rate but not guaranteed monotonic, so the search samples the
whole grid first and only then refines the first bracket it finds.

Policy: with several sign changes, the lowest-rate crossing is returned. That
is a convention, not a statement about which crossing matters economically.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

import numpy as np
from scipy.optimize import brentq

from .errors import NoCrossingFound
from .utils import inclusive_grid

LOG = logging.getLogger("warrant_engine.breakeven")

PnLFunction = Callable[[np.ndarray], np.ndarray]


def first_sign_change(xs: np.ndarray, ys: np.ndarray) -> Tuple[float, float]:
    """
    Return the first bracket (a, b) of adjacent grid points where ys changes
    sign. An exact zero at a grid point returns the degenerate bracket (x, x).
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if xs.shape != ys.shape or xs.ndim != 1:
        raise ValueError("xs and ys must be 1-d arrays of equal length")

    zeros = np.flatnonzero(ys == 0.0)
    flips = np.flatnonzero(ys[:-1] * ys[1:] < 0.0)

    first_zero = zeros[0] if len(zeros) else len(xs)
    first_flip = flips[0] if len(flips) else len(xs)

    if first_zero == len(xs) and first_flip == len(xs):
        raise NoCrossingFound(f"no sign change on [{xs[0]}, {xs[-1]}]")

    if first_zero <= first_flip:
        x = float(xs[first_zero])
        return x, x
    return float(xs[first_flip]), float(xs[first_flip + 1])


def solve_break_even_rate(
    pnl_fn: PnLFunction,
    lower: float = 0.01,
    upper: float = 0.07,
    step: float = 0.0005,
    tol: float = 1e-6,
) -> Optional[float]:
    """
    Rate in [lower, upper] at which pnl_fn crosses zero, or None.

    pnl_fn must accept an array of rates and return one P&L per rate.
    """
    grid = inclusive_grid(lower, upper, step)
    pnl = np.asarray(pnl_fn(grid), dtype=float)

    try:
        a, b = first_sign_change(grid, pnl)
    except NoCrossingFound as exc:
        LOG.debug(f"No break-even rate: {exc}")
        return None

    if a == b:
        return a

    root = brentq(lambda r: float(pnl_fn(np.array([r]))[0]), a, b, xtol=tol, maxiter=200)
    LOG.debug(f"Break-even rate {root:.6f} bracketed in [{a}, {b}]")
    return float(root)
