from dataclasses import replace

import numpy as np
import pytest

from warrant_engine.breakeven import first_sign_change, solve_break_even_rate
from warrant_engine.errors import NoCrossingFound
from warrant_engine.models import (
    BondParams,
    MarketParams,
    SimulatorInput,
    WarrantParams,
    WarrantType,
)
from warrant_engine.simulation import run_simulation


@pytest.fixture(scope="module")
def put_input():
    return SimulatorInput(
        warrant=WarrantParams(
            type=WarrantType.PUT,
            strike=100.0,
            premium=5.0,
            ratio=1.0,
            expiry_years=1.0,
            volatility=0.15,
            quantity=1,
        ),
        bond=BondParams(face_value=100.0, coupon_rate=0.03, maturity_years=10),
        market=MarketParams(current_rate=0.035, simulated_rate=0.035, risk_free_rate=0.035),
    )


def test_first_sign_change_finds_lowest_bracket():
    xs = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    ys = np.array([1.0, 0.5, -0.5, 0.5, -1.0])
    assert first_sign_change(xs, ys) == (1.0, 2.0)


def test_first_sign_change_exact_zero():
    xs = np.array([0.0, 1.0, 2.0])
    ys = np.array([-1.0, 0.0, 1.0])
    assert first_sign_change(xs, ys) == (1.0, 1.0)


def test_first_sign_change_raises_without_crossing():
    with pytest.raises(NoCrossingFound):
        first_sign_change(np.arange(5.0), np.ones(5))


def test_linear_root_refined():
    root = solve_break_even_rate(lambda r: (r - 0.0333) * 1000.0)
    assert root is not None
    assert abs(root - 0.0333) < 1e-5


def test_root_on_grid_point_returned_directly():
    assert solve_break_even_rate(lambda r: r - 0.03) == 0.03


def test_first_of_two_crossings():
    root = solve_break_even_rate(lambda r: (r - 0.0213) * (r - 0.0547))
    assert abs(root - 0.0213) < 1e-5, "Lowest-rate crossing must win"


def test_no_crossing_returns_none():
    assert solve_break_even_rate(lambda r: np.full_like(r, -3.0)) is None
    assert solve_break_even_rate(lambda r: r + 1.0) is None


def test_put_position_break_even_bracketed(put_input):
    out = run_simulation(put_input)
    be = out.break_even_rate
    assert be is not None
    assert 0.01 < be < 0.07

    def pnl_at(rate):
        inp = replace(put_input, market=replace(put_input.market, simulated_rate=rate))
        return run_simulation(inp).adjusted_pnl.profit_loss

    assert pnl_at(be - 1e-4) < 0.0 < pnl_at(be + 1e-4), "P&L must cross zero at the break-even rate"
    assert abs(pnl_at(be)) < 1e-3


def test_unreachable_premium_has_no_break_even(put_input):
    """A put can never be worth more than its strike, so a 1000 premium never breaks even."""
    inp = replace(put_input, warrant=replace(put_input.warrant, premium=1000.0))
    out = run_simulation(inp)
    assert out.break_even_rate is None
    assert out.adjusted_pnl.profit_loss < 0.0
