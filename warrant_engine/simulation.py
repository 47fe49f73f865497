from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from .bonds import BondPricer, price_bond
from .breakeven import solve_break_even_rate
from .config import DEFAULT_CONFIG, EngineConfig
from .errors import InvalidInputError
from .greeks import compute_greeks
from .models import SimulatorInput, SimulatorOutput
from .options import intrinsic_value, validate_option_inputs, warrant_value
from .position import position_value, total_investment, value_position
from .risk import duration_estimate, expected_price_change
from .utils import inclusive_grid, remaining_years

LOG = logging.getLogger("warrant_engine.simulation")

PAYOFF_RATES_PCT = (1.0, 7.0, 0.25)


def validate_input(inp: SimulatorInput) -> None:
    """Check every precondition up front so a run either completes or fails before pricing."""
    w = inp.warrant
    validate_option_inputs(1.0, w.strike, w.volatility)
    if w.premium < 0:
        raise InvalidInputError("warrant.premium", w.premium, "must be non-negative")
    if w.ratio <= 0:
        raise InvalidInputError("warrant.ratio", w.ratio)
    if w.expiry_years <= 0:
        raise InvalidInputError("warrant.expiry_years", w.expiry_years)
    if w.quantity <= 0:
        raise InvalidInputError("warrant.quantity", w.quantity)

    BondPricer(inp.bond).validate()

    for name in ("current_rate", "simulated_rate", "risk_free_rate"):
        value = getattr(inp.market, name)
        if value is not None and value <= -1.0:
            raise InvalidInputError(f"market.{name}", value, "must be greater than -1")

    if inp.time.elapsed_days < 0:
        raise InvalidInputError("time.elapsed_days", inp.time.elapsed_days, "must be non-negative")
    if inp.costs.fixed_fee < 0 or inp.costs.proportional_fee < 0:
        raise InvalidInputError("costs", inp.costs, "must be non-negative")


def _discount_rate(inp: SimulatorInput, bond_yield):
    rf = inp.market.risk_free_rate
    return bond_yield if rf is None else rf


def run_simulation(inp: SimulatorInput, config: Optional[EngineConfig] = None) -> SimulatorOutput:
    """
    Value the warrant today and under the simulated rate, then derive P&L,
    Greeks (at the simulated point), duration and the break-even rate.

    The simulated point sits at config.decay_factor of today's remaining life.
    """
    config = config or DEFAULT_CONFIG
    validate_input(inp)

    w, b, m = inp.warrant, inp.bond, inp.market
    is_put = w.is_put

    pricer = BondPricer(b)
    current_bond = pricer.price(m.current_rate)
    simulated_bond = pricer.price(m.simulated_rate)

    t_now = remaining_years(w.expiry_years, inp.time.elapsed_days, config.days_per_year)
    t_sim = t_now * config.decay_factor

    current_value = warrant_value(
        current_bond, w.strike, w.volatility, t_now, _discount_rate(inp, m.current_rate), is_put
    )
    sim_rate = _discount_rate(inp, m.simulated_rate)
    simulated_value = warrant_value(simulated_bond, w.strike, w.volatility, t_sim, sim_rate, is_put)

    pnl = value_position(current_value, simulated_value, w, inp.costs)
    greeks = compute_greeks(simulated_bond, w.strike, w.volatility, t_sim, sim_rate, is_put)

    duration = duration_estimate(b.maturity_years, config.duration_multiplier)
    price_change = expected_price_change(duration, m.current_rate, m.simulated_rate, current_bond)

    def pnl_at(rates: np.ndarray) -> np.ndarray:
        prices = price_bond(b.face_value, b.coupon_rate, rates, b.maturity_years)
        values = warrant_value(prices, w.strike, w.volatility, t_sim, _discount_rate(inp, rates), is_put)
        return position_value(values, w.quantity, w.ratio) - pnl.total_investment

    break_even = solve_break_even_rate(
        pnl_at,
        lower=config.rate_floor,
        upper=config.rate_cap,
        step=config.break_even_step,
        tol=config.break_even_tol,
    )

    LOG.debug(
        f"Simulated {w.type} K={w.strike} at {m.simulated_rate:.4%}: "
        f"bond {simulated_bond:.4f}, warrant {simulated_value:.4f}, P&L {pnl.profit_loss:.2f}"
    )

    return SimulatorOutput(
        current_bond_price=current_bond,
        simulated_bond_price=simulated_bond,
        current_warrant_value=current_value,
        simulated_warrant_value=simulated_value,
        adjusted_pnl=pnl,
        greeks=greeks,
        duration=duration,
        break_even_rate=break_even,
        intrinsic_value=intrinsic_value(simulated_bond, w.strike, is_put),
        price_change=price_change,
    )


def payoff_table(inp: SimulatorInput, config: Optional[EngineConfig] = None) -> pd.DataFrame:
    """
    Payoff profile across the 1%..7% quoting range.

    Each row prices the bond at the row's yield and values the warrant at
    expiry_years * config.payoff_decay_factor, discounting at that same yield.
    """
    config = config or DEFAULT_CONFIG
    validate_input(inp)

    w, b = inp.warrant, inp.bond
    rates_pct = inclusive_grid(*PAYOFF_RATES_PCT)
    rates = rates_pct / 100.0

    prices = price_bond(b.face_value, b.coupon_rate, rates, b.maturity_years)
    values = warrant_value(
        prices, w.strike, w.volatility, w.expiry_years * config.payoff_decay_factor, rates, w.is_put
    )
    investment = total_investment(w.premium, w.quantity, w.ratio, inp.costs)

    return pd.DataFrame(
        {
            "rate": rates_pct,
            "bond_price": prices,
            "warrant_value": values,
            "pnl": position_value(values, w.quantity, w.ratio) - investment,
        }
    )
