from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .errors import UndefinedRatioError
from .models import CostParams, PositionPnL, WarrantParams

LOG = logging.getLogger("warrant_engine.position")


def total_investment(premium: float, quantity: float, ratio: float, costs: Optional[CostParams] = None) -> float:
    """
    Cash paid to open the position: premium * quantity * ratio, plus fees.
    """
    gross = premium * quantity * ratio
    if costs is None:
        return gross
    return gross * (1.0 + costs.proportional_fee) + costs.fixed_fee


def position_value(unit_value, quantity: float, ratio: float):
    return np.asarray(unit_value, dtype=float) * quantity * ratio


def profit_loss_percent(profit_loss: float, investment: float) -> float:
    if investment == 0:
        raise UndefinedRatioError("return is undefined for a zero total investment")
    return profit_loss / investment * 100.0


def value_position(
    current_value: float,
    simulated_value: float,
    warrant: WarrantParams,
    costs: Optional[CostParams] = None,
) -> PositionPnL:
    investment = total_investment(warrant.premium, warrant.quantity, warrant.ratio, costs)
    current_position = float(position_value(current_value, warrant.quantity, warrant.ratio))
    simulated_position = float(position_value(simulated_value, warrant.quantity, warrant.ratio))
    pnl = simulated_position - investment

    try:
        pnl_pct: Optional[float] = profit_loss_percent(pnl, investment)
    except UndefinedRatioError as exc:
        LOG.debug(f"profit_loss_percent left undefined: {exc}")
        pnl_pct = None

    return PositionPnL(
        total_investment=investment,
        current_position=current_position,
        simulated_position=simulated_position,
        profit_loss=pnl,
        profit_loss_percent=pnl_pct,
    )
