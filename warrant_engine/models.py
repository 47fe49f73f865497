from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class WarrantType(str, Enum):
    PUT = "PUT"
    CALL = "CALL"


@dataclass(frozen=True)
class WarrantParams:
    type: WarrantType
    strike: float
    premium: float          # price paid per unit
    ratio: float            # underlying units per warrant
    expiry_years: float
    volatility: float       # annualized, decimal
    quantity: int

    @property
    def is_put(self) -> bool:
        return WarrantType(self.type) is WarrantType.PUT


@dataclass(frozen=True)
class BondParams:
    face_value: float = 100.0
    coupon_rate: float = 0.0    # annual, decimal
    maturity_years: int = 10    # annual coupon periods


@dataclass(frozen=True)
class MarketParams:
    current_rate: float
    simulated_rate: float
    risk_free_rate: Optional[float] = None  # option discount rate; bond yield when None


@dataclass(frozen=True)
class TimeParams:
    elapsed_days: float = 0.0


@dataclass(frozen=True)
class CostParams:
    fixed_fee: float = 0.0          # currency units
    proportional_fee: float = 0.0   # fraction of gross premium outlay


@dataclass(frozen=True)
class SimulatorInput:
    warrant: WarrantParams
    bond: BondParams
    market: MarketParams
    time: TimeParams = field(default_factory=TimeParams)
    costs: CostParams = field(default_factory=CostParams)


@dataclass(frozen=True)
class PositionPnL:
    total_investment: float
    current_position: float
    simulated_position: float
    profit_loss: float
    profit_loss_percent: Optional[float]   # None when total_investment == 0


@dataclass(frozen=True)
class Greeks:
    delta: float = 0.0
    gamma: float = 0.0
    vega: float = 0.0     # per 1 vol point
    theta: float = 0.0    # per calendar day
    rho: float = 0.0      # per 1 rate point


@dataclass(frozen=True)
class SimulatorOutput:
    current_bond_price: float
    simulated_bond_price: float
    current_warrant_value: float
    simulated_warrant_value: float
    adjusted_pnl: PositionPnL
    greeks: Greeks
    duration: float
    break_even_rate: Optional[float]
    intrinsic_value: float = 0.0
    price_change: float = 0.0


@dataclass(frozen=True)
class SavedOperation:
    id: str
    name: str
    input: SimulatorInput


@dataclass(frozen=True)
class ChartDataPoint:
    label: str
    x_points: float
    values: Mapping[str, float] = field(default_factory=dict)
