from __future__ import annotations

import numbers

import numpy as np

from .errors import InvalidInputError
from .models import BondParams
from .utils import as_output


def _check_periods(years) -> int:
    if isinstance(years, bool) or not isinstance(years, numbers.Real):
        raise InvalidInputError("years", years, "must be a number")
    if years <= 0:
        raise InvalidInputError("years", years)
    if float(years) != int(years):
        # annual-coupon model: fractional periods are not supported
        raise InvalidInputError("years", years, "must be a whole number of annual periods")
    return int(years)


def price_bond(face_value: float, coupon_rate: float, yield_rate, years: int):
    """
    Clean price of an annual-coupon bond discounted at a flat yield.

      P = sum_{t=1..n} F*c/(1+y)^t + F/(1+y)^n

    yield_rate may be a scalar or an array of yields (one price per yield).
    """
    n = _check_periods(years)
    y = np.asarray(yield_rate, dtype=float)
    if np.any(y <= -1.0):
        raise InvalidInputError("yield_rate", yield_rate, "must be greater than -1")

    periods = np.arange(1, n + 1, dtype=float)
    dfs = (1.0 + y[..., None]) ** -periods

    coupon_cf = face_value * coupon_rate
    price = coupon_cf * dfs.sum(axis=-1) + face_value * dfs[..., -1]
    return as_output(price.reshape(y.shape))


class BondPricer:
    def __init__(self, bond: BondParams):
        self.bond = bond

    def validate(self) -> None:
        bond = self.bond
        if bond.face_value <= 0:
            raise InvalidInputError("bond.face_value", bond.face_value)
        if bond.coupon_rate < 0:
            raise InvalidInputError("bond.coupon_rate", bond.coupon_rate, "must be non-negative")
        _check_periods(bond.maturity_years)

    def price(self, yield_rate):
        self.validate()
        return price_bond(self.bond.face_value, self.bond.coupon_rate, yield_rate, self.bond.maturity_years)
