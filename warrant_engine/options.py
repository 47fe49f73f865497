from __future__ import annotations

from typing import Tuple

import numpy as np

from .distributions import norm_cdf
from .errors import InvalidInputError
from .utils import as_output


def validate_option_inputs(underlying, strike: float, volatility: float) -> None:
    if np.any(np.asarray(underlying, dtype=float) <= 0):
        raise InvalidInputError("underlying_price", underlying)
    if strike <= 0:
        raise InvalidInputError("strike", strike)
    if volatility <= 0:
        raise InvalidInputError("volatility", volatility)


def intrinsic_value(underlying, strike: float, is_put: bool):
    s = np.asarray(underlying, dtype=float)
    payoff = strike - s if is_put else s - strike
    return as_output(np.maximum(0.0, payoff))


def d1_d2(underlying, strike: float, volatility: float, time_to_expiry: float, rate: float) -> Tuple:
    """
    d1 = (ln(S/K) + (r + sigma^2/2) T) / (sigma sqrt(T)),  d2 = d1 - sigma sqrt(T)
    """
    s = np.asarray(underlying, dtype=float)
    vol_sqrt_t = volatility * np.sqrt(time_to_expiry)
    d1 = (np.log(s / strike) + (rate + 0.5 * volatility**2) * time_to_expiry) / vol_sqrt_t
    return d1, d1 - vol_sqrt_t


def warrant_value(
    underlying,
    strike: float,
    volatility: float,
    time_to_expiry: float,
    discount_rate: float,
    is_put: bool,
):
    """
    Black-Scholes value of a European put/call on the bond price.

    At or past expiry (time_to_expiry <= 0) only the intrinsic value is left.
    underlying may be an array of bond prices.
    """
    validate_option_inputs(underlying, strike, volatility)

    if time_to_expiry <= 0:
        return intrinsic_value(underlying, strike, is_put)

    s = np.asarray(underlying, dtype=float)
    d1, d2 = d1_d2(s, strike, volatility, time_to_expiry, discount_rate)
    pv_strike = strike * np.exp(-discount_rate * time_to_expiry)

    if is_put:
        value = pv_strike * norm_cdf(-d2) - s * norm_cdf(-d1)
    else:
        value = s * norm_cdf(d1) - pv_strike * norm_cdf(d2)

    return as_output(value)
