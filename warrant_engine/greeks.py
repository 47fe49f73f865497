from __future__ import annotations

import numpy as np

from .distributions import norm_cdf, norm_pdf
from .models import Greeks
from .options import d1_d2, validate_option_inputs


def compute_greeks(
    underlying: float,
    strike: float,
    volatility: float,
    time_to_expiry: float,
    rate: float,
    is_put: bool,
) -> Greeks:
    """
    Closed-form sensitivities of the Black-Scholes warrant value.

    Scaling follows the display conventions:
    - vega: per 1 percentage point of volatility
    - theta: per calendar day
    - rho: per 1 percentage point of the discount rate

    A settled warrant (time_to_expiry <= 0) has no sensitivities left.
    """
    validate_option_inputs(underlying, strike, volatility)

    if time_to_expiry <= 0:
        return Greeks()

    s = float(underlying)
    t = float(time_to_expiry)
    sqrt_t = np.sqrt(t)

    d1, d2 = d1_d2(s, strike, volatility, t, rate)
    d1, d2 = float(d1), float(d2)
    pdf_d1 = norm_pdf(d1)
    pv_strike = strike * np.exp(-rate * t)

    gamma = pdf_d1 / (s * volatility * sqrt_t)
    vega = s * sqrt_t * pdf_d1 / 100.0
    decay = -(s * pdf_d1 * volatility) / (2.0 * sqrt_t)

    if is_put:
        delta = norm_cdf(d1) - 1.0
        theta = (decay + rate * pv_strike * norm_cdf(-d2)) / 365.0
        rho = -t * pv_strike * norm_cdf(-d2) / 100.0
    else:
        delta = norm_cdf(d1)
        theta = (decay - rate * pv_strike * norm_cdf(d2)) / 365.0
        rho = t * pv_strike * norm_cdf(d2) / 100.0

    return Greeks(
        delta=float(delta),
        gamma=float(gamma),
        vega=float(vega),
        theta=float(theta),
        rho=float(rho),
    )
