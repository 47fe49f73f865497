import numpy as np
import pytest
from scipy.stats import norm

from warrant_engine.distributions import norm_cdf, norm_pdf
from warrant_engine.errors import InvalidInputError
from warrant_engine.options import intrinsic_value, warrant_value


def test_norm_cdf_matches_reference():
    xs = np.linspace(-8.0, 8.0, 801)
    err = np.abs(norm_cdf(xs) - norm.cdf(xs))
    assert err.max() < 1e-7, f"Max CDF error {err.max()}"


def test_norm_cdf_symmetry_and_bounds():
    xs = np.linspace(-40.0, 40.0, 161)
    cdf = norm_cdf(xs)
    assert np.all((cdf >= 0.0) & (cdf <= 1.0))
    assert np.allclose(cdf + norm_cdf(-xs), 1.0, rtol=0.0, atol=1e-8)
    assert abs(norm_cdf(0.0) - 0.5) < 1e-8
    assert isinstance(norm_cdf(0.3), float)


def test_norm_pdf_matches_reference():
    xs = np.linspace(-6.0, 6.0, 121)
    assert np.allclose(norm_pdf(xs), norm.pdf(xs), atol=1e-14)


@pytest.mark.parametrize("S,K,sigma,T,r", [
    (95.84, 100.0, 0.15, 1.0, 0.035),
    (120.0, 100.0, 0.30, 0.25, 0.01),
    (80.0, 100.0, 0.05, 3.0, 0.06),
    (100.0, 100.0, 0.50, 0.5, 0.0),
])
def test_put_call_parity(S, K, sigma, T, r):
    put = warrant_value(S, K, sigma, T, r, is_put=True)
    call = warrant_value(S, K, sigma, T, r, is_put=False)
    assert abs((put - call) - (K * np.exp(-r * T) - S)) < 1e-6


@pytest.mark.parametrize("S,is_put", [(90.0, True), (110.0, True), (90.0, False), (110.0, False)])
def test_converges_to_intrinsic_near_expiry(S, is_put):
    v = warrant_value(S, 100.0, 0.2, 1e-8, 0.035, is_put)
    assert abs(v - intrinsic_value(S, 100.0, is_put)) < 1e-4


def test_expired_warrant_is_intrinsic_only():
    assert warrant_value(95.0, 100.0, 0.15, 0.0, 0.035, True) == pytest.approx(5.0)
    assert warrant_value(95.0, 100.0, 0.15, -0.1, 0.035, False) == 0.0
    assert warrant_value(105.0, 100.0, 0.15, 0.0, 0.035, False) == pytest.approx(5.0)


def test_put_carries_time_value():
    """Bond at 95.84 against a 100 strike: one year of optionality on top of 4.16 intrinsic."""
    v = warrant_value(95.84, 100.0, 0.15, 1.0, 0.035, True)
    assert v > 100.0 - 95.84, f"Put value {v} should exceed intrinsic"


def test_vectorized_underlying():
    prices = np.array([85.0, 95.0, 105.0])
    values = warrant_value(prices, 100.0, 0.15, 1.0, 0.035, True)
    assert values.shape == (3,)
    assert np.all(np.diff(values) < 0.0), "Put value must fall as the bond price rises"
    for s, v in zip(prices, values):
        assert v == pytest.approx(warrant_value(float(s), 100.0, 0.15, 1.0, 0.035, True), abs=1e-12)


@pytest.mark.parametrize("kwargs,param", [
    (dict(underlying=0.0, strike=100.0, volatility=0.2), "underlying_price"),
    (dict(underlying=95.0, strike=-1.0, volatility=0.2), "strike"),
    (dict(underlying=95.0, strike=100.0, volatility=0.0), "volatility"),
])
def test_invalid_inputs_raise(kwargs, param):
    with pytest.raises(InvalidInputError) as err:
        warrant_value(time_to_expiry=1.0, discount_rate=0.03, is_put=True, **kwargs)
    assert err.value.parameter == param
    assert isinstance(err.value, ValueError)
