"""
Standard normal CDF/PDF.

The CDF uses the Abramowitz & Stegun 7.1.26 rational approximation of erf
(absolute error below 1e-7) so pricing does not depend on a library erf.
"""
from __future__ import annotations

import numpy as np

from .utils import as_output

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_SQRT_2 = np.sqrt(2.0)
_SQRT_2PI = np.sqrt(2.0 * np.pi)


def norm_cdf(x):
    x = np.asarray(x, dtype=float)

    sign = np.where(x < 0, -1.0, 1.0)
    z = np.abs(x) / _SQRT_2
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    y = 1.0 - poly * np.exp(-z * z)

    # cdf(x) + cdf(-x) == 1 by construction
    return as_output(0.5 * (1.0 + sign * y))


def norm_pdf(x):
    x = np.asarray(x, dtype=float)
    return as_output(np.exp(-0.5 * x * x) / _SQRT_2PI)
