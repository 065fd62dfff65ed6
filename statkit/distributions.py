"""Normal distribution density, cumulative probability and quantile.

The CDF evaluates the five-term Abramowitz-Stegun error-function polynomial
with ``t = 1 / (1 + 0.5 |z|)``, not the published 0.3275911, and not
``math.erf``. Reported p-values elsewhere in the package depend on exactly this
form. It is symmetric and exact at the mean but departs from the true normal
CDF by up to about 0.046 (``normal_cdf(1.96)`` is about 0.9822).

The quantile is Acklam's rational approximation of the inverse of the true
normal CDF (relative error below about 1.2e-9): a central rational function in
``q**2`` and a tail rational function in ``sqrt(-2 log p)``. It is therefore
not the exact inverse of ``normal_cdf``.
"""

from __future__ import annotations

import math

import numpy as np

from .errors import InvalidDataError
from .validation import require_finite, require_positive

ERF_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)
ERF_P = 0.5

# Highest-order coefficient first.
QUANTILE_CENTRAL_NUM = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
QUANTILE_CENTRAL_DEN = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
    1.0,
)
QUANTILE_TAIL_NUM = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
QUANTILE_TAIL_DEN = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
    1.0,
)
QUANTILE_P_LOW = 0.02425


def _check_params(mean: float, std_dev: float) -> tuple[float, float]:
    mean = require_finite(mean, "Mean")
    std_dev = require_positive(std_dev, "Standard deviation")
    return mean, std_dev


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Return the normal probability density at ``x``.

    Raises:
        InvalidDataError: If ``std_dev`` is not strictly positive, or any
            argument is not a finite number.
    """
    x = require_finite(x, "x")
    mean, std_dev = _check_params(mean, std_dev)
    exponent = -((x - mean) ** 2) / (2.0 * std_dev**2)
    return (1.0 / (std_dev * math.sqrt(2.0 * math.pi))) * math.exp(exponent)


def normal_cdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Return ``P(X <= x)`` for ``X ~ N(mean, std_dev**2)``.

    Args:
        x (float): Evaluation point.
        mean (float, optional): Distribution mean. Defaults to ``0.0``.
        std_dev (float, optional): Distribution standard deviation, strictly
            positive. Defaults to ``1.0``.

    Returns:
        float: Cumulative probability. Exactly ``0.5`` at ``x == mean``.

    Raises:
        InvalidDataError: If ``std_dev`` is not strictly positive, or any
            argument is not a finite number.

    Note:
        ``erf(z)`` is approximated as ``1 - P(t) * exp(-z**2)`` with
        ``t = 1 / (1 + 0.5 |z|)`` and ``P`` the fixed five-term polynomial,
        then given the sign of ``z``.
    """
    x = require_finite(x, "x")
    mean, std_dev = _check_params(mean, std_dev)

    z = (x - mean) / (std_dev * math.sqrt(2.0))
    t = 1.0 / (1.0 + ERF_P * abs(z))
    poly = sum(c * t ** (i + 1) for i, c in enumerate(ERF_COEFFICIENTS))
    erf = float(np.sign(z)) * (1.0 - poly * math.exp(-z * z))
    return 0.5 * (1.0 + erf)


def _horner(r: float, coefficients: tuple[float, ...]) -> float:
    result = 0.0
    for c in coefficients:
        result = result * r + c
    return result


def normal_quantile(p: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Return the ``p`` quantile of ``N(mean, std_dev**2)``.

    Args:
        p (float): Probability, strictly between 0 and 1.
        mean (float, optional): Distribution mean. Defaults to ``0.0``.
        std_dev (float, optional): Distribution standard deviation, strictly
            positive. Defaults to ``1.0``.

    Returns:
        float: ``mean + std_dev * z`` with ``z`` the standard normal quantile.
        ``p == 0.5`` returns ``mean`` exactly.

    Raises:
        InvalidDataError: If ``p`` is outside ``(0, 1)`` or ``std_dev`` is
            not strictly positive.
    """
    p = require_finite(p, "Probability")
    if p <= 0 or p >= 1:
        raise InvalidDataError(f"Probability must be between 0 and 1 exclusive, got {p!r}")
    mean, std_dev = _check_params(mean, std_dev)

    if p == 0.5:
        return mean

    q = p - 0.5
    if QUANTILE_P_LOW <= p <= 1.0 - QUANTILE_P_LOW:
        r = q * q
        z = q * _horner(r, QUANTILE_CENTRAL_NUM) / _horner(r, QUANTILE_CENTRAL_DEN)
    else:
        r = math.sqrt(-2.0 * math.log(min(p, 1.0 - p)))
        z = _horner(r, QUANTILE_TAIL_NUM) / _horner(r, QUANTILE_TAIL_DEN)
        if q > 0:
            z = -z

    return mean + std_dev * z
