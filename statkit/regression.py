"""Simple (one predictor) least-squares linear regression.

``linear_regression`` produces the fit itself: slope, intercept and the
per-point predictions and residuals. ``regression_diagnostics`` adds the
goodness-of-fit and standard-error figures used for reporting.
"""

from __future__ import annotations

import math
from typing import Dict, Sequence

import numpy as np

from .correlation import covariance
from .descriptive import mean, variance
from .distributions import normal_quantile
from .errors import InvalidDataError
from .validation import validate_paired


def linear_regression(x: Sequence[float], y: Sequence[float]) -> Dict[str, object]:
    """Fit ``y = slope * x + intercept`` by ordinary least squares.

    Args:
        x (Sequence[float]): Independent variable.
        y (Sequence[float]): Dependent variable, same length as ``x``.

    Returns:
        dict: ``slope`` (sample covariance over sample variance of ``x``),
        ``intercept`` (``mean(y) - slope * mean(x)``), ``predictions`` (one
        fitted value per ``x``) and ``residuals`` (``y - prediction``).

    Raises:
        InvalidDataError: If the lengths differ, a value is not numeric, or
            ``x`` is constant.
        InsufficientDataError: If fewer than two pairs are given.
    """
    x_arr, y_arr = validate_paired(x, y)
    cov = covariance(x_arr, y_arr, sample=True)
    var_x = variance(x_arr, sample=True)
    if var_x == 0:
        raise InvalidDataError("Regression is undefined when x has zero variance")

    slope = cov / var_x
    intercept = mean(y_arr) - slope * mean(x_arr)
    yhat = intercept + slope * x_arr
    resid = y_arr - yhat

    return {
        "slope": float(slope),
        "intercept": float(intercept),
        "predictions": yhat.tolist(),
        "residuals": resid.tolist(),
    }


def regression_diagnostics(x: Sequence[float], y: Sequence[float]) -> Dict[str, float]:
    """Fit a straight line and report its scatter statistics.

    Args:
        x (Sequence[float]): Independent variable.
        y (Sequence[float]): Dependent variable, same length as ``x``.

    Returns:
        dict[str, float]: ``slope``, ``intercept``, ``r_squared``, ``n``,
        ``dof`` (``n - 2``), ``mse``, ``ssxx``, ``xbar``, ``se_slope``,
        ``se_intercept``, ``ci95_slope`` and ``ci95_intercept`` (95%
        half-widths).

    Raises:
        InvalidDataError: Same conditions as :func:`linear_regression`.
        InsufficientDataError: If fewer than two pairs are given.

    Note:
        ``r_squared`` is NaN when ``y`` is constant. With only two points
        there are no residual degrees of freedom, so ``mse`` is infinite and
        the standard errors and half-widths are NaN. Half-widths use the
        normal critical value rather than Student's t, matching the p-values
        reported by ``statkit.hypothesis``.
    """
    fit = linear_regression(x, y)
    x_arr, y_arr = validate_paired(x, y)
    resid = np.asarray(fit["residuals"], dtype=float)
    n = int(len(x_arr))

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - mean(y_arr)) ** 2))
    r2 = 1.0 - sse / sst if sst > 0 else math.nan

    dof = n - 2
    xbar = mean(x_arr)
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    mse = sse / dof if dof > 0 else math.inf

    se_m = math.nan
    se_b = math.nan
    ci95_m = math.nan
    ci95_b = math.nan

    if dof > 0:
        se_m = math.sqrt(mse / ssxx)
        se_b = math.sqrt(mse * (1.0 / n + (xbar**2) / ssxx))
        z_crit = normal_quantile(0.975)
        ci95_m = z_crit * se_m
        ci95_b = z_crit * se_b

    return {
        "slope": fit["slope"],
        "intercept": fit["intercept"],
        "r_squared": r2,
        "n": n,
        "dof": dof,
        "mse": mse,
        "ssxx": ssxx,
        "xbar": xbar,
        "se_slope": se_m,
        "se_intercept": se_b,
        "ci95_slope": ci95_m,
        "ci95_intercept": ci95_b,
    }
