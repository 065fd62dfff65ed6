"""Covariance and Pearson correlation for paired datasets."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .descriptive import mean, standard_deviation
from .validation import require_min_count, validate_paired


def covariance(x: Sequence[float], y: Sequence[float], sample: bool = False) -> float:
    """Return the covariance of two index-aligned datasets.

    Args:
        x (Sequence[float]): First dataset.
        y (Sequence[float]): Second dataset, same length as ``x``.
        sample (bool, optional): Divide by ``n - 1`` instead of ``n``.
            Defaults to ``False``.

    Raises:
        InvalidDataError: If the lengths differ or a value is not numeric.
        InsufficientDataError: If ``sample`` is set and fewer than two pairs
            are given.
    """
    x_arr, y_arr = validate_paired(x, y)
    n = len(x_arr)
    if sample:
        require_min_count(n, 2, "Sample covariance")

    products = (x_arr - mean(x_arr)) * (y_arr - mean(y_arr))
    divisor = n - 1 if sample else n
    return float(np.sum(products) / divisor)


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the Pearson correlation coefficient of ``x`` and ``y``.

    Uses the sample covariance over the product of sample standard
    deviations. Two constant datasets are treated as perfectly correlated
    (``1.0``); exactly one constant dataset gives ``0.0``.

    Raises:
        InvalidDataError: If the lengths differ or a value is not numeric.
        InsufficientDataError: If fewer than two pairs are given.
    """
    cov = covariance(x, y, sample=True)
    sx = standard_deviation(x, sample=True)
    sy = standard_deviation(y, sample=True)

    if sx == 0 or sy == 0:
        return 1.0 if sx == 0 and sy == 0 else 0.0
    return float(np.clip(cov / (sx * sy), -1.0, 1.0))
