"""Descriptive statistics over a single dataset.

All functions validate their input first (see ``statkit.validation``) and
return plain Python floats, so results can be compared, serialized and
formatted without numpy scalar types leaking out.

The ``sample`` flag selects the estimator: ``False`` divides by ``n``
(population), ``True`` divides by ``n - 1`` (sample).
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Sequence, Set

import numpy as np

from .errors import InvalidDataError
from .validation import require_finite, require_min_count, to_array, validate


def _center(arr: np.ndarray) -> float:
    # constant data must have zero spread, so skip the rounding of sum / n
    if np.min(arr) == np.max(arr):
        return float(arr[0])
    n = len(arr)
    with np.errstate(over="ignore"):
        total = np.sum(arr)
    if np.isfinite(total):
        return float(total / n)
    # the sum left the float range; scale each term first
    return float(np.sum(arr / n))


def mean(data: Sequence[float]) -> float:
    """Return the arithmetic mean of ``data``."""
    return _center(to_array(data))


def _median_of_sorted(sorted_arr: np.ndarray) -> float:
    n = len(sorted_arr)
    mid = (n - 1) // 2
    if n % 2:
        return float(sorted_arr[mid])
    return float((sorted_arr[mid] + sorted_arr[mid + 1]) / 2.0)


def median(data: Sequence[float]) -> float:
    """Return the middle value of ``data``.

    For an even number of elements the two central values are averaged.
    """
    return _median_of_sorted(np.sort(to_array(data)))


def mode(data: Sequence[float]) -> Set[float]:
    """Return every value that occurs with the highest frequency.

    Args:
        data (Sequence[float]): Input values.

    Returns:
        set: All values attaining the maximum count. Values keep the type they
        had in ``data``; equal values of different type (``2`` and ``2.0``)
        are counted together and reported as the first one seen.
    """
    counts = Counter(validate(data))
    top = max(counts.values())
    return {value for value, count in counts.items() if count == top}


def data_range(data: Sequence[float]) -> float:
    """Return ``max(data) - min(data)``."""
    arr = to_array(data)
    return float(np.max(arr) - np.min(arr))


def variance(data: Sequence[float], sample: bool = False) -> float:
    """Return the mean squared deviation from the mean.

    Args:
        data (Sequence[float]): Input values.
        sample (bool, optional): Divide by ``n - 1`` instead of ``n``.
            Defaults to ``False``.

    Raises:
        InsufficientDataError: If ``sample`` is set and ``data`` has fewer
            than two elements.
    """
    arr = to_array(data)
    n = len(arr)
    if sample:
        require_min_count(n, 2, "Sample variance")
    deviations = arr - _center(arr)
    divisor = n - 1 if sample else n
    return float(np.sum(deviations**2) / divisor)


def standard_deviation(data: Sequence[float], sample: bool = False) -> float:
    """Return the square root of :func:`variance` with the same ``sample`` rule."""
    return math.sqrt(variance(data, sample=sample))


def quartiles(data: Sequence[float]) -> Dict[str, float]:
    """Compute quartiles with the exclusive-median method.

    Q1 is the median of the elements below index ``floor(n/2)`` of the sorted
    data, Q3 the median of the elements from index ``ceil(n/2)`` on. For odd
    ``n`` the overall median belongs to neither half.

    Args:
        data (Sequence[float]): Input values, at least two.

    Returns:
        dict[str, float]: Keys ``Q1``, ``Q2`` (the median), ``Q3`` and ``IQR``
        (``Q3 - Q1``).

    Raises:
        InsufficientDataError: If ``data`` has a single element, which leaves
            both halves empty.
    """
    sorted_arr = np.sort(to_array(data))
    n = len(sorted_arr)
    require_min_count(n, 2, "Quartiles")

    q1 = _median_of_sorted(sorted_arr[: n // 2])
    q2 = _median_of_sorted(sorted_arr)
    q3 = _median_of_sorted(sorted_arr[math.ceil(n / 2) :])
    return {"Q1": q1, "Q2": q2, "Q3": q3, "IQR": q3 - q1}


def percentile(data: Sequence[float], p: float) -> float:
    """Return the ``p``-th percentile using linear interpolation between ranks.

    The fractional rank is ``(p / 100) * (n - 1)`` on the ascending data. An
    integral rank returns that element; otherwise the two neighbours are
    weighted by distance.

    Raises:
        InvalidDataError: If ``p`` is outside ``[0, 100]``.
    """
    sorted_arr = np.sort(to_array(data))
    p = require_finite(p, "Percentile")
    if not 0 <= p <= 100:
        raise InvalidDataError(f"Percentile must be between 0 and 100, got {p!r}")

    pos = (p / 100.0) * (len(sorted_arr) - 1)
    lo = math.floor(pos)
    hi = math.ceil(pos)
    if lo == hi:
        return float(sorted_arr[lo])
    return float(sorted_arr[lo] * (hi - pos) + sorted_arr[hi] * (pos - lo))


def _standardized_moment_sum(arr: np.ndarray, power: int) -> float | None:
    """Sum of ``((x - mean) / sigma) ** power`` using the population sigma.

    Returns ``None`` when sigma is exactly zero.
    """
    n = len(arr)
    mu = _center(arr)
    sigma = math.sqrt(float(np.sum((arr - mu) ** 2) / n))
    if sigma == 0:
        return None
    return float(np.sum(((arr - mu) / sigma) ** power))


def skewness(data: Sequence[float]) -> float:
    """Return the adjusted Fisher-Pearson skewness.

    Computed as ``n / ((n - 1)(n - 2)) * sum(((x - mean) / sigma) ** 3)``
    where ``sigma`` is the population standard deviation. Constant data has
    zero skewness.

    Raises:
        InsufficientDataError: If ``data`` has fewer than three elements.
    """
    arr = to_array(data)
    n = len(arr)
    require_min_count(n, 3, "Skewness")

    total = _standardized_moment_sum(arr, 3)
    if total is None:
        return 0.0
    return (n / ((n - 1) * (n - 2))) * total


def kurtosis(data: Sequence[float]) -> float:
    """Return the excess kurtosis (zero for a normal distribution).

    Computed as ``n(n + 1) / ((n - 1)(n - 2)(n - 3)) * sum(z ** 4)
    - 3(n - 1)^2 / ((n - 2)(n - 3))`` with ``z`` standardized by the
    population standard deviation. Constant data returns ``-3``.

    Raises:
        InsufficientDataError: If ``data`` has fewer than four elements.
    """
    arr = to_array(data)
    n = len(arr)
    require_min_count(n, 4, "Kurtosis")

    total = _standardized_moment_sum(arr, 4)
    if total is None:
        return -3.0
    prefactor = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3))
    correction = (3 * (n - 1) ** 2) / ((n - 2) * (n - 3))
    return prefactor * total - correction
