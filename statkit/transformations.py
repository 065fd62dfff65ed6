"""Element-wise transformations: standardization, rescaling and ranking."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .descriptive import mean, standard_deviation
from .errors import InvalidDataError
from .validation import require_finite, to_array


def z_scores(data: Sequence[float], sample: bool = True) -> List[float]:
    """Return ``(x - mean) / std`` for every element of ``data``.

    Args:
        data (Sequence[float]): Input values.
        sample (bool, optional): Use the sample standard deviation (``n - 1``
            divisor). Defaults to ``True``.

    Raises:
        InvalidDataError: If the standard deviation is zero.
        InsufficientDataError: If ``sample`` is set and ``data`` has a single
            element.
    """
    arr = to_array(data)
    sd = standard_deviation(arr, sample=sample)
    if sd == 0:
        raise InvalidDataError("Cannot compute z-scores: standard deviation is zero")
    return ((arr - mean(arr)) / sd).tolist()


def min_max_normalize(
    data: Sequence[float], target_min: float = 0.0, target_max: float = 1.0
) -> List[float]:
    """Linearly rescale ``data`` so its minimum maps to ``target_min`` and its
    maximum to ``target_max``.

    Raises:
        InvalidDataError: If all values are equal.
    """
    arr = to_array(data)
    target_min = require_finite(target_min, "target_min")
    target_max = require_finite(target_max, "target_max")

    lo = np.min(arr)
    hi = np.max(arr)
    if hi == lo:
        raise InvalidDataError("Cannot normalize: all values in the dataset are the same")
    return (((arr - lo) / (hi - lo)) * (target_max - target_min) + target_min).tolist()


def rank(data: Sequence[float], ascending: bool = True) -> List[float]:
    """Return 1-based ranks, averaging the ranks of tied values.

    Args:
        data (Sequence[float]): Input values.
        ascending (bool, optional): Rank the smallest value 1. When ``False``
            the largest value gets rank 1. Defaults to ``True``.

    Returns:
        list[float]: Rank of each element, in the original order. A run of
        equal values occupying sorted positions ``i..j`` all receive
        ``(i + j) / 2``.

    Example:
        >>> rank([1, 1, 2])
        [1.5, 1.5, 3.0]
    """
    values = to_array(data)
    keys = values if ascending else -values
    order = np.argsort(keys, kind="stable")
    n = len(values)

    ranks = np.empty(n, dtype=float)
    i = 0
    while i < n:
        j = i
        while j < n - 1 and values[order[j]] == values[order[j + 1]]:
            j += 1
        ranks[order[i : j + 1]] = (i + j + 2) / 2.0
        i = j + 1
    return ranks.tolist()
