"""Student t-tests: one-sample, two-sample independent and paired.

Every test returns ``{"t_statistic", "p_value", "degrees_of_freedom"}``.

The two-sided p-value is ``2 * (1 - Phi(|t|))`` with ``Phi`` the normal CDF
from ``statkit.distributions``. This is a large-sample approximation to the
t distribution; degrees of freedom are reported but do not enter the p-value,
so for small samples the p-value is smaller than the exact one.
"""

from __future__ import annotations

import math
from typing import Dict, Sequence

from .descriptive import mean, variance
from .distributions import normal_cdf
from .errors import InvalidDataError
from .validation import require_finite, require_min_count, to_array, validate_paired


def _two_sided_p_value(t_stat: float) -> float:
    return 2.0 * (1.0 - normal_cdf(abs(t_stat)))


def _result(t_stat: float, dof: float) -> Dict[str, float]:
    return {
        "t_statistic": float(t_stat),
        "p_value": _two_sided_p_value(t_stat),
        "degrees_of_freedom": dof,
    }


def t_test_one_sample(data: Sequence[float], mu: float = 0.0) -> Dict[str, float]:
    """Test whether the mean of ``data`` differs from ``mu``.

    Args:
        data (Sequence[float]): Sample values, at least two.
        mu (float, optional): Hypothesized population mean. Defaults to
            ``0.0``.

    Returns:
        dict[str, float]: ``t_statistic`` (``(mean - mu) / (s / sqrt(n))``),
        ``p_value`` and ``degrees_of_freedom`` (``n - 1``).

    Raises:
        InsufficientDataError: If ``data`` has fewer than two elements.
        InvalidDataError: If ``data`` has zero spread, leaving the standard
            error at zero.
    """
    arr = to_array(data)
    mu = require_finite(mu, "mu")
    n = len(arr)
    require_min_count(n, 2, "One-sample t-test")

    se = math.sqrt(variance(arr, sample=True)) / math.sqrt(n)
    if se == 0:
        raise InvalidDataError("t-test is undefined when the standard error is zero")

    t_stat = (mean(arr) - mu) / se
    return _result(t_stat, n - 1)


def t_test_two_sample_independent(
    data1: Sequence[float], data2: Sequence[float], equal_variance: bool = False
) -> Dict[str, float]:
    """Compare the means of two independent samples.

    Args:
        data1 (Sequence[float]): First sample, at least two values.
        data2 (Sequence[float]): Second sample, at least two values.
        equal_variance (bool, optional): Pool the variances (Student's test)
            instead of using Welch's test. Defaults to ``False``.

    Returns:
        dict[str, float]: ``t_statistic`` for ``mean1 - mean2``, ``p_value``
        and ``degrees_of_freedom``: ``n1 + n2 - 2`` when pooled, the
        Welch-Satterthwaite estimate otherwise.

    Raises:
        InsufficientDataError: If either sample has fewer than two values.
        InvalidDataError: If both samples have zero spread.
    """
    a = to_array(data1, "data1")
    b = to_array(data2, "data2")
    n1, n2 = len(a), len(b)
    require_min_count(min(n1, n2), 2, "Two-sample t-test (per sample)")

    v1 = variance(a, sample=True)
    v2 = variance(b, sample=True)

    se1 = v1 / n1
    se2 = v2 / n2
    if equal_variance:
        sp2 = ((n1 - 1) * v1 + (n2 - 1) * v2) / (n1 + n2 - 2)
        se = math.sqrt(sp2 * (1.0 / n1 + 1.0 / n2))
    else:
        se = math.sqrt(se1 + se2)

    if se == 0:
        raise InvalidDataError("t-test is undefined when the standard error is zero")

    if equal_variance:
        dof = n1 + n2 - 2
    else:
        # Welch-Satterthwaite
        dof = (se1 + se2) ** 2 / (se1**2 / (n1 - 1) + se2**2 / (n2 - 1))

    t_stat = (mean(a) - mean(b)) / se
    return _result(t_stat, dof)


def t_test_paired(data1: Sequence[float], data2: Sequence[float]) -> Dict[str, float]:
    """Paired t-test: a one-sample test of ``data1 - data2`` against zero.

    Raises:
        InvalidDataError: If the samples differ in length.
        InsufficientDataError: If fewer than two pairs are given.
    """
    a, b = validate_paired(data1, data2, names=("data1", "data2"))
    return t_test_one_sample(a - b, mu=0.0)
