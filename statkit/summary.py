"""Tabular summaries built on the core statistics.

These helpers turn columns of a :class:`pandas.DataFrame` into one-row-per-
variable summary tables and pairwise group comparisons. Unlike the core
functions, they tolerate missing cells (non-finite values are dropped) and
report statistics whose minimum sample size is not met as NaN.
"""

from __future__ import annotations

import logging
import math
import warnings
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .descriptive import (
    kurtosis,
    mean,
    median,
    quartiles,
    skewness,
    standard_deviation,
    variance,
)
from .errors import InsufficientDataError
from .hypothesis import t_test_two_sample_independent
from .schema import COLUMNS
from .validation import to_array

logger = logging.getLogger(__name__)


def _or_nan(func, *args, **kwargs) -> float:
    try:
        return func(*args, **kwargs)
    except InsufficientDataError:
        return math.nan


def describe(data: Sequence[float], sample: bool = True) -> Dict[str, float]:
    """Compute the standard descriptive statistics of one dataset.

    Args:
        data (Sequence[float]): Input values.
        sample (bool, optional): Use sample (``n - 1``) estimators for the
            variance and standard deviation. Defaults to ``True``.

    Returns:
        dict[str, float]: Keyed by the labels of
        :class:`statkit.schema.SummaryColumns`. Statistics that need more
        observations than available are NaN.

    Raises:
        EmptyDataError: If ``data`` is empty.
        InvalidDataError: If ``data`` contains a non-numeric or non-finite
            value.
    """
    arr = to_array(data)
    lo = float(np.min(arr))
    hi = float(np.max(arr))

    q1 = q3 = iqr = math.nan
    if len(arr) >= 2:
        q = quartiles(arr)
        q1, q3, iqr = q["Q1"], q["Q3"], q["IQR"]

    return {
        COLUMNS.n: int(len(arr)),
        COLUMNS.mean: mean(arr),
        COLUMNS.median: median(arr),
        COLUMNS.std: _or_nan(standard_deviation, arr, sample=sample),
        COLUMNS.variance: _or_nan(variance, arr, sample=sample),
        COLUMNS.min: lo,
        COLUMNS.max: hi,
        COLUMNS.range: hi - lo,
        COLUMNS.q1: q1,
        COLUMNS.q3: q3,
        COLUMNS.iqr: iqr,
        COLUMNS.skewness: _or_nan(skewness, arr),
        COLUMNS.kurtosis: _or_nan(kurtosis, arr),
    }


def _finite_values(series: pd.Series) -> np.ndarray:
    vals = pd.to_numeric(series, errors="coerce").to_numpy(dtype=float)
    return vals[np.isfinite(vals)]


def summarize(
    frame: pd.DataFrame,
    columns: Optional[Iterable[str]] = None,
    sample: bool = True,
) -> pd.DataFrame:
    """Summarize each numeric column of ``frame``.

    Args:
        frame (pandas.DataFrame): Input table.
        columns (Iterable[str], optional): Columns to summarize. Defaults to
            every numeric column.
        sample (bool, optional): Passed to :func:`describe`.

    Returns:
        pandas.DataFrame: One row per column with a ``variable`` column
        followed by the statistics of :func:`describe`. Columns without any
        finite value give ``n = 0`` and NaN statistics.

    Raises:
        KeyError: If a requested column is not in ``frame``.
    """
    if columns is None:
        columns = [c for c in frame.columns if pd.api.types.is_numeric_dtype(frame[c])]
    columns = list(columns)
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise KeyError(f"Columns not found in data: {missing}")

    rows: List[Dict] = []
    for col in columns:
        vals = _finite_values(frame[col])
        dropped = int(len(frame[col]) - len(vals))
        if dropped:
            logger.debug("Column %s: dropped %d non-finite values", col, dropped)

        if len(vals) == 0:
            row = {stat: math.nan for stat in COLUMNS.statistics()}
            row[COLUMNS.n] = 0
        else:
            row = describe(vals, sample=sample)
        rows.append({COLUMNS.variable: col, **row})

    return pd.DataFrame.from_records(
        rows, columns=[COLUMNS.variable] + COLUMNS.statistics()
    )


def compare_groups(
    frame: pd.DataFrame,
    value_col: str,
    group_col: str,
    equal_variance: bool = False,
) -> pd.DataFrame:
    """Run a two-sample t-test for every pair of groups.

    Args:
        frame (pandas.DataFrame): Long-form table.
        value_col (str): Column holding the measured values.
        group_col (str): Column holding the group labels.
        equal_variance (bool, optional): Pooled instead of Welch test.
            Defaults to ``False``.

    Returns:
        pandas.DataFrame: One row per pair with ``group_a``, ``group_b``,
        ``n_a``, ``n_b``, ``mean_a``, ``mean_b``, ``t_statistic``,
        ``p_value`` and ``degrees_of_freedom``. Groups are paired in sorted
        order.

    Raises:
        KeyError: If ``value_col`` or ``group_col`` is missing.
        InvalidDataError: If both groups of a pair have zero spread.

    Note:
        Groups with fewer than two finite values are skipped with a
        ``UserWarning``.
    """
    for col in (value_col, group_col):
        if col not in frame.columns:
            raise KeyError(f"Column not found in data: {col!r}")

    out_cols = [
        "group_a",
        "group_b",
        "n_a",
        "n_b",
        "mean_a",
        "mean_b",
        "t_statistic",
        "p_value",
        "degrees_of_freedom",
    ]

    groups = {}
    for label, group in frame.groupby(group_col, sort=True):
        vals = _finite_values(group[value_col])
        if len(vals) < 2:
            warnings.warn(
                f"Group {label!r} has {len(vals)} finite value(s); "
                f"at least 2 are needed for a t-test, skipping.",
                UserWarning,
                stacklevel=2,
            )
            continue
        groups[label] = vals

    rows = []
    for (label_a, a), (label_b, b) in combinations(groups.items(), 2):
        result = t_test_two_sample_independent(a, b, equal_variance=equal_variance)
        rows.append(
            {
                "group_a": label_a,
                "group_b": label_b,
                "n_a": int(len(a)),
                "n_b": int(len(b)),
                "mean_a": mean(a),
                "mean_b": mean(b),
                **result,
            }
        )
    logger.info("Compared %d group pair(s) on %s", len(rows), value_col)
    return pd.DataFrame.from_records(rows, columns=out_cols)
