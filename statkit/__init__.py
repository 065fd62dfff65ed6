"""
A Python package of descriptive and inferential statistics on finite datasets.

Every operation is a pure function of its arguments: it validates its input,
computes, and returns a float, a list/set of floats or a small dict. Failures
raise subclasses of ``StatisticsError``.

Modules:
    - descriptive: mean, median, mode, range, variance, quartiles, percentiles,
      skewness and kurtosis.
    - correlation: covariance and Pearson correlation.
    - regression: simple least-squares regression and fit diagnostics.
    - distributions: normal PDF, CDF and quantile.
    - hypothesis: one-sample, two-sample and paired t-tests.
    - transformations: z-scores, min-max normalization and ranking.
    - summary / output / plotting: pandas tables, CSV export and figures.
"""

__version__ = "1.0.0"

from .correlation import correlation, covariance
from .descriptive import (
    data_range,
    kurtosis,
    mean,
    median,
    mode,
    percentile,
    quartiles,
    skewness,
    standard_deviation,
    variance,
)
from .distributions import normal_cdf, normal_pdf, normal_quantile
from .errors import (
    EmptyDataError,
    InsufficientDataError,
    InvalidDataError,
    StatisticsError,
)
from .hypothesis import t_test_one_sample, t_test_paired, t_test_two_sample_independent
from .regression import linear_regression, regression_diagnostics
from .summary import compare_groups, describe, summarize
from .transformations import min_max_normalize, rank, z_scores

__all__ = [
    # Errors
    "StatisticsError",
    "EmptyDataError",
    "InvalidDataError",
    "InsufficientDataError",
    # Descriptive
    "mean",
    "median",
    "mode",
    "data_range",
    "variance",
    "standard_deviation",
    "quartiles",
    "percentile",
    "skewness",
    "kurtosis",
    # Correlation and regression
    "covariance",
    "correlation",
    "linear_regression",
    "regression_diagnostics",
    # Distributions
    "normal_pdf",
    "normal_cdf",
    "normal_quantile",
    # Hypothesis testing
    "t_test_one_sample",
    "t_test_two_sample_independent",
    "t_test_paired",
    # Transformations
    "z_scores",
    "min_max_normalize",
    "rank",
    # Tables
    "describe",
    "summarize",
    "compare_groups",
]
