"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels.

    These labels are shared by ``statkit.summary``, ``statkit.output`` and
    ``statkit.plotting`` so tables written to disk and tables read back for
    plotting agree.

    Attributes:
        variable: Name of the summarized input column.
        n: Number of finite observations used.
        std: Standard deviation (sample or population, as requested).
        q1, q3, iqr: Exclusive-median quartiles and their spread.
        skewness: Adjusted Fisher-Pearson skewness; NaN below 3 observations.
        kurtosis: Excess kurtosis; NaN below 4 observations.
    """

    variable: str = "variable"
    n: str = "n"
    mean: str = "mean"
    median: str = "median"
    std: str = "std"
    variance: str = "variance"
    min: str = "min"
    max: str = "max"
    range: str = "range"
    q1: str = "q1"
    q3: str = "q3"
    iqr: str = "iqr"
    skewness: str = "skewness"
    kurtosis: str = "kurtosis"

    def statistics(self) -> list[str]:
        """Return the per-variable statistic labels in table order."""
        return [
            self.n,
            self.mean,
            self.median,
            self.std,
            self.variance,
            self.min,
            self.max,
            self.range,
            self.q1,
            self.q3,
            self.iqr,
            self.skewness,
            self.kurtosis,
        ]


COLUMNS = SummaryColumns()
