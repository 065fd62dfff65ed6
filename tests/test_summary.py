"""Tests for tabular summaries and pairwise group comparisons."""

import math

import numpy as np
import pandas as pd
import pytest

from statkit.errors import EmptyDataError, InvalidDataError
from statkit.schema import COLUMNS
from statkit.summary import compare_groups, describe, summarize


def _make_long_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "group": ["a", "a", "a", "b", "b", "b", "b", "c"],
            "value": [1.0, 2.0, 3.0, 5.0, 6.5, 7.0, np.nan, 9.0],
        }
    )


def test_describe_known_dataset():
    stats = describe([1, 2, 3, 4, 5, 6, 7, 8])
    assert stats[COLUMNS.n] == 8
    assert stats[COLUMNS.mean] == 4.5
    assert stats[COLUMNS.median] == 4.5
    assert stats[COLUMNS.q1] == 2.5
    assert stats[COLUMNS.q3] == 6.5
    assert stats[COLUMNS.iqr] == 4.0
    assert stats[COLUMNS.range] == 7.0
    assert stats[COLUMNS.variance] == pytest.approx(6.0)
    assert stats[COLUMNS.skewness] == pytest.approx(0.0, abs=1e-12)


def test_describe_population_estimators():
    stats = describe([2, 4, 4, 4, 5, 5, 7, 9], sample=False)
    assert stats[COLUMNS.std] == pytest.approx(2.0)


def test_describe_small_samples_give_nan():
    two = describe([1, 2])
    assert two[COLUMNS.std] == pytest.approx(math.sqrt(0.5))
    assert math.isnan(two[COLUMNS.skewness])
    assert math.isnan(two[COLUMNS.kurtosis])

    one = describe([7])
    assert one[COLUMNS.mean] == 7.0
    assert math.isnan(one[COLUMNS.std])
    assert math.isnan(one[COLUMNS.q1])
    assert math.isnan(one[COLUMNS.iqr])


def test_describe_rejects_bad_data():
    with pytest.raises(EmptyDataError):
        describe([])
    with pytest.raises(InvalidDataError):
        describe([1.0, np.nan])


def test_summarize_numeric_columns_only():
    frame = pd.DataFrame(
        {
            "a": [1.0, 2.0, 3.0, np.nan],
            "empty": [np.nan] * 4,
            "label": ["w", "x", "y", "z"],
        }
    )
    table = summarize(frame)
    assert list(table.columns) == [COLUMNS.variable] + COLUMNS.statistics()
    assert table[COLUMNS.variable].tolist() == ["a", "empty"]

    row_a = table.set_index(COLUMNS.variable).loc["a"]
    assert row_a[COLUMNS.n] == 3
    assert row_a[COLUMNS.mean] == pytest.approx(2.0)

    row_empty = table.set_index(COLUMNS.variable).loc["empty"]
    assert row_empty[COLUMNS.n] == 0
    assert math.isnan(row_empty[COLUMNS.mean])


def test_summarize_selected_columns_and_missing():
    frame = pd.DataFrame({"a": [1, 2, 3], "b": [4, 5, 6]})
    table = summarize(frame, columns=["b"])
    assert table[COLUMNS.variable].tolist() == ["b"]
    assert table.loc[0, COLUMNS.mean] == pytest.approx(5.0)

    with pytest.raises(KeyError):
        summarize(frame, columns=["nope"])


def test_compare_groups_skips_small_groups():
    with pytest.warns(UserWarning, match="'c'"):
        table = compare_groups(_make_long_df(), "value", "group")

    assert len(table) == 1
    row = table.iloc[0]
    assert row["group_a"] == "a"
    assert row["group_b"] == "b"
    assert row["n_a"] == 3
    assert row["n_b"] == 3
    assert row["mean_a"] == pytest.approx(2.0)
    assert row["t_statistic"] < 0
    assert 0.0 < row["p_value"] < 1.0


def test_compare_groups_pairs_every_group():
    frame = pd.DataFrame(
        {
            "g": ["x"] * 3 + ["y"] * 3 + ["z"] * 3,
            "v": [1, 2, 3, 2, 3, 4, 5, 6, 8],
        }
    )
    table = compare_groups(frame, "v", "g", equal_variance=True)
    pairs = list(zip(table["group_a"], table["group_b"]))
    assert pairs == [("x", "y"), ("x", "z"), ("y", "z")]
    assert (table["degrees_of_freedom"] == 4).all()


def test_compare_groups_missing_column():
    with pytest.raises(KeyError):
        compare_groups(_make_long_df(), "value", "batch")
