"""End-to-end tests for the command-line pipeline."""

import os

import pandas as pd
import pytest

from statkit.cli import main


def _write_csv(tmp_path) -> str:
    frame = pd.DataFrame(
        {
            "group": ["ctrl"] * 4 + ["treated"] * 4,
            "value": [4.9, 5.1, 5.0, 5.3, 6.2, 6.0, 6.5, 6.1],
            "dose": [0, 1, 2, 3, 4, 5, 6, 7],
            "response": [1.1, 2.9, 5.2, 6.8, 9.1, 11.2, 12.8, 15.1],
            "flat": [1.0] * 8,
        }
    )
    path = tmp_path / "data.csv"
    frame.to_csv(path, index=False)
    return str(path)


def test_cli_writes_tables_without_plots(tmp_path):
    csv_path = _write_csv(tmp_path)
    out_dir = tmp_path / "out"
    code = main(
        [
            csv_path,
            "--output-dir",
            str(out_dir),
            "--group-col",
            "group",
            "--value-col",
            "value",
            "--regress",
            "dose",
            "response",
            "--no-plots",
            "--log-file",
            str(tmp_path / "run.log"),
        ]
    )
    assert code == 0

    summary = pd.read_csv(out_dir / "summary.csv")
    assert summary["variable"].tolist() == ["value", "dose", "response", "flat"]

    comparison = pd.read_csv(out_dir / "group_comparison.csv")
    assert comparison.loc[0, "group_a"] == "ctrl"
    assert comparison.loc[0, "group_b"] == "treated"

    regression = pd.read_csv(out_dir / "regression.csv")
    assert len(regression) == 8
    assert not any(name.endswith(".png") for name in os.listdir(out_dir))

    log_text = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "ctrl vs treated" in log_text


def test_cli_writes_plots(tmp_path):
    csv_path = _write_csv(tmp_path)
    out_dir = tmp_path / "out"
    code = main(
        [
            csv_path,
            "--output-dir",
            str(out_dir),
            "--columns",
            "value",
            "flat",
            "--regress",
            "dose",
            "response",
            "--log-file",
            "",
        ]
    )
    assert code == 0
    files = set(os.listdir(out_dir))
    assert "distribution_value.png" in files
    assert "distribution_flat.png" not in files
    assert "regression.png" in files


def test_cli_without_numeric_columns(tmp_path):
    path = tmp_path / "labels.csv"
    pd.DataFrame({"name": ["a", "b"]}).to_csv(path, index=False)
    code = main([str(path), "--output-dir", str(tmp_path / "out"), "--log-file", ""])
    assert code == 1


def test_cli_requires_both_group_options(tmp_path):
    csv_path = _write_csv(tmp_path)
    with pytest.raises(SystemExit):
        main([csv_path, "--group-col", "group", "--log-file", "", "--no-plots",
              "--output-dir", str(tmp_path / "out")])


def _run(csv_path, tmp_path, *extra):
    return main(
        [csv_path, "--output-dir", str(tmp_path / "out"), "--no-plots", "--log-file", ""]
        + list(extra)
    )


def test_cli_regression_with_missing_column(tmp_path):
    csv_path = _write_csv(tmp_path)
    assert _run(csv_path, tmp_path, "--regress", "dose", "weight") == 1
    assert not (tmp_path / "out" / "regression.csv").exists()


def test_cli_regression_with_too_few_pairs(tmp_path):
    frame = pd.DataFrame(
        {"dose": [1.0, None, 3.0, None], "response": [2.0, 4.0, None, 5.0]}
    )
    path = tmp_path / "sparse.csv"
    frame.to_csv(path, index=False)
    assert _run(str(path), tmp_path, "--regress", "dose", "response") == 1


def test_cli_regression_on_constant_x(tmp_path):
    csv_path = _write_csv(tmp_path)
    assert _run(csv_path, tmp_path, "--regress", "flat", "response") == 1


def test_cli_missing_summary_or_group_column(tmp_path):
    csv_path = _write_csv(tmp_path)
    assert _run(csv_path, tmp_path, "--columns", "weight") == 1
    assert _run(csv_path, tmp_path, "--group-col", "batch", "--value-col", "value") == 1


def test_cli_population_estimators(tmp_path):
    csv_path = _write_csv(tmp_path)
    assert _run(csv_path, tmp_path, "--columns", "dose") == 0
    sample_std = pd.read_csv(tmp_path / "out" / "summary.csv").loc[0, "std"]
    assert _run(csv_path, tmp_path, "--columns", "dose", "--population") == 0
    population_std = pd.read_csv(tmp_path / "out" / "summary.csv").loc[0, "std"]

    assert sample_std == pytest.approx(6.0**0.5)
    assert population_std == pytest.approx(5.25**0.5)
