"""Write summary and regression tables to CSV files.

This module is the boundary between in-memory results and files on disk.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Sequence

import pandas as pd

from .validation import validate_paired

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"


def save_summary_to_csv(
    summary_df: pd.DataFrame,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    filename: str = "summary.csv",
) -> str:
    """Save a summary table to CSV.

    Args:
        summary_df (pandas.DataFrame): Output of ``statkit.summary.summarize``
            or ``statkit.summary.compare_groups``.
        output_dir (str): Directory to write into; created if missing.
        filename (str): File name inside ``output_dir``.

    Returns:
        str: Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    summary_df.to_csv(path, index=False)
    logger.info("Saved summary table to %s", path)
    return path


def save_regression_to_csv(
    x: Sequence[float],
    y: Sequence[float],
    result: Mapping[str, object],
    output_dir: str = DEFAULT_OUTPUT_DIR,
    filename: str = "regression.csv",
) -> str:
    """Save observed, fitted and residual values of a regression to CSV.

    Args:
        x (Sequence[float]): Independent variable used for the fit.
        y (Sequence[float]): Dependent variable used for the fit.
        result (Mapping): Output of ``statkit.regression.linear_regression``.
        output_dir (str): Directory to write into; created if missing.
        filename (str): File name inside ``output_dir``.

    Returns:
        str: Path of the written file, with columns ``x``, ``y``,
        ``predicted`` and ``residual``.

    Raises:
        InvalidDataError: If ``x``, ``y`` and the fitted values differ in
            length.
    """
    x_arr, y_arr = validate_paired(x, y)
    _, predicted = validate_paired(x_arr, result["predictions"], names=("x", "predictions"))
    _, residual = validate_paired(x_arr, result["residuals"], names=("x", "residuals"))

    table = pd.DataFrame(
        {"x": x_arr, "y": y_arr, "predicted": predicted, "residual": residual}
    )
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    table.to_csv(path, index=False)
    logger.info("Saved regression table to %s", path)
    return path
