"""Diagnostic figures for distributions and straight-line fits.

Plotting functions compute what they draw through the core statistics
functions, so a figure shows exactly the numbers reported elsewhere. Each
function saves a PNG, closes the figure and returns the file path.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .descriptive import mean, standard_deviation
from .distributions import normal_pdf
from .errors import InvalidDataError
from .regression import linear_regression
from .reporting import format_regression
from .validation import require_min_count, to_array, validate_paired

logger = logging.getLogger(__name__)

FIGURE_DPI = 300
FIGSIZE_SINGLE = (7.0, 4.2)
FIGSIZE_WIDE = (9.5, 4.2)
DATA_COLOR = "#004371"
LINE_COLOR = "#a50f15"
_STYLE_STATE = {"initialized": False}


def setup_plot_style() -> None:
    """Apply the project matplotlib style once per process.

    Returns:
        None: Update global matplotlib ``rcParams`` in-place.
    """
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.size": 12.0,
            "axes.titlesize": 14.0,
            "axes.labelsize": 12.0,
            "xtick.labelsize": 11.0,
            "ytick.labelsize": 11.0,
            "legend.fontsize": 11.0,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.linewidth": 1.2,
            "grid.alpha": 0.20,
            "grid.linestyle": ":",
            "legend.frameon": False,
            "lines.linewidth": 2.0,
            "lines.markersize": 6.0,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )
    _STYLE_STATE["initialized"] = True


def _save(fig: plt.Figure, output_dir: str, filename: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=FIGURE_DPI)
    plt.close(fig)
    logger.info("Saved figure to %s", path)
    return path


def plot_distribution(
    data: Sequence[float],
    output_dir: str = "output",
    filename: str = "distribution.png",
    bins="auto",
    label: str = "value",
) -> str:
    """Draw a density histogram of ``data`` with a fitted normal curve.

    Args:
        data (Sequence[float]): Values to plot, at least two with nonzero
            spread.
        output_dir (str, optional): Directory for the PNG. Defaults to
            ``"output"``.
        filename (str, optional): PNG file name.
        bins (int | str, optional): Passed to ``Axes.hist``.
        label (str, optional): X-axis label.

    Returns:
        str: Path to the saved PNG.

    Raises:
        InsufficientDataError: If ``data`` has fewer than two values.
        InvalidDataError: If ``data`` is constant.

    Note:
        The overlaid curve uses the sample mean and sample standard deviation.
    """
    arr = to_array(data)
    require_min_count(len(arr), 2, "Distribution plot")
    mu = mean(arr)
    sd = standard_deviation(arr, sample=True)
    if sd == 0:
        raise InvalidDataError("Cannot plot a distribution with zero spread")

    setup_plot_style()
    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.hist(arr, bins=bins, density=True, color=DATA_COLOR, alpha=0.35, edgecolor="white")

    grid = np.linspace(np.min(arr) - 3.0 * sd, np.max(arr) + 3.0 * sd, 300)
    density = [normal_pdf(float(v), mu, sd) for v in grid]
    ax.plot(grid, density, color=LINE_COLOR, label=f"N({mu:.3g}, {sd:.3g}²)")

    ax.set_xlabel(label)
    ax.set_ylabel("Density")
    ax.legend(loc="upper right")
    ax.grid(True, axis="y")
    return _save(fig, output_dir, filename)


def plot_regression(
    x: Sequence[float],
    y: Sequence[float],
    output_dir: str = "output",
    filename: str = "regression.png",
    x_label: str = "x",
    y_label: str = "y",
) -> str:
    """Draw a two-panel regression figure: fit over data, and residuals.

    Args:
        x (Sequence[float]): Independent variable.
        y (Sequence[float]): Dependent variable, same length as ``x``.
        output_dir (str, optional): Directory for the PNG.
        filename (str, optional): PNG file name.
        x_label (str, optional): Label for the x axis of both panels.
        y_label (str, optional): Label for the y axis of the fit panel.

    Returns:
        str: Path to the saved PNG.

    Raises:
        InvalidDataError: If the lengths differ or ``x`` is constant.
        InsufficientDataError: If fewer than two pairs are given.
    """
    x_arr, y_arr = validate_paired(x, y)
    fit = linear_regression(x_arr, y_arr)
    order = np.argsort(x_arr)
    predicted = np.asarray(fit["predictions"], dtype=float)
    residuals = np.asarray(fit["residuals"], dtype=float)

    setup_plot_style()
    fig, (ax_fit, ax_res) = plt.subplots(1, 2, figsize=FIGSIZE_WIDE)

    ax_fit.scatter(x_arr, y_arr, color=DATA_COLOR, s=24, zorder=3, label="Data")
    ax_fit.plot(
        x_arr[order],
        predicted[order],
        color=LINE_COLOR,
        label=format_regression(fit),
        zorder=2,
    )
    ax_fit.set_xlabel(x_label)
    ax_fit.set_ylabel(y_label)
    ax_fit.legend(loc="best")

    ax_res.axhline(0.0, color="0.4", linewidth=0.9)
    ax_res.scatter(x_arr, residuals, color=DATA_COLOR, s=24, zorder=3)
    ax_res.set_xlabel(x_label)
    ax_res.set_ylabel("Residual")
    ax_res.grid(True, axis="y")

    fig.tight_layout()
    return _save(fig, output_dir, filename)
