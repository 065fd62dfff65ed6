"""Command-line entry point: summarize, compare and fit columns of a CSV file."""

from __future__ import annotations

import argparse
import logging
import sys
import time

import numpy as np
import pandas as pd

from .errors import StatisticsError
from .output import DEFAULT_OUTPUT_DIR, save_regression_to_csv, save_summary_to_csv
from .plotting import plot_distribution, plot_regression
from .regression import linear_regression, regression_diagnostics
from .reporting import format_regression, format_t_test
from .schema import COLUMNS
from .summary import compare_groups, summarize
from .validation import validate_paired

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(log_file: str | None = "statkit.log", level: int = logging.INFO) -> None:
    """Send log records to stdout and, if ``log_file`` is given, to that file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Descriptive statistics, t-tests and linear regression for CSV data."
    )
    parser.add_argument("input", help="Path to input CSV file.")
    parser.add_argument(
        "--columns",
        nargs="+",
        default=None,
        help="Columns to summarize (default: every numeric column).",
    )
    parser.add_argument(
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--population",
        action="store_true",
        help="Use population (divide by n) instead of sample estimators.",
    )
    parser.add_argument("--group-col", default=None, help="Group label column.")
    parser.add_argument(
        "--value-col", default=None, help="Value column compared across groups."
    )
    parser.add_argument(
        "--equal-variance",
        action="store_true",
        help="Use the pooled-variance t-test instead of Welch's test.",
    )
    parser.add_argument(
        "--regress",
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Fit Y against X by least squares.",
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip figure output.")
    parser.add_argument(
        "--log-file",
        default="statkit.log",
        help="Log file path; pass an empty string to log to stdout only.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CSV statistics pipeline and return a process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file or None)

    start_time = time.time()
    frame = pd.read_csv(args.input)
    logger.info("Loaded %s with shape %s", args.input, frame.shape)

    try:
        summary_df = summarize(frame, columns=args.columns, sample=not args.population)
    except KeyError as exc:
        logger.error("%s. Terminating execution.", exc.args[0])
        return 1
    if summary_df.empty:
        logger.error("No numeric columns to summarize. Terminating execution.")
        return 1
    outputs = [save_summary_to_csv(summary_df, args.output_dir)]

    if args.group_col or args.value_col:
        if not (args.group_col and args.value_col):
            parser.error("--group-col and --value-col must be given together")
        missing = [c for c in (args.group_col, args.value_col) if c not in frame.columns]
        if missing:
            logger.error("Group columns not found: %s. Terminating execution.", missing)
            return 1
        comparison = compare_groups(
            frame, args.value_col, args.group_col, equal_variance=args.equal_variance
        )
        for _, row in comparison.iterrows():
            logger.info(
                "%s vs %s: %s", row["group_a"], row["group_b"], format_t_test(row)
            )
        outputs.append(
            save_summary_to_csv(comparison, args.output_dir, "group_comparison.csv")
        )

    if args.regress:
        x_col, y_col = args.regress
        missing = [c for c in (x_col, y_col) if c not in frame.columns]
        if missing:
            logger.error("Regression columns not found: %s. Terminating execution.", missing)
            return 1
        pairs = frame[[x_col, y_col]].apply(pd.to_numeric, errors="coerce")
        pairs = pairs.replace([np.inf, -np.inf], np.nan).dropna()
        try:
            x, y = validate_paired(pairs[x_col], pairs[y_col], names=(x_col, y_col))
            diagnostics = regression_diagnostics(x, y)
        except StatisticsError as exc:
            logger.error("Cannot fit %s on %s: %s. Terminating execution.", y_col, x_col, exc)
            return 1
        logger.info(
            "Regression %s on %s: %s (R² = %.4f, n = %d)",
            y_col,
            x_col,
            format_regression(diagnostics),
            diagnostics["r_squared"],
            diagnostics["n"],
        )
        outputs.append(
            save_regression_to_csv(x, y, linear_regression(x, y), args.output_dir)
        )

    if not args.no_plots:
        for col in summary_df[COLUMNS.variable]:
            values = pd.to_numeric(frame[col], errors="coerce").to_numpy(dtype=float)
            values = values[np.isfinite(values)]
            if len(values) < 2 or np.min(values) == np.max(values):
                logger.warning("Skipping distribution plot for %s: no spread", col)
                continue
            outputs.append(
                plot_distribution(
                    values, args.output_dir, filename=f"distribution_{col}.png", label=col
                )
            )
        if args.regress:
            outputs.append(
                plot_regression(x, y, args.output_dir, x_label=x_col, y_label=y_col)
            )

    logger.info("Total execution time: %.2f seconds", time.time() - start_time)
    logger.info("Generated output files:")
    for path in outputs:
        logger.info("  - %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
