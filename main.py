#!/usr/bin/env python3
"""
Main script for running the CSV statistics pipeline.
"""

# Pipeline overview:
# 1) Load a CSV file and pick the numeric columns to summarize.
# 2) Compute descriptive statistics per column (NaN where a statistic needs
#    more observations than available) and export them to summary.csv.
# 3) Optionally compare groups pairwise with two-sample t-tests and fit a
#    straight line between two columns.
# 4) Export figures: per-column distributions and the regression diagnostics.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from statkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
