"""Format test and fit results as short human-readable strings.

Used by the CLI log output and by plot annotations.
"""

from __future__ import annotations

import math
from typing import Mapping


def format_p_value(value: float) -> str:
    """Format a p-value consistently for logs and annotations.

    Args:
        value (float): Probability in ``[0, 1]``.

    Returns:
        str: ``"<0.001"`` for very small values, ``"NaN"`` for non-finite
        input, otherwise three decimals.
    """
    value = float(value)
    if not math.isfinite(value):
        return "NaN"
    if value < 1e-3:
        return "<0.001"
    return f"{value:.3f}"


def _format_dof(dof) -> str:
    dof = float(dof)
    if dof.is_integer():
        return str(int(dof))
    return f"{dof:.2f}"


def format_t_test(result: Mapping[str, float], digits: int = 3) -> str:
    """Render a t-test result as ``"t(df) = T, p = P"``.

    Welch degrees of freedom are fractional and shown with two decimals.

    Raises:
        KeyError: If ``result`` lacks ``t_statistic``, ``p_value`` or
            ``degrees_of_freedom``.
    """
    t_stat = float(result["t_statistic"])
    p_text = format_p_value(result["p_value"])
    p_part = f"p {p_text}" if p_text.startswith("<") else f"p = {p_text}"
    return f"t({_format_dof(result['degrees_of_freedom'])}) = {t_stat:.{digits}f}, {p_part}"


def format_regression(result: Mapping[str, float], digits: int = 3) -> str:
    """Render a fitted line as ``"y = m·x + b"`` with the intercept's sign."""
    slope = float(result["slope"])
    intercept = float(result["intercept"])
    sign = "-" if intercept < 0 else "+"
    return f"y = {slope:.{digits}f}·x {sign} {abs(intercept):.{digits}f}"
