"""Shared precondition checks applied before any arithmetic.

Checks run in a fixed order: emptiness, element type and finiteness, pairing,
minimum count. The first violated rule raises and nothing is computed.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, List, Tuple

import numpy as np

from .errors import EmptyDataError, InsufficientDataError, InvalidDataError


def _is_finite_real(value) -> bool:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond the float range
        return False


def validate(data: Iterable, name: str = "data") -> List[numbers.Real]:
    """Check that ``data`` is a non-empty sequence of finite real numbers.

    Args:
        data: Any iterable of numbers (list, tuple, ``numpy.ndarray``,
            ``pandas.Series``).
        name (str, optional): Label used in error messages.

    Returns:
        list: The elements of ``data`` in their original order and type.

    Raises:
        EmptyDataError: If ``data`` has no elements.
        InvalidDataError: If ``data`` is not iterable, or any element is not a
            finite real number. Booleans and strings are rejected.
    """
    if data is None:
        raise EmptyDataError(f"{name} cannot be empty")
    if isinstance(data, (str, bytes)):
        raise InvalidDataError(f"{name} must be a sequence of numbers")
    try:
        values = list(data)
    except TypeError as exc:
        raise InvalidDataError(f"{name} must be a sequence of numbers") from exc

    if not values:
        raise EmptyDataError(f"{name} cannot be empty")

    for index, value in enumerate(values):
        if not _is_finite_real(value):
            raise InvalidDataError(
                f"{name} must contain only finite numeric values; "
                f"got {value!r} at index {index}"
            )
    return values


def to_array(data: Iterable, name: str = "data") -> np.ndarray:
    """Validate ``data`` and return it as a float64 array."""
    return np.asarray(validate(data, name), dtype=float)


def validate_paired(
    x: Iterable, y: Iterable, names: Tuple[str, str] = ("x", "y")
) -> Tuple[np.ndarray, np.ndarray]:
    """Validate two index-aligned datasets of equal length.

    Raises:
        EmptyDataError: If either dataset is empty.
        InvalidDataError: If either contains a non-numeric value or the
            lengths differ.
    """
    x_arr = to_array(x, names[0])
    y_arr = to_array(y, names[1])
    if len(x_arr) != len(y_arr):
        raise InvalidDataError(
            f"Paired datasets must have the same length "
            f"({names[0]}={len(x_arr)}, {names[1]}={len(y_arr)})"
        )
    return x_arr, y_arr


def require_min_count(n: int, minimum: int, what: str) -> None:
    """Raise ``InsufficientDataError`` when ``n`` is below ``minimum``."""
    if n < minimum:
        raise InsufficientDataError(
            f"{what} requires at least {minimum} data points, got {n}"
        )


def require_finite(value, name: str) -> float:
    """Return ``value`` as float, rejecting non-numeric and non-finite input."""
    if not _is_finite_real(value):
        raise InvalidDataError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def require_positive(value, name: str) -> float:
    """Return ``value`` as float, requiring it to be finite and strictly positive."""
    value = require_finite(value, name)
    if value <= 0:
        raise InvalidDataError(f"{name} must be positive, got {value!r}")
    return value
