import numpy as np
import pytest
from scipy import stats as scipy_stats

from statkit.correlation import correlation, covariance
from statkit.errors import EmptyDataError, InsufficientDataError, InvalidDataError

X = [1.0, 2.0, 4.0, 7.0, 11.0, 12.5]
Y = [2.1, 3.9, 8.2, 13.0, 23.5, 24.0]


def test_covariance_population_and_sample():
    assert covariance([1, 2, 3], [1, 2, 3]) == pytest.approx(2.0 / 3.0)
    assert covariance([1, 2, 3], [1, 2, 3], sample=True) == pytest.approx(1.0)
    assert covariance([1, 2, 3], [3, 2, 1], sample=True) == pytest.approx(-1.0)


def test_covariance_matches_numpy():
    assert covariance(X, Y, sample=True) == pytest.approx(np.cov(X, Y, ddof=1)[0, 1])
    assert covariance(X, Y) == pytest.approx(np.cov(X, Y, ddof=0)[0, 1])


def test_covariance_single_pair():
    assert covariance([1], [2]) == 0.0
    with pytest.raises(InsufficientDataError):
        covariance([1], [2], sample=True)


def test_covariance_length_mismatch():
    with pytest.raises(InvalidDataError):
        covariance([1, 2, 3], [1, 2])


@pytest.mark.parametrize("scale, shift", [(2.0, 3.0), (0.5, -10.0), (1e3, 0.0)])
def test_correlation_of_increasing_affine_map_is_one(scale, shift):
    y = [scale * v + shift for v in X]
    assert correlation(X, y) == pytest.approx(1.0)


@pytest.mark.parametrize("scale, shift", [(-3.0, 1.0), (-0.25, 7.0)])
def test_correlation_of_decreasing_affine_map_is_minus_one(scale, shift):
    y = [scale * v + shift for v in X]
    assert correlation(X, y) == pytest.approx(-1.0)


def test_correlation_is_bounded():
    r = correlation(X, Y)
    assert -1.0 <= r <= 1.0
    assert r == pytest.approx(scipy_stats.pearsonr(X, Y)[0])


def test_correlation_with_constant_data():
    assert correlation([1, 1, 1], [2, 2, 2]) == 1.0
    assert correlation([1, 1, 1], [1, 2, 3]) == 0.0
    assert correlation([1, 2, 3], [5, 5, 5]) == 0.0


def test_correlation_errors():
    with pytest.raises(InvalidDataError):
        correlation([1, 2], [1, 2, 3])
    with pytest.raises(EmptyDataError):
        correlation([], [])
    with pytest.raises(InsufficientDataError):
        correlation([1], [2])
