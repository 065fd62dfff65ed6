import os

import matplotlib.pyplot as plt
import pytest

from statkit.errors import InsufficientDataError, InvalidDataError
from statkit.plotting import plot_distribution, plot_regression


def test_plot_distribution_writes_png(tmp_path):
    data = [4.1, 5.3, 4.8, 6.0, 5.5, 4.9, 5.1, 5.7]
    path = plot_distribution(data, str(tmp_path), filename="dist.png", label="mass")
    assert os.path.exists(path)
    assert os.path.getsize(path) > 0
    assert plt.get_fignums() == []


def test_plot_distribution_rejects_degenerate_data(tmp_path):
    with pytest.raises(InvalidDataError):
        plot_distribution([3.0, 3.0, 3.0], str(tmp_path))
    with pytest.raises(InsufficientDataError):
        plot_distribution([3.0], str(tmp_path))
    assert plt.get_fignums() == []
    assert not os.path.exists(os.path.join(str(tmp_path), "distribution.png"))


def test_plot_regression_writes_png(tmp_path):
    x = [0.0, 1.0, 2.0, 3.0, 4.0]
    y = [1.2, 2.8, 5.1, 7.2, 8.9]
    path = plot_regression(x, y, str(tmp_path), x_label="dose", y_label="response")
    assert path.endswith("regression.png")
    assert os.path.exists(path)


def test_plot_regression_constant_x(tmp_path):
    with pytest.raises(InvalidDataError):
        plot_regression([1, 1, 1], [1, 2, 3], str(tmp_path))
