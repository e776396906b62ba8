"""Sample variance, standard deviation and covariance (N - 1 denominator)."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from ._validation import require_paired, require_sample_statistic
from .summation import KahanAccumulator


def _co_deviation_sum(x: np.ndarray, y: np.ndarray) -> float:
    """Compensated ``sum((x_i - mean_x) * (y_i - mean_y))``.

    Values are shifted by their first element before the means are taken.
    A constant sample then has exactly zero deviations even when the value
    itself (0.1, 3.3, ...) has no exact binary representation.
    """
    x_vals = [xi - float(x[0]) for xi in x.tolist()]
    y_vals = [yi - float(y[0]) for yi in y.tolist()]
    x_mean = KahanAccumulator().extend(x_vals).value / len(x_vals)
    y_mean = KahanAccumulator().extend(y_vals).value / len(y_vals)
    acc = KahanAccumulator()
    for xi, yi in zip(x_vals, y_vals):
        acc.add((xi - x_mean) * (yi - y_mean))
    return acc.value


def vari(sample: Iterable[float]) -> float:
    """Return the sample variance ``sum((x_i - mean)^2) / (n - 1)``.

    Raises:
        InsufficientSampleError: If ``sample`` has fewer than two elements.
    """
    arr = require_sample_statistic(sample, "vari")
    return _co_deviation_sum(arr, arr) / (arr.size - 1)


def sd(sample: Iterable[float]) -> float:
    """Return the sample standard deviation, ``sqrt(vari(sample))``."""
    return math.sqrt(vari(sample))


def cov(x: Iterable[float], y: Iterable[float]) -> float:
    """Return the sample covariance of two aligned samples.

    Args:
        x (Iterable[float]): First sample.
        y (Iterable[float]): Second sample, same length as ``x``.

    Returns:
        float: ``sum((x_i - mean_x)(y_i - mean_y)) / (n - 1)``.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientSampleError: If fewer than two pairs are supplied.
    """
    x_arr, y_arr = require_paired(x, y, "cov")
    return _co_deviation_sum(x_arr, y_arr) / (x_arr.size - 1)
