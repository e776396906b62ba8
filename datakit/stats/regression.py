"""Ordinary least-squares line fit for paired samples.

The solver is deliberately small: one independent variable, slope from the
covariance/variance ratio, intercept through the means. The returned model
carries its own predictions at the input x values so callers can overlay
the fitted line on the raw data without re-evaluating it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

from ..errors import DegenerateFitError
from ._validation import require_paired
from .dispersion import cov, vari
from .summation import mean

logger = logging.getLogger(__name__)

ArrayLike = Union[float, Iterable[float], np.ndarray]


@dataclass(frozen=True)
class RegressionModel:
    """Fitted line ``f(x) = slope * x + intercept``.

    Attributes:
        slope (float): Fitted slope.
        intercept (float): Fitted intercept.
        fitted_points (tuple[float, ...]): ``predict(x_i)`` for every x in
            the fitting sample, in input order.
    """

    slope: float
    intercept: float
    fitted_points: Tuple[float, ...] = ()

    def predict(self, x: ArrayLike) -> Union[float, np.ndarray]:
        """Evaluate the line at a scalar or at every element of an array."""
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=float) + self.intercept

    def __call__(self, x: ArrayLike) -> Union[float, np.ndarray]:
        return self.predict(x)


def fit(x: Iterable[float], y: Iterable[float]) -> RegressionModel:
    """Fit an ordinary least-squares straight line to paired samples.

    Args:
        x (Iterable[float]): Independent variable.
        y (Iterable[float]): Dependent variable, aligned with ``x``.

    Returns:
        RegressionModel: Model with ``slope = cov(x, y) / vari(x)`` and
        ``intercept = mean(y) - slope * mean(x)``.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientSampleError: If fewer than two pairs are supplied.
        DegenerateFitError: If ``x`` has zero variance, leaving the slope
            undefined.

    Note:
        ``fitted_points`` are meant for overlay against the input data, not
        for extrapolation diagnostics.

    References:
        Ordinary least squares linear regression.
    """
    x_arr, y_arr = require_paired(x, y, "fit")
    x_var = vari(x_arr)
    if x_var == 0.0 or np.all(x_arr == x_arr[0]):
        raise DegenerateFitError(
            "Independent variable has zero variance; slope is undefined."
        )

    slope = cov(x_arr, y_arr) / x_var
    intercept = mean(y_arr) - slope * mean(x_arr)
    fitted = tuple(slope * xi + intercept for xi in x_arr.tolist())
    logger.debug(
        "fit: n=%d slope=%.6g intercept=%.6g", x_arr.size, slope, intercept
    )
    return RegressionModel(slope=slope, intercept=intercept, fitted_points=fitted)
