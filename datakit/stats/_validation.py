"""Shared sample checks for the statistics modules."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from ..errors import EmptyInputError, InsufficientSampleError, LengthMismatchError


def as_sample(sample: Iterable[float], name: str = "sample") -> np.ndarray:
    """Return ``sample`` as a 1-D float array without modifying the input."""
    arr = np.asarray(sample, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    return arr


def require_nonempty(sample: Iterable[float], operation: str) -> np.ndarray:
    arr = as_sample(sample)
    if arr.size == 0:
        raise EmptyInputError(f"{operation} requires a non-empty sample.")
    return arr


def require_sample_statistic(sample: Iterable[float], operation: str) -> np.ndarray:
    arr = as_sample(sample)
    if arr.size < 2:
        raise InsufficientSampleError(
            f"{operation} requires at least 2 values, got {arr.size}."
        )
    return arr


def require_paired(
    x: Iterable[float], y: Iterable[float], operation: str
) -> Tuple[np.ndarray, np.ndarray]:
    """Validate two aligned samples of at least two elements each.

    Length mismatch is reported before the minimum-length rule so that
    ``cov([1, 2], [1, 2, 3])`` names the mismatch.
    """
    x_arr = as_sample(x, "x")
    y_arr = as_sample(y, "y")
    if x_arr.size != y_arr.size:
        raise LengthMismatchError(
            f"{operation} requires equal-length samples, got {x_arr.size} and "
            f"{y_arr.size}."
        )
    if x_arr.size < 2:
        raise InsufficientSampleError(
            f"{operation} requires at least 2 paired values, got {x_arr.size}."
        )
    return x_arr, y_arr
