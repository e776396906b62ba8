"""Linear-scan extrema and the log-domain product."""

from __future__ import annotations

import logging
import math
from typing import Iterable

from ._validation import require_nonempty
from .summation import KahanAccumulator

logger = logging.getLogger(__name__)


def sample_max(sample: Iterable[float]) -> float:
    """Return the largest element; the first element seeds the scan.

    Raises:
        EmptyInputError: If ``sample`` has no elements.
    """
    values = require_nonempty(sample, "max").tolist()
    best = values[0]
    for value in values[1:]:
        if value > best:
            best = value
    return best


def sample_min(sample: Iterable[float]) -> float:
    """Return the smallest element; the first element seeds the scan.

    Raises:
        EmptyInputError: If ``sample`` has no elements.
    """
    values = require_nonempty(sample, "min").tolist()
    best = values[0]
    for value in values[1:]:
        if value < best:
            best = value
    return best


def prod(sample: Iterable[float]) -> float:
    """Multiply all elements in the log domain.

    The product is formed as ``sign * exp(sum(ln|x_i|))``: magnitudes are
    accumulated as a compensated sum of logarithms and the sign is tracked
    separately. Intermediate partial products therefore never overflow or
    underflow, e.g. ``1e75`` followed by a hundred values near ``0.2``
    recombines to a finite result that naive multiplication reaches only
    by passing through extreme intermediates.

    Args:
        sample (Iterable[float]): One-dimensional sequence of reals.

    Returns:
        float: The product. Exactly ``0.0`` when any element is zero.

    Raises:
        EmptyInputError: If ``sample`` has no elements.
        ValueError: If any element is NaN or infinite.
        OverflowError: If the magnitude of the final product exceeds the
            float range.

    Note:
        A zero element ends the scan immediately; ``ln(0)`` is never
        evaluated.
    """
    values = require_nonempty(sample, "prod").tolist()
    if not all(math.isfinite(value) for value in values):
        raise ValueError("prod requires finite values (no NaN or inf).")
    log_sum = KahanAccumulator()
    negative = False
    for value in values:
        if value == 0.0:
            logger.debug("prod short-circuited on zero after %d terms", log_sum.count)
            return 0.0
        if value < 0.0:
            negative = not negative
        log_sum.add(math.log(abs(value)))
    try:
        magnitude = math.exp(log_sum.value)
    except OverflowError:
        raise OverflowError(
            f"Product magnitude exp({log_sum.value:.6g}) exceeds the float range."
        ) from None
    return -magnitude if negative else magnitude
