"""Compensated (Kahan) summation and the mean built on it.

Plain left-to-right accumulation loses the low-order bits of every addend
that is small relative to the running total, so its error grows with the
number of terms. The compensated scheme recovers those bits after each
addition and folds them back into the next one, keeping the error bound at
a few units of machine epsilon regardless of sample length. This matters
when summing thousands of similar-magnitude floats such as repeated
``0.1, 0.2, 0.3`` readings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ._validation import require_nonempty


@dataclass
class KahanAccumulator:
    """Running state for one compensated summation.

    Attributes:
        total (float): Running sum of the high-order parts.
        compensation (float): Low-order bits lost by the most recent
            additions; ``total + compensation`` is the best estimate of the
            exact sum so far.
        count (int): Number of values added.
    """

    total: float = 0.0
    compensation: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        """Add one value, carrying the rounding error into ``compensation``."""
        y = float(value) + self.compensation
        t = self.total + y
        # (t - total) is what actually landed in t; the rest of y was lost.
        self.compensation = y - (t - self.total)
        self.total = t
        self.count += 1

    def extend(self, values: Iterable[float]) -> "KahanAccumulator":
        for value in values:
            self.add(value)
        return self

    @property
    def value(self) -> float:
        return self.total + self.compensation


def kahan_sum(sample: Iterable[float]) -> float:
    """Return the compensated sum of a non-empty sample.

    Args:
        sample (Iterable[float]): One-dimensional sequence of reals.

    Returns:
        float: Sum with error independent of the number of terms.

    Raises:
        EmptyInputError: If ``sample`` has no elements.
    """
    arr = require_nonempty(sample, "sum")
    return KahanAccumulator().extend(arr.tolist()).value


def mean(sample: Iterable[float]) -> float:
    """Return the arithmetic mean using compensated summation.

    Raises:
        EmptyInputError: If ``sample`` has no elements.
    """
    arr = require_nonempty(sample, "mean")
    return KahanAccumulator().extend(arr.tolist()).value / arr.size
