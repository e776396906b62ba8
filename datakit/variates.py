"""Uniform, normal and exponential variate generators.

Each generator draws from a uniform source on the open interval (0, 1) and
transforms it: Box-Muller for standard normals, the inverse CDF for unit
rate exponentials.

The ``rng`` argument selects the uniform source. ``None`` uses a fresh
generator seeded from OS entropy, so results differ between calls. An
integer seed or an existing :class:`numpy.random.Generator` makes the draws
reproducible.
"""

from __future__ import annotations

import math
import numbers
from typing import Optional, Tuple, Union

import numpy as np

RandomSource = Optional[Union[int, np.random.Generator]]


def _check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"n must be an integer, got {n!r}.")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    return int(n)


def _open_unit(gen: np.random.Generator, size: Union[int, Tuple[int, int]]) -> np.ndarray:
    """Draw ``size`` uniforms strictly inside (0, 1).

    ``Generator.random`` samples [0, 1); the rare exact zeros are redrawn.
    """
    draws = gen.random(size)
    zeros = draws == 0.0
    while zeros.any():
        draws[zeros] = gen.random(int(zeros.sum()))
        zeros = draws == 0.0
    return draws


def uniform(n: int, rng: RandomSource = None) -> np.ndarray:
    """Return ``n`` independent draws from the open interval (0, 1).

    Args:
        n (int): Number of draws, ``n >= 0``.
        rng (int | numpy.random.Generator | None, optional): Uniform source
            or seed. Defaults to a fresh unseeded generator.

    Returns:
        numpy.ndarray: Float array of length ``n``.

    Raises:
        ValueError: If ``n`` is negative or not an integer.
    """
    count = _check_count(n)
    return _open_unit(np.random.default_rng(rng), count)


def normal(n: int, rng: RandomSource = None) -> np.ndarray:
    """Return ``n`` standard-normal draws via the Box-Muller transform.

    For each pair of uniforms ``(u1, u2)``::

        z1 = sqrt(-2 ln u1) * cos(2 pi u2)
        z2 = sqrt(-2 ln u1) * sin(2 pi u2)

    Each pair of outputs comes from one draw of ``(u1, u2)``, and pairs are
    emitted consecutively in draw order. When ``n`` is odd the
    ``z2`` of the final pair is discarded.

    Args:
        n (int): Number of draws, ``n >= 0``.
        rng (int | numpy.random.Generator | None, optional): Uniform source
            or seed.

    Returns:
        numpy.ndarray: Float array of length ``n``.

    Raises:
        ValueError: If ``n`` is negative or not an integer.

    References:
        Box, G. E. P. and Muller, M. E. (1958). A note on the generation of
        random normal deviates.
    """
    count = _check_count(n)
    gen = np.random.default_rng(rng)
    pairs = (count + 1) // 2
    # One row per transform: columns are that pair's (u1, u2).
    draws = _open_unit(gen, (pairs, 2))
    u1 = draws[:, 0]
    u2 = draws[:, 1]
    radius = np.sqrt(-2.0 * np.log(u1))
    angle = 2.0 * math.pi * u2

    out = np.empty(2 * pairs, dtype=float)
    out[0::2] = radius * np.cos(angle)
    out[1::2] = radius * np.sin(angle)
    return out[:count]


def exponential(n: int, rng: RandomSource = None) -> np.ndarray:
    """Return ``n`` unit-rate exponential draws via ``-ln(u)``.

    Because ``u`` lies strictly inside (0, 1) every draw is strictly
    positive and finite.

    Raises:
        ValueError: If ``n`` is negative or not an integer.
    """
    count = _check_count(n)
    return -np.log(_open_unit(np.random.default_rng(rng), count))
