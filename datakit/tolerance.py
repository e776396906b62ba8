"""Approximate equality for floating-point results."""

from __future__ import annotations

from typing import Final

RTOL: Final[float] = 1e-5
ATOL: Final[float] = 1e-8


def is_close(a: float, b: float, rtol: float = RTOL, atol: float = ATOL) -> bool:
    """Return True when ``a`` lies within tolerance of the reference ``b``.

    The test is ``|a - b| <= atol + rtol * |b|``. Only ``b`` scales the
    relative term, so the comparison is not symmetric: ``b`` is the
    reference value and ``a`` the computed one.

    Args:
        a (float): Computed value.
        b (float): Reference value.
        rtol (float, optional): Relative tolerance. Defaults to ``RTOL``.
        atol (float, optional): Absolute tolerance. Defaults to ``ATOL``.

    Returns:
        bool: Whether the two values agree within tolerance.

    Examples:
        >>> is_close(0, 1e-15)
        True
        >>> is_close(0, 1e-5)
        False
    """
    return abs(float(a) - float(b)) <= atol + rtol * abs(float(b))
