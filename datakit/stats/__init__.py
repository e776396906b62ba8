"""
Numerical statistics engine.

This subpackage holds the parts of datakit with real round-off hazards.
All functions accept one-dimensional sequences of reals, never mutate them,
and keep no state between calls.

Modules:
    summation:
        Compensated (Kahan) summation state object, ``kahan_sum`` and
        ``mean``.

    reduction:
        Linear-scan ``sample_max``/``sample_min`` and the log-domain
        ``prod`` that survives long products without overflow.

    dispersion:
        Sample variance, standard deviation and covariance with Bessel's
        correction, built on compensated deviation sums.

    regression:
        Single-variable least-squares fit returning a ``RegressionModel``.

Design Principle:
    This subpackage has no dependencies on plotting/ or data_processing.
    Invalid samples raise the errors in ``datakit.errors``; nothing returns
    a NaN sentinel.
"""

from .dispersion import cov, sd, vari
from .reduction import prod, sample_max, sample_min
from .regression import RegressionModel, fit
from .summation import KahanAccumulator, kahan_sum, mean

__all__ = [
    "KahanAccumulator",
    "kahan_sum",
    "mean",
    "sample_max",
    "sample_min",
    "prod",
    "vari",
    "sd",
    "cov",
    "RegressionModel",
    "fit",
]
