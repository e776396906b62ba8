"""
A Python package for numerically robust descriptive statistics.

Computes sums, means, extrema, products and dispersion over numeric
sequences, draws synthetic samples from standard distributions, and fits
least-squares lines to paired data.

Modules:
    - stats: Compensated summation, reductions, dispersion and regression.
    - variates: Uniform, normal (Box-Muller) and exponential generators.
    - tolerance: Approximate float comparison.
    - data_processing: Loads CSV records and builds numeric sequences.
    - plotting: Renders sequences and fitted lines as HTML.
"""

__version__ = "1.0.0"

from .data_processing import col, load_csv, numeric, rep, seq
from .errors import (
    DatakitError,
    DegenerateFitError,
    EmptyInputError,
    InsufficientSampleError,
    LengthMismatchError,
)
from .plotting import render_html, save_html
from .stats import (
    KahanAccumulator,
    RegressionModel,
    cov,
    fit,
    kahan_sum,
    mean,
    prod,
    sample_max,
    sample_min,
    sd,
    vari,
)
from .tolerance import ATOL, RTOL, is_close
from .variates import exponential, normal, uniform

__all__ = [
    # Tolerance
    "ATOL",
    "RTOL",
    "is_close",
    # Statistics
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
    # Variates
    "uniform",
    "normal",
    "exponential",
    # Errors
    "DatakitError",
    "EmptyInputError",
    "InsufficientSampleError",
    "LengthMismatchError",
    "DegenerateFitError",
    # Data processing
    "load_csv",
    "col",
    "numeric",
    "seq",
    "rep",
    # Rendering
    "render_html",
    "save_html",
]
