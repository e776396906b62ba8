"""Error taxonomy for the statistics engine.

Every error derives from :class:`DatakitError`, which is itself a
``ValueError`` so callers that already guard numerical routines with
``except ValueError`` keep working.
"""

from __future__ import annotations


class DatakitError(ValueError):
    """Base class for invalid-sample errors raised by datakit."""


class EmptyInputError(DatakitError):
    """Raised when an aggregate is requested over a zero-length sample."""


class InsufficientSampleError(DatakitError):
    """Raised when a sample statistic needs more elements than supplied."""


class LengthMismatchError(DatakitError):
    """Raised when paired samples differ in length."""


class DegenerateFitError(DatakitError):
    """Raised when the independent variable of a fit has zero variance."""
