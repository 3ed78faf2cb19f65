# mlkernels/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by mlkernels.

All of them derive from :class:`MLKernelsError` and from ``ValueError``,
so code that already guards calls with ``except ValueError`` keeps
working.
"""


class MLKernelsError(ValueError):
    """Base class for mlkernels errors."""


class InvalidBoundError(MLKernelsError):
    """A bound was given a non-finite value."""


class EmptyIntervalError(MLKernelsError):
    """The two sides of an interval admit no value."""


class OutOfBoundsError(MLKernelsError):
    """A hyperparameter value lies outside its interval."""


class NonComposableError(MLKernelsError):
    """A composition class cannot wrap the given inner kernel."""


class DimensionMismatchError(MLKernelsError):
    """Array arguments have incompatible shapes."""


class NotSquareError(DimensionMismatchError):
    """A square matrix was expected."""
