# mlkernels/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for mlkernels.

This module defines the NumPy/SciPy implementation of the mlkernels.num
API: array creation, elementwise math, the dense BLAS routines used by
the Gramian engine, the pseudo-inverse and the special functions needed
by the Matérn composition class.
"""

from typing import Any
from mlkernels.config import _normalize_dtype_spec, get_config, init_backend, get_logger

ArrayLike = Any

_mlkernels_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _mlkernels_backend_)
_DTYPE_SPEC = _normalize_dtype_spec(_config.dtype)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.dtype(_DTYPE_SPEC).type
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    array_equal,
    allclose,
    diag,
    fill_diagonal,
    triu_indices,
    tril_indices,
    sqrt,
    exp,
    log,
    log1p,
    tanh,
    sum,
    maximum,
    einsum,
    matmul,
    all,
    any,
)
from numpy.linalg import pinv
from numpy import finfo
from scipy.linalg.blas import get_blas_funcs
from scipy.special import kv, gamma, expit

# ..................................................

eps = finfo(_np_dtype).eps

# ..................................................


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    return numpy.array(x, dtype=_np_dtype)


def asarray(x, dtype=None):
    """Convert to a backend array.

    Floating and non-floating inputs alike are returned with the
    configured floating dtype; arrays that already have it are not
    copied.
    """
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    return numpy.asarray(x, dtype=_np_dtype)


def asint(x):
    """Convert integer-valued input to an int array.

    Raises TypeError for non-integer dtypes (floats, bools) so that
    indices are never truncated.
    """
    out = numpy.asarray(x)
    if out.size > 0 and not numpy.issubdtype(out.dtype, numpy.integer):
        raise TypeError(f"Expected integer values, got dtype {out.dtype}.")
    return out.astype(int, copy=False)


def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def isarray(x):
    return isinstance(x, numpy.ndarray)


# ..................................................
# Dense BLAS level-1 and level-3 routines


def syrk(a, trans=False, alpha=1.0):
    """Symmetric rank-k update.

    Computes ``C = alpha * A Aᵀ`` (``trans=False``) or ``C = alpha * Aᵀ A``
    (``trans=True``). Only the upper triangle of ``C`` is written; the
    strictly lower triangle is zero.

    Parameters
    ----------
    a : ndarray, shape (n, k)
    trans : bool
    alpha : float

    Returns
    -------
    ndarray, shape (n, n) or (k, k)
    """
    f = get_blas_funcs("syrk", (a,))
    n = a.shape[1] if trans else a.shape[0]
    c = numpy.zeros((n, n), dtype=f.dtype, order="F")
    return f(alpha, a, beta=0.0, c=c, trans=int(trans), lower=0, overwrite_c=1)


def gemm(a, b, trans_a=False, trans_b=False, alpha=1.0):
    """General matrix product ``C = alpha * op(A) op(B)``."""
    f = get_blas_funcs("gemm", (a, b))
    return f(alpha, a, b, trans_a=int(trans_a), trans_b=int(trans_b))


def scal(alpha, x):
    """Scaled vector ``alpha * x``; contiguous float vectors are scaled in place."""
    f = get_blas_funcs("scal", (x,))
    return f(alpha, x)


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=1234)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)


def choice(a, size=None, replace: bool = True) -> ArrayLike:
    return _np_rng.choice(a, size=size, replace=replace)
