# mlkernels/kernelmatrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel matrices: pairwise evaluation, double centering and Nyström
low-rank approximation.
"""

from typing import Callable, Union

import mlkernels.num as gnp
from mlkernels.config import get_logger
from mlkernels.errors import DimensionMismatchError, NotSquareError
from mlkernels.kernel.base import Kernel, kernel_function
from mlkernels.pairwise import Layout, observations, symmetrize as _copytri

_logger = get_logger()


def kernel_matrix(
    X,
    kernel: Union[Kernel, Callable],
    Z=None,
    layout: Union[str, Layout] = Layout.ROW_MAJOR,
    symmetrize: bool = True,
):
    """Kernel matrix by pairwise evaluation.

    This is the generic path for kernels without a closed-form Gramian
    shortcut: ``kernel(x, y)`` is called once per entry.

    Parameters
    ----------
    X : array_like
        Data matrix with n observations.
    kernel : Kernel or callable
        Scalar kernel ``k(x, y)`` on two 1-D observations.
    Z : array_like, optional
        Second data matrix with m observations.
    layout : Layout
        Orientation of ``X`` and ``Z``.
    symmetrize : bool, default True
        Self mode only. Entries ``i <= j`` are evaluated; with
        ``symmetrize`` they are mirrored onto the lower triangle,
        otherwise the strictly lower triangle is zero.

    Returns
    -------
    ndarray, shape (n, n) or (n, m)

    Raises
    ------
    DimensionMismatchError
        If ``X`` and ``Z`` do not have the same number of features.
    """
    k = kernel_function(kernel)
    xs = observations(X, layout)
    n = xs.shape[0]
    _logger.debug("Pairwise kernel matrix evaluation (n=%d)", n)

    if Z is None:
        K = gnp.zeros((n, n))
        for i in range(n):
            xi = xs[i]
            for j in range(i, n):
                K[i, j] = k(xi, xs[j])
        return _copytri(K) if symmetrize else K

    zs = observations(Z, layout)
    if xs.shape[1] != zs.shape[1]:
        raise DimensionMismatchError(
            f"X has {xs.shape[1]} features and Z has {zs.shape[1]}."
        )
    m = zs.shape[0]
    K = gnp.empty((n, m))
    for j in range(m):
        zj = zs[j]
        for i in range(n):
            K[i, j] = k(xs[i], zj)
    return K


def center_kernel_matrix(K, inplace: bool = False):
    """Double centering of a kernel matrix.

    .. math::
        K' = K - \\bar{K}_{i\\cdot} - \\bar{K}_{\\cdot j} + \\bar{K}

    where :math:`\\bar{K}_{i\\cdot}` and :math:`\\bar{K}_{\\cdot j}` are the
    row and column means and :math:`\\bar{K}` the grand mean. The rows
    and columns of the result sum to zero. This is the kernel matrix of
    the mean-subtracted feature vectors (kernel PCA).

    Parameters
    ----------
    K : array_like, shape (n, n)
    inplace : bool, default False
        Overwrite ``K`` if it is already a floating ndarray.

    Returns
    -------
    ndarray, shape (n, n)

    Raises
    ------
    NotSquareError
        If ``K`` is not square.
    """
    K = gnp.asarray(K) if inplace else gnp.array(K)
    if K.ndim != 2 or K.shape[0] != K.shape[1]:
        raise NotSquareError(f"Kernel matrix must be square, got shape {K.shape}.")
    n = K.shape[0]
    if n == 0:
        return K
    row_mean = gnp.scal(1.0 / n, gnp.sum(K, axis=1))
    col_mean = gnp.scal(1.0 / n, gnp.sum(K, axis=0))
    element_mean = gnp.sum(row_mean) / n
    K -= row_mean[:, None]
    K -= col_mean[None, :]
    K += element_mean
    return K


def nystrom_approx(
    X,
    sample_indices,
    kernel: Union[Kernel, Callable],
    layout: Union[str, Layout] = Layout.ROW_MAJOR,
    symmetrize: bool = True,
    rcond: float = 1e-10,
):
    """Nyström low-rank approximation of a kernel matrix.

    With landmarks ``S = sample_indices``, ``C`` the (n, |S|) kernel
    matrix between all observations and the landmarks, and ``W`` the
    Moore–Penrose pseudo-inverse of ``C[S, :]``, returns ``C W Cᵀ``.
    The landmark sub-matrix is symmetric and often nearly singular, so
    its Hermitian pseudo-inverse is taken with eigenvalues below
    ``rcond`` times the largest one discarded. The result is a low-rank
    approximation, exact up to that cutoff when the landmarks span the
    whole sample.

    Kernel objects use their Gramian shortcut for ``C``; plain callables
    go through :func:`kernel_matrix`.

    Parameters
    ----------
    X : array_like
        Data matrix with n observations.
    sample_indices : array_like of int
        Indices of the landmark observations, in ``[0, n)``.
    kernel : Kernel or callable
    layout : Layout
    symmetrize : bool, default True
        Mirror the upper triangle of the result onto the lower one.
    rcond : float, default 1e-10
        Relative cutoff for small eigenvalues of the landmark sub-matrix.

    Returns
    -------
    ndarray, shape (n, n)

    Raises
    ------
    ValueError
        If ``sample_indices`` is empty.
    TypeError
        If ``sample_indices`` is not integer-valued.
    IndexError
        If an index is out of range.
    """
    xs = observations(X, layout)
    n = xs.shape[0]
    S = gnp.asint(sample_indices).reshape(-1)
    if S.shape[0] == 0:
        raise ValueError("At least one landmark index is required.")
    if gnp.any(S < 0) or gnp.any(S >= n):
        raise IndexError(f"Landmark indices must lie in [0, {n}).")
    _logger.debug("Nystrom approximation: %d landmarks, %d observations", S.shape[0], n)

    landmarks = xs[S]
    if isinstance(kernel, Kernel):
        C = kernel.matrix(xs, landmarks)
    else:
        C = kernel_matrix(xs, kernel, Z=landmarks)
    W = gnp.pinv(_copytri(C[S, :]), rcond=rcond, hermitian=True)
    K = gnp.matmul(gnp.matmul(C, W), C.T)
    return _copytri(K) if symmetrize else K
