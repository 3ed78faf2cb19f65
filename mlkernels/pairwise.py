# mlkernels/pairwise.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Pairwise inner products and squared distances.

Data matrices are dense 2-D arrays. The orientation is never guessed:
every function takes a :class:`Layout` telling whether observations are
the rows (``Layout.ROW_MAJOR``, the default) or the columns
(``Layout.COLUMN_MAJOR``) of the matrix.

The inner-product Gramian is computed with the BLAS routines ``syrk``
(self mode) and ``gemm`` (cross mode). Functions documented as in-place
overwrite a caller-supplied array; passing the same output buffer to
concurrent calls is not supported.
"""

from enum import Enum
from typing import Union

import mlkernels.num as gnp
from mlkernels.errors import DimensionMismatchError, NotSquareError


class Layout(Enum):
    ROW_MAJOR = "row"
    COLUMN_MAJOR = "column"


def parse_layout(layout: Union[str, Layout]) -> Layout:
    if isinstance(layout, Layout):
        return layout
    if isinstance(layout, str):
        s = layout.lower()
        if s in ("row", "rows", "row_major"):
            return Layout.ROW_MAJOR
        elif s in ("column", "columns", "col", "column_major"):
            return Layout.COLUMN_MAJOR
        raise ValueError(f"Unknown layout: {layout}")
    raise TypeError("Layout must be a str or a Layout enum.")


def as_data_matrix(X) -> gnp.ndarray:
    """Return ``X`` as a 2-D floating array."""
    X = gnp.asarray(X)
    if X.ndim != 2:
        raise DimensionMismatchError(
            f"Data matrix must be 2-D, got an array with shape {X.shape}."
        )
    return X


def observations(X, layout: Union[str, Layout] = Layout.ROW_MAJOR) -> gnp.ndarray:
    """View of ``X`` with one observation per row."""
    X = as_data_matrix(X)
    return X if parse_layout(layout) is Layout.ROW_MAJOR else X.T


def _check_square(S) -> int:
    if S.ndim != 2 or S.shape[0] != S.shape[1]:
        raise NotSquareError(f"Expected a square matrix, got shape {S.shape}.")
    return S.shape[0]


def symmetrize(S, uplo: str = "U") -> gnp.ndarray:
    """Copy one triangle of a square matrix onto the other, in place.

    Parameters
    ----------
    S : ndarray, shape (n, n)
        Matrix modified in place.
    uplo : {"U", "L"}
        Triangle used as source. With "U" the strictly lower triangle is
        overwritten by the transpose of the upper one.

    Returns
    -------
    ndarray
        ``S``, now exactly symmetric.
    """
    n = _check_square(S)
    i, j = gnp.tril_indices(n, -1)
    uplo = uplo.upper()
    if uplo == "U":
        S[i, j] = S[j, i]
    elif uplo == "L":
        S[j, i] = S[i, j]
    else:
        raise ValueError(f"uplo must be 'U' or 'L', got {uplo!r}")
    return S


# gramian and squared_distance take a `symmetrize` flag
_copytri = symmetrize


def dot_vectors(X, layout: Union[str, Layout] = Layout.ROW_MAJOR, out=None):
    """Squared Euclidean norm of each observation.

    Parameters
    ----------
    X : array_like, shape (n, p) or (p, n)
        Data matrix.
    layout : Layout
        Orientation of ``X``.
    out : ndarray, shape (n,), optional
        Output buffer, overwritten in place.

    Returns
    -------
    ndarray, shape (n,)
        ``xᵀx`` for each observation ``x``.

    Raises
    ------
    DimensionMismatchError
        If ``out`` does not have one entry per observation.
    """
    X = as_data_matrix(X)
    if parse_layout(layout) is Layout.ROW_MAJOR:
        subscripts, n = "ij,ij->i", X.shape[0]
    else:
        subscripts, n = "ij,ij->j", X.shape[1]
    if out is None:
        return gnp.einsum(subscripts, X, X)
    if out.ndim != 1 or out.shape[0] != n:
        raise DimensionMismatchError(
            f"Output buffer has shape {out.shape}, expected ({n},)."
        )
    gnp.einsum(subscripts, X, X, out=out)
    return out


def _copy_into(out, G):
    if out is None:
        return G
    if out.shape != G.shape:
        raise DimensionMismatchError(
            f"Output buffer has shape {out.shape}, expected {G.shape}."
        )
    out[...] = G
    return out


def gramian(
    X,
    Z=None,
    layout: Union[str, Layout] = Layout.ROW_MAJOR,
    symmetrize: bool = True,
    out=None,
):
    """Matrix of inner products between observations.

    In self mode (``Z`` is None) the result is ``X Xᵀ`` for row-major
    data and ``Xᵀ X`` for column-major data. It is computed by ``syrk``,
    which only fills the upper triangle; with ``symmetrize`` the upper
    triangle is copied onto the lower one so that ``G == G.T`` holds
    bitwise. Without it, the strictly lower triangle is zero.

    In cross mode the result is ``X Zᵀ`` (row-major) or ``Xᵀ Z``
    (column-major), computed by ``gemm``; ``symmetrize`` is ignored.

    Parameters
    ----------
    X : array_like
        Data matrix with n observations.
    Z : array_like, optional
        Second data matrix with m observations, same number of features.
    layout : Layout
    symmetrize : bool, default True
    out : ndarray, optional
        Output buffer of shape (n, n) or (n, m), overwritten in place.

    Returns
    -------
    ndarray, shape (n, n) or (n, m)

    Raises
    ------
    DimensionMismatchError
        If ``X`` and ``Z`` do not have the same number of features, or if
        ``out`` has the wrong shape.
    """
    X = as_data_matrix(X)
    rowmajor = parse_layout(layout) is Layout.ROW_MAJOR
    obs_axis, feat_axis = (0, 1) if rowmajor else (1, 0)

    if Z is None:
        n = X.shape[obs_axis]
        if X.size == 0:
            return _copy_into(out, gnp.zeros((n, n)))
        G = gnp.syrk(X, trans=not rowmajor)
        if symmetrize:
            _copytri(G)
        return _copy_into(out, G)

    Z = as_data_matrix(Z)
    if X.shape[feat_axis] != Z.shape[feat_axis]:
        raise DimensionMismatchError(
            f"X has {X.shape[feat_axis]} features and Z has {Z.shape[feat_axis]}."
        )
    n, m = X.shape[obs_axis], Z.shape[obs_axis]
    if X.size == 0 or Z.size == 0:
        return _copy_into(out, gnp.zeros((n, m)))
    if rowmajor:
        G = gnp.gemm(X, Z, trans_b=True)
    else:
        G = gnp.gemm(X, Z, trans_a=True)
    return _copy_into(out, G)


def squared_distance(G, xtx, ytx=None, symmetrize: bool = True):
    """Turn an inner-product Gramian into squared Euclidean distances, in place.

    ``D[i, j] = (xtx[i] + ytx[j]) - 2 G[i, j]``

    In self mode (``ytx`` is None) ``G`` must be square and only its upper
    triangle is read and rewritten; with ``symmetrize`` the result is then
    mirrored onto the lower triangle. In cross mode every entry is
    rewritten and no symmetrization applies.

    Parameters
    ----------
    G : ndarray, shape (n, n) or (n, m)
        Inner products, overwritten with squared distances.
    xtx : array_like, shape (n,)
        Squared norms of the first set of observations (see dot_vectors).
    ytx : array_like, shape (m,), optional
        Squared norms of the second set of observations.
    symmetrize : bool, default True

    Returns
    -------
    ndarray
        ``G``.

    Raises
    ------
    DimensionMismatchError
        If the norm vectors do not match the dimensions of ``G``.
    """
    if not gnp.isarray(G) or G.ndim != 2:
        raise TypeError("G must be a 2-D ndarray; it is modified in place.")
    xtx = gnp.asarray(xtx)
    if ytx is None:
        n = len(xtx)
        if not (xtx.ndim == 1 and n == G.shape[0] == G.shape[1]):
            raise DimensionMismatchError(
                f"Gramian matrix must be square with side len(xtx) = {n}, got {G.shape}."
            )
        iu, ju = gnp.triu_indices(n)
        G[iu, ju] = (xtx[iu] + xtx[ju]) - 2.0 * G[iu, ju]
        return _copytri(G) if symmetrize else G

    ytx = gnp.asarray(ytx)
    n, m = G.shape
    if xtx.ndim != 1 or n != len(xtx):
        raise DimensionMismatchError(
            f"Length of xtx ({len(xtx)}) must match the rows of G ({n})."
        )
    if ytx.ndim != 1 or m != len(ytx):
        raise DimensionMismatchError(
            f"Length of ytx ({len(ytx)}) must match the columns of G ({m})."
        )
    G *= -2.0
    G += xtx[:, None] + ytx[None, :]
    return G
