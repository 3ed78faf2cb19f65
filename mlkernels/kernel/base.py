# mlkernels/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Base kernels and their composition.

Base kernels are expressible through inner products, so their matrices
are built by the Gramian engine rather than by pairwise evaluation.
A :class:`CompositeKernel` applies a composition class to the values of
an inner kernel, after checking that the composition is legal.
"""

from typing import Callable, Union

import mlkernels.num as gnp
from mlkernels.pairwise import (
    Layout,
    dot_vectors,
    gramian,
    squared_distance,
)
from .composition import (
    CompositionClass,
    KernelProperties,
    ExponentialClass,
    GammaExponentialClass,
    PolynomialClass,
    SigmoidClass,
)


class Kernel:
    """Base class of kernels.

    Subclasses implement ``__call__(x, y)`` on two observations and may
    override ``matrix`` with a closed-form Gramian shortcut.
    """

    is_mercer = False
    is_negative_definite = False
    is_nonnegative = False

    def __call__(self, x, y) -> float:
        raise NotImplementedError

    def matrix(self, X, Z=None, layout: Union[str, Layout] = Layout.ROW_MAJOR):
        """Kernel matrix between the observations of ``X`` (and ``Z``)."""
        from mlkernels.kernelmatrix import kernel_matrix

        return kernel_matrix(X, self, Z=Z, layout=layout)

    @property
    def properties(self) -> KernelProperties:
        return KernelProperties(
            self.is_mercer, self.is_negative_definite, self.is_nonnegative
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ScalarProductKernel(Kernel):
    """k(x, y) = xᵀy."""

    is_mercer = True

    def __call__(self, x, y) -> float:
        return float(gnp.sum(gnp.asarray(x) * gnp.asarray(y)))

    def matrix(self, X, Z=None, layout=Layout.ROW_MAJOR):
        return gramian(X, Z, layout=layout)


class SquaredDistanceKernel(Kernel):
    """k(x, y) = ‖x - y‖².

    The matrix is obtained from the inner-product Gramian. Cancellation
    may leave tiny negative entries; they are clamped at zero, and the
    diagonal of a self matrix is set to zero.
    """

    is_negative_definite = True
    is_nonnegative = True

    def __call__(self, x, y) -> float:
        d = gnp.asarray(x) - gnp.asarray(y)
        return float(gnp.sum(d * d))

    def matrix(self, X, Z=None, layout=Layout.ROW_MAJOR):
        G = gramian(X, Z, layout=layout)
        xtx = dot_vectors(X, layout)
        if Z is None:
            D = squared_distance(G, xtx)
            gnp.fill_diagonal(D, 0.0)
        else:
            D = squared_distance(G, xtx, dot_vectors(Z, layout))
        return gnp.maximum(D, 0.0, out=D)


class CompositeKernel(Kernel):
    """Kernel ``phi(kappa(x, y))``.

    Parameters
    ----------
    phi : CompositionClass
    kappa : Kernel
        Inner kernel.

    Raises
    ------
    NonComposableError
        If ``phi`` cannot wrap ``kappa``.
    """

    def __init__(self, phi: CompositionClass, kappa: Kernel):
        phi.check_composable(kappa)
        self.phi = phi
        self.kappa = kappa

    @property
    def is_mercer(self) -> bool:
        return self.phi.is_mercer

    @property
    def is_negative_definite(self) -> bool:
        return self.phi.is_negative_definite

    @property
    def is_nonnegative(self) -> bool:
        return not self.phi.attains_negative

    def __call__(self, x, y) -> float:
        return float(self.phi(self.kappa(x, y)))

    def matrix(self, X, Z=None, layout=Layout.ROW_MAJOR):
        return self.phi(self.kappa.matrix(X, Z, layout=layout))

    def __repr__(self) -> str:
        return f"CompositeKernel({self.phi!r}, {self.kappa!r})"


def kernel_function(kernel: Union[Kernel, Callable]) -> Callable:
    """Return a scalar function ``k(x, y)`` for a kernel or a callable."""
    if isinstance(kernel, Kernel) or callable(kernel):
        return kernel
    raise TypeError(f"Expected a Kernel or a callable, got {type(kernel).__name__}.")


# -- common kernels


def gaussian_kernel(alpha: float = 1.0) -> CompositeKernel:
    """exp(-alpha ‖x - y‖²)."""
    return CompositeKernel(ExponentialClass(alpha), SquaredDistanceKernel())


def laplacian_kernel(alpha: float = 1.0) -> CompositeKernel:
    """exp(-alpha ‖x - y‖)."""
    return CompositeKernel(GammaExponentialClass(alpha, 0.5), SquaredDistanceKernel())


def polynomial_kernel(a: float = 1.0, c: float = 0.0, d: int = 3) -> CompositeKernel:
    """(a xᵀy + c)^d."""
    return CompositeKernel(PolynomialClass(a, c, d), ScalarProductKernel())


def sigmoid_kernel(a: float = 1.0, c: float = 0.0) -> CompositeKernel:
    """tanh(a xᵀy + c)."""
    return CompositeKernel(SigmoidClass(a, c), ScalarProductKernel())
