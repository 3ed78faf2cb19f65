# mlkernels/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernels and composition classes.

Modules
-------
composition
    Composition classes phi(z) with validated hyperparameters,
    their category properties and composability rules.
base
    Base kernels (scalar product, squared distance) and composite kernels.

Public API
-----------
- Composition classes:
    GammaExponentialClass, ExponentialClass, GammaRationalClass,
    RationalClass, MaternClass, ExponentiatedClass, PolynomialClass,
    PowerClass, GammaLogClass, LogClass, SigmoidClass
- Kernels:
    ScalarProductKernel, SquaredDistanceKernel, CompositeKernel,
    gaussian_kernel, laplacian_kernel, polynomial_kernel, sigmoid_kernel
"""

from .composition import (
    Category,
    ClassProperties,
    CATEGORY_PROPERTIES,
    Requirement,
    KernelProperties,
    ParameterSpec,
    CompositionClass,
    GammaExponentialClass,
    ExponentialClass,
    GammaRationalClass,
    RationalClass,
    MaternClass,
    ExponentiatedClass,
    PolynomialClass,
    PowerClass,
    GammaLogClass,
    LogClass,
    SigmoidClass,
    COMPOSITION_CLASSES,
)
from .base import (
    Kernel,
    ScalarProductKernel,
    SquaredDistanceKernel,
    CompositeKernel,
    kernel_function,
    gaussian_kernel,
    laplacian_kernel,
    polynomial_kernel,
    sigmoid_kernel,
)

__all__ = [
    # Composition classes
    "Category",
    "ClassProperties",
    "CATEGORY_PROPERTIES",
    "Requirement",
    "KernelProperties",
    "ParameterSpec",
    "CompositionClass",
    "GammaExponentialClass",
    "ExponentialClass",
    "GammaRationalClass",
    "RationalClass",
    "MaternClass",
    "ExponentiatedClass",
    "PolynomialClass",
    "PowerClass",
    "GammaLogClass",
    "LogClass",
    "SigmoidClass",
    "COMPOSITION_CLASSES",
    # Kernels
    "Kernel",
    "ScalarProductKernel",
    "SquaredDistanceKernel",
    "CompositeKernel",
    "kernel_function",
    "gaussian_kernel",
    "laplacian_kernel",
    "polynomial_kernel",
    "sigmoid_kernel",
]
