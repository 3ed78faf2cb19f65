"""
Composition classes and composite kernels

This example builds kernels of the form phi(kappa(x, y)), where kappa is
the scalar product or the squared distance, and checks which
compositions are legal.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""

import mlkernels.num as gnp
import mlkernels as mk
from mlkernels.errors import NonComposableError
from mlkernels.kernel import (
    COMPOSITION_CLASSES,
    ExponentialClass,
    MaternClass,
    ScalarProductKernel,
    SquaredDistanceKernel,
    CompositeKernel,
    PowerClass,
)


def main():
    # property table of the catalogue
    for cls in COMPOSITION_CLASSES:
        phi = cls()
        print(f"{phi!r:60s} mercer={phi.is_mercer!s:5s} requires={cls.requirement.value}")

    gnp.set_seed(0)
    X = gnp.randn(6, 2)

    # Matern on the distance ||x - y|| = (||x - y||^2)^(1/2)
    distance = CompositeKernel(PowerClass(1.0, 0.0, 0.5), SquaredDistanceKernel())
    matern = CompositeKernel(MaternClass(nu=2.5, rho=0.5), distance)
    K = matern.matrix(X)
    print("Matern 5/2 kernel matrix:")
    print(K)

    # hyperparameters are validated on every update
    matern.phi.rho.set_value(2.0)
    try:
        matern.phi.rho.set_value(-1.0)
    except ValueError as e:
        print(f"rejected: {e}")

    try:
        CompositeKernel(ExponentialClass(), ScalarProductKernel())
    except NonComposableError as e:
        print(f"rejected: {e}")

    return mk.center_kernel_matrix(matern.matrix(X))


if __name__ == "__main__":
    main()
