"""
Nyström approximation of a Gaussian kernel matrix

The kernel matrix of n observations is approximated from the kernel
values between all observations and a random subset of landmarks. The
approximation error decreases as the number of landmarks grows, and the
approximation is exact when every observation is a landmark.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""

import mlkernels.num as gnp
import mlkernels as mk
from mlkernels.kernel import gaussian_kernel


def main():
    n, dim = 200, 3
    gnp.set_seed(42)
    X = gnp.randn(n, dim)

    k = gaussian_kernel(alpha=0.2)
    K = k.matrix(X)
    normK = gnp.sqrt(gnp.sum(K * K))

    errors = []
    for m in [5, 10, 20, 50, n]:
        S = gnp.choice(n, m, replace=False)
        Kn = mk.nystrom_approx(X, S, k)
        err = gnp.sqrt(gnp.sum((K - Kn) ** 2)) / normK
        errors.append(err)
        print(f"landmarks = {m:4d}  relative error = {err:.3e}")

    return errors


if __name__ == "__main__":
    main()
