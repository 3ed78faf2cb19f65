# mlkernels/__init__.py

from . import config
from . import num
from . import errors
from . import hyperparameters
from . import pairwise
from . import kernel
from . import kernelmatrix
from .config import __version__
from .hyperparameters import HyperParameter, Interval
from .pairwise import Layout, dot_vectors, gramian, squared_distance
from .kernelmatrix import kernel_matrix, center_kernel_matrix, nystrom_approx

__all__ = [
    "num",
    "errors",
    "hyperparameters",
    "pairwise",
    "kernel",
    "kernelmatrix",
    "HyperParameter",
    "Interval",
    "Layout",
    "dot_vectors",
    "gramian",
    "squared_distance",
    "kernel_matrix",
    "center_kernel_matrix",
    "nystrom_approx",
    "__version__",
]
