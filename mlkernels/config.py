# mlkernels/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_BACKENDS = ("numpy",)
_DTYPES = {
    "float": "float64",
    "float64": "float64",
    "double": "float64",
    "float32": "float32",
    "single": "float32",
}


def _normalize_dtype_spec(dtype):
    """Return "float64" or "float32" for a floating dtype given as a
    Python type, a numpy type or dtype, or a string."""
    name = dtype if isinstance(dtype, str) else getattr(dtype, "__name__", str(dtype))
    try:
        return _DTYPES[name.lower()]
    except KeyError:
        raise ValueError(
            f"dtype must be one of {sorted(set(_DTYPES.values()))}, got {dtype!r}"
        ) from None


class _MLKernelsConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = float
        # logger lives in config
        self.logger = logging.getLogger("mlkernels")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("MLKERNELS_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"MLKernelsConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype})"
        )

    def __repr__(self):
        return (
            f"<MLKernelsConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self


_config = _MLKernelsConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("MLKERNELS_BACKEND", "numpy")
    if env not in _BACKENDS:
        raise ValueError(
            f"MLKERNELS_BACKEND={env!r} is not supported; use one of {_BACKENDS}"
        )
    return env


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["MLKERNELS_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing mlkernels.num."""
    if backend not in _BACKENDS:
        raise ValueError(f"backend must be one of {_BACKENDS}")
    _config.backend = backend
    os.environ["MLKERNELS_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_dtype(dtype):
    """Set the floating dtype; takes effect before importing mlkernels.num."""
    _normalize_dtype_spec(dtype)
    _config.dtype = dtype


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
