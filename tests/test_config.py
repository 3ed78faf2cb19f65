import logging
import numpy
import pytest
import mlkernels
import mlkernels.num as gnp
from mlkernels.config import (
    _normalize_dtype_spec,
    get_config,
    get_backend,
    set_backend,
    set_dtype,
    get_logger,
    set_log_level,
)


def test_backend_is_numpy():
    assert get_backend() == "numpy"
    assert get_config().backend == "numpy"
    with pytest.raises(ValueError):
        set_backend("torch")


def test_logger():
    logger = get_logger()
    assert logger.name == "mlkernels"
    old = logger.level
    set_log_level(logging.DEBUG)
    assert logger.isEnabledFor(logging.DEBUG)
    set_log_level(old)


def test_version():
    assert isinstance(mlkernels.__version__, str)
    assert get_config().version == mlkernels.__version__


def test_dtype():
    assert _normalize_dtype_spec(float) == "float64"
    assert _normalize_dtype_spec("single") == "float32"
    assert _normalize_dtype_spec(numpy.float32) == "float32"
    assert _normalize_dtype_spec(numpy.dtype("float64")) == "float64"
    with pytest.raises(ValueError):
        _normalize_dtype_spec("int32")
    with pytest.raises(ValueError):
        set_dtype(int)

    # non-floating input is cast to the configured dtype
    resolved = get_config().dtype_resolved
    assert resolved is numpy.dtype(_normalize_dtype_spec(get_config().dtype)).type
    assert gnp.asarray([1, 2, 3]).dtype == resolved
    assert gnp.zeros(2).dtype == resolved
