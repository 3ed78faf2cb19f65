# mlkernels/hyperparameters/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Validated hyperparameters.

Modules
-------
bound
    One-sided constraints (lower, upper, null) with strictness.
interval
    Two-sided constraints, membership and unconstrained reparameterization.
hyperparameter
    Mutable scalar tied to an interval.
"""

from .bound import (
    Bound,
    LowerBound,
    UpperBound,
    NullBound,
    Side,
    Strictness,
    parse_strictness,
)
from .interval import Interval, lower_bound, upper_bound, between
from .hyperparameter import HyperParameter

__all__ = [
    "Bound",
    "LowerBound",
    "UpperBound",
    "NullBound",
    "Side",
    "Strictness",
    "parse_strictness",
    "Interval",
    "lower_bound",
    "upper_bound",
    "between",
    "HyperParameter",
]
