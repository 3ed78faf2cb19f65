# mlkernels/hyperparameters/interval.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Intervals built from a lower and an upper :class:`Bound`.

Besides membership tests, an interval provides a bijection ``theta``
between its interior and the real line, with inverse ``eta``. This is
the same device as the log / log_inv normalizations used for covariance
parameters: optimizers work on ``theta`` while the kernel sees the
constrained value.
"""

from typing import List, Optional, Union

import mlkernels.num as gnp
from mlkernels.errors import EmptyIntervalError, OutOfBoundsError
from .bound import (
    Bound,
    LowerBound,
    UpperBound,
    NullBound,
    Side,
    Strictness,
    StrictnessLike,
)

BoundLike = Optional[Union[Bound, "Interval"]]


def _resolve_side(arg: BoundLike, side: Side) -> Bound:
    if arg is None:
        return NullBound()
    if isinstance(arg, Interval):
        bound, other = (arg.lower, arg.upper) if side is Side.LOWER else (arg.upper, arg.lower)
        if bound.is_null and not other.is_null:
            raise ValueError(
                f"Expected an interval with a {side.value} bound, got {arg}."
            )
        return bound
    if isinstance(arg, Bound):
        if arg.side not in (side, Side.NONE):
            raise ValueError(
                f"Expected a {side.value} bound, got a {arg.side.value} bound."
            )
        return arg
    raise TypeError("Interval sides must be Bound, Interval or None.")


class Interval:
    """Two-sided constraint on a scalar.

    Parameters
    ----------
    lower : Bound, Interval or None
        Lower side. A half-open Interval contributes its lower bound.
        None means unbounded below.
    upper : Bound, Interval or None
        Upper side. A half-open Interval contributes its upper bound.
        None means unbounded above.

    Raises
    ------
    EmptyIntervalError
        If no value satisfies both sides.
    """

    def __init__(self, lower: BoundLike = None, upper: BoundLike = None):
        self.lower = _resolve_side(lower, Side.LOWER)
        self.upper = _resolve_side(upper, Side.UPPER)
        if not (self.lower.is_null or self.upper.is_null):
            a, b = self.lower.value, self.upper.value
            if a > b or (a == b and (self.lower.is_strict or self.upper.is_strict)):
                raise EmptyIntervalError(f"Interval {self} admits no value.")

    @property
    def is_bounded_below(self) -> bool:
        return not self.lower.is_null

    @property
    def is_bounded_above(self) -> bool:
        return not self.upper.is_null

    def contains(self, x: float) -> bool:
        """Return True iff ``x`` satisfies both sides. NaN is never contained."""
        if x != x:
            return False
        return bool(self.lower.admits(x) and self.upper.admits(x))

    def __contains__(self, x: float) -> bool:
        return self.contains(x)

    def check_bounds(self, values) -> List[bool]:
        return [self.contains(v) for v in values]

    def theta(self, x: float) -> float:
        """Map a value of the interval to the real line.

        Closed endpoints have no image on the real line and raise
        OutOfBoundsError like values outside the interval.
        """
        if not self.contains(x):
            raise OutOfBoundsError(f"{x} is outside {self}.")
        if x == self.lower.value or x == self.upper.value:
            raise OutOfBoundsError(f"{x} is an endpoint of {self} and has no theta.")
        if self.is_bounded_below and self.is_bounded_above:
            a, b = self.lower.value, self.upper.value
            return float(gnp.log(x - a) - gnp.log(b - x))
        if self.is_bounded_below:
            return float(gnp.log(x - self.lower.value))
        if self.is_bounded_above:
            return float(gnp.log(self.upper.value - x))
        return float(x)

    def eta(self, t: float) -> float:
        """Inverse of :meth:`theta`."""
        if self.is_bounded_below and self.is_bounded_above:
            a, b = self.lower.value, self.upper.value
            return float(a + (b - a) * gnp.expit(t))
        if self.is_bounded_below:
            return float(self.lower.value + gnp.exp(t))
        if self.is_bounded_above:
            return float(self.upper.value - gnp.exp(t))
        return float(t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.lower == other.lower and self.upper == other.upper

    def __hash__(self):
        return hash((self.lower, self.upper))

    def __str__(self) -> str:
        if self.lower.is_null:
            left = "(-inf"
        else:
            left = ("(" if self.lower.is_strict else "[") + f"{self.lower.value:g}"
        if self.upper.is_null:
            right = "+inf)"
        else:
            right = f"{self.upper.value:g}" + (")" if self.upper.is_strict else "]")
        return f"{left}, {right}"

    def __repr__(self) -> str:
        return f"Interval({self.lower!r}, {self.upper!r})"


def lower_bound(value: float, strictness: StrictnessLike = Strictness.STRICT) -> Interval:
    """Interval bounded below only."""
    return Interval(LowerBound(value, strictness), None)


def upper_bound(value: float, strictness: StrictnessLike = Strictness.STRICT) -> Interval:
    """Interval bounded above only."""
    return Interval(None, UpperBound(value, strictness))


def between(
    lower: Optional[float] = None,
    upper: Optional[float] = None,
    lower_strictness: StrictnessLike = Strictness.STRICT,
    upper_strictness: StrictnessLike = Strictness.STRICT,
) -> Interval:
    """Build an Interval from plain numbers; None leaves a side unbounded."""
    return Interval(
        None if lower is None else LowerBound(lower, lower_strictness),
        None if upper is None else UpperBound(upper, upper_strictness),
    )
