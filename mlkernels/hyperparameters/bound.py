# mlkernels/hyperparameters/bound.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
One-sided numeric constraints.

A :class:`Bound` is a literal value together with a strictness
(``strict`` excludes the value itself, ``nonstrict`` includes it) and a
side (``lower``, ``upper`` or ``none``). A bound on side ``none``
constrains nothing and carries no value.
"""

from enum import Enum
from math import isfinite
from typing import Optional, Union

from mlkernels.errors import InvalidBoundError


class Strictness(Enum):
    STRICT = "strict"
    NONSTRICT = "nonstrict"


class Side(Enum):
    LOWER = "lower"
    UPPER = "upper"
    NONE = "none"


StrictnessLike = Union[bool, str, Strictness]


def parse_strictness(strictness: StrictnessLike) -> Strictness:
    """Accept a Strictness, a bool (True means strict) or a string."""
    if isinstance(strictness, Strictness):
        return strictness
    if isinstance(strictness, bool):
        return Strictness.STRICT if strictness else Strictness.NONSTRICT
    if isinstance(strictness, str):
        s = strictness.lower()
        if s == "strict":
            return Strictness.STRICT
        elif s in ("nonstrict", "non-strict"):
            return Strictness.NONSTRICT
        raise ValueError(f"Unknown strictness: {strictness}")
    raise TypeError("Strictness must be a bool, a str or a Strictness enum.")


class Bound:
    """Single-sided constraint on a scalar.

    Parameters
    ----------
    value : float or None
        Literal value of the bound. Must be finite unless ``side`` is
        ``Side.NONE``, in which case it is ignored.
    strictness : bool, str or Strictness, default "strict"
    side : str or Side, default Side.LOWER

    Raises
    ------
    InvalidBoundError
        If ``value`` is NaN or infinite on a lower or upper bound.
    """

    def __init__(
        self,
        value: Optional[float] = None,
        strictness: StrictnessLike = Strictness.STRICT,
        side: Union[str, Side] = Side.LOWER,
    ):
        self.side = Side(side)
        self.strictness = parse_strictness(strictness)
        if self.side is Side.NONE:
            self.value = None
            return
        if value is None:
            raise InvalidBoundError(f"A {self.side.value} bound requires a value.")
        value = float(value)
        if not isfinite(value):
            raise InvalidBoundError(
                f"Bound value must be finite, got {value} for a {self.side.value} bound."
            )
        self.value = value

    @property
    def is_strict(self) -> bool:
        return self.strictness is Strictness.STRICT

    @property
    def is_null(self) -> bool:
        return self.side is Side.NONE

    def admits(self, x: float) -> bool:
        """Return True if ``x`` satisfies this one-sided constraint."""
        if self.side is Side.NONE:
            return True
        if self.side is Side.LOWER:
            return x > self.value if self.is_strict else x >= self.value
        return x < self.value if self.is_strict else x <= self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        if self.is_null or other.is_null:
            return self.is_null and other.is_null
        return (
            self.side is other.side
            and self.strictness is other.strictness
            and self.value == other.value
        )

    def __hash__(self):
        if self.is_null:
            return hash(Side.NONE)
        return hash((self.side, self.strictness, self.value))

    def __repr__(self) -> str:
        if self.is_null:
            return "NullBound()"
        name = "LowerBound" if self.side is Side.LOWER else "UpperBound"
        return f"{name}({self.value!r}, {self.strictness.value!r})"


class LowerBound(Bound):
    """Lower bound: ``x > value`` (strict) or ``x >= value`` (nonstrict)."""

    def __init__(self, value: float, strictness: StrictnessLike = Strictness.STRICT):
        super().__init__(value, strictness, Side.LOWER)


class UpperBound(Bound):
    """Upper bound: ``x < value`` (strict) or ``x <= value`` (nonstrict)."""

    def __init__(self, value: float, strictness: StrictnessLike = Strictness.STRICT):
        super().__init__(value, strictness, Side.UPPER)


class NullBound(Bound):
    """No constraint on this side."""

    def __init__(self):
        super().__init__(None, Strictness.NONSTRICT, Side.NONE)
