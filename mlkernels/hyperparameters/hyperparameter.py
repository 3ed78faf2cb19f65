# mlkernels/hyperparameters/hyperparameter.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
HyperParameter: a named scalar tied to an Interval.

The interval is enforced on construction and on every mutation; a
failed ``set_value`` leaves the stored value untouched.
"""

from numbers import Integral, Real
from typing import Optional, Union

from mlkernels.errors import OutOfBoundsError
from .interval import Interval

Number = Union[int, float]


class HyperParameter:
    """Mutable scalar constrained to an interval.

    Parameters
    ----------
    value : int or float
        Initial value, validated against ``interval``.
    interval : Interval, optional
        Admissible values. Defaults to the whole real line.
    name : str, optional
        Name used in messages and representations.
    integer : bool, default False
        If True, the parameter is discrete and only integral values are
        accepted.

    Raises
    ------
    OutOfBoundsError
        If ``value`` is not in ``interval``.
    TypeError
        If ``integer`` is True and ``value`` is not integral.
    """

    def __init__(
        self,
        value: Number,
        interval: Optional[Interval] = None,
        name: Optional[str] = None,
        integer: bool = False,
    ):
        self.interval = Interval() if interval is None else interval
        self.name = name
        self.integer = integer
        self._value = self._validate(value)

    def _coerce(self, v: Number) -> Number:
        if not self.integer:
            return float(v)
        if isinstance(v, bool):
            raise TypeError(f"{self._label()} expects an integer, got {v!r}.")
        if isinstance(v, Integral):
            return int(v)
        if isinstance(v, Real) and float(v).is_integer():
            return int(v)
        raise TypeError(f"{self._label()} expects an integer, got {v!r}.")

    def _validate(self, v: Number) -> Number:
        v = self._coerce(v)
        if not self.interval.contains(v):
            raise OutOfBoundsError(
                f"{self._label()} = {v} is outside the interval {self.interval}."
            )
        return v

    def _label(self) -> str:
        return "hyperparameter" if self.name is None else f"hyperparameter '{self.name}'"

    def get_value(self) -> Number:
        return self._value

    def set_value(self, v: Number) -> None:
        self._value = self._validate(v)

    def check_value(self, v: Number) -> bool:
        return self.interval.contains(v)

    @property
    def value(self) -> Number:
        return self._value

    @value.setter
    def value(self, v: Number) -> None:
        self.set_value(v)

    def get_theta(self) -> float:
        """Value mapped to the real line by the interval."""
        return self.interval.theta(self._value)

    def set_theta(self, t: float) -> None:
        """Set the value from its unconstrained image ``t``.

        Integer parameters are rounded to the nearest integer.
        """
        v = self.interval.eta(t)
        if self.integer:
            v = int(round(v))
        self.set_value(v)

    def __float__(self) -> float:
        return float(self._value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HyperParameter):
            return NotImplemented
        return (
            self.name == other.name
            and self._value == other._value
            and self.interval == other.interval
            and self.integer == other.integer
        )

    __hash__ = None

    def __repr__(self) -> str:
        name = "" if self.name is None else f"{self.name}="
        return f"HyperParameter({name}{self._value!r}, {self.interval})"
