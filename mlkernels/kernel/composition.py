# mlkernels/kernel/composition.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Composition classes.

A composition class is a closed-form scalar transform ``phi(z)``
parameterized by a few hyperparameters. Applied to the values of an
inner kernel, it yields a new kernel; whether the result is a Mercer
(or negative-definite) kernel depends on the properties of the inner
kernel, which is what :meth:`CompositionClass.is_composable` checks.

The algebraic properties of a class (Mercer, negative definite,
attains negative / zero / positive values) only depend on its category
and are read from :data:`CATEGORY_PROPERTIES`.

``phi`` accepts scalars and arrays. Families with fractional powers or
logarithms are only defined for ``z >= 0``; callers are responsible
for passing non-negative values.
"""

from collections import namedtuple
from enum import Enum
from typing import Dict, Tuple

import mlkernels.num as gnp
from mlkernels.errors import NonComposableError
from mlkernels.hyperparameters import HyperParameter, lower_bound, between


class Category(Enum):
    POSITIVE_MERCER = "positive_mercer"
    NONNEGATIVE_NEGATIVE_DEFINITE = "nonnegative_negative_definite"
    MERCER = "mercer"
    OTHER = "other"


ClassProperties = namedtuple(
    "ClassProperties",
    [
        "is_mercer",
        "is_negative_definite",
        "attains_negative",
        "attains_zero",
        "attains_positive",
    ],
)

CATEGORY_PROPERTIES: Dict[Category, ClassProperties] = {
    Category.POSITIVE_MERCER: ClassProperties(True, False, False, False, True),
    Category.NONNEGATIVE_NEGATIVE_DEFINITE: ClassProperties(False, True, False, True, True),
    Category.MERCER: ClassProperties(True, False, True, True, True),
    Category.OTHER: ClassProperties(False, False, True, True, True),
}


class Requirement(Enum):
    """Property an inner kernel must have to be wrapped by a class."""

    NEGATIVE_DEFINITE_NONNEGATIVE = "negative definite and non-negative"
    MERCER = "Mercer"


KernelProperties = namedtuple(
    "KernelProperties", ["is_mercer", "is_negative_definite", "is_nonnegative"]
)

ParameterSpec = namedtuple(
    "ParameterSpec", ["name", "default", "interval", "integer"], defaults=(False,)
)


def satisfies(requirement: Requirement, inner) -> bool:
    """Check the properties of ``inner`` against a requirement.

    ``inner`` is a KernelProperties, a Kernel, or any object with the
    attributes ``is_mercer``, ``is_negative_definite`` and
    ``is_nonnegative``.
    """
    if requirement is Requirement.MERCER:
        return bool(inner.is_mercer)
    return bool(inner.is_negative_definite and inner.is_nonnegative)


# Intervals shared by the catalogue
POSITIVE = lower_bound(0.0, "strict")
NONNEGATIVE = lower_bound(0.0, "nonstrict")
UNIT = between(0.0, 1.0, "strict", "nonstrict")
DEGREE = lower_bound(1, "nonstrict")


class CompositionClass:
    """Base class of composition classes.

    Subclasses declare ``parameters`` (a tuple of ParameterSpec),
    ``category`` and ``requirement``, and implement ``phi``.
    Hyperparameter values are given positionally, in declaration
    order, or by name; missing ones take their default. Every value is
    validated against its interval, so a failed construction raises
    before any object is returned.
    """

    parameters: Tuple[ParameterSpec, ...] = ()
    category: Category = Category.OTHER
    requirement: Requirement = Requirement.MERCER

    def __init__(self, *args, **kwargs):
        names = [p.name for p in self.parameters]
        if len(args) > len(names):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(names)} "
                f"hyperparameters ({len(args)} given)."
            )
        values = dict(zip(names, args))
        for name, v in kwargs.items():
            if name not in names:
                raise TypeError(
                    f"{type(self).__name__} got an unexpected hyperparameter '{name}'."
                )
            if name in values:
                raise TypeError(
                    f"{type(self).__name__} got multiple values for '{name}'."
                )
            values[name] = v
        self._hyperparameters = {
            p.name: HyperParameter(
                values.get(p.name, p.default), p.interval, name=p.name, integer=p.integer
            )
            for p in self.parameters
        }

    def __getattr__(self, name):
        hyperparameters = self.__dict__.get("_hyperparameters", {})
        if name in hyperparameters:
            return hyperparameters[name]
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def hyperparameters(self) -> Tuple[HyperParameter, ...]:
        return tuple(self._hyperparameters.values())

    def get_values(self) -> tuple:
        """Hyperparameter values in declaration order."""
        return tuple(hp.get_value() for hp in self._hyperparameters.values())

    def set_values(self, **kwargs) -> None:
        """Update several hyperparameters; nothing changes if one is invalid."""
        staged = {}
        for name, v in kwargs.items():
            if name not in self._hyperparameters:
                raise TypeError(
                    f"{type(self).__name__} has no hyperparameter '{name}'."
                )
            hp = self._hyperparameters[name]
            staged[name] = HyperParameter(
                v, hp.interval, name=name, integer=hp.integer
            ).get_value()
        for name, v in staged.items():
            self._hyperparameters[name].set_value(v)

    # -- properties

    @property
    def properties(self) -> ClassProperties:
        return CATEGORY_PROPERTIES[self.category]

    @property
    def is_mercer(self) -> bool:
        return self.properties.is_mercer

    @property
    def is_negative_definite(self) -> bool:
        return self.properties.is_negative_definite

    @property
    def attains_negative(self) -> bool:
        return self.properties.attains_negative

    @property
    def attains_zero(self) -> bool:
        return self.properties.attains_zero

    @property
    def attains_positive(self) -> bool:
        return self.properties.attains_positive

    # -- composability

    def is_composable(self, inner) -> bool:
        return satisfies(self.requirement, inner)

    def check_composable(self, inner) -> None:
        if not self.is_composable(inner):
            raise NonComposableError(
                f"{type(self).__name__} requires a {self.requirement.value} "
                f"inner kernel, got {inner!r}."
            )

    # -- evaluation

    def phi(self, z):
        raise NotImplementedError

    def __call__(self, z):
        return self.phi(z)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.get_values() == other.get_values()

    __hash__ = None

    def __repr__(self) -> str:
        args = ", ".join(
            f"{name}={hp.get_value()!r}" for name, hp in self._hyperparameters.items()
        )
        return f"{type(self).__name__}({args})"


# ==========================================================================
#  Positive Mercer classes
# ==========================================================================


class GammaExponentialClass(CompositionClass):
    """exp(-alpha * z^gamma), alpha > 0, 0 < gamma <= 1."""

    parameters = (
        ParameterSpec("alpha", 1.0, POSITIVE),
        ParameterSpec("gamma", 0.5, UNIT),
    )
    category = Category.POSITIVE_MERCER
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        alpha, gamma = self.get_values()
        if gamma == 1.0:
            return gnp.exp(-alpha * z)
        return gnp.exp(-alpha * z**gamma)


class ExponentialClass(CompositionClass):
    """exp(-alpha * z), alpha > 0."""

    parameters = (ParameterSpec("alpha", 1.0, POSITIVE),)
    category = Category.POSITIVE_MERCER
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        (alpha,) = self.get_values()
        return gnp.exp(-alpha * z)


class GammaRationalClass(CompositionClass):
    """(1 + alpha * z^gamma)^(-beta), alpha, beta > 0, 0 < gamma <= 1."""

    parameters = (
        ParameterSpec("alpha", 1.0, POSITIVE),
        ParameterSpec("beta", 1.0, POSITIVE),
        ParameterSpec("gamma", 0.5, UNIT),
    )
    category = Category.POSITIVE_MERCER
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        alpha, beta, gamma = self.get_values()
        zg = z if gamma == 1.0 else z**gamma
        if beta == 1.0:
            return 1.0 / (1.0 + alpha * zg)
        return (1.0 + alpha * zg) ** (-beta)


class RationalClass(CompositionClass):
    """(1 + alpha * z)^(-beta), alpha, beta > 0."""

    parameters = (
        ParameterSpec("alpha", 1.0, POSITIVE),
        ParameterSpec("beta", 1.0, POSITIVE),
    )
    category = Category.POSITIVE_MERCER
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        alpha, beta = self.get_values()
        if beta == 1.0:
            return 1.0 / (1.0 + alpha * z)
        return (1.0 + alpha * z) ** (-beta)


class MaternClass(CompositionClass):
    """Matérn transform.

    .. math::
        \\phi(z) = \\frac{2}{\\Gamma(\\nu)} (v/2)^{\\nu} K_{\\nu}(v),
        \\quad v = \\sqrt{2\\nu}\\, z / \\rho

    with :math:`\\nu, \\rho > 0` and :math:`K_\\nu` the modified Bessel
    function of the second kind. ``v`` is floored at machine epsilon:
    the limit at ``z = 0`` is 1 but ``K_nu`` diverges there.
    """

    parameters = (
        ParameterSpec("nu", 1.0, POSITIVE),
        ParameterSpec("rho", 1.0, POSITIVE),
    )
    category = Category.POSITIVE_MERCER
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        nu, rho = self.get_values()
        v = gnp.maximum(gnp.sqrt(2.0 * nu) * z / rho, gnp.eps)
        return 2.0 * (v / 2.0) ** nu * gnp.kv(nu, v) / gnp.gamma(nu)


class ExponentiatedClass(CompositionClass):
    """exp(a * z + c), a > 0, c >= 0."""

    parameters = (
        ParameterSpec("a", 1.0, POSITIVE),
        ParameterSpec("c", 0.0, NONNEGATIVE),
    )
    category = Category.POSITIVE_MERCER
    requirement = Requirement.MERCER

    def phi(self, z):
        a, c = self.get_values()
        return gnp.exp(a * z + c)


# ==========================================================================
#  Other Mercer classes
# ==========================================================================


class PolynomialClass(CompositionClass):
    """(a * z + c)^d, a > 0, c >= 0, d integer >= 1."""

    parameters = (
        ParameterSpec("a", 1.0, POSITIVE),
        ParameterSpec("c", 0.0, NONNEGATIVE),
        ParameterSpec("d", 3, DEGREE, integer=True),
    )
    category = Category.MERCER
    requirement = Requirement.MERCER

    def phi(self, z):
        a, c, d = self.get_values()
        return (a * z + c) ** d


# ==========================================================================
#  Non-negative negative-definite classes
# ==========================================================================


class PowerClass(CompositionClass):
    """(a * z + c)^gamma, a > 0, c >= 0, 0 < gamma <= 1."""

    parameters = (
        ParameterSpec("a", 1.0, POSITIVE),
        ParameterSpec("c", 0.0, NONNEGATIVE),
        ParameterSpec("gamma", 0.5, UNIT),
    )
    category = Category.NONNEGATIVE_NEGATIVE_DEFINITE
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        a, c, gamma = self.get_values()
        if gamma == 1.0:
            return a * z + c
        return (a * z + c) ** gamma


class GammaLogClass(CompositionClass):
    """log(1 + alpha * z^gamma), alpha > 0, 0 < gamma <= 1."""

    parameters = (
        ParameterSpec("alpha", 1.0, POSITIVE),
        ParameterSpec("gamma", 0.5, UNIT),
    )
    category = Category.NONNEGATIVE_NEGATIVE_DEFINITE
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        alpha, gamma = self.get_values()
        if gamma == 1.0:
            return gnp.log1p(alpha * z)
        return gnp.log1p(alpha * z**gamma)


class LogClass(CompositionClass):
    """log(1 + alpha * z), alpha > 0."""

    parameters = (ParameterSpec("alpha", 1.0, POSITIVE),)
    category = Category.NONNEGATIVE_NEGATIVE_DEFINITE
    requirement = Requirement.NEGATIVE_DEFINITE_NONNEGATIVE

    def phi(self, z):
        (alpha,) = self.get_values()
        return gnp.log1p(alpha * z)


# ==========================================================================
#  Non-Mercer, non-negative-definite classes
# ==========================================================================


class SigmoidClass(CompositionClass):
    """tanh(a * z + c), a > 0, c >= 0."""

    parameters = (
        ParameterSpec("a", 1.0, POSITIVE),
        ParameterSpec("c", 0.0, NONNEGATIVE),
    )
    category = Category.OTHER
    requirement = Requirement.MERCER

    def phi(self, z):
        a, c = self.get_values()
        return gnp.tanh(a * z + c)


COMPOSITION_CLASSES = (
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
)
