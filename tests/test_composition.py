import math
import unittest
import mlkernels.num as gnp
from mlkernels.errors import NonComposableError, OutOfBoundsError
from mlkernels.kernel import (
    CATEGORY_PROPERTIES,
    COMPOSITION_CLASSES,
    Requirement,
    KernelProperties,
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

SQUARED_DISTANCE = KernelProperties(
    is_mercer=False, is_negative_definite=True, is_nonnegative=True
)
SCALAR_PRODUCT = KernelProperties(
    is_mercer=True, is_negative_definite=False, is_nonnegative=False
)


class TestCompositionValues(unittest.TestCase):
    def test_exponential(self):
        phi = ExponentialClass(alpha=1.0)
        self.assertEqual(phi.phi(0.0), 1.0)
        self.assertAlmostEqual(phi.phi(1.0), math.exp(-1.0))
        self.assertAlmostEqual(phi(1.0), 0.36787944117144233)

    def test_polynomial(self):
        phi = PolynomialClass(a=1, c=0, d=2)
        self.assertEqual(phi.phi(3.0), 9.0)
        self.assertEqual(PolynomialClass(2.0, 1.0, 3)(1.0), 27.0)
        with self.assertRaises(OutOfBoundsError):
            PolynomialClass(a=1, c=0, d=0)
        with self.assertRaises(TypeError):
            PolynomialClass(d=2.5)

    def test_gamma_exponential(self):
        self.assertAlmostEqual(GammaExponentialClass(2.0, 0.5)(4.0), math.exp(-4.0))
        self.assertAlmostEqual(GammaExponentialClass(2.0, 1.0)(0.3), math.exp(-0.6))

    def test_rational(self):
        self.assertAlmostEqual(GammaRationalClass(1.0, 2.0, 0.5)(4.0), 1.0 / 9.0)
        self.assertEqual(GammaRationalClass(1.0, 1.0, 1.0)(3.0), 0.25)
        self.assertAlmostEqual(RationalClass(2.0, 3.0)(0.5), 0.125)
        self.assertEqual(RationalClass(1.0, 1.0)(1.0), 0.5)

    def test_matern(self):
        z = gnp.array([0.1, 1.0, 2.5])
        # nu = 1/2 gives exp(-z / rho)
        phi = MaternClass(nu=0.5, rho=1.0)
        self.assertTrue(gnp.allclose(phi(z), gnp.exp(-z)))
        self.assertAlmostEqual(phi(0.0), 1.0, places=6)
        # nu = 3/2 gives (1 + v) exp(-v) with v = sqrt(3) z / rho
        phi = MaternClass(nu=1.5, rho=2.0)
        v = math.sqrt(3.0) * z / 2.0
        self.assertTrue(gnp.allclose(phi(z), (1.0 + v) * gnp.exp(-v)))
        self.assertAlmostEqual(MaternClass()(0.0), 1.0, places=6)

    def test_exponentiated(self):
        self.assertEqual(ExponentiatedClass(1.0, 0.0)(0.0), 1.0)
        self.assertAlmostEqual(ExponentiatedClass(2.0, 1.0)(0.5), math.exp(2.0))

    def test_power(self):
        self.assertEqual(PowerClass(1.0, 0.0, 0.5)(9.0), 3.0)
        self.assertEqual(PowerClass(2.0, 1.0, 1.0)(3.0), 7.0)

    def test_log(self):
        self.assertAlmostEqual(LogClass(1.0)(math.e - 1.0), 1.0)
        self.assertAlmostEqual(GammaLogClass(1.0, 0.5)(9.0), math.log(4.0))
        self.assertAlmostEqual(GammaLogClass(2.0, 1.0)(1.5), math.log(4.0))

    def test_sigmoid(self):
        self.assertEqual(SigmoidClass(1.0, 0.0)(0.0), 0.0)
        self.assertAlmostEqual(SigmoidClass(0.5, 1.0)(2.0), math.tanh(2.0))

    def test_array_input(self):
        z = gnp.array([[0.0, 1.0], [2.0, 3.0]])
        out = RationalClass(1.0, 2.0)(z)
        self.assertEqual(out.shape, (2, 2))
        self.assertTrue(gnp.allclose(out, (1.0 + z) ** -2.0))


class TestCompositionParameters(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(ExponentialClass().get_values(), (1.0,))
        self.assertEqual(GammaRationalClass().get_values(), (1.0, 1.0, 0.5))
        self.assertEqual(PolynomialClass().get_values(), (1.0, 0.0, 3))
        self.assertEqual(PowerClass().get_values(), (1.0, 0.0, 0.5))

    def test_positional_and_named(self):
        self.assertEqual(GammaRationalClass(2.0, gamma=1.0).get_values(), (2.0, 1.0, 1.0))
        with self.assertRaises(TypeError):
            ExponentialClass(1.0, 2.0)
        with self.assertRaises(TypeError):
            ExponentialClass(beta=1.0)
        with self.assertRaises(TypeError):
            ExponentialClass(1.0, alpha=2.0)

    def test_invalid_values(self):
        with self.assertRaises(OutOfBoundsError):
            ExponentialClass(alpha=0.0)
        with self.assertRaises(OutOfBoundsError):
            GammaExponentialClass(gamma=1.5)
        with self.assertRaises(OutOfBoundsError):
            PowerClass(c=-1.0)
        with self.assertRaises(OutOfBoundsError):
            MaternClass(rho=-2.0)

    def test_update_in_place(self):
        phi = ExponentialClass(1.0)
        phi.alpha.set_value(2.0)
        self.assertAlmostEqual(phi(1.0), math.exp(-2.0))
        with self.assertRaises(OutOfBoundsError):
            phi.alpha.set_value(-1.0)
        self.assertEqual(phi.alpha.get_value(), 2.0)

    def test_set_values_is_atomic(self):
        phi = GammaRationalClass()
        phi.set_values(alpha=3.0, beta=2.0)
        self.assertEqual(phi.get_values(), (3.0, 2.0, 0.5))
        with self.assertRaises(OutOfBoundsError):
            phi.set_values(alpha=2.0, gamma=2.0)
        self.assertEqual(phi.get_values(), (3.0, 2.0, 0.5))
        with self.assertRaises(TypeError):
            phi.set_values(nu=1.0)

    def test_hyperparameters_are_not_shared(self):
        a, b = ExponentialClass(), ExponentialClass()
        a.alpha.set_value(5.0)
        self.assertEqual(b.alpha.get_value(), 1.0)
        self.assertIsNot(a.alpha, b.alpha)

    def test_repr_and_eq(self):
        self.assertEqual(repr(ExponentialClass(2.0)), "ExponentialClass(alpha=2.0)")
        self.assertEqual(PolynomialClass(1.0, 0.0, 2), PolynomialClass(d=2))
        self.assertNotEqual(PolynomialClass(d=2), PolynomialClass(d=3))


class TestCompositionProperties(unittest.TestCase):
    def test_category_table(self):
        for cls in COMPOSITION_CLASSES:
            phi = cls()
            expected = CATEGORY_PROPERTIES[cls.category]
            self.assertEqual(phi.properties, expected)
            self.assertEqual(phi.is_mercer, expected.is_mercer)
            self.assertEqual(phi.attains_zero, expected.attains_zero)

    def test_individual_properties(self):
        phi = ExponentialClass()
        self.assertTrue(phi.is_mercer)
        self.assertFalse(phi.is_negative_definite)
        self.assertFalse(phi.attains_negative)
        self.assertFalse(phi.attains_zero)
        self.assertTrue(phi.attains_positive)
        self.assertTrue(LogClass().is_negative_definite)
        self.assertTrue(LogClass().attains_zero)
        self.assertTrue(PolynomialClass().is_mercer)
        self.assertTrue(PolynomialClass().attains_negative)
        self.assertFalse(SigmoidClass().is_mercer)
        self.assertFalse(SigmoidClass().is_negative_definite)

    def test_composability(self):
        for cls in COMPOSITION_CLASSES:
            phi = cls()
            if cls.requirement is Requirement.MERCER:
                self.assertTrue(phi.is_composable(SCALAR_PRODUCT))
                self.assertFalse(phi.is_composable(SQUARED_DISTANCE))
            else:
                self.assertTrue(phi.is_composable(SQUARED_DISTANCE))
                self.assertFalse(phi.is_composable(SCALAR_PRODUCT))

    def test_negative_definite_inner_must_be_nonnegative(self):
        signed = KernelProperties(False, True, False)
        self.assertFalse(ExponentialClass().is_composable(signed))
        with self.assertRaises(NonComposableError):
            ExponentialClass().check_composable(signed)
        with self.assertRaises(NonComposableError):
            PolynomialClass().check_composable(SQUARED_DISTANCE)


if __name__ == "__main__":
    unittest.main()
