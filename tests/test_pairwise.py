"""
Unit tests for the pairwise Gramian engine (unittest version).
"""

import unittest
import mlkernels.num as gnp
from mlkernels.errors import DimensionMismatchError, NotSquareError
from mlkernels.pairwise import (
    Layout,
    parse_layout,
    dot_vectors,
    gramian,
    squared_distance,
    symmetrize,
)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def make_x(n=7, d=4, seed=0):
    gnp.set_seed(seed)
    return gnp.randn(n, d)


def brute_force_sqdist(X, Z):
    diff = X[:, None, :] - Z[None, :, :]
    return gnp.sum(diff * diff, axis=2)


IDENTITY = gnp.array([[1.0, 0.0], [0.0, 1.0]])


# ======================================================================
#                           Test cases
# ======================================================================
class TestLayout(unittest.TestCase):

    def test_parse(self):
        self.assertIs(parse_layout("row"), Layout.ROW_MAJOR)
        self.assertIs(parse_layout("column_major"), Layout.COLUMN_MAJOR)
        self.assertIs(parse_layout(Layout.COLUMN_MAJOR), Layout.COLUMN_MAJOR)
        with self.assertRaises(ValueError):
            parse_layout("diagonal")


class TestDotVectors(unittest.TestCase):

    def test_identity(self):
        self.assertTrue(gnp.array_equal(dot_vectors(IDENTITY), gnp.array([1.0, 1.0])))

    def test_layouts(self):
        X = gnp.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        self.assertTrue(gnp.allclose(dot_vectors(X), [5.0, 25.0, 61.0]))
        self.assertTrue(
            gnp.allclose(dot_vectors(X, Layout.COLUMN_MAJOR), [35.0, 56.0])
        )

    def test_output_buffer(self):
        X = make_x()
        out = gnp.empty(7)
        res = dot_vectors(X, out=out)
        self.assertIs(res, out)
        self.assertTrue(gnp.allclose(out, gnp.sum(X * X, axis=1)))
        with self.assertRaises(DimensionMismatchError):
            dot_vectors(X, out=gnp.empty(4))
        with self.assertRaises(DimensionMismatchError):
            dot_vectors(X, Layout.COLUMN_MAJOR, out=gnp.empty(7))

    def test_not_a_matrix(self):
        with self.assertRaises(DimensionMismatchError):
            dot_vectors(gnp.ones(3))


class TestGramian(unittest.TestCase):

    def test_identity(self):
        self.assertTrue(gnp.array_equal(gramian(IDENTITY, symmetrize=True), IDENTITY))

    def test_exact_symmetry(self):
        for n in (1, 2, 7, 30):
            X = make_x(n, 5, seed=n)
            G = gramian(X)
            self.assertTrue(gnp.array_equal(G, G.T))
            self.assertTrue(gnp.allclose(G, X @ X.T))

    def test_upper_triangle_only(self):
        X = make_x()
        G = gramian(X, symmetrize=False)
        i, j = gnp.tril_indices(7, -1)
        self.assertTrue(gnp.all(G[i, j] == 0.0))
        iu, ju = gnp.triu_indices(7)
        self.assertTrue(gnp.allclose(G[iu, ju], (X @ X.T)[iu, ju]))

    def test_column_major(self):
        X = make_x()
        G = gramian(X.T, layout=Layout.COLUMN_MAJOR)
        self.assertEqual(G.shape, (7, 7))
        self.assertTrue(gnp.array_equal(G, G.T))
        self.assertTrue(gnp.allclose(G, X @ X.T))

    def test_cross(self):
        X, Z = make_x(7, 3, seed=1), make_x(4, 3, seed=2)
        G = gramian(X, Z)
        self.assertEqual(G.shape, (7, 4))
        self.assertTrue(gnp.allclose(G, X @ Z.T))
        Gc = gramian(X.T, Z.T, layout="column")
        self.assertTrue(gnp.allclose(Gc, X @ Z.T))
        with self.assertRaises(DimensionMismatchError):
            gramian(X, make_x(4, 2))

    def test_output_buffer(self):
        X = make_x()
        out = gnp.empty((7, 7))
        self.assertIs(gramian(X, out=out), out)
        self.assertTrue(gnp.allclose(out, X @ X.T))
        with self.assertRaises(DimensionMismatchError):
            gramian(X, out=gnp.empty((7, 6)))


class TestSquaredDistance(unittest.TestCase):

    def test_identity(self):
        G = gramian(IDENTITY)
        D = squared_distance(G, dot_vectors(IDENTITY))
        self.assertIs(D, G)
        self.assertTrue(gnp.array_equal(D, gnp.array([[0.0, 2.0], [2.0, 0.0]])))

    def test_self_distances(self):
        X = make_x(12, 3)
        D = squared_distance(gramian(X), dot_vectors(X))
        self.assertTrue(gnp.array_equal(D, D.T))
        self.assertTrue(gnp.allclose(gnp.diag(D), 0.0, atol=1e-12))
        self.assertTrue(gnp.allclose(D, brute_force_sqdist(X, X), atol=1e-12))

    def test_column_major(self):
        X = make_x(6, 3)
        G = gramian(X.T, layout=Layout.COLUMN_MAJOR)
        D = squared_distance(G, dot_vectors(X.T, Layout.COLUMN_MAJOR))
        self.assertTrue(gnp.allclose(D, brute_force_sqdist(X, X), atol=1e-12))

    def test_cross_distances(self):
        X, Z = make_x(5, 3, seed=3), make_x(8, 3, seed=4)
        D = squared_distance(gramian(X, Z), dot_vectors(X), dot_vectors(Z))
        self.assertEqual(D.shape, (5, 8))
        self.assertTrue(gnp.allclose(D, brute_force_sqdist(X, Z), atol=1e-12))

    def test_dimension_checks(self):
        X = make_x(5, 3)
        with self.assertRaises(DimensionMismatchError):
            squared_distance(gramian(X), gnp.ones(4))
        with self.assertRaises(DimensionMismatchError):
            squared_distance(gnp.zeros((5, 4)), gnp.ones(5))
        with self.assertRaises(DimensionMismatchError):
            squared_distance(gnp.zeros((5, 4)), gnp.ones(5), gnp.ones(3))
        with self.assertRaises(DimensionMismatchError):
            squared_distance(gnp.zeros((5, 4)), gnp.ones(4), gnp.ones(4))


class TestSymmetrize(unittest.TestCase):

    def test_upper_and_lower(self):
        S = gnp.array([[1.0, 2.0], [3.0, 4.0]])
        self.assertTrue(gnp.array_equal(symmetrize(S.copy()), [[1.0, 2.0], [2.0, 4.0]]))
        self.assertTrue(gnp.array_equal(symmetrize(S.copy(), "L"), [[1.0, 3.0], [3.0, 4.0]]))

    def test_not_square(self):
        with self.assertRaises(NotSquareError):
            symmetrize(gnp.zeros((2, 3)))


if __name__ == "__main__":
    unittest.main()
