import math
import unittest
import numpy as np
import gpguide.num as gnp
from gpguide import kernel
from gpguide.exceptions import ParameterCountError

locations = np.array([0.0, 50.0, 100.0, 150.0, 200.0])
X = np.array([0.0, 100.0, 200.0])


def toeplitz_from_first_row(row):
    n = len(row)
    return np.array([[row[abs(i - j)] for j in range(n)] for i in range(n)])


class KernelReferenceMixin:
    """Compares K(locations, .) with reference matrices that only depend on |i - j|."""

    first_row = None
    tol = None

    def make_covariance_function(self):
        raise NotImplementedError

    def test_kxx(self):
        cf = self.make_covariance_function()
        K, dK = cf.evaluate(locations, locations)
        np.testing.assert_allclose(K, toeplitz_from_first_row(self.first_row), atol=self.tol)
        self.assertEqual(len(dK), cf.get_parameter_count())

    def test_kxX(self):
        cf = self.make_covariance_function()
        expected = toeplitz_from_first_row(self.first_row)[:, ::2]
        np.testing.assert_allclose(cf.evaluate(locations, X)[0], expected, atol=self.tol)

    def test_kXX(self):
        cf = self.make_covariance_function()
        expected = toeplitz_from_first_row(self.first_row)[::2, ::2]
        np.testing.assert_allclose(cf.evaluate(X)[0], expected, atol=self.tol)

    def test_covariance_and_pairwise(self):
        cf = self.make_covariance_function()
        K = cf.covariance(locations)
        np.testing.assert_array_equal(K, cf.evaluate(locations)[0])
        np.testing.assert_allclose(cf.covariance(locations, pairwise=True), np.diag(K))

    def test_gradient_against_finite_differences(self):
        cf = self.make_covariance_function()
        rng = np.random.default_rng(123)
        for _ in range(10):
            location = rng.standard_normal(5)
            _, dK = cf.evaluate(location, location)
            dK_fd = kernel.finite_difference_gradient(cf, location, location, step=1e-6)
            for h in range(cf.get_parameter_count()):
                self.assertLess(np.max(np.abs(dK[h] - dK_fd[h])), 1e-6, msg=f"parameter {h}")


class TestPeriodicSquareExponential(KernelReferenceMixin, unittest.TestCase):
    first_row = [403.4288, 234.9952, 57.6856, 7.7574, 0.4862]
    tol = 0.003

    def make_covariance_function(self):
        return kernel.CovarianceFunction("periodic_square_exponential", [1.0, 2.0, 3.0, 4.0])


class TestPeriodicSquareExponential2(KernelReferenceMixin, unittest.TestCase):
    first_row = [3.0, 1.06389, 0.97441, 1.07075, 0.27067]
    tol = 0.01

    def make_covariance_function(self):
        return kernel.CovarianceFunction(
            "periodic_square_exponential2",
            np.log([10.0, 1.0, 1.0, 1.0, 100.0, 1.0]),
            extra_parameters=[math.log(80.0)],
        )

    def test_period_is_an_extra_parameter(self):
        cf = self.make_covariance_function()
        self.assertEqual(cf.get_parameter_count(), 6)
        self.assertEqual(cf.get_extra_parameter_count(), 1)
        np.testing.assert_allclose(cf.get_extra_parameters(), [math.log(80.0)])


class TestSquareExponentialPeriodic(KernelReferenceMixin, unittest.TestCase):
    first_row = [2.0, 1.82258, 1.45783, 1.17242, 1.04394]
    tol = 0.01

    def make_covariance_function(self):
        return kernel.CovarianceFunction(
            "square_exponential_periodic", np.log([10.0, 1.0, 1.0, 80.0, 1.0])
        )


class TestCovarianceFunction(unittest.TestCase):
    def test_parameter_counts(self):
        counts = {
            "periodic_square_exponential": (4, 0),
            "periodic_square_exponential2": (6, 1),
            "square_exponential_periodic": (5, 0),
        }
        for variant, (p, e) in counts.items():
            cf = kernel.CovarianceFunction(variant)
            self.assertEqual(cf.get_parameter_count(), p)
            self.assertEqual(len(cf.parameter_names), p)
            self.assertEqual(len(cf.parameter_roles), p)
            self.assertEqual(cf.get_extra_parameter_count(), e)
            np.testing.assert_array_equal(cf.get_parameters(), np.zeros(p))

    def test_wrong_parameter_count(self):
        cf = kernel.CovarianceFunction("periodic_square_exponential", [1.0, 2.0, 3.0, 4.0])
        with self.assertRaises(ParameterCountError) as ctx:
            cf.set_parameters([1.0, 2.0, 3.0])
        self.assertEqual(ctx.exception.expected, 4)
        self.assertEqual(ctx.exception.received, 3)
        np.testing.assert_array_equal(cf.get_parameters(), [1.0, 2.0, 3.0, 4.0])
        with self.assertRaises(ParameterCountError):
            cf.set_extra_parameters([1.0])
        with self.assertRaises(ParameterCountError):
            kernel.CovarianceFunction("square_exponential_periodic", [0.0])

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            kernel.CovarianceFunction("matern")

    def test_copy_is_independent(self):
        cf = kernel.CovarianceFunction("periodic_square_exponential2", np.zeros(6), [1.0])
        cf2 = cf.copy()
        cf2.set_parameters(np.ones(6))
        cf2.set_extra_parameters([2.0])
        np.testing.assert_array_equal(cf.get_parameters(), np.zeros(6))
        np.testing.assert_array_equal(cf.get_extra_parameters(), [1.0])

    def test_get_parameters_returns_a_copy(self):
        cf = kernel.CovarianceFunction("periodic_square_exponential")
        p = cf.get_hyper_parameters()
        p[0] = 5.0
        self.assertEqual(cf.get_parameters()[0], 0.0)

    def test_symmetry(self):
        cf = kernel.CovarianceFunction("square_exponential_periodic", [0.1, 1.5, 0.0, 2.0, -0.5])
        x = gnp.randn(20, rng=5)
        K = cf.covariance(x)
        np.testing.assert_array_equal(K, K.T)
        np.testing.assert_allclose(cf.covariance(x, x[:7]), K[:, :7])


if __name__ == "__main__":
    unittest.main()
