import math
import unittest
import numpy as np
import gpguide as gg
from gpguide import kernel


def drift_data(n=80, seed=11):
    rng = np.random.default_rng(seed)
    t = np.arange(n) * 5.0
    z = 2.0 * np.sin(2 * np.pi * t / 60.0) + 0.3 * rng.standard_normal(n)
    return t, z


class TestAutoselect(unittest.TestCase):
    def test_quadratic(self):
        target = np.array([1.0, -2.0])

        def crit(p):
            return float(np.sum((p - target) ** 2))

        def grad(p):
            return 2 * (p - target)

        p, r = kernel.autoselect_parameters(np.zeros(2), crit, grad, info=True)
        np.testing.assert_allclose(p, target, atol=1e-4)
        self.assertTrue(r.best_value_returned)
        self.assertEqual(len(r.history_params), len(r.history_criterion))
        self.assertEqual(len(r.bounds), 2)

    def test_slsqp_and_unknown_method(self):
        def crit(p):
            return float((p[0] - 3.0) ** 2)

        def grad(p):
            return np.array([2 * (p[0] - 3.0)])

        p, r = kernel.autoselect_parameters([0.0], crit, grad, method="SLSQP")
        self.assertIsNone(r)
        self.assertAlmostEqual(p[0], 3.0, delta=1e-4)
        with self.assertRaises(ValueError):
            kernel.autoselect_parameters([0.0], crit, grad, method="CG")

    def test_linalg_failure_is_infinite(self):
        def crit(p):
            if p[0] > 2.0:
                raise np.linalg.LinAlgError("Matrix is not positive definite")
            return float((p[0] - 1.0) ** 2)

        def grad(p):
            if p[0] > 2.0:
                raise np.linalg.LinAlgError("Matrix is not positive definite")
            return np.array([2 * (p[0] - 1.0)])

        p, r = kernel.autoselect_parameters([5.0], crit, grad, info=True)
        self.assertEqual(r.history_criterion[0], np.inf)
        self.assertEqual(p.shape, (1,))

    def test_other_errors_propagate(self):
        def crit(p):
            raise KeyError("boom")

        with self.assertRaises(KeyError):
            kernel.autoselect_parameters([0.0], crit, lambda p: np.zeros(1))


class TestSelectionCriterion(unittest.TestCase):
    def test_criterion_does_not_mutate_gp(self):
        t, z = drift_data()
        cf = kernel.CovarianceFunction("square_exponential_periodic", [0.0, math.log(60.0), 0.5, 4.0, 0.0])
        gp = gg.GaussianProcess(cf, log_noise_sd=math.log(0.3)).infer(t, z)
        p = gp.get_hyper_parameters()
        nll = gp.neg_log_likelihood()

        crit, grad = kernel.make_selection_criterion_with_gradient(gp)
        self.assertAlmostEqual(crit(p), nll)
        np.testing.assert_allclose(grad(p), gp.neg_log_likelihood_gradient())
        crit(p + 0.3)
        grad(p - 0.2)
        np.testing.assert_array_equal(gp.get_hyper_parameters(), p)
        self.assertEqual(gp.neg_log_likelihood(), nll)

    def test_explicit_data(self):
        t, z = drift_data()
        gp = gg.GaussianProcess(kernel.CovarianceFunction("periodic_square_exponential"))
        crit, _ = kernel.make_selection_criterion_with_gradient(gp, t, z)
        self.assertTrue(np.isfinite(crit(np.array([0.0, 0.0, math.log(60.0), 0.0, 4.0]))))
        self.assertEqual(gp.state, "empty")

    def test_requires_data(self):
        gp = gg.GaussianProcess(kernel.CovarianceFunction("periodic_square_exponential"))
        with self.assertRaises(ValueError):
            kernel.make_selection_criterion_with_gradient(gp)
        with self.assertRaises(ValueError):
            kernel.make_selection_criterion_with_gradient(gp, xi=[0.0, 1.0])


class TestSelectHyperparameters(unittest.TestCase):
    def test_select_improves_likelihood(self):
        t, z = drift_data()
        cf = kernel.CovarianceFunction("square_exponential_periodic")
        gp = gg.GaussianProcess(cf)
        p0 = [math.log(1.0), 0.0, math.log(55.0), 0.0, math.log(200.0), 0.0]
        bounds = kernel.empirical_bounds(cf, t, z)

        gp, info = kernel.select_hyperparameters(gp, t, z, p0=p0, bounds=bounds, info=True)
        self.assertEqual(gp.state, "inferred")
        self.assertLess(info.fun, info.history_criterion[0])
        np.testing.assert_allclose(gp.get_hyper_parameters(), info.x)
        self.assertAlmostEqual(gp.neg_log_likelihood(), info.fun, places=6)
        for value, (low, high) in zip(gp.get_hyper_parameters(), bounds):
            self.assertTrue(low - 1e-8 <= value <= high + 1e-8)

    def test_select_on_inferred_gp(self):
        t, z = drift_data(40)
        cf = kernel.CovarianceFunction("periodic_square_exponential", [0.0, math.log(60.0), 0.5, 5.0])
        gp = gg.GaussianProcess(cf, log_noise_sd=0.0).infer(t, z)
        nll0 = gp.neg_log_likelihood()
        gp, info = kernel.select_hyperparameters(gp)
        self.assertIsNone(info)
        self.assertLessEqual(gp.neg_log_likelihood(), nll0)

    def test_select_requires_data(self):
        gp = gg.GaussianProcess(kernel.CovarianceFunction("periodic_square_exponential"))
        with self.assertRaises(ValueError):
            kernel.select_hyperparameters(gp)


class TestEmpiricalBounds(unittest.TestCase):
    def test_roles(self):
        t, z = drift_data()
        cf = kernel.CovarianceFunction("square_exponential_periodic")
        bounds = kernel.empirical_bounds(cf, t, z)
        self.assertEqual(len(bounds), 1 + cf.get_parameter_count())
        for low, high in bounds:
            self.assertLess(low, high)
        # period between twice the sampling step and the time range
        low, high = bounds[1 + cf.parameter_roles.index("period")]
        self.assertAlmostEqual(low, math.log(10.0))
        self.assertAlmostEqual(high, math.log(t[-1] - t[0]))

    def test_single_location(self):
        cf = kernel.CovarianceFunction("periodic_square_exponential")
        bounds = kernel.empirical_bounds(cf, [1.0], [2.0])
        roles = cf.parameter_roles
        self.assertEqual(bounds[1 + roles.index("period")], (-np.inf, np.inf))
        self.assertEqual(bounds[1 + roles.index("lengthscale")], (-np.inf, np.inf))
        self.assertTrue(np.all(np.isfinite(bounds[0])))


if __name__ == "__main__":
    unittest.main()
