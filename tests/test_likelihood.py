import math
import unittest
import numpy as np
import gpguide as gg


def psqe(r, params):
    """Closed-form periodic square-exponential covariance."""
    lp, period, sf, lse = np.exp(params)
    return sf**2 * np.exp(-2 * np.sin(np.pi * r / period) ** 2 / lp**2 - r**2 / (2 * lse**2))


class TestLikelihood(unittest.TestCase):
    def setUp(self):
        cf = gg.kernel.CovarianceFunction("periodic_square_exponential", np.zeros(4))
        self.gp = gg.GaussianProcess(cf)
        self.hyper_parameters = np.array([math.log(0.1), 1.0, 2.0, 3.0, 4.0])
        self.X = np.array([0.0, 100.0, 200.0])
        self.Y = np.array([1.0, -1.0, 1.0])

    def expected_nll(self, data_cov):
        Y = self.Y
        _, logdet = np.linalg.slogdet(data_cov)
        return 0.5 * (Y @ np.linalg.solve(data_cov, Y) + logdet + 3 * np.log(2 * np.pi))

    def test_empty(self):
        self.assertEqual(self.gp.neg_log_likelihood(), 0.0)
        np.testing.assert_array_equal(self.gp.neg_log_likelihood_gradient(), np.zeros(5))
        np.testing.assert_array_equal(self.gp.fisher_information(), np.zeros((5, 5)))

    def test_closed_form(self):
        self.gp.set_hyper_parameters(self.hyper_parameters)
        self.gp.infer(self.X, self.Y)
        r = np.abs(self.X[:, None] - self.X[None, :])
        data_cov = psqe(r, self.hyper_parameters[1:]) + 0.01 * np.eye(3)
        self.assertAlmostEqual(self.gp.neg_log_likelihood(), self.expected_nll(data_cov), delta=1e-6)

    def test_reference_matrix(self):
        self.gp.set_hyper_parameters(self.hyper_parameters)
        self.gp.infer(self.X, self.Y)
        kXX_matlab = np.array(
            [[403.4288, 57.6856, 0.4862],
             [57.6856, 403.4288, 57.6856],
             [0.4862, 57.6856, 403.4288]]
        )
        data_cov = kXX_matlab + math.exp(2 * self.hyper_parameters[0]) * np.eye(3)
        self.assertAlmostEqual(self.gp.neg_log_likelihood(), self.expected_nll(data_cov), delta=1e-4)

    def test_gradient_against_finite_differences(self):
        eps = 1e-5
        hyper_parameters = np.array([1.0, 1.0, 2.0, 1.0, 2.0])
        rng = np.random.default_rng(2015)
        location = 100 * rng.standard_normal(50)
        output = rng.standard_normal(50)

        self.gp.infer(location, output)
        self.gp.set_hyper_parameters(hyper_parameters)
        analytic_derivative = self.gp.neg_log_likelihood_gradient()

        for h in range(hyper_parameters.shape[0]):
            hyper_plus = hyper_parameters.copy()
            hyper_minus = hyper_parameters.copy()
            hyper_plus[h] += eps
            hyper_minus[h] -= eps

            self.gp.set_hyper_parameters(hyper_plus)
            lik_plus = self.gp.neg_log_likelihood()
            self.gp.set_hyper_parameters(hyper_minus)
            lik_minus = self.gp.neg_log_likelihood()
            numeric_derivative = (lik_plus - lik_minus) / (2 * eps)

            absolute_error = abs(numeric_derivative - analytic_derivative[h])
            relative_error = absolute_error / (
                0.5 * (abs(numeric_derivative) + abs(analytic_derivative[h]))
            )
            self.assertLess(relative_error, 1e-4, msg=f"parameter {h}")

    def test_gradient_of_each_variant(self):
        rng = np.random.default_rng(0)
        location = np.sort(rng.uniform(0.0, 100.0, 30))
        output = np.sin(location / 5.0) + 0.1 * rng.standard_normal(30)
        variants = {
            "periodic_square_exponential": [0.0, math.log(30.0), 0.0, math.log(50.0)],
            "periodic_square_exponential2": [1.0, -1.0, 0.0, 0.0, 3.0, -0.5],
            "square_exponential_periodic": [0.0, math.log(30.0), 0.0, math.log(50.0), -1.0],
        }
        for variant, parameters in variants.items():
            cf = gg.kernel.CovarianceFunction(variant, parameters)
            gp = gg.GaussianProcess(cf, log_noise_sd=math.log(0.3)).infer(location, output)
            crit, grad = gg.kernel.make_selection_criterion_with_gradient(gp)
            p = gp.get_hyper_parameters()
            g = grad(p)
            for h in range(p.shape[0]):
                e = np.zeros_like(p)
                e[h] = 1e-5
                fd = (crit(p + e) - crit(p - e)) / 2e-5
                self.assertAlmostEqual(g[h], fd, delta=1e-4 * max(1.0, abs(fd)), msg=f"{variant} {h}")

    def test_fisher_information(self):
        self.gp.set_hyper_parameters([math.log(0.5), 0.0, math.log(20.0), 0.0, math.log(40.0)])
        location = np.linspace(0.0, 100.0, 25)
        self.gp.infer(location, np.cos(location / 3.0))
        info = self.gp.fisher_information()
        self.assertEqual(info.shape, (5, 5))
        np.testing.assert_allclose(info, info.T)
        self.assertTrue(np.all(np.linalg.eigvalsh(info) > -1e-8))

        # noise entry: 0.5 tr((2 sn2 K^-1)^2)
        cf = self.gp.covariance_function
        K = cf.covariance(location) + 0.25 * np.eye(25)
        A = 2 * 0.25 * np.linalg.inv(K)
        self.assertAlmostEqual(info[0, 0], 0.5 * np.trace(A @ A), places=6)


if __name__ == "__main__":
    unittest.main()
