import unittest
import numpy as np
import gpguide.num as gnp
from gpguide import math_tools


class TestSquareDistance(unittest.TestCase):
    def setUp(self):
        self.a = gnp.array([[3, 5, 5], [4, 6, 6], [3, 2, 3], [1, 0, 3]], dtype=float)
        self.b = gnp.array(
            [[1, 4, 5, 6, 7], [3, 4, 5, 6, 7], [0, 2, 4, 20, 2], [2, 3, -2, -2, 2]],
            dtype=float,
        )
        self.c = gnp.array([[1, 2, 3, 4], [4, 5, 6, 7], [6, 7, 8, 9]], dtype=float)

    def test_reference_values(self):
        sqdistc = np.array(
            [[0, 3, 12, 27], [3, 0, 3, 12], [12, 3, 0, 3], [27, 12, 3, 0]], dtype=float
        )
        sqdistab = np.array(
            [[15, 6, 15, 311, 27], [33, 14, 9, 329, 9], [35, 6, 27, 315, 7]], dtype=float
        )
        np.testing.assert_array_equal(math_tools.square_distance(self.c, self.c), sqdistc)
        np.testing.assert_array_equal(math_tools.square_distance(self.a, self.b), sqdistab)

    def test_argument_order(self):
        np.testing.assert_array_equal(
            math_tools.square_distance(self.a, self.b),
            math_tools.square_distance(self.b, self.a).T,
        )

    def test_same_object_or_copy(self):
        d = math_tools.square_distance(self.a, self.a)
        np.testing.assert_array_equal(math_tools.square_distance(self.a, gnp.copy(self.a)), d)
        np.testing.assert_array_equal(math_tools.square_distance(self.a), d)

    def test_vector_is_a_row_of_scalars(self):
        d = math_tools.square_distance(gnp.array([0.0, 1.0, 3.0]))
        self.assertEqual(d.shape, (3, 3))
        self.assertEqual(d[0, 2], 9.0)

    def test_dimension_mismatch(self):
        with self.assertRaises(ValueError):
            math_tools.square_distance(self.a, self.c)


class TestRandomMatrices(unittest.TestCase):
    def test_uniform(self):
        u = math_tools.generate_uniform_random_matrix_0_1(50, 3, rng=1)
        self.assertEqual(u.shape, (50, 3))
        self.assertTrue(gnp.all(u >= 0.0) and gnp.all(u < 1.0))

    def test_normal_is_seeded(self):
        z1 = math_tools.generate_normal_random_matrix(5, 2, rng=42)
        z2 = math_tools.generate_normal_random_matrix(5, 2, rng=np.random.default_rng(42))
        self.assertEqual(z1.shape, (5, 2))
        np.testing.assert_array_equal(z1, z2)

    def test_module_generator_reseed(self):
        gnp.set_seed(3)
        z1 = math_tools.generate_normal_random_matrix(4, 1)
        gnp.set_seed(3)
        z2 = math_tools.generate_normal_random_matrix(4, 1)
        np.testing.assert_array_equal(z1, z2)


class TestSpectrum(unittest.TestCase):
    def test_padding(self):
        amplitudes, frequencies = math_tools.compute_spectrum(np.ones(100))
        self.assertEqual(amplitudes.shape, (65,))
        self.assertEqual(frequencies.shape, (65,))
        self.assertAlmostEqual(frequencies[-1], 0.5)
        amplitudes, _ = math_tools.compute_spectrum(np.ones(100), n_min=1000)
        self.assertEqual(amplitudes.shape, (513,))

    def test_hamming_window(self):
        w = math_tools.hamming_window(5)
        np.testing.assert_allclose(w, [0.08, 0.54, 1.0, 0.54, 0.08])

    def test_estimate_period_uniform(self):
        t = np.arange(0.0, 1000.0, 2.0)
        z = np.sin(2 * np.pi * t / 20.0) + 0.01 * t
        self.assertAlmostEqual(math_tools.estimate_period(t, z), 20.0, delta=0.5)

    def test_estimate_period_irregular(self):
        rng = np.random.default_rng(0)
        t = rng.uniform(0.0, 1000.0, 500)
        z = np.sin(2 * np.pi * t / 50.0) + 0.1 * rng.standard_normal(500)
        self.assertAlmostEqual(math_tools.estimate_period(t, z), 50.0, delta=2.0)

    def test_estimate_period_errors(self):
        with self.assertRaises(ValueError):
            math_tools.estimate_period([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        with self.assertRaises(ValueError):
            math_tools.estimate_period(np.ones(10), np.arange(10.0))


if __name__ == "__main__":
    unittest.main()
