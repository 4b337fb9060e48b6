"""
Unit tests for the error samplers and linearity metrics
"""

import unittest
import numpy as np

from adc_model import AdcModel
from bit_errors import error_bound, stratified_errors, stratum_bounds, uniform_errors
from characterize import (compute_deviation, compute_dnl_inl, compute_lsb,
                          count_non_monotonic)


class TestBitErrors(unittest.TestCase):
    """Test cases for bit_errors.py"""

    def setUp(self):
        self.rng = np.random.default_rng(1)

    def test_error_bound(self):
        self.assertAlmostEqual(error_bound(1.0, 10), 0.05)
        self.assertAlmostEqual(error_bound(3.3, 4), 0.4125)

    def test_stratum_bounds_partition(self):
        """Strata are contiguous, equal width and cover [-upper, upper]"""
        lows, highs = stratum_bounds(5, 0.25)
        self.assertAlmostEqual(lows[0], -0.25)
        self.assertAlmostEqual(highs[-1], 0.25)
        np.testing.assert_allclose(lows[1:], highs[:-1])
        np.testing.assert_allclose(highs - lows, 0.1)

    def test_single_stratum(self):
        lows, highs = stratum_bounds(1, 0.5)
        np.testing.assert_allclose(lows, [-0.5])
        np.testing.assert_allclose(highs, [0.5])
        self.assertEqual(stratified_errors(1, 0.5, self.rng).shape, (1,))

    def test_uniform_errors(self):
        errors = uniform_errors(1000, 0.1, self.rng)
        self.assertEqual(errors.shape, (1000,))
        self.assertTrue(np.all(np.abs(errors) <= 0.1))
        # i.i.d. over the full range, not partitioned
        self.assertLess(np.min(errors), -0.05)
        self.assertGreater(np.max(errors), 0.05)

    def test_stratified_reverse(self):
        fwd = stratified_errors(6, 0.3, np.random.default_rng(5))
        rev = stratified_errors(6, 0.3, np.random.default_rng(5), reverse=True)
        np.testing.assert_array_equal(rev, fwd[::-1])


class TestLinearityMetrics(unittest.TestCase):
    """Test cases for characterize.py"""

    def setUp(self):
        self.adc = AdcModel(u0=1.0, n=6, rng=21)
        self.ideal = self.adc.get_ideal_characteristic()

    def test_ideal_lsb(self):
        self.assertAlmostEqual(compute_lsb(self.ideal), 2.0 ** -5)

    def test_ideal_dnl_inl(self):
        dnl, inl = compute_dnl_inl(self.ideal)
        self.assertEqual(len(dnl), 63)
        self.assertEqual(len(inl), 64)
        np.testing.assert_allclose(dnl, 0.0, atol=1e-9)
        np.testing.assert_allclose(inl, 0.0, atol=1e-9)

    def test_known_dnl(self):
        curve = np.array([0.0, 1.0, 3.0, 3.0])
        dnl, inl = compute_dnl_inl(curve)
        np.testing.assert_allclose(dnl, [0.0, 1.0, -1.0])
        np.testing.assert_allclose(inl, [0.0, 0.0, 1.0, 0.0])

    def test_degenerate_curves(self):
        with self.assertRaises(ValueError):
            compute_dnl_inl([1.0])
        with self.assertRaises(ValueError):
            compute_dnl_inl([2.0, 2.0, 2.0])

    def test_non_monotonic(self):
        self.assertEqual(count_non_monotonic([0.0, 2.0, 1.0, 3.0, 2.5]), 2)
        self.assertEqual(count_non_monotonic(self.ideal), 0)

    def test_deviation_zero_errors(self):
        real = self.adc.get_real_characteristic(np.zeros(6))
        np.testing.assert_allclose(compute_deviation(self.ideal, real, self.adc.u0),
                                   0.0, atol=1e-12)

    def test_deviation_scaled(self):
        adc = AdcModel(u0=2.0, n=4)
        ideal = adc.get_ideal_characteristic()
        real = adc.get_real_characteristic(np.zeros(4))
        self.assertAlmostEqual(np.max(np.abs(compute_deviation(ideal, real, 2.0))), 0.0)
        self.assertGreater(np.max(np.abs(compute_deviation(ideal, real, 1.0))), 0.0)

    def test_real_curve_nonzero_inl(self):
        real = self.adc.get_real_characteristic(self.adc.get_errors())
        _, inl = compute_dnl_inl(real)
        self.assertAlmostEqual(inl[0], 0.0)
        self.assertAlmostEqual(inl[-1], 0.0, places=9)
        self.assertGreater(np.max(np.abs(inl)), 0.0)


if __name__ == "__main__":
    unittest.main()
