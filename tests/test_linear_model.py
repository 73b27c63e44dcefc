#!/usr/bin/env python3
"""
Tests for the log-log ElasticityEstimator.
"""
import unittest
from unittest.mock import patch
from datetime import date
import os
import sys

# Add the parent directory to sys.path so we can import the packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from data.observations import Observation, group_by_product
from data.simulation import sample_sales_records, generate_synthetic_data
from data.data_loader import DataLoader
from model.linear_model import ElasticityEstimator
from model.base_model import summarize_estimates
from model.exceptions import ResultsError


def obs(price, quantity, day, name="Widget", category="Tools"):
    return Observation(
        product_name=name,
        category=category,
        price=price,
        quantity=quantity,
        sale_date=date(2024, 1, day),
    )


class TestElasticityEstimator(unittest.TestCase):
    """Tests for ElasticityEstimator.estimate."""

    def setUp(self):
        self.estimator = ElasticityEstimator()

    def test_empty_and_single_observation_give_no_result(self):
        self.assertIsNone(self.estimator.estimate([]))
        self.assertIsNone(self.estimator.estimate([obs(10.0, 5, 1)]))

    def test_identical_prices_give_no_result(self):
        series = [obs(10.0, 5, 1), obs(10.0, 8, 2), obs(10.0, 12, 3)]
        self.assertIsNone(self.estimator.estimate(series))

    def test_too_few_finite_logs_give_no_result(self):
        # Zero quantity has no logarithm and is left out
        series = [obs(10.0, 0, 1), obs(12.0, 5, 2)]
        self.assertIsNone(self.estimator.estimate(series))

    def test_constant_elasticity_series(self):
        # q = 500000 * p^-2
        series = [obs(50.0, 200, 1), obs(100.0, 50, 2)]
        result = self.estimator.estimate(series)

        self.assertIsNotNone(result)
        self.assertAlmostEqual(result.elasticity, -2.0, places=9)
        self.assertAlmostEqual(result.goodness_of_fit, 1.0, places=9)
        self.assertTrue(result.is_elastic)
        self.assertEqual(result.product_type, "elastic")
        self.assertEqual(result.current_price, 100.0)
        self.assertEqual(result.current_quantity, 50.0)
        self.assertAlmostEqual(result.recommended_price, 90.0, places=9)
        # 90 * 50 * 0.9^-2 vs 100 * 50
        self.assertAlmostEqual(result.expected_revenue_change_pct, 100.0 / 9.0, places=6)
        self.assertEqual(result.n_observations, 2)

    def test_unit_elasticity_is_inelastic(self):
        falling = self.estimator.estimate([obs(1.0, 4, 1), obs(4.0, 1, 2)])
        rising = self.estimator.estimate([obs(1.0, 1, 1), obs(4.0, 4, 2)])

        self.assertEqual(falling.elasticity, -1.0)
        self.assertFalse(falling.is_elastic)
        self.assertEqual(rising.elasticity, 1.0)
        self.assertFalse(rising.is_elastic)

        # Inelastic branch raises the price by 10%
        self.assertAlmostEqual(falling.recommended_price, 4.4, places=9)
        # Unit elasticity keeps revenue constant
        self.assertAlmostEqual(falling.expected_revenue_change_pct, 0.0, places=9)

    def test_series_is_sorted_by_date_but_labelled_by_first_input(self):
        series = [
            obs(80.0, 30, 20, category="Apparel"),
            obs(100.0, 20, 5, category="Clothing"),
            obs(90.0, 25, 10, category="Clothing"),
        ]
        result = self.estimator.estimate(series)

        self.assertEqual(result.category, "Apparel")
        self.assertEqual(result.current_price, 80.0)
        self.assertEqual(result.current_quantity, 30.0)

    def test_same_date_keeps_input_order(self):
        first = [obs(10.0, 10, 1), obs(20.0, 5, 2), obs(25.0, 4, 2)]
        second = [obs(10.0, 10, 1), obs(25.0, 4, 2), obs(20.0, 5, 2)]

        self.assertEqual(self.estimator.estimate(first).current_price, 25.0)
        self.assertEqual(self.estimator.estimate(second).current_price, 20.0)

    def test_invalid_observations_are_left_out_of_regression(self):
        series = [obs(40.0, 0, 1), obs(50.0, 200, 2), obs(100.0, 50, 3)]
        result = self.estimator.estimate(series)

        self.assertEqual(result.n_observations, 2)
        self.assertAlmostEqual(result.elasticity, -2.0, places=9)

    def test_zero_current_quantity_gives_no_result(self):
        series = [obs(50.0, 200, 1), obs(100.0, 50, 2), obs(120.0, 0, 3)]
        self.assertIsNone(self.estimator.estimate(series))

    def test_steep_series_out_of_float_range_gives_no_result(self):
        # Near-identical prices give an elasticity whose projection overflows
        series = [obs(10.0, 1, 1), obs(9.999, 1000, 2), obs(10.0, 2, 3)]

        with patch("model.linear_model.logger") as mock_logger:
            self.assertIsNone(self.estimator.estimate(series))
        mock_logger.warning.assert_called_once()

    def test_constant_quantity_has_zero_fit(self):
        result = self.estimator.estimate([obs(10.0, 7, 1), obs(20.0, 7, 2), obs(15.0, 7, 3)])

        self.assertEqual(result.elasticity, 0.0)
        self.assertEqual(result.goodness_of_fit, 0.0)
        self.assertFalse(result.is_elastic)

    def test_estimate_is_deterministic(self):
        series = sample_sales_records()[:3]
        self.assertEqual(self.estimator.estimate(series), self.estimator.estimate(list(series)))

    def test_sample_data_classification(self):
        estimates = self.estimator.estimate_all(group_by_product(sample_sales_records()))

        self.assertEqual(len(estimates), 6)
        self.assertTrue(estimates["Gaming Laptop"].is_elastic)
        self.assertTrue(estimates["Wireless Headphones"].is_elastic)
        self.assertFalse(estimates["Organic Coffee"].is_elastic)
        self.assertFalse(estimates["Programming Guide"].is_elastic)
        self.assertLess(estimates["Gaming Laptop"].recommended_price, estimates["Gaming Laptop"].current_price)
        self.assertGreater(estimates["Organic Coffee"].recommended_price, estimates["Organic Coffee"].current_price)

    def test_recovers_synthetic_elasticities(self):
        frame = generate_synthetic_data(n_products=10, n_periods=24, noise_level=0.02, random_seed=7)
        observations = DataLoader(frame).to_observations()
        estimates = self.estimator.estimate_all(group_by_product(observations))
        truth = frame.groupby("product_name")["true_elasticity"].first()

        errors = sorted(abs(estimates[name].elasticity - truth[name]) for name in estimates)
        self.assertEqual(len(errors), 10)
        self.assertLess(errors[len(errors) // 2], 0.2)


class TestSummarizeEstimates(unittest.TestCase):
    """Tests for summarize_estimates."""

    def test_summary_counts(self):
        estimator = ElasticityEstimator()
        estimates = list(estimator.estimate_all(group_by_product(sample_sales_records())).values())
        summary = summarize_estimates(estimates)

        self.assertEqual(summary["n_products"], 6)
        self.assertEqual(summary["elastic_count"] + summary["inelastic_count"], 6)
        self.assertAlmostEqual(summary["elastic_percent"] + summary["inelastic_percent"], 100.0)
        self.assertLessEqual(summary["min_elasticity"], summary["median_elasticity"])
        self.assertLessEqual(summary["median_elasticity"], summary["max_elasticity"])

    def test_empty_summary_raises(self):
        with self.assertRaises(ResultsError):
            summarize_estimates([])


if __name__ == "__main__":
    unittest.main()
