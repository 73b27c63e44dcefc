#!/usr/bin/env python3
"""
Tests for recommendation records and the RecommendationBook.
"""
import unittest
from datetime import datetime
import os
import sys

# Add the parent directory to sys.path so we can import the packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from data.recommendations import (
    Recommendation, RecommendationBook, recommendations_frame, RECOMMENDATION_COLUMNS
)
from model.results import ElasticityEstimate, OptimizationResult


def make_estimate(name="Tea", elasticity=-2.0):
    return ElasticityEstimate(
        product_name=name,
        category="Food",
        elasticity=elasticity,
        goodness_of_fit=0.9,
        is_elastic=abs(elasticity) > 1,
        current_price=10.0,
        current_quantity=100.0,
        recommended_price=9.0,
        expected_revenue_change_pct=11.1,
        n_observations=3,
    )


class TestRecommendation(unittest.TestCase):
    """Tests for Recommendation."""

    def test_from_estimate_uses_first_pass_price(self):
        rec = Recommendation.from_estimate(make_estimate())

        self.assertEqual(rec.recommended_price, 9.0)
        self.assertEqual(rec.elasticity_score, -2.0)
        self.assertEqual(rec.product_type, "elastic")
        self.assertEqual(rec.expected_revenue_change, 11.1)
        self.assertEqual(rec.optimization_target, "revenue")
        self.assertAlmostEqual(rec.price_change_pct, -10.0)

    def test_from_estimate_with_optimization(self):
        optimization = OptimizationResult(optimal_price=12.0, expected_change_pct=4.5, target="profit")
        rec = Recommendation.from_estimate(make_estimate(elasticity=-0.4), optimization)

        self.assertEqual(rec.recommended_price, 12.0)
        self.assertEqual(rec.expected_revenue_change, 4.5)
        self.assertEqual(rec.optimization_target, "profit")
        self.assertEqual(rec.product_type, "inelastic")
        self.assertAlmostEqual(rec.price_change_pct, 20.0)

    def test_frame_has_export_columns(self):
        frame = recommendations_frame([Recommendation.from_estimate(make_estimate())])

        self.assertEqual(list(frame.columns), RECOMMENDATION_COLUMNS)
        self.assertAlmostEqual(frame["price_change_pct"].iloc[0], -10.0)


class TestRecommendationBook(unittest.TestCase):
    """Tests for RecommendationBook."""

    def test_upsert_overwrites_per_owner_and_product(self):
        book = RecommendationBook()
        old = Recommendation.from_estimate(make_estimate(), created_at=datetime(2024, 1, 1))
        new = Recommendation.from_estimate(
            make_estimate(),
            OptimizationResult(optimal_price=8.5, expected_change_pct=17.6, target="revenue"),
            created_at=datetime(2024, 2, 1),
        )

        book.upsert("alice", [old])
        book.upsert("alice", [new])
        book.upsert("bob", [old])

        self.assertEqual(len(book), 2)
        self.assertEqual(book.for_owner("alice"), [new])
        self.assertEqual(book.for_owner("bob"), [old])
        self.assertEqual(book.for_owner("carol"), [])

    def test_for_owner_newest_first(self):
        book = RecommendationBook()
        first = Recommendation.from_estimate(make_estimate("Tea"), created_at=datetime(2024, 1, 1))
        second = Recommendation.from_estimate(make_estimate("Mug"), created_at=datetime(2024, 3, 1))

        written = book.upsert("alice", [first, second])

        self.assertEqual(written, 2)
        self.assertEqual([rec.product_name for rec in book.for_owner("alice")], ["Mug", "Tea"])


if __name__ == "__main__":
    unittest.main()
