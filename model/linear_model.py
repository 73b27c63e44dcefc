"""
Log-log linear regression model for price elasticity estimation.

For one product's sales history the model fits

    ln(quantity) = a + elasticity * ln(price)

by ordinary least squares, scores the fit with R², classifies the product
as elastic (|elasticity| > 1) or inelastic, and proposes a first-pass price:
a 10% cut for elastic products and a 10% raise for inelastic ones, with the
revenue change predicted by the constant-elasticity demand model.
"""

from typing import Optional

import numpy as np

from utils.logging_utils import get_logger
from data.observations import ObservationSeries
from model.base_model import BaseElasticityModel
from model.constants import (
    MIN_OBSERVATIONS,
    ELASTIC_THRESHOLD,
    ELASTIC_PRICE_FACTOR,
    INELASTIC_PRICE_FACTOR,
)
from model.demand import predict_quantity, percent_change
from model.results import ElasticityEstimate

logger = get_logger()


class ElasticityEstimator(BaseElasticityModel):
    """
    Log-log OLS elasticity estimator.

    The estimator is a pure function of its input: no state is kept between
    calls, and identical series always give identical estimates.
    """

    def __init__(self, model_name: str = "log_log_ols"):
        super().__init__(model_name=model_name)

    def estimate(self, series: ObservationSeries) -> Optional[ElasticityEstimate]:
        """
        Estimate the price elasticity of one product.

        The series is sorted by sale date (ties keep their input order).
        Observations whose price or quantity has no finite logarithm are left
        out of the regression but still count when choosing the latest
        observation as the current price point.

        Args:
            series: Sales records of a single product

        Returns:
            ElasticityEstimate, or None when fewer than two usable observations
            remain, all usable prices are identical, or the latest observation
            has no positive revenue to compare against
        """
        if len(series) < MIN_OBSERVATIONS:
            return None

        ordered = sorted(series, key=lambda observation: observation.sale_date)

        prices = np.array([o.price for o in ordered], dtype=float)
        quantities = np.array([o.quantity for o in ordered], dtype=float)
        with np.errstate(divide='ignore', invalid='ignore'):
            log_prices = np.log(prices)
            log_quantities = np.log(quantities)

        usable = np.isfinite(log_prices) & np.isfinite(log_quantities)
        n_usable = int(usable.sum())
        if n_usable < MIN_OBSERVATIONS:
            return None

        log_prices = log_prices[usable]
        log_quantities = log_quantities[usable]

        # Identical prices leave the slope undefined
        if np.ptp(log_prices) == 0:
            return None

        price_deviation = log_prices - log_prices.mean()
        if np.ptp(log_quantities) == 0:
            quantity_deviation = np.zeros_like(log_quantities)
        else:
            quantity_deviation = log_quantities - log_quantities.mean()

        denominator = float(np.sum(price_deviation ** 2))
        if denominator == 0:
            return None

        elasticity = float(np.sum(price_deviation * quantity_deviation)) / denominator
        goodness_of_fit = self._r_squared(price_deviation, quantity_deviation, elasticity)
        is_elastic = abs(elasticity) > ELASTIC_THRESHOLD

        latest = ordered[-1]
        current_price = float(latest.price)
        current_quantity = float(latest.quantity)
        current_revenue = current_price * current_quantity
        if not current_revenue > 0:
            logger.warning(
                f"No revenue baseline for '{series[0].product_name}' "
                f"(price={current_price}, quantity={current_quantity}); skipping recommendation"
            )
            return None

        factor = ELASTIC_PRICE_FACTOR if is_elastic else INELASTIC_PRICE_FACTOR
        recommended_price = current_price * factor
        predicted = predict_quantity(current_quantity, current_price, recommended_price, elasticity)
        revenue_change = percent_change(current_revenue, recommended_price * predicted)
        if not np.isfinite(revenue_change):
            logger.warning(
                f"Projected revenue for '{series[0].product_name}' is out of range "
                f"(elasticity={elasticity:.4g}); skipping recommendation"
            )
            return None

        if elasticity > 0:
            logger.debug(f"Positive elasticity ({elasticity:.3f}) for '{series[0].product_name}'")

        first = series[0]
        return ElasticityEstimate(
            product_name=first.product_name,
            category=first.category,
            elasticity=elasticity,
            goodness_of_fit=goodness_of_fit,
            is_elastic=is_elastic,
            current_price=current_price,
            current_quantity=current_quantity,
            recommended_price=recommended_price,
            expected_revenue_change_pct=revenue_change,
            n_observations=n_usable,
        )

    @staticmethod
    def _r_squared(
        price_deviation: np.ndarray,
        quantity_deviation: np.ndarray,
        elasticity: float
    ) -> float:
        """R² of the fitted line, 0 when log-quantity does not vary."""
        total_sum_squares = float(np.sum(quantity_deviation ** 2))
        if total_sum_squares <= 0:
            return 0.0
        residuals = quantity_deviation - elasticity * price_deviation
        residual_sum_squares = float(np.sum(residuals ** 2))
        return 1 - residual_sum_squares / total_sum_squares
