"""
Objective-aware price recommendation from an elasticity estimate.

The optimizer evaluates a single candidate price rather than searching a
price range: the candidate is the current price scaled by a fixed factor
chosen from the optimization target and whether demand is elastic.

    target    elastic   inelastic
    revenue   x 0.85    x 1.15
    profit    x 0.90    x 1.20

Quantity at the candidate price follows the constant-elasticity demand
model, and the result reports the predicted percentage change of the
target metric.
"""

import math

from utils.logging_utils import get_logger
from model.constants import (
    ELASTIC_THRESHOLD,
    OPTIMIZER_PRICE_FACTORS,
    PRODUCT_TYPE_ELASTIC,
    PRODUCT_TYPE_INELASTIC,
    TARGET_PROFIT,
    TARGET_REVENUE,
    VALID_TARGETS,
)
from model.demand import predict_quantity, percent_change
from model.exceptions import OptimizationError
from model.results import OptimizationResult

logger = get_logger()


class PriceOptimizer:
    """
    Stateless price optimizer for revenue or profit targets.
    """

    def optimize(
        self,
        elasticity: float,
        current_price: float,
        current_quantity: float,
        cost_per_unit: float = 0.0,
        target: str = TARGET_REVENUE
    ) -> OptimizationResult:
        """
        Pick a candidate price and predict its effect on the target metric.

        Args:
            elasticity: Price elasticity of demand
            current_price: Current unit price, must be positive
            current_quantity: Current quantity sold, must be non-negative
            cost_per_unit: Unit cost used by the profit target
            target: "revenue" or "profit"

        Returns:
            OptimizationResult. For the profit target a non-positive current
            profit gives an expected change of exactly 0. For the revenue
            target a zero current quantity gives NaN, since the change
            relative to zero revenue is undefined. A projection beyond the
            float range also gives NaN.

        Raises:
            OptimizationError: If an input is outside its valid range
        """
        self._validate(elasticity, current_price, current_quantity, cost_per_unit, target)

        product_type = PRODUCT_TYPE_ELASTIC if abs(elasticity) > ELASTIC_THRESHOLD else PRODUCT_TYPE_INELASTIC
        candidate = current_price * OPTIMIZER_PRICE_FACTORS[target][product_type]
        predicted = predict_quantity(current_quantity, current_price, candidate, elasticity)

        if target == TARGET_REVENUE:
            current_revenue = current_price * current_quantity
            if current_revenue == 0:
                expected_change = math.nan
            else:
                expected_change = percent_change(current_revenue, candidate * predicted)
        else:
            current_profit = (current_price - cost_per_unit) * current_quantity
            predicted_profit = (candidate - cost_per_unit) * predicted
            expected_change = percent_change(current_profit, predicted_profit) if current_profit > 0 else 0.0

        # Overflowing projections are reported as undefined
        if not math.isfinite(expected_change):
            if not math.isnan(expected_change):
                logger.warning(f"Projected {target} at {candidate:.2f} is out of range (elasticity={elasticity:.4g})")
            expected_change = math.nan

        logger.debug(
            f"Optimized {target} for {product_type} demand: "
            f"{current_price:.2f} -> {candidate:.2f} ({expected_change:+.2f}%)"
        )
        return OptimizationResult(
            optimal_price=candidate,
            expected_change_pct=expected_change,
            target=target,
        )

    @staticmethod
    def _validate(
        elasticity: float,
        current_price: float,
        current_quantity: float,
        cost_per_unit: float,
        target: str
    ) -> None:
        if target not in VALID_TARGETS:
            raise OptimizationError(
                f"Unknown optimization target: {target!r}",
                details={"valid_targets": list(VALID_TARGETS)}
            )
        if not math.isfinite(elasticity):
            raise OptimizationError(f"Elasticity must be finite, got {elasticity}")
        if not current_price > 0:
            raise OptimizationError(f"Current price must be positive, got {current_price}")
        if current_quantity < 0:
            raise OptimizationError(f"Current quantity must be non-negative, got {current_quantity}")
        if cost_per_unit < 0:
            raise OptimizationError(f"Cost per unit must be non-negative, got {cost_per_unit}")


def optimize_price(
    elasticity: float,
    current_price: float,
    current_quantity: float,
    cost_per_unit: float = 0.0,
    target: str = TARGET_REVENUE
) -> OptimizationResult:
    """Module-level shortcut for PriceOptimizer().optimize."""
    return PriceOptimizer().optimize(
        elasticity, current_price, current_quantity,
        cost_per_unit=cost_per_unit, target=target
    )


__all__ = ["PriceOptimizer", "optimize_price", "TARGET_PROFIT", "TARGET_REVENUE"]
