"""
Constant-elasticity demand model shared by the estimator and the optimizer.

Demand at a new price is projected from an observed price/quantity point:

    Q(p1) = Q0 * (p1 / p0) ** elasticity
"""
import math


def predict_quantity(
    current_quantity: float,
    current_price: float,
    new_price: float,
    elasticity: float
) -> float:
    """
    Project the quantity sold at new_price along a constant-elasticity demand curve.

    Args:
        current_quantity: Observed quantity Q0
        current_price: Observed price p0, must be positive
        new_price: Candidate price p1
        elasticity: Price elasticity of demand

    Returns:
        Projected quantity at new_price. Steep curves whose projection exceeds
        the float range give math.inf, so callers must check math.isfinite.
    """
    try:
        ratio = (new_price / current_price) ** elasticity
    except OverflowError:
        ratio = math.inf
    return current_quantity * ratio


def percent_change(baseline: float, value: float) -> float:
    """Percentage change from baseline to value. Callers guard against a zero baseline."""
    return (value - baseline) / baseline * 100
