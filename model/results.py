"""
Result value types produced by the elasticity estimator and price optimizer.

Both types are immutable and owned by the caller; nothing here is cached
or persisted.
"""

from dataclasses import dataclass

from model.constants import PRODUCT_TYPE_ELASTIC, PRODUCT_TYPE_INELASTIC


@dataclass(frozen=True)
class ElasticityEstimate:
    """
    Log-log elasticity estimate for one product with a first-pass price recommendation.

    Attributes:
        product_name: Label taken from the first observation of the input series
        category: Label taken from the first observation of the input series
        elasticity: Slope of ln(quantity) on ln(price)
        goodness_of_fit: R² of the regression, negative values are possible in principle
        is_elastic: True when |elasticity| > 1
        current_price: Price of the latest observation
        current_quantity: Quantity of the latest observation
        recommended_price: Current price cut or raised by the fixed first-pass offset
        expected_revenue_change_pct: Predicted revenue change at the recommended price
        n_observations: Number of observations used in the regression
    """
    product_name: str
    category: str
    elasticity: float
    goodness_of_fit: float
    is_elastic: bool
    current_price: float
    current_quantity: float
    recommended_price: float
    expected_revenue_change_pct: float
    n_observations: int

    @property
    def product_type(self) -> str:
        return PRODUCT_TYPE_ELASTIC if self.is_elastic else PRODUCT_TYPE_INELASTIC


@dataclass(frozen=True)
class OptimizationResult:
    """
    Candidate price for an optimization target.

    expected_change_pct is the predicted percentage change of the target
    (revenue or profit). It is NaN when the revenue baseline is zero.
    """
    optimal_price: float
    expected_change_pct: float
    target: str
