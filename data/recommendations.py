"""
Price recommendation records.

A Recommendation is the stored form of an elasticity estimate, optionally
refined by the price optimizer. RecommendationBook keeps the latest
recommendation per (owner, product_name): saving a product again replaces
its previous row instead of adding a duplicate.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from utils.logging_utils import logger
from model.constants import TARGET_REVENUE
from model.results import ElasticityEstimate, OptimizationResult

RECOMMENDATION_COLUMNS = [
    "product_name",
    "category",
    "current_price",
    "recommended_price",
    "price_change_pct",
    "elasticity_score",
    "product_type",
    "expected_revenue_change",
    "optimization_target",
    "created_at",
]


@dataclass(frozen=True)
class Recommendation:
    """Stored price recommendation for one product."""
    product_name: str
    category: str
    current_price: float
    recommended_price: float
    elasticity_score: float
    product_type: str
    expected_revenue_change: float
    optimization_target: str
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def price_change_pct(self) -> float:
        return (self.recommended_price - self.current_price) / self.current_price * 100

    @classmethod
    def from_estimate(
        cls,
        estimate: ElasticityEstimate,
        optimization: Optional[OptimizationResult] = None,
        created_at: Optional[datetime] = None
    ) -> "Recommendation":
        """
        Build a recommendation from an estimate.

        Without an optimization result the estimator's first-pass price is
        used and the target is "revenue". With one, its price, expected
        change and target replace the first-pass values.
        """
        if optimization is None:
            recommended_price = estimate.recommended_price
            expected_change = estimate.expected_revenue_change_pct
            target = TARGET_REVENUE
        else:
            recommended_price = optimization.optimal_price
            expected_change = optimization.expected_change_pct
            target = optimization.target

        return cls(
            product_name=estimate.product_name,
            category=estimate.category,
            current_price=estimate.current_price,
            recommended_price=recommended_price,
            elasticity_score=estimate.elasticity,
            product_type=estimate.product_type,
            expected_revenue_change=expected_change,
            optimization_target=target,
            created_at=created_at or datetime.now(),
        )

    def to_dict(self) -> Dict[str, object]:
        record = asdict(self)
        record["price_change_pct"] = self.price_change_pct
        return record


class RecommendationBook:
    """In-memory recommendations keyed by (owner, product_name)."""

    def __init__(self):
        self._rows: Dict[Tuple[str, str], Recommendation] = {}

    def upsert(self, owner: str, recommendations: Iterable[Recommendation]) -> int:
        """
        Insert or replace recommendations for an owner.

        Args:
            owner: Identifier of the user the rows belong to
            recommendations: Rows to save

        Returns:
            Number of rows written
        """
        written = 0
        for recommendation in recommendations:
            key = (owner, recommendation.product_name)
            if key in self._rows:
                logger.debug(f"Replacing recommendation for {key}")
            self._rows[key] = recommendation
            written += 1
        return written

    def for_owner(self, owner: str) -> List[Recommendation]:
        """Recommendations of one owner, newest first."""
        rows = [rec for (row_owner, _), rec in self._rows.items() if row_owner == owner]
        return sorted(rows, key=lambda rec: rec.created_at, reverse=True)

    def __len__(self) -> int:
        return len(self._rows)


def recommendations_frame(recommendations: Iterable[Recommendation]) -> pd.DataFrame:
    """
    Tabular view of recommendations with the derived price change column.

    Args:
        recommendations: Rows to tabulate

    Returns:
        DataFrame with RECOMMENDATION_COLUMNS, one row per recommendation
    """
    rows = [rec.to_dict() for rec in recommendations]
    return pd.DataFrame(rows, columns=RECOMMENDATION_COLUMNS)
