"""
Sales observation records and the per-product partition step.

An Observation is one historical sale: a product sold at a price in some
quantity on a date. Estimation works on the observations of a single
product, so callers first split the raw records with group_by_product.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Sequence

# Ordered observations for a single product
ObservationSeries = Sequence["Observation"]


@dataclass(frozen=True)
class Observation:
    """A single historical sales record."""
    product_name: str
    category: str
    price: float
    quantity: int
    sale_date: date


def group_by_product(observations: Iterable[Observation]) -> Dict[str, List[Observation]]:
    """
    Partition observations by product name.

    Groups appear in the order their product is first seen, and each group
    keeps the input order of its observations, so the result is fully
    determined by the input sequence.

    Args:
        observations: Sales records for any number of products

    Returns:
        Mapping from product name to that product's observations
    """
    groups: Dict[str, List[Observation]] = {}
    for observation in observations:
        groups.setdefault(observation.product_name, []).append(observation)
    return groups
