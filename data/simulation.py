"""
Sample and synthetic sales data for demos and validation.

sample_sales_records returns a small fixed dataset covering elastic and
inelastic products across four categories. generate_synthetic_data draws a
larger dataset from a constant-elasticity demand model with known
per-product elasticities, so estimates can be checked against ground truth.

DATA GENERATION MODEL:
    ln(quantity) = ln(base_demand) + elasticity * ln(price / base_price) + noise
"""

from datetime import date, timedelta
from typing import List, Optional

import numpy as np
import pandas as pd

from utils.logging_utils import logger
from data.observations import Observation

_SAMPLE_ROWS = [
    # Electronics, elastic
    ("Gaming Laptop", "Electronics", 1200, 25, "2024-01-15"),
    ("Gaming Laptop", "Electronics", 1000, 45, "2024-02-15"),
    ("Gaming Laptop", "Electronics", 800, 80, "2024-03-15"),
    ("Wireless Headphones", "Electronics", 150, 40, "2024-01-20"),
    ("Wireless Headphones", "Electronics", 120, 70, "2024-02-20"),
    ("Wireless Headphones", "Electronics", 100, 120, "2024-03-20"),
    # Books, inelastic
    ("Programming Guide", "Books", 50, 100, "2024-01-10"),
    ("Programming Guide", "Books", 45, 105, "2024-02-10"),
    ("Programming Guide", "Books", 55, 95, "2024-03-10"),
    ("Business Strategy", "Books", 30, 80, "2024-01-25"),
    ("Business Strategy", "Books", 35, 75, "2024-02-25"),
    ("Business Strategy", "Books", 25, 85, "2024-03-25"),
    # Clothing
    ("Designer T-Shirt", "Clothing", 80, 30, "2024-01-05"),
    ("Designer T-Shirt", "Clothing", 60, 60, "2024-02-05"),
    ("Designer T-Shirt", "Clothing", 40, 100, "2024-03-05"),
    # Food, inelastic
    ("Organic Coffee", "Food", 15, 200, "2024-01-08"),
    ("Organic Coffee", "Food", 18, 190, "2024-02-08"),
    ("Organic Coffee", "Food", 12, 210, "2024-03-08"),
]


def sample_sales_records() -> List[Observation]:
    """Fixed demo dataset: six products, three monthly sales each."""
    return [
        Observation(
            product_name=name,
            category=category,
            price=float(price),
            quantity=quantity,
            sale_date=date.fromisoformat(sale_date),
        )
        for name, category, price, quantity, sale_date in _SAMPLE_ROWS
    ]


def generate_synthetic_data(
    n_products: int = 10,
    n_periods: int = 12,
    start_date: str = "2024-01-01",
    period_days: int = 30,
    true_elasticity_mean: float = -1.2,
    true_elasticity_std: float = 0.5,
    price_variation: float = 0.2,
    noise_level: float = 0.05,
    random_seed: int = 42,
    output_file: Optional[str] = None
) -> pd.DataFrame:
    """
    Generate synthetic sales data with known elasticities.

    Args:
        n_products: Number of products
        n_periods: Sales records per product
        start_date: Date of the first period (YYYY-MM-DD)
        period_days: Days between consecutive records
        true_elasticity_mean: Mean of the true elasticity distribution
        true_elasticity_std: Standard deviation of the true elasticity distribution
        price_variation: Standard deviation of log price around the base price
        noise_level: Standard deviation of the log-quantity noise
        random_seed: Seed for reproducible output
        output_file: Optional CSV path to save the data

    Returns:
        DataFrame with product_name, category, price, quantity_sold, sale_date
        and the true_elasticity used for each row
    """
    rng = np.random.default_rng(random_seed)
    start = date.fromisoformat(start_date)
    categories = ["Electronics", "Books", "Clothing", "Food"]

    logger.info(f"Generating {n_products * n_periods} synthetic sales records for {n_products} products")

    rows = []
    for i in range(n_products):
        product_name = f"Product_{i + 1:03d}"
        category = categories[i % len(categories)]
        elasticity = float(rng.normal(true_elasticity_mean, true_elasticity_std))
        base_price = float(rng.uniform(10, 500))
        base_demand = float(rng.uniform(20, 300))

        log_price_ratio = rng.normal(0.0, price_variation, size=n_periods)
        noise = rng.normal(0.0, noise_level, size=n_periods)
        prices = base_price * np.exp(log_price_ratio)
        quantities = np.maximum(np.rint(base_demand * np.exp(elasticity * log_price_ratio + noise)), 1)

        for period in range(n_periods):
            rows.append({
                "product_name": product_name,
                "category": category,
                "price": round(float(prices[period]), 2),
                "quantity_sold": int(quantities[period]),
                "sale_date": start + timedelta(days=period * period_days),
                "true_elasticity": elasticity,
            })

    data = pd.DataFrame(rows)

    if output_file:
        data.to_csv(output_file, index=False)
        logger.info(f"Saved synthetic data to {output_file}")

    return data
