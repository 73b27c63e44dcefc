"""
Constants for the sales price elasticity models.

This module centralizes the fixed price offsets, thresholds and default
configuration values used throughout the codebase.
"""
from typing import Dict, Any

# =======================================================
# Estimation
# =======================================================

# Minimum number of usable observations for a regression
MIN_OBSERVATIONS = 2

# |elasticity| strictly above this value is elastic
ELASTIC_THRESHOLD = 1.0

# First-pass recommendation: cut elastic prices, raise inelastic prices
ELASTIC_PRICE_FACTOR = 0.90
INELASTIC_PRICE_FACTOR = 1.10

# =======================================================
# Optimization
# =======================================================

TARGET_REVENUE = "revenue"
TARGET_PROFIT = "profit"
VALID_TARGETS = (TARGET_REVENUE, TARGET_PROFIT)

PRODUCT_TYPE_ELASTIC = "elastic"
PRODUCT_TYPE_INELASTIC = "inelastic"

# Candidate price factor by target and product type
OPTIMIZER_PRICE_FACTORS: Dict[str, Dict[str, float]] = {
    TARGET_REVENUE: {
        PRODUCT_TYPE_ELASTIC: 0.85,
        PRODUCT_TYPE_INELASTIC: 1.15,
    },
    TARGET_PROFIT: {
        PRODUCT_TYPE_ELASTIC: 0.90,
        PRODUCT_TYPE_INELASTIC: 1.20,
    },
}

# =======================================================
# Default Configuration Values
# =======================================================

DEFAULT_DATA_CONFIG: Dict[str, Any] = {
    "product_col": "product_name",
    "category_col": "category",
    "price_col": "price",
    "quantity_col": "quantity_sold",
    "date_col": "sale_date",
}

DEFAULT_OWNER = "default"
