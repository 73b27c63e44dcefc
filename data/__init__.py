"""
Data package for the Sales Elasticity toolkit.

This package provides sales observation types, data loading, sample data
and recommendation records.
"""

from data.observations import Observation, ObservationSeries, group_by_product
from data.data_loader import DataLoader
from data.simulation import sample_sales_records, generate_synthetic_data
from data.recommendations import Recommendation, RecommendationBook, recommendations_frame

__all__ = [
    'Observation', 'ObservationSeries', 'group_by_product', 'DataLoader',
    'sample_sales_records', 'generate_synthetic_data',
    'Recommendation', 'RecommendationBook', 'recommendations_frame',
]
