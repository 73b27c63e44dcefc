"""
Model package for the Sales Elasticity toolkit.

This package provides the log-log elasticity estimator, the price
optimizer and their result types. The ModelRunner orchestration lives in
model.model_runner and is imported from there directly.
"""

from model.base_model import BaseElasticityModel, summarize_estimates
from model.exceptions import ModelError, DataError, OptimizationError
from model.linear_model import ElasticityEstimator
from model.optimizer import PriceOptimizer, optimize_price
from model.results import ElasticityEstimate, OptimizationResult

__all__ = [
    'BaseElasticityModel', 'summarize_estimates',
    'ModelError', 'DataError', 'OptimizationError',
    'ElasticityEstimator', 'PriceOptimizer', 'optimize_price',
    'ElasticityEstimate', 'OptimizationResult',
]
