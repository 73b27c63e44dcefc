#!/usr/bin/env python3
"""
Base model module for the Sales Elasticity toolkit.
Defines the abstract base class for all elasticity models.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Mapping, Optional

import numpy as np

from utils.logging_utils import logger, LoggingManager
from data.observations import ObservationSeries
from model.results import ElasticityEstimate
from model.exceptions import ResultsError


class BaseElasticityModel(ABC):
    """
    Abstract base class for elasticity models.

    A model turns the observation series of one product into an
    ElasticityEstimate, or None when the series cannot support an estimate.
    Models hold no state between calls, so one instance can serve any number
    of products.
    """

    def __init__(self, model_name: str = "base_model"):
        """
        Initialize the base elasticity model.

        Parameters
        ----------
        model_name : str
            Name of the model for identification.
        """
        self.model_name = model_name
        logger.debug(f"Initialized {model_name} model")

    @abstractmethod
    def estimate(self, series: ObservationSeries) -> Optional[ElasticityEstimate]:
        """
        Estimate the price elasticity of one product.

        Parameters
        ----------
        series : sequence of Observation
            Sales records of a single product, in any order.

        Returns
        -------
        ElasticityEstimate or None
            None when the series has too few usable observations or the
            regression is undefined.
        """
        pass

    def estimate_all(
        self,
        groups: Mapping[str, ObservationSeries]
    ) -> Dict[str, ElasticityEstimate]:
        """
        Estimate every product group, skipping groups without a result.

        Parameters
        ----------
        groups : mapping of product key to observation series
            Output of data.observations.group_by_product or equivalent.

        Returns
        -------
        dict
            Estimates keyed like the input, in input order.
        """
        estimates: Dict[str, ElasticityEstimate] = {}
        for key, series in groups.items():
            estimate = self.estimate(series)
            if estimate is None:
                LoggingManager.log_warning(
                    logger, f"Skipping product '{key}': no elasticity estimate", {"observations": len(series)}
                )
                continue
            estimates[key] = estimate
        return estimates


def summarize_estimates(estimates: List[ElasticityEstimate]) -> Dict[str, Any]:
    """
    Summarize a batch of elasticity estimates.

    Parameters
    ----------
    estimates : list of ElasticityEstimate

    Returns
    -------
    dict
        Counts, shares and central statistics of the estimates.

    Raises
    ------
    ResultsError
        If there are no estimates to summarize.
    """
    if not estimates:
        raise ResultsError("No elasticity estimates available")

    elasticities = np.array([e.elasticity for e in estimates], dtype=float)
    n_products = len(estimates)
    elastic_count = sum(1 for e in estimates if e.is_elastic)

    return {
        "n_products": n_products,
        "elastic_count": elastic_count,
        "inelastic_count": n_products - elastic_count,
        "elastic_percent": elastic_count / n_products * 100,
        "inelastic_percent": (n_products - elastic_count) / n_products * 100,
        "mean_elasticity": float(np.mean(elasticities)),
        "median_elasticity": float(np.median(elasticities)),
        "min_elasticity": float(np.min(elasticities)),
        "max_elasticity": float(np.max(elasticities)),
        "mean_goodness_of_fit": float(np.mean([e.goodness_of_fit for e in estimates])),
        "mean_expected_revenue_change_pct": float(
            np.mean([e.expected_revenue_change_pct for e in estimates])
        ),
    }
