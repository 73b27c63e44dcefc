#!/usr/bin/env python3
"""
Model Runner for Sales Price Elasticity Analysis.

This orchestration module runs the whole workflow for a batch of sales
records: partition by product, estimate elasticities, optionally refine the
prices for a revenue or profit target, build recommendations, summarize,
and save results.

EXECUTION FLOW:
1. Initialize with configuration (or use defaults)
2. Load sales records (file, DataFrame or Observation list)
3. Group observations by product
4. Estimate each product; products without an estimate are skipped
5. Refine recommended prices with the PriceOptimizer if enabled
6. Summarize and save outputs

EDGE CASES:
- Products with fewer than two usable observations or constant prices are
  skipped with a warning, never failing the run
- A run where no product yields an estimate returns empty results and no summary
"""
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from utils.logging_utils import get_logger, log_step, LoggingManager
from utils.decorators import log_errors, timed
from utils.file_utils import ensure_dir_exists, save_json
from config.config_manager import ConfigManager
from data.data_loader import DataLoader
from data.observations import Observation, group_by_product
from data.recommendations import Recommendation, RecommendationBook
from model.base_model import BaseElasticityModel, summarize_estimates
from model.linear_model import ElasticityEstimator
from model.optimizer import PriceOptimizer
from model.exceptions import DataError, ResultsError, RunnerError

logger = get_logger()


class ModelRunner:
    """
    Runs elasticity analysis for batches of sales records.

    Args:
        config_manager: Configuration source. A default ConfigManager is created if omitted.
        model: Elasticity model to use. Defaults to the log-log ElasticityEstimator.
        optimizer: Price optimizer used when refinement is enabled.
        book: Recommendation book that receives saved recommendations.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        model: Optional[BaseElasticityModel] = None,
        optimizer: Optional[PriceOptimizer] = None,
        book: Optional[RecommendationBook] = None
    ):
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.app_config
        self.model = model or ElasticityEstimator()
        self.optimizer = optimizer or PriceOptimizer()
        self.book = book if book is not None else RecommendationBook()
        self.results: Dict[str, Any] = {}

    @log_step("Loading sales data")
    @log_errors(DataError, msg="Error loading sales data")
    def load_observations(self, source: Union[str, Path, pd.DataFrame, None] = None) -> List[Observation]:
        """
        Load sales records from a file or DataFrame.

        Args:
            source: Path or DataFrame. Defaults to the configured data_path.

        Returns:
            Observations in file order
        """
        loader = DataLoader(source if source is not None else self.config.data_path,
                            **self.config_manager.data_config())
        return loader.to_observations()

    @timed("Elasticity analysis")
    def run(
        self,
        observations: Iterable[Observation],
        target: Optional[str] = None,
        cost_per_unit: Optional[float] = None,
        use_optimizer: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Analyse a batch of sales records.

        Args:
            observations: Sales records for any number of products
            target: Optimization target, defaults to the configured one
            cost_per_unit: Unit cost for the profit target, defaults to the configured one
            use_optimizer: Refine prices with the optimizer, defaults to the configured flag

        Returns:
            Dictionary with "estimates", "optimizations", "recommendations",
            "skipped" and "summary" entries
        """
        target = target or self.config.optimization_target
        cost_per_unit = self.config.cost_per_unit if cost_per_unit is None else cost_per_unit
        use_optimizer = self.config.use_optimizer if use_optimizer is None else use_optimizer

        groups = group_by_product(observations)
        logger.info(f"Analysing {len(groups)} products")

        estimates = self.model.estimate_all(groups)
        skipped = [name for name in groups if name not in estimates]

        optimizations = {}
        if use_optimizer:
            for name, estimate in estimates.items():
                optimizations[name] = self.optimizer.optimize(
                    estimate.elasticity,
                    estimate.current_price,
                    estimate.current_quantity,
                    cost_per_unit=cost_per_unit,
                    target=target,
                )

        recommendations = [
            Recommendation.from_estimate(estimate, optimizations.get(name))
            for name, estimate in estimates.items()
        ]

        summary = summarize_estimates(list(estimates.values())) if estimates else {}
        if summary:
            LoggingManager.log_dict(logger, "Elasticity summary", summary)
        else:
            logger.warning("No product produced an elasticity estimate")

        self.results = {
            "estimates": estimates,
            "optimizations": optimizations,
            "recommendations": recommendations,
            "skipped": skipped,
            "summary": summary,
        }
        return self.results

    def save_recommendations(self, owner: Optional[str] = None) -> int:
        """
        Upsert the recommendations of the last run into the recommendation book.

        Returns:
            Number of recommendations written

        Raises:
            RunnerError: If run() has not produced results yet
        """
        if not self.results:
            raise RunnerError("No results available. Call run() first.")
        return self.book.upsert(owner or self.config.owner, self.results["recommendations"])

    @log_step("Saving results")
    @log_errors(ResultsError, msg="Error saving results")
    def save_results(self, results_dir: Union[str, Path, None] = None) -> Path:
        """
        Save the last run's estimates, recommendations and summary as JSON.

        Args:
            results_dir: Output directory, defaults to the configured results_dir

        Returns:
            The directory the files were written to
        """
        if not self.results:
            raise ResultsError("No results to save. Call run() first.")

        results_dir = Path(results_dir or self.config.results_dir)
        ensure_dir_exists(results_dir)

        save_json(
            {name: estimate for name, estimate in self.results["estimates"].items()},
            results_dir / "elasticities.json",
        )
        save_json(
            [rec.to_dict() for rec in self.results["recommendations"]],
            results_dir / "recommendations.json",
        )
        save_json(
            {"summary": self.results["summary"], "skipped": self.results["skipped"]},
            results_dir / "summary.json",
        )
        logger.info(f"Results saved to {results_dir}")
        return results_dir
