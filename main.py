#!/usr/bin/env python3
"""
Main entry point for the Sales Price Elasticity Analysis.

Loads historical sales records, estimates a price elasticity per product,
derives recommended prices and saves the results as JSON.

Usage:
    elasticity-analysis --data-path data/sales.csv
    elasticity-analysis --sample-data --optimize --target profit --cost-per-unit 5
"""
import sys
import argparse
from pathlib import Path

import pandas as pd

from config.config_manager import ConfigManager
from data.recommendations import recommendations_frame
from data.simulation import sample_sales_records
from model.constants import VALID_TARGETS
from model.exceptions import RetailError
from model.model_runner import ModelRunner
from utils.logging_utils import get_logger, LoggingManager

logger = get_logger()


def main(argv=None):
    """Main entry point for the Sales Elasticity Analysis."""
    args = parse_arguments(argv)

    try:
        config_manager = setup_config(args)
    except RetailError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    config = config_manager.app_config
    setup_logging(config.log_level, config.log_file if config.log_to_file else None)

    runner = ModelRunner(config_manager=config_manager)

    try:
        if args.sample_data:
            logger.info("Using built-in sample sales data")
            observations = sample_sales_records()
        else:
            logger.info(f"Using data path: {config.data_path}")
            observations = runner.load_observations()

        results = runner.run(observations)
        runner.save_recommendations()
        results_dir = runner.save_results()
        config_manager.save_config(Path(results_dir) / "config.json")
    except RetailError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    if results["recommendations"]:
        with pd.option_context("display.width", 160, "display.max_columns", None):
            table = recommendations_frame(results["recommendations"]).drop(columns=["created_at"])
            logger.info(f"Price recommendations:\n{table.round(2).to_string(index=False)}")

    if results["skipped"]:
        logger.info(f"Skipped products: {', '.join(results['skipped'])}")

    return 0


def setup_config(args):
    """
    Build the configuration from file, environment and command line.

    Args:
        args: Command line arguments

    Returns:
        ConfigManager instance
    """
    config_manager = ConfigManager(args.config)
    config = config_manager.app_config

    if args.data_path:
        config.data_path = args.data_path
    if args.results_dir:
        config.results_dir = args.results_dir
    if args.target:
        config.optimization_target = args.target
    if args.cost_per_unit is not None:
        config.cost_per_unit = args.cost_per_unit
    if args.optimize:
        config.use_optimizer = True
    if args.log_level:
        config.log_level = args.log_level

    config_manager.validate()
    return config_manager


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Sales Price Elasticity Analysis")

    # General options
    parser.add_argument("--config", type=str, help="Path to configuration file")
    parser.add_argument("--results-dir", type=str, help="Directory to store results")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level")

    # Data options
    data_group = parser.add_mutually_exclusive_group()
    data_group.add_argument("--data-path", type=str, help="Path to a CSV or Parquet sales file")
    data_group.add_argument("--sample-data", action="store_true",
                            help="Analyse the built-in sample sales data")

    # Optimization options
    parser.add_argument("--optimize", action="store_true",
                        help="Refine recommended prices for the optimization target")
    parser.add_argument("--target", choices=list(VALID_TARGETS),
                        help="Optimization target")
    parser.add_argument("--cost-per-unit", type=float,
                        help="Unit cost used by the profit target")

    return parser.parse_args(argv)


def setup_logging(log_level, log_file=None):
    """
    Set up logging based on the specified log level.

    Args:
        log_level: Log level name
        log_file: Optional log file path
    """
    LoggingManager.setup_logging(log_level=log_level, log_file=log_file)


if __name__ == "__main__":
    sys.exit(main())
