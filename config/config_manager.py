"""
Configuration manager for the Sales Elasticity toolkit.

This module provides a centralized configuration management system built on
a dataclass, with JSON file loading and environment variable overrides.
"""
import json
import os
from typing import Dict, Any, Optional, Union
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields

from utils.logging_utils import get_logger
from model.constants import DEFAULT_DATA_CONFIG, DEFAULT_OWNER, TARGET_REVENUE, VALID_TARGETS
from model.exceptions import ConfigurationError

logger = get_logger()


@dataclass
class AppConfig:
    """Application configuration parameters"""
    # App settings
    results_dir: str = "results"
    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "logs/elasticity_analysis.log"
    owner: str = DEFAULT_OWNER

    # Data settings (with data_ prefix)
    data_path: str = "data/sales.csv"
    data_product_col: str = DEFAULT_DATA_CONFIG["product_col"]
    data_category_col: str = DEFAULT_DATA_CONFIG["category_col"]
    data_price_col: str = DEFAULT_DATA_CONFIG["price_col"]
    data_quantity_col: str = DEFAULT_DATA_CONFIG["quantity_col"]
    data_date_col: str = DEFAULT_DATA_CONFIG["date_col"]
    data_column_mappings: Dict[str, str] = field(default_factory=dict)

    # Optimization settings
    optimization_target: str = TARGET_REVENUE
    cost_per_unit: float = 0.0
    use_optimizer: bool = False


class ConfigManager:
    """
    Configuration manager holding a typed AppConfig.

    Values are resolved in order: dataclass defaults, JSON file, then
    environment variables named ELASTICITY_<FIELD_NAME>.
    """

    ENV_PREFIX = "ELASTICITY_"

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a JSON configuration file.

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        self.app_config = AppConfig()

        if config_path:
            self.load_config(config_path)

        self._apply_env_overrides()
        self.validate()

    def load_config(self, config_path: Union[str, Path]) -> None:
        """
        Load configuration from a JSON file. Unknown keys are ignored.

        Args:
            config_path: Path to a JSON configuration file.

        Raises:
            ConfigurationError: If the file is not valid JSON
        """
        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file: {config_path}", details=str(e)) from e

        app_fields = {f.name for f in fields(AppConfig)}
        for key, value in config_dict.items():
            if key in app_fields:
                setattr(self.app_config, key, value)
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")

        logger.info(f"Loaded configuration from {config_path}")

    def _apply_env_overrides(self) -> None:
        """Apply configuration overrides from environment variables."""
        for field_info in fields(AppConfig):
            env_name = f"{self.ENV_PREFIX}{field_info.name.upper()}"
            if env_name not in os.environ:
                continue

            raw = os.environ[env_name]
            field_type = type(getattr(self.app_config, field_info.name))
            try:
                if field_type == bool:
                    value = raw.lower() in ('true', 'yes', '1')
                elif field_type == dict:
                    value = json.loads(raw)
                else:
                    value = field_type(raw)
                setattr(self.app_config, field_info.name, value)
                logger.debug(f"Applied env override for {field_info.name}: {value}")
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid env value for {field_info.name}: {str(e)}")

    def save_config(self, filepath: Union[str, Path]) -> None:
        """
        Save the current configuration to a JSON file.

        Args:
            filepath: Path to save the configuration to.
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(asdict(self.app_config), f, indent=4)

        logger.info(f"Saved configuration to {filepath}")

    def validate(self) -> bool:
        """
        Validate the current configuration and fix recoverable issues.

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: For an unknown optimization target or a negative cost
        """
        config = self.app_config

        if config.optimization_target not in VALID_TARGETS:
            raise ConfigurationError(
                f"Unsupported optimization target: {config.optimization_target}",
                details={"valid_targets": list(VALID_TARGETS)}
            )

        try:
            config.cost_per_unit = float(config.cost_per_unit)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"cost_per_unit must be a number, got {config.cost_per_unit!r}") from e
        if config.cost_per_unit < 0:
            raise ConfigurationError(f"cost_per_unit must be non-negative, got {config.cost_per_unit}")

        if not config.results_dir:
            logger.warning("No results directory specified. Using default 'results'.")
            config.results_dir = "results"

        if not config.owner:
            logger.warning(f"No owner specified. Using default '{DEFAULT_OWNER}'.")
            config.owner = DEFAULT_OWNER

        return True

    def data_config(self) -> Dict[str, Any]:
        """Data loader keyword arguments derived from the data_ settings."""
        config = self.app_config
        return {
            "product_col": config.data_product_col,
            "category_col": config.data_category_col,
            "price_col": config.data_price_col,
            "quantity_col": config.data_quantity_col,
            "date_col": config.data_date_col,
            "column_mapping": dict(config.data_column_mappings),
        }
