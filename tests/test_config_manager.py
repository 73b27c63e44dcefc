#!/usr/bin/env python3
"""
Tests for the ConfigManager.
"""
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Add the parent directory to sys.path so we can import the packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from config.config_manager import ConfigManager
from model.exceptions import ConfigurationError


class TestConfigManager(unittest.TestCase):
    """Tests for ConfigManager."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)
        # Isolate from any ELASTICITY_ variables in the environment
        clean_env = {k: v for k, v in os.environ.items() if not k.startswith(ConfigManager.ENV_PREFIX)}
        self.env_patch = patch.dict(os.environ, clean_env, clear=True)
        self.env_patch.start()

    def tearDown(self):
        self.env_patch.stop()
        self.temp_dir.cleanup()

    def test_defaults(self):
        config = ConfigManager().app_config

        self.assertEqual(config.optimization_target, "revenue")
        self.assertEqual(config.cost_per_unit, 0.0)
        self.assertFalse(config.use_optimizer)
        self.assertEqual(config.data_quantity_col, "quantity_sold")

    def test_load_config_file(self):
        path = self.dir / "config.json"
        path.write_text(json.dumps({
            "optimization_target": "profit",
            "cost_per_unit": 3.5,
            "data_column_mappings": {"qty": "quantity_sold"},
            "unknown_key": 1,
        }))

        manager = ConfigManager(path)

        self.assertEqual(manager.app_config.optimization_target, "profit")
        self.assertEqual(manager.app_config.cost_per_unit, 3.5)
        self.assertEqual(manager.data_config()["column_mapping"], {"qty": "quantity_sold"})

    def test_env_overrides(self):
        os.environ["ELASTICITY_USE_OPTIMIZER"] = "true"
        os.environ["ELASTICITY_COST_PER_UNIT"] = "2.25"
        os.environ["ELASTICITY_OPTIMIZATION_TARGET"] = "profit"

        config = ConfigManager().app_config

        self.assertTrue(config.use_optimizer)
        self.assertEqual(config.cost_per_unit, 2.25)
        self.assertEqual(config.optimization_target, "profit")

    def test_invalid_values_raise(self):
        os.environ["ELASTICITY_OPTIMIZATION_TARGET"] = "margin"
        with self.assertRaises(ConfigurationError):
            ConfigManager()

        os.environ["ELASTICITY_OPTIMIZATION_TARGET"] = "revenue"
        os.environ["ELASTICITY_COST_PER_UNIT"] = "-1"
        with self.assertRaises(ConfigurationError):
            ConfigManager()

    def test_non_numeric_cost_raises(self):
        path = self.dir / "config.json"
        path.write_text(json.dumps({"cost_per_unit": "abc"}))
        with self.assertRaises(ConfigurationError):
            ConfigManager(path)

    def test_invalid_json_raises(self):
        path = self.dir / "broken.json"
        path.write_text("{not json")
        with self.assertRaises(ConfigurationError):
            ConfigManager(path)

    def test_save_config_round_trip(self):
        manager = ConfigManager()
        manager.app_config.optimization_target = "profit"
        path = self.dir / "out" / "config.json"

        manager.save_config(path)
        reloaded = ConfigManager(path)

        self.assertEqual(reloaded.app_config.optimization_target, "profit")


if __name__ == "__main__":
    unittest.main()
