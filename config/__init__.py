"""
Configuration package for the Sales Elasticity toolkit.

This package provides configuration management functionality.
"""

from config.config_manager import AppConfig, ConfigManager

__all__ = ['AppConfig', 'ConfigManager']
