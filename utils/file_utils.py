#!/usr/bin/env python3
"""
File utility functions for the Sales Elasticity toolkit.

This module provides file and directory management utility functions.
"""

import os
import json
from typing import Any, Union
from pathlib import Path

from utils.logging_utils import logger
from utils.serialization import to_serializable


def ensure_dir_exists(directory: Union[str, Path]) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Path to directory
    """
    if directory:
        os.makedirs(directory, exist_ok=True)
        logger.debug(f"Ensuring directory exists: {directory}")


def save_json(data: Any, filepath: Union[str, Path]) -> None:
    """
    Save data to a JSON file, converting numpy, pandas and date values.

    Args:
        data: Data to save
        filepath: Path to save JSON file
    """
    ensure_dir_exists(os.path.dirname(str(filepath)))

    with open(filepath, 'w') as f:
        json.dump(to_serializable(data), f, indent=2)

    logger.debug(f"Saved JSON data to {filepath}")
