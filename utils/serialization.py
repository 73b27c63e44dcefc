#!/usr/bin/env python3
"""
Serialization utilities for the Sales Elasticity toolkit.

Converts result objects into JSON-serializable structures.
"""

import dataclasses
import math
from datetime import date, datetime
from typing import Any

import numpy as np

from utils.logging_utils import logger


def to_serializable(obj: Any) -> Any:
    """
    Convert object to JSON-serializable format.

    Non-finite floats become None so the output stays valid JSON.

    Args:
        obj: Object to convert

    Returns:
        JSON-serializable representation of object
    """
    if isinstance(obj, (bool, np.bool_)):
        return bool(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, (float, np.floating)):
        value = float(obj)
        return value if math.isfinite(value) else None
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return to_serializable(dataclasses.asdict(obj))
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, (list, tuple)):
        return [to_serializable(x) for x in obj]
    elif isinstance(obj, dict):
        return {str(k): to_serializable(v) for k, v in obj.items()}
    elif obj is None or isinstance(obj, (str, int)):
        return obj
    else:
        logger.warning(f"Serializing object of type {type(obj).__name__} as string")
        return str(obj)
