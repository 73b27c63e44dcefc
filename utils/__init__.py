"""
Utility package for the Sales Elasticity toolkit.

This package provides logging, decorator, file and serialization helpers
shared by the model, data and config packages.
"""

from utils.logging_utils import logger, get_logger, LoggingManager, log_step
from utils.file_utils import ensure_dir_exists, save_json
from utils.decorators import timed, log_errors
from utils.serialization import to_serializable

__all__ = [
    'logger', 'get_logger', 'LoggingManager', 'ensure_dir_exists',
    'save_json', 'log_step', 'timed', 'log_errors',
    'to_serializable'
]
