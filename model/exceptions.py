#!/usr/bin/env python3
"""
Custom exceptions for the Sales Elasticity toolkit.

Insufficient or degenerate price histories are not errors: the estimator
returns None for them. The classes below cover malformed inputs and
failures in the surrounding pipeline.
"""


class RetailError(Exception):
    """Base exception class for all elasticity toolkit errors."""
    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self):
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Data-related errors
class DataError(RetailError):
    """Error related to data loading, validation, or preparation."""
    pass


class DataFormatError(DataError):
    """Error related to data format or schema."""
    pass


class DataValidationError(DataError):
    """Error related to data validation."""
    pass


# Model-related errors
class ModelError(RetailError):
    """Base class for model-related errors."""
    pass



class OptimizationError(ModelError):
    """Error raised for invalid price optimization inputs."""
    pass


# Configuration-related errors
class ConfigurationError(RetailError):
    """Error related to configuration."""
    pass


# Execution-related errors
class ExecutionError(RetailError):
    """Error related to execution of the analysis."""
    pass


class RunnerError(ExecutionError):
    """Error related to the model runner."""
    pass


# Results-related errors
class ResultsError(RetailError):
    """Error related to results handling."""
    pass
