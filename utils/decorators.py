#!/usr/bin/env python3
"""
Decorators for the Sales Elasticity toolkit.

This module provides decorators for:
- Error handling
- Performance timing
"""

import time
import functools
import traceback
from typing import Any, Callable, Optional, TypeVar, cast, List, Type, Union

from utils.logging_utils import logger

F = TypeVar('F', bound=Callable[..., Any])


def log_errors(expected_exceptions: Optional[Union[Type[Exception], List[Type[Exception]]]] = Exception,
               msg: str = "Error in {func_name}",
               reraise: bool = True,
               default_return: Any = None,
               log_args: bool = False) -> Callable[[F], F]:
    """
    Decorator to catch and log exceptions.

    Args:
        expected_exceptions: Exception type or a list of exception types to catch. Defaults to Exception.
        msg: Message template for logging errors. {func_name} will be replaced.
        reraise: Whether to re-raise the exception after logging.
        default_return: Value to return in case of exception (if not re-raising).
        log_args: Whether to log function arguments on error.

    Returns:
        Decorated function that logs errors
    """
    if not isinstance(expected_exceptions, (list, tuple)):
        exceptions_to_check = (expected_exceptions,)
    else:
        exceptions_to_check = tuple(expected_exceptions)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except exceptions_to_check as e:
                formatted_msg = msg.format(func_name=func.__name__)
                logger.error(f"{formatted_msg}: {str(e)}")
                logger.debug("Traceback:\n" + traceback.format_exc())

                if log_args:
                    safe_args = [repr(arg)[:200] for arg in args]
                    safe_kwargs = {k: repr(v)[:200] for k, v in kwargs.items()}
                    logger.debug(f"Function arguments: args={safe_args}, kwargs={safe_kwargs}")

                if reraise:
                    raise
                return default_return

        return cast(F, wrapper)
    return decorator


def timed(*args: Any, log_level: str = "info", step_name: Optional[str] = None) -> Any:
    """
    Decorator to time function execution and log the result.

    Can be used with or without parameters:

    @timed
    def my_func():
        ...

    or

    @timed("Price optimization", log_level="debug")
    def my_func():
        ...

    Args:
        log_level: Logging level to use (debug, info, warning, error).
        step_name: Optional step name. Defaults to the function name.

    Returns:
        Decorated function that logs timing information
    """
    def decorator(f: Callable[..., Any], name: Optional[str]) -> Callable[..., Any]:
        actual_step_name = name or f.__name__

        @functools.wraps(f)
        def wrapper(*w_args: Any, **w_kwargs: Any) -> Any:
            start = time.time()
            try:
                return f(*w_args, **w_kwargs)
            finally:
                elapsed = time.time() - start
                getattr(logger, log_level.lower())(f"{actual_step_name} executed in {elapsed:.2f} seconds")
        return wrapper

    # Used as a bare decorator: @timed
    if len(args) == 1 and callable(args[0]):
        return decorator(args[0], step_name)

    provided_step_name = args[0] if args and isinstance(args[0], str) else step_name
    return lambda f: decorator(f, provided_step_name)
