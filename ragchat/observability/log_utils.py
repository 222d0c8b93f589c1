"""
Logging utilities for safe structured logging and latency tracking.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import asyncio
import logging
import time
from functools import wraps
from typing import Any, Callable


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_latency(operation_name: str):
    """Log latency and outcome of the decorated sync or async callable."""

    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                latency_ms = (time.perf_counter() - start) * 1000
                logger.error(
                    f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | "
                    f"error={safe_log_value(type(e).__name__)}"
                )
                raise
            latency_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                latency_ms = (time.perf_counter() - start) * 1000
                logger.error(
                    f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | "
                    f"error={safe_log_value(type(e).__name__)}"
                )
                raise
            latency_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
