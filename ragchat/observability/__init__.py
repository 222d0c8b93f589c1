"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from ragchat.observability.log_utils import log_latency
from ragchat.observability.logger import configure_logging

__all__ = ["configure_logging", "log_latency"]
