"""
Observability — Logging helpers for cgsn.
"""

from cgsn.observability.logging import (
    configure_logging,
    get_logger,
    LoggingConfig,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "LoggingConfig",
    "JSONFormatter",
    "ReadableFormatter",
]
