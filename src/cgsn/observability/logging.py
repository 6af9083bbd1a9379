"""
Logging — Structured logging for the cgsn package.

The library never configures logging on import. Applications call
``configure_logging`` (or ``LoggingConfig.from_env().apply()``) to route
``cgsn.*`` records to a stream.
"""

import logging
import json
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname:<7} {record.name}: {record.getMessage()}"
        
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        
        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure cgsn logging.
    
    Args:
        level: Logging level
        json_format: Use JSON format (for production)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())
    
    cgsn_logger = logging.getLogger("cgsn")
    cgsn_logger.setLevel(level)
    cgsn_logger.handlers.clear()
    cgsn_logger.addHandler(handler)
    cgsn_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a cgsn component."""
    return logging.getLogger(f"cgsn.{name}")


@dataclass
class LoggingConfig:
    """
    Logging settings, with environment fallback.

    CGSN_LOG_LEVEL and CGSN_LOG_FORMAT are read only when an application
    calls from_env(). The library never reads them on import.
    """
    level: int = logging.WARNING
    json_format: bool = False
    
    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Build from CGSN_LOG_LEVEL and CGSN_LOG_FORMAT.
        
        Unknown level names fall back to WARNING.
        """
        level_name = os.environ.get("CGSN_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
        
        log_format = os.environ.get("CGSN_LOG_FORMAT", "text").lower()
        return cls(level=level, json_format=log_format == "json")
    
    def apply(self, stream: Any = None) -> None:
        """Install these settings on the cgsn logger."""
        configure_logging(level=self.level, json_format=self.json_format, stream=stream)
