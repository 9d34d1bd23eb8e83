"""
Centralized logging utilities with JSON formatting
"""

import json
import logging
import sys
import time
from datetime import datetime, UTC
from functools import wraps
from typing import Optional

from config import get_config


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_data'):
            log_entry.update(record.extra_data)

        return json.dumps(log_entry, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with JSON formatting"""
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(get_config().LOG_LEVEL)
        logger.propagate = False

    return logger


class StructuredLogger:
    """Logger wrapper that turns keyword arguments into JSON fields"""

    def __init__(self, name: str):
        self.logger = get_logger(name)
        self.name = name

    def _log(self, level: int, message: str, **kwargs):
        extra_data = {"extra_data": kwargs} if kwargs else {}
        self.logger.log(level, message, extra=extra_data)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def performance(self, operation: str, duration: float, **metadata):
        """Log how long an operation took"""
        self.info(
            f"Performance: {operation} took {duration:.4f}s",
            operation=operation,
            duration=duration,
            **metadata
        )


def get_structured_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance"""
    return StructuredLogger(name)


def log_performance(logger_name: Optional[str] = None):
    """Decorator to log function performance"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(logger_name or func.__module__)
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(
                    f"Performance: {func.__name__} failed after {duration:.4f}s: {e}",
                    extra={
                        "extra_data": {
                            "function": func.__name__,
                            "duration": duration,
                            "success": False,
                            "error": str(e)
                        }
                    }
                )
                raise

            duration = time.perf_counter() - start_time
            logger.info(
                f"Performance: {func.__name__} completed in {duration:.4f}s",
                extra={
                    "extra_data": {
                        "function": func.__name__,
                        "duration": duration,
                        "success": True
                    }
                }
            )
            return result

        return wrapper
    return decorator
