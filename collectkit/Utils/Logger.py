from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

from config.settings import settings

LogContext = Dict[str, Any]


class LaravelStyleLogger:
    """Laravel-style logger implementation."""

    def __init__(self, name: str = __name__) -> None:
        self.name = name
        self.logger = logging.getLogger(name)

        if not self.logger.handlers:
            self._setup_default_handler()

    def _setup_default_handler(self) -> None:
        """Set up default logging handler."""
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(settings.LOG_LEVEL)

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message, context))

    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


def get_logger(name: Optional[str] = None) -> LaravelStyleLogger:
    """Get a Laravel-style logger instance."""
    if name is None:
        name = __name__
    return LaravelStyleLogger(name)
