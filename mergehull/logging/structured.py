"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per line)
- Thread-safe (uses standard logging module)
- Contextual metadata (input_count, vertex_count, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="hull")
    >>> logger.info(
    ...     event=LogEvent.HULL_COMPLETED,
    ...     message="Convex hull has 4 vertices",
    ...     metadata={'vertex_count': 4}
    ... )

Output:
    {
        "timestamp": "2026-10-17T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "hull",
        "event": "hull.completed",
        "message": "Convex hull has 4 vertices",
        "metadata": {"vertex_count": 4}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger wrapping Python's logging module.

    Attributes:
        component: Component name (e.g., "hull", "runner")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "hull")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: mergehull.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"mergehull.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message (per-merge traces)."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback

        Example:
            >>> try:
            ...     HullConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CONFIG_ERROR,
            ...         message="Invalid run configuration",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def set_level(self, level: int) -> None:
        """
        Change logging level dynamically.

        Args:
            level: New logging level (logging.DEBUG, INFO, WARNING, ERROR)
        """
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter that passes StructuredLogger's JSON through unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        # The message from StructuredLogger is already JSON
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("hull", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
