"""
Structured Logging for MergeHull
================================

Bounded Context: Observability

JSON-structured logging with typed events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from mergehull.logging import create_logger, LogEvent
    >>> logger = create_logger("hull")
    >>> hull = merge_hull(points, logger=logger)
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
