"""
Structured Logging for rectilinear
==================================

Bounded Context: Observability

JSON-structured logging for the orchestration edges (CLI, layout survey).
The geometry layer itself never logs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from rectilinear.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="cli")
    >>> logger.info(
    ...     event=LogEvent.LAYOUT_LOADED,
    ...     message="Loaded 3 rectangles",
    ...     metadata={'path': 'layout.yaml'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
