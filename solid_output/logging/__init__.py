"""
Structured Logging for Solid Output
===================================

Bounded Context: Observability

JSON-structured logging on top of the standard logging module.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from solid_output.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="printer")
    >>> logger.info(
    ...     event=LogEvent.AREA_PRINTED,
    ...     message="Rectangle area printed",
    ...     metadata={'shape': 'Rectangle', 'value': 50}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "printer",
        "event": "printer.area.printed",
        "message": "Rectangle area printed",
        "metadata": {"shape": "Rectangle", "value": 50}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
