"""
Base Printer
============

Bounded Context: Console Output Infrastructure

This module provides the abstract base class for measurement printers.

Design:
- One line per printed shape
- Output sink resolved at write time (stdout unless a stream is injected)
- Structured logging integration
- Sink failures are logged and re-raised, never swallowed

Architecture:
    BasePrinter (abstract)
        ↓
    AreaPrinter, VolumePrinter (concrete)

Responsibilities:
- Writing lines to the sink
- Counting printed lines
- NOT responsible for: Line formatting (delegated to subclasses)
"""

import math
import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, TextIO

from solid_geometry import AreaCapable, VolumeCapable
from ..logging import StructuredLogger, LogEvent, create_logger


class AreaPrinting(Protocol):
    """Abstraction the composition root depends on for area output."""

    def print(self, shape: AreaCapable) -> None:
        ...


class VolumePrinting(Protocol):
    """Abstraction the composition root depends on for volume output."""

    def print(self, shape: VolumeCapable) -> None:
        ...


def format_value(value: float) -> str:
    """
    Render a measurement the way the console shows it.

    Integral values drop the fractional part (50.0 -> "50", -0.0 -> "-0");
    everything else uses the shortest round-trip representation.

    Args:
        value: Computed area or volume

    Returns:
        Text form of the value
    """
    if isinstance(value, int):
        return str(value)

    # Fraction, Decimal and other Real types render through float
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


class BasePrinter(ABC):
    """
    Abstract base class for measurement printers.

    Subclasses must implement format_line() and expose a typed print().

    Attributes:
        stream: Output sink, or None for the current sys.stdout
        logger: Structured logger instance
    """

    event: LogEvent

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize printer.

        Args:
            stream: Output sink (default: sys.stdout at write time)
            logger: Structured logger (default: "printer" component)
        """
        self.stream = stream
        self.logger = logger or create_logger("printer")
        self._lines_printed = 0

    @abstractmethod
    def format_line(self, shape: Any) -> str:
        """
        Format the output line for a shape.

        Returns:
            Line text without trailing newline
        """
        raise NotImplementedError("Subclasses must implement format_line()")

    def _write_line(self, line: str, label: str) -> None:
        """
        Write one line to the sink.

        Raises:
            OSError: If the sink cannot be written (e.g. broken pipe)
            ValueError: If the sink is closed
        """
        sink = self.stream if self.stream is not None else sys.stdout

        try:
            print(line, file=sink)
        except (OSError, ValueError) as e:
            self.logger.error(
                event=LogEvent.OUTPUT_WRITE_ERROR,
                message="Failed to write line",
                exc_info=e,
                metadata={'shape': label, 'printer': type(self).__name__}
            )
            raise

        self._lines_printed += 1
        self.logger.debug(
            event=self.event,
            message=f"Printed {label}",
            metadata={'line': line, 'lines_printed': self._lines_printed}
        )

    def get_stats(self) -> Dict[str, Any]:
        """
        Get printer statistics.

        Example:
            >>> stats = printer.get_stats()
            >>> print(f"Printed {stats['lines_printed']} lines")
        """
        return {
            'printer': type(self).__name__,
            'lines_printed': self._lines_printed,
        }
