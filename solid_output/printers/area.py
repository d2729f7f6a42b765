"""
Area Printer
============

Prints "<label> Area: <value>" for flat shapes.

Example:
    >>> from solid_geometry import Rectangle
    >>> AreaPrinter().print(Rectangle(5, 10))
    Rectangle Area: 50
"""

from solid_geometry import AreaCapable
from .base import BasePrinter, format_value
from ..logging import LogEvent


class AreaPrinter(BasePrinter):
    """
    Printer for area-capable shapes.

    SRP: knows how to render an area line, nothing about volumes.
    """

    event = LogEvent.AREA_PRINTED

    def format_line(self, shape: AreaCapable) -> str:
        return f"{shape.label} Area: {format_value(shape.area())}"

    def print(self, shape: AreaCapable) -> None:
        """Write the area line for a shape."""
        self._write_line(self.format_line(shape), shape.label)
