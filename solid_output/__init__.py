"""
Solid Output
============

Bounded Context: Rendering shape measurements to a console.

This package provides:
1. Printers: one line per shape on standard output
2. Printer abstractions: AreaPrinting, VolumePrinting (dependency inversion)
3. Logging: Structured JSON logging on stderr

Example:
    >>> from solid_geometry import Rectangle, Cube
    >>> from solid_output import AreaPrinter, VolumePrinter
    >>>
    >>> AreaPrinter().print(Rectangle(5, 10))
    Rectangle Area: 50
    >>> VolumePrinter().print(Cube(3))
    Cube Volume: 27
"""

# Version
__version__ = "1.0.0"

# Printers
from .printers import (
    AreaPrinting,
    VolumePrinting,
    BasePrinter,
    AreaPrinter,
    VolumePrinter,
    format_value,
)

# Logging
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    # Version
    '__version__',
    # Printers
    'AreaPrinting',
    'VolumePrinting',
    'BasePrinter',
    'AreaPrinter',
    'VolumePrinter',
    'format_value',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
