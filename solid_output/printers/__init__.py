"""
Printers
========

Measurement printers for area and volume shapes.
"""

from .base import AreaPrinting, VolumePrinting, BasePrinter, format_value
from .area import AreaPrinter
from .volume import VolumePrinter

__all__ = [
    'AreaPrinting',
    'VolumePrinting',
    'BasePrinter',
    'format_value',
    'AreaPrinter',
    'VolumePrinter',
]
