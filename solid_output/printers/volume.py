"""
Volume Printer
==============

Prints "<label> Volume: <value>" for solid shapes.
"""

from solid_geometry import VolumeCapable
from .base import BasePrinter, format_value
from ..logging import LogEvent


class VolumePrinter(BasePrinter):
    """Printer for volume-capable shapes."""

    event = LogEvent.VOLUME_PRINTED

    def format_line(self, shape: VolumeCapable) -> str:
        return f"{shape.label} Volume: {format_value(shape.volume())}"

    def print(self, shape: VolumeCapable) -> None:
        """Write the volume line for a shape."""
        self._write_line(self.format_line(shape), shape.label)
