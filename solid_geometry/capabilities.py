"""
Shape Capabilities
==================

Narrow structural contracts for shapes.

Design:
- ISP: flat shapes expose area(), solid shapes expose volume(), never both
- Protocols, not base classes (no inheritance needed to conform)
- runtime_checkable so composition code can assert the family it received
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AreaCapable(Protocol):
    """Protocol for shapes with an area (interface)."""

    label: str

    def area(self) -> float:
        """Compute the area. Pure and idempotent."""
        ...


@runtime_checkable
class VolumeCapable(Protocol):
    """Protocol for shapes with a volume (interface)."""

    label: str

    def volume(self) -> float:
        """Compute the volume. Pure and idempotent."""
        ...
