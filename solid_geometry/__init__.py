"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and their derived measurements.

Responsibilities:
- Shape representation (immutable value objects)
- Area for flat shapes, volume for solid shapes
- NO printing, NO logging, NO configuration

Design Philosophy:
- Capabilities are narrow protocols (one computation each)
- A shape belongs to exactly one capability family
- Square is its own type, not a Rectangle
- Zero side effects
"""

from solid_geometry.capabilities import AreaCapable, VolumeCapable
from solid_geometry.shapes import Rectangle, Circle, Square, Cube

__all__ = [
    "AreaCapable",
    "VolumeCapable",
    "Rectangle",
    "Circle",
    "Square",
    "Cube",
]
