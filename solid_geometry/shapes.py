"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Each shape carries a fixed `label` used for display (no reflection)
- Square is NOT a Rectangle subtype: a shared "set both sides" mutation
  would break substitutability wherever an area shape is expected
- Measurements are taken as given; no bounds validation happens here
  (a zero or negative measurement gives a zero or negative result)
"""

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable rectangle.

    Attributes:
        length: Length of the rectangle
        width: Width of the rectangle
    """

    label: ClassVar[str] = "Rectangle"

    length: float
    width: float

    def area(self) -> float:
        """
        Compute area as length × width.

        Returns:
            Rectangle area
        """
        return self.length * self.width


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle.

    Attributes:
        radius: Circle radius
    """

    label: ClassVar[str] = "Circle"

    radius: float

    def area(self) -> float:
        """
        Compute area as π × r × r.

        Multiplication order is fixed so Circle(7) yields 153.93804002589985.
        """
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Square:
    """Immutable square with a single side measurement."""

    label: ClassVar[str] = "Square"

    side: float

    def area(self) -> float:
        return self.side * self.side


@dataclass(frozen=True)
class Cube:
    """
    Immutable cube.

    Solid shape: exposes volume() only, never area().

    Attributes:
        side: Edge length
    """

    label: ClassVar[str] = "Cube"

    side: float

    def volume(self) -> float:
        """Compute volume as side³."""
        return self.side * self.side * self.side
