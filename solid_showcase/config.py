"""
Configuration schema for the shapes showcase.

The showcase takes no external input: every measurement below is fixed in
code. The dataclass only gathers those constants in one place and checks
them before any shape is built.
"""

import logging
from dataclasses import dataclass, fields
from numbers import Real


@dataclass(frozen=True)
class ShowcaseConfig:
    """
    Fixed measurements for the four showcase shapes.

    Shapes themselves accept any measurement; the check for positive
    values lives here, at the composition root.
    """

    rectangle_length: float = 5
    rectangle_width: float = 10
    circle_radius: float = 7
    square_side: float = 4
    cube_side: float = 3
    log_level: int = logging.WARNING

    def __post_init__(self):
        """Validate showcase configuration."""
        for f in fields(self):
            if f.name == "log_level":
                continue

            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"{f.name} must be a real number, got {type(value).__name__}"
                )
            if not value > 0:
                raise ValueError(f"{f.name} must be > 0, got {value}")

        if not isinstance(self.log_level, int):
            raise TypeError(
                f"log_level must be a logging level int, got {type(self.log_level).__name__}"
            )
