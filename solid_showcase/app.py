"""
Shapes Showcase
===============

Composition root: the only place where concrete shapes and printers are
instantiated. Everything after construction goes through the capability
protocols (AreaCapable, VolumeCapable) and printer abstractions
(AreaPrinting, VolumePrinting).

Flow:
    ShowcaseConfig → build_shapes() → AreaPrinter / VolumePrinter → stdout

Output:
    Rectangle Area: 50
    Circle Area: 153.93804002589985
    Square Area: 16
    Cube Volume: 27
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from solid_geometry import AreaCapable, VolumeCapable, Rectangle, Circle, Square, Cube
from solid_output import (
    AreaPrinter,
    AreaPrinting,
    VolumePrinter,
    VolumePrinting,
    LogEvent,
    StructuredLogger,
    create_logger,
)

from .config import ShowcaseConfig


@dataclass(frozen=True)
class ShowcaseShapes:
    """The four showcase shapes, held by capability."""

    rectangle: AreaCapable
    circle: AreaCapable
    square: AreaCapable
    cube: VolumeCapable


def build_shapes(config: ShowcaseConfig) -> ShowcaseShapes:
    """
    Construct the showcase shapes from configuration.

    Args:
        config: Validated showcase configuration

    Returns:
        ShowcaseShapes with each shape typed by its capability
    """
    return ShowcaseShapes(
        rectangle=Rectangle(config.rectangle_length, config.rectangle_width),
        circle=Circle(config.circle_radius),
        square=Square(config.square_side),
        cube=Cube(config.cube_side),
    )


def run_showcase(
    config: Optional[ShowcaseConfig] = None,
    area_printer: Optional[AreaPrinting] = None,
    volume_printer: Optional[VolumePrinting] = None,
    logger: Optional[StructuredLogger] = None
) -> None:
    """
    Print the fixed shape sequence: Rectangle, Circle, Square, then Cube.

    Args:
        config: Showcase configuration (default: ShowcaseConfig())
        area_printer: Area output (default: AreaPrinter on stdout)
        volume_printer: Volume output (default: VolumePrinter on stdout)
        logger: Structured logger for lifecycle events

    Raises:
        OSError: If stdout cannot be written
    """
    config = config or ShowcaseConfig()
    logger = logger or create_logger("showcase", level=config.log_level)

    shapes = build_shapes(config)

    if area_printer is None:
        area_printer = AreaPrinter(logger=create_logger("printer", level=config.log_level))
    if volume_printer is None:
        volume_printer = VolumePrinter(logger=create_logger("printer", level=config.log_level))

    logger.debug(
        event=LogEvent.SHOWCASE_STARTED,
        message="Printing showcase shapes",
        metadata={'shapes': 4}
    )

    area_printer.print(shapes.rectangle)
    area_printer.print(shapes.circle)
    area_printer.print(shapes.square)

    volume_printer.print(shapes.cube)

    logger.debug(
        event=LogEvent.SHOWCASE_COMPLETED,
        message="Showcase completed",
    )


def main(config_factory: Callable[[], ShowcaseConfig] = ShowcaseConfig) -> None:
    """
    Main entry point. Reads no arguments, flags or environment.

    Args:
        config_factory: Builds the showcase configuration (default: ShowcaseConfig)

    Raises:
        TypeError, ValueError: If the configuration is rejected
    """
    logger = create_logger("showcase", level=logging.WARNING)

    try:
        config = config_factory()
    except (TypeError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_INVALID,
            message="Invalid showcase configuration",
            exc_info=e
        )
        raise

    logger.set_level(config.log_level)
    run_showcase(config, logger=logger)
