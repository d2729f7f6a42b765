"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (component.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: printer, showcase, error
    category: area, volume
    action: printed, started, completed
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - printer.*: A measurement line was written
    - showcase.*: Composition root lifecycle
    - error.*: Error conditions
    """

    # ========== Printer Events ==========
    AREA_PRINTED = "printer.area.printed"
    """Area line written to the output sink."""

    VOLUME_PRINTED = "printer.volume.printed"
    """Volume line written to the output sink."""

    # ========== Showcase Events ==========
    SHOWCASE_STARTED = "showcase.started"
    """Shapes and printers wired, printing about to start."""

    SHOWCASE_COMPLETED = "showcase.completed"
    """All shapes printed."""

    # ========== Error Events ==========
    CONFIG_INVALID = "error.config_invalid"
    """Showcase configuration rejected."""

    OUTPUT_WRITE_ERROR = "error.output_write"
    """Writing to the output sink failed."""


# Event categories for filtering
PRINTER_EVENTS = {
    LogEvent.AREA_PRINTED,
    LogEvent.VOLUME_PRINTED,
}

SHOWCASE_EVENTS = {
    LogEvent.SHOWCASE_STARTED,
    LogEvent.SHOWCASE_COMPLETED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_INVALID,
    LogEvent.OUTPUT_WRITE_ERROR,
}
