"""
Printer Tests
=============

Line format, sink handling and statistics for AreaPrinter / VolumePrinter.

Usage:
    pytest test_printers.py
"""

import io
import json
import logging
from decimal import Decimal
from fractions import Fraction

import pytest

from solid_geometry import Rectangle, Circle, Square, Cube
from solid_output import (
    AreaPrinter,
    VolumePrinter,
    LogEvent,
    StructuredLogger,
    format_value,
)


def _test_logger(name: str, level: int = logging.DEBUG) -> StructuredLogger:
    return StructuredLogger(
        component="printer",
        level=level,
        logger_name=f"solid_output.tests.{name}",
    )


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Rectangle(5, 10), "Rectangle Area: 50"),
        (Circle(7), "Circle Area: 153.93804002589985"),
        (Square(4), "Square Area: 16"),
    ],
)
def test_area_printer_writes_one_line(shape, expected):
    buffer = io.StringIO()

    AreaPrinter(stream=buffer).print(shape)

    assert buffer.getvalue() == expected + "\n"


def test_volume_printer_writes_one_line():
    buffer = io.StringIO()

    VolumePrinter(stream=buffer).print(Cube(3))

    assert buffer.getvalue() == "Cube Volume: 27\n"


def test_printers_default_to_stdout(capsys):
    AreaPrinter().print(Rectangle(5, 10))
    VolumePrinter().print(Cube(3))

    captured = capsys.readouterr()
    assert captured.out == "Rectangle Area: 50\nCube Volume: 27\n"


def test_float_dimensions_render_without_trailing_zero():
    buffer = io.StringIO()

    AreaPrinter(stream=buffer).print(Rectangle(5.0, 10.0))
    AreaPrinter(stream=buffer).print(Rectangle(1.5, 3))

    assert buffer.getvalue().splitlines() == [
        "Rectangle Area: 50",
        "Rectangle Area: 4.5",
    ]


@pytest.mark.parametrize(
    "value, expected",
    [
        (50, "50"),
        (50.0, "50"),
        (-6, "-6"),
        (4.5, "4.5"),
        (153.93804002589985, "153.93804002589985"),
        (1e20, "1e+20"),
        (float("inf"), "inf"),
        (-0.0, "-0"),
        (0.0, "0"),
        (Fraction(50), "50"),
        (Fraction(9, 2), "4.5"),
        (Decimal("16"), "16"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_fraction_dimensions_print_like_floats():
    buffer = io.StringIO()

    AreaPrinter(stream=buffer).print(Rectangle(Fraction(5), Fraction(10)))
    AreaPrinter(stream=buffer).print(Rectangle(-0.0, 5))

    assert buffer.getvalue().splitlines() == [
        "Rectangle Area: 50",
        "Rectangle Area: -0",
    ]


def test_format_line_does_not_write():
    buffer = io.StringIO()
    printer = AreaPrinter(stream=buffer)

    assert printer.format_line(Square(4)) == "Square Area: 16"
    assert buffer.getvalue() == ""
    assert printer.get_stats()['lines_printed'] == 0


def test_stats_count_printed_lines():
    buffer = io.StringIO()
    printer = AreaPrinter(stream=buffer)

    printer.print(Rectangle(5, 10))
    printer.print(Circle(7))
    printer.print(Square(4))

    assert printer.get_stats() == {'printer': 'AreaPrinter', 'lines_printed': 3}
    assert VolumePrinter(stream=buffer).get_stats()['lines_printed'] == 0


def test_printed_line_is_logged_at_debug(caplog):
    logger = _test_logger("debug_events")
    printer = VolumePrinter(stream=io.StringIO(), logger=logger)

    printer.print(Cube(3))

    records = [r for r in caplog.records if r.name == logger.logger_name]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG

    entry = json.loads(records[0].getMessage())
    assert entry['event'] == LogEvent.VOLUME_PRINTED.value
    assert entry['metadata'] == {'line': 'Cube Volume: 27', 'lines_printed': 1}


def test_closed_stream_error_propagates(caplog):
    logger = _test_logger("closed_stream", level=logging.ERROR)
    buffer = io.StringIO()
    buffer.close()
    printer = AreaPrinter(stream=buffer, logger=logger)

    with pytest.raises(ValueError):
        printer.print(Rectangle(5, 10))

    assert printer.get_stats()['lines_printed'] == 0

    records = [r for r in caplog.records if r.name == logger.logger_name]
    assert len(records) == 1
    entry = json.loads(records[0].getMessage())
    assert entry['event'] == LogEvent.OUTPUT_WRITE_ERROR.value
    assert entry['metadata'] == {'shape': 'Rectangle', 'printer': 'AreaPrinter'}
    assert entry['exception']['type'] == 'ValueError'


class _BrokenPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError("pipe closed")


def test_broken_pipe_propagates():
    printer = VolumePrinter(stream=_BrokenPipe(), logger=_test_logger("broken_pipe"))

    with pytest.raises(BrokenPipeError):
        printer.print(Cube(3))

