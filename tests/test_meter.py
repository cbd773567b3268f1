import itertools
import math
from unittest.mock import patch

import pytest

from resistencia.meter import (
    Measurement,
    average_adc,
    correct_resistance,
    draw_colors,
    draw_frame,
    draw_labels,
    draw_out_of_range,
    draw_values,
    measure,
    raw_resistance,
    render,
    run,
)
from resistencia.resistors import RESISTORS
from resistencia.ssd1306 import SSD1306


def _display():
    writes = []
    display = SSD1306(lambda address, data: writes.append((address, data)))
    return display, writes


def _alternating(values):
    cycle = itertools.cycle(values)
    return lambda: next(cycle)


@patch("time.sleep")
def test_average_of_constant_reads(_sleep):
    assert average_adc(lambda: 1234, samples=10, pause=0) == 1234


@patch("time.sleep")
def test_average_of_alternating_reads(_sleep):
    assert average_adc(_alternating([100, 300]), samples=4, pause=0) == 200


@patch("time.sleep")
def test_average_pauses_once_per_sample(sleep):
    result = average_adc(lambda: 1, samples=7, pause=0.5)
    assert result == 1
    assert sleep.call_count == 7


def test_average_rejects_no_samples():
    with pytest.raises(ValueError):
        average_adc(lambda: 1, samples=0)


def test_raw_resistance_midpoint_equals_reference():
    assert raw_resistance(4095 / 2) == pytest.approx(47000)


def test_raw_resistance_zero_reading():
    assert raw_resistance(0) == 0


def test_raw_resistance_full_scale_is_infinite():
    assert raw_resistance(4095) == math.inf


def test_raw_resistance_custom_reference():
    assert raw_resistance(50, reference=10, resolution=100) == pytest.approx(10)


@pytest.mark.parametrize(
    "raw, factor",
    [
        (485.0, 0.70),
        (500.0, 0.70),
        (850.0, 0.75),
        (1000.0, 0.82),
        (2000.0, 0.88),
        (5000.0, 0.93),
        (10000.0, 1.02),
        (60000.0, 1.10),
        (105000.0, 1.10),
    ],
)
def test_correction_factors(raw, factor):
    assert correct_resistance(raw) / raw == pytest.approx(factor)


@pytest.mark.parametrize("raw", [0.0, 484.9, 105000.1, math.inf, -10.0])
def test_correction_out_of_range(raw):
    assert correct_resistance(raw) is None


@patch("time.sleep")
def test_measure_in_range_finds_resistor(_sleep):
    result = measure(_alternating([2047, 2048]), samples=500, pause=0)
    assert result.mean == pytest.approx(2047.5)
    assert result.raw == pytest.approx(47000)
    assert not result.out_of_range
    assert result.value == pytest.approx(correct_resistance(result.raw))
    assert result.resistor is not None
    assert result.resistor.value == 47000


@patch("time.sleep")
def test_measure_out_of_range(_sleep):
    result = measure(lambda: 0, samples=5, pause=0)
    assert result.out_of_range
    assert result.resistor is None
    assert result.value == 0.0


def test_draw_frame_lit():
    display, _ = _display()
    draw_frame(display, True)
    assert display.get_pixel(3, 3)
    assert display.get_pixel(124, 62)
    assert display.get_pixel(60, 25)
    assert display.get_pixel(60, 37)
    assert display.get_pixel(44, 50)
    assert not display.get_pixel(0, 0)
    assert not display.get_pixel(60, 10)


def test_draw_frame_inverted():
    display, _ = _display()
    draw_frame(display, False)
    assert display.get_pixel(0, 0)
    assert not display.get_pixel(3, 3)
    assert not display.get_pixel(60, 10)


def test_draw_labels_marks_pixels():
    display, _ = _display()
    draw_labels(display)
    assert any(display.get_pixel(x, y) for x in range(13, 37) for y in range(41, 49))
    assert any(display.get_pixel(x, y) for x in range(50, 122) for y in range(41, 49))
    assert not any(display.get_pixel(x, y) for x in range(128) for y in range(0, 40))


def test_colors_and_out_of_range_differ():
    first, _ = _display()
    second, _ = _display()
    draw_colors(first, RESISTORS[0])
    draw_out_of_range(second)
    assert first.buffer != second.buffer
    assert any(first.get_pixel(x, y) for x in range(8, 60) for y in range(6, 14))


def test_draw_values_in_bottom_row():
    display, _ = _display()
    draw_values(display, "12", "34")
    assert any(display.get_pixel(x, y) for x in range(8, 24) for y in range(52, 60))
    assert any(display.get_pixel(x, y) for x in range(59, 75) for y in range(52, 60))
    assert not any(display.get_pixel(x, y) for x in range(128) for y in range(0, 50))


def test_render_depends_on_range():
    in_range = Measurement(2047.5, 47000.0, 47940.0, False, RESISTORS[8])
    out_of_range = Measurement(0.0, 0.0, 0.0, True, None)
    first, _ = _display()
    second, _ = _display()
    render(first, in_range)
    render(second, out_of_range)
    assert first.buffer != second.buffer
    assert first.get_pixel(3, 3)


def test_render_matches_its_parts():
    measurement = Measurement(10.0, 20.0, 30.0, True, None)
    whole, _ = _display()
    parts, _ = _display()
    render(whole, measurement, True)
    draw_frame(parts, True)
    draw_labels(parts)
    draw_out_of_range(parts)
    draw_values(parts, "10", "30")
    assert whole.buffer == parts.buffer


@patch("time.sleep")
def test_run_sends_frames(_sleep):
    display, writes = _display()
    result = run(display, _alternating([2047, 2048]), cycles=2, interval=0)
    frames = [data for _, data in writes if len(data) == 1025]
    assert len(frames) == 3
    assert all(frame[0] == 0x40 for frame in frames)
    assert all(address == 0x3C for address, _ in writes)
    assert result.resistor.value == 47000


@patch("time.sleep")
def test_run_keeps_last_value_when_out_of_range(_sleep):
    reads = iter([2047, 2048] * 250 + [0] * 500)
    display, _ = _display()
    result = run(display, lambda: next(reads), cycles=2, interval=0)
    assert result.out_of_range
    assert result.resistor is None
    assert result.value == pytest.approx(correct_resistance(raw_resistance(2047.5)))


@patch("time.sleep")
def test_run_zero_cycles(_sleep):
    display, writes = _display()
    assert run(display, lambda: 0, cycles=0) is None
    assert writes[-1][1] == bytes([0x40] + [0] * 1024)


def test_run_rejects_negative_cycles():
    display, _ = _display()
    with pytest.raises(ValueError):
        run(display, lambda: 0, cycles=-1)