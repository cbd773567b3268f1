"""Resistance meter: ADC sampling, correction, colour lookup and display."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, replace
from typing import Callable

from .resistors import Resistor, find_resistor
from .ssd1306 import SSD1306

REFERENCE_OHMS = 47000
ADC_RESOLUTION = 4095
SAMPLES = 500
SAMPLE_PAUSE = 0.001
INTERVAL = 0.7

MIN_OHMS = 485.0
MAX_OHMS = 105000.0

# (upper bound of the raw reading, correction factor), checked in order.
_CORRECTIONS: tuple[tuple[float, float], ...] = (
    (800.0, 0.70),
    (900.0, 0.75),
    (1500.0, 0.82),
    (2500.0, 0.88),
    (8000.0, 0.93),
    (50000.0, 1.02),
    (math.inf, 1.10),
)

Reader = Callable[[], float]


@dataclass(frozen=True)
class Measurement:
    """One reading of the meter.

    ``value`` is the corrected resistance; it is 0.0 for a reading that is
    out of range, unless a caller carries an earlier value over.
    """

    mean: float
    raw: float
    value: float
    out_of_range: bool
    resistor: Resistor | None


def average_adc(
    read: Reader, samples: int = SAMPLES, pause: float = SAMPLE_PAUSE
) -> float:
    """Take ``samples`` readings, pausing between them, and return their mean."""
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    total = 0.0
    for _ in range(samples):
        total += read()
        time.sleep(pause)
    return total / samples


def raw_resistance(
    mean: float, reference: float = REFERENCE_OHMS, resolution: float = ADC_RESOLUTION
) -> float:
    """Resistance of the unknown divider leg from the mean ADC reading."""
    denominator = resolution - mean
    if denominator == 0:
        return math.inf
    return reference * mean / denominator


def correct_resistance(raw: float) -> float | None:
    """Apply the range-dependent correction, or return None when out of range."""
    if raw < MIN_OHMS or raw > MAX_OHMS:
        return None
    for bound, factor in _CORRECTIONS:
        if raw < bound:
            return raw * factor
    return raw * _CORRECTIONS[-1][1]


def measure(
    read: Reader, samples: int = SAMPLES, pause: float = SAMPLE_PAUSE
) -> Measurement:
    """Sample the ADC and work out the resistance and its nearest colour code."""
    mean = average_adc(read, samples, pause)
    raw = raw_resistance(mean)
    corrected = correct_resistance(raw)
    if corrected is None:
        return Measurement(mean, raw, 0.0, True, None)
    return Measurement(mean, raw, corrected, False, find_resistor(corrected))


def draw_frame(display: SSD1306, color: bool = True) -> None:
    """Clear the screen and draw the border and separating lines."""
    display.fill(not color)
    display.rect(3, 3, 122, 60, color, not color)
    display.line(3, 25, 123, 25, color)
    display.line(3, 37, 123, 37, color)
    display.line(44, 37, 44, 60, color)


def draw_labels(display: SSD1306) -> None:
    """Draw the fixed captions."""
    display.draw_string("ADC", 13, 41)
    display.draw_string("Resisten.", 50, 41)


def draw_colors(display: SSD1306, resistor: Resistor) -> None:
    """Draw the three colour bands of a resistor."""
    display.draw_string(resistor.color1, 8, 6)
    display.draw_string(resistor.color2, 8, 16)
    display.draw_string(resistor.multiplier, 8, 28)


def draw_out_of_range(display: SSD1306) -> None:
    """Draw the out-of-range message."""
    display.draw_string("Fora da escala", 8, 6)
    display.draw_string("Tolerancia", 23, 16)
    display.draw_string("Ouro", 45, 28)


def draw_values(display: SSD1306, mean_text: str, value_text: str) -> None:
    """Draw the mean ADC reading and the resistance."""
    display.draw_string(mean_text, 8, 52)
    display.draw_string(value_text, 59, 52)


def render(display: SSD1306, measurement: Measurement, color: bool = True) -> None:
    """Draw a complete screen for a measurement into the frame buffer."""
    draw_frame(display, color)
    draw_labels(display)
    if measurement.out_of_range:
        draw_out_of_range(display)
    elif measurement.resistor is not None:
        draw_colors(display, measurement.resistor)
    draw_values(display, f"{measurement.mean:.0f}", f"{measurement.value:.0f}")


def run(
    display: SSD1306,
    read: Reader,
    cycles: int | None = None,
    interval: float = INTERVAL,
) -> Measurement | None:
    """Configure the display and measure repeatedly.

    Runs forever when ``cycles`` is None. An out-of-range reading keeps the
    last in-range resistance on screen. Returns the last measurement shown.
    """
    if cycles is not None and cycles < 0:
        raise ValueError(f"cycles must not be negative, got {cycles}")
    display.config()
    display.fill(False)
    display.send_data()

    last_value = 0.0
    shown: Measurement | None = None
    done = 0
    while cycles is None or done < cycles:
        measurement = measure(read)
        if measurement.out_of_range:
            measurement = replace(measurement, value=last_value)
        else:
            last_value = measurement.value
        render(display, measurement, True)
        display.send_data()
        shown = measurement
        done += 1
        time.sleep(interval)
    return shown