"""Resistor meter: ADC-based resistance measurement, colour-band lookup and SSD1306 drawing."""

__version__ = "0.1.0"

__all__ = ["font", "meter", "resistors", "ssd1306"]