# resistencia

A small resistor meter library. It turns the readings of an analogue-to-digital
converter into a resistance value, looks up the nearest resistor in a built-in
table together with its colour bands, and draws the result into the frame
buffer of a 128×64 SSD1306 OLED display.

The package holds no hardware code. You supply two callables: one that returns
a raw ADC sample, and one that sends the display's I2C transfers. Real hardware
or test fakes can be driven the same way.

## Modules

- `resistencia.meter`: sampling, resistance calculation, screen layout and the
  measurement loop.
- `resistencia.resistors`: the `Resistor` table and `find_resistor`.
- `resistencia.ssd1306`: the `SSD1306` frame buffer and command driver, and the
  `Command` opcodes.
- `resistencia.font`: the 8×8 font used for text.

## How the measurement works

The unknown resistor sits in a voltage divider with a 47 kΩ reference
resistor (`REFERENCE_OHMS`), read by a 12-bit ADC with full scale 4095
(`ADC_RESOLUTION`).

1. `average_adc(read, samples=500, pause=0.001)` calls `read()` `samples`
   times, sleeping `pause` seconds after each call, and returns the mean.
   `samples` must be positive, otherwise `ValueError` is raised.
2. `raw_resistance(mean, reference=47000, resolution=4095)` solves the divider:
   `reference * mean / (resolution - mean)`. A mean equal to the resolution
   gives `math.inf`.
3. `correct_resistance(raw)` multiplies the raw value by a range-dependent
   factor (0.70 below 800 Ω, 0.75 below 900 Ω, 0.82 below 1500 Ω, 0.88 below
   2500 Ω, 0.93 below 8000 Ω, 1.02 below 50 kΩ, 1.10 above). Values below
   485 Ω or above 105 kΩ are out of range and give `None`.
4. `find_resistor(value)` returns the `Resistor` from `RESISTORS` (510 Ω to
   100 kΩ) whose value is nearest; a tie goes to the smaller entry, and
   `None` is returned if no entry is within 1 MΩ. A `Resistor` has `value`,
   `color1`, `color2` and `multiplier`, with colour names in Portuguese
   ("Marrom", "Vermelho", ...).

`measure(read, samples=500, pause=0.001)` does all of these steps and returns
a frozen `Measurement` with `mean`, `raw`, `value`, `out_of_range` and
`resistor`. For an out-of-range reading `value` is `0.0` and `resistor` is
`None`.

## Drawing on the display

`SSD1306(write, width=128, height=64, address=0x3C, external_vcc=False)` keeps
a page-ordered frame buffer. `write` is called as `write(address, data)` for
every I2C transfer, with `data` as `bytes`. Drawing operations are `pixel`,
`get_pixel`, `fill`, `rect`, `line`, `hline`, `vline`, `draw_char` and
`draw_string`; pixels outside the display are ignored. `draw_string` wraps to
the next text row near the right edge and stops near the bottom. The
`buffer` property returns the data transfer, prefix byte included.

`config()` sends the power-up command sequence, `command(value)` sends a single
command byte, and `send_data()` sets the full address window and sends the
frame buffer.

Text uses the built-in 8×8 font: `glyph(char)` returns the eight column bytes
of one character, draws characters outside printable ASCII as a blank, and
raises `ValueError` for anything that is not a single character.

```python
from resistencia.meter import measure, render, run
from resistencia.ssd1306 import SSD1306

display = SSD1306(write=my_i2c_write)
display.config()

# One measurement, drawn and sent by hand
measurement = measure(my_adc_read, samples=500, pause=0.001)
render(display, measurement, True)
display.send_data()

# Or let the meter loop: configure, then measure, draw, send and wait
last = run(display, my_adc_read, cycles=10, interval=0.7)
```

`run(display, read, cycles=None, interval=0.7)` configures and clears the
display, then measures, renders and sends the screen once per cycle, sleeping
`interval` seconds in between. With `cycles=None` it runs forever; a negative
`cycles` raises `ValueError`. An out-of-range reading keeps the last in-range
resistance on screen. It returns the last measurement shown.

The screen is a frame with the colour bands of the nearest resistor at the top
(or "Fora da escala" / "Tolerancia" / "Ouro" when out of range), the captions
"ADC" and "Resisten.", and at the bottom the mean ADC reading next to the
resistance, both rounded to whole numbers. `draw_frame`, `draw_labels`,
`draw_colors`, `draw_out_of_range` and `draw_values` draw each part on its own.

## What it does not do

The package has no command-line program and talks to no hardware itself:
reading the ADC and performing the I2C writes are up to the callables you pass
in.

## Tests

The test suite uses pytest and needs no hardware:

```
pip install .[test]
pytest
```