[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resistencia"
version = "0.1.0"
description = "Resistor meter: voltage-divider ADC readings, colour-band lookup and an SSD1306 OLED frame buffer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "resistor",
    "ohmmeter",
    "color code",
    "adc",
    "voltage divider",
    "ssd1306",
    "oled",
    "framebuffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["resistencia"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
