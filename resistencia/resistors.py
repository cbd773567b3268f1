"""Standard resistor values and their colour bands."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resistor:
    """A resistor value with its first two bands and multiplier band."""

    value: int
    color1: str
    color2: str
    multiplier: str


RESISTORS: tuple[Resistor, ...] = (
    Resistor(510, "Verde", "Marrom", "Marrom"),
    Resistor(680, "Azul", "Cinza", "Marrom"),
    Resistor(1000, "Marrom", "Preto", "Vermelho"),
    Resistor(2200, "Vermelho", "Vermelho", "Vermelho"),
    Resistor(3300, "Laranja", "Laranja", "Vermelho"),
    Resistor(4700, "Amarelo", "Violeta", "Vermelho"),
    Resistor(6800, "Azul", "Cinza", "Vermelho"),
    Resistor(10000, "Marrom", "Preto", "Laranja"),
    Resistor(47000, "Amarelo", "Violeta", "Laranja"),
    Resistor(68000, "Azul", "Cinza", "Laranja"),
    Resistor(100000, "Marrom", "Preto", "Amarelo"),
)

_MAX_DIFFERENCE = 1e6


def find_resistor(value: float) -> Resistor | None:
    """Return the listed resistor closest to ``value``.

    Ties go to the earlier (smaller) entry. Returns ``None`` when no entry
    lies closer than one megaohm.
    """
    best: Resistor | None = None
    smallest = _MAX_DIFFERENCE
    for resistor in RESISTORS:
        difference = abs(resistor.value - value)
        if difference < smallest:
            smallest = difference
            best = resistor
    return best