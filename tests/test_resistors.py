import pytest

from resistencia.resistors import RESISTORS, Resistor, find_resistor


def test_exact_match_returns_colors():
    found = find_resistor(1000)
    assert found == Resistor(1000, "Marrom", "Preto", "Vermelho")


def test_closest_value_is_chosen():
    assert find_resistor(600).value == 680


def test_tie_prefers_first_entry():
    assert find_resistor(595).value == 510


def test_large_values_snap_to_largest():
    assert find_resistor(150000).value == 100000


def test_far_away_value_has_no_match():
    assert find_resistor(2_000_000) is None


@pytest.mark.parametrize("resistor", RESISTORS)
def test_every_entry_finds_itself(resistor):
    assert find_resistor(float(resistor.value)) is resistor


def test_matches_grow_with_the_value():
    matches = [find_resistor(value).value for value in range(0, 150001, 250)]
    assert matches == sorted(matches)
    assert matches[0] == 510
    assert matches[-1] == 100000


def test_resistor_is_immutable():
    found = find_resistor(1000)
    with pytest.raises(AttributeError):
        found.value = 1
    assert find_resistor(1000).value == 1000