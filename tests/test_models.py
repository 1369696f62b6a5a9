import numpy as np
import pytest

from ascii_art_generator.constants import DEFAULT_RAMP
from ascii_art_generator.models import BrightnessMap, GeneratorConfig


def test_height_is_derived_from_value_count():
    assert BrightnessMap(width=3, values=np.zeros(12)).height == 4


@pytest.mark.parametrize("width, count", [(0, 0), (-1, 4), (3, 10)])
def test_invalid_shapes_are_rejected(width, count):
    with pytest.raises(ValueError):
        BrightnessMap(width=width, values=np.zeros(count))


def test_values_are_read_only():
    brightness = BrightnessMap(width=2, values=[0.0, 1.0])
    with pytest.raises(ValueError):
        brightness.values[0] = 0.5


def test_two_character_ramp():
    brightness = BrightnessMap(width=4, values=[0.0, 0.33, 0.66, 1.0, 0.0, 1.0, 0.0, 1.0])
    assert brightness.as_string("AB") == "AAAB\nABAB\n"


def test_extremes_map_to_first_and_last_character():
    brightness = BrightnessMap(width=2, values=[0.0, 1.0])
    assert brightness.lines(DEFAULT_RAMP) == ["@ "]
    assert brightness.lines("0123456789") == ["09"]


def test_quantization_floors_the_scaled_value():
    brightness = BrightnessMap(width=5, values=[0.0, 0.24, 0.25, 0.74, 0.75])
    assert brightness.lines("abcde") == ["aabcd"]


def test_every_character_comes_from_the_ramp():
    rng = np.random.default_rng(7)
    brightness = BrightnessMap(width=13, values=rng.random(13 * 9))

    text = brightness.as_string(DEFAULT_RAMP)
    lines = text.split("\n")

    assert text.count("\n") == 9
    assert lines[-1] == ""
    assert all(len(line) == 13 for line in lines[:-1])
    assert set(text) - {"\n"} <= set(DEFAULT_RAMP)
    assert len(text) - 9 == 13 * 9


def test_single_character_ramp():
    assert BrightnessMap(width=3, values=[0.0, 0.5, 1.0]).as_string("#") == "###\n"


def test_empty_ramp_is_rejected():
    with pytest.raises(ValueError):
        BrightnessMap(width=1, values=[0.5]).as_string("")


@pytest.mark.parametrize("max_width, max_height, expected", [
    (None, None, False),
    (-1, None, False),
    (-1, -1, False),
    (0, None, True),
    (None, 10, True),
    (80, 40, True),
])
def test_scaling_requested(max_width, max_height, expected):
    config = GeneratorConfig(max_width=max_width, max_height=max_height)
    assert config.scaling_requested is expected
