import numpy as np
import pytest
from PIL import Image

from ascii_art_generator.brightness import extract_brightness, lightness


@pytest.mark.parametrize("pixel, expected", [
    ((0, 0, 0, 255), 0.0),
    ((255, 255, 255, 255), 1.0),
    ((255, 0, 0, 255), 0.5),
    ((100, 50, 200, 10), 250 / 510),
    ((0, 0, 0, 0), 1.0),
    ((90, 90, 90, 0), 1.0),
])
def test_lightness(pixel, expected):
    value = lightness(np.array([pixel], dtype=np.uint8))
    assert value[0] == pytest.approx(expected, abs=1e-6)


def test_map_is_row_major():
    image = Image.new('RGBA', (3, 2))
    for y in range(2):
        for x in range(3):
            level = 40 * (y * 3 + x)
            image.putpixel((x, y), (level, level, level, 255))

    brightness = extract_brightness(image)

    assert brightness.width == 3
    assert brightness.height == 2
    expected = [40 * i / 255 for i in range(6)]
    assert brightness.values.tolist() == pytest.approx(expected, abs=1e-6)


def test_rgb_image_is_accepted():
    brightness = extract_brightness(Image.new('RGB', (2, 2), (255, 255, 255)))
    assert brightness.values.tolist() == [1.0] * 4


def test_progress_is_reported_every_interval_rows():
    image = Image.new('RGBA', (2, 45), (30, 60, 90, 255))
    calls = []

    with_progress = extract_brightness(image, lambda row, height: calls.append((row, height)))
    without = extract_brightness(image)

    assert calls == [(0, 45), (20, 45), (40, 45)]
    assert np.array_equal(with_progress.values, without.values)


def test_progress_interval_is_configurable():
    calls = []
    extract_brightness(Image.new('RGBA', (1, 5)), lambda row, height: calls.append(row), interval=2)
    assert calls == [0, 2, 4]
