import pytest
from PIL import Image

from ascii_art_generator.errors import ScaleError
from ascii_art_generator.scaler import scale


def make(width, height):
    return Image.new('RGBA', (width, height), (10, 20, 30, 255))


@pytest.mark.parametrize("max_width, max_height", [
    (None, None),
    (-1, -1),
    (200, 200),
    (100, 50),
])
def test_scale_keeps_size_when_image_fits(max_width, max_height):
    image = make(100, 50)
    result = scale(image, max_width, max_height)
    assert result.size == (100, 50)
    assert result is not image


@pytest.mark.parametrize("max_width, max_height", [(0, 10), (10, 0), (0, 0)])
def test_scale_zero_bound_disables_scaling(max_width, max_height):
    image = make(100, 50)
    assert scale(image, max_width, max_height).size == (100, 50)


def test_width_pass_uses_truncating_integer_formula():
    # 100 * 100 // 300 = 33, then 33 * 1000 // 100 = 330 (a float ratio gives 333)
    assert scale(make(300, 1000), 100, None).size == (100, 330)


def test_height_pass_alone():
    # 100 * 100 // 300 = 33, then 33 * 200 // 100 = 66
    assert scale(make(200, 300), None, 100).size == (66, 100)


def test_height_pass_replaces_width_pass_when_too_tall():
    # Width pass would give 900x900, too tall for 800, so only the height pass applies
    assert scale(make(1000, 1000), 900, 800).size == (800, 800)


def test_height_pass_compares_new_width_against_max_height():
    # Width pass gives 60x120; the height pass then computes 75 from the
    # original 100x200 and accepts it because 75 <= 150
    assert scale(make(100, 200), 60, 150).size == (75, 150)


def test_height_pass_skipped_when_new_width_exceeds_max_height():
    # Height pass computes 320, larger than the max height of 80
    assert scale(make(400, 100), 50, 80).size == (50, 12)


def test_scale_does_not_touch_input():
    image = make(300, 1000)
    scale(image, 100, 100)
    assert image.size == (300, 1000)


def test_scale_to_zero_pixels_raises():
    with pytest.raises(ScaleError, match="1000x10"):
        scale(make(1000, 10), 5, None)
