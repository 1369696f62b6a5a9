import pytest
from PIL import Image

TRANSPARENT = (0, 0, 0, 0)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def bordered_image(width, height, box, background=TRANSPARENT, fill=BLACK):
    """Image of ``background`` with the ``(left, top, right, bottom)`` box filled."""
    image = Image.new('RGBA', (width, height), background)
    left, top, right, bottom = box
    for y in range(top, bottom):
        for x in range(left, right):
            image.putpixel((x, y), fill)
    return image


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "picture.png"
    bordered_image(40, 30, (10, 5, 30, 25)).save(path)
    return path
