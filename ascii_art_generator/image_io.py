"""Reading images from disk and writing the rendered text."""

from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ascii_art_generator.errors import ImageLoadError

PathLike = Union[str, Path]


def open_image(file_path: PathLike) -> Image.Image:
    """Open an image file.

    The returned image holds the file open; use it as a context manager.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file.
        ImageLoadError: If the file is not a readable image.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")

    try:
        image = Image.open(path)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageLoadError(f"Can't read image: {path}") from exc

    # Truncated or corrupt data only shows up when decoding
    try:
        image.load()
    except (Image.DecompressionBombError, OSError) as exc:
        image.close()
        raise ImageLoadError(f"Can't read image: {path}") from exc
    return image


def default_output_path(input_path: PathLike) -> Path:
    """Path of the input file with its extension replaced by ``.txt``."""
    path = Path(input_path)
    if path.suffix:
        return path.with_suffix('.txt')
    return path.with_name(path.name + '.txt')


def write_output(output_path: PathLike, text: str) -> None:
    """Write the text, overwriting any existing file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)
