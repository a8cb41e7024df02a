"""Preparation of the notation background wallpaper."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

StrPath = Union[str, "os.PathLike[str]"]

WALLPAPER_FILE_NAME = "wallpaper.jpg"


def processed_wallpaper_path(
    directory: StrPath,
    user_data_path: StrPath,
    original: str,
    opacity: float,
) -> str:
    """Lighten a wallpaper with a layer of white and save it in the user data folder.

    ``original`` is looked up in ``directory``; a white layer of the given
    ``opacity`` (0 to 1) is painted over it and the result is written as a
    JPEG to ``user_data_path``. Returns the path of the written file.

    Raises ValueError if ``opacity`` is outside [0, 1], FileNotFoundError if
    the original is missing, and PIL.UnidentifiedImageError if it is not an
    image.
    """
    if not 0.0 <= opacity <= 1.0:
        raise ValueError(f"opacity must be between 0 and 1, got {opacity!r}")

    directory = os.fspath(directory)
    if not directory.endswith("/"):
        directory += "/"

    with Image.open(directory + original) as source:
        wallpaper = source.convert("RGB")

    alpha = int(255 * opacity) / 255
    white = Image.new("RGB", wallpaper.size, (255, 255, 255))
    lightened = Image.blend(wallpaper, white, alpha)

    path = os.fspath(user_data_path) + "/" + WALLPAPER_FILE_NAME
    lightened.save(path, format="JPEG")
    return path