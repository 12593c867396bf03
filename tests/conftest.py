from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from pixel_recolor.repositories.image_repository import ImageRepository


@pytest.fixture
def write_image(tmp_path):
    """
    Write a PNG from rows of channel tuples and return its path.
    3-tuples give an RGB image, 4-tuples an RGBA image.
    """
    def _write(rows, name="img.png", **save_kwargs) -> Path:
        arr = np.array(rows, dtype=np.uint8)
        path = tmp_path / name
        PILImage.fromarray(arr).save(path, **save_kwargs)
        return path
    return _write


@pytest.fixture
def make_image():
    """Build an in-memory Image from rows of Color objects."""
    def _make(rows, has_alpha=True):
        pixels = np.array([[c.argb for c in row] for row in rows], dtype=np.uint32)
        return ImageRepository.create_image(pixels, has_alpha=has_alpha)
    return _make
