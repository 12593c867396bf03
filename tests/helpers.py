from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from pixel_recolor.models.color import Color

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
WHITE = Color(255, 255, 255)


def read_rgba(path: Path):
    with PILImage.open(path) as img:
        return np.asarray(img.convert("RGBA")).tolist()
