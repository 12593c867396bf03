from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: packed ARGB pixels (+ optional source path for bookkeeping).
    No Pillow logic outside the image repository.
    """
    pixels: np.ndarray # Shape (H, W), dtype uint32, one 0xAARRGGBB value per pixel.
    has_alpha: bool = True # False when the source color model carries no alpha; alpha is then 0xFF.
    path: Path | None = None # Source of the image.
