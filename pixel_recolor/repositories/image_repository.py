from __future__ import annotations
from pathlib import Path
from typing import Tuple, Union
import logging

import numpy as np
from PIL import Image as PILImage

from ..models.image import Image

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and pixel access for Image entities.
    The only place that knows about Pillow.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, has_alpha: bool = True,
                     path: Union[str, Path] = None) -> Image:
        pixels = np.asarray(pixels, dtype=np.uint32)
        if path is None:
            return Image(pixels=pixels, has_alpha=has_alpha)
        return Image(pixels=pixels, has_alpha=has_alpha, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        """Returns (height, width)."""
        return img.pixels.shape[:2]

    @staticmethod
    def get_pixel(img: Image, x: int, y: int) -> int:
        return int(img.pixels[y, x])

    @staticmethod
    def set_pixel(img: Image, x: int, y: int, argb: int) -> None:
        img.pixels[y, x] = argb

    # ---------- codec helpers ----------
    @staticmethod
    def _has_alpha(pil_img: PILImage.Image) -> bool:
        # Palette images with a tRNS chunk are transparent without an "A" band.
        return "A" in pil_img.getbands() or "transparency" in pil_img.info

    @staticmethod
    def _pack(rgba: np.ndarray) -> np.ndarray:
        """(H, W, 4) uint8 RGBA → (H, W) uint32 ARGB."""
        rgba = rgba.astype(np.uint32)
        return (
            (rgba[..., 3] << 24)
            | (rgba[..., 0] << 16)
            | (rgba[..., 1] << 8)
            | rgba[..., 2]
        )

    @staticmethod
    def _unpack(pixels: np.ndarray) -> np.ndarray:
        """(H, W) uint32 ARGB → (H, W, 4) uint8 RGBA."""
        pixels = pixels.astype(np.uint32)
        return np.stack(
            [
                (pixels >> 16) & 0xFF,
                (pixels >> 8) & 0xFF,
                pixels & 0xFF,
                (pixels >> 24) & 0xFF,
            ],
            axis=-1,
        ).astype(np.uint8)

    # ---------- public API ----------
    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        with PILImage.open(path) as pil_img:
            pil_img.load()
            has_alpha = ImageRepository._has_alpha(pil_img)
            rgba = np.asarray(pil_img.convert("RGBA"))

        logger.debug(f"Decoded {path}: mode={pil_img.mode}, size={pil_img.size}, alpha={has_alpha}")
        return Image(pixels=ImageRepository._pack(rgba), has_alpha=has_alpha, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path], fmt: str) -> None:
        """
        Encode `image` to `path` in Pillow format `fmt`, whatever the extension says.
        Images loaded without alpha are written without alpha.
        """
        rgba = ImageRepository._unpack(image.pixels)
        if not image.has_alpha:
            rgba = rgba[..., :3]
        if not rgba.flags['C_CONTIGUOUS']:
            rgba = np.ascontiguousarray(rgba)

        PILImage.fromarray(rgba).save(Path(path), format=fmt)
