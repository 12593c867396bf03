from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from PIL import UnidentifiedImageError

from ..config import OUTPUT_FORMAT
from ..exceptions import ImageDecodeFailure, ImageEncodeFailure
from ..models.image import Image
from ..repositories.image_repository import ImageRepository
from ..repositories.output_path_repository import OutputPathRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers.  No recolor logic here."""
    def __init__(self, output_format: str = OUTPUT_FORMAT,
                 output_path_repository: OutputPathRepository | None = None):
        self.output_format = output_format
        self.image_repository = ImageRepository()
        self.output_path_repository = output_path_repository or OutputPathRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        try:
            return self.image_repository.load(path)
        except (UnidentifiedImageError, OSError, ValueError) as err:
            raise ImageDecodeFailure(f"Cannot read image {path}: {err}") from err

    def output_path_for(self, image: Image) -> Path:
        """
        A fresh path next to the image's source file, never an existing one.
        """
        if image.path is None:
            raise ValueError("Image has no source path to derive an output path from")
        return self.output_path_repository.resolve(image.path)

    def save(self, image: Image, path: Union[str, Path]) -> None:
        """
        Business-level method to save the image to a specific path.
        """
        logger.debug(f"Encoding {path} as {self.output_format}")
        try:
            self.image_repository.save(image, path, self.output_format)
        except (OSError, ValueError, KeyError) as err:
            # Pillow raises KeyError for an unknown format name.
            raise ImageEncodeFailure(f"Cannot write image {path}: {err}") from err

    def save_copy(self, image: Image) -> Path:
        """Save next to the source under a non-colliding name and return that name."""
        target = self.output_path_for(image)
        self.save(image, target)
        return target
