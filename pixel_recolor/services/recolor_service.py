from __future__ import annotations
from typing import Iterator, Tuple
import logging

from ..models.image import Image
from ..models.recolor_config import RecolorConfig
from ..repositories.image_repository import ImageRepository
from .pixel_matcher_service import PixelMatcherService
from .pixel_writer_service import PixelWriterService

logger = logging.getLogger(__name__)


class RecolorService:
    """
    Applies a RecolorConfig to an Image, one pixel at a time.
    *   No I/O here, works only with Image objects (packed ARGB numpy arrays).
    *   Mutates the Image in place; every pixel is read and written at most once.
    """

    def __init__(self,
                 matcher: PixelMatcherService | None = None,
                 writer: PixelWriterService | None = None):
        self.matcher = matcher or PixelMatcherService()
        self.writer = writer or PixelWriterService()
        self.image_repository = ImageRepository()

    def _iter_coordinates(self, image: Image) -> Iterator[Tuple[int, int]]:
        """Row-major: every x of row 0, then row 1, …"""
        height, width = self.image_repository.retrieve_image_dimensions(image)
        for y in range(height):
            for x in range(width):
                yield x, y

    def count_matches(self, image: Image, config: RecolorConfig) -> int:
        """How many pixels `transform` would replace. Does not touch the image."""
        return sum(
            1
            for x, y in self._iter_coordinates(image)
            if self.matcher.matches(self.image_repository.get_pixel(image, x, y),
                                    config.criterion, config.except_color)
        )

    def transform(self, image: Image, config: RecolorConfig) -> None:
        if config.preserve_alpha and not image.has_alpha:
            logger.info("Image doesn't have alpha channel! Fallback to default alpha is 255")

        replaced = 0
        for x, y in self._iter_coordinates(image):
            current = self.image_repository.get_pixel(image, x, y)
            if not self.matcher.matches(current, config.criterion, config.except_color):
                continue

            new_value = self.writer.compute_replacement(
                current, config.dest_color, config.preserve_alpha, image.has_alpha
            )
            self.image_repository.set_pixel(image, x, y, new_value)
            replaced += 1

        logger.debug(f"Replaced {replaced} pixel(s)")
