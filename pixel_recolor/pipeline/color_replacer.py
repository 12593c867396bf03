# pipeline/color_replacer.py
from __future__ import annotations
from pathlib import Path
import logging

from ..models.recolor_config import RecolorConfig
from ..services.image_service import ImageService
from ..services.recolor_service import RecolorService

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
def replace_color(
    image_path: str | Path,
    config: RecolorConfig,
    *,
    image_service: ImageService | None = None,
    recolor_service: RecolorService | None = None,
) -> Path:
    """
    For the image at *image_path*:
        • decode it into memory
        • replace matching pixels in place
        • write the result next to the input under a fresh `_copy` name
    The input file is never modified. Returns the path written.
    """
    image_service = image_service or ImageService()
    recolor_service = recolor_service or RecolorService()

    # 1. read
    logger.info("Reading image...")
    image = image_service.load(image_path)

    # 2. recolor in-memory
    logger.info("Changing color...")
    recolor_service.transform(image, config)

    # 3. write a copy
    logger.info("Writing image...")
    output_path = image_service.save_copy(image)
    logger.info(f"Saved {output_path}")

    return output_path
