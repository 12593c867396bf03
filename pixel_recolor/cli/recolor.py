#!/usr/bin/env python3
"""
pixel-recolor command line.

    pixel-recolor [-p] [-e COLOR] IMAGE SOURCE DEST

Replaces SOURCE (a hex color, or `all`) with DEST in IMAGE and writes the
result next to it as IMAGE_copy.ext, IMAGE_copy_1.ext, …
"""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .. import __version__
from ..config import LOG_LEVEL
from ..exceptions import ImageDecodeFailure, ImageEncodeFailure, InvalidColorFormat
from ..models.recolor_config import RecolorConfig
from ..pipeline.color_replacer import replace_color
from ..services.color_service import ALL, NONE, ColorService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECODE_FAILURE = 1
EXIT_INVALID_COLOR = 2   # same as argparse usage errors
EXIT_ENCODE_FAILURE = 3


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-recolor",
        description="Replace a color in an image and save the result as a copy.",
    )
    ap.add_argument("image", help="image file name")
    ap.add_argument("source",
                    help=f"color to change from (e.g. '#FF0000'), or '{ALL}' to change every pixel")
    ap.add_argument("dest", help="color to change to (e.g. '#00FF00' or '#80FF0000' with alpha)")
    ap.add_argument("-p", "--preserve-alpha", action="store_true",
                    help="keep each replaced pixel's own alpha")
    ap.add_argument("-e", "--except", dest="except_color", metavar="COLOR", default=NONE,
                    help=f"this exact color is never changed (default: {NONE})")
    ap.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _configure_logging(verbose: bool) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def config_from_args(args: argparse.Namespace) -> RecolorConfig:
    return RecolorConfig(
        criterion=ColorService.parse_source(args.source),
        dest_color=ColorService.decode(args.dest),
        preserve_alpha=args.preserve_alpha,
        except_color=ColorService.parse_except(args.except_color),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    logger.debug(f"Arguments: {vars(args)}")

    try:
        config = config_from_args(args)
    except InvalidColorFormat as err:
        logger.error(str(err))
        return EXIT_INVALID_COLOR

    try:
        replace_color(args.image, config)
    except ImageDecodeFailure as err:
        logger.error(str(err))
        return EXIT_DECODE_FAILURE
    except ImageEncodeFailure:
        logger.exception("Writing the recolored image failed")
        return EXIT_ENCODE_FAILURE

    logger.info("Done!")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
