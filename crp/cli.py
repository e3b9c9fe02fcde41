#!/usr/bin/env python3
"""
crp – image color replace tool.

Usage:
    crp --input-image in.png --target-image out.png \
        --origin-color "255 255 255" --target-color "0 0 0"
"""
import argparse
import logging
import sys

from crp import __version__
from crp.config import configure_logging, get_settings
from crp.models.color import Color
from crp.models.errors import ColorReplaceError, InvalidColor, InvalidConfig
from crp.pipeline.replace_color import replace_color
from crp.repositories.color_substitution_repository import ColorSubstitutionRepository
from crp.services.color_replace_service import ColorReplaceService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


def _color_arg(value: str) -> Color:
    try:
        return Color.parse(value)
    except InvalidColor as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crp", description="image color replace tool")
    parser.add_argument("--input-image", required=True, help="image to read")
    parser.add_argument("--target-image", required=True, help="where to write the result")
    parser.add_argument("--origin-color", required=True, type=_color_arg,
                        help='color to replace, e.g. "255 255 255"')
    parser.add_argument("--target-color", required=True, type=_color_arg,
                        help='color to write, e.g. "0 0 0"')
    parser.add_argument("--workers", type=int, default=None,
                        help="threads used for the substitution pass (default: CRP_WORKERS or 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except InvalidConfig as e:
        configure_logging()
        logger.error(f"{e}")
        return EXIT_USAGE

    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    workers = settings.workers if args.workers is None else args.workers
    if workers < 1:
        logger.error(f"--workers must be >= 1, got {workers}")
        return EXIT_USAGE

    service = ColorReplaceService(
        ColorSubstitutionRepository(workers=workers, rows_per_band=settings.rows_per_band)
    )
    try:
        result = replace_color(
            args.input_image,
            args.target_image,
            args.origin_color,
            args.target_color,
            color_replace_service=service,
        )
    except ColorReplaceError as e:
        logger.error(f"{e}")
        return EXIT_USAGE
    except (OSError, ValueError) as e:
        # missing input, decode timeout, or an output format Pillow can't write
        logger.error(f"{e}")
        return EXIT_IO_ERROR

    print(f"{int(result.elapsed_ms)}ms")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
