# pipeline/replace_color.py
from pathlib import Path
from typing import Union
import logging

from crp.models.color import COLOR_RANGE, Color, ColorMatchCriterion
from crp.models.replace_result import ReplaceResult
from crp.services.color_replace_service import ColorReplaceService
from crp.services.image_service import ImageService

logger = logging.getLogger(__name__)

ColorLike = Union[str, Color]


def _as_color(value: ColorLike) -> Color:
    return value if isinstance(value, Color) else Color.parse(value)


def replace_color(
    input_image: Union[str, Path],
    target_image: Union[str, Path],
    origin_color: ColorLike,
    target_color: ColorLike,
    *,
    tolerance: int = COLOR_RANGE,
    color_replace_service: ColorReplaceService = None,
    image_service: ImageService = None,
) -> ReplaceResult:
    """
    Load *input_image*, replace every pixel within *tolerance* of
    *origin_color* by *target_color* and write the result to *target_image*.

    Colors are checked before any file is read, so a bad color never
    costs a decode.
    """
    criterion = ColorMatchCriterion(_as_color(origin_color), _as_color(target_color), tolerance)

    color_replace_service = color_replace_service or ColorReplaceService()
    image_service = image_service or ImageService()

    input_image = Path(input_image)
    if not input_image.is_file():
        raise FileNotFoundError(f"Input image does not exist or is not a file: {input_image}")

    source = image_service.load(input_image)
    logger.info(f"Loaded {input_image}: {source.rows}x{source.cols}")

    result = color_replace_service.replace(source, criterion, output_path=target_image)
    image_service.save(result.image)
    logger.info(f"Saved {target_image}")
    return result
