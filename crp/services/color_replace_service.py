from pathlib import Path
from typing import Union
import logging
import time

from crp.models.color import ColorMatchCriterion
from crp.models.image import Image
from crp.models.replace_result import ReplaceResult
from crp.repositories.color_substitution_repository import ColorSubstitutionRepository
from crp.services.image_service import ImageService

logger = logging.getLogger(__name__)


class ColorReplaceService:
    """
    Business logic around the substitution pass: allocates the destination,
    times the pass and reports how many pixels were replaced.
    """

    def __init__(
        self,
        substitution_repository: ColorSubstitutionRepository = None,
        image_service: ImageService = None,
    ) -> None:
        self.repo = substitution_repository or ColorSubstitutionRepository()
        self.image_service = image_service or ImageService()

    def replace(
        self,
        source: Image,
        criterion: ColorMatchCriterion,
        output_path: Union[str, Path] = None,
    ) -> ReplaceResult:
        """
        Run one substitution pass over *source* into a freshly allocated image.

        Args:
            source (Image): Decoded input image, left untouched.
            criterion (ColorMatchCriterion): Colors and tolerance to apply.
            output_path: Optional path attached to the destination image.
        Returns:
            ReplaceResult holding the destination image, the number of
            replaced pixels and the pass duration in milliseconds.
        """
        destination = self.image_service.create_destination(source, output_path)

        start_time = time.perf_counter()
        replaced = self.repo.substitute(source.pixels, destination.pixels, criterion,
                                       source.channel_order)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        rows, cols = self.image_service.get_image_dimensions(source)
        logger.info(f"Replaced {replaced}/{rows * cols} pixels "
                    f"{criterion.origin.as_tuple()} → {criterion.target.as_tuple()} "
                    f"in {elapsed_ms:.1f}ms")
        return ReplaceResult(image=destination, replaced_pixels=replaced, elapsed_ms=elapsed_ms)
