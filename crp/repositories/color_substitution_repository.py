# repositories/color_substitution_repository.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
import logging

import numpy as np

from crp.config import get_settings
from crp.models.color import ColorMatchCriterion
from crp.models.errors import IndexOutOfBounds, InvalidDimensions

logger = logging.getLogger(__name__)


class ColorSubstitutionRepository:
    """
    Pixel-level color substitution over (H, W, 3) uint8 buffers.

    • Every pixel within tolerance of the origin color on all three channels
      is replaced by the target color.
    • Every other pixel is copied unchanged.
    • Work is split into non-overlapping row bands, optionally run on a
      thread pool.
    """

    def __init__(self, workers: int = None, rows_per_band: int = None) -> None:
        if workers is None or rows_per_band is None:
            settings = get_settings()
            workers = settings.workers if workers is None else workers
            rows_per_band = settings.rows_per_band if rows_per_band is None else rows_per_band
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if rows_per_band < 1:
            raise ValueError(f"rows_per_band must be >= 1, got {rows_per_band}")
        self.workers = workers
        self.rows_per_band = rows_per_band

    # ---------- private helpers ----------
    @staticmethod
    def _check_buffer(name: str, arr: np.ndarray) -> None:
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise InvalidDimensions(f"{name} must have shape (H, W, 3), got {arr.shape}")

    @classmethod
    def _check_dimensions(cls, source: np.ndarray, destination: np.ndarray) -> None:
        cls._check_buffer("source", source)
        cls._check_buffer("destination", destination)
        if source.shape[:2] != destination.shape[:2]:
            raise InvalidDimensions(
                f"destination is {destination.shape[0]}x{destination.shape[1]}, "
                f"source is {source.shape[0]}x{source.shape[1]}"
            )
        if np.may_share_memory(source, destination):
            raise ValueError("source and destination must not alias")

    @staticmethod
    def _bands(rows: int, rows_per_band: int):
        for start in range(0, rows, rows_per_band):
            yield start, min(start + rows_per_band, rows)

    # ---------- public API ----------
    @staticmethod
    def match_mask(
        source: np.ndarray, criterion: ColorMatchCriterion, channel_order: str = "RGB"
    ) -> np.ndarray:
        """
        Returns bool mask (H, W): True where every channel differs from the
        origin color by strictly less than the tolerance.
        """
        origin = np.array(criterion.origin.channels(channel_order), dtype=np.int16)
        # int16 so that uint8 subtraction cannot wrap around
        diff = np.abs(source.astype(np.int16) - origin)
        return (diff < criterion.tolerance).all(axis=-1)

    @classmethod
    def _substitute_band(cls, source, destination, criterion, start, stop, channel_order) -> int:
        band = source[start:stop]
        mask = cls.match_mask(band, criterion, channel_order)
        target = np.array(criterion.target.channels(channel_order), dtype=source.dtype)
        destination[start:stop] = np.where(mask[..., None], target, band)
        return int(mask.sum())

    def apply_rows(
        self,
        source: np.ndarray,
        destination: np.ndarray,
        criterion: ColorMatchCriterion,
        start: int,
        stop: int,
        channel_order: str = "RGB",
    ) -> int:
        """
        Substitute rows [start, stop) of *source* into *destination*.
        Returns the number of pixels replaced in the band.
        """
        self._check_dimensions(source, destination)
        rows = source.shape[0]
        if not 0 <= start <= stop <= rows:
            raise IndexOutOfBounds(f"row band [{start}, {stop}) outside [0, {rows})")
        return self._substitute_band(source, destination, criterion, start, stop, channel_order)

    def substitute(
        self,
        source: np.ndarray,
        destination: np.ndarray,
        criterion: ColorMatchCriterion,
        channel_order: str = "RGB",
    ) -> int:
        """
        Args
        ----
        source      : np.ndarray  (H, W, 3)  uint8, read-only
        destination : np.ndarray  (H, W, 3)  uint8, fully overwritten
        criterion   : origin / target colors and tolerance

        Returns
        -------
        Number of pixels replaced by the target color.
        """
        self._check_dimensions(source, destination)
        bands = list(self._bands(source.shape[0], self.rows_per_band))
        logger.debug(f"Substituting {source.shape[0]}x{source.shape[1]} buffer "
                     f"in {len(bands)} band(s) on {self.workers} worker(s)")

        if self.workers == 1 or len(bands) <= 1:
            return sum(
                self._substitute_band(source, destination, criterion, start, stop, channel_order)
                for start, stop in bands
            )

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [
                pool.submit(self._substitute_band, source, destination, criterion,
                            start, stop, channel_order)
                for start, stop in bands
            ]
            return sum(future.result() for future in futures)

    def apply(
        self,
        source: np.ndarray,
        destination: np.ndarray,
        criterion: ColorMatchCriterion,
        channel_order: str = "RGB",
    ) -> np.ndarray:
        """Same as substitute(), but returns *destination* for chaining."""
        self.substitute(source, destination, criterion, channel_order)
        return destination
