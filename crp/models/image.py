from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: 8-bit 3-channel pixels (+ optional path for bookkeeping).
    No OpenCV logic outside the repositories.
    """
    pixels: np.ndarray  # Shape (H, W, 3), dtype uint8.
    path: Path | None = None  # Source or destination of the image.
    channel_order: str = "RGB"  # "RGB" or "BGR", order of the last axis.

    @property
    def rows(self) -> int:
        return self.pixels.shape[0]

    @property
    def cols(self) -> int:
        return self.pixels.shape[1]
