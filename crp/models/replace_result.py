from __future__ import annotations
from dataclasses import dataclass
from crp.models.image import Image


@dataclass
class ReplaceResult:
    """
    Data object returned by a color replacement run.
    """
    image: Image           # Destination image (substituted pixels)
    replaced_pixels: int   # Number of pixels that matched the origin color
    elapsed_ms: float      # Wall-clock time of the substitution pass
