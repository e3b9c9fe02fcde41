from pathlib import Path
from typing import Union
import logging
import signal

import cv2
import numpy as np
from PIL import Image as PILImage

from crp.config import get_settings
from crp.models.image import Image

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and buffer allocation for Image entities.
    """

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def _imread(path: Path, timeout: int):
        # SIGALRM only exists on POSIX and only works in the main thread
        if timeout <= 0 or not hasattr(signal, "SIGALRM"):
            return cv2.imread(str(path), cv2.IMREAD_COLOR)

        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        try:
            previous = signal.signal(signal.SIGALRM, _handler)
        except ValueError:
            return cv2.imread(str(path), cv2.IMREAD_COLOR)
        signal.alarm(timeout)
        try:
            return cv2.imread(str(path), cv2.IMREAD_COLOR)
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)

    @classmethod
    def load(cls, path: Union[str, Path], rgb: bool = True,
             timeout: int = None) -> Image:
        path = Path(path)
        if timeout is None:
            timeout = get_settings().imread_timeout
        arr_bgr = cls._imread(path, timeout)

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        logger.debug(f"Loaded {path}: {arr_bgr.shape}")
        if rgb:
            return Image(pixels=np.ascontiguousarray(arr_bgr[:, :, ::-1]), path=path)
        return Image(pixels=arr_bgr, path=path, channel_order="BGR")

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Image has no destination path")
        path = Path(image.path)
        path.parent.mkdir(parents=True, exist_ok=True)

        pixels = image.pixels
        if image.channel_order == "BGR":
            pixels = pixels[:, :, ::-1]
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(path)
        logger.debug(f"Saved {path}")

    @staticmethod
    def allocate_like(image: Image, path: Union[str, Path] = None) -> Image:
        """Zero-filled buffer with the shape, dtype and channel order of *image*."""
        pixels = np.zeros_like(image.pixels)
        return Image(
            pixels=pixels,
            path=Path(path) if path is not None else None,
            channel_order=image.channel_order,
        )
