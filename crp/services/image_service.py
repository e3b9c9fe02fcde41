from pathlib import Path
from typing import Union

from crp.models.image import Image
from crp.repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No color matching logic."""
    def __init__(self, image_repository: ImageRepository = None):
        self.image_repository = image_repository or ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an RGB Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)

    def create_destination(self, source: Image, path: Union[str, Path] = None) -> Image:
        """
        Allocate the buffer a substitution pass writes into.
        """
        return self.image_repository.allocate_like(source, path)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)
