from __future__ import annotations

from abc import ABC, abstractmethod

from wheel_fitter.domain.images import EmbeddedImage, ImageRef


class ImageFetcher(ABC):
    """Port for downloading remote images into embeddable data URIs."""

    @abstractmethod
    def fetch(self, url: str) -> EmbeddedImage:
        """
        Download the image at url and encode it with its media type.

        Raises:
            ImageFetchError: If the image cannot be retrieved or encoded
        """
        ...

    def embed(self, image: ImageRef) -> EmbeddedImage:
        """Normalize any image reference to its embedded form, fetching only remote ones."""
        if isinstance(image, EmbeddedImage):
            return image
        return self.fetch(image.url)
