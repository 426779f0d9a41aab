"""Remote image download over HTTP."""

from __future__ import annotations

import logging

import httpx

from wheel_fitter.domain.errors import ImageFetchError
from wheel_fitter.domain.images import EmbeddedImage
from wheel_fitter.ports.image_fetcher import ImageFetcher

logger = logging.getLogger(__name__)


class HttpxImageFetcher(ImageFetcher):
    """
    Downloads an image once (no retries) and embeds it as a base64 data URI.

    The media type comes from the response Content-Type header.
    """

    def __init__(self, timeout: float, transport: httpx.BaseTransport | None = None) -> None:
        """
        Args:
            timeout: Overall timeout in seconds for the download
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def fetch(self, url: str) -> EmbeddedImage:
        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(
                "Image download failed",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise ImageFetchError(url, str(exc) or type(exc).__name__) from exc

        if not response.content:
            raise ImageFetchError(url, "response body is empty")

        media_type = response.headers.get("content-type", "").split(";", 1)[0].strip()
        return EmbeddedImage.from_bytes(response.content, media_type or None)
