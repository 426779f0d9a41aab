"""Image references stored on cars, discs and fitting combinations.

A stored image is either a link to a remote resource or an already
embedded data URI (``data:<media-type>;base64,<payload>``). Both shapes
have existed in the catalog, so every image field is parsed into one of
the two variants below.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

DATA_URI_PREFIX = "data:"
DEFAULT_MEDIA_TYPE = "image/jpeg"


@dataclass(frozen=True, slots=True)
class RemoteImage:
    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class EmbeddedImage:
    data_uri: str

    @property
    def media_type(self) -> str:
        """Media type declared in the data URI header."""
        header = self.data_uri[len(DATA_URI_PREFIX) :].split(",", 1)[0]
        media_type = header.split(";", 1)[0].strip()
        return media_type or DEFAULT_MEDIA_TYPE

    @classmethod
    def from_bytes(cls, content: bytes, media_type: str | None = None) -> EmbeddedImage:
        payload = base64.b64encode(content).decode("ascii")
        return cls(f"{DATA_URI_PREFIX}{media_type or DEFAULT_MEDIA_TYPE};base64,{payload}")

    def __str__(self) -> str:
        return self.data_uri


ImageRef = RemoteImage | EmbeddedImage


def parse_image_ref(value: str | None) -> ImageRef | None:
    """
    Parse a stored image value.

    Returns None for missing or blank values (and data URIs with an empty
    payload), EmbeddedImage for data URIs and RemoteImage for anything else.
    """
    if value is None:
        return None

    value = value.strip()
    if not value:
        return None

    if value.startswith(DATA_URI_PREFIX):
        # A data URI without a payload is as good as no image
        _, _, payload = value.partition(",")
        return EmbeddedImage(value) if payload.strip() else None
    return RemoteImage(value)
