from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from wheel_fitter.domain.errors import ValidationError
from wheel_fitter.domain.images import ImageRef


# Upper bound on discs returned by a single search
DISC_RESULT_LIMIT = 100


class FilterValidationError(ValidationError):
    """Raised when disc filter parameters are invalid."""

    pass


@dataclass(frozen=True)
class Disc:
    id: str
    brand: str
    diameter: int
    width: float
    pcd: str
    et: int
    dia: float
    price: Decimal
    image_url: ImageRef | None = None


@dataclass(frozen=True, slots=True)
class DiscFilters:
    """Exact-match constraints; a None field imposes no constraint."""

    diameter: int | None = None
    width: float | None = None
    pcd: str | None = None
    et: int | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        if self.diameter is not None and self.diameter <= 0:
            raise FilterValidationError("diameter must be > 0")
        if self.width is not None and self.width <= 0:
            raise FilterValidationError("width must be > 0")
        if self.pcd is not None and not self.pcd.strip():
            raise FilterValidationError("pcd must not be blank")


@dataclass(frozen=True, slots=True)
class DiscFilterOptions:
    """Distinct values per filterable field, each sorted ascending."""

    diameters: list[int]
    widths: list[float]
    pcds: list[str]
    ets: list[int]
