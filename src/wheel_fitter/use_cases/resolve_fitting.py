"""Resolve fitting use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wheel_fitter.domain.errors import (
    MissingParameterError,
    NoFittingImageError,
    NotFoundError,
    UnsupportedCombinationError,
)
from wheel_fitter.domain.fitting import (
    ELIGIBLE_COMBINATIONS,
    EligibilityRule,
    FittingResult,
    is_eligible,
)
from wheel_fitter.ports.car_repository import CarRepository
from wheel_fitter.ports.disc_repository import DiscRepository
from wheel_fitter.ports.image_fetcher import ImageFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolveFittingRequest:
    """Request to show a car wearing a disc."""

    car_id: str | None
    disc_id: str | None


class ResolveFitting:
    """
    Use case for finding the pre-rendered image of a car fitted with a disc.

    Responsibilities:
    - Require both identifiers
    - Load the car and the disc (car-not-found wins when both are missing)
    - Pick the first fitting combination matching the disc brand and diameter
    - Apply the eligibility allow-list to the car and disc
    - Return the image embedded as a data URI, fetching it when stored remotely

    Resolution is a pure read; nothing is written back.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        disc_repository: DiscRepository,
        image_fetcher: ImageFetcher,
        eligible_combinations: tuple[EligibilityRule, ...] = ELIGIBLE_COMBINATIONS,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_repository: Repository for car data access
            disc_repository: Repository for disc data access
            image_fetcher: Converts remote image references to data URIs
            eligible_combinations: Allow-list of (make, model, disc brand) triples
        """
        self._cars = car_repository
        self._discs = disc_repository
        self._image_fetcher = image_fetcher
        self._eligible_combinations = eligible_combinations

    def execute(self, request: ResolveFittingRequest) -> FittingResult:
        """
        Execute the fitting resolution.

        Args:
            request: Request containing car_id and disc_id

        Returns:
            FittingResult with the embedded image, always flagged from_predefined

        Raises:
            MissingParameterError: If car_id or disc_id is absent or blank
            NotFoundError: If the car or the disc does not exist
            NoFittingImageError: If the car has no usable render for the disc
            UnsupportedCombinationError: If a render exists but the pairing is not allowed
            ImageFetchError: If a remote render cannot be downloaded
        """
        missing = [
            name
            for name, value in (("carId", request.car_id), ("discId", request.disc_id))
            if not value or not value.strip()
        ]
        if missing:
            raise MissingParameterError(missing)

        car_id = request.car_id.strip()  # type: ignore[union-attr]
        disc_id = request.disc_id.strip()  # type: ignore[union-attr]

        car = self._cars.get_by_id(car_id)
        disc = self._discs.get_by_id(disc_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=car_id)
        if disc is None:
            raise NotFoundError(resource="Disc", identifier=disc_id)

        combination = car.find_combination(disc.brand, disc.diameter)

        if combination is None or combination.result_image is None:
            logger.warning(
                "No pre-rendered image for combination",
                extra={
                    "car_id": car.id,
                    "car": f"{car.make} {car.model}",
                    "disc_brand": disc.brand,
                    "disc_diameter": disc.diameter,
                },
            )
            raise NoFittingImageError(car_id=car.id, disc_id=disc.id)

        if not is_eligible(car, disc, self._eligible_combinations):
            logger.info(
                "Pre-rendered image suppressed by eligibility rules",
                extra={"car": f"{car.make} {car.model}", "disc_brand": disc.brand},
            )
            raise UnsupportedCombinationError(car_id=car.id, disc_id=disc.id)

        result_image = self._image_fetcher.embed(combination.result_image)

        logger.info(
            "Resolved pre-rendered combination",
            extra={
                "car": f"{car.make} {car.model}",
                "disc_brand": disc.brand,
                "media_type": result_image.media_type,
            },
        )

        return FittingResult(result_image=result_image, from_predefined=True)
