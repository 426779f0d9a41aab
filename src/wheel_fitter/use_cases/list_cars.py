from __future__ import annotations

from dataclasses import dataclass

from wheel_fitter.domain.car import Car
from wheel_fitter.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListCarsResponse:
    cars: list[Car]


class ListCars:
    """Return the whole car catalog, unfiltered, in store order."""

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self) -> ListCarsResponse:
        return ListCarsResponse(cars=self._repository.list_all())
