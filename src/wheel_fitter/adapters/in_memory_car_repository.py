from __future__ import annotations

from wheel_fitter.domain.car import Car
from wheel_fitter.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - Unknown identifiers are misses
    """

    def __init__(self, cars: list[Car]) -> None:
        self._cars = cars

    def list_all(self) -> list[Car]:
        return list(self._cars)

    def get_by_id(self, car_id: str) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)
