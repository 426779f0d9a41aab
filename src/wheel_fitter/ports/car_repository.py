from __future__ import annotations

from abc import ABC, abstractmethod

from wheel_fitter.domain.car import Car


class CarRepository(ABC):
    """
    Port for car data access.

    Cars are read-only here; they are written out of band.
    Implementations raise StoreError when the backing store fails.
    """

    @abstractmethod
    def list_all(self) -> list[Car]:
        """Return every car in store order, including embedded fitting combinations."""
        ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Identifiers the store cannot interpret are treated as misses.

        Returns:
            Car entity if found, None otherwise
        """
        ...
