"""Get disc filter options use case."""

from __future__ import annotations

from wheel_fitter.domain.disc import DiscFilterOptions
from wheel_fitter.ports.disc_repository import DiscOptionField, DiscRepository


class GetDiscFilterOptions:
    """
    Use case for populating client-side disc filters.

    Responsibilities:
    - Collect distinct values of diameter, width, pcd and et over ALL discs
    - Sort numeric fields numerically and pcd lexicographically
    - Drop duplicates the store may still return (e.g. 18 and 18.0)
    """

    def __init__(self, disc_repository: DiscRepository) -> None:
        self._repository = disc_repository

    def execute(self) -> DiscFilterOptions:
        return DiscFilterOptions(
            diameters=self._sorted_numbers("diameter"),
            widths=self._sorted_numbers("width"),
            pcds=sorted({str(value) for value in self._repository.distinct_values("pcd")}),
            ets=self._sorted_numbers("et"),
        )

    def _sorted_numbers(self, field: DiscOptionField) -> list:
        values = self._repository.distinct_values(field)
        return sorted(set(values))
