from __future__ import annotations

from wheel_fitter.domain.disc import Disc, DiscFilters
from wheel_fitter.ports.disc_repository import DiscOptionField, DiscRepository


class InMemoryDiscRepository(DiscRepository):
    """
    Canonical contract implementation for tests.

    - Stores discs in insertion order
    - Applies AND-semantics exact-match filtering
    - Applies the limit AFTER filtering
    """

    def __init__(self, discs: list[Disc]) -> None:
        self._discs = discs

    def search(self, filters: DiscFilters, limit: int) -> list[Disc]:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [disc for disc in self._discs if self._matches(disc, filters)]
        return matches[:limit]

    def get_by_id(self, disc_id: str) -> Disc | None:
        return next((disc for disc in self._discs if disc.id == disc_id), None)

    def distinct_values(self, field: DiscOptionField) -> list[int | float | str]:
        values: list[int | float | str] = []
        for disc in self._discs:
            value = getattr(disc, field)
            if value is not None and value not in values:
                values.append(value)
        return values

    def _matches(self, disc: Disc, filters: DiscFilters) -> bool:
        if filters.diameter is not None and disc.diameter != filters.diameter:
            return False
        if filters.width is not None and disc.width != filters.width:
            return False
        if filters.pcd is not None and disc.pcd != filters.pcd:
            return False
        if filters.et is not None and disc.et != filters.et:
            return False
        return True
