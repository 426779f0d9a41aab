from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

from wheel_fitter.domain.disc import Disc, DiscFilters

DiscOptionField = Literal["diameter", "width", "pcd", "et"]


class DiscRepository(ABC):
    """
    Port for disc data access.

    Contract (Preconditions):
        - filters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: DiscFilters, limit: int) -> list[Disc]:
        """
        Return discs matching every present filter field (exact equality).

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            limit: Maximum number of discs to return

        Returns:
            Matching discs, no ordering guarantee
        """
        ...

    @abstractmethod
    def get_by_id(self, disc_id: str) -> Disc | None:
        """Get disc by ID, None when missing or when the identifier is malformed."""
        ...

    @abstractmethod
    def distinct_values(self, field: DiscOptionField) -> list[int | float | str]:
        """
        Distinct non-null values of a field across the whole collection.

        Order is unspecified; callers sort.
        """
        ...
