from __future__ import annotations

from dataclasses import dataclass

from wheel_fitter.domain.disc import DISC_RESULT_LIMIT, Disc, DiscFilters
from wheel_fitter.ports.disc_repository import DiscRepository


@dataclass(frozen=True, slots=True)
class SearchDiscsRequest:
    filters: DiscFilters


@dataclass(frozen=True, slots=True)
class SearchDiscsResponse:
    discs: list[Disc]


class SearchDiscs:
    """
    Disc search with exact-match filters.

    Validates the filters and delegates matching to the repository.
    Results are capped at DISC_RESULT_LIMIT; callers must not assume completeness.
    """

    def __init__(self, disc_repository: DiscRepository, limit: int = DISC_RESULT_LIMIT) -> None:
        self._repository = disc_repository
        self._limit = limit

    def execute(self, request: SearchDiscsRequest) -> SearchDiscsResponse:
        """
        Execute disc search.

        Args:
            request: Search parameters

        Returns:
            Response containing matching discs

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()

        discs = self._repository.search(filters=request.filters, limit=self._limit)

        return SearchDiscsResponse(discs=discs)
