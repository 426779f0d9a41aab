from typing import Annotated

from fastapi import APIRouter, Depends, Query

from wheel_fitter.entrypoints.http.dependencies import (
    get_disc_filter_options_use_case,
    get_search_discs_use_case,
)
from wheel_fitter.entrypoints.http.dtos.catalog import (
    DiscFilterOptionsResponseDTO,
    DiscResponseDTO,
    DiscsSearchQueryDTO,
)
from wheel_fitter.entrypoints.http.error_responses import ErrorResponse
from wheel_fitter.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from wheel_fitter.use_cases.get_disc_filter_options import GetDiscFilterOptions
from wheel_fitter.use_cases.search_discs import SearchDiscs


router = APIRouter(tags=["Discs"])


@router.get(
    "/discs",
    response_model=list[DiscResponseDTO],
    summary="Filter discs",
    description="""
    List discs matching the given filters.

    ## Filters
    - All filters are optional and use AND semantics
    - Every filter is an exact match
    - diameter and et must be integers, width a number; anything else is rejected with 422

    ## Limits
    - At most 100 discs are returned

    ## Example
    ```
    GET /discs?diameter=18&pcd=5x114.3
    ```
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid filter value"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def get_discs(
    query: Annotated[DiscsSearchQueryDTO, Query()],
    use_case: SearchDiscs = Depends(get_search_discs_use_case),
) -> list[DiscResponseDTO]:
    """Filter discs endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogMapper.to_search_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return [CatalogMapper.to_disc_response(disc) for disc in result.discs]


@router.get(
    "/disc-options",
    response_model=DiscFilterOptionsResponseDTO,
    summary="Disc filter options",
    description="""
    Distinct values of every disc filter across the whole catalog.

    Numeric lists are sorted numerically, pcds lexicographically.
    """,
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
def get_disc_options(
    use_case: GetDiscFilterOptions = Depends(get_disc_filter_options_use_case),
) -> DiscFilterOptionsResponseDTO:
    options = use_case.execute()

    return CatalogMapper.to_filter_options_response(options)
