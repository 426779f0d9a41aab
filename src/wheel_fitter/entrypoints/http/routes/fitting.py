from fastapi import APIRouter, Depends

from wheel_fitter.entrypoints.http.dependencies import get_resolve_fitting_use_case
from wheel_fitter.entrypoints.http.dtos.fitting import (
    ReplaceWheelsRequestDTO,
    ReplaceWheelsResponseDTO,
)
from wheel_fitter.entrypoints.http.error_responses import ErrorResponse
from wheel_fitter.entrypoints.http.mappers.fitting_mapper import FittingMapper
from wheel_fitter.use_cases.resolve_fitting import ResolveFitting


router = APIRouter(tags=["Fitting"])


@router.post(
    "/replace-wheels",
    response_model=ReplaceWheelsResponseDTO,
    summary="Show a car with different wheels",
    description="""
    Return the pre-rendered picture of a car fitted with a disc.

    ## Resolution
    - The car's fitting combinations are searched for the disc's brand and diameter
    - Only the Toyota Corolla with Vossen discs is currently exposed
    - The image is always returned as a data URI

    ## Example
    ```
    POST /replace-wheels
    {
        "carId": "550e8400-e29b-41d4-a716-446655440000",
        "discId": "7c9e6679-7425-40de-944b-e07fc1f90ae7"
    }
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "carId or discId missing"},
        404: {
            "model": ErrorResponse,
            "description": "Car or disc not found, no pre-rendered image, or unsupported combination",
        },
        502: {"model": ErrorResponse, "description": "Remote image could not be downloaded"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def replace_wheels(
    payload: ReplaceWheelsRequestDTO | None = None,
    use_case: ResolveFitting = Depends(get_resolve_fitting_use_case),
) -> ReplaceWheelsResponseDTO:
    """
    Replace wheels endpoint.

    Follows the parse → execute → map → return pattern.
    """
    request = FittingMapper.to_domain_request(payload)

    result = use_case.execute(request)

    return FittingMapper.to_response(result)
