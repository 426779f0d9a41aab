from fastapi import APIRouter, Depends

from wheel_fitter.entrypoints.http.dependencies import get_list_cars_use_case
from wheel_fitter.entrypoints.http.dtos.catalog import CarResponseDTO
from wheel_fitter.entrypoints.http.error_responses import ErrorResponse
from wheel_fitter.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from wheel_fitter.use_cases.list_cars import ListCars


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=list[CarResponseDTO],
    summary="List cars",
    description="""
    List every car in the catalog, including its pre-rendered fitting combinations.

    No filtering and no pagination; order is the store's native order.
    Images are returned as stored: either a URL or a data URI.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "make": "Toyota",
                            "model": "Corolla",
                            "image": "https://cdn.example.com/cars/corolla.png",
                            "predefined_combinations": [
                                {
                                    "disc_brand": "Vossen",
                                    "disc_diameter": 18,
                                    "predefined_image": "data:image/png;base64,iVBORw0KGgo=",
                                }
                            ],
                        }
                    ]
                }
            },
        },
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def get_cars(
    use_case: ListCars = Depends(get_list_cars_use_case),
) -> list[CarResponseDTO]:
    """List cars endpoint following execute → map → return pattern."""
    result = use_case.execute()

    return [CatalogMapper.to_car_response(car) for car in result.cars]
