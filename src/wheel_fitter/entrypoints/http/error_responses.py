"""REST API error response models.

Documents the JSON body every error handler produces, for the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "carId",
                "message": "Field is required",
                "code": "MISSING",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Not found:
            {
                "detail": "Disc with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Fitting unavailable, with a suggestion for the user:
            {
                "detail": "No pre-rendered image exists for this car and disc combination",
                "code": "NO_FITTING_IMAGE",
                "hint": "Please choose another combination."
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    hint: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "carId and discId are required",
                    "code": "MISSING_PARAMETER",
                    "errors": [
                        {"field": "carId", "message": "Field is required", "code": "MISSING"},
                        {"field": "discId", "message": "Field is required", "code": "MISSING"},
                    ],
                },
                {
                    "detail": "Only the Toyota Corolla with Vossen discs is supported",
                    "code": "UNSUPPORTED_COMBINATION",
                    "hint": "Please choose a Toyota Corolla and Vossen discs.",
                },
            ]
        }
    )
