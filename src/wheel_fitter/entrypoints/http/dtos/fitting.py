from pydantic import BaseModel, ConfigDict, Field


class ReplaceWheelsRequestDTO(BaseModel):
    """Request payload for showing a car with different wheels.

    Both fields are declared optional so that a missing id is reported by the
    use case as MISSING_PARAMETER (400) instead of a schema error.
    """

    car_id: str | None = Field(
        default=None,
        alias="carId",
        description="Identifier of the car",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    disc_id: str | None = Field(
        default=None,
        alias="discId",
        description="Identifier of the disc",
        examples=["7c9e6679-7425-40de-944b-e07fc1f90ae7"],
    )

    model_config = ConfigDict(populate_by_name=True)


class ReplaceWheelsResponseDTO(BaseModel):
    """Pre-rendered image of the car wearing the requested discs."""

    message: str = Field(examples=["Loaded the pre-rendered image for this combination."])
    result_image_base64: str = Field(
        alias="resultImageBase64",
        description="Image as a data URI: data:<media-type>;base64,<payload>",
    )
    mime_type: str = Field(alias="mimeType", examples=["image/png"])
    from_predefined: bool = Field(alias="fromPredefined", examples=[True])

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "message": "Loaded the pre-rendered image for this combination.",
                "resultImageBase64": "data:image/png;base64,iVBORw0KGgo=",
                "mimeType": "image/png",
                "fromPredefined": True,
            }
        },
    )
