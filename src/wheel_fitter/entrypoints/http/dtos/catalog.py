from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FittingCombinationResponseDTO(BaseModel):
    disc_brand: str
    disc_diameter: int | float
    predefined_image: str | None = None


class CarResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    image: str | None = None
    predefined_combinations: list[FittingCombinationResponseDTO]


class DiscResponseDTO(BaseModel):
    id: str
    brand: str
    diameter: int
    width: float
    pcd: str
    et: int
    dia: float
    price: str
    image_url: str | None = None


class DiscsSearchQueryDTO(BaseModel):
    """Query parameters for filtering discs. Every filter is an exact match."""

    diameter: int | None = Field(
        default=None,
        description="Rim diameter in inches",
        examples=[18],
    )
    width: float | None = Field(
        default=None,
        description="Rim width in inches",
        examples=[8.5],
    )
    pcd: str | None = Field(
        default=None,
        description="Bolt pattern (lug count x circle diameter)",
        examples=["5x114.3"],
    )
    et: int | None = Field(
        default=None,
        description="Offset in millimetres",
        examples=[35],
    )

    @field_validator("diameter", "width", "pcd", "et", mode="before")
    @classmethod
    def blank_as_absent(cls, value: Any) -> Any:
        # Filter forms submit every field; an empty one means "any"
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DiscFilterOptionsResponseDTO(BaseModel):
    """Distinct values available for each disc filter, sorted ascending."""

    diameters: list[int]
    widths: list[float]
    pcds: list[str]
    ets: list[int]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "diameters": [17, 18, 19],
                "widths": [7.5, 8.0, 8.5],
                "pcds": ["5x100", "5x112", "5x114.3"],
                "ets": [35, 40, 45],
            }
        }
    )
