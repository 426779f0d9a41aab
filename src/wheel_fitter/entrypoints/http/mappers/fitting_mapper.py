from __future__ import annotations

from wheel_fitter.domain.fitting import FittingResult
from wheel_fitter.entrypoints.http.dtos.fitting import (
    ReplaceWheelsRequestDTO,
    ReplaceWheelsResponseDTO,
)
from wheel_fitter.use_cases.resolve_fitting import ResolveFittingRequest

SUCCESS_MESSAGE = "Loaded the pre-rendered image for this combination."


class FittingMapper:
    """Maps between REST DTOs and domain models for wheel replacement."""

    @staticmethod
    def to_domain_request(dto: ReplaceWheelsRequestDTO | None) -> ResolveFittingRequest:
        """
        Converts request DTO to domain request.

        A missing body is the same as an empty one; the use case reports
        which identifiers are absent.
        """
        if dto is None:
            return ResolveFittingRequest(car_id=None, disc_id=None)
        return ResolveFittingRequest(car_id=dto.car_id, disc_id=dto.disc_id)

    @staticmethod
    def to_response(result: FittingResult) -> ReplaceWheelsResponseDTO:
        return ReplaceWheelsResponseDTO(
            message=SUCCESS_MESSAGE,
            result_image_base64=result.result_image.data_uri,
            mime_type=result.result_image.media_type,
            from_predefined=result.from_predefined,
        )
