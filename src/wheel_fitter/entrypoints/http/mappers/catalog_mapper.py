from __future__ import annotations

from wheel_fitter.domain.car import Car, FittingCombination
from wheel_fitter.domain.disc import Disc, DiscFilterOptions, DiscFilters
from wheel_fitter.entrypoints.http.dtos.catalog import (
    CarResponseDTO,
    DiscFilterOptionsResponseDTO,
    DiscResponseDTO,
    DiscsSearchQueryDTO,
    FittingCombinationResponseDTO,
)
from wheel_fitter.use_cases.search_discs import SearchDiscsRequest


class CatalogMapper:
    """Maps between REST DTOs and domain models for the car and disc catalog."""

    @staticmethod
    def to_domain_filters(dto: DiscsSearchQueryDTO) -> DiscFilters:
        """
        Converts query params to domain filters.

        Blank parameters were already dropped by the DTO; pcd is trimmed.
        """
        return DiscFilters(
            diameter=dto.diameter,
            width=dto.width,
            pcd=dto.pcd.strip() if dto.pcd else None,
            et=dto.et,
        )

    @staticmethod
    def to_search_request(dto: DiscsSearchQueryDTO) -> SearchDiscsRequest:
        return SearchDiscsRequest(filters=CatalogMapper.to_domain_filters(dto))

    @staticmethod
    def to_combination_response(combination: FittingCombination) -> FittingCombinationResponseDTO:
        return FittingCombinationResponseDTO(
            disc_brand=combination.disc_brand,
            disc_diameter=combination.disc_diameter,
            predefined_image=str(combination.result_image) if combination.result_image else None,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Image references are emitted as stored: a URL or a data URI.
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            image=str(car.image) if car.image else None,
            predefined_combinations=[
                CatalogMapper.to_combination_response(combination)
                for combination in car.fitting_combinations
            ],
        )

    @staticmethod
    def to_disc_response(disc: Disc) -> DiscResponseDTO:
        """Converts domain Disc to REST response DTO (Decimal → str at boundary)."""
        return DiscResponseDTO(
            id=disc.id,
            brand=disc.brand,
            diameter=disc.diameter,
            width=disc.width,
            pcd=disc.pcd,
            et=disc.et,
            dia=disc.dia,
            price=str(disc.price),
            image_url=str(disc.image_url) if disc.image_url else None,
        )

    @staticmethod
    def to_filter_options_response(options: DiscFilterOptions) -> DiscFilterOptionsResponseDTO:
        return DiscFilterOptionsResponseDTO(
            diameters=options.diameters,
            widths=options.widths,
            pcds=options.pcds,
            ets=options.ets,
        )
