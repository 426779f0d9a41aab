"""PostgreSQL implementation of CarRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from wheel_fitter.domain.car import Car, FittingCombination
from wheel_fitter.domain.images import parse_image_ref
from wheel_fitter.infra.db.models.car import CarRow
from wheel_fitter.infra.db.session import store_errors
from wheel_fitter.ports.car_repository import CarRepository


class PostgresCarRepository(CarRepository):
    """
    PostgreSQL implementation of CarRepository.

    - Uses SQLAlchemy ORM for database access
    - Fitting combinations live in a JSONB column on the car row
    - Converts CarRow (infrastructure) to Car (domain)
    - SQLAlchemy failures surface as StoreError
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_all(self) -> list[Car]:
        with store_errors("listing cars"):
            rows = self._session.execute(select(CarRow)).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Args:
            car_id: Car ID (expected to be a valid UUID string)

        Returns:
            Car entity if found, None otherwise (including malformed IDs)
        """
        try:
            key = UUID(car_id)
        except ValueError:
            return None

        with store_errors("loading car"):
            row = self._session.execute(select(CarRow).where(CarRow.id == key)).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: CarRow) -> Car:
        """Convert database model (CarRow) to domain entity (Car)."""
        return Car(
            id=str(row.id),
            make=row.make,
            model=row.model,
            image=parse_image_ref(row.image),
            fitting_combinations=tuple(
                self._combination_to_domain(document) for document in row.fitting_combinations or []
            ),
        )

    @staticmethod
    def _combination_to_domain(document: dict[str, Any]) -> FittingCombination:
        # Older rows stored the render under "predefined_image_url"
        image = document.get("predefined_image") or document.get("predefined_image_url")
        return FittingCombination(
            disc_brand=document.get("disc_brand", ""),
            disc_diameter=document.get("disc_diameter", 0),
            result_image=parse_image_ref(image),
        )
