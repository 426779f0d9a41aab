"""PostgreSQL implementation of DiscRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from wheel_fitter.domain.disc import Disc, DiscFilters
from wheel_fitter.domain.images import parse_image_ref
from wheel_fitter.infra.db.models.disc import DiscRow
from wheel_fitter.infra.db.session import store_errors
from wheel_fitter.ports.disc_repository import DiscOptionField, DiscRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


_OPTION_COLUMNS = {
    "diameter": DiscRow.diameter,
    "width": DiscRow.width,
    "pcd": DiscRow.pcd,
    "et": DiscRow.et,
}


class PostgresDiscRepository(DiscRepository):
    """
    PostgreSQL implementation of DiscRepository.

    - Applies filters using SQL WHERE clauses
    - Distinct values come from SELECT DISTINCT over the whole table
    - Converts DiscRow (infrastructure) to Disc (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: DiscFilters, limit: int) -> list[Disc]:
        """
        Search discs with exact-match filters.

        Args:
            filters: Filter criteria (AND semantics) - must be pre-validated
            limit: Maximum number of discs to return

        Returns:
            Matching discs in table order
        """
        query = self._build_query(filters).limit(limit)

        with store_errors("searching discs"):
            rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, disc_id: str) -> Disc | None:
        try:
            key = UUID(disc_id)
        except ValueError:  # Invalid UUID format
            return None

        with store_errors("loading disc"):
            row = self._session.execute(select(DiscRow).where(DiscRow.id == key)).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def distinct_values(self, field: DiscOptionField) -> list[int | float | str]:
        column = _OPTION_COLUMNS[field]
        query = select(column).distinct().where(column.is_not(None))

        with store_errors(f"listing distinct disc {field} values"):
            return list(self._session.execute(query).scalars().all())

    def _build_query(self, filters: DiscFilters) -> Select[tuple[DiscRow]]:
        query = select(DiscRow)

        if filters.diameter is not None:
            query = query.where(DiscRow.diameter == filters.diameter)
        if filters.width is not None:
            query = query.where(DiscRow.width == filters.width)
        if filters.pcd is not None:
            query = query.where(DiscRow.pcd == filters.pcd)
        if filters.et is not None:
            query = query.where(DiscRow.et == filters.et)

        return query

    def _to_domain(self, row: DiscRow) -> Disc:
        return Disc(
            id=str(row.id),
            brand=row.brand,
            diameter=row.diameter,
            width=row.width,
            pcd=row.pcd,
            et=row.et,
            dia=row.dia,
            price=row.price,  # Already Decimal from NUMERIC column
            image_url=parse_image_ref(row.image_url),
        )
