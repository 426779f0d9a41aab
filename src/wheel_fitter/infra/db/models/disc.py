from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Float, Integer, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from wheel_fitter.infra.db.models.base import Base


class DiscRow(Base):
    __tablename__ = "discs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    brand: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    diameter: Mapped[int] = mapped_column(Integer, nullable=False, index=True)  # inches
    width: Mapped[float] = mapped_column(Float, nullable=False)  # inches, e.g. 8.5
    pcd: Mapped[str] = mapped_column(String(20), nullable=False)  # "5x114.3"
    et: Mapped[int] = mapped_column(Integer, nullable=False)  # offset, mm
    dia: Mapped[float] = mapped_column(Float, nullable=False)  # center bore, mm

    price: Mapped[Decimal] = mapped_column(Numeric(precision=10, scale=2), nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
