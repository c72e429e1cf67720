from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vehicle_inventory.infra.db.models.base import Base

if TYPE_CHECKING:
    from vehicle_inventory.infra.db.models.photo import PhotoRow
    from vehicle_inventory.infra.db.models.portal_package import PortalPackageRow
    from vehicle_inventory.infra.db.models.vehicle_optional import VehicleOptionalRow


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    plate: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    odometer_km: Mapped[int | None] = mapped_column(Integer, nullable=True)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=18, scale=2), nullable=False
    )

    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    photos: Mapped[list[PhotoRow]] = relationship(
        back_populates="vehicle",
        cascade="all, delete-orphan",
        order_by="PhotoRow.display_order",
    )
    optional_links: Mapped[list[VehicleOptionalRow]] = relationship(
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )
    packages: Mapped[list[PortalPackageRow]] = relationship(
        back_populates="vehicle",
        cascade="all, delete-orphan",
        order_by="PortalPackageRow.portal",
    )
