from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vehicle_inventory.infra.db.models.base import Base

if TYPE_CHECKING:
    from vehicle_inventory.infra.db.models.vehicle import VehicleRow


class PortalPackageRow(Base):
    __tablename__ = "portal_packages"
    __table_args__ = (
        UniqueConstraint("vehicle_id", "portal", name="uq_portal_packages_vehicle_portal"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Portal and PackageTier enum values
    portal: Mapped[int] = mapped_column(Integer, nullable=False)
    tier: Mapped[int] = mapped_column(Integer, nullable=False)

    vehicle: Mapped[VehicleRow] = relationship(back_populates="packages")
