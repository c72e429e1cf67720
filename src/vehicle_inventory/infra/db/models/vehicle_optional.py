from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vehicle_inventory.infra.db.models.base import Base
from vehicle_inventory.infra.db.models.optional_equipment import OptionalEquipmentRow

if TYPE_CHECKING:
    from vehicle_inventory.infra.db.models.vehicle import VehicleRow


class VehicleOptionalRow(Base):
    """Pure link row between a vehicle and a catalog entry."""

    __tablename__ = "vehicle_optionals"

    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), primary_key=True
    )
    optional_id: Mapped[int] = mapped_column(
        ForeignKey("optional_equipment.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    vehicle: Mapped[VehicleRow] = relationship(back_populates="optional_links")
    optional: Mapped[OptionalEquipmentRow] = relationship()
