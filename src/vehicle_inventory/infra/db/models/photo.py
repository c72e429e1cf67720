from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vehicle_inventory.infra.db.models.base import Base

if TYPE_CHECKING:
    from vehicle_inventory.infra.db.models.vehicle import VehicleRow


class PhotoRow(Base):
    __tablename__ = "vehicle_photos"
    __table_args__ = (
        UniqueConstraint("vehicle_id", "display_order", name="uq_vehicle_photos_vehicle_order"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_base64: Mapped[str] = mapped_column(Text, nullable=False)
    filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    vehicle: Mapped[VehicleRow] = relationship(back_populates="photos")
