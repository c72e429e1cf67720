"""SQLAlchemy implementation of OptionalEquipmentRepository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.infra.db.models import OptionalEquipmentRow
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository


class SqlAlchemyOptionalEquipmentRepository(OptionalEquipmentRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[OptionalEquipment]:
        query = select(OptionalEquipmentRow).order_by(OptionalEquipmentRow.name)
        return [self._to_domain(row) for row in self._session.execute(query).scalars().all()]

    def exists(self, optional_id: int) -> bool:
        query = select(exists().where(OptionalEquipmentRow.id == optional_id))
        return bool(self._session.scalar(query))

    def get_by_ids(self, optional_ids: Iterable[int]) -> list[OptionalEquipment]:
        ids = list(optional_ids)
        if not ids:
            return []
        query = (
            select(OptionalEquipmentRow)
            .where(OptionalEquipmentRow.id.in_(ids))
            .order_by(OptionalEquipmentRow.id)
        )
        return [self._to_domain(row) for row in self._session.execute(query).scalars().all()]

    @staticmethod
    def _to_domain(row: OptionalEquipmentRow) -> OptionalEquipment:
        return OptionalEquipment(id=row.id, name=row.name)
