from __future__ import annotations

from collections.abc import Iterable

from vehicle_inventory.domain.vehicle import DEFAULT_OPTIONAL_EQUIPMENT, OptionalEquipment
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository


class InMemoryOptionalEquipmentRepository(OptionalEquipmentRepository):
    """Canonical contract implementation for tests, seeded with the default catalog."""

    def __init__(self, optionals: list[OptionalEquipment] | None = None) -> None:
        if optionals is None:
            optionals = [
                OptionalEquipment(id=index, name=name)
                for index, name in enumerate(DEFAULT_OPTIONAL_EQUIPMENT, start=1)
            ]
        self._optionals = {optional.id: optional for optional in optionals}

    def list_all(self) -> list[OptionalEquipment]:
        return sorted(self._optionals.values(), key=lambda optional: optional.name)

    def exists(self, optional_id: int) -> bool:
        return optional_id in self._optionals

    def get_by_ids(self, optional_ids: Iterable[int]) -> list[OptionalEquipment]:
        return [self._optionals[i] for i in optional_ids if i in self._optionals]
