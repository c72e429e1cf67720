from __future__ import annotations

from dataclasses import dataclass

from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository


@dataclass(frozen=True, slots=True)
class ListOptionalEquipmentResponse:
    optionals: list[OptionalEquipment]


class ListOptionalEquipment:
    def __init__(self, optional_equipment_repository: OptionalEquipmentRepository) -> None:
        self._repository = optional_equipment_repository

    def execute(self) -> ListOptionalEquipmentResponse:
        return ListOptionalEquipmentResponse(optionals=self._repository.list_all())
