from __future__ import annotations

import pytest

from vehicle_inventory.adapters.in_memory_optional_equipment_repository import (
    InMemoryOptionalEquipmentRepository,
)
from vehicle_inventory.domain.errors import ValidationError
from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.use_cases.list_optional_equipment import ListOptionalEquipment
from vehicle_inventory.use_cases.optional_lookup import resolve_optional_equipment


@pytest.fixture()
def repository() -> InMemoryOptionalEquipmentRepository:
    return InMemoryOptionalEquipmentRepository()


def test_list_returns_catalog_by_name(repository: InMemoryOptionalEquipmentRepository) -> None:
    result = ListOptionalEquipment(optional_equipment_repository=repository).execute()

    assert [o.name for o in result.optionals] == [
        "ABS Brakes",
        "Air Conditioning",
        "Airbag",
        "Alarm",
    ]


def test_resolve_keeps_requested_order(repository: InMemoryOptionalEquipmentRepository) -> None:
    assert resolve_optional_equipment(repository, [4, 2]) == [
        OptionalEquipment(id=4, name="ABS Brakes"),
        OptionalEquipment(id=2, name="Alarm"),
    ]


def test_resolve_reports_every_unknown_id(repository: InMemoryOptionalEquipmentRepository) -> None:
    with pytest.raises(ValidationError) as exc_info:
        resolve_optional_equipment(repository, [5, 1, 6])

    assert [e["message"] for e in exc_info.value.errors or []] == [
        "Optional equipment with id 5 not found",
        "Optional equipment with id 6 not found",
    ]
