from __future__ import annotations

from vehicle_inventory.domain.errors import ValidationError
from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository


def resolve_optional_equipment(
    repository: OptionalEquipmentRepository, optional_ids: list[int]
) -> list[OptionalEquipment]:
    """
    Load the catalog entries a payload refers to.

    Raises:
        ValidationError: If any id is not in the catalog (one error per unknown id)
    """
    found = repository.get_by_ids(optional_ids)
    known_ids = {optional.id for optional in found}
    unknown_ids = [optional_id for optional_id in optional_ids if optional_id not in known_ids]

    if unknown_ids:
        raise ValidationError(
            errors=[
                {
                    "field": "optional_ids",
                    "message": f"Optional equipment with id {optional_id} not found",
                    "code": "UNKNOWN_OPTIONAL",
                }
                for optional_id in unknown_ids
            ]
        )

    by_id = {optional.id: optional for optional in found}
    return [by_id[optional_id] for optional_id in optional_ids]
