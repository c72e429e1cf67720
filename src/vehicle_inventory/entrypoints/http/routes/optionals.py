from fastapi import APIRouter, Depends

from vehicle_inventory.entrypoints.http.dependencies import get_list_optional_equipment_use_case
from vehicle_inventory.entrypoints.http.dtos.optionals import OptionalEquipmentResponseDTO
from vehicle_inventory.use_cases.list_optional_equipment import ListOptionalEquipment


router = APIRouter(tags=["Optional Equipment"])


@router.get(
    "/optionals",
    response_model=list[OptionalEquipmentResponseDTO],
    summary="List optional equipment",
    description="Catalog of optional equipment a vehicle can reference, ordered by name.",
)
def list_optionals(
    use_case: ListOptionalEquipment = Depends(get_list_optional_equipment_use_case),
) -> list[OptionalEquipmentResponseDTO]:
    result = use_case.execute()
    return [
        OptionalEquipmentResponseDTO(id=optional.id, name=optional.name)
        for optional in result.optionals
    ]
