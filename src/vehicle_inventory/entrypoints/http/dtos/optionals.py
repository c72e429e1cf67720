from vehicle_inventory.entrypoints.http.dtos.base import CamelModel


class OptionalEquipmentResponseDTO(CamelModel):
    id: int
    name: str
