from __future__ import annotations

from dataclasses import dataclass

from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListVehiclesResponse:
    vehicles: list[Vehicle]


class ListVehicles:
    """List every vehicle, most recently registered first."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> ListVehiclesResponse:
        return ListVehiclesResponse(vehicles=self._repository.get_all())
