"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: int


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle aggregate by ID.

    Responsibilities:
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Raises:
            NotFoundError: If no vehicle has the given ID
        """
        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
