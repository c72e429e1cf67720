from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_inventory.domain.errors import InternalError, NotFoundError
from vehicle_inventory.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteVehicleRequest:
    vehicle_id: int


class DeleteVehicle:
    """Delete a vehicle together with its photos, optional links and packages."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: DeleteVehicleRequest) -> None:
        """
        Raises:
            NotFoundError: If the vehicle does not exist
            InternalError: If the repository could not delete a vehicle it reported as existing
        """
        if not self._repository.exists(request.vehicle_id):
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        if not self._repository.delete(request.vehicle_id):
            raise InternalError(
                "Vehicle could not be deleted",
                vehicle_id=request.vehicle_id,
            )

        logger.info("Vehicle deleted", extra={"vehicle_id": request.vehicle_id})
