from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_inventory.domain.clock import Clock, utcnow
from vehicle_inventory.domain.errors import ConflictError
from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.domain.vehicle_input import VehicleDraft
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository
from vehicle_inventory.ports.vehicle_repository import VehicleRepository
from vehicle_inventory.use_cases.optional_lookup import resolve_optional_equipment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    draft: VehicleDraft


@dataclass(frozen=True, slots=True)
class CreateVehicleResponse:
    vehicle: Vehicle


class CreateVehicle:
    """
    Register a new vehicle with its photos and optional equipment.

    Order of checks (nothing is written until all pass):
    1. Field rules on the draft (all violations reported together)
    2. Plate not used by any vehicle
    3. Every referenced optional equipment id exists
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        optional_equipment_repository: OptionalEquipmentRepository,
        clock: Clock = utcnow,
    ) -> None:
        self._vehicles = vehicle_repository
        self._optionals = optional_equipment_repository
        self._clock = clock

    def execute(self, request: CreateVehicleRequest) -> CreateVehicleResponse:
        """
        Raises:
            ValidationError: If the draft breaks a field rule or references unknown optionals
            ConflictError: If the plate is already registered
        """
        draft = request.draft
        now = self._clock()

        draft.validate(current_year=now.year)

        if self._vehicles.plate_exists(draft.plate or ""):
            raise ConflictError(
                f"A vehicle with plate {draft.plate} is already registered",
                field="plate",
            )

        optionals = resolve_optional_equipment(self._optionals, draft.optional_ids)

        vehicle = self._vehicles.add(draft.to_vehicle(optionals, uploaded_at=now))

        logger.info(
            "Vehicle created",
            extra={"vehicle_id": vehicle.id, "photos": len(vehicle.photos)},
        )
        return CreateVehicleResponse(vehicle=vehicle)
