from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from vehicle_inventory.domain.clock import Clock, utcnow
from vehicle_inventory.domain.errors import ConflictError, NotFoundError
from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.domain.vehicle_input import VehicleChanges
from vehicle_inventory.ports.optional_equipment_repository import OptionalEquipmentRepository
from vehicle_inventory.ports.vehicle_repository import VehicleRepository
from vehicle_inventory.use_cases.optional_lookup import resolve_optional_equipment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: int
    changes: VehicleChanges


@dataclass(frozen=True, slots=True)
class UpdateVehicleResponse:
    vehicle: Vehicle


class UpdateVehicle:
    """
    Replace a vehicle's fields, optional equipment and photo set.

    - Scalars are overwritten from the payload
    - Optional equipment is replaced wholesale (no diffing)
    - Photos listed in photos_to_remove are detached
    - Photos in the payload without an id are appended, stamped with the
      current time; photos that carry an id are left as they are
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

    def execute(self, request: UpdateVehicleRequest) -> UpdateVehicleResponse:
        """
        Raises:
            ValidationError: If the payload breaks a field rule or references unknown optionals
            NotFoundError: If the vehicle does not exist
            ConflictError: If the plate belongs to another vehicle, or a new
                           photo reuses the display order of a kept photo
        """
        changes = request.changes
        now = self._clock()

        changes.validate(current_year=now.year)

        existing = self._vehicles.get_by_id(request.vehicle_id)
        if existing is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        if self._vehicles.plate_exists(changes.plate or "", exclude_id=request.vehicle_id):
            raise ConflictError(
                f"Another vehicle with plate {changes.plate} is already registered",
                field="plate",
            )

        optionals = resolve_optional_equipment(self._optionals, changes.optional_ids)

        removed_ids = set(changes.photos_to_remove)
        kept_photos = [photo for photo in existing.photos if photo.id not in removed_ids]
        new_photos = [photo.to_photo(uploaded_at=now) for photo in changes.new_photos]

        taken_orders = {photo.order for photo in kept_photos}
        clashing = sorted(photo.order for photo in new_photos if photo.order in taken_orders)
        if clashing:
            raise ConflictError(
                f"Display order already used by another photo of this vehicle: {clashing}",
                field="photos",
            )

        updated = replace(
            existing,
            make=changes.make or "",
            model=changes.model or "",
            year=changes.year or 0,
            plate=changes.plate or "",
            odometer_km=changes.odometer_km,
            color=changes.color or "",
            price=changes.price if changes.price is not None else existing.price,
            optionals=optionals,
            photos=kept_photos + new_photos,
        )

        vehicle = self._vehicles.update(updated)

        logger.info(
            "Vehicle updated",
            extra={
                "vehicle_id": vehicle.id,
                "photos_removed": len(existing.photos) - len(kept_photos),
                "photos_added": len(new_photos),
            },
        )
        return UpdateVehicleResponse(vehicle=vehicle)
