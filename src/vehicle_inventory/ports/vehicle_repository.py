from __future__ import annotations

from abc import ABC, abstractmethod

from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.domain.vehicle_filters import VehicleFilters


class VehicleRepository(ABC):
    """
    Port for vehicle aggregate persistence.

    Every read returns fully loaded aggregates (photos, optional equipment with
    names resolved, portal packages). Listings are ordered by registration
    timestamp, most recent first.

    Contract (Preconditions):
        - filters must be pre-validated by caller (UseCase)
        - aggregates passed to add/update are pre-validated by caller
        - write operations are atomic: on failure nothing is persisted and the
          original exception propagates
    """

    @abstractmethod
    def exists(self, vehicle_id: int) -> bool: ...

    @abstractmethod
    def plate_exists(self, plate: str, exclude_id: int | None = None) -> bool:
        """
        Check whether a vehicle other than exclude_id holds this exact plate.

        Args:
            plate: Plate to look up (exact, case-sensitive match)
            exclude_id: Vehicle to ignore, used when updating that vehicle
        """
        ...

    @abstractmethod
    def get_all(self) -> list[Vehicle]: ...

    @abstractmethod
    def get_by_id(self, vehicle_id: int) -> Vehicle | None: ...

    @abstractmethod
    def get_by_plate(self, plate: str) -> Vehicle | None: ...

    @abstractmethod
    def search(self, filters: VehicleFilters) -> list[Vehicle]:
        """
        Search vehicles with AND-combined predicates.

        Precondition: filters must be validated by caller (UseCase).

        Returns:
            Matching vehicles, same ordering as get_all
        """
        ...

    @abstractmethod
    def add(self, vehicle: Vehicle) -> Vehicle:
        """Persist a new aggregate with its photos and optional links; returns it with ids assigned."""
        ...

    @abstractmethod
    def update(self, vehicle: Vehicle) -> Vehicle:
        """
        Persist a modified aggregate.

        Scalars are overwritten, optional links are replaced wholesale, stored
        photos missing from vehicle.photos are removed and photos without an id
        are inserted. The last-update timestamp is set to the current time.
        """
        ...

    @abstractmethod
    def delete(self, vehicle_id: int) -> bool:
        """Delete a vehicle and everything it owns. Returns False if it does not exist."""
        ...
