from __future__ import annotations

from dataclasses import dataclass

from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.domain.vehicle_filters import VehicleFilters
from vehicle_inventory.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class SearchVehiclesRequest:
    filters: VehicleFilters


@dataclass(frozen=True, slots=True)
class SearchVehiclesResponse:
    vehicles: list[Vehicle]


class SearchVehicles:
    """
    Vehicle search with optional, AND-combined filters.

    This use case validates the filters and delegates filtering to the
    repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: SearchVehiclesRequest) -> SearchVehiclesResponse:
        """
        Execute vehicle search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Raises:
            FilterValidationError: If filter ranges are inverted
        """
        request.filters.validate()

        return SearchVehiclesResponse(vehicles=self._repository.search(request.filters))
