from __future__ import annotations

from dataclasses import dataclass

from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.domain.portal_package import PortalPackage
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository
from vehicle_inventory.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListVehiclePackagesRequest:
    vehicle_id: int


@dataclass(frozen=True, slots=True)
class ListVehiclePackagesResponse:
    packages: list[PortalPackage]


class ListVehiclePackages:
    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        portal_package_repository: PortalPackageRepository,
    ) -> None:
        self._vehicles = vehicle_repository
        self._packages = portal_package_repository

    def execute(self, request: ListVehiclePackagesRequest) -> ListVehiclePackagesResponse:
        if not self._vehicles.exists(request.vehicle_id):
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return ListVehiclePackagesResponse(
            packages=self._packages.list_for_vehicle(request.vehicle_id)
        )
