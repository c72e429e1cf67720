from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from vehicle_inventory.domain.errors import NotFoundError, ValidationError
from vehicle_inventory.domain.portal_package import PortalPackage
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository
from vehicle_inventory.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SavePortalPackagesRequest:
    packages: list[PortalPackage]


@dataclass(frozen=True, slots=True)
class SavePortalPackagesResponse:
    packages: list[PortalPackage]


class SavePortalPackages:
    """
    Save a batch of packages, possibly spanning several vehicles, atomically.

    Policy: per-(vehicle, portal) upsert. Portals that a batch does not
    mention keep their current package; nothing is cleared implicitly.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        portal_package_repository: PortalPackageRepository,
    ) -> None:
        self._vehicles = vehicle_repository
        self._packages = portal_package_repository

    def execute(self, request: SavePortalPackagesRequest) -> SavePortalPackagesResponse:
        """
        Raises:
            ValidationError: If the batch is empty or names a (vehicle, portal) pair twice
            NotFoundError: If any referenced vehicle does not exist
        """
        packages = request.packages
        if not packages:
            raise ValidationError(
                errors=[
                    {
                        "field": "packages",
                        "message": "At least one package must be provided",
                        "code": "REQUIRED",
                    }
                ]
            )

        key_counts = Counter(package.key for package in packages)
        duplicated = [key for key, count in key_counts.items() if count > 1]
        if duplicated:
            raise ValidationError(
                errors=[
                    {
                        "field": "packages",
                        "message": (
                            f"Vehicle {vehicle_id} has more than one package for portal "
                            f"{portal.name.lower()}"
                        ),
                        "code": "DUPLICATE",
                    }
                    for vehicle_id, portal in duplicated
                ]
            )

        vehicle_ids = list(dict.fromkeys(package.vehicle_id for package in packages))
        for vehicle_id in vehicle_ids:
            if not self._vehicles.exists(vehicle_id):
                raise NotFoundError(resource="Vehicle", identifier=vehicle_id)

        stored = self._packages.upsert_many(packages)

        logger.info(
            "Portal packages saved",
            extra={"vehicle_ids": vehicle_ids, "packages": len(stored)},
        )
        return SavePortalPackagesResponse(packages=stored)
