from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.domain.portal_package import PortalPackage
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository
from vehicle_inventory.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SavePortalPackageRequest:
    package: PortalPackage


@dataclass(frozen=True, slots=True)
class SavePortalPackageResponse:
    package: PortalPackage
    created: bool  # False when an existing (vehicle, portal) row was overwritten


class SavePortalPackage:
    """Set the active tier of one vehicle on one portal (upsert on the pair)."""

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        portal_package_repository: PortalPackageRepository,
    ) -> None:
        self._vehicles = vehicle_repository
        self._packages = portal_package_repository

    def execute(self, request: SavePortalPackageRequest) -> SavePortalPackageResponse:
        """
        Raises:
            NotFoundError: If the vehicle does not exist
        """
        package = request.package
        if not self._vehicles.exists(package.vehicle_id):
            raise NotFoundError(resource="Vehicle", identifier=package.vehicle_id)

        stored, created = self._packages.upsert(package)

        logger.info(
            "Portal package saved",
            extra={
                "vehicle_id": stored.vehicle_id,
                "portal": stored.portal.name,
                "tier": stored.tier.name,
                "created": created,
            },
        )
        return SavePortalPackageResponse(package=stored, created=created)
