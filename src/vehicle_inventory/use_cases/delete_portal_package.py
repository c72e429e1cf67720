from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletePortalPackageRequest:
    package_id: int


class DeletePortalPackage:
    def __init__(self, portal_package_repository: PortalPackageRepository) -> None:
        self._repository = portal_package_repository

    def execute(self, request: DeletePortalPackageRequest) -> None:
        """
        Raises:
            NotFoundError: If no package has the given ID
        """
        if not self._repository.delete(request.package_id):
            raise NotFoundError(resource="PortalPackage", identifier=request.package_id)

        logger.info("Portal package deleted", extra={"package_id": request.package_id})
