from __future__ import annotations

from dataclasses import replace

from vehicle_inventory.domain.portal_package import Portal, PortalPackage
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository


class InMemoryPortalPackageRepository(PortalPackageRepository):
    """
    Canonical contract implementation for tests.

    - Keys packages by (vehicle_id, portal), so one tier per portal per vehicle
    - Assigns increasing integer ids on insert
    """

    def __init__(self, packages: list[PortalPackage] | None = None) -> None:
        self._packages: dict[int, PortalPackage] = {}
        self._next_id = 1
        for package in packages or []:
            self.upsert(package)

    def list_for_vehicle(self, vehicle_id: int) -> list[PortalPackage]:
        return sorted(
            (p for p in self._packages.values() if p.vehicle_id == vehicle_id),
            key=lambda p: p.portal,
        )

    def get_by_id(self, package_id: int) -> PortalPackage | None:
        return self._packages.get(package_id)

    def find(self, vehicle_id: int, portal: Portal) -> PortalPackage | None:
        for package in self._packages.values():
            if package.key == (vehicle_id, portal):
                return package
        return None

    def upsert(self, package: PortalPackage) -> tuple[PortalPackage, bool]:
        existing = self.find(package.vehicle_id, package.portal)
        if existing is not None:
            stored = replace(existing, tier=package.tier)
            self._packages[stored.id] = stored  # type: ignore[index]
            return stored, False

        stored = replace(package, id=self._next_id)
        self._next_id += 1
        self._packages[stored.id] = stored  # type: ignore[index]
        return stored, True

    def upsert_many(self, packages: list[PortalPackage]) -> list[PortalPackage]:
        return [self.upsert(package)[0] for package in packages]

    def delete(self, package_id: int) -> bool:
        return self._packages.pop(package_id, None) is not None

    def delete_for_vehicle(self, vehicle_id: int) -> None:
        for package in self.list_for_vehicle(vehicle_id):
            self.delete(package.id)  # type: ignore[arg-type]
