from __future__ import annotations

from abc import ABC, abstractmethod

from vehicle_inventory.domain.portal_package import Portal, PortalPackage


class PortalPackageRepository(ABC):
    """
    Port for per-portal advertising packages.

    Invariant: at most one package per (vehicle, portal) pair. Saving is an
    upsert keyed on that pair.
    """

    @abstractmethod
    def list_for_vehicle(self, vehicle_id: int) -> list[PortalPackage]: ...

    @abstractmethod
    def get_by_id(self, package_id: int) -> PortalPackage | None: ...

    @abstractmethod
    def find(self, vehicle_id: int, portal: Portal) -> PortalPackage | None: ...

    @abstractmethod
    def upsert(self, package: PortalPackage) -> tuple[PortalPackage, bool]:
        """
        Insert or overwrite the tier for (vehicle, portal).

        Returns:
            The stored package and True when a new row was inserted
        """
        ...

    @abstractmethod
    def upsert_many(self, packages: list[PortalPackage]) -> list[PortalPackage]:
        """
        Upsert every package as one atomic unit.

        Portals not listed for a vehicle are left untouched.
        """
        ...

    @abstractmethod
    def delete(self, package_id: int) -> bool: ...
