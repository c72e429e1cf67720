from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from vehicle_inventory.domain.portal_package import PackageTier, Portal, PortalPackage


@dataclass
class PackageSelection:
    """
    Editable package choice for one vehicle: at most one tier per portal.

    Selecting a tier replaces any other tier on the same portal; clearing a
    checkbox clears the portal.
    """

    tiers: dict[Portal, PackageTier | None] = field(
        default_factory=lambda: {portal: None for portal in Portal}
    )

    @classmethod
    def from_packages(cls, packages: Iterable[PortalPackage]) -> PackageSelection:
        selection = cls()
        for package in packages:
            selection.tiers[package.portal] = package.tier
        return selection

    def tier_for(self, portal: Portal) -> PackageTier | None:
        return self.tiers.get(portal)

    def is_selected(self, portal: Portal, tier: PackageTier) -> bool:
        return self.tiers.get(portal) == tier

    def toggle(self, portal: Portal, tier: PackageTier, checked: bool) -> None:
        self.tiers[portal] = tier if checked else None

    def to_requests(self, vehicle_id: int) -> list[PortalPackage]:
        """Packages to send for the selected portals; cleared portals are left out."""
        return [
            PortalPackage(vehicle_id=vehicle_id, portal=portal, tier=tier)
            for portal, tier in sorted(self.tiers.items())
            if tier is not None
        ]

    def differs_from(self, packages: Iterable[PortalPackage]) -> bool:
        return self.tiers != PackageSelection.from_packages(packages).tiers


def collect_requests(selections: Mapping[int, PackageSelection]) -> list[PortalPackage]:
    """Flatten per-vehicle selections into one bulk-save batch."""
    requests: list[PortalPackage] = []
    for vehicle_id, selection in selections.items():
        requests.extend(selection.to_requests(vehicle_id))
    return requests
