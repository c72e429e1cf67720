from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Portal(IntEnum):
    """Listing portals a vehicle can be advertised on."""

    ICARROS = 1
    WEBMOTORS = 2


class PackageTier(IntEnum):
    """Advertising package tiers, ordered from lowest to highest."""

    BASIC = 1
    BRONZE = 2
    DIAMOND = 3
    PLATINUM = 4


@dataclass(frozen=True, slots=True)
class PortalPackage:
    """The single active tier of a vehicle on one portal."""

    vehicle_id: int
    portal: Portal
    tier: PackageTier
    id: int | None = None  # None until persisted

    @property
    def key(self) -> tuple[int, Portal]:
        return (self.vehicle_id, self.portal)
