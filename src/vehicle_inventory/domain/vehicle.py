from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from vehicle_inventory.domain.portal_package import PortalPackage


DEFAULT_OPTIONAL_EQUIPMENT = ("Air Conditioning", "Alarm", "Airbag", "ABS Brakes")


@dataclass(frozen=True, slots=True)
class OptionalEquipment:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Photo:
    image_base64: str
    order: int
    filename: str | None = None
    id: int | None = None  # None until persisted
    uploaded_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class Vehicle:
    """
    Vehicle aggregate.

    Owns its photos (ordered by display order), its optional-equipment links
    and its portal packages. Collections are replaced as a whole when the
    aggregate changes; use dataclasses.replace to derive a new version.
    """

    make: str
    model: str
    year: int
    plate: str
    color: str
    price: Decimal
    odometer_km: int | None = None
    id: int | None = None  # None until persisted
    registered_at: datetime | None = None
    updated_at: datetime | None = None
    photos: list[Photo] = field(default_factory=list)
    optionals: list[OptionalEquipment] = field(default_factory=list)
    packages: list[PortalPackage] = field(default_factory=list)

    @property
    def optional_ids(self) -> list[int]:
        return [optional.id for optional in self.optionals]

    @property
    def has_photos(self) -> bool:
        return len(self.photos) > 0
