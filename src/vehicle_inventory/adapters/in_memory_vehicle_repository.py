from __future__ import annotations

from dataclasses import replace
from typing import Callable

from vehicle_inventory.adapters.in_memory_portal_package_repository import (
    InMemoryPortalPackageRepository,
)
from vehicle_inventory.domain.clock import Clock, utcnow
from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.domain.vehicle import Photo, Vehicle
from vehicle_inventory.domain.vehicle_filters import PhotoPresence, VehicleFilters
from vehicle_inventory.ports.vehicle_repository import VehicleRepository

Predicate = Callable[[Vehicle], bool]


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Assigns increasing integer ids to vehicles and photos
    - Orders listings by registration timestamp, newest first (id breaks ties)
    - Applies AND-semantics filtering through a list of predicate closures
    - Resolves and cascades portal packages when a package repository is given
    """

    def __init__(
        self,
        vehicles: list[Vehicle] | None = None,
        packages: InMemoryPortalPackageRepository | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self._vehicles: dict[int, Vehicle] = {}
        self._packages = packages
        self._clock = clock
        self._next_id = 1
        self._next_photo_id = 1
        for vehicle in vehicles or []:
            self.add(vehicle)

    def exists(self, vehicle_id: int) -> bool:
        return vehicle_id in self._vehicles

    def plate_exists(self, plate: str, exclude_id: int | None = None) -> bool:
        return any(
            vehicle.plate == plate and vehicle.id != exclude_id
            for vehicle in self._vehicles.values()
        )

    def get_all(self) -> list[Vehicle]:
        return self._ordered(self._vehicles.values())

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        vehicle = self._vehicles.get(vehicle_id)
        return self._with_packages(vehicle) if vehicle else None

    def get_by_plate(self, plate: str) -> Vehicle | None:
        for vehicle in self._vehicles.values():
            if vehicle.plate == plate:
                return self._with_packages(vehicle)
        return None

    def search(self, filters: VehicleFilters) -> list[Vehicle]:
        # Trust that UseCase has validated inputs (contract programming)
        predicates = self._predicates(filters)
        return self._ordered(
            vehicle
            for vehicle in self._vehicles.values()
            if all(predicate(vehicle) for predicate in predicates)
        )

    def add(self, vehicle: Vehicle) -> Vehicle:
        stored = replace(
            vehicle,
            id=self._next_id,
            registered_at=vehicle.registered_at or self._clock(),
            photos=self._with_photo_ids(vehicle.photos),
            packages=[],
        )
        self._next_id += 1
        self._vehicles[stored.id] = stored  # type: ignore[index]
        return self._with_packages(stored)

    def update(self, vehicle: Vehicle) -> Vehicle:
        if vehicle.id not in self._vehicles:
            raise NotFoundError(resource="Vehicle", identifier=vehicle.id)

        stored = replace(
            vehicle,
            registered_at=self._vehicles[vehicle.id].registered_at,
            updated_at=self._clock(),
            photos=self._with_photo_ids(vehicle.photos),
            packages=[],
        )
        self._vehicles[vehicle.id] = stored
        return self._with_packages(stored)

    def delete(self, vehicle_id: int) -> bool:
        if self._vehicles.pop(vehicle_id, None) is None:
            return False
        if self._packages is not None:
            self._packages.delete_for_vehicle(vehicle_id)
        return True

    def _predicates(self, filters: VehicleFilters) -> list[Predicate]:
        predicates: list[Predicate] = []

        def contains(attribute: str, needle: str) -> Predicate:
            return lambda v: needle.lower() in getattr(v, attribute).lower()

        for attribute in ("plate", "make", "model", "color"):
            needle = getattr(filters, attribute)
            if needle is not None:
                predicates.append(contains(attribute, needle))

        if filters.year_min is not None:
            predicates.append(lambda v: v.year >= filters.year_min)
        if filters.year_max is not None:
            predicates.append(lambda v: v.year <= filters.year_max)
        if filters.price_min is not None:
            predicates.append(lambda v: v.price >= filters.price_min)
        if filters.price_max is not None:
            predicates.append(lambda v: v.price <= filters.price_max)

        if filters.optional_names is not None:
            names = filters.optional_names
            predicates.append(lambda v: any(o.name in names for o in v.optionals))

        if filters.photos is PhotoPresence.WITH_PHOTOS:
            predicates.append(lambda v: v.has_photos)
        elif filters.photos is PhotoPresence.WITHOUT_PHOTOS:
            predicates.append(lambda v: not v.has_photos)

        return predicates

    def _ordered(self, vehicles) -> list[Vehicle]:
        ordered = sorted(vehicles, key=lambda v: (v.registered_at, v.id), reverse=True)
        return [self._with_packages(vehicle) for vehicle in ordered]

    def _with_photo_ids(self, photos: list[Photo]) -> list[Photo]:
        stored = []
        for photo in sorted(photos, key=lambda p: p.order):
            if photo.id is None:
                photo = replace(photo, id=self._next_photo_id)
                self._next_photo_id += 1
            stored.append(photo)
        return stored

    def _with_packages(self, vehicle: Vehicle) -> Vehicle:
        if self._packages is None:
            return vehicle
        return replace(vehicle, packages=self._packages.list_for_vehicle(vehicle.id))  # type: ignore[arg-type]
