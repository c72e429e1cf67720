"""
Client-side vehicle list cache.

The cached list is loaded on demand, dropped with invalidate(), and patched
in place after each successful write so callers do not have to refetch.
Subscribers are called with a copy of the list whenever it changes.
Single-threaded; no locking.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from vehicle_inventory.client.http_client import VehicleInventoryClient
from vehicle_inventory.domain.portal_package import PortalPackage
from vehicle_inventory.domain.vehicle import Vehicle
from vehicle_inventory.domain.vehicle_input import VehicleChanges, VehicleDraft

Subscriber = Callable[[list[Vehicle]], None]


class VehicleCache:
    def __init__(self, client: VehicleInventoryClient) -> None:
        self._client = client
        self._vehicles: list[Vehicle] | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def is_loaded(self) -> bool:
        return self._vehicles is not None

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles or [])

    def fetch(self, force: bool = False) -> list[Vehicle]:
        """Return the cached list, loading it first if needed or when forced."""
        if self._vehicles is None or force:
            self._vehicles = self._client.list_vehicles()
            self._notify()
        return self.vehicles

    def invalidate(self) -> None:
        self._vehicles = None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def create(self, draft: VehicleDraft) -> Vehicle:
        vehicle = self._client.create_vehicle(draft)
        if self._vehicles is not None:
            # Newest registration first, same as the server ordering
            self._vehicles.insert(0, vehicle)
            self._notify()
        return vehicle

    def update(self, vehicle_id: int, changes: VehicleChanges) -> Vehicle:
        vehicle = self._client.update_vehicle(vehicle_id, changes)
        if self._vehicles is not None:
            self._vehicles = [vehicle if v.id == vehicle_id else v for v in self._vehicles]
            self._notify()
        return vehicle

    def delete(self, vehicle_id: int) -> None:
        self._client.delete_vehicle(vehicle_id)
        if self._vehicles is not None:
            self._vehicles = [v for v in self._vehicles if v.id != vehicle_id]
            self._notify()

    def save_packages(self, packages: list[PortalPackage]) -> list[PortalPackage]:
        """Bulk-save packages and merge the stored ones into the cached vehicles."""
        saved = self._client.save_packages(packages)
        if self._vehicles is not None and saved:
            by_vehicle: dict[int, list[PortalPackage]] = {}
            for package in saved:
                by_vehicle.setdefault(package.vehicle_id, []).append(package)
            self._vehicles = [
                self._merge_packages(vehicle, by_vehicle[vehicle.id])
                if vehicle.id in by_vehicle
                else vehicle
                for vehicle in self._vehicles
            ]
            self._notify()
        return saved

    @staticmethod
    def _merge_packages(vehicle: Vehicle, saved: list[PortalPackage]) -> Vehicle:
        # Saved portals replace their previous package; others are untouched
        portals = {package.portal for package in saved}
        kept = [package for package in vehicle.packages if package.portal not in portals]
        return replace(vehicle, packages=sorted(kept + saved, key=lambda p: p.portal))

    def _notify(self) -> None:
        snapshot = self.vehicles
        for callback in list(self._subscribers):
            callback(snapshot)
