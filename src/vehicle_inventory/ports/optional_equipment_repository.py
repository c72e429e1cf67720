from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from vehicle_inventory.domain.vehicle import OptionalEquipment


class OptionalEquipmentRepository(ABC):
    """Port for the optional-equipment catalog (read-only)."""

    @abstractmethod
    def list_all(self) -> list[OptionalEquipment]:
        """Return the whole catalog ordered by name."""
        ...

    @abstractmethod
    def exists(self, optional_id: int) -> bool: ...

    @abstractmethod
    def get_by_ids(self, optional_ids: Iterable[int]) -> list[OptionalEquipment]:
        """Return the catalog entries for the given ids; unknown ids are skipped."""
        ...
