from vehicle_inventory.infra.db.models.base import Base
from vehicle_inventory.infra.db.models.optional_equipment import OptionalEquipmentRow
from vehicle_inventory.infra.db.models.photo import PhotoRow
from vehicle_inventory.infra.db.models.portal_package import PortalPackageRow
from vehicle_inventory.infra.db.models.vehicle import VehicleRow
from vehicle_inventory.infra.db.models.vehicle_optional import VehicleOptionalRow

__all__ = [
    "Base",
    "OptionalEquipmentRow",
    "PhotoRow",
    "PortalPackageRow",
    "VehicleOptionalRow",
    "VehicleRow",
]
