"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Repositories and use cases are built per request on top of that session,
so every write a request makes commits or rolls back together.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from vehicle_inventory.adapters.sqlalchemy_optional_equipment_repository import (
    SqlAlchemyOptionalEquipmentRepository,
)
from vehicle_inventory.adapters.sqlalchemy_portal_package_repository import (
    SqlAlchemyPortalPackageRepository,
)
from vehicle_inventory.adapters.sqlalchemy_vehicle_repository import SqlAlchemyVehicleRepository
from vehicle_inventory.infra.db.session import get_session
from vehicle_inventory.use_cases.create_vehicle import CreateVehicle
from vehicle_inventory.use_cases.delete_portal_package import DeletePortalPackage
from vehicle_inventory.use_cases.delete_vehicle import DeleteVehicle
from vehicle_inventory.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_inventory.use_cases.list_optional_equipment import ListOptionalEquipment
from vehicle_inventory.use_cases.list_vehicle_packages import ListVehiclePackages
from vehicle_inventory.use_cases.list_vehicles import ListVehicles
from vehicle_inventory.use_cases.save_portal_package import SavePortalPackage
from vehicle_inventory.use_cases.save_portal_packages import SavePortalPackages
from vehicle_inventory.use_cases.search_vehicles import SearchVehicles
from vehicle_inventory.use_cases.update_vehicle import UpdateVehicle


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_list_vehicles_use_case(db: Session = Depends(get_db)) -> ListVehicles:
    return ListVehicles(vehicle_repository=SqlAlchemyVehicleRepository(session=db))


def get_vehicle_by_id_use_case(db: Session = Depends(get_db)) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=SqlAlchemyVehicleRepository(session=db))


def get_search_vehicles_use_case(db: Session = Depends(get_db)) -> SearchVehicles:
    return SearchVehicles(vehicle_repository=SqlAlchemyVehicleRepository(session=db))


def get_create_vehicle_use_case(db: Session = Depends(get_db)) -> CreateVehicle:
    """
    Factory function that returns a configured CreateVehicle use case.

    Both repositories share the request session, so the plate check, the
    optional lookup and the insert see the same transaction.
    """
    return CreateVehicle(
        vehicle_repository=SqlAlchemyVehicleRepository(session=db),
        optional_equipment_repository=SqlAlchemyOptionalEquipmentRepository(session=db),
    )


def get_update_vehicle_use_case(db: Session = Depends(get_db)) -> UpdateVehicle:
    return UpdateVehicle(
        vehicle_repository=SqlAlchemyVehicleRepository(session=db),
        optional_equipment_repository=SqlAlchemyOptionalEquipmentRepository(session=db),
    )


def get_delete_vehicle_use_case(db: Session = Depends(get_db)) -> DeleteVehicle:
    return DeleteVehicle(vehicle_repository=SqlAlchemyVehicleRepository(session=db))


def get_list_optional_equipment_use_case(
    db: Session = Depends(get_db),
) -> ListOptionalEquipment:
    return ListOptionalEquipment(
        optional_equipment_repository=SqlAlchemyOptionalEquipmentRepository(session=db)
    )


def get_save_portal_package_use_case(db: Session = Depends(get_db)) -> SavePortalPackage:
    return SavePortalPackage(
        vehicle_repository=SqlAlchemyVehicleRepository(session=db),
        portal_package_repository=SqlAlchemyPortalPackageRepository(session=db),
    )


def get_save_portal_packages_use_case(db: Session = Depends(get_db)) -> SavePortalPackages:
    return SavePortalPackages(
        vehicle_repository=SqlAlchemyVehicleRepository(session=db),
        portal_package_repository=SqlAlchemyPortalPackageRepository(session=db),
    )


def get_list_vehicle_packages_use_case(db: Session = Depends(get_db)) -> ListVehiclePackages:
    return ListVehiclePackages(
        vehicle_repository=SqlAlchemyVehicleRepository(session=db),
        portal_package_repository=SqlAlchemyPortalPackageRepository(session=db),
    )


def get_delete_portal_package_use_case(db: Session = Depends(get_db)) -> DeletePortalPackage:
    return DeletePortalPackage(
        portal_package_repository=SqlAlchemyPortalPackageRepository(session=db)
    )
