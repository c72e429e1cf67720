"""SQLAlchemy implementation of PortalPackageRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from vehicle_inventory.adapters.sqlalchemy_transaction import rollback_on_error
from vehicle_inventory.domain.portal_package import PackageTier, Portal, PortalPackage
from vehicle_inventory.infra.db.models import PortalPackageRow
from vehicle_inventory.ports.portal_package_repository import PortalPackageRepository


def package_to_domain(row: PortalPackageRow) -> PortalPackage:
    """Convert a stored package row (integer enums) to the domain package."""
    return PortalPackage(
        id=row.id,
        vehicle_id=row.vehicle_id,
        portal=Portal(row.portal),
        tier=PackageTier(row.tier),
    )


class SqlAlchemyPortalPackageRepository(PortalPackageRepository):
    """
    SQLAlchemy implementation of PortalPackageRepository.

    - Stores Portal and PackageTier as their integer values
    - Upserts look the row up by (vehicle_id, portal) and overwrite the tier
    - upsert_many flushes once; a failure rolls the whole batch back
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_vehicle(self, vehicle_id: int) -> list[PortalPackage]:
        query = (
            select(PortalPackageRow)
            .where(PortalPackageRow.vehicle_id == vehicle_id)
            .order_by(PortalPackageRow.portal)
        )
        return [package_to_domain(row) for row in self._session.execute(query).scalars().all()]

    def get_by_id(self, package_id: int) -> PortalPackage | None:
        row = self._session.get(PortalPackageRow, package_id)
        return package_to_domain(row) if row else None

    def find(self, vehicle_id: int, portal: Portal) -> PortalPackage | None:
        row = self._find_row(vehicle_id, portal)
        return package_to_domain(row) if row else None

    def upsert(self, package: PortalPackage) -> tuple[PortalPackage, bool]:
        with rollback_on_error(self._session):
            row, created = self._upsert_row(package)
            self._session.flush()
        return package_to_domain(row), created

    def upsert_many(self, packages: list[PortalPackage]) -> list[PortalPackage]:
        with rollback_on_error(self._session):
            rows = [self._upsert_row(package)[0] for package in packages]
            self._session.flush()
        return [package_to_domain(row) for row in rows]

    def delete(self, package_id: int) -> bool:
        with rollback_on_error(self._session):
            row = self._session.get(PortalPackageRow, package_id)
            if row is None:
                return False
            self._session.delete(row)
            self._session.flush()
        return True

    def _find_row(self, vehicle_id: int, portal: Portal) -> PortalPackageRow | None:
        query = select(PortalPackageRow).where(
            PortalPackageRow.vehicle_id == vehicle_id,
            PortalPackageRow.portal == int(portal),
        )
        return self._session.execute(query).scalars().first()

    def _upsert_row(self, package: PortalPackage) -> tuple[PortalPackageRow, bool]:
        row = self._find_row(package.vehicle_id, package.portal)
        if row is not None:
            row.tier = int(package.tier)
            return row, False

        row = PortalPackageRow(
            vehicle_id=package.vehicle_id,
            portal=int(package.portal),
            tier=int(package.tier),
        )
        self._session.add(row)
        return row, True
