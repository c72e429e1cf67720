"""SQLAlchemy implementation of VehicleRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session, selectinload

from vehicle_inventory.adapters.sqlalchemy_portal_package_repository import package_to_domain
from vehicle_inventory.adapters.sqlalchemy_transaction import rollback_on_error
from vehicle_inventory.domain.clock import Clock, utcnow
from vehicle_inventory.domain.errors import NotFoundError
from vehicle_inventory.domain.vehicle import OptionalEquipment, Photo, Vehicle
from vehicle_inventory.domain.vehicle_filters import PhotoPresence, VehicleFilters
from vehicle_inventory.infra.db.models import (
    OptionalEquipmentRow,
    PhotoRow,
    VehicleOptionalRow,
    VehicleRow,
)
from vehicle_inventory.ports.vehicle_repository import VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


class SqlAlchemyVehicleRepository(VehicleRepository):
    """
    SQLAlchemy implementation of VehicleRepository.

    - Eager-loads photos, optional links (with the catalog entry) and packages
      with SELECT IN loading, so aggregates are complete without lazy loads
    - Builds search criteria as a list of SQL expressions combined with AND
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    - Wraps every write in rollback_on_error so a failure leaves nothing behind
    """

    def __init__(self, session: Session, clock: Clock = utcnow) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
            clock: Source of the last-update timestamp
        """
        self._session = session
        self._clock = clock

    def exists(self, vehicle_id: int) -> bool:
        query = select(exists().where(VehicleRow.id == vehicle_id))
        return bool(self._session.scalar(query))

    def plate_exists(self, plate: str, exclude_id: int | None = None) -> bool:
        conditions = [VehicleRow.plate == plate]
        if exclude_id is not None:
            conditions.append(VehicleRow.id != exclude_id)

        query = select(exists().where(*conditions))
        return bool(self._session.scalar(query))

    def get_all(self) -> list[Vehicle]:
        return self._fetch(self._base_query())

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        row = self._load_row(vehicle_id)
        return self._to_domain(row) if row else None

    def get_by_plate(self, plate: str) -> Vehicle | None:
        query = self._base_query().where(VehicleRow.plate == plate)
        row = self._session.execute(query).scalars().first()
        return self._to_domain(row) if row else None

    def search(self, filters: VehicleFilters) -> list[Vehicle]:
        """
        Search vehicles with AND-combined predicates.

        Args:
            filters: Filter criteria - must be pre-validated

        Returns:
            Matching vehicles, newest registration first
        """
        # Trust that UseCase has validated inputs (contract programming)
        query = self._base_query().where(*self._predicates(filters))
        return self._fetch(query)

    def add(self, vehicle: Vehicle) -> Vehicle:
        row = VehicleRow(
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            plate=vehicle.plate,
            odometer_km=vehicle.odometer_km,
            color=vehicle.color,
            price=vehicle.price,
            registered_at=vehicle.registered_at or self._clock(),
            photos=[self._photo_row(photo) for photo in vehicle.photos],
            optional_links=[
                VehicleOptionalRow(optional_id=optional.id) for optional in vehicle.optionals
            ],
        )

        with rollback_on_error(self._session):
            self._session.add(row)
            self._session.flush()

        return self._to_domain(row)

    def update(self, vehicle: Vehicle) -> Vehicle:
        with rollback_on_error(self._session):
            row = self._load_row(vehicle.id) if vehicle.id is not None else None
            if row is None:
                raise NotFoundError(resource="Vehicle", identifier=vehicle.id)

            row.make = vehicle.make
            row.model = vehicle.model
            row.year = vehicle.year
            row.plate = vehicle.plate
            row.odometer_km = vehicle.odometer_km
            row.color = vehicle.color
            row.price = vehicle.price
            row.updated_at = self._clock()

            # Deletes are flushed before inserts so a new photo may reuse the
            # display order of a removed one without tripping the unique index.
            kept_photo_ids = {photo.id for photo in vehicle.photos if photo.id is not None}
            row.optional_links.clear()
            for photo_row in [p for p in row.photos if p.id not in kept_photo_ids]:
                row.photos.remove(photo_row)
            self._session.flush()

            row.optional_links.extend(
                VehicleOptionalRow(optional_id=optional.id) for optional in vehicle.optionals
            )
            row.photos.extend(
                self._photo_row(photo) for photo in vehicle.photos if photo.id is None
            )
            self._session.flush()

        return self._to_domain(row)

    def delete(self, vehicle_id: int) -> bool:
        with rollback_on_error(self._session):
            row = self._load_row(vehicle_id)
            if row is None:
                return False

            # ORM cascade removes photos, optional links and packages
            self._session.delete(row)
            self._session.flush()
        return True

    def _base_query(self) -> Select[tuple[VehicleRow]]:
        return (
            select(VehicleRow)
            .options(
                selectinload(VehicleRow.photos),
                selectinload(VehicleRow.optional_links).selectinload(VehicleOptionalRow.optional),
                selectinload(VehicleRow.packages),
            )
            .order_by(VehicleRow.registered_at.desc(), VehicleRow.id.desc())
            # Rows already in the session are refreshed, collections included
            .execution_options(populate_existing=True)
        )

    def _predicates(self, filters: VehicleFilters) -> list[ColumnElement[bool]]:
        """
        Translate filters into SQL criteria; a None filter adds nothing.

        Text filters are case-insensitive substring matches with LIKE
        wildcards in the user input escaped.
        """
        predicates: list[ColumnElement[bool]] = []

        text_filters = (
            (VehicleRow.plate, filters.plate),
            (VehicleRow.make, filters.make),
            (VehicleRow.model, filters.model),
            (VehicleRow.color, filters.color),
        )
        for column, needle in text_filters:
            if needle is not None:
                predicates.append(func.lower(column).contains(needle.lower(), autoescape=True))

        # Year range filters (inclusive)
        if filters.year_min is not None:
            predicates.append(VehicleRow.year >= filters.year_min)
        if filters.year_max is not None:
            predicates.append(VehicleRow.year <= filters.year_max)

        # Price range filters (inclusive)
        if filters.price_min is not None:
            predicates.append(VehicleRow.price >= filters.price_min)
        if filters.price_max is not None:
            predicates.append(VehicleRow.price <= filters.price_max)

        if filters.optional_names is not None:
            predicates.append(
                VehicleRow.optional_links.any(
                    VehicleOptionalRow.optional.has(
                        OptionalEquipmentRow.name.in_(sorted(filters.optional_names))
                    )
                )
            )

        if filters.photos is PhotoPresence.WITH_PHOTOS:
            predicates.append(VehicleRow.photos.any())
        elif filters.photos is PhotoPresence.WITHOUT_PHOTOS:
            predicates.append(~VehicleRow.photos.any())

        return predicates

    def _load_row(self, vehicle_id: int) -> VehicleRow | None:
        query = self._base_query().where(VehicleRow.id == vehicle_id)
        return self._session.execute(query).scalars().first()

    def _fetch(self, query: Select[tuple[VehicleRow]]) -> list[Vehicle]:
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _photo_row(self, photo: Photo) -> PhotoRow:
        return PhotoRow(
            image_base64=photo.image_base64,
            filename=photo.filename,
            display_order=photo.order,
            uploaded_at=photo.uploaded_at or self._clock(),
        )

    @staticmethod
    def _to_domain(row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain aggregate (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow with its collections loaded

        Returns:
            Vehicle domain aggregate
        """
        return Vehicle(
            id=row.id,
            make=row.make,
            model=row.model,
            year=row.year,
            plate=row.plate,
            odometer_km=row.odometer_km,
            color=row.color,
            price=row.price,  # Already Decimal from NUMERIC column
            registered_at=row.registered_at,
            updated_at=row.updated_at,
            photos=[
                Photo(
                    id=photo.id,
                    image_base64=photo.image_base64,
                    filename=photo.filename,
                    order=photo.display_order,
                    uploaded_at=photo.uploaded_at,
                )
                for photo in sorted(row.photos, key=lambda p: p.display_order)
            ],
            optionals=sorted(
                (
                    OptionalEquipment(id=link.optional.id, name=link.optional.name)
                    for link in row.optional_links
                ),
                key=lambda optional: optional.id,
            ),
            packages=[package_to_domain(package) for package in row.packages],
        )
