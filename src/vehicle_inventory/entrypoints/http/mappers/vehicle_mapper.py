from __future__ import annotations

from decimal import Decimal, InvalidOperation

from vehicle_inventory.domain.errors import InternalError, ValidationError
from vehicle_inventory.domain.vehicle import OptionalEquipment, Photo, Vehicle
from vehicle_inventory.domain.vehicle_filters import PhotoPresence, VehicleFilters
from vehicle_inventory.domain.vehicle_input import PhotoUpload, VehicleChanges, VehicleDraft
from vehicle_inventory.entrypoints.http.dtos.optionals import OptionalEquipmentResponseDTO
from vehicle_inventory.entrypoints.http.dtos.vehicles import (
    PhotoRequestDTO,
    PhotoResponseDTO,
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleUpdateDTO,
)
from vehicle_inventory.entrypoints.http.mappers.portal_package_mapper import PortalPackageMapper
from vehicle_inventory.use_cases.create_vehicle import CreateVehicleRequest
from vehicle_inventory.use_cases.search_vehicles import SearchVehiclesRequest
from vehicle_inventory.use_cases.update_vehicle import UpdateVehicleRequest

# Query values accepted for the photo presence filter
PHOTO_PRESENCE_VALUES: dict[str, PhotoPresence] = {
    "com": PhotoPresence.WITH_PHOTOS,
    "sem": PhotoPresence.WITHOUT_PHOTOS,
    PhotoPresence.WITH_PHOTOS.value: PhotoPresence.WITH_PHOTOS,
    PhotoPresence.WITHOUT_PHOTOS.value: PhotoPresence.WITHOUT_PHOTOS,
}


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


class VehicleMapper:
    """Maps between REST DTOs and domain models for vehicles."""

    @staticmethod
    def to_photo_upload(dto: PhotoRequestDTO) -> PhotoUpload:
        return PhotoUpload(
            id=dto.id,
            image_base64=dto.image_base64,
            filename=dto.filename,
            order=dto.order,
        )

    @staticmethod
    def to_draft(dto: VehicleCreateDTO) -> VehicleDraft:
        return VehicleDraft(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            plate=dto.plate,
            odometer_km=dto.odometer_km,
            color=dto.color,
            price=dto.price,
            optional_ids=list(dto.optional_ids),
            photos=[VehicleMapper.to_photo_upload(photo) for photo in dto.photos],
        )

    @staticmethod
    def to_changes(dto: VehicleUpdateDTO) -> VehicleChanges:
        return VehicleChanges(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            plate=dto.plate,
            odometer_km=dto.odometer_km,
            color=dto.color,
            price=dto.price,
            optional_ids=list(dto.optional_ids),
            photos=[VehicleMapper.to_photo_upload(photo) for photo in dto.photos],
            photos_to_remove=list(dto.photos_to_remove),
        )

    @staticmethod
    def to_create_request(dto: VehicleCreateDTO) -> CreateVehicleRequest:
        return CreateVehicleRequest(draft=VehicleMapper.to_draft(dto))

    @staticmethod
    def to_update_request(vehicle_id: int, dto: VehicleUpdateDTO) -> UpdateVehicleRequest:
        return UpdateVehicleRequest(vehicle_id=vehicle_id, changes=VehicleMapper.to_changes(dto))

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> VehicleFilters:
        """
        Converts query params to domain filters.

        - Blank text parameters are ignored
        - Prices are parsed as Decimal
        - optionals is split on commas into a set of names (an empty
          value matches no vehicle)
        - photos accepts 'com'/'sem' (or 'with-photos'/'without-photos')

        Raises:
            ValidationError: If a price is not a decimal or photos is not a known value
        """
        errors = []

        prices: dict[str, Decimal | None] = {}
        for field_name, raw in (("price_min", dto.price_min), ("price_max", dto.price_max)):
            raw = _blank_to_none(raw)
            try:
                prices[field_name] = Decimal(raw) if raw is not None else None
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": field_name,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                )
                prices[field_name] = None

        photos = _blank_to_none(dto.photos)
        presence = None
        if photos is not None:
            presence = PHOTO_PRESENCE_VALUES.get(photos.lower())
            if presence is None:
                errors.append(
                    {
                        "field": "photos",
                        "message": "Must be one of: com, sem",
                        "code": "INVALID_VALUE",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        # Present but empty restricts to nothing; absent imposes no restriction
        optional_names = None
        if dto.optionals is not None:
            optional_names = frozenset(
                name.strip() for name in dto.optionals.split(",") if name.strip()
            )

        return VehicleFilters(
            plate=_blank_to_none(dto.plate),
            make=_blank_to_none(dto.make),
            model=_blank_to_none(dto.model),
            color=_blank_to_none(dto.color),
            year_min=dto.year_min,
            year_max=dto.year_max,
            price_min=prices["price_min"],
            price_max=prices["price_max"],
            optional_names=optional_names,
            photos=presence,
        )

    @staticmethod
    def to_search_request(dto: VehicleSearchQueryDTO) -> SearchVehiclesRequest:
        return SearchVehiclesRequest(filters=VehicleMapper.to_domain_filters(dto))

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts the domain aggregate to the REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        if vehicle.id is None or vehicle.registered_at is None:
            raise InternalError(
                "Vehicle must be persisted before it is returned", plate=vehicle.plate
            )
        return VehicleResponseDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            plate=vehicle.plate,
            odometer_km=vehicle.odometer_km,
            color=vehicle.color,
            price=str(vehicle.price),  # Decimal → str at boundary
            registered_at=vehicle.registered_at,
            updated_at=vehicle.updated_at,
            photos=[
                PhotoResponseDTO(
                    id=photo.id or 0,
                    image_base64=photo.image_base64,
                    filename=photo.filename,
                    order=photo.order,
                    uploaded_at=photo.uploaded_at,
                )
                for photo in vehicle.photos
            ],
            optionals=[
                OptionalEquipmentResponseDTO(id=optional.id, name=optional.name)
                for optional in vehicle.optionals
            ],
            optional_ids=vehicle.optional_ids,
            packages=[
                PortalPackageMapper.to_package_response(package) for package in vehicle.packages
            ],
        )

    @staticmethod
    def to_list_response(vehicles: list[Vehicle]) -> list[VehicleResponseDTO]:
        return [VehicleMapper.to_vehicle_response(vehicle) for vehicle in vehicles]

    @staticmethod
    def response_to_domain(dto: VehicleResponseDTO) -> Vehicle:
        """
        Converts a response DTO back to the domain aggregate.

        Used by clients that read the API; str → Decimal on the price.
        """
        return Vehicle(
            id=dto.id,
            make=dto.make,
            model=dto.model,
            year=dto.year,
            plate=dto.plate,
            odometer_km=dto.odometer_km,
            color=dto.color,
            price=Decimal(dto.price),
            registered_at=dto.registered_at,
            updated_at=dto.updated_at,
            photos=[
                Photo(
                    id=photo.id,
                    image_base64=photo.image_base64,
                    filename=photo.filename,
                    order=photo.order,
                    uploaded_at=photo.uploaded_at,
                )
                for photo in dto.photos
            ],
            optionals=[
                OptionalEquipment(id=optional.id, name=optional.name)
                for optional in dto.optionals
            ],
            packages=[
                PortalPackageMapper.response_to_domain(package) for package in dto.packages
            ],
        )
