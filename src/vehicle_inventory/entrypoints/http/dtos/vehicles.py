from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, Field

from vehicle_inventory.entrypoints.http.dtos.base import CamelModel
from vehicle_inventory.entrypoints.http.dtos.optionals import OptionalEquipmentResponseDTO
from vehicle_inventory.entrypoints.http.dtos.portal_packages import PortalPackageResponseDTO


class PhotoRequestDTO(CamelModel):
    """A photo in a create or update payload."""

    id: int | None = Field(
        default=None,
        description="Set for photos already attached to the vehicle; they are kept as they are",
    )
    image_base64: str = Field(description="Image content, base64 encoded")
    filename: str | None = Field(default=None, examples=["front.jpg"])
    order: int = Field(description="Display order within the vehicle", examples=[0])


class VehicleCreateDTO(CamelModel):
    """Request payload for registering a vehicle.

    Missing scalar fields map to None; VehicleDraft.validate reports them as
    REQUIRED alongside every other field rule violation.
    """

    make: str | None = Field(default=None, examples=["Volkswagen"])
    model: str | None = Field(default=None, examples=["Golf GTI"])
    year: int | None = Field(default=None, examples=[2020])
    plate: str | None = Field(
        default=None,
        description="ABC1234 (legacy) or ABC1D23 (current) format",
        examples=["ABC1D23"],
    )
    odometer_km: int | None = Field(default=None, examples=[35000])
    color: str | None = Field(default=None, examples=["Black"])
    price: Decimal | None = Field(
        default=None,
        description="Price as a number or decimal string",
        examples=["129900.00"],
    )
    optional_ids: list[int] = Field(
        default_factory=list,
        description="IDs from GET /v1/optionals",
        examples=[[1, 3]],
    )
    photos: list[PhotoRequestDTO] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Volkswagen",
                "model": "Golf GTI",
                "year": 2020,
                "plate": "ABC1D23",
                "odometerKm": 35000,
                "color": "Black",
                "price": "129900.00",
                "optionalIds": [1, 3],
                "photos": [{"imageBase64": "iVBORw0KGgo=", "filename": "front.jpg", "order": 0}],
            }
        }
    )


class VehicleUpdateDTO(VehicleCreateDTO):
    """Request payload for updating a vehicle."""

    photos_to_remove: list[int] = Field(
        default_factory=list,
        description="IDs of attached photos to remove",
    )


class PhotoResponseDTO(CamelModel):
    id: int
    image_base64: str
    filename: str | None
    order: int
    uploaded_at: datetime | None


class VehicleResponseDTO(CamelModel):
    id: int
    make: str
    model: str
    year: int
    plate: str
    odometer_km: int | None
    color: str
    price: str
    registered_at: datetime
    updated_at: datetime | None
    photos: list[PhotoResponseDTO]
    optionals: list[OptionalEquipmentResponseDTO]
    optional_ids: list[int]
    packages: list[PortalPackageResponseDTO]


class VehicleSearchQueryDTO(CamelModel):
    """
    Query parameters for searching vehicles.

    Aliases are spelled out so FastAPI exposes the camelCase names as the
    query parameters when the DTO is used through Depends().
    """

    make: str | None = Field(
        default=None,
        description="Case-insensitive substring of the make",
        examples=["volks"],
    )
    model: str | None = Field(
        default=None,
        description="Case-insensitive substring of the model",
        examples=["golf"],
    )
    plate: str | None = Field(
        default=None,
        description="Case-insensitive substring of the plate",
        examples=["ABC"],
    )
    color: str | None = Field(
        default=None,
        description="Case-insensitive substring of the color",
        examples=["black"],
    )
    year_min: int | None = Field(
        default=None,
        alias="yearMin",
        description="Minimum year (inclusive)",
        examples=[2015],
    )
    year_max: int | None = Field(
        default=None,
        alias="yearMax",
        description="Maximum year (inclusive)",
        examples=[2022],
    )
    price_min: str | None = Field(
        default=None,
        alias="priceMin",
        description="Minimum price (inclusive, decimal as string)",
        examples=["50000.00"],
    )
    price_max: str | None = Field(
        default=None,
        alias="priceMax",
        description="Maximum price (inclusive, decimal as string)",
        examples=["150000.00"],
    )
    optionals: str | None = Field(
        default=None,
        description="Comma-separated optional equipment names; matches vehicles having any of them",
        examples=["Alarm,ABS Brakes"],
    )
    photos: str | None = Field(
        default=None,
        description="'com' for vehicles with photos, 'sem' for vehicles without",
        examples=["com"],
    )
