"""Incoming vehicle payloads and their field rules.

Every rule is checked independently; all violations are reported together
through a single ValidationError.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from vehicle_inventory.domain.errors import ValidationError
from vehicle_inventory.domain.vehicle import OptionalEquipment, Photo, Vehicle


MAKE_MAX_LENGTH = 100
MODEL_MAX_LENGTH = 100
PLATE_MAX_LENGTH = 10
COLOR_MAX_LENGTH = 50
FILENAME_MAX_LENGTH = 255
YEAR_LOWER_BOUND = 1900  # exclusive

# ABC1D23 (current format) or ABC1234 (legacy format)
PLATE_PATTERN = re.compile(r"^[A-Z]{3}[0-9][A-Z0-9][0-9]{2}$|^[A-Z]{3}[0-9]{4}$")


def _error(field_name: str, message: str, code: str) -> dict[str, str]:
    return {"field": field_name, "message": message, "code": code}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class PhotoUpload:
    image_base64: str
    order: int
    filename: str | None = None
    id: int | None = None  # set when the photo is already attached to the vehicle

    def to_photo(self, uploaded_at: datetime) -> Photo:
        return Photo(
            image_base64=self.image_base64,
            order=self.order,
            filename=self.filename,
            uploaded_at=uploaded_at,
        )


@dataclass(frozen=True, slots=True)
class VehicleDraft:
    """Create payload: scalar fields, referenced optional ids and photos."""

    make: str | None
    model: str | None
    year: int | None
    plate: str | None
    color: str | None
    price: Decimal | None
    odometer_km: int | None = None
    optional_ids: list[int] = field(default_factory=list)
    photos: list[PhotoUpload] = field(default_factory=list)

    def validate(self, current_year: int | None = None) -> None:
        """
        Check every field rule and report all violations at once.

        Args:
            current_year: Calendar year used for the upper year bound
                          (defaults to the current UTC year)

        Raises:
            ValidationError: If any rule fails
        """
        if current_year is None:
            current_year = datetime.now(timezone.utc).year

        errors: list[dict[str, str]] = []
        errors.extend(self._text_errors("make", self.make, MAKE_MAX_LENGTH))
        errors.extend(self._text_errors("model", self.model, MODEL_MAX_LENGTH))
        errors.extend(self._year_errors(current_year))
        errors.extend(self._plate_errors())

        if self.odometer_km is not None and self.odometer_km < 0:
            errors.append(
                _error("odometer_km", "Odometer must be greater than or equal to zero", "OUT_OF_RANGE")
            )

        errors.extend(self._text_errors("color", self.color, COLOR_MAX_LENGTH))

        if self.price is None:
            errors.append(_error("price", "Price is required", "REQUIRED"))
        elif self.price <= 0:
            errors.append(_error("price", "Price must be greater than zero", "OUT_OF_RANGE"))

        if len(self.optional_ids) != len(set(self.optional_ids)):
            errors.append(
                _error("optional_ids", "Optional equipment cannot be listed twice", "DUPLICATE")
            )

        errors.extend(self._photo_errors())

        if errors:
            raise ValidationError(errors=errors)

    def to_vehicle(self, optionals: list[OptionalEquipment], uploaded_at: datetime) -> Vehicle:
        """Build a new, not yet persisted aggregate from a validated draft."""
        return Vehicle(
            make=self.make or "",
            model=self.model or "",
            year=self.year or 0,
            plate=self.plate or "",
            color=self.color or "",
            price=self.price or Decimal("0"),
            odometer_km=self.odometer_km,
            photos=[photo.to_photo(uploaded_at) for photo in self.photos],
            optionals=list(optionals),
        )

    @staticmethod
    def _text_errors(field_name: str, value: str | None, max_length: int) -> list[dict[str, str]]:
        label = field_name.capitalize()
        if value is None or not value.strip():
            return [_error(field_name, f"{label} is required", "REQUIRED")]
        if len(value) > max_length:
            return [
                _error(field_name, f"{label} must be at most {max_length} characters", "TOO_LONG")
            ]
        return []

    def _year_errors(self, current_year: int) -> list[dict[str, str]]:
        if self.year is None:
            return [_error("year", "Year is required", "REQUIRED")]
        if self.year <= YEAR_LOWER_BOUND:
            return [_error("year", f"Year must be greater than {YEAR_LOWER_BOUND}", "OUT_OF_RANGE")]
        if self.year > current_year + 1:
            return [_error("year", "Year cannot be later than next year", "OUT_OF_RANGE")]
        return []

    def _plate_errors(self) -> list[dict[str, str]]:
        if self.plate is None or not self.plate.strip():
            return [_error("plate", "Plate is required", "REQUIRED")]
        errors = []
        if len(self.plate) > PLATE_MAX_LENGTH:
            errors.append(
                _error("plate", f"Plate must be at most {PLATE_MAX_LENGTH} characters", "TOO_LONG")
            )
        if not PLATE_PATTERN.match(self.plate):
            errors.append(
                _error("plate", "Plate must follow the ABC1234 or ABC1D23 format", "INVALID_FORMAT")
            )
        return errors

    def _photo_errors(self) -> list[dict[str, str]]:
        errors = []
        for index, photo in enumerate(self.photos):
            if _is_blank(photo.image_base64):
                errors.append(
                    _error(f"photos.{index}.image_base64", "Photo image is required", "REQUIRED")
                )
            if photo.filename is not None and len(photo.filename) > FILENAME_MAX_LENGTH:
                errors.append(
                    _error(
                        f"photos.{index}.filename",
                        f"Filename must be at most {FILENAME_MAX_LENGTH} characters",
                        "TOO_LONG",
                    )
                )

        order_counts = Counter(photo.order for photo in self.photos)
        if any(count > 1 for count in order_counts.values()):
            errors.append(_error("photos", "Photos cannot share a display order", "DUPLICATE"))
        return errors


@dataclass(frozen=True, slots=True)
class VehicleChanges(VehicleDraft):
    """Update payload: a full draft plus the ids of photos to detach."""

    photos_to_remove: list[int] = field(default_factory=list)

    @property
    def new_photos(self) -> list[PhotoUpload]:
        # Photos carrying an id are already attached and are left as they are
        return [photo for photo in self.photos if photo.id is None]
