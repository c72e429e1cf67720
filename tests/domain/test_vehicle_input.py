"""Tests for vehicle payload validation rules."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from vehicle_inventory.domain.errors import ValidationError
from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.domain.vehicle_input import PhotoUpload, VehicleChanges, VehicleDraft

CURRENT_YEAR = 2025


def make_draft(**overrides) -> VehicleDraft:
    fields = {
        "make": "Volkswagen",
        "model": "Golf GTI",
        "year": 2020,
        "plate": "ABC1D23",
        "color": "Black",
        "price": Decimal("129900.00"),
        "odometer_km": 35000,
    }
    fields.update(overrides)
    return VehicleDraft(**fields)


def error_fields(exc_info: pytest.ExceptionInfo[ValidationError]) -> list[str]:
    return [error["field"] for error in exc_info.value.errors or []]


def test_valid_draft_passes() -> None:
    make_draft().validate(current_year=CURRENT_YEAR)


# ==============================================================================
# Year
# ==============================================================================


def test_year_1900_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(year=1900).validate(current_year=CURRENT_YEAR)

    assert exc_info.value.errors == [
        {"field": "year", "message": "Year must be greater than 1900", "code": "OUT_OF_RANGE"}
    ]


def test_year_1901_is_accepted() -> None:
    make_draft(year=1901).validate(current_year=CURRENT_YEAR)


def test_next_year_is_accepted() -> None:
    make_draft(year=CURRENT_YEAR + 1).validate(current_year=CURRENT_YEAR)


def test_two_years_ahead_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(year=CURRENT_YEAR + 2).validate(current_year=CURRENT_YEAR)

    assert error_fields(exc_info) == ["year"]


def test_current_year_defaults_to_now() -> None:
    next_year = datetime.now(timezone.utc).year + 1
    make_draft(year=next_year).validate()


# ==============================================================================
# Plate
# ==============================================================================


@pytest.mark.parametrize("plate", ["ABC1234", "ABC1D23", "XYZ9A99"])
def test_valid_plates(plate: str) -> None:
    make_draft(plate=plate).validate(current_year=CURRENT_YEAR)


@pytest.mark.parametrize("plate", ["AB123", "abc1234", "ABC-1234", "1ABC234", "ABCD123"])
def test_invalid_plate_format(plate: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(plate=plate).validate(current_year=CURRENT_YEAR)

    assert exc_info.value.errors == [
        {
            "field": "plate",
            "message": "Plate must follow the ABC1234 or ABC1D23 format",
            "code": "INVALID_FORMAT",
        }
    ]


def test_plate_longer_than_ten_characters_reports_length_and_format() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(plate="ABC12345678").validate(current_year=CURRENT_YEAR)

    codes = [error["code"] for error in exc_info.value.errors or []]
    assert codes == ["TOO_LONG", "INVALID_FORMAT"]


# ==============================================================================
# Other fields
# ==============================================================================


def test_blank_required_text_fields() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(make="  ", model="", color=None, plate=None).validate(
            current_year=CURRENT_YEAR
        )

    assert error_fields(exc_info) == ["make", "model", "plate", "color"]
    assert all(error["code"] == "REQUIRED" for error in exc_info.value.errors or [])


def test_make_longer_than_100_characters() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(make="M" * 101).validate(current_year=CURRENT_YEAR)

    assert exc_info.value.errors == [
        {"field": "make", "message": "Make must be at most 100 characters", "code": "TOO_LONG"}
    ]


def test_color_of_50_characters_is_accepted() -> None:
    make_draft(color="C" * 50).validate(current_year=CURRENT_YEAR)


def test_negative_odometer_is_rejected_and_zero_accepted() -> None:
    make_draft(odometer_km=0).validate(current_year=CURRENT_YEAR)
    make_draft(odometer_km=None).validate(current_year=CURRENT_YEAR)

    with pytest.raises(ValidationError) as exc_info:
        make_draft(odometer_km=-1).validate(current_year=CURRENT_YEAR)

    assert error_fields(exc_info) == ["odometer_km"]


@pytest.mark.parametrize("price", [Decimal("0"), Decimal("-10.00"), None])
def test_price_must_be_positive(price: Decimal | None) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(price=price).validate(current_year=CURRENT_YEAR)

    assert error_fields(exc_info) == ["price"]


def test_duplicate_optional_ids_are_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(optional_ids=[1, 2, 1]).validate(current_year=CURRENT_YEAR)

    assert exc_info.value.errors == [
        {
            "field": "optional_ids",
            "message": "Optional equipment cannot be listed twice",
            "code": "DUPLICATE",
        }
    ]


def test_all_violations_are_reported_together() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_draft(year=1800, plate="AB123", price=Decimal("0")).validate(
            current_year=CURRENT_YEAR
        )

    assert error_fields(exc_info) == ["year", "plate", "price"]


# ==============================================================================
# Photos
# ==============================================================================


def test_photo_rules() -> None:
    photos = [
        PhotoUpload(image_base64="", order=0),
        PhotoUpload(image_base64="aGVsbG8=", order=0, filename="f" * 256),
    ]

    with pytest.raises(ValidationError) as exc_info:
        make_draft(photos=photos).validate(current_year=CURRENT_YEAR)

    assert error_fields(exc_info) == ["photos.0.image_base64", "photos.1.filename", "photos"]


def test_to_vehicle_stamps_photos_and_keeps_optional_order() -> None:
    uploaded_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
    optionals = [OptionalEquipment(id=3, name="Airbag"), OptionalEquipment(id=1, name="Alarm")]
    draft = make_draft(
        optional_ids=[3, 1],
        photos=[PhotoUpload(image_base64="aGVsbG8=", order=0, filename="front.jpg")],
    )

    vehicle = draft.to_vehicle(optionals, uploaded_at=uploaded_at)

    assert vehicle.id is None
    assert vehicle.optional_ids == [3, 1]
    assert vehicle.photos[0].uploaded_at == uploaded_at
    assert vehicle.photos[0].filename == "front.jpg"
    assert vehicle.price == Decimal("129900.00")


def test_changes_new_photos_are_those_without_id() -> None:
    changes = VehicleChanges(
        make="Fiat",
        model="Argo",
        year=2022,
        plate="ABC1234",
        color="Red",
        price=Decimal("70000"),
        photos=[
            PhotoUpload(image_base64="a", order=0, id=5),
            PhotoUpload(image_base64="b", order=1),
        ],
        photos_to_remove=[9],
    )

    assert [photo.order for photo in changes.new_photos] == [1]
    assert changes.photos_to_remove == [9]
