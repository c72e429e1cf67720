from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from vehicle_inventory.domain.errors import ValidationError


class FilterValidationError(ValidationError):
    """Raised when search filter parameters are invalid."""

    pass


class PhotoPresence(Enum):
    WITH_PHOTOS = "with-photos"
    WITHOUT_PHOTOS = "without-photos"


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    """
    Search predicates, combined with AND semantics.

    A field left as None imposes no restriction. An empty optional_names set
    is a real restriction that no vehicle satisfies.
    """

    plate: str | None = None
    make: str | None = None
    model: str | None = None
    color: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    optional_names: frozenset[str] | None = None
    photos: PhotoPresence | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        errors = []
        if (
            self.year_min is not None
            and self.year_max is not None
            and self.year_min > self.year_max
        ):
            errors.append(
                {
                    "field": "year_min",
                    "message": "year_min cannot be greater than year_max",
                    "code": "INVALID_RANGE",
                }
            )
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            errors.append(
                {
                    "field": "price_min",
                    "message": "price_min cannot be greater than price_max",
                    "code": "INVALID_RANGE",
                }
            )

        if errors:
            raise FilterValidationError(errors=errors)
