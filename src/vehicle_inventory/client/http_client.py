"""
HTTP client for the vehicle inventory REST API.

Speaks camelCase JSON on the wire and domain dataclasses to callers:
responses are parsed with the API's own response DTOs and mapped back
to Vehicle / PortalPackage / OptionalEquipment.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from vehicle_inventory.domain.portal_package import PortalPackage
from vehicle_inventory.domain.vehicle import OptionalEquipment, Vehicle
from vehicle_inventory.domain.vehicle_filters import PhotoPresence, VehicleFilters
from vehicle_inventory.domain.vehicle_input import PhotoUpload, VehicleChanges, VehicleDraft
from vehicle_inventory.entrypoints.http.dtos.optionals import OptionalEquipmentResponseDTO
from vehicle_inventory.entrypoints.http.dtos.portal_packages import PortalPackageResponseDTO
from vehicle_inventory.entrypoints.http.dtos.vehicles import VehicleResponseDTO
from vehicle_inventory.entrypoints.http.mappers.portal_package_mapper import PortalPackageMapper
from vehicle_inventory.entrypoints.http.mappers.vehicle_mapper import VehicleMapper

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 10.0

_PHOTO_QUERY_VALUES = {
    PhotoPresence.WITH_PHOTOS: "com",
    PhotoPresence.WITHOUT_PHOTOS: "sem",
}


class ApiError(Exception):
    """Raised for any non-2xx response; carries the structured error body."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.errors = errors or []
        super().__init__(f"{status_code}: {detail}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def _photo_payload(photo: PhotoUpload) -> dict[str, Any]:
    return {
        "id": photo.id,
        "imageBase64": photo.image_base64,
        "filename": photo.filename,
        "order": photo.order,
    }


def _draft_payload(draft: VehicleDraft) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "make": draft.make,
        "model": draft.model,
        "year": draft.year,
        "plate": draft.plate,
        "odometerKm": draft.odometer_km,
        "color": draft.color,
        "price": str(draft.price) if draft.price is not None else None,
        "optionalIds": list(draft.optional_ids),
        "photos": [_photo_payload(photo) for photo in draft.photos],
    }
    if isinstance(draft, VehicleChanges):
        payload["photosToRemove"] = list(draft.photos_to_remove)
    return payload


def _filter_params(filters: VehicleFilters) -> dict[str, str | int]:
    params: dict[str, str | int] = {}
    for name, value in (
        ("plate", filters.plate),
        ("make", filters.make),
        ("model", filters.model),
        ("color", filters.color),
        ("yearMin", filters.year_min),
        ("yearMax", filters.year_max),
    ):
        if value is not None:
            params[name] = value
    if filters.price_min is not None:
        params["priceMin"] = str(filters.price_min)
    if filters.price_max is not None:
        params["priceMax"] = str(filters.price_max)
    if filters.optional_names is not None:
        params["optionals"] = ",".join(sorted(filters.optional_names))
    if filters.photos is not None:
        params["photos"] = _PHOTO_QUERY_VALUES[filters.photos]
    return params


def _package_payload(package: PortalPackage) -> dict[str, Any]:
    return {
        "vehicleId": package.vehicle_id,
        "portal": package.portal.name.lower(),
        "tier": package.tier.name.lower(),
    }


class VehicleInventoryClient:
    """
    Synchronous client, one method per REST operation.

    Usable as a context manager; an injected httpx.Client is not closed
    by this class.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self) -> VehicleInventoryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    # Vehicles

    def list_vehicles(self) -> list[Vehicle]:
        return self._vehicles(self._request("GET", "/v1/vehicles"))

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        return self._vehicle(self._request("GET", f"/v1/vehicles/{vehicle_id}"))

    def search_vehicles(self, filters: VehicleFilters) -> list[Vehicle]:
        response = self._request("GET", "/v1/vehicles/search", params=_filter_params(filters))
        return self._vehicles(response)

    def create_vehicle(self, draft: VehicleDraft) -> Vehicle:
        return self._vehicle(self._request("POST", "/v1/vehicles", json=_draft_payload(draft)))

    def update_vehicle(self, vehicle_id: int, changes: VehicleChanges) -> Vehicle:
        response = self._request("PUT", f"/v1/vehicles/{vehicle_id}", json=_draft_payload(changes))
        return self._vehicle(response)

    def delete_vehicle(self, vehicle_id: int) -> None:
        self._request("DELETE", f"/v1/vehicles/{vehicle_id}")

    # Optional equipment

    def list_optionals(self) -> list[OptionalEquipment]:
        response = self._request("GET", "/v1/optionals")
        return [
            OptionalEquipment(id=dto.id, name=dto.name)
            for dto in (OptionalEquipmentResponseDTO.model_validate(item) for item in response.json())
        ]

    # Portal packages

    def save_package(self, package: PortalPackage) -> tuple[PortalPackage, bool]:
        """Returns the stored package and whether it was newly created."""
        response = self._request("POST", "/v1/portal-packages", json=_package_payload(package))
        return self._package(response.json()), response.status_code == httpx.codes.CREATED

    def save_packages(self, packages: list[PortalPackage]) -> list[PortalPackage]:
        response = self._request(
            "POST",
            "/v1/portal-packages/bulk",
            json=[_package_payload(package) for package in packages],
        )
        return [self._package(item) for item in response.json()]

    def list_packages(self, vehicle_id: int) -> list[PortalPackage]:
        response = self._request("GET", f"/v1/portal-packages/vehicle/{vehicle_id}")
        return [self._package(item) for item in response.json()]

    def delete_package(self, package_id: int) -> None:
        self._request("DELETE", f"/v1/portal-packages/{package_id}")

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        response = self._http.request(method, url, **kwargs)
        if response.is_success:
            return response

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        error = ApiError(
            status_code=response.status_code,
            detail=body.get("detail") or response.text or response.reason_phrase,
            code=body.get("code"),
            errors=body.get("errors"),
        )
        logger.info(
            "API request failed",
            extra={
                "method": method,
                "url": url,
                "status_code": error.status_code,
                "code": error.code,
            },
        )
        raise error

    @staticmethod
    def _vehicle(response: httpx.Response) -> Vehicle:
        return VehicleMapper.response_to_domain(VehicleResponseDTO.model_validate(response.json()))

    @staticmethod
    def _vehicles(response: httpx.Response) -> list[Vehicle]:
        return [
            VehicleMapper.response_to_domain(VehicleResponseDTO.model_validate(item))
            for item in response.json()
        ]

    @staticmethod
    def _package(item: dict[str, Any]) -> PortalPackage:
        return PortalPackageMapper.response_to_domain(
            PortalPackageResponseDTO.model_validate(item)
        )
