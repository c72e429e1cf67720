from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from vehicle_inventory.domain.portal_package import PackageTier, Portal, PortalPackage
from vehicle_inventory.entrypoints.http.dtos.portal_packages import PortalPackageRequestDTO
from vehicle_inventory.entrypoints.http.mappers.portal_package_mapper import PortalPackageMapper


def test_request_maps_names_to_enums() -> None:
    dto = PortalPackageRequestDTO.model_validate(
        {"vehicleId": 9, "portal": "icarros", "tier": "platinum"}
    )

    assert PortalPackageMapper.to_domain(dto) == PortalPackage(
        vehicle_id=9, portal=Portal.ICARROS, tier=PackageTier.PLATINUM
    )


def test_request_rejects_unknown_tier() -> None:
    with pytest.raises(PydanticValidationError):
        PortalPackageRequestDTO.model_validate({"vehicleId": 9, "portal": "icarros", "tier": "gold"})


def test_bulk_request_preserves_order() -> None:
    dtos = [
        PortalPackageRequestDTO(vehicle_id=2, portal="webmotors", tier="basic"),
        PortalPackageRequestDTO(vehicle_id=1, portal="icarros", tier="diamond"),
    ]

    request = PortalPackageMapper.to_bulk_request(dtos)

    assert [p.vehicle_id for p in request.packages] == [2, 1]


def test_response_round_trip() -> None:
    package = PortalPackage(id=6, vehicle_id=2, portal=Portal.WEBMOTORS, tier=PackageTier.DIAMOND)

    dto = PortalPackageMapper.to_package_response(package)

    assert dto.model_dump(by_alias=True) == {
        "id": 6,
        "vehicleId": 2,
        "portal": "webmotors",
        "tier": "diamond",
    }
    assert PortalPackageMapper.response_to_domain(dto) == package
