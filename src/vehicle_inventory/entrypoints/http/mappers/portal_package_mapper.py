from __future__ import annotations

from vehicle_inventory.domain.portal_package import PackageTier, Portal, PortalPackage
from vehicle_inventory.entrypoints.http.dtos.portal_packages import (
    PortalPackageRequestDTO,
    PortalPackageResponseDTO,
)
from vehicle_inventory.use_cases.save_portal_package import SavePortalPackageRequest
from vehicle_inventory.use_cases.save_portal_packages import SavePortalPackagesRequest


class PortalPackageMapper:
    """
    Maps between REST DTOs and domain portal packages.

    Portals and tiers travel as lowercase enum names ("icarros", "diamond").
    """

    @staticmethod
    def to_domain(dto: PortalPackageRequestDTO) -> PortalPackage:
        return PortalPackage(
            vehicle_id=dto.vehicle_id,
            portal=Portal[dto.portal.upper()],
            tier=PackageTier[dto.tier.upper()],
        )

    @staticmethod
    def to_save_request(dto: PortalPackageRequestDTO) -> SavePortalPackageRequest:
        return SavePortalPackageRequest(package=PortalPackageMapper.to_domain(dto))

    @staticmethod
    def to_bulk_request(dtos: list[PortalPackageRequestDTO]) -> SavePortalPackagesRequest:
        return SavePortalPackagesRequest(
            packages=[PortalPackageMapper.to_domain(dto) for dto in dtos]
        )

    @staticmethod
    def to_package_response(package: PortalPackage) -> PortalPackageResponseDTO:
        return PortalPackageResponseDTO(
            id=package.id or 0,
            vehicle_id=package.vehicle_id,
            portal=package.portal.name.lower(),  # type: ignore[arg-type]
            tier=package.tier.name.lower(),  # type: ignore[arg-type]
        )

    @staticmethod
    def to_list_response(packages: list[PortalPackage]) -> list[PortalPackageResponseDTO]:
        return [PortalPackageMapper.to_package_response(package) for package in packages]

    @staticmethod
    def response_to_domain(dto: PortalPackageResponseDTO) -> PortalPackage:
        return PortalPackage(
            id=dto.id,
            vehicle_id=dto.vehicle_id,
            portal=Portal[dto.portal.upper()],
            tier=PackageTier[dto.tier.upper()],
        )
