from fastapi import APIRouter, Depends, Response, status

from vehicle_inventory.entrypoints.http.dependencies import (
    get_delete_portal_package_use_case,
    get_list_vehicle_packages_use_case,
    get_save_portal_package_use_case,
    get_save_portal_packages_use_case,
)
from vehicle_inventory.entrypoints.http.dtos.portal_packages import (
    PortalPackageRequestDTO,
    PortalPackageResponseDTO,
)
from vehicle_inventory.entrypoints.http.error_responses import ErrorResponse
from vehicle_inventory.entrypoints.http.mappers.portal_package_mapper import PortalPackageMapper
from vehicle_inventory.use_cases.delete_portal_package import (
    DeletePortalPackage,
    DeletePortalPackageRequest,
)
from vehicle_inventory.use_cases.list_vehicle_packages import (
    ListVehiclePackages,
    ListVehiclePackagesRequest,
)
from vehicle_inventory.use_cases.save_portal_package import SavePortalPackage
from vehicle_inventory.use_cases.save_portal_packages import SavePortalPackages


router = APIRouter(tags=["Portal Packages"])


@router.post(
    "/portal-packages",
    response_model=PortalPackageResponseDTO,
    summary="Save portal package",
    description="""
    Set the package tier of a vehicle on one portal.

    A vehicle has at most one package per portal: saving again for the same
    portal replaces the tier. Returns 201 when a package was created and 200
    when an existing one was updated.
    """,
    responses={
        201: {"model": PortalPackageResponseDTO, "description": "Package created"},
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
    },
)
def save_portal_package(
    payload: PortalPackageRequestDTO,
    response: Response,
    use_case: SavePortalPackage = Depends(get_save_portal_package_use_case),
) -> PortalPackageResponseDTO:
    result = use_case.execute(PortalPackageMapper.to_save_request(payload))

    response.status_code = status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    return PortalPackageMapper.to_package_response(result.package)


@router.post(
    "/portal-packages/bulk",
    response_model=list[PortalPackageResponseDTO],
    summary="Save several portal packages",
    description="""
    Save a batch of packages in one transaction.

    Each (vehicleId, portal) pair is created or updated; portals a batch does
    not mention keep their current package. A batch must not be empty and
    must not repeat a (vehicleId, portal) pair.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Empty batch or repeated pair"},
        404: {"model": ErrorResponse, "description": "A referenced vehicle was not found"},
    },
)
def save_portal_packages(
    payload: list[PortalPackageRequestDTO],
    use_case: SavePortalPackages = Depends(get_save_portal_packages_use_case),
) -> list[PortalPackageResponseDTO]:
    result = use_case.execute(PortalPackageMapper.to_bulk_request(payload))
    return PortalPackageMapper.to_list_response(result.packages)


@router.get(
    "/portal-packages/vehicle/{vehicle_id}",
    response_model=list[PortalPackageResponseDTO],
    summary="List packages of a vehicle",
    responses={404: {"model": ErrorResponse, "description": "Vehicle not found"}},
)
def list_vehicle_packages(
    vehicle_id: int,
    use_case: ListVehiclePackages = Depends(get_list_vehicle_packages_use_case),
) -> list[PortalPackageResponseDTO]:
    result = use_case.execute(ListVehiclePackagesRequest(vehicle_id=vehicle_id))
    return PortalPackageMapper.to_list_response(result.packages)


@router.delete(
    "/portal-packages/{package_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete portal package",
    responses={404: {"model": ErrorResponse, "description": "Package not found"}},
)
def delete_portal_package(
    package_id: int,
    use_case: DeletePortalPackage = Depends(get_delete_portal_package_use_case),
) -> Response:
    use_case.execute(DeletePortalPackageRequest(package_id=package_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
