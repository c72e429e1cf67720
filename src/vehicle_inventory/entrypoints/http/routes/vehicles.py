from fastapi import APIRouter, Depends, Request, Response, status

from vehicle_inventory.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_delete_vehicle_use_case,
    get_list_vehicles_use_case,
    get_search_vehicles_use_case,
    get_update_vehicle_use_case,
    get_vehicle_by_id_use_case,
)
from vehicle_inventory.entrypoints.http.dtos.vehicles import (
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleUpdateDTO,
)
from vehicle_inventory.entrypoints.http.error_responses import ErrorResponse
from vehicle_inventory.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from vehicle_inventory.use_cases.create_vehicle import CreateVehicle
from vehicle_inventory.use_cases.delete_vehicle import DeleteVehicle, DeleteVehicleRequest
from vehicle_inventory.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from vehicle_inventory.use_cases.list_vehicles import ListVehicles
from vehicle_inventory.use_cases.search_vehicles import SearchVehicles
from vehicle_inventory.use_cases.update_vehicle import UpdateVehicle


router = APIRouter(tags=["Vehicles"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Vehicle not found"}}
BAD_REQUEST_RESPONSE = {
    400: {"model": ErrorResponse, "description": "Validation error or plate conflict"}
}


@router.get(
    "/vehicles",
    response_model=list[VehicleResponseDTO],
    summary="List vehicles",
    description="All vehicles with photos, optional equipment and packages, newest first.",
)
def list_vehicles(
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> list[VehicleResponseDTO]:
    result = use_case.execute()
    return VehicleMapper.to_list_response(result.vehicles)


# Declared before /vehicles/{vehicle_id} so "search" is not taken as an id
@router.get(
    "/vehicles/search",
    response_model=list[VehicleResponseDTO],
    summary="Search vehicles",
    description="""
    Search vehicles with optional filters.

    ## Filters
    - All filters use AND semantics
    - make/model/plate/color: case-insensitive substring match
    - yearMin/yearMax, priceMin/priceMax: inclusive ranges
    - optionals: comma-separated names; matches vehicles having at least one
    - photos: `com` (with photos) or `sem` (without photos)

    ## Example
    ```
    GET /v1/vehicles/search?make=volks&yearMin=2015&optionals=Alarm,ABS%20Brakes&photos=com
    ```
    """,
    responses=BAD_REQUEST_RESPONSE,
)
def search_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> list[VehicleResponseDTO]:
    """Search vehicles endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = VehicleMapper.to_search_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_list_response(result.vehicles)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle",
    responses=NOT_FOUND_RESPONSE,
)
def get_vehicle(
    vehicle_id: int,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.post(
    "/vehicles",
    response_model=VehicleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register vehicle",
    description="""
    Register a vehicle with its photos and optional equipment.

    ## Rules
    - make, model: required, at most 100 characters
    - year: after 1900, at most next year
    - plate: ABC1234 or ABC1D23, unique across vehicles
    - color: required, at most 50 characters
    - price: greater than zero; number or decimal string
    - optionalIds: known IDs, no repeats

    All rule violations are reported together in `errors`.
    """,
    responses=BAD_REQUEST_RESPONSE,
)
def create_vehicle(
    payload: VehicleCreateDTO,
    request: Request,
    response: Response,
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(VehicleMapper.to_create_request(payload))

    response.headers["Location"] = str(
        request.url_for("get_vehicle", vehicle_id=result.vehicle.id)
    )
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.put(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Update vehicle",
    description="""
    Replace a vehicle's fields and optional equipment.

    Photos listed in `photosToRemove` are removed; photos without `id` are
    added. Photos that carry an `id` are kept unchanged.
    """,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def update_vehicle(
    vehicle_id: int,
    payload: VehicleUpdateDTO,
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(VehicleMapper.to_update_request(vehicle_id, payload))
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.delete(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete vehicle",
    description="Deletes the vehicle together with its photos, optional links and packages.",
    responses=NOT_FOUND_RESPONSE,
)
def delete_vehicle(
    vehicle_id: int,
    use_case: DeleteVehicle = Depends(get_delete_vehicle_use_case),
) -> Response:
    use_case.execute(DeleteVehicleRequest(vehicle_id=vehicle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
