from typing import Literal

from pydantic import ConfigDict, Field

from vehicle_inventory.entrypoints.http.dtos.base import CamelModel

PortalName = Literal["icarros", "webmotors"]
TierName = Literal["basic", "bronze", "diamond", "platinum"]


class PortalPackageRequestDTO(CamelModel):
    """Request payload for setting the package of a vehicle on one portal."""

    vehicle_id: int = Field(description="Vehicle the package belongs to", examples=[1])
    portal: PortalName = Field(description="Listing portal", examples=["icarros"])
    tier: TierName = Field(
        description="Package tier, from lowest to highest: basic, bronze, diamond, platinum",
        examples=["diamond"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicleId": 1,
                "portal": "icarros",
                "tier": "diamond",
            }
        }
    )


class PortalPackageResponseDTO(CamelModel):
    id: int
    vehicle_id: int
    portal: PortalName
    tier: TierName
