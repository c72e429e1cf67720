"""
End-to-end tests of the HTTP API against an in-memory SQLite database.

Only get_db is overridden; use cases, repositories and the ORM run for real,
with one committed transaction per request.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine, func, select
from sqlalchemy.orm import Session

from vehicle_inventory.domain.vehicle import OptionalEquipment
from vehicle_inventory.entrypoints.http.app import build_app
from vehicle_inventory.entrypoints.http.dependencies import get_db
from vehicle_inventory.infra.db.models import PhotoRow, PortalPackageRow, VehicleOptionalRow


@pytest.fixture
def app(engine: Engine, optional_catalog: list[OptionalEquipment]) -> FastAPI:
    def override_get_db() -> Iterator[Session]:
        session = Session(bind=engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    test_app = build_app()
    test_app.dependency_overrides[get_db] = override_get_db
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def vehicle_payload(**overrides) -> dict:
    payload = {
        "make": "Volkswagen",
        "model": "Golf",
        "year": 2019,
        "plate": "GOL1F19",
        "odometerKm": 42000,
        "color": "Black",
        "price": "89990.00",
        "optionalIds": [2, 4],
        "photos": [
            {"imageBase64": "ZnJvbnQ=", "filename": "front.jpg", "order": 0},
            {"imageBase64": "YmFjaw==", "filename": "back.jpg", "order": 1},
        ],
    }
    payload.update(overrides)
    return payload


def count(session: Session, model: type) -> int:
    return session.scalar(select(func.count()).select_from(model)) or 0


# ==============================================================================
# Vehicle lifecycle
# ==============================================================================


def test_create_then_read_vehicle(client: TestClient) -> None:
    created = client.post("/v1/vehicles", json=vehicle_payload())

    assert created.status_code == 201
    body = created.json()
    assert created.headers["location"].endswith(f"/v1/vehicles/{body['id']}")
    assert body["price"] == "89990.00"
    assert body["optionalIds"] == [2, 4]
    assert [o["name"] for o in body["optionals"]] == ["Alarm", "ABS Brakes"]
    assert [p["order"] for p in body["photos"]] == [0, 1]

    fetched = client.get(f"/v1/vehicles/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["plate"] == "GOL1F19"


def test_duplicate_plate_returns_400_and_keeps_one_vehicle(client: TestClient) -> None:
    assert client.post("/v1/vehicles", json=vehicle_payload()).status_code == 201

    response = client.post("/v1/vehicles", json=vehicle_payload(model="Polo"))

    assert response.status_code == 400
    assert response.json()["code"] == "CONFLICT"
    assert len(client.get("/v1/vehicles").json()) == 1


def test_unknown_optional_returns_400(client: TestClient) -> None:
    response = client.post("/v1/vehicles", json=vehicle_payload(optionalIds=[1, 42]))

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "UNKNOWN_OPTIONAL"
    assert client.get("/v1/vehicles").json() == []


def test_update_swaps_photos_and_optionals(client: TestClient) -> None:
    body = client.post("/v1/vehicles", json=vehicle_payload()).json()
    front, back = body["photos"]

    response = client.put(
        f"/v1/vehicles/{body['id']}",
        json=vehicle_payload(
            price="87500.00",
            optionalIds=[1],
            photos=[
                {"id": back["id"], "imageBase64": back["imageBase64"], "order": 1},
                {"imageBase64": "bmV3", "filename": "new.jpg", "order": 0},
            ],
            photosToRemove=[front["id"]],
        ),
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["price"] == "87500.00"
    assert updated["optionalIds"] == [1]
    assert [(p["order"], p["filename"]) for p in updated["photos"]] == [
        (0, "new.jpg"),
        (1, "back.jpg"),
    ]
    assert updated["updatedAt"] is not None


def test_delete_vehicle_cascades(client: TestClient, session: Session) -> None:
    vehicle_id = client.post("/v1/vehicles", json=vehicle_payload()).json()["id"]
    client.post(
        "/v1/portal-packages",
        json={"vehicleId": vehicle_id, "portal": "icarros", "tier": "basic"},
    )

    response = client.delete(f"/v1/vehicles/{vehicle_id}")

    assert response.status_code == 204
    assert client.get(f"/v1/vehicles/{vehicle_id}").status_code == 404
    assert client.delete(f"/v1/vehicles/{vehicle_id}").status_code == 404
    assert count(session, PhotoRow) == 0
    assert count(session, VehicleOptionalRow) == 0
    assert count(session, PortalPackageRow) == 0


# ==============================================================================
# Search
# ==============================================================================


def test_search_combines_filters(client: TestClient) -> None:
    client.post("/v1/vehicles", json=vehicle_payload())
    client.post(
        "/v1/vehicles",
        json=vehicle_payload(
            make="Honda",
            model="Fit",
            plate="HON1234",
            year=2014,
            price="45000",
            optionalIds=[],
            photos=[],
        ),
    )

    with_photos = client.get("/v1/vehicles/search", params={"photos": "com"}).json()
    without_photos = client.get("/v1/vehicles/search", params={"photos": "sem"}).json()
    by_optional = client.get("/v1/vehicles/search", params={"optionals": "Alarm"}).json()
    by_range = client.get(
        "/v1/vehicles/search", params={"yearMax": 2015, "priceMax": "50000"}
    ).json()

    assert [v["plate"] for v in with_photos] == ["GOL1F19"]
    assert [v["plate"] for v in without_photos] == ["HON1234"]
    assert [v["plate"] for v in by_optional] == ["GOL1F19"]
    assert [v["plate"] for v in by_range] == ["HON1234"]


def test_search_with_inverted_range_returns_400(client: TestClient) -> None:
    response = client.get("/v1/vehicles/search", params={"yearMin": 2020, "yearMax": 2010})

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_RANGE"


# ==============================================================================
# Portal packages
# ==============================================================================


def test_package_save_creates_then_updates(client: TestClient) -> None:
    vehicle_id = client.post("/v1/vehicles", json=vehicle_payload()).json()["id"]
    package = {"vehicleId": vehicle_id, "portal": "webmotors", "tier": "bronze"}

    first = client.post("/v1/portal-packages", json=package)
    second = client.post("/v1/portal-packages", json={**package, "tier": "diamond"})

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    listed = client.get(f"/v1/portal-packages/vehicle/{vehicle_id}").json()
    assert listed == [second.json()]
    assert client.get(f"/v1/vehicles/{vehicle_id}").json()["packages"] == listed


def test_bulk_save_rolls_back_when_a_vehicle_is_missing(client: TestClient) -> None:
    vehicle_id = client.post("/v1/vehicles", json=vehicle_payload()).json()["id"]

    response = client.post(
        "/v1/portal-packages/bulk",
        json=[
            {"vehicleId": vehicle_id, "portal": "icarros", "tier": "basic"},
            {"vehicleId": 999, "portal": "icarros", "tier": "basic"},
        ],
    )

    assert response.status_code == 404
    assert client.get(f"/v1/portal-packages/vehicle/{vehicle_id}").json() == []


def test_optionals_catalog(client: TestClient) -> None:
    response = client.get("/v1/optionals")

    assert response.status_code == 200
    assert [o["name"] for o in response.json()] == [
        "ABS Brakes",
        "Air Conditioning",
        "Airbag",
        "Alarm",
    ]
