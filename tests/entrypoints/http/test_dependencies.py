"""
Unit tests for FastAPI dependency injection functions.

- get_db() yields one session per request from get_session()
- Every use case factory builds its repositories on the injected session
- No caching of sessions or stateful objects

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock, Mock, patch

import pytest

from vehicle_inventory.adapters.sqlalchemy_optional_equipment_repository import (
    SqlAlchemyOptionalEquipmentRepository,
)
from vehicle_inventory.adapters.sqlalchemy_portal_package_repository import (
    SqlAlchemyPortalPackageRepository,
)
from vehicle_inventory.adapters.sqlalchemy_vehicle_repository import SqlAlchemyVehicleRepository
from vehicle_inventory.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_db,
    get_delete_portal_package_use_case,
    get_delete_vehicle_use_case,
    get_list_optional_equipment_use_case,
    get_list_vehicle_packages_use_case,
    get_list_vehicles_use_case,
    get_save_portal_package_use_case,
    get_save_portal_packages_use_case,
    get_search_vehicles_use_case,
    get_update_vehicle_use_case,
    get_vehicle_by_id_use_case,
)
from vehicle_inventory.use_cases.create_vehicle import CreateVehicle
from vehicle_inventory.use_cases.delete_portal_package import DeletePortalPackage
from vehicle_inventory.use_cases.delete_vehicle import DeleteVehicle
from vehicle_inventory.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_inventory.use_cases.list_optional_equipment import ListOptionalEquipment
from vehicle_inventory.use_cases.list_vehicle_packages import ListVehiclePackages
from vehicle_inventory.use_cases.list_vehicles import ListVehicles
from vehicle_inventory.use_cases.save_portal_package import SavePortalPackage
from vehicle_inventory.use_cases.save_portal_packages import SavePortalPackages
from vehicle_inventory.use_cases.search_vehicles import SearchVehicles
from vehicle_inventory.use_cases.update_vehicle import UpdateVehicle

FACTORIES: list[tuple[Callable, type]] = [
    (get_list_vehicles_use_case, ListVehicles),
    (get_vehicle_by_id_use_case, GetVehicleById),
    (get_search_vehicles_use_case, SearchVehicles),
    (get_create_vehicle_use_case, CreateVehicle),
    (get_update_vehicle_use_case, UpdateVehicle),
    (get_delete_vehicle_use_case, DeleteVehicle),
    (get_list_optional_equipment_use_case, ListOptionalEquipment),
    (get_save_portal_package_use_case, SavePortalPackage),
    (get_save_portal_packages_use_case, SavePortalPackages),
    (get_list_vehicle_packages_use_case, ListVehiclePackages),
    (get_delete_portal_package_use_case, DeletePortalPackage),
]


def repositories_of(use_case: object) -> list:
    """Repository collaborators held by a use case, whatever their attribute names."""
    repository_types = (
        SqlAlchemyVehicleRepository,
        SqlAlchemyOptionalEquipmentRepository,
        SqlAlchemyPortalPackageRepository,
    )
    return [
        getattr(use_case, slot)
        for slot in dir(use_case)
        if slot.startswith("_")
        and not slot.startswith("__")
        and isinstance(getattr(use_case, slot), repository_types)
    ]


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    """get_db() yields a session from the get_session context manager."""
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch("vehicle_inventory.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        session = next(generator)

        assert session is mock_session

        # Complete the generator (simulates FastAPI cleanup)
        with pytest.raises(StopIteration):
            next(generator)

        mock_context_manager.__enter__.assert_called_once()
        mock_context_manager.__exit__.assert_called_once()


def test_get_db_exits_context_on_exception() -> None:
    """An error raised while handling the request reaches get_session's cleanup."""
    mock_context_manager = MagicMock()
    mock_context_manager.__exit__.return_value = None

    with patch("vehicle_inventory.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("Simulated error during request"))

        exc_type = mock_context_manager.__exit__.call_args.args[0]
        assert exc_type is RuntimeError


def test_get_db_creates_new_session_each_call() -> None:
    with patch("vehicle_inventory.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.side_effect = [MagicMock(), MagicMock()]

        session1 = next(get_db())
        session2 = next(get_db())

        assert mock_get_session.call_count == 2
        assert session1 is not session2


# ==============================================================================
# Use case factories
# ==============================================================================


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_builds_use_case_on_injected_session(
    factory: Callable, use_case_type: type
) -> None:
    mock_session = Mock()

    use_case = factory(db=mock_session)

    assert isinstance(use_case, use_case_type)
    repositories = repositories_of(use_case)
    assert repositories
    assert all(repository._session is mock_session for repository in repositories)


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_creates_fresh_instance_each_call(factory: Callable, use_case_type: type) -> None:
    assert factory(db=Mock()) is not factory(db=Mock())


def test_create_use_case_shares_session_between_repositories() -> None:
    mock_session = Mock()

    use_case = get_create_vehicle_use_case(db=mock_session)

    assert isinstance(use_case._vehicles, SqlAlchemyVehicleRepository)
    assert isinstance(use_case._optionals, SqlAlchemyOptionalEquipmentRepository)
    assert use_case._vehicles._session is use_case._optionals._session


def test_dependencies_are_not_cached() -> None:
    """Dependencies are not cached with @lru_cache (per-request instances)."""
    assert not hasattr(get_db, "__wrapped__")
    for factory, _ in FACTORIES:
        assert not hasattr(factory, "__wrapped__")
