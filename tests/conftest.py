"""Shared fixtures: an in-memory SQLite database and a deterministic clock."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from vehicle_inventory.domain.clock import Clock
from vehicle_inventory.domain.vehicle import DEFAULT_OPTIONAL_EQUIPMENT, OptionalEquipment
from vehicle_inventory.infra.db.models import Base, OptionalEquipmentRow

CLOCK_START = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def clock() -> Clock:
    """Clock that advances one minute per call, starting at CLOCK_START."""
    ticks = iter(range(1, 1_000_000))

    def now() -> datetime:
        return CLOCK_START + timedelta(minutes=next(ticks))

    return now


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """Fresh in-memory SQLite database with the full schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    session = Session(bind=engine, expire_on_commit=False)
    yield session
    session.close()


@pytest.fixture()
def optional_catalog(session: Session) -> list[OptionalEquipment]:
    """The default optional equipment catalog, persisted with ids 1..4."""
    rows = [
        OptionalEquipmentRow(id=index, name=name)
        for index, name in enumerate(DEFAULT_OPTIONAL_EQUIPMENT, start=1)
    ]
    session.add_all(rows)
    session.commit()
    return [OptionalEquipment(id=row.id, name=row.name) for row in rows]
