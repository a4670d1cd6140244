"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Generator
from datetime import date, datetime, timedelta
from typing import Any

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from poker_tracker.models import StorageEntry  # noqa: F401  (registers the table)
from poker_tracker.schemas.domain import ColorTag, Player, PlaySession
from poker_tracker.services.persistence_service import PersistenceBridge
from poker_tracker.services.store import Store

START = datetime(2024, 3, 1, 20, 0)

type SessionFactory = Callable[..., PlaySession]
type PlayerFactory = Callable[..., Player]


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(test_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    with Session(test_engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def store() -> Store:
    """A store holding only the seeded stakes and formats."""
    return Store()


@pytest.fixture
def bridge(store, test_engine) -> PersistenceBridge:
    """A persistence bridge over the test store and engine."""
    return PersistenceBridge(store, test_engine)


@pytest.fixture
def make_session() -> SessionFactory:
    """Build finished sessions; override any field by keyword."""
    counter = 0

    def factory(**overrides: Any) -> PlaySession:
        nonlocal counter
        counter += 1
        values: dict[str, Any] = {
            "id": f"s{counter}",
            "date": date(2024, 3, 1),
            "start_time": START,
            "end_time": START + timedelta(hours=2),
            "hands_start": 1000,
            "hands_end": 1400,
            "limit": "1/2/4 (1 ante)",
            "format": "8-max with ante",
            "straddle": False,
            "account_start": 100.0,
            "account_end": 150.0,
            "is_active": False,
        }
        values.update(overrides)
        return PlaySession(**values)

    return factory


@pytest.fixture
def make_player() -> PlayerFactory:
    """Build players; override any field by keyword."""
    counter = 0

    def factory(**overrides: Any) -> Player:
        nonlocal counter
        counter += 1
        values: dict[str, Any] = {
            "id": f"p{counter}",
            "name": f"Villain {counter}",
            "color_tag": ColorTag.GREEN,
            "total_hands": 250,
            "vpip": 45.0,
            "pfr": 8.0,
            "note": "Calls too much",
            "exploits": "Value bet thin",
        }
        values.update(overrides)
        return Player(**values)

    return factory
