"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from contextlib import contextmanager
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ironplan.plans.enums import FitnessLevel
from ironplan.plans.types import TrainingProfile

# Monday; a race 16 weeks later gives a 16-week plan starting on this day
AS_OF = date(2026, 1, 5)
RACE_16_WEEKS = AS_OF + timedelta(weeks=16)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def intermediate_profile() -> TrainingProfile:
    """Intermediate athlete, 12 h/week, racing 16 weeks after AS_OF."""
    return TrainingProfile(
        race_date=RACE_16_WEEKS,
        fitness_level=FitnessLevel.INTERMEDIATE,
        target_hours_per_week=12,
        weekday_time="06:00",
        weekend_time="08:00",
        timezone="America/New_York",
    )


@pytest.fixture
def beginner_profile() -> TrainingProfile:
    return TrainingProfile(
        race_date=RACE_16_WEEKS,
        fitness_level=FitnessLevel.BEGINNER,
        target_hours_per_week=10,
        weekday_time="05:30",
        weekend_time="07:00",
        timezone="UTC",
    )


@pytest.fixture(scope="function")
def db_session(monkeypatch):
    """
    Provides a transactional in-memory SQLite DB session for tests.

    This fixture:
    - Creates an isolated in-memory SQLite database per test
    - Patches the engine getter to use it
    - Patches get_session() to yield the test session
    - Rolls the outer transaction back at teardown
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    def mock_get_engine():
        return engine

    monkeypatch.setattr("ironplan.db.session._get_engine", mock_get_engine)
    monkeypatch.setattr("ironplan.db.session.get_engine", mock_get_engine)

    # Import models so every table registers in Base.metadata
    import ironplan.workouts.models  # noqa: F401
    from ironplan.db.models import Base

    Base.metadata.create_all(engine)

    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, autocommit=False, autoflush=False)()

    @contextmanager
    def mock_get_session():
        yield session

    import ironplan.db.session as session_module

    monkeypatch.setattr(session_module, "get_session", mock_get_session)

    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()
        engine.dispose()


@pytest.fixture
def client(db_session) -> TestClient:
    """FastAPI test client backed by the in-memory database.

    The app lifespan (table creation) is not run; db_session already
    created the schema.
    """
    from ironplan.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": "user-1"}
