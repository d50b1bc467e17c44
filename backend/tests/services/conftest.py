"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine
    - seed_catalog inserts a small catalog and returns the ids it created

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (foreign keys are off by default there; tests that need the constraint
      turn on PRAGMA foreign_keys themselves)
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import loncotes.infrastructure.database as db_module
from loncotes.db.base import Base
from loncotes.infrastructure.database import DatabaseSessionManager, get_db
from loncotes.main import app
from loncotes.models import Checkout, Genre, Material, MaterialType, Patron


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_catalog(test_db):
    """Two types, two genres, two patrons, four materials (one withdrawn), three checkouts."""
    book = MaterialType(name="Book", checkout_days=14)
    periodical = MaterialType(name="Periodical", checkout_days=7)
    scifi = Genre(name="Science Fiction")
    mystery = Genre(name="Mystery")
    test_db.add_all([book, periodical, scifi, mystery])

    dune = Material(material_name="Dune", material_type=book, genre=scifi)
    hound = Material(
        material_name="The Hound of the Baskervilles",
        material_type=book, genre=mystery,
    )
    zine = Material(material_name="Analog, March", material_type=periodical, genre=scifi)
    withdrawn = Material(
        material_name="Murder on the Orient Express",
        material_type=book, genre=mystery,
        out_of_circulation_since=datetime(2023, 3, 1, tzinfo=timezone.utc),
    )
    ada = Patron(
        first_name="Ada", last_name="Moreno", address="101 Elm St",
        email="ada@example.com", is_active=True,
    )
    bo = Patron(
        first_name="Bo", last_name="Pike", address="22 Harbor Rd",
        email="bo@example.com", is_active=False,
    )
    test_db.add_all([dune, hound, zine, withdrawn, ada, bo])

    returned = Checkout(
        material=dune, patron=ada,
        checkout_date=datetime(2024, 1, 3, tzinfo=timezone.utc),
        return_date=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )
    outstanding = Checkout(
        material=hound, patron=ada,
        checkout_date=datetime(2024, 2, 10, tzinfo=timezone.utc),
    )
    old_loan = Checkout(
        material=withdrawn, patron=bo,
        checkout_date=datetime(2022, 11, 20, tzinfo=timezone.utc),
        return_date=datetime(2022, 12, 1, tzinfo=timezone.utc),
    )
    test_db.add_all([returned, outstanding, old_loan])
    await test_db.commit()

    return {
        "book": book.id, "periodical": periodical.id,
        "scifi": scifi.id, "mystery": mystery.id,
        "dune": dune.id, "hound": hound.id, "zine": zine.id,
        "withdrawn": withdrawn.id,
        "ada": ada.id, "bo": bo.id,
        "returned_checkout": returned.id,
        "outstanding_checkout": outstanding.id,
        "old_checkout": old_loan.id,
    }
