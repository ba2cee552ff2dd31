"""
Fixtures pytest partagees pour les tests SpaceTrips.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire et repositories SQLModel
- Stockage des reservations
- Lancements normalises et mock du catalogue
- Settings de test avec chemins temporaires
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from spacetrips.config import Settings
from spacetrips.core.entities.launch import Launch
from spacetrips.core.ports.api_clients import ILaunchCatalog
from spacetrips.infrastructure.persistence.database import create_db_engine, init_db
from spacetrips.infrastructure.persistence.repositories import (
    SQLModelTripRepository,
    SQLModelUserRepository,
)
from spacetrips.services.reservation_store import ReservationStore
from spacetrips.utils.pagination import paginate
from tests.fixtures.launches import make_launch


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec les tables creees."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def user_repo(session: Session) -> SQLModelUserRepository:
    return SQLModelUserRepository(session)


@pytest.fixture
def trip_repo(session: Session) -> SQLModelTripRepository:
    return SQLModelTripRepository(session)


@pytest.fixture
def store(
    user_repo: SQLModelUserRepository, trip_repo: SQLModelTripRepository
) -> ReservationStore:
    """Stockage des reservations sur la base en memoire."""
    return ReservationStore(user_repo=user_repo, trip_repo=trip_repo)


@pytest.fixture
def launches() -> list[Launch]:
    """Catalogue de trois lancements (vols 1 a 3)."""
    return [make_launch(1, "FalconSat"), make_launch(2, "DemoSat"), make_launch(3, "Trailblazer")]


@pytest.fixture
def mock_catalog(launches: list[Launch]) -> AsyncMock:
    """
    Mock de ILaunchCatalog.

    get_launch_by_id retourne le lancement connu, ou None pour un
    identifiant absent du catalogue.
    """
    by_id = {launch.id: launch for launch in launches}
    catalog = AsyncMock(spec=ILaunchCatalog)
    catalog.get_all_launches.return_value = launches
    catalog.get_launch_by_id.side_effect = lambda launch_id: by_id.get(launch_id)
    catalog.get_launches_by_ids.side_effect = lambda ids: [
        by_id[launch_id] for launch_id in ids if launch_id in by_id
    ]
    catalog.list_launches.side_effect = lambda cursor=None, page_size=None: paginate(
        launches, cursor=cursor, page_size=20 if page_size is None else page_size
    )
    return catalog


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        database_url="sqlite://",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )
