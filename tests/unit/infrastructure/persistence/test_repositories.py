"""
Tests des repositories SQLModel sur une base SQLite en memoire.

Tests couvrant:
- Find-or-create des utilisateurs (creation unique par email)
- Creation idempotente et suppression des voyages
- Conversion des erreurs de connexion en StoreUnavailableError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from spacetrips.core.entities.reservation import Trip, User
from spacetrips.core.ports.repositories import StoreUnavailableError
from spacetrips.infrastructure.persistence.repositories import (
    SQLModelTripRepository,
    SQLModelUserRepository,
)


def _broken_session() -> MagicMock:
    """Session dont chaque requete echoue comme une base inaccessible."""
    session = MagicMock()
    session.exec.side_effect = OperationalError(
        "SELECT", {}, Exception("unable to open database file")
    )
    session.get.side_effect = session.exec.side_effect
    return session


class TestSQLModelUserRepository:
    """Tests pour SQLModelUserRepository."""

    def test_find_or_create_creates_user(self, user_repo: SQLModelUserRepository):
        lookup = user_repo.find_or_create("a@a.a")

        assert lookup.created is True
        assert isinstance(lookup.user, User)
        assert lookup.user.id is not None
        assert lookup.user.email == "a@a.a"
        assert lookup.user.created_at is not None

    def test_find_or_create_returns_existing_user(self, user_repo: SQLModelUserRepository):
        first = user_repo.find_or_create("a@a.a")
        second = user_repo.find_or_create("a@a.a")

        assert second.created is False
        assert second.user.id == first.user.id

    def test_distinct_emails_give_distinct_users(self, user_repo: SQLModelUserRepository):
        first = user_repo.find_or_create("a@a.a")
        second = user_repo.find_or_create("b@b.b")

        assert first.user.id != second.user.id

    def test_store_unavailable(self):
        repo = SQLModelUserRepository(_broken_session())

        with pytest.raises(StoreUnavailableError):
            repo.find_or_create("a@a.a")


class TestSQLModelTripRepository:
    """Tests pour SQLModelTripRepository."""

    @pytest.fixture
    def user_id(self, user_repo: SQLModelUserRepository) -> int:
        return user_repo.find_or_create("a@a.a").user.id

    def test_find_or_create_creates_trip(self, trip_repo: SQLModelTripRepository, user_id: int):
        trip = trip_repo.find_or_create(user_id, 1)

        assert isinstance(trip, Trip)
        assert trip.id is not None
        assert (trip.user_id, trip.launch_id) == (user_id, 1)

    def test_find_or_create_is_idempotent(self, trip_repo: SQLModelTripRepository, user_id: int):
        first = trip_repo.find_or_create(user_id, 1)
        second = trip_repo.find_or_create(user_id, 1)

        assert first.id == second.id
        assert len(trip_repo.list_by_user(user_id)) == 1

    def test_list_by_user_in_booking_order(
        self, trip_repo: SQLModelTripRepository, user_id: int
    ):
        trip_repo.find_or_create(user_id, 3)
        trip_repo.find_or_create(user_id, 1)

        assert [trip.launch_id for trip in trip_repo.list_by_user(user_id)] == [3, 1]

    def test_list_by_user_is_scoped(
        self,
        trip_repo: SQLModelTripRepository,
        user_repo: SQLModelUserRepository,
        user_id: int,
    ):
        other_id = user_repo.find_or_create("b@b.b").user.id
        trip_repo.find_or_create(other_id, 1)

        assert trip_repo.list_by_user(user_id) == []

    def test_get(self, trip_repo: SQLModelTripRepository, user_id: int):
        created = trip_repo.find_or_create(user_id, 2)

        assert trip_repo.get(user_id, 2) == created
        assert trip_repo.get(user_id, 3) is None

    def test_delete_existing_trip(self, trip_repo: SQLModelTripRepository, user_id: int):
        trip_repo.find_or_create(user_id, 1)

        assert trip_repo.delete(user_id, 1) is True
        assert trip_repo.get(user_id, 1) is None

    def test_delete_missing_trip(self, trip_repo: SQLModelTripRepository, user_id: int):
        assert trip_repo.delete(user_id, 1) is False

    def test_store_unavailable(self):
        repo = SQLModelTripRepository(_broken_session())

        with pytest.raises(StoreUnavailableError):
            repo.list_by_user(1)
        with pytest.raises(StoreUnavailableError):
            repo.delete(1, 1)
