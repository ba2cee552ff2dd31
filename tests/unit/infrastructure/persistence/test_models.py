"""
Tests pour les modeles SQLModel de persistance.

Verifie les valeurs par defaut, les contraintes des tables users et trips
et la relecture des horodatages (UTC).
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from spacetrips.infrastructure.persistence.models import TripModel, UserModel


def _as_utc(value: datetime) -> datetime:
    """SQLite ne conserve pas le fuseau : une valeur relue naive est en UTC."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class TestUserModel:
    """Tests pour UserModel."""

    def test_user_model_defaults(self):
        """L'id est attribue par la base, created_at a la creation (UTC)."""
        model = UserModel(email="a@a.a")
        assert model.id is None
        assert model.created_at.tzinfo is not None

    def test_email_is_unique(self, session: Session):
        """Deux utilisateurs ne peuvent pas partager un email."""
        session.add(UserModel(email="a@a.a"))
        session.commit()

        session.add(UserModel(email="a@a.a"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_created_at_round_trips(self, engine: Engine):
        """created_at est insere puis relu depuis une autre session."""
        before = datetime.now(timezone.utc)
        with Session(engine) as session:
            model = UserModel(email="a@a.a")
            session.add(model)
            session.commit()
            user_id = model.id

        with Session(engine) as session:
            stored = session.get(UserModel, user_id)

        assert stored.created_at is not None
        assert abs(_as_utc(stored.created_at) - before) < timedelta(minutes=1)


class TestTripModel:
    """Tests pour TripModel."""

    def test_trip_model_fields(self):
        model = TripModel(user_id=1, launch_id=42)
        assert model.user_id == 1
        assert model.launch_id == 42
        assert model.created_at.tzinfo is not None

    def test_created_at_round_trips(self, engine: Engine):
        with Session(engine) as session:
            user = UserModel(email="a@a.a")
            session.add(user)
            session.commit()
            trip = TripModel(user_id=user.id, launch_id=1)
            session.add(trip)
            session.commit()
            trip_id = trip.id

        with Session(engine) as session:
            stored = session.get(TripModel, trip_id)

        assert stored.launch_id == 1
        assert stored.created_at is not None
