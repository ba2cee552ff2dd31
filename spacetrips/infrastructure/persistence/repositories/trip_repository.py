"""
Implementation SQLModel du repository Trip.

Implemente l'interface ITripRepository pour les voyages reserves.
"""

from typing import Optional

from sqlmodel import Session, select

from spacetrips.core.entities.reservation import Trip
from spacetrips.core.ports.repositories import ITripRepository
from spacetrips.infrastructure.persistence.database import store_errors
from spacetrips.infrastructure.persistence.models import TripModel


class SQLModelTripRepository(ITripRepository):
    """
    Repository SQLModel pour les voyages.

    Un voyage par paire (utilisateur, lancement) : la creation est
    idempotente et la suppression d'un voyage absent n'est pas une erreur.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: TripModel) -> Trip:
        return Trip(
            id=model.id,
            user_id=model.user_id,
            launch_id=model.launch_id,
            created_at=model.created_at,
        )

    def _select(self, user_id: int, launch_id: int) -> Optional[TripModel]:
        statement = (
            select(TripModel)
            .where(TripModel.user_id == user_id)
            .where(TripModel.launch_id == launch_id)
        )
        return self._session.exec(statement).first()

    def list_by_user(self, user_id: int) -> list[Trip]:
        """Liste les voyages d'un utilisateur, par ordre de reservation."""
        statement = (
            select(TripModel)
            .where(TripModel.user_id == user_id)
            .order_by(TripModel.id)
        )
        with store_errors(self._session):
            models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get(self, user_id: int, launch_id: int) -> Optional[Trip]:
        """Recupere le voyage d'un utilisateur sur un lancement."""
        with store_errors(self._session):
            model = self._select(user_id, launch_id)
        return self._to_entity(model) if model else None

    def find_or_create(self, user_id: int, launch_id: int) -> Trip:
        """Retourne le voyage existant pour la paire, ou le cree."""
        with store_errors(self._session):
            existing = self._select(user_id, launch_id)
            if existing:
                return self._to_entity(existing)

            model = TripModel(user_id=user_id, launch_id=launch_id)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
            return self._to_entity(model)

    def delete(self, user_id: int, launch_id: int) -> bool:
        """Supprime le(s) voyage(s) de la paire. Retourne True si supprime."""
        statement = (
            select(TripModel)
            .where(TripModel.user_id == user_id)
            .where(TripModel.launch_id == launch_id)
        )
        with store_errors(self._session):
            models = self._session.exec(statement).all()
            if not models:
                return False
            for model in models:
                self._session.delete(model)
            self._session.commit()
        return True
