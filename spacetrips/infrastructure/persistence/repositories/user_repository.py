"""
Implementation SQLModel du repository User.

Implemente l'interface IUserRepository. Le find-or-create est un upsert
explicite sur la contrainte d'unicite de l'email.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from spacetrips.core.entities.reservation import User
from spacetrips.core.ports.repositories import IUserRepository
from spacetrips.core.value_objects.results import UserLookup
from spacetrips.infrastructure.persistence.database import store_errors
from spacetrips.infrastructure.persistence.models import UserModel


class SQLModelUserRepository(IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Implemente IUserRepository avec conversion entre l'entite User
    (domaine) et UserModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(id=model.id, email=model.email, created_at=model.created_at)

    def _select_by_email(self, email: str) -> Optional[UserModel]:
        statement = select(UserModel).where(UserModel.email == email)
        return self._session.exec(statement).first()

    def find_or_create(self, email: str) -> UserLookup:
        """
        Retourne l'utilisateur de l'email, en le creant au premier contact.

        Une insertion concurrente du meme email viole la contrainte d'unicite :
        l'enregistrement gagnant est alors relu.

        Retourne :
            UserLookup avec created=True si l'utilisateur vient d'etre cree
        """
        with store_errors(self._session):
            existing = self._select_by_email(email)
            if existing:
                return UserLookup(user=self._to_entity(existing), created=False)

            model = UserModel(email=email)
            self._session.add(model)
            try:
                self._session.commit()
            except IntegrityError:
                self._session.rollback()
                existing = self._select_by_email(email)
                if existing is None:
                    raise
                return UserLookup(user=self._to_entity(existing), created=False)

            self._session.refresh(model)
            logger.info(f"Nouvel utilisateur cree: {email}")
            return UserLookup(user=self._to_entity(model), created=True)
