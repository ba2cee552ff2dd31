"""
Modeles SQLModel pour la base de donnees SpaceTrips.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- users: Utilisateurs, uniques par email
- trips: Voyages reserves (utilisateur x lancement)
"""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(SQLModel, table=True):
    """
    Modele representant un utilisateur.

    L'unicite de l'email est garantie par une contrainte de la table.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    created_at: datetime | None = Field(default_factory=_utcnow)


class TripModel(SQLModel, table=True):
    """
    Modele representant un voyage reserve.

    launch_id est le numero de vol du catalogue distant : il n'y a pas de
    cle etrangere vers les lancements, qui ne sont pas stockes localement.
    """

    __tablename__ = "trips"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    launch_id: int = Field(index=True)
    created_at: datetime | None = Field(default_factory=_utcnow)
