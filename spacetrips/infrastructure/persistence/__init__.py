"""
Module de persistance SQL pour SpaceTrips.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, initialisation, conversion des erreurs
- models.py : Modeles SQLModel representant les tables (users, trips)
- repositories/ : Implementations des ports IUserRepository et ITripRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from spacetrips.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
    store_errors,
)
from spacetrips.infrastructure.persistence.models import TripModel, UserModel

__all__ = [
    "create_db_engine",
    "init_db",
    "store_errors",
    "UserModel",
    "TripModel",
]
