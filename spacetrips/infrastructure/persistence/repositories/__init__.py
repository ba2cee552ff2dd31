"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans spacetrips/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Convertit les erreurs de connexion en StoreUnavailableError
"""

from spacetrips.infrastructure.persistence.repositories.trip_repository import (
    SQLModelTripRepository,
)
from spacetrips.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelUserRepository",
    "SQLModelTripRepository",
]
