"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance
des utilisateurs et des voyages. Les implémentations (adaptateurs) fournissent
le stockage concret (SQLite via SQLModel).
"""

from abc import ABC, abstractmethod
from typing import Optional

from spacetrips.core.entities.reservation import Trip
from spacetrips.core.value_objects.results import UserLookup


class StoreUnavailableError(Exception):
    """
    Exception levée quand le stockage ne peut pas traiter une opération.

    Toujours fatale pour la requête englobante : aucun repli silencieux.
    """


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    L'email est unique : le stockage garantit qu'aucun doublon n'existe.
    """

    @abstractmethod
    def find_or_create(self, email: str) -> UserLookup:
        """Retourne l'utilisateur existant pour l'email, ou le crée."""
        ...


class ITripRepository(ABC):
    """
    Interface de stockage des voyages réservés.

    Un voyage associe un utilisateur à un lancement.
    """

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Trip]:
        """Liste les voyages d'un utilisateur."""
        ...

    @abstractmethod
    def get(self, user_id: int, launch_id: int) -> Optional[Trip]:
        """Récupère le voyage d'un utilisateur sur un lancement."""
        ...

    @abstractmethod
    def find_or_create(self, user_id: int, launch_id: int) -> Trip:
        """Retourne le voyage existant pour la paire, ou le crée."""
        ...

    @abstractmethod
    def delete(self, user_id: int, launch_id: int) -> bool:
        """Supprime le voyage de la paire. Retourne True si supprimé."""
        ...
