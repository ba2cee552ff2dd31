"""
Adaptateur du stockage des reservations.

ReservationStore regroupe les operations sur les utilisateurs et les voyages
utilisees par l'identite et l'orchestrateur de reservation. C'est le seul
point d'ecriture des utilisateurs et des voyages.

Toutes les operations peuvent lever StoreUnavailableError : l'erreur est
fatale pour la requete englobante, sans repli silencieux.
"""

from typing import Optional

from loguru import logger

from spacetrips.core.entities.reservation import Trip, User
from spacetrips.core.ports.repositories import ITripRepository, IUserRepository
from spacetrips.core.value_objects.results import UserLookup


class ReservationStore:
    """
    Operations CRUD sur les utilisateurs et les voyages.

    Example:
        store = ReservationStore(user_repo=user_repo, trip_repo=trip_repo)
        lookup = store.find_or_create_user("a@a.a")
        store.create_trip(lookup.user.id, launch_id=1)
    """

    def __init__(self, user_repo: IUserRepository, trip_repo: ITripRepository) -> None:
        """
        Initialise le stockage des reservations.

        Args:
            user_repo: Repository des utilisateurs
            trip_repo: Repository des voyages
        """
        self._user_repo = user_repo
        self._trip_repo = trip_repo

    def find_or_create_user(self, email: str) -> UserLookup:
        """
        Retourne l'utilisateur de l'email, cree au premier contact.

        L'unicite de l'email est garantie par le stockage : deux appels
        avec le meme email ne creent jamais deux utilisateurs.
        """
        return self._user_repo.find_or_create(email)

    def find_trips_for_user(self, user_id: int) -> list[Trip]:
        """Liste les voyages d'un utilisateur."""
        return self._trip_repo.list_by_user(user_id)

    def launch_ids_for_user(self, user_id: int) -> list[int]:
        """Liste les numeros de vol reserves par un utilisateur (sans doublon)."""
        launch_ids: list[int] = []
        for trip in self.find_trips_for_user(user_id):
            if trip.launch_id not in launch_ids:
                launch_ids.append(trip.launch_id)
        return launch_ids

    def is_booked_on_launch(self, user: Optional[User], launch_id: int) -> bool:
        """Indique si l'utilisateur a un voyage sur ce lancement (False si anonyme)."""
        if user is None or user.id is None:
            return False
        return self._trip_repo.get(user.id, launch_id) is not None

    def create_trip(self, user_id: int, launch_id: int) -> Trip:
        """Garantit l'existence d'un voyage pour la paire et le retourne."""
        trip = self._trip_repo.find_or_create(user_id, launch_id)
        logger.debug(f"Voyage {trip.id}: utilisateur {user_id} sur le lancement {launch_id}")
        return trip

    def delete_trip(self, user_id: int, launch_id: int) -> bool:
        """
        Supprime le voyage de la paire.

        Returns:
            True si un voyage a ete supprime, False s'il n'existait pas
        """
        deleted = self._trip_repo.delete(user_id, launch_id)
        if not deleted:
            logger.debug(f"Aucun voyage a annuler: utilisateur {user_id}, lancement {launch_id}")
        return deleted
