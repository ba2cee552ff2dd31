"""
Orchestrateur des reservations de voyages.

BookingService coordonne le catalogue des lancements et le stockage des
reservations pour reserver plusieurs lancements ou en annuler un, au nom
d'un utilisateur authentifie.

La reservation n'est PAS atomique : chaque lancement est tente
independamment et un echec partiel est un resultat normal (success=False),
pas une erreur. Seuls les lancements effectivement reserves sont retournes.
"""

import asyncio
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from loguru import logger

from spacetrips.core.entities.launch import Launch
from spacetrips.core.entities.reservation import User
from spacetrips.core.ports.api_clients import ILaunchCatalog
from spacetrips.core.value_objects.results import LaunchBookingState, TripUpdateResponse
from spacetrips.services.reservation_store import ReservationStore

BOOK_SUCCESS_MESSAGE = "trips booked successfully"
BOOK_PARTIAL_MESSAGE = "some launches may not have been booked"
BOOK_UNAUTHORIZED_MESSAGE = "you must be logged in to book trips"
CANCEL_SUCCESS_MESSAGE = "trip cancelled"
CANCEL_NOT_FOUND_MESSAGE = "launch not found"
CANCEL_UNAUTHORIZED_MESSAGE = "you must be logged in to cancel trips"


@dataclass(frozen=True)
class BookingOutcome:
    """
    Issue de la tentative de reservation d'un lancement.

    Attributes:
        launch_id: Numero de vol demande
        launch: Lancement reserve, ou None si la tentative a echoue
    """

    launch_id: int
    launch: Optional[Launch] = None

    @property
    def booked(self) -> bool:
        return self.launch is not None


def aggregate_outcomes(outcomes: Sequence[BookingOutcome]) -> TripUpdateResponse:
    """
    Reduit les issues individuelles en reponse de reservation.

    success vaut True seulement si chaque lancement demande a ete reserve.
    Les identifiants en echec ne sont pas enumeres : ils sont seulement
    absents de la liste des lancements.
    """
    booked = tuple(
        LaunchBookingState(id=outcome.launch_id, is_booked=True, launch=outcome.launch)
        for outcome in outcomes
        if outcome.booked
    )
    success = len(booked) == len(outcomes)
    return TripUpdateResponse(
        success=success,
        message=BOOK_SUCCESS_MESSAGE if success else BOOK_PARTIAL_MESSAGE,
        launches=booked,
    )


class BookingService:
    """
    Service de reservation et d'annulation de voyages.

    Sans etat entre deux appels : tout l'etat vit dans le catalogue et le
    stockage des reservations, injectes a la construction.

    Example:
        service = BookingService(catalog=spacex_client, store=reservation_store)
        response = await service.book_trips(user, [1, 2])
        if not response.success:
            print(response.message)
    """

    def __init__(self, catalog: ILaunchCatalog, store: ReservationStore) -> None:
        """
        Initialise le service de reservation.

        Args:
            catalog: Catalogue des lancements (verification d'existence)
            store: Stockage des reservations (seul point d'ecriture des voyages)
        """
        self._catalog = catalog
        self._store = store

    async def _attempt_booking(self, user_id: int, launch_id: int) -> BookingOutcome:
        """Tente de reserver un lancement, sans interrompre les autres."""
        launch = await self._catalog.get_launch_by_id(launch_id)
        if launch is None:
            logger.info(f"Reservation impossible: lancement {launch_id} inconnu")
            return BookingOutcome(launch_id=launch_id)

        self._store.create_trip(user_id, launch_id)
        return BookingOutcome(launch_id=launch_id, launch=launch)

    async def book_trips(
        self, user: Optional[User], launch_ids: Iterable[int]
    ) -> TripUpdateResponse:
        """
        Reserve une place sur chacun des lancements demandes.

        Les lancements sont traites en parallele ; l'agregation attend la fin
        de toutes les tentatives.

        Args:
            user: Utilisateur courant (None si anonyme)
            launch_ids: Numeros de vol a reserver, dans l'ordre de la demande

        Returns:
            TripUpdateResponse avec les lancements effectivement reserves

        Raises:
            StoreUnavailableError: Si le stockage ne repond pas
            CatalogUnavailableError: Si le catalogue ne repond pas
        """
        if user is None or user.id is None:
            return TripUpdateResponse(success=False, message=BOOK_UNAUTHORIZED_MESSAGE)

        requested = list(launch_ids)
        outcomes = await asyncio.gather(
            *(self._attempt_booking(user.id, launch_id) for launch_id in requested)
        )
        response = aggregate_outcomes(outcomes)

        logger.info(
            f"Reservation de {user.email}: {len(response.launches)}/{len(requested)} lancements"
        )
        return response

    async def cancel_trip(self, user: Optional[User], launch_id: int) -> TripUpdateResponse:
        """
        Annule le voyage de l'utilisateur sur un lancement.

        L'annulation est idempotente : sans voyage existant, le lancement est
        deja "non reserve" et l'operation reussit.

        Args:
            user: Utilisateur courant (None si anonyme)
            launch_id: Numero de vol a annuler

        Returns:
            TripUpdateResponse ; le lancement est toujours rapporte non reserve
        """
        if user is None or user.id is None:
            return TripUpdateResponse(success=False, message=CANCEL_UNAUTHORIZED_MESSAGE)

        self._store.delete_trip(user.id, launch_id)
        launch = await self._catalog.get_launch_by_id(launch_id)
        state = LaunchBookingState(id=launch_id, is_booked=False, launch=launch)

        if launch is None:
            return TripUpdateResponse(
                success=False, message=CANCEL_NOT_FOUND_MESSAGE, launches=(state,)
            )
        return TripUpdateResponse(
            success=True, message=CANCEL_SUCCESS_MESSAGE, launches=(state,)
        )

    async def trips_for_user(self, user: Optional[User]) -> list[Launch]:
        """Lancements reserves par l'utilisateur (vide si anonyme)."""
        if user is None or user.id is None:
            return []
        launch_ids = self._store.launch_ids_for_user(user.id)
        return await self._catalog.get_launches_by_ids(launch_ids)

    def booking_states(
        self, user: Optional[User], launches: Iterable[Launch]
    ) -> list[LaunchBookingState]:
        """Etat de reservation de chaque lancement pour l'utilisateur courant."""
        booked_ids: set[int] = set()
        if user is not None and user.id is not None:
            booked_ids = set(self._store.launch_ids_for_user(user.id))
        return [
            LaunchBookingState(id=launch.id, is_booked=launch.id in booked_ids, launch=launch)
            for launch in launches
        ]
