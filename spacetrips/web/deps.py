"""
Dépendances partagées de l'application web.

Construit, pour chaque requête, le stockage des réservations (session
fraîche, fermée en fin de requête) et les services qui en dépendent.
Le client du catalogue est partagé via le Container DI.
"""

from collections.abc import Iterator
from typing import Optional

from fastapi import Depends, Header, Request

from ..core.entities.reservation import User
from ..core.ports.api_clients import ILaunchCatalog
from ..services.booking import BookingService
from ..services.identity import IdentityResolver
from ..services.reservation_store import ReservationStore


def get_catalog(request: Request) -> ILaunchCatalog:
    """Client du catalogue partagé entre les requêtes."""
    return request.app.state.container.spacex_client()


def get_reservation_store(request: Request) -> Iterator[ReservationStore]:
    """Stockage des réservations sur une session dédiée à la requête."""
    container = request.app.state.container
    session = container.session()
    try:
        yield container.reservation_store(
            user_repo=container.user_repository(session=session),
            trip_repo=container.trip_repository(session=session),
        )
    finally:
        session.close()


def get_identity_resolver(
    store: ReservationStore = Depends(get_reservation_store),
) -> IdentityResolver:
    return IdentityResolver(store)


def get_current_user(
    resolver: IdentityResolver = Depends(get_identity_resolver),
    authorization: Optional[str] = Header(None),
) -> Optional[User]:
    """Utilisateur courant dérivé du header Authorization (None si anonyme)."""
    return resolver.resolve(authorization)


def get_booking_service(
    catalog: ILaunchCatalog = Depends(get_catalog),
    store: ReservationStore = Depends(get_reservation_store),
) -> BookingService:
    return BookingService(catalog=catalog, store=store)
