"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le client du catalogue et son cache sont partages (Singleton) ; le stockage
des reservations est construit avec une session fraiche a chaque appel.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.api.cache import APICache
from .adapters.api.spacex_client import SpaceXClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelTripRepository,
    SQLModelUserRepository,
)
from .services.booking import BookingService
from .services.identity import IdentityResolver
from .services.reservation_store import ReservationStore


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        session = container.session()
        store = container.reservation_store(
            user_repo=container.user_repository(session=session),
            trip_repo=container.trip_repository(session=session),
        )
        booking = container.booking_service(store=store)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage, sessions par requete
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)
    session = providers.Factory(Session, engine)

    # Cache et client du catalogue - Singletons partages entre requetes
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
        list_ttl=config.provided.launch_list_ttl,
        launch_ttl=config.provided.launch_ttl,
    )
    spacex_client = providers.Singleton(
        SpaceXClient,
        cache=api_cache,
        base_url=config.provided.spacex_api_url,
        timeout=config.provided.http_timeout,
        default_page_size=config.provided.default_page_size,
        max_attempts=config.provided.http_max_attempts,
    )

    # Repositories - Factory, la session est fournie a l'appel
    user_repository = providers.Factory(SQLModelUserRepository, session=session)
    trip_repository = providers.Factory(SQLModelTripRepository, session=session)

    # Stockage des reservations - Factory pour une session fraiche
    reservation_store = providers.Factory(
        ReservationStore,
        user_repo=user_repository,
        trip_repo=trip_repository,
    )

    # Services - Factory car dependent du stockage (sessions fraiches)
    identity_resolver = providers.Factory(IdentityResolver, store=reservation_store)
    booking_service = providers.Factory(
        BookingService,
        catalog=spacex_client,
        store=reservation_store,
    )
