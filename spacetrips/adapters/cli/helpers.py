"""
Helpers partages par les commandes CLI.

Fournit l'injection du container, l'ouverture du stockage par commande
et la traduction des erreurs fatales en code de sortie.
"""

from contextlib import contextmanager
from functools import wraps
from typing import Iterator

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from spacetrips.container import Container
from spacetrips.core.ports.api_clients import CatalogUnavailableError
from spacetrips.core.ports.repositories import StoreUnavailableError
from spacetrips.services.reservation_store import ReservationStore

console = Console()


@contextmanager
def suppress_loguru() -> Iterator[None]:
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("spacetrips")
    try:
        yield
    finally:
        loguru_logger.enable("spacetrips")


@contextmanager
def open_store(container: Container) -> Iterator[ReservationStore]:
    """Stockage des reservations sur une session fermee en sortie."""
    session = container.session()
    try:
        yield container.reservation_store(
            user_repo=container.user_repository(session=session),
            trip_repo=container.trip_repository(session=session),
        )
    finally:
        session.close()


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Le client du catalogue et le cache sont fermes en fin de commande.
    Les indisponibilites du stockage ou du catalogue terminent la
    commande avec le code de sortie 1.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                if requires_db:
                    container.database.init()
                return await func(container, *args, **kwargs)
            except (StoreUnavailableError, CatalogUnavailableError) as e:
                console.print(f"[red]Erreur:[/red] {e}")
                raise typer.Exit(1) from e
            finally:
                await container.spacex_client().close()
                container.api_cache().close()
        return wrapper
    return decorator

