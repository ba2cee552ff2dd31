"""
Point d'entrée CLI de SpaceTrips.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import book, cancel, launches, login, trips
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="spacetrips",
    help="Catalogue des lancements SpaceX et reservation de voyages",
)
container = Container()


# Commandes du catalogue et des reservations
app.command()(launches)
app.command()(login)
app.command()(book)
app.command()(cancel)
app.command()(trips)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration SpaceTrips")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Catalogue : {config.spacex_api_url}")
    typer.echo(f"Cache : {config.cache_dir} (liste {config.launch_list_ttl}s, lancement {config.launch_ttl}s)")
    typer.echo(f"Taille de page : {config.default_page_size}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"SpaceTrips v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 4000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web SpaceTrips."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("spacetrips.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de SpaceTrips", version=__version__)

    app()


if __name__ == "__main__":
    main()
