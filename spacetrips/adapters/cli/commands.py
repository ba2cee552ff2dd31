"""
Commandes CLI du catalogue et des reservations.

- launches : page du catalogue (curseur --after)
- login : token d'un email
- book / cancel : reservation et annulation de voyages
- trips : voyages de l'utilisateur courant
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from spacetrips.adapters.cli.helpers import (
    console,
    open_store,
    suppress_loguru,
    with_container,
)
from spacetrips.core.value_objects.results import TripUpdateResponse
from spacetrips.services.booking import BookingService
from spacetrips.services.identity import IdentityResolver

TokenOption = Annotated[
    Optional[str],
    typer.Option(
        "--token", "-t",
        envvar="SPACETRIPS_TOKEN",
        help="Token de l'utilisateur (retourne par la commande login)",
    ),
]


def _print_trip_update(response: TripUpdateResponse) -> None:
    """Affiche le resultat d'une reservation ou d'une annulation."""
    color = "green" if response.success else "yellow"
    console.print(f"[{color}]{response.message}[/{color}]")
    for state in response.launches:
        status = "reserve" if state.is_booked else "non reserve"
        console.print(f"  Lancement {state.id}: {status}")


def launches(
    after: Annotated[
        Optional[str], typer.Option("--after", help="Curseur de la page precedente")
    ] = None,
    page_size: Annotated[
        Optional[int], typer.Option("--page-size", "-n", min=1, help="Nombre de lancements")
    ] = None,
    token: TokenOption = None,
) -> None:
    """Affiche une page du catalogue des lancements."""
    asyncio.run(_launches_async(after, page_size, token))


@with_container()
async def _launches_async(
    container, after: Optional[str], page_size: Optional[int], token: Optional[str]
) -> None:
    """Implementation async de la commande launches."""
    catalog = container.spacex_client()
    with open_store(container) as store:
        user = IdentityResolver(store).resolve(token)
        page = await catalog.list_launches(cursor=after, page_size=page_size)
        states = BookingService(catalog=catalog, store=store).booking_states(
            user, page.launches
        )

    table = Table(title="Lancements")
    table.add_column("Vol", justify="right")
    table.add_column("Mission")
    table.add_column("Fusee")
    table.add_column("Site")
    table.add_column("Reserve")
    for state in states:
        launch = state.launch
        table.add_row(
            str(launch.id),
            launch.mission.name or "-",
            launch.rocket.name or "-",
            launch.site or "-",
            "oui" if state.is_booked else "",
        )

    with suppress_loguru():
        console.print(table)
        if page.has_more:
            console.print(f"Suite: --after {page.cursor}")


def login(
    email: Annotated[str, typer.Argument(help="Email de l'utilisateur")],
) -> None:
    """Connecte un utilisateur et affiche son token."""
    asyncio.run(_login_async(email))


@with_container()
async def _login_async(container, email: str) -> None:
    with open_store(container) as store:
        token = IdentityResolver(store).login(email)
    if token is None:
        console.print(f"[red]Email invalide:[/red] {email}")
        raise typer.Exit(1)
    typer.echo(token)


def book(
    launch_ids: Annotated[list[int], typer.Argument(help="Numeros de vol a reserver")],
    token: TokenOption = None,
) -> None:
    """Reserve une place sur un ou plusieurs lancements."""
    asyncio.run(_book_async(launch_ids, token))


@with_container()
async def _book_async(container, launch_ids: list[int], token: Optional[str]) -> None:
    with open_store(container) as store:
        user = IdentityResolver(store).resolve(token)
        service = BookingService(catalog=container.spacex_client(), store=store)
        response = await service.book_trips(user, launch_ids)
    _print_trip_update(response)
    if not response.success:
        raise typer.Exit(1)


def cancel(
    launch_id: Annotated[int, typer.Argument(help="Numero de vol a annuler")],
    token: TokenOption = None,
) -> None:
    """Annule le voyage sur un lancement."""
    asyncio.run(_cancel_async(launch_id, token))


@with_container()
async def _cancel_async(container, launch_id: int, token: Optional[str]) -> None:
    with open_store(container) as store:
        user = IdentityResolver(store).resolve(token)
        service = BookingService(catalog=container.spacex_client(), store=store)
        response = await service.cancel_trip(user, launch_id)
    _print_trip_update(response)
    if not response.success:
        raise typer.Exit(1)


def trips(token: TokenOption = None) -> None:
    """Liste les voyages de l'utilisateur courant."""
    asyncio.run(_trips_async(token))


@with_container()
async def _trips_async(container, token: Optional[str]) -> None:
    with open_store(container) as store:
        user = IdentityResolver(store).resolve(token)
        if user is None:
            console.print("[red]Token absent ou invalide[/red]")
            raise typer.Exit(1)
        booked = await BookingService(
            catalog=container.spacex_client(), store=store
        ).trips_for_user(user)

    if not booked:
        typer.echo(f"Aucun voyage pour {user.email}")
        return
    for launch in booked:
        typer.echo(f"{launch.id}: {launch.mission.name} ({launch.rocket.name})")
