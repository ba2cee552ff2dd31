"""
Routes du catalogue des lancements.

Liste paginée par curseur et détail d'un lancement, avec l'état de
réservation pour l'utilisateur courant.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...core.entities.reservation import User
from ...core.ports.api_clients import ILaunchCatalog
from ...core.value_objects.patch_size import PatchSize
from ...services.booking import BookingService
from ...services.reservation_store import ReservationStore
from ..deps import get_booking_service, get_catalog, get_current_user, get_reservation_store
from ..schemas import LaunchConnection, LaunchOut

router = APIRouter(prefix="/launches")

_MAX_PAGE_SIZE = 100


@router.get("", response_model=LaunchConnection)
async def list_launches(
    after: Optional[str] = None,
    page_size: Optional[int] = Query(None, ge=1, le=_MAX_PAGE_SIZE),
    patch_size: PatchSize = PatchSize.LARGE,
    catalog: ILaunchCatalog = Depends(get_catalog),
    booking: BookingService = Depends(get_booking_service),
    user: Optional[User] = Depends(get_current_user),
):
    """Page de lancements après le curseur `after`."""
    page = await catalog.list_launches(cursor=after, page_size=page_size)
    states = booking.booking_states(user, page.launches)
    return LaunchConnection.from_page(page, states, patch_size)


@router.get("/{launch_id}", response_model=LaunchOut)
async def get_launch(
    launch_id: int,
    patch_size: PatchSize = PatchSize.LARGE,
    catalog: ILaunchCatalog = Depends(get_catalog),
    store: ReservationStore = Depends(get_reservation_store),
    user: Optional[User] = Depends(get_current_user),
):
    """Détail d'un lancement (404 s'il est absent du catalogue)."""
    launch = await catalog.get_launch_by_id(launch_id)
    if launch is None:
        raise HTTPException(status_code=404, detail=f"launch {launch_id} not found")
    return LaunchOut.from_launch(
        launch,
        is_booked=store.is_booked_on_launch(user, launch_id),
        patch_size=patch_size,
    )
