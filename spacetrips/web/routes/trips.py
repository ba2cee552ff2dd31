"""
Routes de réservation et d'annulation de voyages.

Une réservation partielle n'est pas une erreur HTTP : la réponse porte
success=False et seuls les lancements réservés sont listés.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...core.entities.reservation import User
from ...services.booking import BookingService
from ..deps import get_booking_service, get_current_user
from ..schemas import BookTripsIn, TripUpdateOut

router = APIRouter(prefix="/trips")


@router.post("", response_model=TripUpdateOut)
async def book_trips(
    payload: BookTripsIn,
    user: Optional[User] = Depends(get_current_user),
    booking: BookingService = Depends(get_booking_service),
):
    """Réserve une place sur chacun des lancements demandés."""
    response = await booking.book_trips(user, payload.launch_ids)
    return TripUpdateOut.from_response(response)


@router.delete("/{launch_id}", response_model=TripUpdateOut)
async def cancel_trip(
    launch_id: int,
    user: Optional[User] = Depends(get_current_user),
    booking: BookingService = Depends(get_booking_service),
):
    """Annule le voyage sur un lancement (idempotent)."""
    response = await booking.cancel_trip(user, launch_id)
    return TripUpdateOut.from_response(response)
