"""
Routes d'identité : login par email et profil de l'utilisateur courant.

Le token retourné est l'encodage base64 de l'email (non cryptographique) ;
il se renvoie tel quel dans le header Authorization.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...core.entities.reservation import User
from ...services.booking import BookingService
from ...services.identity import IdentityResolver
from ..deps import get_booking_service, get_current_user, get_identity_resolver
from ..schemas import LaunchOut, LoginIn, LoginOut, MeOut

router = APIRouter()


@router.post("/login", response_model=LoginOut)
async def login(
    payload: LoginIn,
    resolver: IdentityResolver = Depends(get_identity_resolver),
):
    """Connecte l'utilisateur (créé au premier login). Token nul si email invalide."""
    return LoginOut(token=resolver.login(payload.email))


@router.get("/me", response_model=Optional[MeOut])
async def me(
    user: Optional[User] = Depends(get_current_user),
    booking: BookingService = Depends(get_booking_service),
):
    """Utilisateur courant et ses voyages, ou null si anonyme."""
    if user is None:
        return None
    trips = await booking.trips_for_user(user)
    return MeOut(
        id=user.id,
        email=user.email,
        trips=[LaunchOut.from_launch(launch, is_booked=True) for launch in trips],
    )
