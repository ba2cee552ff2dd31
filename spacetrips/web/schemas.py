"""
Schémas de réponse de l'API HTTP.

Convertit les entités et objets valeur du domaine en modèles pydantic
sérialisables en JSON.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..core.entities.launch import Launch
from ..core.value_objects.patch_size import PatchSize
from ..core.value_objects.results import LaunchBookingState, LaunchPage, TripUpdateResponse


class MissionOut(BaseModel):
    name: Optional[str] = None
    mission_patch: Optional[str] = None


class RocketOut(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class LaunchOut(BaseModel):
    """Lancement tel que vu par l'utilisateur courant."""

    id: int
    site: Optional[str] = None
    launch_date: Optional[datetime] = None
    mission: MissionOut
    rocket: RocketOut
    is_booked: bool = False

    @classmethod
    def from_launch(
        cls,
        launch: Launch,
        is_booked: bool = False,
        patch_size: PatchSize = PatchSize.LARGE,
    ) -> "LaunchOut":
        return cls(
            id=launch.id,
            site=launch.site,
            launch_date=launch.launch_date,
            mission=MissionOut(
                name=launch.mission.name,
                mission_patch=launch.mission.patch(patch_size),
            ),
            rocket=RocketOut(
                id=launch.rocket.id,
                name=launch.rocket.name,
                type=launch.rocket.type,
            ),
            is_booked=is_booked,
        )

    @classmethod
    def from_state(
        cls, state: LaunchBookingState, patch_size: PatchSize = PatchSize.LARGE
    ) -> "LaunchOut":
        return cls.from_launch(state.launch, is_booked=state.is_booked, patch_size=patch_size)


class LaunchConnection(BaseModel):
    """Page de lancements avec curseur."""

    launches: list[LaunchOut]
    cursor: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_page(
        cls,
        page: LaunchPage,
        states: list[LaunchBookingState],
        patch_size: PatchSize = PatchSize.LARGE,
    ) -> "LaunchConnection":
        return cls(
            launches=[LaunchOut.from_state(state, patch_size) for state in states],
            cursor=page.cursor,
            has_more=page.has_more,
        )


class LaunchStateOut(BaseModel):
    id: int
    is_booked: bool


class TripUpdateOut(BaseModel):
    """Résultat d'une réservation ou d'une annulation."""

    success: bool
    message: str
    launches: list[LaunchStateOut] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: TripUpdateResponse) -> "TripUpdateOut":
        return cls(
            success=response.success,
            message=response.message,
            launches=[
                LaunchStateOut(id=state.id, is_booked=state.is_booked)
                for state in response.launches
            ],
        )


class LoginIn(BaseModel):
    email: str


class LoginOut(BaseModel):
    token: Optional[str] = None


class BookTripsIn(BaseModel):
    launch_ids: list[int]


class MeOut(BaseModel):
    id: int
    email: str
    trips: list[LaunchOut]
