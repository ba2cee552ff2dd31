"""
Objets valeur retournes par les operations du coeur applicatif.

Ces objets sont immutables : ils decrivent un resultat (page du catalogue,
issue d'une reservation) sans porter d'identite propre.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from spacetrips.core.entities.launch import Launch
    from spacetrips.core.entities.reservation import User


@dataclass(frozen=True)
class LaunchPage:
    """
    Page de lancements issue de la pagination par curseur.

    Attributs :
        launches : Lancements de la page, ordonnes par numero de vol croissant
        cursor : Curseur du dernier element retourne (None si page vide)
        has_more : True si des lancements restent au-dela de cette page
    """

    launches: tuple[Launch, ...] = ()
    cursor: Optional[str] = None
    has_more: bool = False


@dataclass(frozen=True)
class LaunchBookingState:
    """
    Etat de reservation d'un lancement pour l'utilisateur courant.

    Attributs :
        id : Numero de vol
        is_booked : True si un voyage existe pour (utilisateur, lancement)
        launch : Lancement normalise, si connu du catalogue
    """

    id: int
    is_booked: bool
    launch: Optional[Launch] = None


@dataclass(frozen=True)
class TripUpdateResponse:
    """
    Resultat d'une reservation ou d'une annulation de voyages.

    Un echec partiel n'est pas une erreur : success vaut False et seuls les
    lancements effectivement traites figurent dans launches.
    """

    success: bool
    message: str
    launches: tuple[LaunchBookingState, ...] = ()


@dataclass(frozen=True)
class UserLookup:
    """
    Resultat etiquete d'un find-or-create utilisateur.

    Attributs :
        user : Utilisateur existant ou nouvellement cree
        created : True si l'enregistrement vient d'etre cree
    """

    user: User
    created: bool
