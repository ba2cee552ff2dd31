"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- PatchSize : Taille de l'image du patch de mission (SMALL, LARGE)
- LaunchPage : Page de lancements avec curseur et indicateur de suite
- LaunchBookingState : Etat de reservation d'un lancement pour un utilisateur
- TripUpdateResponse : Resultat d'une reservation ou d'une annulation
- UserLookup : Resultat etiquete d'un find-or-create utilisateur
"""

from spacetrips.core.value_objects.patch_size import PatchSize
from spacetrips.core.value_objects.results import (
    LaunchBookingState,
    LaunchPage,
    TripUpdateResponse,
    UserLookup,
)

__all__ = [
    "PatchSize",
    "LaunchPage",
    "LaunchBookingState",
    "TripUpdateResponse",
    "UserLookup",
]
