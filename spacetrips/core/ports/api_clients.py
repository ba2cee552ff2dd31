"""
Interfaces ports pour le catalogue distant des lancements.

Le catalogue est en lecture seule : les implémentations récupèrent,
normalisent et mettent en cache les lancements, sans jamais les modifier.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from spacetrips.core.entities.launch import Launch
from spacetrips.core.value_objects.results import LaunchPage


class CatalogUnavailableError(Exception):
    """
    Exception levée quand le catalogue distant ne peut pas répondre.

    Fatale pour l'opération en cours : aucun repli silencieux.
    """


class ILaunchCatalog(ABC):
    """
    Interface du catalogue des lancements.

    Un identifiant absent du catalogue n'est jamais une erreur : les
    recherches unitaires retournent None et l'appelant doit le vérifier.
    """

    @abstractmethod
    async def get_all_launches(self) -> list[Launch]:
        """
        Récupère tous les lancements, ordonnés par numéro de vol croissant.

        Lève :
            CatalogUnavailableError : si le catalogue ne répond pas
        """
        ...

    @abstractmethod
    async def get_launch_by_id(self, launch_id: int) -> Optional[Launch]:
        """
        Récupère un lancement par son numéro de vol.

        Retourne :
            Le lancement, ou None s'il n'existe pas dans le catalogue
        """
        ...

    @abstractmethod
    async def get_launches_by_ids(self, launch_ids: Iterable[int]) -> list[Launch]:
        """Récupère plusieurs lancements, en omettant les identifiants inconnus."""
        ...

    @abstractmethod
    async def list_launches(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> LaunchPage:
        """
        Liste une page de lancements après le curseur donné.

        Un curseur inconnu est traité comme l'absence de curseur. Sans taille
        de page, la taille par défaut de l'implémentation s'applique.
        """
        ...
