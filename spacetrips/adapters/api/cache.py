"""
Cache persistant du catalogue des lancements avec TTL differencies.

Le cache utilise diskcache pour la persistence sur disque. Il evite les
appels redondants au catalogue distant, sans garantie de fraicheur :
les lancements sont en lecture seule et une entree perimee est simplement
rechargee.

TTL par defaut:
- Liste (LIST_TTL): 5 minutes - la liste complete sert a la pagination
- Lancement (LAUNCH_TTL): 1 heure - un lancement normalise change rarement
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels au catalogue.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes. Les ecritures concurrentes
    sur une meme cle ecrivent la meme valeur.

    Example:
        cache = APICache(cache_dir=".cache/spacex")
        await cache.set_launch("spacex:launch:1", launch)
        launch = await cache.get("spacex:launch:1")
    """

    LIST_TTL = 5 * 60  # 5 minutes en secondes (300)
    LAUNCH_TTL = 60 * 60  # 1 heure en secondes (3600)

    def __init__(
        self,
        cache_dir: str = ".cache/spacex",
        list_ttl: Optional[int] = None,
        launch_ttl: Optional[int] = None,
    ) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
            list_ttl: Surcharge du TTL de la liste complete (secondes)
            launch_ttl: Surcharge du TTL d'un lancement (secondes)
        """
        self._cache = Cache(str(cache_dir))
        self._list_ttl = self.LIST_TTL if list_ttl is None else list_ttl
        self._launch_ttl = self.LAUNCH_TTL if launch_ttl is None else launch_ttl

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """
        Stocke une valeur dans le cache avec un TTL.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker (doit etre picklable)
            ttl: Duree de vie en secondes
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_listing(self, key: str, value: Any) -> None:
        """Stocke la liste complete des lancements (TTL liste)."""
        await self.set(key, value, self._list_ttl)

    async def set_launch(self, key: str, value: Any) -> None:
        """Stocke un lancement normalise (TTL lancement)."""
        await self.set(key, value, self._launch_ttl)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
