"""
Client SpaceX pour la lecture du catalogue des lancements.

Implemente l'interface ILaunchCatalog pour l'API REST SpaceX.
Utilise le cache persistant et relance les requetes limitees (429) avec
un backoff exponentiel aleatoire.

Usage:
    cache = APICache()
    client = SpaceXClient(cache=cache)
    page = await client.list_launches(page_size=20)
    launch = await client.get_launch_by_id(1)
    await client.close()
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from spacetrips.adapters.api.cache import APICache
from spacetrips.core.entities.launch import Launch, Mission, Rocket
from spacetrips.core.ports.api_clients import CatalogUnavailableError, ILaunchCatalog
from spacetrips.core.value_objects.results import LaunchPage
from spacetrips.utils.pagination import paginate


class RateLimitError(Exception):
    """Le catalogue a repondu 429 ; retry_after vient du header Retry-After."""

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"catalogue limite (Retry-After: {retry_after})")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class SpaceXClient(ILaunchCatalog):
    """
    Client API SpaceX pour le catalogue des lancements.

    Implemente ILaunchCatalog avec:
    - Liste complete des lancements, ordonnee par numero de vol
    - Recherche d'un lancement par numero de vol (None si inconnu)
    - Pagination par curseur sur la liste complete
    - Cache persistant (5 min pour la liste, 1h par lancement)
    - Retry automatique sur rate limiting (429)

    Le client ne modifie jamais les lancements : il met en cache une copie
    normalisee indexee par numero de vol.
    """

    SPACEX_BASE_URL = "https://api.spacexdata.com/v2/"
    LIST_CACHE_KEY = "spacex:launches"

    def __init__(
        self,
        cache: APICache,
        base_url: str = SPACEX_BASE_URL,
        timeout: float = 30.0,
        default_page_size: int = 20,
        max_attempts: int = 5,
        retry_wait: float = 1.0,
    ) -> None:
        """
        Initialise le client SpaceX.

        Args:
            cache: Instance APICache pour le caching des lancements
            base_url: URL de base de l'API (avec slash final)
            timeout: Timeout des requetes HTTP en secondes
            default_page_size: Taille de page quand l'appelant n'en donne pas
            max_attempts: Nombre de tentatives sur reponse 429
            retry_wait: Delai de base du backoff en secondes (plafonne a 60s)
        """
        self._cache = cache
        self._base_url = base_url
        self._timeout = timeout
        self._default_page_size = default_page_size
        self._max_attempts = max_attempts
        self._retry_wait = retry_wait
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @staticmethod
    def _launch_cache_key(launch_id: int) -> str:
        return f"spacex:launch:{launch_id}"

    async def _get_launches_response(self, params: Optional[dict[str, Any]]) -> httpx.Response:
        """GET launches ; une reponse 429 devient RateLimitError."""
        response = await self._get_client().get("launches", params=params)
        if response.status_code == 429:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(f"Catalogue SpaceX limite, Retry-After={retry_after}")
            raise RateLimitError(retry_after)
        response.raise_for_status()
        return response

    async def _fetch_launches(self, params: Optional[dict[str, Any]] = None) -> list[dict]:
        """
        Appelle l'endpoint launches et retourne les enregistrements bruts.

        Seules les reponses 429 sont relancees (backoff exponentiel aleatoire).

        Raises:
            CatalogUnavailableError: Erreur HTTP, erreur reseau ou 429 apres
                epuisement des tentatives
        """
        retryer = AsyncRetrying(
            retry=retry_if_exception_type(RateLimitError),
            wait=wait_random_exponential(
                multiplier=self._retry_wait, min=self._retry_wait, max=60
            ),
            stop=stop_after_attempt(self._max_attempts),
            reraise=True,
        )
        try:
            async for attempt in retryer:
                with attempt:
                    response = await self._get_launches_response(params)
        except (httpx.HTTPError, RateLimitError) as e:
            logger.error(f"Catalogue SpaceX indisponible: {e}")
            raise CatalogUnavailableError(str(e)) from e

        data = response.json()
        if not isinstance(data, list):
            raise CatalogUnavailableError("Reponse inattendue du catalogue SpaceX")
        return data

    @staticmethod
    def _to_launch(record: dict) -> Optional[Launch]:
        """
        Normalise un enregistrement brut de l'API en Launch.

        Distingue les variantes petite et grande du patch de mission.

        Returns:
            Le lancement normalise, ou None si le numero de vol est absent
        """
        flight_number = record.get("flight_number")
        if flight_number is None:
            return None

        links = record.get("links") or {}
        rocket = record.get("rocket") or {}
        site = record.get("launch_site") or {}

        launch_date = None
        launch_date_unix = record.get("launch_date_unix")
        if launch_date_unix is not None:
            launch_date = datetime.fromtimestamp(launch_date_unix, tz=timezone.utc)

        return Launch(
            id=int(flight_number),
            site=site.get("site_name"),
            launch_date=launch_date,
            mission=Mission(
                name=record.get("mission_name"),
                mission_patch_small=links.get("mission_patch_small"),
                mission_patch_large=links.get("mission_patch"),
            ),
            rocket=Rocket(
                id=rocket.get("rocket_id"),
                name=rocket.get("rocket_name"),
                type=rocket.get("rocket_type"),
            ),
        )

    async def get_all_launches(self) -> list[Launch]:
        """
        Recupere tous les lancements, ordonnes par numero de vol croissant.

        Utilise le pattern cache-first. Chaque lancement est aussi mis en
        cache individuellement pour les recherches unitaires.
        """
        cached = await self._cache.get(self.LIST_CACHE_KEY)
        if cached is not None:
            return cached

        records = await self._fetch_launches()
        launches = []
        for record in records:
            launch = self._to_launch(record)
            if launch is None:
                logger.warning("Lancement sans numero de vol ignore")
                continue
            launches.append(launch)
        launches.sort(key=lambda launch: launch.id)

        logger.debug(f"{len(launches)} lancements recuperes depuis le catalogue")

        await self._cache.set_listing(self.LIST_CACHE_KEY, launches)
        await asyncio.gather(
            *(
                self._cache.set_launch(self._launch_cache_key(launch.id), launch)
                for launch in launches
            )
        )
        return launches

    async def get_launch_by_id(self, launch_id: int) -> Optional[Launch]:
        """
        Recupere un lancement par son numero de vol.

        Args:
            launch_id: Numero de vol

        Returns:
            Le lancement, ou None si le catalogue ne le connait pas
        """
        cache_key = self._launch_cache_key(launch_id)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            records = await self._fetch_launches(params={"flight_number": launch_id})
        except CatalogUnavailableError as e:
            cause = e.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return None
            raise

        for record in records:
            launch = self._to_launch(record)
            if launch is not None and launch.id == launch_id:
                await self._cache.set_launch(cache_key, launch)
                return launch

        logger.debug(f"Lancement {launch_id} absent du catalogue")
        return None

    async def get_launches_by_ids(self, launch_ids: Iterable[int]) -> list[Launch]:
        """
        Recupere plusieurs lancements en parallele.

        L'ordre des identifiants est conserve, les inconnus sont omis.
        """
        launches = await asyncio.gather(
            *(self.get_launch_by_id(launch_id) for launch_id in launch_ids)
        )
        return [launch for launch in launches if launch is not None]

    async def list_launches(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> LaunchPage:
        """
        Liste une page de lancements apres le curseur.

        Args:
            cursor: Numero de vol du dernier lancement de la page precedente
            page_size: Taille de page (defaut: taille configuree)

        Returns:
            LaunchPage (un curseur inconnu repart du debut)
        """
        launches = await self.get_all_launches()
        if page_size is None:
            page_size = self._default_page_size
        return paginate(launches, cursor=cursor, page_size=page_size)

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
