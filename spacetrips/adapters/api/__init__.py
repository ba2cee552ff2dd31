"""
Client du catalogue distant des lancements.

Ce module fournit l'adaptateur pour l'API SpaceX (lecture seule):
- APICache: Cache persistant avec TTL (liste des lancements, lancement unitaire)
- SpaceXClient: Implementation de ILaunchCatalog, avec retry sur 429
- RateLimitError: Reponse 429 du catalogue
"""

from spacetrips.adapters.api.cache import APICache
from spacetrips.adapters.api.spacex_client import RateLimitError, SpaceXClient

__all__ = [
    "APICache",
    "RateLimitError",
    "SpaceXClient",
]
