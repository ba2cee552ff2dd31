"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IUserRepository : Stockage des utilisateurs (unicité par email)
- ITripRepository : Stockage des voyages réservés
- StoreUnavailableError : Indisponibilité du stockage

Ports catalogue : Contrats pour le catalogue distant des lancements
- ILaunchCatalog : Lecture et pagination des lancements
- CatalogUnavailableError : Indisponibilité du catalogue
"""

from spacetrips.core.ports.repositories import (
    ITripRepository,
    IUserRepository,
    StoreUnavailableError,
)
from spacetrips.core.ports.api_clients import (
    CatalogUnavailableError,
    ILaunchCatalog,
)

__all__ = [
    # Repositories
    "IUserRepository",
    "ITripRepository",
    "StoreUnavailableError",
    # Catalogue
    "ILaunchCatalog",
    "CatalogUnavailableError",
]
