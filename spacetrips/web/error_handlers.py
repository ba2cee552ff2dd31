"""
Gestionnaires d'erreurs globaux de l'API.

- StoreUnavailableError -> 503 : le stockage des réservations ne répond pas
- CatalogUnavailableError -> 502 : le catalogue distant ne répond pas

Les deux sont fatales pour la requête ; aucun détail interne n'est exposé.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.ports.api_clients import CatalogUnavailableError
from ..core.ports.repositories import StoreUnavailableError


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'erreurs sur l'application."""

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(f"Stockage indisponible pendant {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "reservation store unavailable"},
        )

    @app.exception_handler(CatalogUnavailableError)
    async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
        logger.error(f"Catalogue indisponible pendant {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "launch catalog unavailable"},
        )
