"""
Application FastAPI de SpaceTrips.

Initialise l'application web avec le Container DI, enregistre les
gestionnaires d'erreurs et monte les routes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..container import Container
from .error_handlers import register_error_handlers
from .routes.auth import router as auth_router
from .routes.launches import router as launches_router
from .routes.trips import router as trips_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et libère les clients à l'arrêt."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield
    await container.spacex_client().close()
    container.api_cache().close()
    container.database.shutdown()


app = FastAPI(title="SpaceTrips", lifespan=lifespan)

register_error_handlers(app)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


# Routes
app.include_router(launches_router)
app.include_router(auth_router)
app.include_router(trips_router)
