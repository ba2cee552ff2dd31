"""
Configuration de la base de donnees pour SpaceTrips.

Ce module fournit :
- Engine configure depuis l'URL de l'application
- Fonction d'initialisation des tables
- Conversion des erreurs de connexion en StoreUnavailableError

La base de donnees est configuree via SPACETRIPS_DATABASE_URL
(defaut: sqlite:///data/spacetrips.db). L'engine est partage via le
container DI ; chaque requete ouvre sa propre session.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from spacetrips.core.ports.repositories import StoreUnavailableError


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Les bases SQLite en memoire partagent une connexion unique (StaticPool)
    pour rester visibles depuis toutes les sessions.
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {}
    if database_url.startswith("sqlite:///"):
        # Creer le repertoire parent du fichier SQLite
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)
        connect_args["check_same_thread"] = False

    return create_engine(database_url, echo=False, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from spacetrips.infrastructure.persistence import models  # noqa: F401

    with store_errors():
        SQLModel.metadata.create_all(engine)


@contextmanager
def store_errors(session: Optional[Session] = None) -> Iterator[None]:
    """
    Convertit les erreurs de connexion SQLAlchemy en StoreUnavailableError.

    La session eventuelle est remise dans un etat utilisable (rollback).

    Raises:
        StoreUnavailableError: Si le stockage ne repond pas
    """
    try:
        yield
    except OperationalError as e:
        if session is not None:
            session.rollback()
        logger.error(f"Stockage indisponible: {e.orig}")
        raise StoreUnavailableError(str(e.orig)) from e
