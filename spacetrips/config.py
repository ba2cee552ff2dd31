"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SPACETRIPS_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de spacetrips/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SPACETRIPS_.
    Exemple : SPACETRIPS_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SPACETRIPS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données (utilisateurs et voyages)
    database_url: str = Field(default="sqlite:///data/spacetrips.db")

    # Catalogue distant
    spacex_api_url: str = Field(default="https://api.spacexdata.com/v2/")
    http_timeout: float = Field(default=30.0, gt=0)
    http_max_attempts: int = Field(default=5, ge=1)  # Tentatives sur reponse 429

    # Cache du catalogue (durées en secondes)
    cache_dir: Path = Field(default=Path(".cache/spacex"))
    launch_list_ttl: int = Field(default=5 * 60, ge=0)
    launch_ttl: int = Field(default=60 * 60, ge=0)

    # Pagination
    default_page_size: int = Field(default=20, ge=1, le=100)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/spacetrips.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("spacex_api_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Garantit le slash final pour la resolution relative des URLs httpx."""
        return v if v.endswith("/") else f"{v}/"
