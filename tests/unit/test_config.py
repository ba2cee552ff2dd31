"""
Tests unitaires pour Settings.

Verifie les valeurs par defaut, la surcharge par variables d'environnement
et la normalisation des chemins et de l'URL du catalogue.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from spacetrips.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SPACETRIPS_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///data/spacetrips.db"
        assert settings.spacex_api_url == "https://api.spacexdata.com/v2/"
        assert settings.launch_list_ttl == 300
        assert settings.launch_ttl == 3600
        assert settings.default_page_size == 20
        assert settings.http_max_attempts == 5

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPACETRIPS_DEFAULT_PAGE_SIZE", "5")
        monkeypatch.setenv("SPACETRIPS_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.default_page_size == 5
        assert settings.log_level == "DEBUG"

    def test_api_url_gets_trailing_slash(self):
        settings = Settings(_env_file=None, spacex_api_url="https://mirror.example/v2")

        assert settings.spacex_api_url == "https://mirror.example/v2/"

    def test_paths_are_expanded(self):
        settings = Settings(_env_file=None, cache_dir="~/spacex-cache")

        assert settings.cache_dir == Path("~/spacex-cache").expanduser()

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_page_size=page_size)

    def test_http_max_attempts_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, http_max_attempts=0)
