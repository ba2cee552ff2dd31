"""
Tests des routes de l'API HTTP.

Le catalogue est remplace par un mock et le stockage par une base SQLite
en memoire via app.dependency_overrides. Le lifespan n'est pas demarre.

Tests couvrant:
- Liste paginee et detail des lancements, avec l'etat de reservation
- Login et profil de l'utilisateur courant
- Reservation et annulation de voyages
- Traduction des indisponibilites en 503 et 502
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from spacetrips.core.ports.api_clients import CatalogUnavailableError
from spacetrips.core.ports.repositories import StoreUnavailableError
from spacetrips.services.reservation_store import ReservationStore
from spacetrips.web.app import app
from spacetrips.web.deps import get_catalog, get_reservation_store

TOKEN = "YUBhLmE="  # a@a.a
AUTH = {"Authorization": TOKEN}


@pytest.fixture
def client(mock_catalog: AsyncMock, store: ReservationStore):
    """Client de test avec catalogue mocke et stockage en memoire."""
    app.dependency_overrides[get_catalog] = lambda: mock_catalog
    app.dependency_overrides[get_reservation_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestListLaunches:
    """Tests de GET /launches."""

    def test_first_page(self, client: TestClient):
        response = client.get("/launches", params={"page_size": 2})

        assert response.status_code == 200
        data = response.json()
        assert [launch["id"] for launch in data["launches"]] == [1, 2]
        assert data["cursor"] == "2"
        assert data["has_more"] is True

    def test_next_page(self, client: TestClient):
        response = client.get("/launches", params={"after": "2", "page_size": 2})

        data = response.json()
        assert [launch["id"] for launch in data["launches"]] == [3]
        assert data["has_more"] is False

    def test_default_page_size(self, client: TestClient, mock_catalog: AsyncMock):
        client.get("/launches")

        mock_catalog.list_launches.assert_awaited_once_with(cursor=None, page_size=None)

    def test_invalid_page_size(self, client: TestClient):
        response = client.get("/launches", params={"page_size": 0})

        assert response.status_code == 422

    def test_launch_shape(self, client: TestClient):
        launch = client.get("/launches").json()["launches"][0]

        assert launch["site"] == "Kwajalein Atoll"
        assert launch["mission"] == {
            "name": "FalconSat",
            "mission_patch": "https://images.example/1.png",
        }
        assert launch["rocket"] == {"id": "falcon1", "name": "Falcon 1", "type": "Merlin A"}
        assert launch["is_booked"] is False

    def test_small_patch(self, client: TestClient):
        launch = client.get("/launches", params={"patch_size": "SMALL"}).json()["launches"][0]

        assert launch["mission"]["mission_patch"] == "https://images.example/1_small.png"

    def test_is_booked_for_current_user(self, client: TestClient, store: ReservationStore):
        user = store.find_or_create_user("a@a.a").user
        store.create_trip(user.id, 2)

        data = client.get("/launches", headers=AUTH).json()

        assert [launch["is_booked"] for launch in data["launches"]] == [False, True, False]

    def test_catalog_unavailable(self, client: TestClient, mock_catalog: AsyncMock):
        mock_catalog.list_launches.side_effect = CatalogUnavailableError("down")

        response = client.get("/launches")

        assert response.status_code == 502
        assert response.json() == {"detail": "launch catalog unavailable"}


class TestGetLaunch:
    """Tests de GET /launches/{id}."""

    def test_known_launch(self, client: TestClient):
        response = client.get("/launches/1")

        assert response.status_code == 200
        assert response.json()["mission"]["name"] == "FalconSat"
        assert response.json()["is_booked"] is False

    def test_unknown_launch(self, client: TestClient):
        response = client.get("/launches/99")

        assert response.status_code == 404

    def test_booked_launch(self, client: TestClient, store: ReservationStore):
        user = store.find_or_create_user("a@a.a").user
        store.create_trip(user.id, 1)

        response = client.get("/launches/1", headers=AUTH)

        assert response.json()["is_booked"] is True


class TestAuth:
    """Tests de POST /login et GET /me."""

    def test_login(self, client: TestClient):
        response = client.post("/login", json={"email": "a@a.a"})

        assert response.status_code == 200
        assert response.json() == {"token": TOKEN}

    def test_login_invalid_email(self, client: TestClient):
        response = client.post("/login", json={"email": "not-an-email"})

        assert response.status_code == 200
        assert response.json() == {"token": None}

    def test_me_anonymous(self, client: TestClient):
        response = client.get("/me")

        assert response.status_code == 200
        assert response.json() is None

    def test_me_with_invalid_token(self, client: TestClient):
        assert client.get("/me", headers={"Authorization": "garbage!!"}).json() is None

    def test_me_with_trips(self, client: TestClient, store: ReservationStore):
        user = store.find_or_create_user("a@a.a").user
        store.create_trip(user.id, 3)

        data = client.get("/me", headers=AUTH).json()

        assert data["email"] == "a@a.a"
        assert data["id"] == user.id
        assert [trip["id"] for trip in data["trips"]] == [3]
        assert data["trips"][0]["is_booked"] is True


class TestTrips:
    """Tests de POST /trips et DELETE /trips/{id}."""

    def test_book_trips(self, client: TestClient):
        response = client.post("/trips", json={"launch_ids": [1, 2]}, headers=AUTH)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "trips booked successfully",
            "launches": [{"id": 1, "is_booked": True}, {"id": 2, "is_booked": True}],
        }

    def test_partial_booking_is_not_an_http_error(self, client: TestClient):
        response = client.post("/trips", json={"launch_ids": [1, 99]}, headers=AUTH)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "some launches may not have been booked"
        assert data["launches"] == [{"id": 1, "is_booked": True}]

    def test_book_anonymous(self, client: TestClient):
        data = client.post("/trips", json={"launch_ids": [1]}).json()

        assert data["success"] is False
        assert data["message"] == "you must be logged in to book trips"

    def test_cancel_trip(self, client: TestClient, store: ReservationStore):
        user = store.find_or_create_user("a@a.a").user
        store.create_trip(user.id, 1)

        response = client.delete("/trips/1", headers=AUTH)

        assert response.json() == {
            "success": True,
            "message": "trip cancelled",
            "launches": [{"id": 1, "is_booked": False}],
        }
        assert store.is_booked_on_launch(user, 1) is False

    def test_cancel_unknown_launch(self, client: TestClient):
        data = client.delete("/trips/99", headers=AUTH).json()

        assert data["success"] is False
        assert data["message"] == "launch not found"


class TestStoreUnavailable:
    """Le stockage indisponible est fatal pour la requete (503)."""

    def test_store_unavailable(self, mock_catalog: AsyncMock):
        store = MagicMock(spec=ReservationStore)
        store.find_or_create_user.side_effect = StoreUnavailableError("down")
        app.dependency_overrides[get_catalog] = lambda: mock_catalog
        app.dependency_overrides[get_reservation_store] = lambda: store
        try:
            response = TestClient(app).get("/me", headers=AUTH)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json() == {"detail": "reservation store unavailable"}
