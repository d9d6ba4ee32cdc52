import httpx
import pytest

from core.config import ServerConfig
from core.dragonball_api import DragonBallClient
from tools.mcp_server import create_server


class FakeUpstream:
    """Stands in for dragonball-api.com behind an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = None
        self.body = None
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def api_client(upstream):
    return DragonBallClient(transport=upstream.transport)


@pytest.fixture
def server(api_client):
    return create_server(ServerConfig(), client=api_client)


def _character(character_id, name, race="Saiyan"):
    return {
        "id": character_id,
        "name": name,
        "ki": "60.000.000",
        "maxKi": "90 Septillion",
        "race": race,
        "gender": "Male",
        "description": f"{name} is a fighter.",
        "image": f"https://dragonball-api.com/characters/{character_id}.webp",
        "affiliation": "Z Fighter",
        "deletedAt": None,
    }


@pytest.fixture
def character_page():
    return {
        "items": [_character(11, "Goku"), _character(12, "Vegeta")],
        "meta": {
            "totalItems": 58,
            "itemCount": 10,
            "itemsPerPage": 10,
            "totalPages": 6,
            "currentPage": 2,
        },
        "links": {
            "first": "https://dragonball-api.com/api/characters?limit=10",
            "previous": "https://dragonball-api.com/api/characters?page=1&limit=10",
            "next": "https://dragonball-api.com/api/characters?page=3&limit=10",
            "last": "https://dragonball-api.com/api/characters?page=6&limit=10",
        },
    }


@pytest.fixture
def character_detail():
    detail = _character(1, "Goku")
    detail["originPlanet"] = {
        "id": 3,
        "name": "Vegeta",
        "isDestroyed": True,
        "description": "Home world of the Saiyans.",
        "image": "https://dragonball-api.com/planetas/vegeta.webp",
        "deletedAt": None,
    }
    detail["transformations"] = [
        {
            "id": 1,
            "name": "Goku SSJ",
            "image": "https://dragonball-api.com/transformaciones/goku_ssj.webp",
            "ki": "3 Billion",
            "deletedAt": None,
        },
        {
            "id": 2,
            "name": "Goku SSJ2",
            "image": "https://dragonball-api.com/transformaciones/goku_ssj2.webp",
            "ki": "6 Billion",
            "deletedAt": None,
        },
    ]
    return detail
