import httpx
import pytest

from core.dragonball_api import DragonBallClient
from core.errors import DragonBallAPIError, TransportError, UpstreamHttpError


@pytest.mark.asyncio
async def test_list_characters_builds_listing_url(upstream, api_client, character_page):
    upstream.payload = character_page

    data = await api_client.list_characters(page=2, limit=10)

    assert data == character_page
    assert len(upstream.requests) == 1
    request = upstream.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://dragonball-api.com/api/characters?page=2&limit=10"


@pytest.mark.asyncio
async def test_list_characters_passes_large_values_through(upstream, api_client, character_page):
    upstream.payload = character_page

    await api_client.list_characters(page=100000, limit=5000)

    assert upstream.requests[0].url.params["page"] == "100000"
    assert upstream.requests[0].url.params["limit"] == "5000"


@pytest.mark.asyncio
async def test_get_character_builds_detail_url(upstream, api_client, character_detail):
    upstream.payload = character_detail

    data = await api_client.get_character(1)

    assert data == character_detail
    assert str(upstream.requests[0].url) == "https://dragonball-api.com/api/characters/1"


@pytest.mark.asyncio
async def test_no_authorization_header(upstream, api_client, character_detail):
    upstream.payload = character_detail

    await api_client.get_character(1)

    assert "authorization" not in upstream.requests[0].headers


@pytest.mark.asyncio
async def test_custom_base_url_trailing_slash(upstream, character_detail):
    upstream.payload = character_detail
    client = DragonBallClient(base_url="http://localhost:3000/api/", transport=upstream.transport)

    await client.get_character(7)

    assert str(upstream.requests[0].url) == "http://localhost:3000/api/characters/7"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_non_2xx_raises_upstream_http_error(upstream, api_client, status):
    upstream.status_code = status
    upstream.payload = {"message": "nope"}

    with pytest.raises(UpstreamHttpError) as excinfo:
        await api_client.get_character(999)

    assert excinfo.value.status_code == status
    assert str(status) in str(excinfo.value)


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(upstream, api_client):
    upstream.error = httpx.ConnectError("connection refused")

    with pytest.raises(TransportError, match="connection refused"):
        await api_client.list_characters()


@pytest.mark.asyncio
async def test_timeout_raises_transport_error(upstream, api_client):
    upstream.error = httpx.ReadTimeout("timed out")

    with pytest.raises(TransportError):
        await api_client.get_character(1)


@pytest.mark.asyncio
async def test_malformed_json_raises_transport_error(upstream, api_client):
    upstream.body = "<html>maintenance</html>"

    with pytest.raises(TransportError, match="Malformed JSON"):
        await api_client.get_character(1)


@pytest.mark.unit
def test_error_hierarchy():
    assert issubclass(UpstreamHttpError, DragonBallAPIError)
    assert issubclass(TransportError, DragonBallAPIError)
