import httpx
import pytest

from api.spotify_client import SpotifyAuthError, SpotifyPlayerClient


@pytest.mark.asyncio
async def test_set_volume_sends_put_with_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(204)

    client = SpotifyPlayerClient(transport=httpx.MockTransport(handler))
    await client.set_volume("abc", "device-1", 58)

    assert seen == {
        "method": "PUT",
        "path": "/v1/me/player/volume",
        "params": {"volume_percent": "58", "device_id": "device-1"},
        "auth": "Bearer abc",
    }


@pytest.mark.asyncio
async def test_set_volume_clamps_percent():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["volume_percent"])
        return httpx.Response(204)

    client = SpotifyPlayerClient(transport=httpx.MockTransport(handler))
    await client.set_volume("abc", None, 140)
    await client.set_volume("abc", None, -3)
    assert seen == ["100", "0"]


@pytest.mark.asyncio
async def test_expired_token_raises_auth_error():
    client = SpotifyPlayerClient(transport=httpx.MockTransport(lambda request: httpx.Response(401)))
    with pytest.raises(SpotifyAuthError):
        await client.set_volume("expired", "device-1", 50)


@pytest.mark.asyncio
async def test_unreachable_device_raises_http_error():
    client = SpotifyPlayerClient(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
    with pytest.raises(httpx.HTTPStatusError):
        await client.set_volume("abc", "gone", 50)
