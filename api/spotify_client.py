import logging
from typing import Optional

import httpx

SPOTIFY_API_BASE = "https://api.spotify.com/v1"


class SpotifyAuthError(Exception):
    pass


class SpotifyPlayerClient:
    """Volume control for the listener's active Spotify device."""

    def __init__(self, base_url: str = SPOTIFY_API_BASE, api_timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.api_timeout = api_timeout
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _get_headers(access_token: str):
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {access_token}'
        }

    async def set_volume(self, access_token: str, device_id: Optional[str], percent: int) -> None:
        percent = max(0, min(100, int(percent)))
        params = {"volume_percent": percent}
        if device_id:
            params["device_id"] = device_id

        url = f"{self.base_url}/me/player/volume"
        timeout = httpx.Timeout(self.api_timeout if self.api_timeout else 10.0)
        async with httpx.AsyncClient(timeout=timeout, transport=self.transport) as client:
            response = await client.put(url, headers=self._get_headers(access_token), params=params)

        if response.status_code == 401:
            self.logger.warning("Spotify access token rejected while setting volume")
            raise SpotifyAuthError("Spotify access token expired or invalid")
        response.raise_for_status()
        self.logger.debug(f"Spotify volume set to {percent}%")
