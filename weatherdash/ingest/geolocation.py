"""Device geolocation providers."""

import logging
from typing import Protocol

import httpx

from weatherdash.config.schema import DEFAULT_USER_AGENT, IP_GEOLOCATION_URL
from weatherdash.errors import GeolocationUnavailable

logger = logging.getLogger(__name__)


class Geolocator(Protocol):
    async def locate(self) -> tuple[float, float]:
        """Return (latitude, longitude) or raise GeolocationUnavailable."""
        ...


class IpGeolocator:
    """Approximates the device position from its public IP address."""

    def __init__(
        self,
        url: str = IP_GEOLOCATION_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.url = url
        self.timeout = timeout
        self.user_agent = user_agent

    async def locate(self) -> tuple[float, float]:
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self.user_agent}, timeout=self.timeout
            ) as client:
                resp = await client.get(self.url)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeolocationUnavailable(f"IP geolocation failed: {e}") from e

        if data.get("error"):
            raise GeolocationUnavailable(data.get("reason") or "IP geolocation refused")

        latitude = data.get("latitude")
        longitude = data.get("longitude")
        if latitude is None or longitude is None:
            raise GeolocationUnavailable("IP geolocation returned no coordinates")

        logger.debug("IP geolocation resolved to %s,%s", latitude, longitude)
        return float(latitude), float(longitude)
