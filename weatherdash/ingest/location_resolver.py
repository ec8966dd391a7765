"""Location resolution: device geolocation with fallback, and place-name search."""

import asyncio
import logging

import httpx

from weatherdash.config.defaults import DEFAULT_LOCATION
from weatherdash.errors import LocationNotFound, SearchTransportError
from weatherdash.ingest.geolocation import Geolocator
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.location import CURRENT_LOCATION_NAME, Coordinate

logger = logging.getLogger(__name__)

GEOLOCATION_TIMEOUT_SECONDS = 10.0


class LocationResolver:
    def __init__(
        self,
        client: OpenMeteoClient,
        geolocator: Geolocator | None = None,
        default: Coordinate = DEFAULT_LOCATION,
        geolocation_timeout: float = GEOLOCATION_TIMEOUT_SECONDS,
    ):
        self.client = client
        self.geolocator = geolocator
        self.default = default
        self.geolocation_timeout = geolocation_timeout

    async def resolve_location(self) -> Coordinate:
        """Locate the device, falling back to the default coordinate.

        Never raises; completes within the geolocation timeout.
        """
        if self.geolocator is None:
            logger.info("No geolocation available, using %s", self.default.name)
            return self.default

        try:
            latitude, longitude = await asyncio.wait_for(
                self.geolocator.locate(), timeout=self.geolocation_timeout
            )
        except TimeoutError:
            logger.warning(
                "Geolocation timed out after %.1fs, using %s",
                self.geolocation_timeout, self.default.name,
            )
            return self.default
        except Exception as e:
            logger.warning("Geolocation unavailable (%s), using %s", e, self.default.name)
            return self.default

        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            logger.warning(
                "Geolocation returned out-of-range %s,%s, using %s",
                latitude, longitude, self.default.name,
            )
            return self.default

        return Coordinate(latitude=latitude, longitude=longitude, name=CURRENT_LOCATION_NAME)

    async def search_location_by_name(self, query: str) -> Coordinate | None:
        """Geocode a free-text place name to its best match.

        Blank queries are ignored and return None without a request.
        Raises LocationNotFound when nothing matches and
        SearchTransportError when the lookup itself fails.
        """
        if not query or not query.strip():
            return None

        try:
            results = await self.client.search(query.strip(), count=1)
        except httpx.HTTPStatusError as e:
            logger.error("Geocoding error for %r: %s", query, e)
            raise SearchTransportError() from e
        except httpx.RequestError as e:
            logger.error("Geocoding request failed for %r: %s", query, e)
            raise SearchTransportError(str(e) or "Failed to search location") from e
        except ValueError as e:
            logger.error("Geocoding returned malformed body for %r: %s", query, e)
            raise SearchTransportError() from e

        if not results:
            raise LocationNotFound()

        try:
            match = results[0]
            place = match["name"]
            latitude = float(match["latitude"])
            longitude = float(match["longitude"])
        except (IndexError, KeyError, TypeError, ValueError) as e:
            logger.error("Geocoding result for %r is incomplete: %s", query, results)
            raise SearchTransportError() from e

        country = match.get("country")
        name = f"{place}, {country}" if country else place
        return Coordinate(latitude=latitude, longitude=longitude, name=name)
