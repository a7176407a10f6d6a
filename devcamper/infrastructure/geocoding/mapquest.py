"""
Adapter: MapQuest geocoding.

Implements the Geocoder port against the MapQuest Geocoding API
(``/geocoding/v1/address``). Country-level matches are discarded: MapQuest
answers unresolvable input with the centroid of the country, which is
not a location.
"""

import logging
from typing import Any, Optional

import httpx

from devcamper.domain.entities import GeoPoint
from devcamper.domain.errors import GeocodingServiceError
from devcamper.domain.ports import Geocoder

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.mapquestapi.com/geocoding/v1/address"
MAX_RESULTS = 5
COARSE_QUALITIES = frozenset({"COUNTRY"})


class MapQuestGeocoder(Geocoder):
    """Concrete adapter for the MapQuest geocoding service.

    Args:
        api_key: MapQuest consumer key.
        base_url: Geocoding endpoint.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def geocode(self, location: str) -> list[GeoPoint]:
        """Resolve ``location`` into candidate coordinates.

        Raises:
            GeocodingServiceError: If the service is unreachable, answers
                with an error, or no API key is configured.
        """
        if not self._api_key:
            raise GeocodingServiceError("no API key configured")

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(
                    self._base_url,
                    params={
                        "key": self._api_key,
                        "location": location,
                        "maxResults": MAX_RESULTS,
                    },
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            # The request URL carries the API key; log the error type only.
            logger.error("Geocoding request failed: %s", type(exc).__name__)
            raise GeocodingServiceError(type(exc).__name__) from exc
        except ValueError as exc:
            logger.error("Geocoding response was not valid JSON")
            raise GeocodingServiceError("invalid response body") from exc

        if not isinstance(payload, dict):
            logger.error("Geocoding response was not a JSON object")
            raise GeocodingServiceError("invalid response body")

        info = payload.get("info") or {}
        status_code = info.get("statuscode", 0)
        if status_code != 0:
            messages = "; ".join(info.get("messages") or []) or f"status {status_code}"
            raise GeocodingServiceError(messages)

        points = [
            _to_point(candidate)
            for result in payload.get("results") or []
            for candidate in result.get("locations") or []
            if _is_match(candidate)
        ]
        logger.info("Geocoded location into %d candidate(s)", len(points))
        return points


def _is_match(candidate: dict[str, Any]) -> bool:
    lat_lng = candidate.get("latLng") or {}
    if "lat" not in lat_lng or "lng" not in lat_lng:
        return False
    return candidate.get("geocodeQuality") not in COARSE_QUALITIES


def _to_point(candidate: dict[str, Any]) -> GeoPoint:
    street = candidate.get("street") or None
    city = candidate.get("adminArea5") or None
    state = candidate.get("adminArea3") or None
    zipcode = candidate.get("postalCode") or None
    country = candidate.get("adminArea1") or None
    region = " ".join(part for part in (state, zipcode) if part)
    formatted = ", ".join(part for part in (street, city, region, country) if part)
    return GeoPoint(
        latitude=float(candidate["latLng"]["lat"]),
        longitude=float(candidate["latLng"]["lng"]),
        formatted_address=formatted or None,
        street=street,
        city=city,
        state=state,
        zipcode=zipcode,
        country=country,
    )
