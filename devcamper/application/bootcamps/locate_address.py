"""
Field enricher: resolve a bootcamp address into a GeoJSON location.

Used by the bootcamp create use case. The geocoder's best match is stored
under ``location`` so radius searches can find the bootcamp.
"""

import logging
from typing import Any, Mapping

from devcamper.domain.errors import UpstreamLookupError
from devcamper.domain.ports import Geocoder

logger = logging.getLogger(__name__)


class AddressLocator:
    """Callable that adds ``location`` to fields carrying an ``address``."""

    def __init__(self, geocoder: Geocoder) -> None:
        self._geocoder = geocoder

    def __call__(self, fields: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return ``fields`` with a geocoded ``location`` added.

        Fields without a usable address are returned unchanged so the
        store can report the missing address as a validation error.

        Raises:
            UpstreamLookupError: If the address cannot be resolved.
        """
        address = fields.get("address")
        if not isinstance(address, str) or not address.strip():
            return fields

        points = self._geocoder.geocode(address)
        if not points:
            raise UpstreamLookupError(address)

        best = points[0]
        logger.debug("Located address at lat=%f, lng=%f", best.latitude, best.longitude)
        return {**fields, "location": best.to_geojson()}
