"""
Use case: Find bootcamps within a radius of a postal code.

Input: RadiusSearchQuery (zipcode, distance in miles)
Output: list[ResourceRecord]
Side effects: One geocoder call, then one store query.
Failure cases: UpstreamLookupError when the postal code does not resolve,
    GeocodingServiceError when the geocoder is unavailable.
"""

import logging

from devcamper.application.bootcamps.dtos import RadiusSearchQuery
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.errors import UpstreamLookupError
from devcamper.domain.geo import angular_radius
from devcamper.domain.ports import DocumentStore, Geocoder

logger = logging.getLogger(__name__)


class SearchWithinRadiusUseCase:
    """Orchestrates a radius search.

    Resolves the postal code to coordinates, converts the radius to
    radians and delegates the spherical-cap query to the store.
    """

    def __init__(self, store: DocumentStore, geocoder: Geocoder) -> None:
        self._store = store
        self._geocoder = geocoder

    def execute(self, query: RadiusSearchQuery) -> list[ResourceRecord]:
        """Run the radius search use case.

        Raises:
            UpstreamLookupError: If the postal code cannot be geocoded.
        """
        points = self._geocoder.geocode(query.zipcode)
        if not points:
            raise UpstreamLookupError(query.zipcode)

        origin = points[0]
        radius = angular_radius(query.distance)
        logger.info(
            "Searching bootcamps within %s miles of %s (lat=%f, lng=%f)",
            query.distance,
            query.zipcode,
            origin.latitude,
            origin.longitude,
        )

        return self._store.find(
            {
                "location": {
                    "$geoWithin": {
                        "$centerSphere": [[origin.longitude, origin.latitude], radius]
                    }
                }
            }
        )
