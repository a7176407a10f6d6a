"""
Data Transfer Objects for the bootcamp use cases.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RadiusSearchQuery:
    """Input DTO for a radius search.

    Attributes:
        zipcode: Postal code at the centre of the search.
        distance: Radius in miles. Other units must be converted first.
    """

    zipcode: str
    distance: float
