"""
Geo math for radius search.

Distances are linear miles; the store expects a spherical-cap radius in
radians.
"""

EARTH_RADIUS_MILES = 3963


def angular_radius(distance_miles: float) -> float:
    """Convert a linear radius in miles into radians on the Earth's surface."""
    if distance_miles < 0:
        raise ValueError("distance must be non-negative")
    return distance_miles / EARTH_RADIUS_MILES
