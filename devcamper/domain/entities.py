"""
Domain entities.

Records are open key-value documents identified by a store-assigned id.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ResourceRecord:
    """A stored document: server-assigned identity plus its fields."""

    id: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the wire shape ``{"id": ..., **fields}``."""
        return {"id": self.id, **self.fields}

    def without(self, *names: str) -> "ResourceRecord":
        """Return a copy with the given fields removed."""
        return ResourceRecord(
            id=self.id,
            fields={k: v for k, v in self.fields.items() if k not in names},
        )


@dataclass(frozen=True)
class GeoPoint:
    """A geocoded coordinate pair with optional address components."""

    latitude: float
    longitude: float
    formatted_address: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None

    def to_geojson(self) -> dict[str, Any]:
        """Return a GeoJSON Point carrying the address components."""
        return {
            "type": "Point",
            "coordinates": [self.longitude, self.latitude],
            "formattedAddress": self.formatted_address,
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zipcode": self.zipcode,
            "country": self.country,
        }
