"""
Domain-specific errors.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses by the centralized error handlers.
No framework imports allowed.
"""


class DevCamperError(Exception):
    """Base error for all DevCamper domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(DevCamperError):
    """Raised when an identity does not resolve to a stored record."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} not found with id of {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class InvalidIdentifierError(DevCamperError):
    """Raised when an identity token is not a well-formed store identity."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"Invalid {resource} id: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class FieldValidationError(DevCamperError):
    """Raised when a document violates its schema on create or update.

    Attributes:
        fields: Mapping of offending field name to a readable reason.
    """

    def __init__(self, fields: dict[str, str]) -> None:
        reasons = ", ".join(f"{name}: {reason}" for name, reason in fields.items())
        super().__init__(f"Validation failed: {reasons}")
        self.fields = fields


class DuplicateKeyError(DevCamperError):
    """Raised when a write collides with a unique field of another record."""

    def __init__(self, fields: list[str]) -> None:
        names = ", ".join(fields) if fields else "unknown"
        super().__init__(f"Duplicate field value entered: {names}")
        self.fields = fields


class UpstreamLookupError(DevCamperError):
    """Raised when the geocoder returns no match for a location query."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Could not resolve location: {query}")
        self.query = query


class GeocodingServiceError(DevCamperError):
    """Raised when the geocoding service cannot be reached or fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Geocoding service failed: {reason}")
        self.reason = reason


class StoreUnavailableError(DevCamperError):
    """Raised when the document store cannot be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Document store unavailable: {reason}")
        self.reason = reason
