"""
Application configuration.

Loads settings from environment variables and .env file.
Every tunable of the application lives on Settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for geocoding and registration endpoints.
        mongo_uri: MongoDB connection string.
        mongo_db: Database holding the bootcamps and users collections.
        mongo_timeout_ms: Server selection timeout for the MongoDB client.
        geocoder_provider: Name of the geocoding provider.
        geocoder_api_key: API key for the geocoding provider.
        geocoder_base_url: Base URL of the geocoding endpoint.
        geocoder_timeout_seconds: Timeout for a single geocoding request.
        geocode_on_create: Resolve a bootcamp address into a location on create.
        page_size_default: Page size used when a list request sets no limit.
        page_size_max: Largest page size a client may request.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "DevCamper"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "100/minute"
    rate_limit_heavy: str = "10/minute"

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "devcamper"
    mongo_timeout_ms: int = 5000

    geocoder_provider: str = "mapquest"
    geocoder_api_key: Optional[str] = None
    geocoder_base_url: str = "https://www.mapquestapi.com/geocoding/v1/address"
    geocoder_timeout_seconds: float = 5.0
    geocode_on_create: bool = True

    page_size_default: int = 25
    page_size_max: int = 100


settings = Settings()
