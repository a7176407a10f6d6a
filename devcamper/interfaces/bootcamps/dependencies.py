"""
Dependency injection for the bootcamp routes.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Tests override ``get_bootcamp_store`` and ``get_geocoder``.
"""

from fastapi import Depends
from pymongo.database import Database

from devcamper.application.bootcamps.locate_address import AddressLocator
from devcamper.application.bootcamps.search_within_radius import (
    SearchWithinRadiusUseCase,
)
from devcamper.application.resources.create_resource import CreateResourceUseCase
from devcamper.application.resources.delete_resource import DeleteResourceUseCase
from devcamper.application.resources.get_resource import GetResourceUseCase
from devcamper.application.resources.list_resources import ListResourcesUseCase
from devcamper.application.resources.update_resource import UpdateResourceUseCase
from devcamper.core.config import settings
from devcamper.domain.ports import DocumentStore, Geocoder
from devcamper.infrastructure.geocoding.mapquest import MapQuestGeocoder
from devcamper.infrastructure.mongo.stores import BOOTCAMP_RESOURCE, bootcamp_store
from devcamper.interfaces.dependencies import get_database

SUPPORTED_GEOCODERS = frozenset({"mapquest"})


def get_bootcamp_store(database: Database = Depends(get_database)) -> DocumentStore:
    """Build the bootcamp document store."""
    return bootcamp_store(database)


def get_geocoder() -> Geocoder:
    """Build the configured geocoder."""
    if settings.geocoder_provider not in SUPPORTED_GEOCODERS:
        raise ValueError(f"Unsupported geocoder provider: {settings.geocoder_provider}")
    return MapQuestGeocoder(
        api_key=settings.geocoder_api_key,
        base_url=settings.geocoder_base_url,
        timeout=settings.geocoder_timeout_seconds,
    )


def get_list_bootcamps_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
) -> ListResourcesUseCase:
    """Build ListResourcesUseCase over bootcamps."""
    return ListResourcesUseCase(store=store, resource=BOOTCAMP_RESOURCE)


def get_get_bootcamp_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
) -> GetResourceUseCase:
    """Build GetResourceUseCase over bootcamps."""
    return GetResourceUseCase(store=store, resource=BOOTCAMP_RESOURCE)


def get_create_bootcamp_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
    geocoder: Geocoder = Depends(get_geocoder),
) -> CreateResourceUseCase:
    """Build CreateResourceUseCase over bootcamps.

    When geocoding on create is enabled, the address is resolved into a
    location before the insert.
    """
    return CreateResourceUseCase(
        store=store,
        resource=BOOTCAMP_RESOURCE,
        enrich=AddressLocator(geocoder) if settings.geocode_on_create else None,
    )


def get_update_bootcamp_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
) -> UpdateResourceUseCase:
    """Build UpdateResourceUseCase over bootcamps."""
    return UpdateResourceUseCase(store=store, resource=BOOTCAMP_RESOURCE)


def get_delete_bootcamp_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
) -> DeleteResourceUseCase:
    """Build DeleteResourceUseCase over bootcamps."""
    return DeleteResourceUseCase(store=store, resource=BOOTCAMP_RESOURCE)


def get_search_within_radius_use_case(
    store: DocumentStore = Depends(get_bootcamp_store),
    geocoder: Geocoder = Depends(get_geocoder),
) -> SearchWithinRadiusUseCase:
    """Build SearchWithinRadiusUseCase with its infrastructure dependencies."""
    return SearchWithinRadiusUseCase(store=store, geocoder=geocoder)
