"""
Tests for the application layer (use cases).

Ports are replaced with mocks; no database or network access.
"""

from unittest.mock import MagicMock

import pytest

from devcamper.application.auth.dtos import RegisterUserCommand
from devcamper.application.auth.register_user import RegisterUserUseCase
from devcamper.application.bootcamps.dtos import RadiusSearchQuery
from devcamper.application.bootcamps.locate_address import AddressLocator
from devcamper.application.bootcamps.search_within_radius import (
    SearchWithinRadiusUseCase,
)
from devcamper.application.resources.create_resource import CreateResourceUseCase
from devcamper.application.resources.delete_resource import DeleteResourceUseCase
from devcamper.application.resources.dtos import (
    CreateResourceCommand,
    DeleteResourceCommand,
    GetResourceQuery,
    ListQuery,
    PageLink,
    UpdateResourceCommand,
)
from devcamper.application.resources.get_resource import GetResourceUseCase
from devcamper.application.resources.list_resources import ListResourcesUseCase
from devcamper.application.resources.update_resource import UpdateResourceUseCase
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.errors import (
    FieldValidationError,
    ResourceNotFoundError,
    UpstreamLookupError,
)
from devcamper.domain.ports import DocumentStore, Geocoder, PasswordHasher
from tests.conftest import BOSTON

MISSING_ID = "5d713995b721c3bb38c1f5d0"


def _records(count: int) -> list[ResourceRecord]:
    return [ResourceRecord(id=str(i), fields={"name": f"Camp {i}"}) for i in range(count)]


@pytest.fixture
def store() -> MagicMock:
    return MagicMock(spec=DocumentStore)


class TestListResources:
    """Tests for ListResourcesUseCase."""

    def test_empty_store(self, store: MagicMock) -> None:
        store.find.return_value = []
        result = ListResourcesUseCase(store, "Bootcamp").execute(ListQuery())
        assert result.records == []
        assert result.count == 0
        assert result.next_page is None
        assert result.prev_page is None

    def test_fetches_one_extra_row_for_next_page(self, store: MagicMock) -> None:
        store.find.return_value = _records(3)
        query = ListQuery(filter={"housing": "true"}, page=1, limit=2)

        result = ListResourcesUseCase(store, "Bootcamp").execute(query)

        store.find.assert_called_once_with(
            {"housing": "true"},
            projection=None,
            sort=(("createdAt", -1),),
            skip=0,
            limit=3,
        )
        assert result.count == 2
        assert result.next_page == PageLink(page=2, limit=2)
        assert result.prev_page is None

    def test_last_page_links_back(self, store: MagicMock) -> None:
        store.find.return_value = _records(1)
        result = ListResourcesUseCase(store, "Bootcamp").execute(ListQuery(page=3, limit=2))
        assert store.find.call_args.kwargs["skip"] == 4
        assert result.next_page is None
        assert result.prev_page == PageLink(page=2, limit=2)


class TestSingleRecordUseCases:
    """Tests for get, update and delete when the record is absent."""

    def test_get_missing_raises_not_found(self, store: MagicMock) -> None:
        store.find_by_id.return_value = None
        with pytest.raises(ResourceNotFoundError) as excinfo:
            GetResourceUseCase(store, "Bootcamp").execute(GetResourceQuery(MISSING_ID))
        assert MISSING_ID in excinfo.value.message

    def test_update_missing_raises_not_found(self, store: MagicMock) -> None:
        store.find_by_id_and_update.return_value = None
        with pytest.raises(ResourceNotFoundError):
            UpdateResourceUseCase(store, "Bootcamp").execute(
                UpdateResourceCommand(MISSING_ID, {"housing": True})
            )

    def test_delete_missing_raises_not_found(self, store: MagicMock) -> None:
        store.find_by_id_and_delete.return_value = None
        with pytest.raises(ResourceNotFoundError):
            DeleteResourceUseCase(store, "Bootcamp").execute(DeleteResourceCommand(MISSING_ID))

    def test_update_returns_post_update_record(self, store: MagicMock) -> None:
        updated = ResourceRecord(id="1", fields={"name": "Camp", "housing": True})
        store.find_by_id_and_update.return_value = updated
        result = UpdateResourceUseCase(store, "Bootcamp").execute(
            UpdateResourceCommand("1", {"housing": True})
        )
        assert result is updated
        store.find_by_id_and_update.assert_called_once_with("1", {"housing": True})


class TestCreateResource:
    """Tests for CreateResourceUseCase."""

    def test_passes_fields_to_store(self, store: MagicMock) -> None:
        store.create.return_value = ResourceRecord(id="1", fields={"name": "Camp"})
        record = CreateResourceUseCase(store, "Bootcamp").execute(
            CreateResourceCommand({"name": "Camp"})
        )
        store.create.assert_called_once_with({"name": "Camp"})
        assert record.id == "1"

    def test_applies_enricher_before_store(self, store: MagicMock) -> None:
        store.create.return_value = ResourceRecord(id="1", fields={})
        use_case = CreateResourceUseCase(
            store, "Bootcamp", enrich=lambda fields: {**fields, "slug": "camp"}
        )
        use_case.execute(CreateResourceCommand({"name": "Camp"}))
        store.create.assert_called_once_with({"name": "Camp", "slug": "camp"})
        store.validate.assert_called_once_with({"name": "Camp"})

    def test_invalid_fields_never_reach_enricher(self, store: MagicMock) -> None:
        store.validate.side_effect = FieldValidationError({"name": "Field required"})
        enrich = MagicMock()

        with pytest.raises(FieldValidationError):
            CreateResourceUseCase(store, "Bootcamp", enrich=enrich).execute(
                CreateResourceCommand({"address": "Boston MA"})
            )

        enrich.assert_not_called()
        store.create.assert_not_called()


class TestSearchWithinRadius:
    """Tests for SearchWithinRadiusUseCase."""

    def test_builds_center_sphere_query(self, store: MagicMock) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.geocode.return_value = [BOSTON]
        store.find.return_value = _records(2)

        records = SearchWithinRadiusUseCase(store, geocoder).execute(
            RadiusSearchQuery(zipcode="02134", distance=10)
        )

        geocoder.geocode.assert_called_once_with("02134")
        (query,), _ = store.find.call_args
        center, radius = query["location"]["$geoWithin"]["$centerSphere"]
        assert center == [BOSTON.longitude, BOSTON.latitude]
        assert radius == pytest.approx(10 / 3963)
        assert radius == pytest.approx(0.002523, abs=1e-6)
        assert len(records) == 2

    def test_unresolved_postal_code(self, store: MagicMock) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.geocode.return_value = []

        with pytest.raises(UpstreamLookupError) as excinfo:
            SearchWithinRadiusUseCase(store, geocoder).execute(
                RadiusSearchQuery(zipcode="99999", distance=10)
            )

        assert excinfo.value.query == "99999"
        store.find.assert_not_called()


class TestAddressLocator:
    """Tests for the address geocoding enricher."""

    def test_adds_geojson_location(self) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.geocode.return_value = [BOSTON]

        fields = AddressLocator(geocoder)({"name": "Camp", "address": "Boston MA"})

        assert fields["name"] == "Camp"
        assert fields["location"]["coordinates"] == [BOSTON.longitude, BOSTON.latitude]
        geocoder.geocode.assert_called_once_with("Boston MA")

    def test_missing_address_left_to_validation(self) -> None:
        geocoder = MagicMock(spec=Geocoder)
        fields = {"name": "Camp"}
        assert AddressLocator(geocoder)(fields) is fields
        geocoder.geocode.assert_not_called()

    def test_unresolved_address(self) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.geocode.return_value = []
        with pytest.raises(UpstreamLookupError):
            AddressLocator(geocoder)({"address": "nowhere"})


class TestRegisterUser:
    """Tests for RegisterUserUseCase."""

    def test_hashes_password_and_hides_it(self, store: MagicMock) -> None:
        hasher = MagicMock(spec=PasswordHasher)
        hasher.hash.return_value = "hashed"
        store.create.return_value = ResourceRecord(
            id="u1",
            fields={"name": "John", "email": "john@gmail.com", "role": "user", "password": "hashed"},
        )

        user = RegisterUserUseCase(store, hasher).execute(
            RegisterUserCommand(name="John", email="john@gmail.com", password="123456")
        )

        hasher.hash.assert_called_once_with("123456")
        store.create.assert_called_once_with(
            {"name": "John", "email": "john@gmail.com", "password": "hashed"}
        )
        assert "password" not in user.fields
        assert user.id == "u1"

    def test_passes_requested_role(self, store: MagicMock) -> None:
        hasher = MagicMock(spec=PasswordHasher)
        hasher.hash.return_value = "hashed"
        store.create.return_value = ResourceRecord(id="u1", fields={})

        RegisterUserUseCase(store, hasher).execute(
            RegisterUserCommand(name="Jane", email="jane@gmail.com", password="123456", role="publisher")
        )

        assert store.create.call_args.args[0]["role"] == "publisher"

    def test_command_repr_hides_password(self) -> None:
        command = RegisterUserCommand(name="John", email="john@gmail.com", password="s3cret!")
        assert "s3cret!" not in repr(command)
