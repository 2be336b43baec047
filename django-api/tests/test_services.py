"""Unit tests for CatalogService.

These test error handling and domain error mapping against the in-memory
store; no database is involved.
Run with: pytest tests/test_services.py -v
"""

import pytest

from catalog.domain.errors import EventNotFoundError, InvalidIdentifierError
from catalog.services import CatalogService
from catalog.stores.memory_store import MemoryCatalogStore


@pytest.fixture
def service(memory_catalog: MemoryCatalogStore) -> CatalogService:
    return CatalogService(memory_catalog)


class TestCatalogService:
    """Tests for CatalogService."""

    def test_get_event_invalid_id_raises_error(self, service: CatalogService):
        """get_event raises InvalidIdentifierError for a malformed id."""
        with pytest.raises(InvalidIdentifierError):
            service.get_event("abc")

    def test_get_event_not_found_raises_error(self, service: CatalogService):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            service.get_event("99")

    def test_get_event_returns_event(self, service: CatalogService):
        assert service.get_event("1").title == "Jazz Night"

    def test_list_ticket_types_invalid_id_raises_error(self, service: CatalogService):
        """list_ticket_types raises InvalidIdentifierError for a malformed id."""
        with pytest.raises(InvalidIdentifierError):
            service.list_ticket_types("-1")

    def test_list_ticket_types_event_not_found_raises_error(self, service: CatalogService):
        """list_ticket_types raises EventNotFoundError when the event doesn't exist."""
        with pytest.raises(EventNotFoundError):
            service.list_ticket_types(99)

    def test_list_ticket_types_for_event(self, service: CatalogService):
        names = [tt.name for tt in service.list_ticket_types(1)]
        assert names == ["General Admission", "Balcony", "VIP"]


class TestEventFiltering:
    """Tests for catalog listing filters."""

    def test_list_all_events_in_insertion_order(self, service: CatalogService):
        assert [e.id.value for e in service.list_events()] == [1, 2]

    def test_featured_and_trending(self, service: CatalogService):
        assert [e.title for e in service.list_featured_events()] == ["Jazz Night"]
        assert [e.title for e in service.list_trending_events()] == ["Lakers vs. Bulls"]

    def test_by_category_and_city(self, service: CatalogService):
        assert [e.id.value for e in service.list_events_by_category("2")] == [2]
        assert [e.id.value for e in service.list_events_by_city(1)] == [1]

    def test_unknown_category_yields_empty_list(self, service: CatalogService):
        assert service.list_events_by_category(42) == []

    def test_malformed_city_id(self, service: CatalogService):
        with pytest.raises(InvalidIdentifierError):
            service.list_events_by_city("chicago")

    def test_search_matches_venue(self, service: CatalogService):
        assert [e.title for e in service.list_events(query="united")] == ["Lakers vs. Bulls"]

    def test_search_combines_with_other_filters(self, service: CatalogService):
        assert service.list_events(query="jazz", city_id=2) == []

    def test_lookup_tables(self, service: CatalogService):
        assert [c.name for c in service.list_categories()] == ["Concerts", "Sports"]
        assert [c.name for c in service.list_cities()] == ["New York", "Chicago"]

    def test_seeded_store_matches_sample_catalog(self):
        service = CatalogService(MemoryCatalogStore.seeded())
        assert len(service.list_events()) == 11
        assert len(service.list_ticket_types(11)) == 3
        assert len(service.list_categories()) == 4
        assert len(service.list_cities()) == 6
