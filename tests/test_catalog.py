"""Tests for the destination catalog."""
import pytest
from pydantic import ValidationError

from wanderlist.config import DEFAULT_DESTINATIONS
from wanderlist.models.destination import Destination, DestinationCatalog


@pytest.fixture
def catalog():
    return DestinationCatalog.from_mapping(DEFAULT_DESTINATIONS)


class TestDestinationCatalog:
    """Test catalog construction and search."""
    
    def test_keeps_declared_order(self, catalog):
        """Catalog iterates in declaration order."""
        assert [d.name for d in catalog] == list(DEFAULT_DESTINATIONS)
        assert len(catalog) == 6
    
    def test_search_single_match(self, catalog):
        """Searching 'paris' finds only Paris."""
        assert catalog.search("paris") == [Destination(name="Paris", link="/paris")]
    
    def test_search_is_case_insensitive(self, catalog):
        """Upper-case keys match lower-case names and vice versa."""
        assert [d.link for d in catalog.search("ROME")] == ["/rome"]
    
    def test_search_substring_keeps_order(self, catalog):
        """Substring matches come back in catalog order."""
        results = catalog.search("island")
        assert [d.name for d in results] == ["Bali Island", "Santorini Island"]
    
    def test_empty_key_matches_everything(self, catalog):
        """An empty key returns every destination in order."""
        assert catalog.search("") == list(catalog)
    
    def test_no_match(self, catalog):
        """An unknown key returns nothing."""
        assert catalog.search("zzz") == []
    
    def test_destinations_are_immutable(self, catalog):
        """Entries cannot be modified after construction."""
        paris = catalog.search("paris")[0]
        with pytest.raises(ValidationError):
            paris.link = "/elsewhere"
