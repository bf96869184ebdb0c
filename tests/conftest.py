"""
conftest.py - shared pytest fixtures for the search request tests
"""

import pytest
from unittest.mock import MagicMock

from model_search.searching import Searchable
from model_search.target import Target


class MockSearchEngineClient:
    """Spy client counting search and scroll calls."""

    def __init__(self, search_result=None, scroll_result=None):
        self.search = MagicMock(return_value=search_result or {"hits": {"total": 0, "hits": []}})
        self.scroll = MagicMock(return_value=scroll_result or {"_scroll_id": "next", "hits": {"hits": []}})

    @property
    def call_count(self):
        return self.search.call_count + self.scroll.call_count


SAMPLE_SEARCH_RESPONSE = {
    "took": 3,
    "timed_out": False,
    "_shards": {"total": 1, "successful": 1, "failed": 0},
    "_scroll_id": "cXVlcnlUaGVuRmV0Y2g7NTs2ODA6RXhhbXBsZQ==",
    "hits": {
        "total": {"value": 2, "relation": "eq"},
        "max_score": 1.5,
        "hits": [
            {"_index": "foo", "_id": "1", "_score": 1.5, "_source": {"title": "Foo"}},
            {"_index": "foo", "_id": "2", "_score": 0.7, "_source": {"title": "Foo bar"}},
        ],
    },
    "aggregations": {"titles": {"buckets": []}},
}


@pytest.fixture
def target():
    """Fixture providing the foo/bar target descriptor."""
    return Target("foo", "bar")


@pytest.fixture
def mock_client():
    """Fixture providing a spy client returning SAMPLE_SEARCH_RESPONSE."""
    return MockSearchEngineClient(search_result=SAMPLE_SEARCH_RESPONSE)


@pytest.fixture
def dummy_model(mock_client):
    """Fixture providing a searchable model bound to the spy client."""

    class DummySearchingModel(Searchable):
        index_name = "foo"
        document_type = "bar"
        search_client = mock_client

    return DummySearchingModel


@pytest.fixture
def sample_search_response():
    """Fixture providing a complete search response with two hits."""
    return SAMPLE_SEARCH_RESPONSE
