"""
Tests for the HTTP search engine client (no network; the session is mocked).
"""

import json

import pytest
import requests
from unittest.mock import MagicMock

from model_search import client as client_module
from model_search.client import SearchEngineClient, get_search_client


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    session.post.return_value.json.return_value = {"hits": {"hits": []}}
    return session


@pytest.fixture
def engine(session):
    return SearchEngineClient(url="http://search:9200/", api_key=None, timeout=5, session=session)


def test_free_text_search(engine, session):
    result = engine.search({"index": "foo", "type": "bar", "q": "hello", "size": 10})

    session.post.assert_called_once_with(
        "http://search:9200/foo/bar/_search",
        params={"q": "hello", "size": 10},
        timeout=5,
        json=None,
    )
    assert result == {"hits": {"hits": []}}


def test_structured_body_search(engine, session):
    engine.search({"index": "foo", "type": "bar", "body": {"query": {"match_all": {}}}})

    session.post.assert_called_once_with(
        "http://search:9200/foo/bar/_search",
        params={},
        timeout=5,
        json={"query": {"match_all": {}}},
    )


def test_nested_options_are_merged_into_body(engine, session):
    engine.search({
        "index": "foo",
        "type": "bar",
        "body": {"query": {"match": {"title": "foo"}}},
        "highlight": {"fields": {"title": {}}},
        "size": 50,
    })

    _, kwargs = session.post.call_args
    assert kwargs["params"] == {"size": 50}
    assert kwargs["json"] == {
        "query": {"match": {"title": "foo"}},
        "highlight": {"fields": {"title": {}}},
    }


def test_sort_clauses_are_merged_into_body(engine, session):
    engine.search({
        "index": "foo",
        "type": "bar",
        "q": "hello",
        "sort": [{"date": {"order": "desc"}}, "_score"],
    })

    _, kwargs = session.post.call_args
    assert kwargs["params"] == {"q": "hello"}
    assert kwargs["json"] == {"sort": [{"date": {"order": "desc"}}, "_score"]}


def test_plain_list_options_stay_in_query_string(engine, session):
    engine.search({"index": "foo", "q": "x", "sort": ["date:desc", "_score"]})

    _, kwargs = session.post.call_args
    assert kwargs["params"] == {"q": "x", "sort": "date:desc,_score"}
    assert kwargs["json"] is None


def test_nested_options_are_merged_into_raw_json_body(engine, session):
    engine.search({
        "index": "foo",
        "type": "bar",
        "body": '{"query":{"match_all":{}}}',
        "highlight": {"fields": {"title": {}}},
        "size": 5,
    })

    session.post.assert_called_once_with(
        "http://search:9200/foo/bar/_search",
        params={"size": 5},
        timeout=5,
        json={"query": {"match_all": {}}, "highlight": {"fields": {"title": {}}}},
    )


def test_invalid_raw_json_with_nested_options_raises(engine, session):
    with pytest.raises(json.JSONDecodeError):
        engine.search({"index": "foo", "body": "{not json", "aggs": {"t": {}}})
    session.post.assert_not_called()


def test_raw_json_body_is_sent_verbatim(engine, session):
    raw = '{"query":{"match_all":{}}}'
    engine.search({"index": "foo", "type": "bar", "body": raw})

    session.post.assert_called_once_with(
        "http://search:9200/foo/bar/_search",
        params={},
        timeout=5,
        data=raw.encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def test_search_without_type(engine, session):
    engine.search({"index": "foo", "type": None, "q": "x"})
    assert session.post.call_args[0][0] == "http://search:9200/foo/_search"


def test_params_are_encoded(engine, session):
    engine.search({"index": "foo", "q": "x", "explain": True, "_source": ["a", "b"], "routing": None})
    assert session.post.call_args[1]["params"] == {"q": "x", "explain": "true", "_source": "a,b"}


def test_scroll(engine, session):
    engine.scroll({"index": "foo", "type": "bar", "scroll_id": "abc", "scroll": "5m"})

    session.post.assert_called_once_with(
        "http://search:9200/_search/scroll",
        params={},
        timeout=5,
        json={"scroll_id": "abc", "scroll": "5m"},
    )


def test_http_errors_propagate(engine, session):
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("400 Client Error")
    with pytest.raises(requests.HTTPError):
        engine.search({"index": "foo", "q": "x"})


def test_transport_errors_propagate(engine, session):
    session.post.side_effect = requests.Timeout("timed out")
    with pytest.raises(requests.Timeout):
        engine.scroll({"scroll_id": "abc"})
    assert session.post.call_count == 1


def test_api_key_header(session):
    SearchEngineClient(url="http://search:9200", api_key="secret", session=session)
    assert session.headers["Authorization"] == "ApiKey secret"


def test_get_search_client_is_cached(monkeypatch):
    monkeypatch.setattr(client_module, "_search_client", None)
    first = get_search_client()
    assert get_search_client() is first
    assert isinstance(first, SearchEngineClient)
