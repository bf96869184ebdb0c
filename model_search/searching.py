"""
Model-facing search and scroll entry points.

Models subclass Searchable and set index_name/document_type (and optionally
search_client); search() and scroll() then return lazy Response objects.
"""

from typing import Any, Optional
from collections.abc import Mapping

from model_search.client import get_search_client
from model_search.response import Response
from model_search.search_request import SearchRequest, ScrollRequest
from model_search.target import Target


class Searchable:
    """
    Mixin giving a model class search() and scroll().

    Example:
        >>> class Article(Searchable):
        ...     index_name = "articles"
        ...     document_type = "article"
        >>> Article.search("title:foo", default_operator="AND")
    """

    index_name: Optional[str] = None
    document_type: Optional[str] = None
    # None means the shared client from get_search_client()
    search_client = None

    @classmethod
    def target(cls) -> Target:
        return Target(cls.index_name, cls.document_type)

    @classmethod
    def client(cls):
        if cls.search_client is None:
            return get_search_client()
        return cls.search_client

    @classmethod
    def search(cls, query_or_payload: Any, options: Optional[Mapping] = None, **kwargs) -> Response:
        """
        Search within the model's index/type.

        Options can be passed as a mapping, as keyword arguments, or both
        (keywords win). The search is not executed until the response is read.

        Examples:
            >>> Article.search("foo")
            >>> Article.search('{"query": {"match_all": {}}}')
            >>> Article.search({"query": {"match": {"title": "foo"}}}, size=50)
        """
        search = SearchRequest(cls, query_or_payload, _combine(options, kwargs))
        return Response(cls, search)

    @classmethod
    def scroll(cls, scroll_id: str, options: Optional[Mapping] = None, **kwargs) -> Response:
        """
        Continue a scrolled search.

        Example:
            >>> Article.scroll("cXVlcnlUaGVuRmV0Y2g7NTs2ODA6RXhhbXBsZQ==", scroll="5m")
        """
        search = ScrollRequest(cls, scroll_id, _combine(options, kwargs))
        return Response(cls, search)


def _combine(options: Optional[Mapping], kwargs: dict) -> dict:
    combined = dict(options or {})
    combined.update(kwargs)
    return combined
